import pytest

from gaugedemo.domain.settings import GaugeSettings


def test_defaults_match_gauge_layout():
    settings = GaugeSettings()

    assert settings.default_duration_s == 1
    assert settings.default_progress == 100
    assert settings.max_progress == 100
    assert settings.radius == 92
    assert settings.arc_start_deg == 135
    assert settings.arc_sweep_deg == 270


def test_from_mapping_coerces_values():
    settings = GaugeSettings.from_mapping(
        {"frame_interval_ms": "33", "line_width": 12.0, "end_color": " blue "}
    )

    assert settings.frame_interval_ms == 33
    assert settings.line_width == 12
    assert settings.end_color == "blue"
    assert settings.start_color == "red"


def test_from_mapping_applies_on_top_of_base():
    base = GaugeSettings(frame_interval_ms=40)
    settings = GaugeSettings.from_mapping({"radius": 80}, base=base)

    assert settings.frame_interval_ms == 40
    assert settings.radius == 80


def test_unknown_keys_rejected():
    with pytest.raises(ValueError, match="Unsupported settings keys: bogus"):
        GaugeSettings.from_mapping({"bogus": 1})


def test_bad_values_rejected():
    with pytest.raises(ValueError):
        GaugeSettings.from_mapping({"frame_interval_ms": "fast"})
    with pytest.raises(ValueError):
        GaugeSettings.from_mapping({"frame_interval_ms": True})
    with pytest.raises(ValueError):
        GaugeSettings.from_mapping({"start_color": "not-a-color"})
    with pytest.raises(ValueError):
        GaugeSettings.from_mapping({"frame_interval_ms": 0})
    with pytest.raises(ValueError):
        GaugeSettings.from_mapping({"default_progress": 150})


def test_from_env_reads_prefixed_variables():
    settings = GaugeSettings.from_env(
        {"GAUGEDEMO_FRAME_INTERVAL_MS": "20", "GAUGEDEMO_START_COLOR": "orange", "OTHER": "x"}
    )

    assert settings.frame_interval_ms == 20
    assert settings.start_color == "orange"


def test_from_env_ignores_blank_values():
    assert GaugeSettings.from_env({"GAUGEDEMO_RADIUS": "  "}) == GaugeSettings()


def test_to_dict_round_trips_through_from_mapping():
    settings = GaugeSettings(radius=70)
    assert GaugeSettings.from_mapping(settings.to_dict()) == settings


def test_max_progress_cannot_exceed_ramp_scale():
    with pytest.raises(ValueError, match="max_progress"):
        GaugeSettings(max_progress=150)
    with pytest.raises(ValueError):
        GaugeSettings.from_mapping({"max_progress": "101"})
    with pytest.raises(ValueError):
        GaugeSettings(max_progress=0)
    assert GaugeSettings(max_progress=80, default_progress=50).max_progress == 80
