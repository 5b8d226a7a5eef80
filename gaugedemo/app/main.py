# gaugedemo/app/main.py
from __future__ import annotations
import logging
from typing import Dict, Optional

# ---- Views (UI-only) ----
from .views.main_window import MainWindowView
from .views.gauge_view import GaugeView
from .views.input_panel_view import InputPanelView

# ---- ViewModels ----
from ..viewmodels.gauge_vm import GaugeVM

# ---- UseCases & tick source ----
from ..usecases.animation_driver import AnimationDriver, DriverHooks
from .frame_ticker import FrameTicker
from ..domain.entities import ColorStop
from ..domain.errors import GaugeError
from ..domain.settings import GaugeSettings
from ..utils import logging as logging_utils

LOG_LEVEL = logging_utils.configure_root()


class App:
    """Bootstrap: wire Views <-> ViewModel, animation driver, and frame ticker."""

    def __init__(self, settings: Optional[GaugeSettings] = None) -> None:
        self._log = logging.getLogger(__name__)
        self.settings = settings or GaugeSettings.from_env()

        self.win = MainWindowView(
            on_start=self._on_start,
            on_reset=self._on_reset,
            on_close=self._on_close,
        )

        # ---- ViewModel ----
        self.gauge_vm = GaugeVM(
            settings=self.settings,
            on_update_gauge=self._apply_gauge,
            on_status=self.win.set_status_message,
        )

        # ---- Subviews ----
        self.gauge = GaugeView(self.win.gauge_host, settings=self.settings)
        self.win.mount_gauge(self.gauge)

        self.inputs = InputPanelView(
            self.win.input_host,
            on_change=self.gauge_vm.set_field,
            on_start=self._on_start,
            on_reset=self._on_reset,
        )
        self.win.mount_input_panel(self.inputs)

        # ---- Frame clock + driver ----
        self.ticker = FrameTicker(
            self.win.after, self.win.after_cancel, self.settings.frame_interval_ms
        )
        self.driver = AnimationDriver(
            self.ticker,
            start_color=ColorStop.from_name(self.settings.start_color),
            end_color=ColorStop.from_name(self.settings.end_color),
            hooks=DriverHooks(
                on_sample=self.gauge_vm.apply_sample,
                on_completed=self.gauge_vm.apply_completed,
                on_reset=self.gauge_vm.apply_reset,
            ),
        )
        self.gauge_vm.bind_driver(self.driver)

        self._log_startup()
        self.win.set_status_message("Ready.")

    # ------------------------------------------------------------------
    # View callbacks
    # ------------------------------------------------------------------
    def _on_start(self) -> None:
        try:
            self.gauge_vm.cmd_start()
        except GaugeError as exc:
            self._toast_error(exc)

    def _on_reset(self) -> None:
        self.gauge_vm.cmd_reset()

    def _on_close(self) -> None:
        self._log.debug("Window closing; stopping animation")
        self.driver.reset()
        self.ticker.unsubscribe()

    def _apply_gauge(self, dto: Dict) -> None:
        self.gauge.apply(dto)

    def _log_startup(self) -> None:
        self._log.info("Effective log level: %s", logging_utils.level_name(LOG_LEVEL))
        self._log.debug("Settings: %s", self.settings.to_dict())

    def _toast_error(self, exc: GaugeError) -> None:
        self._log.warning("%s: %s", exc.code, exc.message)
        self.win.show_toast(exc.message)


def main() -> None:
    app = App()
    app.win.mainloop()


if __name__ == "__main__":
    main()
