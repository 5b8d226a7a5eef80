"""Domain-level error types shared by the interpolation core and the host.

Errors carry a stable ``code`` next to the human readable message so the app
layer can log and surface them without inspecting exception classes.
"""
from __future__ import annotations


class GaugeError(Exception):
    """Base class for gauge errors (user-presentable)."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


class InvalidArgument(GaugeError, ValueError):
    """A precondition of a core operation was violated."""

    def __init__(self, message: str):
        super().__init__("INVALID_ARGUMENT", message)


__all__ = ["GaugeError", "InvalidArgument"]
