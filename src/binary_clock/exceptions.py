"""Custom exceptions for the binary_clock command-line layer.

The conversion, state and registry layers never raise these; they report
failure through sentinel return values.  The CLI turns those sentinels into
exceptions so it can map them onto error messages and exit codes.
"""

from __future__ import annotations

from collections.abc import Iterable


class BinaryClockError(Exception):
    """Base exception for all binary clock errors."""


class DisplayModeError(BinaryClockError):
    """Raised when an unknown display mode is requested."""

    def __init__(self, mode: str, available: Iterable[str] = ()) -> None:
        self.mode = mode
        self.available = list(available)
        super().__init__(f"Unknown display mode '{mode}'")


class TimeUnavailableError(BinaryClockError):
    """Raised when the current time cannot be read."""

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        msg = "Failed to get current time"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)


class RegistrationError(BinaryClockError):
    """Raised when a renderer cannot be registered for display."""

    def __init__(self, renderer_name: str) -> None:
        self.renderer_name = renderer_name
        super().__init__(f"Failed to register display '{renderer_name}'")


class UsageError(BinaryClockError):
    """Raised when the command line cannot be parsed."""
