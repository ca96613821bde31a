"""binary_clock — the time of day as binary-coded decimal.

Each field of the time is split into a tens and a units digit and each
digit is encoded as a short bit vector.  States are built by a
``ClockStateBuilder`` and handed to every display in a ``DisplayRegistry``.
"""

from binary_clock.converter import INVALID_DIGIT, BinaryDigit, to_binary, to_decimal
from binary_clock.exceptions import (
    BinaryClockError,
    DisplayModeError,
    RegistrationError,
    TimeUnavailableError,
)
from binary_clock.registry import DisplayRegistry
from binary_clock.result import ErrorCode
from binary_clock.state import ClockState, ClockStateBuilder
from binary_clock.time_source import TimeComponents, TimeReading, TimeSource

__version__ = "1.0.0"


def get_version() -> str:
    return __version__


__all__ = [
    "INVALID_DIGIT",
    "BinaryClockError",
    "BinaryDigit",
    "ClockState",
    "ClockStateBuilder",
    "DisplayModeError",
    "DisplayRegistry",
    "ErrorCode",
    "RegistrationError",
    "TimeComponents",
    "TimeReading",
    "TimeSource",
    "TimeUnavailableError",
    "__version__",
    "get_version",
    "to_binary",
    "to_decimal",
]
