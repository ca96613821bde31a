"""ClockState and the builder that turns times of day into it."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from binary_clock._internal.clock import Clock, SystemClock
from binary_clock.converter import INVALID_DIGIT, BinaryDigit, to_binary
from binary_clock.result import ErrorCode
from binary_clock.time_source import TimeComponents, TimeSource

logger = logging.getLogger(__name__)

TENS_BITS = 3
UNITS_BITS = 4


@dataclass(frozen=True)
class ClockState:
    """Immutable binary-coded-decimal snapshot of a time of day.

    Each field is split into a tens digit (3 bits) and a units digit
    (4 bits).  ``timestamp`` is the epoch second at which the snapshot was
    built; ``0`` marks a failed construction, in which case every digit is
    :data:`~binary_clock.converter.INVALID_DIGIT`.
    """

    hours_tens: BinaryDigit = INVALID_DIGIT
    hours_units: BinaryDigit = INVALID_DIGIT
    minutes_tens: BinaryDigit = INVALID_DIGIT
    minutes_units: BinaryDigit = INVALID_DIGIT
    seconds_tens: BinaryDigit = INVALID_DIGIT
    seconds_units: BinaryDigit = INVALID_DIGIT
    timestamp: int = 0

    @staticmethod
    def failed() -> ClockState:
        return ClockState()

    @property
    def ok(self) -> bool:
        return self.timestamp != 0

    @property
    def hours(self) -> int:
        return self.hours_tens.decimal_value * 10 + self.hours_units.decimal_value

    @property
    def minutes(self) -> int:
        return self.minutes_tens.decimal_value * 10 + self.minutes_units.decimal_value

    @property
    def seconds(self) -> int:
        return self.seconds_tens.decimal_value * 10 + self.seconds_units.decimal_value

    def time_string(self) -> str:
        """The encoded time as ``HH:MM:SS``."""
        return f"{self.hours:02d}:{self.minutes:02d}:{self.seconds:02d}"

    def fields(self) -> Iterator[tuple[str, BinaryDigit, BinaryDigit]]:
        """Yield ``(name, tens, units)`` for hours, minutes and seconds."""
        yield "hours", self.hours_tens, self.hours_units
        yield "minutes", self.minutes_tens, self.minutes_units
        yield "seconds", self.seconds_tens, self.seconds_units


class ClockStateBuilder:
    """Builds :class:`ClockState` snapshots from times of day.

    Parameters:
        clock:       Clock used both to read the current time and to stamp
                     each snapshot.  Defaults to :class:`SystemClock`.
        time_source: Overrides the source of the current time.  Defaults to
                     a :class:`TimeSource` over *clock*.

    The snapshot timestamp always records when the snapshot was *built*.
    Passing historical components to :meth:`from_time` therefore yields a
    state whose timestamp does not match the encoded time.
    """

    def __init__(self, clock: Clock | None = None, time_source: TimeSource | None = None) -> None:
        self._clock = clock or SystemClock()
        self._time_source = time_source or TimeSource(self._clock)

    @property
    def time_source(self) -> TimeSource:
        return self._time_source

    @staticmethod
    def check(components: TimeComponents | None) -> ErrorCode:
        """Return ``SUCCESS`` when *components* can be encoded, else the reason."""
        if components is None:
            return ErrorCode.MISSING_INPUT
        if not components.is_valid():
            return ErrorCode.INVALID_TIME
        return ErrorCode.SUCCESS

    def from_time(self, components: TimeComponents | None) -> ClockState:
        """Encode *components*, or return :meth:`ClockState.failed` if invalid."""
        code = self.check(components)
        if code is not ErrorCode.SUCCESS:
            logger.debug("Rejected time components %r: %s", components, code.describe())
            return ClockState.failed()

        try:
            timestamp = int(self._clock.now().timestamp())
        except (OSError, OverflowError, ValueError) as e:
            logger.debug("Could not timestamp clock state: %s", e)
            return ClockState.failed()

        hours, minutes, seconds = components.hours, components.minutes, components.seconds
        return ClockState(
            hours_tens=to_binary(hours // 10, TENS_BITS),
            hours_units=to_binary(hours % 10, UNITS_BITS),
            minutes_tens=to_binary(minutes // 10, TENS_BITS),
            minutes_units=to_binary(minutes % 10, UNITS_BITS),
            seconds_tens=to_binary(seconds // 10, TENS_BITS),
            seconds_units=to_binary(seconds % 10, UNITS_BITS),
            timestamp=timestamp,
        )

    def get_current_state(self) -> ClockState:
        """Encode the current local time, or return the failed state."""
        reading = self._time_source.now()
        if not reading.ok:
            return ClockState.failed()
        return self.from_time(reading.components)
