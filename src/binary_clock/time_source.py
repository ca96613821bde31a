"""TimeSource — reads the host's local wall clock into time components."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from binary_clock._internal.clock import Clock, SystemClock
from binary_clock.result import ErrorCode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TimeComponents:
    """A wall-clock time of day.

    Attributes:
        hours:   0-23.
        minutes: 0-59.
        seconds: 0-59.

    Instances are not validated on construction; call :meth:`is_valid`
    before use.
    """

    hours: int = 0
    minutes: int = 0
    seconds: int = 0

    def is_valid(self) -> bool:
        return 0 <= self.hours <= 23 and 0 <= self.minutes <= 59 and 0 <= self.seconds <= 59


@dataclass(frozen=True)
class TimeReading:
    """Immutable outcome of reading the host clock.

    Attributes:
        ok:         ``True`` when the clock was read successfully.
        components: The time read.  Always ``00:00:00`` on failure, so check
                    ``ok`` rather than the components to tell a failed read
                    from real midnight.
        error:      :attr:`ErrorCode.SUCCESS` or the reason for failure.
        detail:     Platform error message, if any.
    """

    ok: bool
    components: TimeComponents = field(default_factory=TimeComponents)
    error: ErrorCode = ErrorCode.SUCCESS
    detail: str = ""

    # ── Factory helpers ──────────────────────────────────────

    @staticmethod
    def success(components: TimeComponents) -> TimeReading:
        return TimeReading(ok=True, components=components)

    @staticmethod
    def failure(detail: str = "") -> TimeReading:
        return TimeReading(ok=False, error=ErrorCode.SYSTEM_TIME, detail=detail)


class TimeSource:
    """Reads the current local time of day from a :class:`Clock`.

    Parameters:
        clock: Injectable clock.  Defaults to :class:`SystemClock`.
    """

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock = clock or SystemClock()

    @property
    def clock(self) -> Clock:
        return self._clock

    def now(self) -> TimeReading:
        """Return the current time, or a failed reading if the clock is unreadable."""
        try:
            current = self._clock.now()
        except (OSError, OverflowError, ValueError) as e:
            logger.debug("Local time unavailable: %s", e)
            return TimeReading.failure(str(e))

        return TimeReading.success(
            TimeComponents(hours=current.hour, minutes=current.minute, seconds=current.second)
        )
