"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import UTC, datetime

import pytest

from binary_clock import ClockStateBuilder, DisplayRegistry, TimeComponents

FIXED_NOW = datetime(2024, 5, 17, 14, 30, 45, tzinfo=UTC)


@dataclass
class FakeClock:
    """Clock returning a manually controlled time."""

    current: datetime = FIXED_NOW
    calls: int = 0

    def now(self) -> datetime:
        self.calls += 1
        return self.current


@dataclass
class FailingClock:
    """Clock whose every read fails the way an unreadable host clock does."""

    error: Exception = field(default_factory=lambda: OSError("clock unavailable"))

    def now(self) -> datetime:
        raise self.error


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def failing_clock():
    return FailingClock()


@pytest.fixture
def builder(clock):
    return ClockStateBuilder(clock=clock)


@pytest.fixture
def registry(builder):
    return DisplayRegistry(builder=builder)


@pytest.fixture
def state_143045(builder):
    return builder.from_time(TimeComponents(14, 30, 45))


@pytest.fixture
def state_090503(builder):
    return builder.from_time(TimeComponents(9, 5, 3))
