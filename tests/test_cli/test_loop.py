"""Tests for the refresh loop."""

import io
import logging

from binary_clock import ClockStateBuilder, DisplayRegistry
from binary_clock.cli.loop import CLEAR_SCREEN, RefreshLoop
from binary_clock.renderers import CompactRenderer


async def test_runs_max_ticks(registry, builder):
    calls = []
    registry.register(lambda s, c: calls.append(s))
    out = io.StringIO()

    ticks = await RefreshLoop(registry, builder=builder, interval=0, stream=out, max_ticks=3).run()

    assert ticks == 3
    assert len(calls) == 3
    assert out.getvalue().count(CLEAR_SCREEN) == 3


async def test_clear_screen_disabled(registry, builder):
    out = io.StringIO()
    registry.register(CompactRenderer(), out)

    await RefreshLoop(
        registry, builder=builder, interval=0, clear_screen=False, stream=out, max_ticks=2
    ).run()

    assert CLEAR_SCREEN not in out.getvalue()
    assert out.getvalue().count("14:30:45 [") == 2


async def test_stop_from_renderer(registry, builder):
    refresh = RefreshLoop(registry, builder=builder, interval=5, stream=io.StringIO())
    calls = []

    def stop_after_first(state, context):
        calls.append(state)
        refresh.stop()

    registry.register(stop_after_first)
    ticks = await refresh.run()

    assert ticks == 1
    assert refresh.stopped
    assert len(calls) == 1


async def test_stop_before_run(registry, builder):
    refresh = RefreshLoop(registry, builder=builder, stream=io.StringIO())
    refresh.stop()
    assert await refresh.run() == 0


async def test_failed_state_is_not_dispatched(failing_clock, caplog):
    builder = ClockStateBuilder(clock=failing_clock)
    registry = DisplayRegistry(builder=builder)
    calls = []
    registry.register(lambda s, c: calls.append(s))

    with caplog.at_level(logging.WARNING, logger="binary_clock.cli.loop"):
        ticks = await RefreshLoop(
            registry, builder=builder, interval=0, stream=io.StringIO(), max_ticks=2
        ).run()

    assert ticks == 2
    assert calls == []
    assert "Failed to get current time" in caplog.text


def test_tick_returns_state(registry, builder):
    out = io.StringIO()
    registry.register(CompactRenderer(), out)
    state = RefreshLoop(registry, builder=builder, stream=out).tick()
    assert state.ok
    assert out.getvalue() == CLEAR_SCREEN + "14:30:45 [001 0100 : 011 0000 : 100 0101]\n"
