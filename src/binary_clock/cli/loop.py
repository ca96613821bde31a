# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Refresh loop that redraws every registered display about once a second.

Each tick:
1. Clear the console (unless disabled, e.g. for JSON output)
2. Build a fresh clock state
3. Dispatch it to every display in the registry
4. Wait for the next tick or a stop request
"""

from __future__ import annotations

import asyncio
import logging
import signal
import sys
from typing import TYPE_CHECKING, TextIO

from binary_clock.state import ClockStateBuilder

if TYPE_CHECKING:
    from binary_clock.registry import DisplayRegistry
    from binary_clock.state import ClockState

logger = logging.getLogger(__name__)

# Clear the screen and move the cursor to the top-left
CLEAR_SCREEN = "\033[2J\033[H"

_STOP_SIGNALS = (signal.SIGINT, signal.SIGTERM)


class RefreshLoop:
    """Drives a :class:`DisplayRegistry` on a fixed cadence.

    The loop owns no displays itself; callers register them on the registry
    before calling :meth:`run`.  A tick whose state could not be built is
    logged and skipped rather than dispatched.

    Parameters:
        registry:       Displays to update.
        builder:        Source of clock states.  Defaults to a
                        :class:`ClockStateBuilder` on the system clock.
        interval:       Seconds between ticks.
        clear_screen:   Emit :data:`CLEAR_SCREEN` before each tick.
        stream:         Where the clear sequence is written.  Defaults to
                        ``sys.stdout``.
        max_ticks:      Stop after this many ticks.  ``None`` runs until
                        :meth:`stop` is called or a stop signal arrives.
        handle_signals: Install ``SIGINT``/``SIGTERM`` handlers that stop
                        the loop.  Only valid from the main thread.

    Example:
        registry = DisplayRegistry()
        registry.register(EmojiRenderer())
        ticks = asyncio.run(RefreshLoop(registry, handle_signals=True).run())
    """

    def __init__(
        self,
        registry: DisplayRegistry,
        *,
        builder: ClockStateBuilder | None = None,
        interval: float = 1.0,
        clear_screen: bool = True,
        stream: TextIO | None = None,
        max_ticks: int | None = None,
        handle_signals: bool = False,
    ) -> None:
        self._registry = registry
        self._builder = builder or ClockStateBuilder()
        self._interval = interval
        self._clear_screen = clear_screen
        self._stream = stream
        self._max_ticks = max_ticks
        self._handle_signals = handle_signals
        self._stop: asyncio.Event | None = None
        self._stop_requested = False

    @property
    def stopped(self) -> bool:
        return self._stop_requested

    def stop(self) -> None:
        """Ask the loop to finish after the current tick."""
        self._stop_requested = True
        if self._stop is not None:
            self._stop.set()

    def tick(self) -> ClockState:
        """Run one refresh and return the state that was built."""
        stream = self._stream or sys.stdout
        if self._clear_screen:
            stream.write(CLEAR_SCREEN)
            stream.flush()

        state = self._builder.get_current_state()
        if state.ok:
            self._registry.dispatch_all(state)
        else:
            logger.warning("Failed to get current time, skipping update")
        return state

    async def run(self) -> int:
        """Tick until stopped and return the number of ticks run."""
        self._stop = asyncio.Event()
        if self._stop_requested:
            self._stop.set()

        loop = asyncio.get_running_loop()
        installed: list[signal.Signals] = []
        if self._handle_signals:
            installed = self._install_signal_handlers(loop)

        ticks = 0
        try:
            while not self._stop.is_set():
                self.tick()
                ticks += 1
                if self._max_ticks is not None and ticks >= self._max_ticks:
                    break
                try:
                    await asyncio.wait_for(self._stop.wait(), timeout=self._interval)
                except TimeoutError:
                    continue
        finally:
            for sig in installed:
                loop.remove_signal_handler(sig)

        logger.debug("Refresh loop finished after %d ticks", ticks)
        return ticks

    def _install_signal_handlers(self, loop: asyncio.AbstractEventLoop) -> list[signal.Signals]:
        installed: list[signal.Signals] = []
        for sig in _STOP_SIGNALS:
            try:
                loop.add_signal_handler(sig, self.stop)
            except NotImplementedError:
                # Windows event loops; Ctrl+C surfaces as KeyboardInterrupt instead.
                logger.debug("Signal handler for %s not supported", sig.name)
                continue
            installed.append(sig)
        return installed
