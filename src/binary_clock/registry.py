"""DisplayRegistry — the set of displays that receive each clock state."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from binary_clock.renderers.base import Renderer
from binary_clock.renderers.custom import CallableRenderer
from binary_clock.result import ErrorCode
from binary_clock.state import ClockStateBuilder

if TYPE_CHECKING:
    from binary_clock.state import ClockState

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 16
REGISTRATION_FAILED = -1


@dataclass(frozen=True)
class DisplayRegistration:
    """A renderer and the caller-owned context it is dispatched with."""

    id: int
    renderer: Renderer
    context: Any = None


class DisplayRegistry:
    """Holds a bounded, ordered set of displays and dispatches states to them.

    Displays are called in **registration order**.  Ids increase strictly
    per registry and are never handed out twice, so a display registered
    after an unregister always runs after every display that was already
    present.

    Registration failures are reported by returning ``-1`` and unknown ids
    on :meth:`unregister` by :attr:`ErrorCode.NOT_FOUND`; neither raises.

    Every operation runs under one re-entrant lock, so a registry may be
    shared between threads and a renderer may unregister itself while
    being dispatched.

    Parameters:
        capacity: Maximum number of simultaneously active displays.
        builder:  Source of fresh states for :meth:`update_all`.
    """

    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        builder: ClockStateBuilder | None = None,
    ) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self._capacity = capacity
        self._builder = builder or ClockStateBuilder()
        self._entries: dict[int, DisplayRegistration] = {}
        self._next_id = 0
        self._lock = threading.RLock()

    # ── registration ─────────────────────────────────────────

    def register(self, renderer: Renderer | Any, context: Any = None) -> int:
        """Add *renderer* and return its id, or ``-1`` on failure.

        Plain ``(state, context)`` callables are wrapped in
        :class:`CallableRenderer`.  Fails when *renderer* is ``None`` or not
        renderable, or when the registry is full.
        """
        if renderer is None:
            return REGISTRATION_FAILED
        if not isinstance(renderer, Renderer):
            if not callable(renderer):
                return REGISTRATION_FAILED
            renderer = CallableRenderer(renderer)

        with self._lock:
            if len(self._entries) >= self._capacity:
                logger.debug("Registry full (%d), rejected %s", self._capacity, renderer.name)
                return REGISTRATION_FAILED

            registration_id = self._next_id
            self._next_id += 1
            self._entries[registration_id] = DisplayRegistration(
                id=registration_id, renderer=renderer, context=context
            )

        logger.debug("Registered display %s as %d", renderer.name, registration_id)
        return registration_id

    def unregister(self, registration_id: int) -> ErrorCode:
        """Remove a display.  Negative or unknown ids report ``NOT_FOUND``."""
        if registration_id < 0:
            return ErrorCode.NOT_FOUND

        with self._lock:
            entry = self._entries.pop(registration_id, None)

        if entry is None:
            return ErrorCode.NOT_FOUND
        logger.debug("Unregistered display %s (%d)", entry.renderer.name, registration_id)
        return ErrorCode.SUCCESS

    def clear(self) -> None:
        """Remove every display.  Ids are not reset."""
        with self._lock:
            self._entries.clear()

    # ── dispatch ─────────────────────────────────────────────

    def dispatch_all(self, state: ClockState | None) -> None:
        """Call every active display with *state*.  ``None`` is ignored."""
        if state is None:
            return

        with self._lock:
            for entry in list(self._entries.values()):
                # Skip displays removed by an earlier display in this pass.
                if entry.id in self._entries:
                    entry.renderer.render(state, entry.context)

    def update_all(self) -> ClockState:
        """Build the current state, dispatch it, and return it."""
        state = self._builder.get_current_state()
        self.dispatch_all(state)
        return state

    # ── introspection ────────────────────────────────────────

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def is_full(self) -> bool:
        with self._lock:
            return len(self._entries) >= self._capacity

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def ids(self) -> list[int]:
        """Active registration ids in dispatch order."""
        with self._lock:
            return list(self._entries)

    def get(self, registration_id: int) -> DisplayRegistration | None:
        with self._lock:
            return self._entries.get(registration_id)

    def export(self) -> dict[str, Any]:
        """Return a JSON-serializable snapshot of the active displays."""
        with self._lock:
            displays = [
                {"id": entry.id, **entry.renderer.export()} for entry in self._entries.values()
            ]
        return {
            "displays": displays,
            "display_count": len(displays),
            "capacity": self._capacity,
        }
