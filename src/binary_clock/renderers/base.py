"""Renderer ABC — the single abstraction every display implements."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar

if TYPE_CHECKING:
    from binary_clock.state import ClockState


class Renderer(ABC):
    """Base class for every display.

    Subclasses implement :meth:`format`, a pure function from a
    :class:`~binary_clock.state.ClockState` to text.  :meth:`render` is what
    the registry calls on dispatch; by default it writes the formatted text
    to the registration context when that is a writable text stream, and to
    ``sys.stdout`` otherwise.

    Renderers must treat the state as read-only.

    Class Variables:
        _renderer_type: Display mode identifier (e.g. ``"emoji"``).
        _renderer_description: Human-readable description of the display.
    """

    _renderer_type: ClassVar[str] = "base"
    _renderer_description: ClassVar[str] = ""

    def __init__(self, *, name: str | None = None) -> None:
        self._name = name or self._renderer_type

    @property
    def name(self) -> str:
        """Identifier for this renderer instance."""
        return self._name

    @abstractmethod
    def format(self, state: ClockState) -> str:
        """Return the complete text for *state*, including the trailing newline."""
        ...

    def render(self, state: ClockState | None, context: Any = None) -> None:
        """Write the formatted *state* to *context* (or stdout)."""
        if state is None:
            return
        stream = context if hasattr(context, "write") else sys.stdout
        stream.write(self.format(state))

    def export(self) -> dict[str, Any]:
        """Return a JSON-serializable description of this renderer."""
        return {
            "name": self.name,
            "type": self._renderer_type,
            "description": self._renderer_description,
        }
