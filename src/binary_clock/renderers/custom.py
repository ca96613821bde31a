"""CallableRenderer — wrap any callable as a renderer without subclassing."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from binary_clock.renderers.base import Renderer

if TYPE_CHECKING:
    from binary_clock.state import ClockState

# Receives the state and the registration context; its return value is ignored.
RenderFn = Callable[["ClockState", Any], Any]


class CallableRenderer(Renderer):
    """Wraps a plain ``(state, context)`` callable as a renderer.

    Parameters:
        fn:        Called on every dispatch with the state and context.
        name:      Renderer name.  Defaults to the callable's ``__name__``.
        formatter: Optional pure ``(state) -> str`` used by :meth:`format`.
    """

    _renderer_type = "custom"
    _renderer_description = "Custom callable-based display"

    def __init__(
        self,
        fn: RenderFn,
        *,
        name: str | None = None,
        formatter: Callable[[ClockState], str] | None = None,
    ) -> None:
        super().__init__(name=name or getattr(fn, "__name__", None))
        self._fn = fn
        self._formatter = formatter

    def format(self, state: ClockState) -> str:
        if self._formatter is None:
            return ""
        return self._formatter(state)

    def render(self, state: ClockState | None, context: Any = None) -> None:
        if state is None:
            return
        self._fn(state, context)
