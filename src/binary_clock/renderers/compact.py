"""CompactRenderer — one line per state, for logs."""

from __future__ import annotations

from typing import TYPE_CHECKING

from binary_clock.renderers.base import Renderer

if TYPE_CHECKING:
    from binary_clock.state import ClockState


class CompactRenderer(Renderer):
    """Format: ``HH:MM:SS [001 0010 : 011 0100 : 101 0110]``."""

    _renderer_type = "compact"
    _renderer_description = "Single-line time and bits"

    def format(self, state: ClockState) -> str:
        groups = " : ".join(
            f"{tens.format()} {units.format()}" for _, tens, units in state.fields()
        )
        return f"{state.time_string()} [{groups}]\n"
