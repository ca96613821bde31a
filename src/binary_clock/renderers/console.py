"""Console renderers — moon emoji and ASCII bit layouts."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from binary_clock.converter import DigitStyle
from binary_clock.renderers.base import Renderer

if TYPE_CHECKING:
    from binary_clock.state import ClockState

_LABELS = {
    "hours": "Hours   : ",
    "minutes": "Minutes : ",
    "seconds": "Seconds : ",
}


class _ConsoleRenderer(Renderer):
    """Header, ``Time: HH:MM:SS``, a blank line, then one row per field."""

    _header: ClassVar[str] = ""
    _style: ClassVar[DigitStyle] = "binary"

    def format(self, state: ClockState) -> str:
        lines = [self._header, f"Time: {state.time_string()}", ""]
        style = self._style
        for field_name, tens, units in state.fields():
            lines.append(f"{_LABELS[field_name]}{tens.format(style)} {units.format(style)}")
        return "\n".join(lines) + "\n"


class EmojiRenderer(_ConsoleRenderer):
    """Bits as moon glyphs: 🌚 for off, 🌝 for on."""

    _renderer_type = "emoji"
    _renderer_description = "Moon emoji bits"
    _header = "🌝 Binary Clock 🌚"
    _style = "emoji"


class AsciiRenderer(_ConsoleRenderer):
    """Bits as literal ``0`` and ``1`` characters."""

    _renderer_type = "binary"
    _renderer_description = "ASCII 0/1 bits"
    _header = "Binary Clock (ASCII)"
    _style = "binary"
