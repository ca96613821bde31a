"""Built-in display renderers."""

from binary_clock.renderers.base import Renderer
from binary_clock.renderers.compact import CompactRenderer
from binary_clock.renderers.console import AsciiRenderer, EmojiRenderer
from binary_clock.renderers.custom import CallableRenderer
from binary_clock.renderers.json_output import ClockStateSchema, JsonRenderer
from binary_clock.renderers.raw import RawRenderer

__all__ = [
    "AsciiRenderer",
    "CallableRenderer",
    "ClockStateSchema",
    "CompactRenderer",
    "EmojiRenderer",
    "JsonRenderer",
    "RawRenderer",
    "Renderer",
]
