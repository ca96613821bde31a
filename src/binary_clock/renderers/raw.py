"""RawRenderer — dumps every digit field of the state."""

from __future__ import annotations

from typing import TYPE_CHECKING

from binary_clock.renderers.base import Renderer

if TYPE_CHECKING:
    from binary_clock.converter import BinaryDigit
    from binary_clock.state import ClockState

# Label column matches the widest label, "Minutes Units:", with no padding.
_LABEL_WIDTH = 14


class RawRenderer(Renderer):
    """Per-digit ``bit_count``, ``decimal_value`` and bit array."""

    _renderer_type = "raw"
    _renderer_description = "Raw digit fields"

    def format(self, state: ClockState) -> str:
        lines = [
            "Binary Clock API Raw Data",
            "=========================",
            f"Timestamp: {state.timestamp}",
            "",
        ]
        for field_name, tens, units in state.fields():
            lines.append(self._line(f"{field_name.capitalize()} Tens:", tens))
            lines.append(self._line(f"{field_name.capitalize()} Units:", units))
        return "\n".join(lines) + "\n"

    @staticmethod
    def _line(label: str, digit: BinaryDigit) -> str:
        bits = ",".join(str(bit) for bit in digit.as_ints())
        return (
            f"{label:<{_LABEL_WIDTH}}bit_count={digit.bit_count}, "
            f"decimal_value={digit.decimal_value}, bits=[{bits}]"
        )
