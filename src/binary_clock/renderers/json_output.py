"""JsonRenderer — machine-readable state, validated through pydantic schemas."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from pydantic import BaseModel

from binary_clock.renderers.base import Renderer

if TYPE_CHECKING:
    from binary_clock.state import ClockState


class DigitPairSchema(BaseModel):
    """Tens and units bits of one time field, MSB first.

    Attributes:
        tens:  Three 0/1 integers.
        units: Four 0/1 integers.
    """

    tens: list[int]
    units: list[int]


class BinarySchema(BaseModel):
    hours: DigitPairSchema
    minutes: DigitPairSchema
    seconds: DigitPairSchema


class ClockStateSchema(BaseModel):
    """JSON document emitted by :class:`JsonRenderer`.

    Attributes:
        timestamp: Epoch seconds at which the state was built.
        time:      The encoded time as ``HH:MM:SS``.
        binary:    Bit arrays per field.
    """

    timestamp: int
    time: str
    binary: BinarySchema

    @classmethod
    def from_state(cls, state: ClockState) -> ClockStateSchema:
        pairs = {
            name: DigitPairSchema(tens=tens.as_ints(), units=units.as_ints())
            for name, tens, units in state.fields()
        }
        return cls(
            timestamp=state.timestamp,
            time=state.time_string(),
            binary=BinarySchema(**pairs),
        )


def _bit_array(bits: list[int]) -> str:
    return "[" + ",".join(str(bit) for bit in bits) + "]"


class JsonRenderer(Renderer):
    """Two-space indented JSON with each bit array on a single line.

    The context may be any writable text stream (an open file, ``StringIO``);
    without one the document goes to stdout.
    """

    _renderer_type = "json"
    _renderer_description = "JSON document"

    def format(self, state: ClockState) -> str:
        payload = ClockStateSchema.from_state(state)
        fields = [
            ("hours", payload.binary.hours),
            ("minutes", payload.binary.minutes),
            ("seconds", payload.binary.seconds),
        ]

        lines = [
            "{",
            f'  "timestamp": {payload.timestamp},',
            f'  "time": {json.dumps(payload.time)},',
            '  "binary": {',
        ]
        for index, (name, pair) in enumerate(fields):
            closing = "," if index < len(fields) - 1 else ""
            lines.extend(
                [
                    f'    "{name}": {{',
                    f'      "tens": {_bit_array(pair.tens)},',
                    f'      "units": {_bit_array(pair.units)}',
                    f"    }}{closing}",
                ]
            )
        lines.extend(["  }", "}"])
        return "\n".join(lines) + "\n"
