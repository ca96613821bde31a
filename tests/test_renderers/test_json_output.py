"""Tests for the JSON renderer and its schema."""

import io
import json

from binary_clock.renderers import ClockStateSchema, JsonRenderer


def test_layout_090503(state_090503):
    ts = state_090503.timestamp
    assert JsonRenderer().format(state_090503) == (
        "{\n"
        f'  "timestamp": {ts},\n'
        '  "time": "09:05:03",\n'
        '  "binary": {\n'
        '    "hours": {\n'
        '      "tens": [0,0,0],\n'
        '      "units": [1,0,0,1]\n'
        "    },\n"
        '    "minutes": {\n'
        '      "tens": [0,0,0],\n'
        '      "units": [0,1,0,1]\n'
        "    },\n"
        '    "seconds": {\n'
        '      "tens": [0,0,0],\n'
        '      "units": [0,0,1,1]\n'
        "    }\n"
        "  }\n"
        "}\n"
    )


def test_output_is_valid_json(state_143045):
    doc = json.loads(JsonRenderer().format(state_143045))
    assert doc["timestamp"] == state_143045.timestamp
    assert doc["time"] == "14:30:45"
    assert doc["binary"]["hours"] == {"tens": [0, 0, 1], "units": [0, 1, 0, 0]}
    assert doc["binary"]["seconds"] == {"tens": [1, 0, 0], "units": [0, 1, 0, 1]}


def test_array_lengths_match_bit_counts(state_143045):
    doc = json.loads(JsonRenderer().format(state_143045))
    for field in ("hours", "minutes", "seconds"):
        assert len(doc["binary"][field]["tens"]) == 3
        assert len(doc["binary"][field]["units"]) == 4


def test_schema_validates_output(state_090503):
    text = JsonRenderer().format(state_090503)
    parsed = ClockStateSchema.model_validate_json(text)
    assert parsed == ClockStateSchema.from_state(state_090503)
    assert parsed.binary.hours.units == [1, 0, 0, 1]


def test_render_to_file_like_context(state_090503):
    out = io.StringIO()
    JsonRenderer().render(state_090503, out)
    assert json.loads(out.getvalue())["time"] == "09:05:03"
