"""Tests for CompactRenderer."""

from binary_clock import TimeComponents
from binary_clock.renderers import CompactRenderer


def test_compact_line(state_143045):
    assert CompactRenderer().format(state_143045) == "14:30:45 [001 0100 : 011 0000 : 100 0101]\n"


def test_compact_end_of_day(builder):
    state = builder.from_time(TimeComponents(23, 59, 59))
    assert CompactRenderer().format(state) == "23:59:59 [010 0011 : 101 1001 : 101 1001]\n"


def test_compact_to_stdout(state_090503, capsys):
    CompactRenderer().render(state_090503)
    assert capsys.readouterr().out == "09:05:03 [000 1001 : 000 0101 : 000 0011]\n"
