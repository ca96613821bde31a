"""Tests for CallableRenderer."""

from binary_clock.renderers import CallableRenderer


def test_calls_function_with_state_and_context(state_143045):
    seen = []
    r = CallableRenderer(lambda s, c: seen.append((s, c)), name="probe")
    r.render(state_143045, "ctx")
    assert seen == [(state_143045, "ctx")]
    assert r.name == "probe"


def test_name_defaults_to_function_name():
    def my_display(state, context):
        pass

    assert CallableRenderer(my_display).name == "my_display"


def test_none_state_not_forwarded():
    seen = []
    CallableRenderer(lambda s, c: seen.append(s)).render(None)
    assert seen == []


def test_format_uses_formatter(state_143045):
    r = CallableRenderer(lambda s, c: None, formatter=lambda s: s.time_string())
    assert r.format(state_143045) == "14:30:45"


def test_format_without_formatter(state_143045):
    assert CallableRenderer(lambda s, c: None).format(state_143045) == ""


def test_export_type():
    assert CallableRenderer(lambda s, c: None, name="x").export()["type"] == "custom"
