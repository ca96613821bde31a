"""Tests for the command-line entry point."""

import io
import json
import sys

import pytest

from binary_clock import ClockStateBuilder, __version__
from binary_clock.cli import app
from binary_clock.cli.app import main, parse_config, run_loop, run_once
from binary_clock.cli.loop import CLEAR_SCREEN
from binary_clock.cli.schema import ClockConfig
from binary_clock.exceptions import DisplayModeError, TimeUnavailableError, UsageError
from binary_clock.renderers import CallableRenderer


class TestParseConfig:
    """Tests for argument parsing into ClockConfig."""

    def test_defaults(self):
        config = parse_config([])
        assert config == ClockConfig(display="emoji", loop=False, interval=1.0, verbose=False)

    def test_every_field_has_a_flag(self):
        config = parse_config(["--display=raw", "--loop", "--interval", "2", "-v"])
        assert set(ClockConfig.model_fields) == {"display", "loop", "interval", "verbose"}
        assert config.model_dump() == {
            "display": "raw",
            "loop": True,
            "interval": 2.0,
            "verbose": True,
        }

    def test_display_with_equals(self):
        assert parse_config(["--display=json"]).display == "json"

    def test_display_separate_value(self):
        assert parse_config(["--display", "raw"]).display == "raw"

    def test_loop_flag(self):
        assert parse_config(["--loop"]).loop is True

    def test_unknown_option(self):
        with pytest.raises(UsageError) as exc_info:
            parse_config(["--bogus"])
        assert "--bogus" in str(exc_info.value)

    def test_no_abbreviations(self):
        with pytest.raises(UsageError):
            parse_config(["--disp=json"])

    def test_non_positive_interval(self):
        with pytest.raises(UsageError) as exc_info:
            parse_config(["--interval", "0"])
        assert "interval" in str(exc_info.value)


class TestMain:
    """Tests for main() exit codes and output streams."""

    def test_single_shot_emoji(self, capsys):
        assert main([]) == 0
        out = capsys.readouterr().out
        assert out.startswith("🌝 Binary Clock 🌚\n")
        assert "Hours   : " in out

    def test_single_shot_json(self, capsys):
        assert main(["--display=json"]) == 0
        doc = json.loads(capsys.readouterr().out)
        assert len(doc["binary"]["hours"]["tens"]) == 3
        assert doc["timestamp"] > 0

    @pytest.mark.parametrize("mode", ["binary", "raw", "compact"])
    def test_other_modes(self, capsys, mode):
        assert main([f"--display={mode}"]) == 0
        assert capsys.readouterr().out

    def test_help_exits_zero(self, capsys):
        assert main(["--help"]) == 0
        out = capsys.readouterr().out
        assert "--display MODE" in out
        assert "--loop" in out

    def test_short_help(self, capsys):
        assert main(["-h"]) == 0
        assert "usage:" in capsys.readouterr().out

    def test_version(self, capsys):
        assert main(["--version"]) == 0
        assert __version__ in capsys.readouterr().out

    def test_unknown_option(self, capsys):
        assert main(["--bogus"]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.startswith("Error: ")
        assert "Use --help for usage information" in captured.err

    def test_unknown_display_mode(self, capsys):
        assert main(["--display=hologram"]) == 1
        captured = capsys.readouterr()
        assert "Error: Unknown display mode 'hologram'" in captured.err
        assert "Valid modes: emoji, binary, json, raw" in captured.err

    def test_time_failure(self, capsys, monkeypatch, failing_clock):
        monkeypatch.setattr(
            app, "ClockStateBuilder", lambda: ClockStateBuilder(clock=failing_clock)
        )
        assert main([]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Error: Failed to get current time" in captured.err

    def test_output_encoding_failure(self, capsys, monkeypatch):
        monkeypatch.setattr(sys, "stdout", io.TextIOWrapper(io.BytesIO(), encoding="ascii"))
        assert main([]) == 1
        err = capsys.readouterr().err
        assert err.startswith("Error: ")
        assert "ascii" in err
        assert "Traceback" not in err

    def test_display_raising_in_loop(self, capsys, monkeypatch):
        def crash(state, context):
            raise RuntimeError("display crashed")

        class CrashingFactory:
            def create(self, mode):
                return CallableRenderer(crash)

        monkeypatch.setattr(app, "RendererFactory", CrashingFactory)
        assert main(["--loop", "--display=compact", "--interval", "0.01"]) == 1
        assert "Error: display crashed" in capsys.readouterr().err


class TestRunOnce:
    def test_writes_to_stream(self, builder):
        out = io.StringIO()
        run_once(ClockConfig(display="compact"), builder, out)
        assert out.getvalue() == "14:30:45 [001 0100 : 011 0000 : 100 0101]\n"

    def test_unknown_mode(self, builder):
        with pytest.raises(DisplayModeError):
            run_once(ClockConfig(display="nope"), builder)

    def test_failed_time(self, failing_clock):
        with pytest.raises(TimeUnavailableError):
            run_once(ClockConfig(), ClockStateBuilder(clock=failing_clock), io.StringIO())


class TestRunLoop:
    def test_banner_ticks_and_stop_message(self, builder):
        out = io.StringIO()
        config = ClockConfig(display="compact", loop=True, interval=0.01)

        ticks = run_loop(config, builder, out, max_ticks=2, handle_signals=False)

        text = out.getvalue()
        assert ticks == 2
        assert text.startswith(f"🌚🌝 Binary Clock v{__version__} 🌝🌚\nPress Ctrl+C to exit\n\n")
        assert text.count("14:30:45 [") == 2
        assert text.count(CLEAR_SCREEN) == 2
        assert text.endswith("\n\nBinary clock stopped.\n")

    def test_json_loop_does_not_clear(self, builder):
        out = io.StringIO()
        run_loop(
            ClockConfig(display="json", loop=True, interval=0.01),
            builder,
            out,
            max_ticks=1,
            handle_signals=False,
        )
        assert CLEAR_SCREEN not in out.getvalue()
        assert '"time": "14:30:45"' in out.getvalue()
