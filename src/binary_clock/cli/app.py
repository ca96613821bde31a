# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Command-line front end.

Usage:
    binary-clock [--display=MODE] [--loop] [--interval SECONDS] [-v]

Exit codes:
    0: Success (including --help and a stopped loop)
    1: Bad arguments, unknown display mode, unreadable clock, or output failure
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from collections.abc import Sequence
from typing import NoReturn, TextIO

from pydantic import ValidationError

from binary_clock import get_version
from binary_clock.exceptions import (
    BinaryClockError,
    DisplayModeError,
    RegistrationError,
    TimeUnavailableError,
    UsageError,
)
from binary_clock.registry import DEFAULT_CAPACITY, REGISTRATION_FAILED, DisplayRegistry
from binary_clock.state import ClockStateBuilder

from .factory import RendererFactory
from .loop import RefreshLoop
from .schema import ClockConfig

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_EPILOG = """\
display modes:
  emoji    Moon emojis 🌚🌝 (default)
  binary   0s and 1s
  json     JSON format
  raw      Raw API data structures
  compact  One line per update

examples:
  %(prog)s                          # Single emoji output
  %(prog)s --loop                   # Continuous emoji display
  %(prog)s --display=binary         # Single binary output
  %(prog)s --display=json --loop    # Continuous JSON output
"""


class _ArgumentParser(argparse.ArgumentParser):
    """Reports bad arguments as :class:`UsageError` instead of exiting with 2."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def build_parser(prog: str | None = None) -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog=prog,
        description="Show the time as a binary clock.",
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )
    parser.add_argument(
        "--display",
        metavar="MODE",
        default="emoji",
        help="display mode (default: emoji)",
    )
    parser.add_argument(
        "--loop",
        action="store_true",
        help="run continuously (default: single output)",
    )
    parser.add_argument(
        "--interval",
        type=float,
        default=1.0,
        metavar="SECONDS",
        help="seconds between updates in loop mode (default: 1)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug output to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {get_version()}")
    return parser


def parse_config(argv: Sequence[str] | None = None, prog: str | None = None) -> ClockConfig:
    """Parse *argv* into a validated :class:`ClockConfig`.

    Raises:
        UsageError: If the arguments cannot be parsed or fail validation
    """
    args = build_parser(prog).parse_args(argv)
    try:
        return ClockConfig(
            display=args.display,
            loop=args.loop,
            interval=args.interval,
            verbose=args.verbose,
        )
    except ValidationError as e:
        details = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise UsageError(details) from e


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def run_once(
    config: ClockConfig,
    builder: ClockStateBuilder | None = None,
    stream: TextIO | None = None,
) -> None:
    """Print the current state once with the configured display.

    Raises:
        DisplayModeError: If the display mode is unknown
        TimeUnavailableError: If the current time cannot be read
    """
    renderer = RendererFactory().create(config.display)
    state = (builder or ClockStateBuilder()).get_current_state()
    if not state.ok:
        raise TimeUnavailableError()
    renderer.render(state, stream)


def run_loop(
    config: ClockConfig,
    builder: ClockStateBuilder | None = None,
    stream: TextIO | None = None,
    *,
    max_ticks: int | None = None,
    handle_signals: bool = True,
) -> int:
    """Refresh the configured display until stopped.

    Returns the number of ticks run, or -1 when interrupted by Ctrl+C.

    Raises:
        DisplayModeError: If the display mode is unknown
        RegistrationError: If the display cannot be registered
    """
    renderer = RendererFactory().create(config.display)
    out = stream or sys.stdout
    builder = builder or ClockStateBuilder()

    out.write(f"🌚🌝 Binary Clock v{get_version()} 🌝🌚\n")
    out.write("Press Ctrl+C to exit\n\n")

    registry = DisplayRegistry(capacity=DEFAULT_CAPACITY, builder=builder)
    if registry.register(renderer, stream) == REGISTRATION_FAILED:
        raise RegistrationError(renderer.name)

    refresh = RefreshLoop(
        registry,
        builder=builder,
        interval=config.interval,
        # JSON documents stay readable as a stream when the screen is not cleared
        clear_screen=config.display != "json",
        stream=stream,
        max_ticks=max_ticks,
        handle_signals=handle_signals,
    )
    try:
        ticks = asyncio.run(refresh.run())
    except KeyboardInterrupt:
        ticks = -1
    out.write("\n\nBinary clock stopped.\n")
    return ticks


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success, including --help and --version; 1 for failure)
    """
    try:
        config = parse_config(argv)
    except SystemExit as e:
        # argparse exits after printing --help or --version
        return e.code if isinstance(e.code, int) else 0
    except UsageError as e:
        print(f"Error: {e}", file=sys.stderr)
        print("Use --help for usage information", file=sys.stderr)
        return 1

    configure_logging(config.verbose)

    try:
        if config.loop:
            run_loop(config)
        else:
            run_once(config)
    except DisplayModeError as e:
        print(f"Error: {e}", file=sys.stderr)
        print(f"Valid modes: {', '.join(e.available)}", file=sys.stderr)
        return 1
    except BinaryClockError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        logger.debug("Unexpected error", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


def run() -> None:
    """Console script entry point."""
    sys.exit(main())
