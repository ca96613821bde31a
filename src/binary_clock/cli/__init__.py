# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Command-line front end for the binary clock.

Usage:
    binary-clock --display=json --loop
    python -m binary_clock --display=binary

Exports:
    ClockConfig: Validated command-line options
    RefreshLoop: Periodic dispatch to a display registry
    RendererFactory: Maps display mode names to renderers
    main: Entry point returning an exit code
"""

from .app import build_parser, main, parse_config, run_loop, run_once
from .factory import RendererFactory
from .loop import CLEAR_SCREEN, RefreshLoop
from .schema import ClockConfig

__all__ = [
    "CLEAR_SCREEN",
    "ClockConfig",
    "RefreshLoop",
    "RendererFactory",
    "build_parser",
    "main",
    "parse_config",
    "run_loop",
    "run_once",
]
