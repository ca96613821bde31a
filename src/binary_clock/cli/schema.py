# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Validated configuration for the command-line front end."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ClockConfig(BaseModel):
    """Options collected from the command line.

    Attributes:
        display:  Display mode name, resolved by the renderer factory.
        loop:     Refresh continuously instead of printing once.
        interval: Seconds between refreshes in loop mode.
        verbose:  Enable debug logging on stderr.
    """

    display: str = "emoji"
    loop: bool = False
    interval: float = Field(default=1.0, gt=0)
    verbose: bool = False
