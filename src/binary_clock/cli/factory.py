# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Renderer factory mapping display mode names to renderer classes.

Uses the Registry pattern so new display modes can be added without
modifying factory code.
"""

from __future__ import annotations

from typing import ClassVar

from binary_clock.exceptions import DisplayModeError
from binary_clock.renderers import (
    AsciiRenderer,
    CompactRenderer,
    EmojiRenderer,
    JsonRenderer,
    RawRenderer,
    Renderer,
)


class RendererFactory:
    """Creates renderers from display mode names.

    Example:
        renderer = RendererFactory().create("json")
        RendererFactory.register("matrix", MatrixRenderer)
    """

    # Class-level registry mapping mode names to renderer classes
    _registry: ClassVar[dict[str, type[Renderer]]] = {
        "emoji": EmojiRenderer,
        "binary": AsciiRenderer,
        "json": JsonRenderer,
        "raw": RawRenderer,
        "compact": CompactRenderer,
    }

    @classmethod
    def register(cls, mode: str, renderer_class: type[Renderer]) -> None:
        """Register a renderer class under a display mode name.

        Raises:
            ValueError: If renderer_class._renderer_type doesn't match mode
        """
        declared_type = renderer_class._renderer_type
        if declared_type != "base" and declared_type != mode:
            raise ValueError(
                f"Renderer {renderer_class.__name__} has _renderer_type='{declared_type}' "
                f"but is being registered as '{mode}'"
            )
        cls._registry[mode] = renderer_class

    @classmethod
    def registered_types(cls) -> list[str]:
        """Return the known display mode names in registration order."""
        return list(cls._registry.keys())

    def create(self, mode: str) -> Renderer:
        """Instantiate the renderer for *mode*.

        Raises:
            DisplayModeError: If no renderer is registered under *mode*
        """
        renderer_class = self._registry.get(mode)
        if renderer_class is None:
            raise DisplayModeError(mode, self.registered_types())
        return renderer_class(name=mode)
