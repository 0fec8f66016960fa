"""The interface between svg_rgba and a vector-graphics rendering engine.

Svg_rgba does not parse or draw svg itself. An engine is anything that can

1. parse svg bytes into an opaque tree
2. report the intrinsic size of that tree
3. render that tree with a transform into a caller-owned RGBA buffer
4. release the tree

The default engine is `svg_rgba.cairo_engine.CairoEngine`.

:author: Shay Hill
:created: 2026-10-19
"""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    import numpy as np
    from numpy import typing as npt

    from svg_rgba.options import RenderOptions
    from svg_rgba.transform import Transform


class ParseStatus(enum.IntEnum):
    """Parse status codes. These are the resvg codes."""

    OK = 0
    NOT_UTF8 = 1
    FILE_OPEN_FAILED = 2
    MALFORMED_GZIP = 3
    ELEMENTS_LIMIT_REACHED = 4
    INVALID_SIZE = 5
    PARSING_FAILED = 6


class RenderingEngine(Protocol):
    """Capabilities svg_rgba needs from a rendering engine."""

    def parse(self, data: bytes, options: RenderOptions) -> tuple[int, Any | None]:
        """Parse svg data.

        :param data: svg bytes, possibly gzipped
        :param options: the per-call render options (dpi, fonts)
        :return: (status, tree). Tree is None unless status is ParseStatus.OK.
        """
        ...

    def intrinsic_size(self, tree: Any) -> tuple[float, float]:
        """Get the natural (width, height) of a parsed tree in pixels."""
        ...

    def render(
        self,
        tree: Any,
        transform: Transform,
        width: int,
        height: int,
        pixels: npt.NDArray[np.uint8],
    ) -> None:
        """Draw a tree into pixels.

        :param tree: a tree returned by parse
        :param transform: map from intrinsic svg space to pixel space
        :param width: width of pixels
        :param height: height of pixels
        :param pixels: zeroed (height, width, 4) uint8 array. The engine writes
            premultiplied RGBA into this array in place.
        """
        ...

    def destroy(self, tree: Any) -> None:
        """Release a tree. The tree is not used after this."""
        ...
