"""Parse and rasterize svg data with a rendering engine.

This is the only module that touches engine trees. A tree is acquired with
`parsed_tree` and always destroyed when that block exits, whether rendering
succeeds or fails. The svg input is released as soon as the engine has parsed it.

:author: Shay Hill
:created: 2026-10-19
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING, Annotated, Any, TypeAlias

import numpy as np
from numpy import typing as npt

from svg_rgba.constants import RGBA_CHANNELS
from svg_rgba.dimensions import OutputSize, TargetSize, resolve_size
from svg_rgba.engine import ParseStatus
from svg_rgba.errors import OutOfMemoryError, error_for_status
from svg_rgba.transform import Transform, build_transform

if TYPE_CHECKING:
    from svg_rgba.engine import RenderingEngine
    from svg_rgba.inputs import SvgInput
    from svg_rgba.options import RenderOptions

_Pixels: TypeAlias = Annotated[npt.NDArray[np.uint8], "(h,w,4)"]


@dataclasses.dataclass(frozen=True)
class RasterResult:
    """Pixels and how they were made.

    :param pixels: (height, width, 4) premultiplied RGBA
    :param intrinsic: (width, height) reported by the engine
    :param size: exact output size before rounding
    :param transform: the transform passed to the engine
    """

    pixels: _Pixels
    intrinsic: tuple[float, float]
    size: OutputSize
    transform: Transform


@contextmanager
def parsed_tree(
    engine: RenderingEngine, svg_input: SvgInput, options: RenderOptions
) -> Iterator[Any]:
    """Parse svg input and destroy the tree when done.

    :param engine: the rendering engine
    :param svg_input: svg data. Released after parsing, success or not.
    :param options: per-call render options
    :yield: the engine's parsed tree
    :raise ParseError: (a subclass) if the engine reports anything but OK
    """
    try:
        status, tree = engine.parse(svg_input.payload, options)
    finally:
        svg_input.release()
    if status != ParseStatus.OK or tree is None:
        raise error_for_status(status)
    try:
        yield tree
    finally:
        engine.destroy(tree)


def allocate_pixels(width: int, height: int) -> _Pixels:
    """Allocate a zeroed (transparent black) RGBA buffer.

    :param width: buffer width in pixels
    :param height: buffer height in pixels
    :return: (height, width, 4) uint8 zeros
    :raise OutOfMemoryError: if the buffer cannot be allocated
    """
    try:
        return np.zeros((height, width, RGBA_CHANNELS), dtype=np.uint8)
    except (MemoryError, ValueError) as err:
        # numpy raises ValueError for sizes it cannot even represent
        raise OutOfMemoryError from err


def render_tree(
    engine: RenderingEngine, tree: Any, transform: Transform, width: int, height: int
) -> _Pixels:
    """Render a parsed tree into a new buffer.

    :param engine: the rendering engine that parsed tree
    :param tree: a parsed tree
    :param transform: map from intrinsic svg space to pixel space
    :param width: output width in pixels
    :param height: output height in pixels
    :return: (height, width, 4) premultiplied RGBA
    """
    pixels = allocate_pixels(width, height)
    engine.render(tree, transform, width, height, pixels)
    return pixels


def rasterize(
    engine: RenderingEngine,
    svg_input: SvgInput,
    options: RenderOptions,
    requested: TargetSize,
) -> RasterResult:
    """Parse, size, and render svg input.

    :param engine: the rendering engine
    :param svg_input: svg data. Released after parsing.
    :param options: per-call render options
    :param requested: requested output size
    :return: the rendered pixels with the size and transform used
    :raise ParseError: if the engine cannot parse svg_input
    :raise OutOfMemoryError: if the pixel buffer cannot be allocated
    """
    with parsed_tree(engine, svg_input, options) as tree:
        intrinsic = engine.intrinsic_size(tree)
        size = resolve_size(intrinsic, requested)
        transform = build_transform(intrinsic, (size.width, size.height))
        width, height = size.pixels
        logging.debug(
            f"rendering {intrinsic[0]}x{intrinsic[1]} svg to {width}x{height} "
            + f"at scale {transform.scale}"
        )
        pixels = render_tree(engine, tree, transform, width, height)
    return RasterResult(pixels, intrinsic, size, transform)
