"""Decode svg text or bytes into an RGBA pixel buffer.

    >>> image = decode('<svg xmlns="http://www.w3.org/2000/svg" width="4" height="2"/>')
    >>> image.width, image.height, len(image.data)
    (4, 2, 32)

Options (a mapping or a DecodeOptions instance) may set any of

* width: output width in pixels
* height: output height in pixels
* dpi: resolution for absolute units (default 96)
* loadFonts: load system fonts to draw <text> elements (default True)

If only one of width and height is given, the other follows the svg's aspect
ratio. If both are given, the output is exactly that size and the content is
centered inside it.

:author: Shay Hill
:created: 2026-10-19
"""

from __future__ import annotations

import functools as ft
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from svg_rgba.errors import EncodeNotSupportedError
from svg_rgba.inputs import normalize
from svg_rgba.options import DecodeOptions
from svg_rgba.options import cache as options_cache
from svg_rgba.rasterize import rasterize
from svg_rgba.type_decoded_image import DecodedImage

if TYPE_CHECKING:
    from svg_rgba.engine import RenderingEngine


@ft.cache
def default_engine() -> RenderingEngine:
    """Get the process-wide cairosvg engine.

    The import is deferred so svg_rgba can be imported (and used with another
    engine) where the cairo shared library is not installed.
    """
    from svg_rgba.cairo_engine import CairoEngine

    return CairoEngine()


def decode(
    svg: Any = None,
    options: DecodeOptions | Mapping[str, Any] | None = None,
    *,
    engine: RenderingEngine | None = None,
) -> DecodedImage:
    """Decode an svg into RGBA pixels.

    :param svg: svg as str or a bytes-like object (gzipped svgz is fine)
    :param options: optional DecodeOptions or mapping with any of the keys
        "width", "height", "dpi", "loadFonts"
    :param engine: optional kwarg only param - rendering engine. Defaults to
        the cairosvg engine.
    :return: DecodedImage with width, height, and premultiplied RGBA pixels
    :raise InvalidInputError: if svg or options have an unsupported type
    :raise ParseError: (a subclass) if the svg cannot be parsed
    :raise OutOfMemoryError: if the pixel buffer cannot be allocated
    """
    with normalize(svg) as svg_input:
        decode_options = DecodeOptions.from_value(options)
        render_options = options_cache.get_options(
            decode_options.render_dpi, decode_options.load_fonts
        )
        result = rasterize(
            engine or default_engine(),
            svg_input,
            render_options,
            decode_options.target,
        )
    width, height = result.size.pixels
    return DecodedImage(width, height, result.pixels)


def encode(rgba: Any, options: Any = None) -> bytes:
    """Encoding pixels to svg is not supported."""
    del rgba, options
    raise EncodeNotSupportedError("SVG encoding not supported")


def encode_animated(frames: Any, options: Any = None) -> bytes:
    """Encoding animations to svg is not supported."""
    del frames, options
    raise EncodeNotSupportedError("Animated SVG not supported")
