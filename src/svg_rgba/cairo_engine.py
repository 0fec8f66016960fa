"""A rendering engine built on cairosvg.

This brings in cairosvg (and through it, cairocffi and the cairo shared library).
Parsing is checked with lxml first so failures can be reported with the same
status codes resvg uses. Cairosvg then does all of the drawing, straight into the
caller's pixel buffer.

:author: Shay Hill
:created: 2026-10-19
"""

from __future__ import annotations

import dataclasses
import gzip
import math
import re
import sys
import zlib
from collections.abc import Iterator
from contextlib import contextmanager
from types import SimpleNamespace
from typing import TYPE_CHECKING, Any

import cairocffi as cairo
import numpy as np
from cairosvg.helpers import size as svg_length  # type: ignore
from cairosvg.parser import Tree  # type: ignore
from cairosvg.surface import PNGSurface  # type: ignore
from lxml import etree
from lxml.etree import _Element as EtreeElement  # type: ignore
from numpy import typing as npt

from svg_rgba.constants import CAIRO_MAX_SIZE, ELEMENTS_LIMIT, GZIP_MAGIC
from svg_rgba.defaults import DEFAULT_HEIGHT, DEFAULT_WIDTH
from svg_rgba.engine import ParseStatus
from svg_rgba.errors import InvalidSizeError, OutOfMemoryError

if TYPE_CHECKING:
    from svg_rgba.options import RenderOptions
    from svg_rgba.transform import Transform

_VIEWBOX_SEP = re.compile(r"[\s,]+")

# elements that need a font to draw
_TEXT_TAGS = frozenset(("text",))


class _InvalidSizeError(Exception):
    """Raised internally when width, height, or viewBox cannot be used."""


@dataclasses.dataclass
class CairoTree:
    """A parsed svg.

    :param tree: the cairosvg tree. None after the tree is destroyed.
    :param options: render options the tree was parsed with
    :param width: intrinsic width in pixels (0 if not given)
    :param height: intrinsic height in pixels (0 if not given)
    """

    tree: Any
    options: RenderOptions
    width: float
    height: float


def _new_xml_parser() -> etree.XMLParser:
    """Get an lxml parser that will not touch the file system or the network."""
    return etree.XMLParser(resolve_entities=False, no_network=True, huge_tree=False)


def _parse_viewbox(value: str | None) -> tuple[float, float, float, float] | None:
    """Parse a viewBox attribute.

    :param value: attribute value or None
    :return: (min_x, min_y, width, height) or None if there is no viewBox
    :raise _InvalidSizeError: if the viewBox is malformed or empty
    """
    if value is None or not value.strip():
        return None
    try:
        min_x, min_y, width, height = (
            float(x) for x in _VIEWBOX_SEP.split(value.strip())
        )
    except ValueError as err:
        raise _InvalidSizeError from err
    if not (width > 0 and height > 0):
        raise _InvalidSizeError
    return min_x, min_y, width, height


def _parse_length(value: str | None, dpi: float) -> float:
    """Convert a width or height attribute to pixels.

    :param value: attribute value or None
    :param dpi: resolution for absolute units
    :return: length in pixels. Missing and percentage lengths are 0.
    :raise _InvalidSizeError: if the length is not a usable positive number
    """
    if value is None or not value.strip() or value.strip().endswith("%"):
        return 0.0
    # cairosvg's unit conversion only needs these attributes
    surface = SimpleNamespace(
        dpi=dpi, font_size=12 * dpi / 72, context_width=None, context_height=None
    )
    try:
        length = float(svg_length(surface, value.strip()))
    except ValueError as err:
        raise _InvalidSizeError from err
    if not (math.isfinite(length) and length > 0):
        raise _InvalidSizeError
    return length


def measure_root(root: EtreeElement, dpi: float) -> tuple[float, float]:
    """Get the intrinsic size of an svg root element.

    :param root: the <svg> element
    :param dpi: resolution for absolute units
    :return: (width, height) in pixels. An axis with no absolute length and no
        viewBox is 0.
    :raise _InvalidSizeError: if width, height, or viewBox is malformed
    """
    width = _parse_length(root.get("width"), dpi)
    height = _parse_length(root.get("height"), dpi)
    viewbox = _parse_viewbox(root.get("viewBox"))
    if viewbox is not None:
        width = width or viewbox[2]
        height = height or viewbox[3]
    return width, height


def _argb32_to_rgba(pixels: npt.NDArray[np.uint8]) -> None:
    """Reorder cairo's native-endian ARGB32 words into RGBA bytes, in place."""
    if sys.byteorder == "little":
        pixels[..., [0, 2]] = pixels[..., [2, 0]]
    else:
        pixels[...] = pixels[..., [1, 2, 3, 0]]


@contextmanager
def _surface_errors() -> Iterator[None]:
    """Raise cairo surface creation failures as svg_rgba errors.

    :raise OutOfMemoryError: if cairo cannot allocate the surface
    :raise InvalidSizeError: if cairo rejects the surface geometry
    """
    try:
        yield
    except MemoryError as err:
        raise OutOfMemoryError from err
    except cairo.CairoError as err:
        if getattr(err, "status", None) == cairo.STATUS_NO_MEMORY:
            raise OutOfMemoryError from err
        raise InvalidSizeError from err


class _WindowSurface(PNGSurface):
    """A cairosvg surface that draws into a window of an existing image surface.

    Cairosvg sizes its own surface from the svg. Here, the surface is a
    sub-rectangle of the output buffer: offset by the transform translation and
    sized to the scaled content. Cairosvg then maps the viewBox onto that window.
    """

    def __init__(
        self,
        tree: Any,
        window: cairo.Surface,
        content_size: tuple[float, float],
        options: RenderOptions,
    ) -> None:
        self._window = window
        self._draw_text = options.can_draw_text
        content_width, content_height = content_size
        super().__init__(
            tree,
            None,
            options.dpi,
            parent_width=DEFAULT_WIDTH,
            parent_height=DEFAULT_HEIGHT,
            output_width=content_width,
            output_height=content_height,
        )

    def _create_surface(
        self, width: float, height: float
    ) -> tuple[cairo.Surface, float, float]:
        return self._window, width, height

    def draw(self, node: Any) -> None:
        if not self._draw_text and node.tag in _TEXT_TAGS:
            return
        super().draw(node)


class CairoEngine:
    """Parse and render svg with cairosvg."""

    def parse(
        self, data: bytes, options: RenderOptions
    ) -> tuple[ParseStatus, CairoTree | None]:
        """Parse svg data.

        :param data: svg bytes, possibly gzipped
        :param options: per-call render options
        :return: (status, tree). Tree is None unless status is ParseStatus.OK.
        """
        if data[:2] == GZIP_MAGIC:
            try:
                data = gzip.decompress(data)
            except (OSError, EOFError, zlib.error):
                return ParseStatus.MALFORMED_GZIP, None
        try:
            _ = data.decode("utf-8")
        except UnicodeDecodeError:
            return ParseStatus.NOT_UTF8, None

        try:
            root = etree.fromstring(data, parser=_new_xml_parser())
        except (etree.XMLSyntaxError, ValueError):
            return ParseStatus.PARSING_FAILED, None
        if root is None or etree.QName(root).localname != "svg":
            return ParseStatus.PARSING_FAILED, None
        if sum(1 for _ in root.iter(tag=etree.Element)) > ELEMENTS_LIMIT:
            return ParseStatus.ELEMENTS_LIMIT_REACHED, None
        try:
            width, height = measure_root(root, options.dpi)
        except _InvalidSizeError:
            return ParseStatus.INVALID_SIZE, None

        try:
            tree = Tree(bytestring=data, unsafe=False)
        except (SyntaxError, ValueError):
            return ParseStatus.PARSING_FAILED, None
        return ParseStatus.OK, CairoTree(tree, options, width, height)

    def intrinsic_size(self, tree: CairoTree) -> tuple[float, float]:
        return tree.width, tree.height

    def render(
        self,
        tree: CairoTree,
        transform: Transform,
        width: int,
        height: int,
        pixels: npt.NDArray[np.uint8],
    ) -> None:
        """Draw a tree into pixels.

        :param tree: a tree returned by parse
        :param transform: uniform scale and centering offsets
        :param width: width of pixels
        :param height: height of pixels
        :param pixels: zeroed (height, width, 4) uint8 array, written in place as
            premultiplied RGBA
        :raise InvalidSizeError: if width or height is too large for cairo
        :raise OutOfMemoryError: if cairo cannot allocate its surfaces
        """
        if tree.tree is None:
            msg = "cannot render a destroyed tree"
            raise ValueError(msg)
        if max(width, height) > CAIRO_MAX_SIZE:
            msg = f"{width}x{height} exceeds the cairo limit of {CAIRO_MAX_SIZE}"
            raise InvalidSizeError(msg)
        content_size = transform.content_size((tree.width, tree.height))
        with _surface_errors():
            target = cairo.ImageSurface.create_for_data(
                pixels.reshape(-1), cairo.FORMAT_ARGB32, width, height, width * 4
            )
        try:
            with _surface_errors():
                window = target.create_for_rectangle(
                    transform.e, transform.f, *content_size
                )
            _ = _WindowSurface(tree.tree, window, content_size, tree.options)
            window.flush()
            target.flush()
        finally:
            target.finish()
        _argb32_to_rgba(pixels)

    def destroy(self, tree: CairoTree) -> None:
        tree.tree = None
