"""Decode options from the caller and render options for the engine.

There are two kinds of options here:

* `DecodeOptions` are what a caller asks for: output size, dpi, and whether to
  load system fonts.
* `RenderOptions` are what the engine receives. Finding system fonts is slow, so
  two base RenderOptions instances (with and without fonts) are created at most
  once per process and kept in `cache`. Each call gets its own copy of one of
  these with the requested dpi. The cached bases are never mutated, so
  concurrent calls with different dpi values cannot see each other's dpi.

:author: Shay Hill
:created: 2026-10-19
"""

from __future__ import annotations

import dataclasses
import logging
import math
import numbers
import threading
from collections.abc import Callable, Iterable, Mapping
from pathlib import Path
from typing import Any

from svg_rgba.constants import FONT_SUFFIXES
from svg_rgba.defaults import DEFAULT_DPI, DEFAULT_LOAD_FONTS
from svg_rgba.dimensions import TargetSize
from svg_rgba.errors import InvalidInputError
from svg_rgba.paths import SYSTEM_FONT_DIRS


def _read_number(name: str, value: Any) -> float | None:
    """Read an optional number from an options mapping.

    :param name: option name for the error message
    :param value: the value found in the mapping
    :return: float value or None if value is None
    :raise InvalidInputError: if value is not a real number
    """
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        msg = f"Option '{name}' must be a number"
        raise InvalidInputError(msg)
    return float(value)


@dataclasses.dataclass(frozen=True)
class DecodeOptions:
    """What the caller wants out of a decode.

    :param width: requested output width in pixels or None to derive it
    :param height: requested output height in pixels or None to derive it
    :param dpi: resolution used to convert absolute svg units to pixels
    :param load_fonts: load system fonts so <text> elements can be drawn
    """

    width: float | None = None
    height: float | None = None
    dpi: float = DEFAULT_DPI
    load_fonts: bool = DEFAULT_LOAD_FONTS

    @classmethod
    def from_value(
        cls, value: DecodeOptions | Mapping[str, Any] | None
    ) -> DecodeOptions:
        """Build DecodeOptions from whatever the caller passed.

        :param value: None, a DecodeOptions instance, or a mapping with any of the
            keys "width", "height", "dpi", and "loadFonts" (or "load_fonts").
            Other keys are ignored.
        :return: a DecodeOptions instance with missing fields defaulted
        :raise InvalidInputError: if value is another type or a field has the wrong
            type
        """
        if value is None:
            return cls()
        if isinstance(value, DecodeOptions):
            return value
        if not isinstance(value, Mapping):
            msg = "Options must be an object"
            raise InvalidInputError(msg)

        dpi = _read_number("dpi", value.get("dpi"))
        load_fonts = value.get("loadFonts", value.get("load_fonts"))
        if load_fonts is None:
            load_fonts = DEFAULT_LOAD_FONTS
        elif not isinstance(load_fonts, bool):
            msg = "Option 'loadFonts' must be a boolean"
            raise InvalidInputError(msg)
        return cls(
            width=_read_number("width", value.get("width")),
            height=_read_number("height", value.get("height")),
            dpi=DEFAULT_DPI if dpi is None else dpi,
            load_fonts=load_fonts,
        )

    @property
    def target(self) -> TargetSize:
        """The requested output size. Unset axes are 0."""
        return TargetSize(self.width or 0.0, self.height or 0.0)

    @property
    def render_dpi(self) -> float:
        """Dpi to render at. A non-positive or non-finite dpi means the default."""
        if math.isfinite(self.dpi) and self.dpi > 0:
            return self.dpi
        return DEFAULT_DPI


@dataclasses.dataclass(frozen=True)
class RenderOptions:
    """Options passed to the rendering engine for one call.

    :param dpi: resolution used to convert absolute svg units to pixels
    :param load_fonts: whether system fonts were requested
    :param font_files: the system font index. Empty when load_fonts is False.
    """

    dpi: float = DEFAULT_DPI
    load_fonts: bool = False
    font_files: tuple[Path, ...] = ()

    @property
    def can_draw_text(self) -> bool:
        """Fonts were requested and at least one was found.

        With an empty font index, <text> elements are not drawn.
        """
        return self.load_fonts and bool(self.font_files)


def discover_system_fonts(
    font_dirs: Iterable[Path] = SYSTEM_FONT_DIRS,
) -> tuple[Path, ...]:
    """Find font files under the system font directories.

    :param font_dirs: directories to search recursively
    :return: sorted paths to every font file found
    """
    found: set[Path] = set()
    for font_dir in font_dirs:
        if not font_dir.is_dir():
            continue
        found.update(
            p
            for p in font_dir.rglob("*")
            if p.suffix.lower() in FONT_SUFFIXES and p.is_file()
        )
    return tuple(sorted(found))


class OptionsCache:
    """Create at most one base RenderOptions instance per load_fonts value.

    Each slot has its own lock, so a slow font discovery for the with-fonts slot
    never blocks a call that does not load fonts.
    """

    def __init__(
        self, discover_fonts: Callable[[], tuple[Path, ...]] = discover_system_fonts
    ) -> None:
        """Initialize an empty cache.

        :param discover_fonts: called (once) to build the with-fonts font index
        """
        self._discover_fonts = discover_fonts
        self._bases: dict[bool, RenderOptions] = {}
        self._locks = {True: threading.Lock(), False: threading.Lock()}

    def _new_base(self, load_fonts: bool) -> RenderOptions:
        if not load_fonts:
            logging.info("created render options without fonts")
            return RenderOptions(load_fonts=False)
        logging.info("loading system fonts")
        font_files = self._discover_fonts()
        logging.info(f"created render options with {len(font_files)} system fonts")
        return RenderOptions(load_fonts=True, font_files=font_files)

    def get_base(self, load_fonts: bool) -> RenderOptions:
        """Get (creating if necessary) the cached base options for load_fonts.

        :param load_fonts: select the with-fonts or without-fonts slot
        :return: the long-lived base instance for that slot
        """
        load_fonts = bool(load_fonts)
        base = self._bases.get(load_fonts)
        if base is not None:
            return base
        with self._locks[load_fonts]:
            if load_fonts not in self._bases:
                self._bases[load_fonts] = self._new_base(load_fonts)
            return self._bases[load_fonts]

    def get_options(self, dpi: float, load_fonts: bool) -> RenderOptions:
        """Get render options for one call.

        :param dpi: the dpi for this call
        :param load_fonts: whether to use the system font index
        :return: a new RenderOptions instance derived from the cached base
        """
        return dataclasses.replace(self.get_base(load_fonts), dpi=dpi)


cache = OptionsCache()


def get_options(dpi: float, load_fonts: bool) -> RenderOptions:
    """Get render options for one call from the process-wide cache."""
    return cache.get_options(dpi, load_fonts)
