"""Work out the size of the output raster.

The caller may request a width, a height, both, or neither. The svg has an
intrinsic size that may be missing (0) on either axis.

* both requested: use them as given, even if that stretches the aspect ratio
* width requested: derive height from the intrinsic aspect ratio
* height requested: derive width from the intrinsic aspect ratio
* neither requested: use the intrinsic size

Pixel dimensions are rounded half away from zero and are never less than 1.

:author: Shay Hill
:created: 2026-10-19
"""

from __future__ import annotations

import dataclasses
import math

from svg_rgba.defaults import DEFAULT_HEIGHT, DEFAULT_WIDTH


def _is_set(value: float) -> bool:
    """Return True if a requested dimension was given."""
    return math.isfinite(value) and value > 0


def round_half_away(value: float) -> int:
    """Round a float to the nearest int, ties away from zero.

    :param value: float to round
    :return: nearest int. 2.5 -> 3, -2.5 -> -3

    The builtin `round` rounds ties to even, which would make 0.5 pixels round to
    0 and 1.5 pixels round to 2.
    """
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


@dataclasses.dataclass(frozen=True)
class TargetSize:
    """Requested output size. 0 (or anything not positive and finite) is unset."""

    width: float = 0.0
    height: float = 0.0


@dataclasses.dataclass(frozen=True)
class OutputSize:
    """Exact output size before rounding to pixels."""

    width: float
    height: float

    @property
    def pixel_width(self) -> int:
        return max(1, round_half_away(self.width))

    @property
    def pixel_height(self) -> int:
        return max(1, round_half_away(self.height))

    @property
    def pixels(self) -> tuple[int, int]:
        """(width, height) in whole pixels."""
        return self.pixel_width, self.pixel_height


def effective_intrinsic(intrinsic: tuple[float, float]) -> tuple[float, float]:
    """Replace a missing intrinsic dimension with the default.

    :param intrinsic: (width, height) reported by the engine
    :return: (width, height) with any non-positive or non-finite value replaced
        by DEFAULT_WIDTH or DEFAULT_HEIGHT
    """
    width, height = intrinsic
    if not _is_set(width):
        width = DEFAULT_WIDTH
    if not _is_set(height):
        height = DEFAULT_HEIGHT
    return float(width), float(height)


def resolve_size(intrinsic: tuple[float, float], requested: TargetSize) -> OutputSize:
    """Get the output size for an svg.

    :param intrinsic: (width, height) reported by the engine
    :param requested: the requested output size
    :return: the exact output size. Use `.pixels` for the raster dimensions.
    """
    svg_width, svg_height = effective_intrinsic(intrinsic)
    aspect = svg_width / svg_height
    has_width = _is_set(requested.width)
    has_height = _is_set(requested.height)

    if has_width and has_height:
        return OutputSize(requested.width, requested.height)
    if has_width:
        return OutputSize(requested.width, requested.width / aspect)
    if has_height:
        return OutputSize(requested.height * aspect, requested.height)
    return OutputSize(svg_width, svg_height)
