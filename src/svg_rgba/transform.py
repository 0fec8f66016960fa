"""Fit svg content inside the output box.

Content is scaled uniformly to fit entirely inside the box (never cropped) and
centered. Leftover space on the shorter axis is split evenly and left transparent.

The transform is built from the intrinsic size, not from the pixel size, so when a
caller requests both a width and a height with a different aspect ratio than the
svg, the content is still letterboxed inside the stretched box.

:author: Shay Hill
:created: 2026-10-19
"""

from __future__ import annotations

import dataclasses

from svg_rgba.dimensions import effective_intrinsic


@dataclasses.dataclass(frozen=True)
class Transform:
    """A 2x3 affine matrix in cairo / svg order.

    x' = a*x + c*y + e
    y' = b*x + d*y + f

    Svg_rgba only builds uniform scale + translation, so b == c == 0 and a == d.
    """

    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    e: float = 0.0
    f: float = 0.0

    @property
    def scale(self) -> float:
        return self.a

    @property
    def offset(self) -> tuple[float, float]:
        return self.e, self.f

    def as_tuple(self) -> tuple[float, float, float, float, float, float]:
        return self.a, self.b, self.c, self.d, self.e, self.f

    def content_size(self, intrinsic: tuple[float, float]) -> tuple[float, float]:
        """Get the size of the content box after scaling.

        :param intrinsic: (width, height) the transform was built from
        :return: (width, height) of the scaled content in pixels
        """
        width, height = effective_intrinsic(intrinsic)
        return width * self.a, height * self.d


def build_transform(
    intrinsic: tuple[float, float], output: tuple[float, float]
) -> Transform:
    """Build the fit-within-box transform.

    :param intrinsic: (width, height) reported by the engine. Missing dimensions
        are replaced with defaults, same as when resolving the output size.
    :param output: exact (unrounded) output (width, height)
    :return: uniform scale and centering offsets
    """
    svg_width, svg_height = effective_intrinsic(intrinsic)
    out_width, out_height = output
    scale = min(out_width / svg_width, out_height / svg_height)
    offset_x = (out_width - svg_width * scale) / 2
    offset_y = (out_height - svg_height * scale) / 2
    return Transform(a=scale, d=scale, e=offset_x, f=offset_y)
