"""The result of decoding an svg.

:author: Shay Hill
:created: 2026-10-19
"""

from __future__ import annotations

import dataclasses
from typing import Annotated, TypeAlias

import numpy as np
from numpy import typing as npt

from svg_rgba.constants import RGBA_CHANNELS

_Pixels: TypeAlias = Annotated[npt.NDArray[np.uint8], "(h,w,4)"]


@dataclasses.dataclass(frozen=True)
class DecodedImage:
    """A decoded svg.

    :param width: width in pixels
    :param height: height in pixels
    :param pixels: (height, width, 4) premultiplied RGBA. The DecodedImage owns
        this array. Nothing else in svg_rgba holds a reference to it.
    """

    width: int
    height: int
    pixels: _Pixels

    def __post_init__(self) -> None:
        expect = (self.height, self.width, RGBA_CHANNELS)
        if self.pixels.shape != expect or self.pixels.dtype != np.uint8:
            msg = f"pixels must be uint8 with shape {expect}, not {self.pixels.shape}"
            raise ValueError(msg)

    @property
    def data(self) -> memoryview:
        """A flat, writable byte view of the pixels (width * height * 4 bytes)."""
        return memoryview(self.pixels).cast("B")

    def tobytes(self) -> bytes:
        """Copy the pixels to a bytes object."""
        return self.pixels.tobytes()
