"""Test PIL conversion of decoded images.

:author: Shay Hill
:created: 2026-10-19
"""

from pathlib import Path

import numpy as np
from PIL import Image

from svg_rgba.image_arrays import to_pil_image, write_png
from svg_rgba.type_decoded_image import DecodedImage


def _half_red() -> DecodedImage:
    """Get a 3x2 image of 50% transparent red, premultiplied."""
    pixels = np.zeros((2, 3, 4), dtype=np.uint8)
    pixels[...] = (128, 0, 0, 128)
    return DecodedImage(3, 2, pixels)


class TestToPilImage:
    def test_unpremultiply(self) -> None:
        """Convert premultiplied pixels to straight RGBA."""
        image = to_pil_image(_half_red())
        assert image.mode == "RGBA"
        assert image.size == (3, 2)
        assert image.getpixel((0, 0)) == (255, 0, 0, 128)

    def test_premultiplied(self) -> None:
        """Keep premultiplied pixels when asked."""
        image = to_pil_image(_half_red(), premultiplied=True)
        assert image.mode == "RGBa"
        assert image.getpixel((2, 1)) == (128, 0, 0, 128)


class TestWritePng:
    def test_write(self, tmp_path: Path) -> None:
        """Write a png with the decoded size."""
        path = write_png(tmp_path / "out.bmp", _half_red())
        assert path == tmp_path / "out.png"
        with Image.open(path) as image:
            assert image.size == (3, 2)
            assert image.mode == "RGBA"
