"""Convert decoded images to PIL images. Save those images.

Decoded pixels are premultiplied RGBA, which PIL calls "RGBa".

:author: Shay Hill
:created: 2026-10-19
"""

from pathlib import Path

from PIL import Image
from PIL.Image import Image as ImageType

from svg_rgba.type_decoded_image import DecodedImage


def to_pil_image(decoded: DecodedImage, *, premultiplied: bool = False) -> ImageType:
    """Get a decoded image as a PIL image.

    :param decoded: result of decode
    :param premultiplied: optional kwarg only param - if True, return an "RGBa"
        image with the pixels as decoded. By default, convert to straight "RGBA".
    :return: a PIL.Image.Image instance. The pixels are copied.
    """
    size = (decoded.width, decoded.height)
    image = Image.frombytes("RGBa", size, decoded.tobytes())
    if premultiplied:
        return image
    return image.convert("RGBA")


def write_png(path: Path | str, decoded: DecodedImage) -> Path:
    """Save a decoded image as a png.

    :param path: path to output file (will end up with extension .png)
    :param decoded: result of decode
    :return: the path written
    :effects: writes a png to the filesystem
    """
    path = Path(path).with_suffix(".png")
    to_pil_image(decoded).save(path)
    return path
