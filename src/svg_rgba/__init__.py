"""Import functions into the package namespace.

:author: Shay Hill
:created: 2026-10-19
"""

from svg_rgba.errors import (
    ElementsLimitReachedError,
    EncodeNotSupportedError,
    InvalidInputError,
    InvalidSizeError,
    MalformedGzipError,
    NotUtf8Error,
    OutOfMemoryError,
    ParseError,
    ParseFailedError,
    SvgDecodeError,
    UnknownParseError,
)
from svg_rgba.image_arrays import to_pil_image, write_png
from svg_rgba.main import decode, encode, encode_animated
from svg_rgba.options import DecodeOptions
from svg_rgba.type_decoded_image import DecodedImage

__all__ = [
    "DecodeOptions",
    "DecodedImage",
    "ElementsLimitReachedError",
    "EncodeNotSupportedError",
    "InvalidInputError",
    "InvalidSizeError",
    "MalformedGzipError",
    "NotUtf8Error",
    "OutOfMemoryError",
    "ParseError",
    "ParseFailedError",
    "SvgDecodeError",
    "UnknownParseError",
    "decode",
    "encode",
    "encode_animated",
    "to_pil_image",
    "write_png",
]
