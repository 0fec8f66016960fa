"""Errors raised while decoding an svg.

Every error is terminal for the call that raised it. Nothing is retried and no
partial pixel buffer is ever returned.

:author: Shay Hill
:created: 2026-10-19
"""

from __future__ import annotations

from svg_rgba.engine import ParseStatus


class SvgDecodeError(Exception):
    """Base class for all errors raised by svg_rgba."""

    default_message = "SVG decode failed"

    def __init__(self, message: str | None = None) -> None:
        self.message = self.default_message if message is None else message
        super().__init__(self.message)


class InvalidInputError(SvgDecodeError, TypeError):
    """The svg argument or the options argument has an unsupported type."""

    default_message = "SVG input must be string or buffer"


class ParseError(SvgDecodeError):
    """The rendering engine could not parse the svg data."""

    default_message = "Unknown SVG parsing error"


class NotUtf8Error(ParseError):
    """Svg data is not valid UTF-8."""

    default_message = "SVG data is not valid UTF-8"


class MalformedGzipError(ParseError):
    """Svg data starts with the gzip signature, but does not decompress."""

    default_message = "SVG gzip data is malformed"


class ElementsLimitReachedError(ParseError):
    """Svg has more elements than the engine will parse."""

    default_message = "SVG elements limit reached"


class InvalidSizeError(ParseError):
    """Svg size attributes cannot be interpreted."""

    default_message = "SVG has invalid size"


class ParseFailedError(ParseError):
    """Svg data is not a well-formed svg document."""

    default_message = "Failed to parse SVG"


class UnknownParseError(ParseError):
    """The engine reported a status code without a specific meaning here."""

    default_message = "Unknown SVG parsing error"


class OutOfMemoryError(SvgDecodeError, MemoryError):
    """The pixel buffer could not be allocated."""

    default_message = "Memory allocation failed"


class EncodeNotSupportedError(SvgDecodeError, NotImplementedError):
    """Raised by the encode entry points. Svg_rgba only decodes."""

    default_message = "SVG encoding not supported"


_STATUS_ERRORS: dict[int, type[ParseError]] = {
    ParseStatus.NOT_UTF8: NotUtf8Error,
    ParseStatus.MALFORMED_GZIP: MalformedGzipError,
    ParseStatus.ELEMENTS_LIMIT_REACHED: ElementsLimitReachedError,
    ParseStatus.INVALID_SIZE: InvalidSizeError,
    ParseStatus.PARSING_FAILED: ParseFailedError,
}


def error_for_status(status: int) -> ParseError:
    """Get the error for a non-OK engine status code.

    :param status: status code returned by an engine's parse method
    :return: an instance of the matching ParseError subclass. Codes without a
        specific meaning (including FILE_OPEN_FAILED, since svg_rgba never opens
        files) map to UnknownParseError.
    """
    return _STATUS_ERRORS.get(int(status), UnknownParseError)()
