"""Normalize svg input to an owned byte buffer.

Svg input is either text or anything exposing the buffer protocol (bytes,
bytearray, memoryview, numpy arrays, ...). Either way, the content is copied so
later changes to the caller's object cannot reach the engine.

:author: Shay Hill
:created: 2026-10-19
"""

from __future__ import annotations

from types import TracebackType
from typing import Any

from svg_rgba.errors import InvalidInputError


class SvgInput:
    """An owned copy of svg data.

    The buffer is one byte longer than the data, and that last byte is always
    zero. Release the input (or use it as a context manager) as soon as the engine
    has parsed it.
    """

    def __init__(self, data: bytes) -> None:
        """Copy data into a new buffer.

        :param data: svg bytes
        """
        self.length = len(data)
        self._buffer: bytes | None = data + b"\x00"

    @property
    def released(self) -> bool:
        return self._buffer is None

    @property
    def buffer(self) -> bytes:
        """The full buffer, including the trailing zero byte."""
        if self._buffer is None:
            msg = "SvgInput has been released"
            raise ValueError(msg)
        return self._buffer

    @property
    def payload(self) -> bytes:
        """The svg data without the trailing zero byte."""
        return self.buffer[: self.length]

    def release(self) -> None:
        """Drop the buffer. Releasing twice is a no-op."""
        self._buffer = None

    def __enter__(self) -> SvgInput:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.release()


def normalize(svg: Any) -> SvgInput:
    """Copy svg text or bytes into an SvgInput.

    :param svg: svg as str or a bytes-like object
    :return: an SvgInput owned by the caller
    :raise InvalidInputError: if svg is None or neither str nor bytes-like

    Text is encoded as UTF-8. Lone surrogates are passed through as-is so the
    engine reports the result as invalid UTF-8.
    """
    if svg is None:
        msg = "SVG decode requires at least one argument"
        raise InvalidInputError(msg)
    if isinstance(svg, str):
        return SvgInput(svg.encode("utf-8", "surrogatepass"))
    try:
        view = memoryview(svg)
    except TypeError as err:
        msg = "SVG input must be string or buffer"
        raise InvalidInputError(msg) from err
    with view:
        return SvgInput(view.tobytes())
