"""Test the rasterizer adapter with a fake engine.

:author: Shay Hill
:created: 2026-10-19
"""

import numpy as np
import pytest
from conftest import FakeEngine

from svg_rgba import rasterize as rasterize_module
from svg_rgba.dimensions import TargetSize
from svg_rgba.engine import ParseStatus
from svg_rgba.errors import (
    InvalidSizeError,
    NotUtf8Error,
    OutOfMemoryError,
    ParseFailedError,
    UnknownParseError,
)
from svg_rgba.inputs import SvgInput
from svg_rgba.options import RenderOptions
from svg_rgba.rasterize import allocate_pixels, parsed_tree, rasterize

_OPTIONS = RenderOptions(dpi=96.0)


class TestParsedTree:
    def test_destroy_after_block(self, engine: FakeEngine) -> None:
        """Destroy the tree when the block exits."""
        svg_input = SvgInput(b"<svg/>")
        with parsed_tree(engine, svg_input, _OPTIONS) as tree:
            assert not tree.destroyed
            assert svg_input.released
        assert tree.destroyed

    def test_destroy_on_error(self, engine: FakeEngine) -> None:
        """Destroy the tree when the block raises."""
        with pytest.raises(RuntimeError):
            with parsed_tree(engine, SvgInput(b"<svg/>"), _OPTIONS):
                raise RuntimeError
        assert engine.trees[0].destroyed

    def test_engine_sees_payload_only(self, engine: FakeEngine) -> None:
        """Pass the data without the trailing zero byte."""
        with parsed_tree(engine, SvgInput(b"<svg/>"), _OPTIONS) as tree:
            assert tree.data == b"<svg/>"
            assert tree.options is _OPTIONS

    @pytest.mark.parametrize(
        ("status", "error_type"),
        [
            (ParseStatus.NOT_UTF8, NotUtf8Error),
            (ParseStatus.INVALID_SIZE, InvalidSizeError),
            (ParseStatus.PARSING_FAILED, ParseFailedError),
            (42, UnknownParseError),
        ],
    )
    def test_parse_failure(self, status: int, error_type: type[Exception]) -> None:
        """Release the input and raise the mapped error."""
        engine = FakeEngine(status=status)
        svg_input = SvgInput(b"<svg/>")
        with pytest.raises(error_type):
            with parsed_tree(engine, svg_input, _OPTIONS):
                pytest.fail("should not yield")
        assert svg_input.released
        assert engine.trees == []


class TestAllocatePixels:
    def test_zeroed(self) -> None:
        """Allocate transparent black RGBA."""
        pixels = allocate_pixels(3, 2)
        assert pixels.shape == (2, 3, 4)
        assert pixels.dtype == np.uint8
        assert not np.any(pixels)

    def test_out_of_memory(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Raise OutOfMemoryError when numpy cannot allocate."""

        def no_memory(*_: object, **__: object) -> None:
            raise MemoryError

        monkeypatch.setattr(rasterize_module.np, "zeros", no_memory)
        with pytest.raises(OutOfMemoryError, match="Memory allocation failed"):
            _ = allocate_pixels(10, 10)


class TestRasterize:
    def test_square_doubled(self, engine: FakeEngine) -> None:
        """Render 100x100 at width 200 to 200x200, scale 2, no offsets."""
        result = rasterize(engine, SvgInput(b"<svg/>"), _OPTIONS, TargetSize(200))
        assert result.size.pixels == (200, 200)
        assert result.transform.scale == 2.0
        assert result.transform.offset == (0.0, 0.0)
        assert result.pixels.shape == (200, 200, 4)
        assert np.all(result.pixels == 255)

    def test_render_once(self, engine: FakeEngine) -> None:
        """Call the engine's render exactly once with the pixel size."""
        result = rasterize(engine, SvgInput(b"<svg/>"), _OPTIONS, TargetSize(50))
        assert engine.renders == [(result.transform, 50, 50)]
        assert engine.trees[0].destroyed

    def test_letterbox_stays_transparent(self) -> None:
        """Leave the margins outside the content box zeroed."""
        engine = FakeEngine(intrinsic=(200, 100))
        result = rasterize(
            engine, SvgInput(b"<svg/>"), _OPTIONS, TargetSize(100, 100)
        )
        assert result.pixels.shape == (100, 100, 4)
        assert result.transform.offset == (0.0, 25.0)
        assert not np.any(result.pixels[:25])
        assert not np.any(result.pixels[75:])
        assert np.all(result.pixels[25:75] == 255)

    def test_tree_destroyed_when_allocation_fails(
        self, engine: FakeEngine, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Destroy the tree before OutOfMemoryError escapes."""

        def no_memory(*_: object, **__: object) -> None:
            raise MemoryError

        monkeypatch.setattr(rasterize_module.np, "zeros", no_memory)
        with pytest.raises(OutOfMemoryError):
            _ = rasterize(engine, SvgInput(b"<svg/>"), _OPTIONS, TargetSize())
        assert engine.trees[0].destroyed
        assert engine.renders == []
