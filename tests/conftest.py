"""See full diffs in pytest. Provide a fake rendering engine.

:author: Shay Hill
:created: 2026-10-19
"""

from __future__ import annotations

import dataclasses
from typing import Any

import numpy as np
import pytest
from numpy import typing as npt

from svg_rgba import main
from svg_rgba.dimensions import round_half_away
from svg_rgba.engine import ParseStatus
from svg_rgba.options import OptionsCache, RenderOptions
from svg_rgba.transform import Transform

SQUARE_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100">'
    '<rect width="100" height="100" fill="#ff0000"/></svg>'
)


def pytest_assertrepr_compare(
    config: Any, op: str, left: str, right: str
) -> list[str] | None:
    """See full error diffs"""
    del config
    if op in ("==", "!="):
        return [f"{left} {op} {right}"]
    return None


@dataclasses.dataclass
class FakeTree:
    """What FakeEngine.parse returns."""

    data: bytes
    options: RenderOptions
    destroyed: bool = False


class FakeEngine:
    """Record calls. Paint the content box opaque white.

    :param intrinsic: (width, height) to report for every tree
    :param status: status to return from parse
    """

    def __init__(
        self,
        intrinsic: tuple[float, float] = (100.0, 100.0),
        status: int = ParseStatus.OK,
    ) -> None:
        self.intrinsic = intrinsic
        self.status = status
        self.trees: list[FakeTree] = []
        self.renders: list[tuple[Transform, int, int]] = []

    def parse(self, data: bytes, options: RenderOptions) -> tuple[int, FakeTree | None]:
        if self.status != ParseStatus.OK:
            return self.status, None
        tree = FakeTree(data, options)
        self.trees.append(tree)
        return ParseStatus.OK, tree

    def intrinsic_size(self, tree: FakeTree) -> tuple[float, float]:
        assert not tree.destroyed
        return self.intrinsic

    def render(
        self,
        tree: FakeTree,
        transform: Transform,
        width: int,
        height: int,
        pixels: npt.NDArray[np.uint8],
    ) -> None:
        assert not tree.destroyed
        assert pixels.shape == (height, width, 4)
        assert not np.any(pixels)
        self.renders.append((transform, width, height))
        content_w, content_h = transform.content_size(self.intrinsic)
        x0, y0 = round_half_away(transform.e), round_half_away(transform.f)
        x1 = round_half_away(transform.e + content_w)
        y1 = round_half_away(transform.f + content_h)
        pixels[y0:y1, x0:x1] = 255

    def destroy(self, tree: FakeTree) -> None:
        assert not tree.destroyed
        tree.destroyed = True


@pytest.fixture
def engine() -> FakeEngine:
    """A fake engine reporting a 100x100 intrinsic size."""
    return FakeEngine()


@pytest.fixture
def options_cache(monkeypatch: pytest.MonkeyPatch) -> OptionsCache:
    """Replace the process-wide options cache with one that finds no fonts."""
    cache = OptionsCache(lambda: ())
    monkeypatch.setattr(main, "options_cache", cache)
    return cache
