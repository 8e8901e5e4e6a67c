"""Tests for planner.outline — the Outline Generator."""

from __future__ import annotations

import pytest

from patterncut.planner.outline import generate_outline, outline_for_kind
from patterncut.schemas.garment import PieceKind
from patterncut.schemas.outline import ClosePath, MoveTo, QuadTo


class TestFront:
    def test_path(self):
        assert generate_outline("devant", 25, 100).to_svg_path() == (
            "M 0,20 Q 6.25,0 12.5,0 Q 18.75,0 25,20 L 25,100 L 0,100 Z"
        )

    def test_has_curved_neckline(self):
        segments = generate_outline("devant", 25, 100).segments
        assert sum(isinstance(s, QuadTo) for s in segments) == 2


class TestBack:
    def test_path(self):
        assert generate_outline("dos", 25, 100).to_svg_path() == (
            "M 0,10 L 25,10 L 25,100 L 0,100 Z"
        )

    def test_straight_edges_only(self):
        segments = generate_outline("dos", 25, 100).segments
        assert not any(isinstance(s, QuadTo) for s in segments)


class TestSleeve:
    def test_path(self):
        assert generate_outline("manche", 24, 60).to_svg_path() == (
            "M 12,0 Q 0,15 0,30 L 0,60 L 24,60 L 24,30 Q 24,15 12,0 Z"
        )

    def test_cap_symmetric_about_centre(self):
        w, h = 24.0, 60.0
        points = generate_outline("manche", w, h).points()
        mirrored = {(w - x, y) for x, y in points}
        assert mirrored == set(points)


class TestRectangleFallback:
    @pytest.mark.parametrize("piece", ["ceinture", "col", "doublure", "poche"])
    def test_plain_rectangle(self, piece):
        assert generate_outline(piece, 30, 40).to_svg_path() == "M 0,0 L 30,0 L 30,40 L 0,40 Z"

    def test_bounds_span_dimensions(self):
        assert generate_outline("col", 30, 40).bounds() == (0, 0, 30, 40)


class TestOutlineProperties:
    @pytest.mark.parametrize("kind", list(PieceKind))
    def test_closed_and_anchored(self, kind):
        outline = outline_for_kind(kind, 27.5, 61.0)
        assert isinstance(outline.segments[0], MoveTo)
        assert isinstance(outline.segments[-1], ClosePath)

    @pytest.mark.parametrize("kind", list(PieceKind))
    def test_within_piece_bounds(self, kind):
        min_x, min_y, max_x, max_y = outline_for_kind(kind, 27.5, 61.0).bounds()
        assert min_x >= 0 and min_y >= 0
        assert max_x == 27.5 and max_y == 61.0

    def test_deterministic(self):
        assert generate_outline("devant", 25.25, 100) == generate_outline("devant", 25.25, 100)

    def test_fractional_coordinates(self):
        path = generate_outline("devant", 25.25, 100).to_svg_path()
        assert path.startswith("M 0,20 Q 6.3125,0 12.625,0")
