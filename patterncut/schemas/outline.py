"""
Outline path primitives for a flat fabric piece.

An Outline is an ordered sequence of absolute path segments, closed by a
ClosePath.  Coordinates are in centimetres with the origin at the top-left of
the piece's bounding box and y growing downwards, matching SVG conventions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


def format_number(value: float) -> str:
    """Render a coordinate the way a path string expects it.

    Integral values drop the decimal point (``25.0`` → ``"25"``); everything
    else uses the shortest round-tripping repr (``6.25`` → ``"6.25"``).
    """
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


@dataclass(frozen=True)
class MoveTo:
    """Start a new sub-path at (x, y)."""

    x: float
    y: float

    def to_svg(self) -> str:
        return f"M {format_number(self.x)},{format_number(self.y)}"


@dataclass(frozen=True)
class LineTo:
    """Straight edge to (x, y)."""

    x: float
    y: float

    def to_svg(self) -> str:
        return f"L {format_number(self.x)},{format_number(self.y)}"


@dataclass(frozen=True)
class QuadTo:
    """Quadratic Bézier curve through control point (cx, cy) to (x, y)."""

    cx: float
    cy: float
    x: float
    y: float

    def to_svg(self) -> str:
        return (
            f"Q {format_number(self.cx)},{format_number(self.cy)} "
            f"{format_number(self.x)},{format_number(self.y)}"
        )


@dataclass(frozen=True)
class ClosePath:
    """Straight edge back to the sub-path start."""

    def to_svg(self) -> str:
        return "Z"


Segment = Union[MoveTo, LineTo, QuadTo, ClosePath]


@dataclass(frozen=True)
class Outline:
    """Closed outline of one piece."""

    segments: tuple[Segment, ...]

    def __post_init__(self) -> None:
        if not self.segments or not isinstance(self.segments[0], MoveTo):
            raise ValueError("Outline must start with a MoveTo segment")
        if not isinstance(self.segments[-1], ClosePath):
            raise ValueError("Outline must end with a ClosePath segment")

    def to_svg_path(self) -> str:
        """Return the outline as an SVG path ``d`` attribute string."""
        return " ".join(seg.to_svg() for seg in self.segments)

    def points(self) -> list[tuple[float, float]]:
        """Return the on-curve vertices in path order (control points excluded)."""
        return [(seg.x, seg.y) for seg in self.segments if not isinstance(seg, ClosePath)]

    def bounds(self) -> tuple[float, float, float, float]:
        """Return ``(min_x, min_y, max_x, max_y)`` over vertices and control points."""
        xs: list[float] = []
        ys: list[float] = []
        for seg in self.segments:
            if isinstance(seg, QuadTo):
                xs.append(seg.cx)
                ys.append(seg.cy)
            if not isinstance(seg, ClosePath):
                xs.append(seg.x)
                ys.append(seg.y)
        return min(xs), min(ys), max(xs), max(ys)
