"""
Outline Generator: piece name + dimensions → closed Outline.

Shapes by kind (w = width, h = height, y grows downwards):

  FRONT   — curved neckline/shoulder across the top, dropping 20 cm at the sides
  BACK    — straight top 10 cm down (shallower neckline), straight sides
  SLEEVE  — cap curved symmetrically about x = w/2, straight underarm seams
  other   — plain rectangle (0,0)–(w,h)

Coordinates depend only on (w, h); the same inputs always give the same path.
"""

from __future__ import annotations

from patterncut.catalog.registry import get_catalog
from patterncut.schemas.garment import PieceKind
from patterncut.schemas.outline import ClosePath, LineTo, MoveTo, Outline, QuadTo

# Neckline depth at the side of the front and back panels (cm).
_FRONT_NECK_DROP: float = 20.0
_BACK_NECK_DROP: float = 10.0


def _front(w: float, h: float) -> Outline:
    return Outline(
        (
            MoveTo(0, _FRONT_NECK_DROP),
            QuadTo(w / 4, 0, w / 2, 0),
            QuadTo(3 * w / 4, 0, w, _FRONT_NECK_DROP),
            LineTo(w, h),
            LineTo(0, h),
            ClosePath(),
        )
    )


def _back(w: float, h: float) -> Outline:
    return Outline(
        (
            MoveTo(0, _BACK_NECK_DROP),
            LineTo(w, _BACK_NECK_DROP),
            LineTo(w, h),
            LineTo(0, h),
            ClosePath(),
        )
    )


def _sleeve(w: float, h: float) -> Outline:
    return Outline(
        (
            MoveTo(w / 2, 0),
            QuadTo(0, h / 4, 0, h / 2),
            LineTo(0, h),
            LineTo(w, h),
            LineTo(w, h / 2),
            QuadTo(w, h / 4, w / 2, 0),
            ClosePath(),
        )
    )


def _rectangle(w: float, h: float) -> Outline:
    return Outline(
        (
            MoveTo(0, 0),
            LineTo(w, 0),
            LineTo(w, h),
            LineTo(0, h),
            ClosePath(),
        )
    )


def outline_for_kind(kind: PieceKind, width: float, height: float) -> Outline:
    """Return the outline shape for *kind* at the given dimensions."""
    match kind:
        case PieceKind.FRONT:
            return _front(width, height)
        case PieceKind.BACK:
            return _back(width, height)
        case PieceKind.SLEEVE:
            return _sleeve(width, height)
        case _:
            # WAISTBAND and GENERIC
            return _rectangle(width, height)


def generate_outline(piece_name: str, width: float, height: float) -> Outline:
    """Return the closed outline of *piece_name* at *width* × *height* cm."""
    return outline_for_kind(get_catalog().piece_kind(piece_name), width, height)
