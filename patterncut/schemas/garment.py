"""
GarmentSchema — the fixed piece list and expected measurements of a category.

Loaded from the lookup catalog at startup and never mutated.  A schema carries
no dimensions; the Planner computes those per request from measurements.

Key types:
  PieceKind     — closed set of per-piece dispatch variants
  GarmentSchema — ordered pieces + expected measurement keys for one category
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class PieceKind(str, Enum):
    """
    Dispatch variant for a fabric piece.

    FRONT     — front bodice/leg panel (devant)
    BACK      — back panel (dos)
    SLEEVE    — sleeve, cut twice (manche)
    WAISTBAND — waistband strip (ceinture)
    GENERIC   — any other piece; fixed default dimensions and a plain rectangle
    """

    FRONT = "front"
    BACK = "back"
    SLEEVE = "sleeve"
    WAISTBAND = "waistband"
    GENERIC = "generic"

    @property
    def quantity(self) -> int:
        """Number of times a piece of this kind is cut from the fabric."""
        return 2 if self is PieceKind.SLEEVE else 1


@dataclass(frozen=True)
class GarmentSchema:
    """
    Piece list and expected measurements for one garment category.

    Attributes:
        category: Catalog key, e.g. ``"robe"``.
        pieces: Piece names in cutting-plan order.
        measurements: Measurement keys the category is drafted from.  Informative
            only; absent keys fall back to per-piece defaults.
        bottom: True for garments worn below the waist (no sleeves to set).
    """

    category: str
    pieces: tuple[str, ...]
    measurements: tuple[str, ...]
    bottom: bool = False
