"""
Cutting plan value objects — the complete output of one generation call.

All types are frozen; a plan is created once per call and never mutated.
``CuttingPlan.to_dict()`` produces the JSON-ready wire form consumed by the
transport layer (camelCase keys, outline rendered as an SVG path string).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from patterncut.schemas.garment import PieceKind
from patterncut.schemas.outline import Outline


@dataclass(frozen=True)
class PieceDimensions:
    """Width and height of one piece in centimetres (unrounded)."""

    width: float
    height: float


@dataclass(frozen=True)
class CuttingPiece:
    """
    One fabric piece of a cutting plan.

    Attributes:
        id: Stable ordinal token within the plan (``"piece-0"``, ``"piece-1"``, …).
        name: Piece name from the garment schema, e.g. ``"devant"``.
        kind: Dispatch variant the piece was computed with.
        width: Piece width in cm.
        height: Piece height in cm.
        quantity: Number of times the piece is cut (≥ 1).
        instructions: Ordered cutting and sewing notes.
        outline: Closed outline in piece-local coordinates.
    """

    id: str
    name: str
    kind: PieceKind
    width: float
    height: float
    quantity: int
    instructions: tuple[str, ...]
    outline: Outline

    def __post_init__(self) -> None:
        if self.quantity < 1:
            raise ValueError(f"Piece {self.name!r}: quantity must be >= 1, got {self.quantity}")

    @property
    def area(self) -> float:
        """Total fabric area (cm²) consumed by all copies of this piece."""
        return self.width * self.height * self.quantity

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "width": self.width,
            "height": self.height,
            "quantity": self.quantity,
            "instructions": list(self.instructions),
            "svg": self.outline.to_svg_path(),
        }


@dataclass(frozen=True)
class FabricRequirement:
    """Fabric to buy: bolt width and required length, both in ``unit``."""

    width: int
    length: int
    unit: str

    def to_dict(self) -> dict[str, Any]:
        return {"width": self.width, "length": self.length, "unit": self.unit}


@dataclass(frozen=True)
class CuttingPlan:
    """
    Complete cutting plan for one garment.

    Attributes:
        pieces: Pieces in garment-schema order.
        fabric_requirements: Estimated fabric to buy.
        sewing_order: Ordered assembly steps.
        tips: Fabric care sentence.
    """

    pieces: tuple[CuttingPiece, ...]
    fabric_requirements: FabricRequirement
    sewing_order: tuple[str, ...]
    tips: str

    def to_dict(self) -> dict[str, Any]:
        """Return the plan as plain dicts, lists, strings and numbers."""
        return {
            "pieces": [p.to_dict() for p in self.pieces],
            "fabricRequirements": self.fabric_requirements.to_dict(),
            "sewingOrder": list(self.sewing_order),
            "tips": self.tips,
        }
