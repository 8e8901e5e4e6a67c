"""
Planner protocol, data contracts, and DeterministicPlanner implementation.

The Planner converts:
  category + subcategory + body measurements + fabric
    → CuttingPlan

Pipeline (single pass, no I/O, no shared mutable state):
  1. resolve()                  → GarmentSchema (default category on a miss)
  2. compute_dimensions()       → PieceDimensions per piece
  3. generate_outline()         → Outline per piece
     generate_instructions()    → instructions per piece
  4. estimate_fabric()          → FabricRequirement over all pieces
  5. generate_sewing_order()    → assembly steps (category only)
     care_tips()                → care sentence (fabric only)

DeterministicPlanner uses only closed-form formulas and the static catalog.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from patterncut.catalog.registry import get_catalog
from patterncut.config import EASE_CM, FABRIC_WIDTH_CM
from patterncut.planner.care import care_tips
from patterncut.planner.categories import resolve
from patterncut.planner.dimensions import compute_dimensions
from patterncut.planner.fabric import estimate_fabric
from patterncut.planner.instructions import generate_instructions
from patterncut.planner.outline import generate_outline
from patterncut.planner.sewing import generate_sewing_order
from patterncut.schemas.plan import CuttingPiece, CuttingPlan

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlannerInput:
    """Input bundle for the Planner."""

    category: str | None
    subcategory: str | None  # reserved; accepted but not used by any rule yet
    measurements: Mapping[str, float]  # normalised, all in cm
    fabric: str | None


@runtime_checkable
class Planner(Protocol):
    """Protocol for all Planner implementations."""

    def plan(self, planner_input: PlannerInput) -> CuttingPlan: ...


class DeterministicPlanner:
    """
    Planner implementation using only deterministic tools.

    ``ease`` and ``fabric_width`` default to the shop constants; override them
    for a different allowance or bolt width.
    """

    def __init__(self, ease: float = EASE_CM, fabric_width: int = FABRIC_WIDTH_CM) -> None:
        self._ease = ease
        self._fabric_width = fabric_width

    def plan(self, pi: PlannerInput) -> CuttingPlan:
        """
        Build the complete cutting plan for *pi*.

        Parameters
        ----------
        pi:
            Category, subcategory, normalised measurements, and fabric name.

        Returns
        -------
        CuttingPlan
            Pieces in schema order, fabric requirement, assembly order and
            care tip.  Never raises for well-typed input.
        """
        if pi.subcategory:
            logger.debug("Subcategory %r does not affect the plan", pi.subcategory)

        schema = resolve(pi.category)
        catalog = get_catalog()

        pieces: list[CuttingPiece] = []
        for index, name in enumerate(schema.pieces):
            kind = catalog.piece_kind(name)
            dims = compute_dimensions(name, pi.measurements, self._ease)
            pieces.append(
                CuttingPiece(
                    id=f"piece-{index}",
                    name=name,
                    kind=kind,
                    width=dims.width,
                    height=dims.height,
                    quantity=kind.quantity,
                    instructions=generate_instructions(name, pi.fabric),
                    outline=generate_outline(name, dims.width, dims.height),
                )
            )

        return CuttingPlan(
            pieces=tuple(pieces),
            fabric_requirements=estimate_fabric(pieces, self._fabric_width),
            sewing_order=generate_sewing_order(pi.category),
            tips=care_tips(pi.fabric),
        )
