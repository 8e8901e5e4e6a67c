"""
Fabric Requirement Estimator.

Sums the area of every piece (including duplicates) and converts it to a
length of fabric at a fixed bolt width, rounded up to whole metres:

    length = max(ceil(total_area / fabric_width / 100) × 100, 100)

The 100 cm floor covers empty or tiny piece sets.
"""

from __future__ import annotations

import math
from collections.abc import Iterable

from patterncut.config import (
    FABRIC_UNIT,
    FABRIC_WIDTH_CM,
    LENGTH_INCREMENT_CM,
    MIN_FABRIC_LENGTH_CM,
)
from patterncut.schemas.plan import CuttingPiece, FabricRequirement


def total_area(pieces: Iterable[CuttingPiece]) -> float:
    """Return the summed fabric area (cm²) of *pieces*, counting every copy."""
    return sum(p.area for p in pieces)


def length_for_area(area: float, fabric_width: int = FABRIC_WIDTH_CM) -> int:
    """Return the fabric length (cm) needed to cover *area* at *fabric_width*."""
    increments = math.ceil(area / fabric_width / LENGTH_INCREMENT_CM)
    return max(increments * LENGTH_INCREMENT_CM, MIN_FABRIC_LENGTH_CM)


def estimate_fabric(
    pieces: Iterable[CuttingPiece],
    fabric_width: int = FABRIC_WIDTH_CM,
) -> FabricRequirement:
    """Return the fabric to buy for *pieces* at *fabric_width* cm wide."""
    return FabricRequirement(
        width=fabric_width,
        length=length_for_area(total_area(pieces), fabric_width),
        unit=FABRIC_UNIT,
    )
