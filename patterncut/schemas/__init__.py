from .garment import GarmentSchema, PieceKind
from .outline import ClosePath, LineTo, MoveTo, Outline, QuadTo, Segment
from .plan import CuttingPiece, CuttingPlan, FabricRequirement, PieceDimensions

__all__ = [
    # Catalog types
    "GarmentSchema",
    "PieceKind",
    # Outline geometry
    "ClosePath",
    "LineTo",
    "MoveTo",
    "Outline",
    "QuadTo",
    "Segment",
    # Plan values
    "CuttingPiece",
    "CuttingPlan",
    "FabricRequirement",
    "PieceDimensions",
]
