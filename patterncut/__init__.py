"""patterncut — garment cutting plans from body measurements."""

from patterncut.api.generate import generate_cutting_plan
from patterncut.schemas.plan import CuttingPiece, CuttingPlan, FabricRequirement

__all__ = ["CuttingPiece", "CuttingPlan", "FabricRequirement", "generate_cutting_plan"]
