"""
Section templates for the TemplateWriter.

Each render_* function turns one part of a CuttingPlan into a block of
cutting-sheet text.  Dimensions are shown to one decimal place; the plan
itself keeps full precision.
"""

from __future__ import annotations

from patterncut.schemas.outline import format_number
from patterncut.schemas.plan import CuttingPiece, FabricRequirement


def _cm(value: float) -> str:
    """Render a length for people: one decimal at most, no trailing ``.0``."""
    return format_number(round(value, 1))


def display_name(name: str) -> str:
    """Return the header form of a piece name (``tour_de_cou`` → ``Tour de cou``)."""
    return name.replace("_", " ").capitalize()


def render_piece(piece: CuttingPiece) -> str:
    """Render a piece header followed by its instructions, one per line."""
    header = (
        f"{display_name(piece.name)} — {_cm(piece.width)} × {_cm(piece.height)} cm "
        f"(x{piece.quantity})"
    )
    return "\n".join([header, *(f"- {line}" for line in piece.instructions)])


def render_fabric(requirement: FabricRequirement) -> str:
    """Render the fabric to buy."""
    return "\n".join(
        [
            "Tissu",
            f"Laize : {requirement.width} {requirement.unit}",
            f"Métrage : {requirement.length} {requirement.unit}",
        ]
    )


def render_sewing_order(steps: tuple[str, ...]) -> str:
    """Render the assembly steps as a numbered list."""
    return "\n".join(["Ordre de montage", *(f"{i}. {s}" for i, s in enumerate(steps, start=1))])


def render_care(tips: str) -> str:
    """Render the care sentence."""
    return "\n".join(["Entretien", tips])
