"""
TemplateWriter — converts a CuttingPlan into a printable cutting sheet.

Sections, in order:
  1. One section per piece (keyed by piece name), in plan order.
  2. ``fabric``   — bolt width and length to buy.
  3. ``assembly`` — numbered assembly order.
  4. ``care``     — fabric care sentence.

All sections are concatenated into full_sheet in section_order sequence.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from patterncut.schemas.plan import CuttingPlan
from patterncut.writer.templates import (
    render_care,
    render_fabric,
    render_piece,
    render_sewing_order,
)

FABRIC_SECTION = "fabric"
ASSEMBLY_SECTION = "assembly"
CARE_SECTION = "care"


@dataclass(frozen=True)
class WriterInput:
    """Complete input bundle for a PatternWriter."""

    plan: CuttingPlan

    @property
    def section_order(self) -> list[str]:
        """Section keys in sheet order: piece names, then fabric, assembly, care."""
        return [p.name for p in self.plan.pieces] + [
            FABRIC_SECTION,
            ASSEMBLY_SECTION,
            CARE_SECTION,
        ]


@dataclass(frozen=True)
class WriterOutput:
    """Output of a successful sheet write."""

    sections: dict[str, str]  # section key → section text
    full_sheet: str  # all sections concatenated in section_order


@runtime_checkable
class PatternWriter(Protocol):
    """Protocol for cutting-sheet writers."""

    def write(self, writer_input: WriterInput) -> WriterOutput: ...


def join_sections(sections: dict[str, str], order: list[str]) -> str:
    """Concatenate *sections* in *order*, separated by blank lines."""
    return "\n\n".join(sections[key] for key in order)


class TemplateWriter:
    """Deterministic template-based writer.  Same plan, same sheet."""

    def write(self, wi: WriterInput) -> WriterOutput:
        """
        Render every section of the plan.

        Parameters
        ----------
        wi:
            WriterInput bundle holding the plan.

        Returns
        -------
        WriterOutput
            Per-section text and the full concatenated sheet.
        """
        plan = wi.plan
        sections: dict[str, str] = {piece.name: render_piece(piece) for piece in plan.pieces}
        sections[FABRIC_SECTION] = render_fabric(plan.fabric_requirements)
        sections[ASSEMBLY_SECTION] = render_sewing_order(plan.sewing_order)
        sections[CARE_SECTION] = render_care(plan.tips)

        return WriterOutput(sections=sections, full_sheet=join_sections(sections, wi.section_order))
