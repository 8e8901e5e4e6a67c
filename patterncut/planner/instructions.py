"""
Instruction Generator: piece name + fabric → ordered cutting/sewing notes.

Fixed sequence:
  1. cut count ("2 fois" for sleeves, "1 fois" otherwise)
  2. side seam allowance (1 cm)
  3. bottom hem (2 cm)
  4. fabric handling tip — omitted entirely for unknown fabrics
"""

from __future__ import annotations

import logging

from patterncut.catalog.registry import get_catalog

logger = logging.getLogger(__name__)

SEAM_ALLOWANCE_NOTE = "Ajouter 1cm de couture sur les côtés"
HEM_NOTE = "Ourlet bas : 2cm"


def cut_count_line(quantity: int) -> str:
    """Return the cut-count instruction for a piece cut *quantity* times."""
    return f"Couper {quantity} fois dans le tissu"


def generate_instructions(piece_name: str, fabric: str | None) -> tuple[str, ...]:
    """Return the ordered instructions for *piece_name* cut from *fabric*."""
    catalog = get_catalog()
    quantity = catalog.piece_kind(piece_name).quantity
    tip = catalog.handling_tip(fabric)
    if tip is None:
        logger.debug("No handling tip for fabric %r", fabric)

    lines = [cut_count_line(quantity), SEAM_ALLOWANCE_NOTE, HEM_NOTE, tip]
    return tuple(line for line in lines if line)
