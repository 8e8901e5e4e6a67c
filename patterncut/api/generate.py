"""
Public cutting-plan generation API.

generate_cutting_plan() is the single entry point the transport layer calls.
It normalises the raw measurements and runs the DeterministicPlanner.  The
result is a plain frozen value; call ``to_dict()`` for the JSON wire form.
"""

from __future__ import annotations

from patterncut.planner.measurements import normalize_measurements
from patterncut.planner.planner import DeterministicPlanner, PlannerInput
from patterncut.schemas.plan import CuttingPlan


def generate_cutting_plan(
    category: str | None,
    subcategory: str | None,
    measurements: object,
    fabric: str | None,
) -> CuttingPlan:
    """
    Generate a cutting plan from a garment category and body measurements.

    Parameters
    ----------
    category:
        Garment category (``"robe"``, ``"haut"``, ``"pantalon"``, ``"jupe"``).
        Unknown values fall back to ``"robe"``.
    subcategory:
        Reserved for future refinement; accepted and ignored.
    measurements:
        Body measurements in centimetres, keyed by name (``poitrine``,
        ``tour_taille``, ``longueur``, ``longueur_manche``, ``tour_poignet``, …).
        Invalid values are dropped and the per-piece default applies.
    fabric:
        Fabric name (``"coton"``, ``"soie"``, …).  Unknown fabrics get no
        handling tip and the generic care sentence.

    Returns
    -------
    CuttingPlan
        Pieces, fabric requirement, assembly order and care tip.  Same inputs
        always give an equal plan.
    """
    return DeterministicPlanner().plan(
        PlannerInput(
            category=category,
            subcategory=subcategory,
            measurements=normalize_measurements(measurements),
            fabric=fabric,
        )
    )
