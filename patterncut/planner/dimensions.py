"""
Piece Dimension Calculator.

Each PieceKind carries a width rule and a height rule.  A rule reads the
first present measurement from its fallback chain (or its literal default
when none is present), then applies:

    dimension = base / divisor + offset (+ ease when the rule is ease-bearing)

No rounding happens here; fabric length is the only rounded quantity.
Absent measurements never raise.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from patterncut.catalog.registry import get_catalog
from patterncut.config import EASE_CM
from patterncut.schemas.garment import PieceKind
from patterncut.schemas.plan import PieceDimensions

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DimensionRule:
    """
    Rule for computing one physical dimension of a piece.

    Result = first_present(measurement_keys, default) / divisor + offset [+ ease]

    An empty ``measurement_keys`` makes the dimension a fixed constant.
    """

    measurement_keys: tuple[str, ...]
    default: float
    divisor: float = 1.0
    offset: float = 0.0
    with_ease: bool = False  # add ease; only for circumference-derived widths

    def apply(self, measurements: Mapping[str, float], ease: float) -> float:
        base = next(
            (measurements[k] for k in self.measurement_keys if measurements.get(k)),
            None,
        )
        if base is None:
            base = self.default
            if self.measurement_keys:
                logger.debug(
                    "No measurement among %s, using default %s", self.measurement_keys, base
                )
        value = base / self.divisor + self.offset
        if self.with_ease:
            value += ease
        return value


@dataclass(frozen=True)
class PieceRules:
    """Width and height rules for one piece kind."""

    width: DimensionRule
    height: DimensionRule


# Front and back panels are a quarter of the bust (or waist) circumference
# plus ease, as long as the garment.
_PANEL = PieceRules(
    width=DimensionRule(("poitrine", "tour_taille"), 100.0, divisor=4.0, with_ease=True),
    height=DimensionRule(("longueur", "longueur_haut"), 60.0),
)

_RULES: MappingProxyType[PieceKind, PieceRules] = MappingProxyType(
    {
        PieceKind.FRONT: _PANEL,
        PieceKind.BACK: _PANEL,
        PieceKind.SLEEVE: PieceRules(
            width=DimensionRule(("tour_poignet",), 20.0, offset=4.0),
            height=DimensionRule(("longueur_manche",), 60.0),
        ),
        PieceKind.WAISTBAND: PieceRules(
            width=DimensionRule(("tour_taille",), 70.0, offset=4.0),
            height=DimensionRule((), 8.0),
        ),
        PieceKind.GENERIC: PieceRules(
            width=DimensionRule((), 30.0),
            height=DimensionRule((), 40.0),
        ),
    }
)


def rules_for(kind: PieceKind) -> PieceRules:
    """Return the dimension rules for *kind*."""
    return _RULES[kind]


def compute_dimensions(
    piece_name: str,
    measurements: Mapping[str, float],
    ease: float = EASE_CM,
) -> PieceDimensions:
    """
    Compute width and height (cm) of *piece_name* from *measurements*.

    Parameters
    ----------
    piece_name:
        Piece name from a garment schema; unknown names use the generic rules.
    measurements:
        Normalised measurements (see ``normalize_measurements``).  Any key may
        be absent.
    ease:
        Allowance added to circumference-derived widths.

    Returns
    -------
    PieceDimensions
        Unrounded width and height.
    """
    rules = rules_for(get_catalog().piece_kind(piece_name))
    return PieceDimensions(
        width=rules.width.apply(measurements, ease),
        height=rules.height.apply(measurements, ease),
    )
