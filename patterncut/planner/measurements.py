"""
Measurement normalisation at the planner boundary.

Callers hand over whatever the transport decoded: ints, floats, numeric
strings, or junk.  ``normalize_measurements`` keeps only finite, positive
numbers of plausible size and drops everything else so the documented
per-piece fallback applies instead of NaN, an overflowing area, or a
negative width leaking into the plan.

Policy
------
- ``None`` or a non-mapping → empty set.
- Keys are stripped and lower-cased (``" Poitrine "`` → ``"poitrine"``),
  like category and fabric names.
- int / float values and numeric strings (``"92"``, ``" 92.5 "``) are kept as float.
- bool, other types, unparsable strings, NaN, ±inf, zero, negatives and
  values above ``MAX_MEASUREMENT_CM`` are dropped and logged at WARNING.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from types import MappingProxyType

from patterncut.catalog.registry import normalize_key
from patterncut.config import MAX_MEASUREMENT_CM

logger = logging.getLogger(__name__)


def _coerce(value: object) -> float | None:
    """Return *value* as a usable measurement, or None if it must be dropped."""
    # bool is an int subclass; True is not 1 cm.
    if isinstance(value, bool):
        return None
    try:
        if isinstance(value, (int, float)):
            number = float(value)
        elif isinstance(value, str):
            number = float(value.strip())
        else:
            return None
    except (ValueError, OverflowError):
        return None
    if not math.isfinite(number) or number <= 0 or number > MAX_MEASUREMENT_CM:
        return None
    return number


def normalize_measurements(raw: object) -> MappingProxyType[str, float]:
    """
    Return a read-only copy of *raw* holding only valid measurements.

    Parameters
    ----------
    raw:
        Caller-supplied mapping of measurement name to value (cm).

    Returns
    -------
    MappingProxyType[str, float]
        Normalised measurement name → positive finite float.  Never raises.
    """
    if not isinstance(raw, Mapping):
        if raw is not None:
            logger.warning(
                "Measurements must be a mapping, got %s; using defaults", type(raw).__name__
            )
        return MappingProxyType({})

    result: dict[str, float] = {}
    for key, value in raw.items():
        number = _coerce(value)
        if number is None:
            if value is not None:
                logger.warning("Dropping invalid measurement %r=%r", key, value)
            continue
        result[normalize_key(key)] = number
    return MappingProxyType(result)
