"""
Assembly Order Generator.

Returns the fixed assembly skeleton from the catalog.  The sleeve step is
dropped for bottom garments (``jupe``, ``pantalon``); the remaining steps
keep their relative order.
"""

from __future__ import annotations

from patterncut.catalog.registry import get_catalog


def generate_sewing_order(category: str | None) -> tuple[str, ...]:
    """Return the ordered assembly steps for *category*."""
    catalog = get_catalog()
    bottom = catalog.is_bottom(category)
    return tuple(step.text for step in catalog.sewing_steps if not (bottom and step.sleeves))
