"""Fabric Care Advisor: fabric name → care sentence, with a generic fallback."""

from __future__ import annotations

from patterncut.catalog.registry import get_catalog


def care_tips(fabric: str | None) -> str:
    """Return the care sentence for *fabric*; never raises."""
    return get_catalog().care_tip(fabric)
