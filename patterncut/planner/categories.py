"""
Category Resolver: garment category name → GarmentSchema.

Unknown, empty, or missing categories resolve to the catalog's default
category (``robe``).  Never raises.
"""

from __future__ import annotations

import logging

from patterncut.catalog.registry import get_catalog
from patterncut.schemas.garment import GarmentSchema

logger = logging.getLogger(__name__)


def resolve(category: str | None) -> GarmentSchema:
    """Return the schema for *category*, falling back to the default category."""
    catalog = get_catalog()
    schema = catalog.get_category(category)
    if schema is None:
        logger.debug(
            "Unknown category %r, using default %r", category, catalog.default_category
        )
        schema = catalog.categories[catalog.default_category]
    return schema


def list_categories() -> list[str]:
    """Return a sorted list of all known category keys."""
    return get_catalog().list_categories()
