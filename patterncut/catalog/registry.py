"""
Lookup catalog: loads every static table from YAML at startup, validates
cross-references, and exposes a read-only query API.

The catalog is a module-level singleton; call get_catalog() to obtain it.
All tables are loaded and validated once at import time.  Nothing writes to
the catalog after startup.

Tables
------
categories.yaml    — category → GarmentSchema, plus the default category
pieces.yaml        — piece name → PieceKind (unlisted names are GENERIC)
fabrics.yaml       — fabric → handling tip and care tip, plus the care fallback
sewing_order.yaml  — assembly skeleton, with the sleeve step flagged

Lookup keys from callers are normalised (stripped, lower-cased) before
matching; the YAML ids are stored lower-case.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, Optional, cast

import yaml

from patterncut.config import DATA_DIR
from patterncut.schemas.garment import GarmentSchema, PieceKind

logger = logging.getLogger(__name__)


def normalize_key(value: object) -> str:
    """Return the lookup form of a caller-supplied key (``None`` → ``""``)."""
    if value is None:
        return ""
    return str(value).strip().lower()


@dataclass(frozen=True)
class FabricEntry:
    """Handling and care sentences for one fabric."""

    id: str
    handling_tip: str
    care_tip: str


@dataclass(frozen=True)
class SewingStep:
    """One assembly step; ``sleeves`` marks the step skipped for bottom garments."""

    text: str
    sleeves: bool = False


class CatalogRegistry:
    """
    Read-only registry of all lookup tables.

    All public dict attributes are wrapped in MappingProxyType after loading
    and are immutable for the lifetime of the registry instance.

    Instantiate directly to use a custom data directory (e.g. in tests);
    otherwise use get_catalog() for the module singleton.
    """

    def __init__(self, data_dir: Path = DATA_DIR) -> None:
        self._data_dir = data_dir

        # Type annotations only; actual assignment happens in _load_*
        self.categories: MappingProxyType[str, GarmentSchema]
        self.default_category: str
        self.piece_kinds: MappingProxyType[str, PieceKind]
        self.fabrics: MappingProxyType[str, FabricEntry]
        self.care_fallback: str
        self.sewing_steps: tuple[SewingStep, ...]

        self._load_all()
        self._validate_cross_references()

    # ── Loading ────────────────────────────────────────────────────────────────

    def _load_yaml(self, filename: str) -> dict[str, Any]:
        path = self._data_dir / filename
        try:
            with open(path, encoding="utf-8") as f:
                return cast(dict[str, Any], yaml.safe_load(f))
        except FileNotFoundError:
            raise FileNotFoundError(f"Catalog data file not found: {path}") from None
        except yaml.YAMLError as exc:
            raise ValueError(f"Failed to parse catalog data file {path}: {exc}") from exc

    def _load_all(self) -> None:
        self._load_categories()
        self._load_pieces()
        self._load_fabrics()
        self._load_sewing_order()
        logger.debug(
            "Loaded catalog from %s: %d categories, %d pieces, %d fabrics",
            self._data_dir,
            len(self.categories),
            len(self.piece_kinds),
            len(self.fabrics),
        )

    def _load_categories(self) -> None:
        data = self._load_yaml("categories.yaml")
        result: dict[str, GarmentSchema] = {}
        for entry in data["entries"]:
            key = normalize_key(entry["id"])
            result[key] = GarmentSchema(
                category=key,
                pieces=tuple(entry.get("pieces", [])),
                measurements=tuple(entry.get("measurements", [])),
                bottom=bool(entry.get("bottom", False)),
            )
        self.categories = MappingProxyType(result)
        self.default_category = normalize_key(data["default_category"])

    def _load_pieces(self) -> None:
        data = self._load_yaml("pieces.yaml")
        result: dict[str, PieceKind] = {}
        for entry in data["entries"]:
            try:
                kind = PieceKind(entry["kind"])
            except ValueError:
                raise ValueError(
                    f"pieces entry {entry['id']!r}: unknown kind {entry['kind']!r}"
                ) from None
            result[normalize_key(entry["id"])] = kind
        self.piece_kinds = MappingProxyType(result)

    def _load_fabrics(self) -> None:
        data = self._load_yaml("fabrics.yaml")
        result: dict[str, FabricEntry] = {}
        for entry in data["entries"]:
            key = normalize_key(entry["id"])
            result[key] = FabricEntry(
                id=key,
                handling_tip=(entry.get("handling_tip") or "").strip(),
                care_tip=(entry.get("care_tip") or "").strip(),
            )
        self.fabrics = MappingProxyType(result)
        self.care_fallback = (data.get("care_fallback") or "").strip()

    def _load_sewing_order(self) -> None:
        data = self._load_yaml("sewing_order.yaml")
        self.sewing_steps = tuple(
            SewingStep(text=step["text"].strip(), sleeves=bool(step.get("sleeves", False)))
            for step in data["steps"]
        )

    # ── Cross-reference validation ─────────────────────────────────────────────

    def _validate_cross_references(self) -> None:
        """
        Run at startup.  Raises ValueError listing all problems found if a
        table references something undefined or violates a structural invariant.
        """
        errors: list[str] = []
        self._check_categories(errors)
        self._check_fabrics(errors)
        self._check_sewing_order(errors)
        if errors:
            raise ValueError(
                "Catalog cross-reference validation failed:\n"
                + "\n".join(f"  • {e}" for e in errors)
            )

    def _check_categories(self, errors: list[str]) -> None:
        if self.default_category not in self.categories:
            errors.append(
                f"default_category {self.default_category!r} is not defined in categories"
            )
        for key, schema in self.categories.items():
            if not schema.pieces:
                errors.append(f"category {key!r}: lists no pieces")
            if len(set(schema.pieces)) != len(schema.pieces):
                errors.append(f"category {key!r}: lists a piece more than once")

    def _check_fabrics(self, errors: list[str]) -> None:
        if not self.care_fallback:
            errors.append("fabrics: care_fallback is empty")
        for key, entry in self.fabrics.items():
            if not entry.handling_tip:
                errors.append(f"fabric {key!r}: handling_tip is empty")
            if not entry.care_tip:
                errors.append(f"fabric {key!r}: care_tip is empty")

    def _check_sewing_order(self, errors: list[str]) -> None:
        sleeve_steps = [s for s in self.sewing_steps if s.sleeves]
        if len(sleeve_steps) != 1:
            errors.append(
                f"sewing_order: expected exactly one sleeve step, found {len(sleeve_steps)}"
            )

    # ── Query API ──────────────────────────────────────────────────────────────

    def get_category(self, category: object) -> Optional[GarmentSchema]:
        """Return the schema for *category*, or None if it is not catalogued."""
        return self.categories.get(normalize_key(category))

    def list_categories(self) -> list[str]:
        """Return a sorted list of all catalogued category keys."""
        return sorted(self.categories.keys())

    def piece_kind(self, piece_name: object) -> PieceKind:
        """Return the dispatch kind for *piece_name*; unlisted names are GENERIC."""
        return self.piece_kinds.get(normalize_key(piece_name), PieceKind.GENERIC)

    def handling_tip(self, fabric: object) -> Optional[str]:
        """Return the handling tip for *fabric*, or None if it is not catalogued."""
        entry = self.fabrics.get(normalize_key(fabric))
        return entry.handling_tip if entry else None

    def care_tip(self, fabric: object) -> str:
        """Return the care sentence for *fabric*, or the generic fallback."""
        entry = self.fabrics.get(normalize_key(fabric))
        return entry.care_tip if entry else self.care_fallback

    def is_bottom(self, category: object) -> bool:
        """True if *category* is a catalogued bottom garment (skirt, trousers)."""
        schema = self.get_category(category)
        return schema.bottom if schema else False


# ── Module-level singleton ─────────────────────────────────────────────────────
#
# Initialized eagerly at import time so there is no lazy-init race condition
# in concurrent contexts. The catalog is read-only after construction, so
# sharing it across threads is safe.

_catalog: CatalogRegistry = CatalogRegistry()


def get_catalog() -> CatalogRegistry:
    """Return the module-level catalog singleton."""
    return _catalog
