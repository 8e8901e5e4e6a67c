"""
Tests for the lookup catalog.

Covers:
  - All YAML tables load without error
  - Every category, piece, and fabric has the expected entries
  - Lookups normalise case and whitespace
  - Unlisted pieces are GENERIC; unknown fabrics have no handling tip
  - Corrupted data raises at load time (not silently at query time)
"""

from __future__ import annotations

import shutil

import pytest

import patterncut.catalog
from patterncut.catalog import CatalogRegistry, get_catalog, normalize_key
from patterncut.config import DATA_DIR
from patterncut.schemas.garment import PieceKind

_FABRICS = ("coton", "soie", "jersey", "jean", "laine", "lin", "velours")


@pytest.fixture(scope="module")
def catalog():
    return get_catalog()


def _copy_data(tmp_path):
    data_dir = tmp_path / "data"
    shutil.copytree(DATA_DIR, data_dir)
    return data_dir


# ── Catalog loads ──────────────────────────────────────────────────────────────


class TestCatalogLoads:
    def test_loads_without_error(self, catalog):
        assert catalog is not None

    def test_public_types_in_all(self):
        for name in ["FabricEntry", "SewingStep", "CatalogRegistry", "get_catalog", "normalize_key"]:
            assert name in patterncut.catalog.__all__, f"{name!r} missing from __all__"

    def test_singleton(self):
        assert get_catalog() is get_catalog()

    def test_tables_are_read_only(self, catalog):
        with pytest.raises(TypeError):
            catalog.categories["new"] = catalog.categories["robe"]  # type: ignore[index]
        with pytest.raises(TypeError):
            catalog.fabrics["new"] = catalog.fabrics["coton"]  # type: ignore[index]

    def test_fresh_instance_equals_singleton(self, catalog):
        fresh = CatalogRegistry(DATA_DIR)
        assert dict(fresh.categories) == dict(catalog.categories)
        assert fresh.sewing_steps == catalog.sewing_steps


# ── Categories ─────────────────────────────────────────────────────────────────


class TestCategories:
    def test_list_categories(self, catalog):
        assert catalog.list_categories() == ["haut", "jupe", "pantalon", "robe"]

    def test_default_category(self, catalog):
        assert catalog.default_category == "robe"

    def test_robe_pieces(self, catalog):
        assert catalog.get_category("robe").pieces == ("devant", "dos", "manche", "doublure")

    def test_haut_pieces(self, catalog):
        assert catalog.get_category("haut").pieces == ("devant", "dos", "manche", "col")

    def test_pantalon_measurements(self, catalog):
        assert catalog.get_category("pantalon").measurements == (
            "tour_taille",
            "tour_hanches",
            "longueur_jambe",
        )

    def test_bottom_flags(self, catalog):
        assert catalog.is_bottom("jupe")
        assert catalog.is_bottom("pantalon")
        assert not catalog.is_bottom("robe")
        assert not catalog.is_bottom("haut")

    def test_unknown_category_is_not_bottom(self, catalog):
        assert not catalog.is_bottom("kimono")
        assert not catalog.is_bottom(None)

    def test_lookup_normalises_key(self, catalog):
        assert catalog.get_category("  JUPE ") == catalog.get_category("jupe")

    def test_unknown_category_returns_none(self, catalog):
        assert catalog.get_category("kimono") is None


# ── Pieces ─────────────────────────────────────────────────────────────────────


class TestPieceKinds:
    @pytest.mark.parametrize(
        "name, kind",
        [
            ("devant", PieceKind.FRONT),
            ("dos", PieceKind.BACK),
            ("manche", PieceKind.SLEEVE),
            ("ceinture", PieceKind.WAISTBAND),
            ("col", PieceKind.GENERIC),
            ("doublure", PieceKind.GENERIC),
        ],
    )
    def test_known_pieces(self, catalog, name, kind):
        assert catalog.piece_kind(name) == kind

    def test_unlisted_piece_is_generic(self, catalog):
        assert catalog.piece_kind("poche") == PieceKind.GENERIC

    def test_every_schema_piece_resolves(self, catalog):
        for schema in catalog.categories.values():
            for name in schema.pieces:
                assert isinstance(catalog.piece_kind(name), PieceKind)


# ── Fabrics ────────────────────────────────────────────────────────────────────


class TestFabrics:
    @pytest.mark.parametrize("fabric", _FABRICS)
    def test_every_fabric_has_both_tips(self, catalog, fabric):
        assert catalog.handling_tip(fabric)
        assert catalog.care_tip(fabric) != catalog.care_fallback

    def test_known_handling_tip(self, catalog):
        assert catalog.handling_tip("soie") == "Utiliser une aiguille fine (70/10)"

    def test_unknown_fabric_has_no_handling_tip(self, catalog):
        assert catalog.handling_tip("polyester") is None

    def test_unknown_fabric_care_fallback(self, catalog):
        assert catalog.care_tip("polyester") == "Suivre les instructions du fabricant"

    def test_none_fabric(self, catalog):
        assert catalog.handling_tip(None) is None
        assert catalog.care_tip(None) == catalog.care_fallback


# ── Sewing order ───────────────────────────────────────────────────────────────


class TestSewingSteps:
    def test_five_steps(self, catalog):
        assert len(catalog.sewing_steps) == 5

    def test_exactly_one_sleeve_step(self, catalog):
        sleeve_steps = [s for s in catalog.sewing_steps if s.sleeves]
        assert [s.text for s in sleeve_steps] == ["Poser les manches"]


# ── normalize_key ──────────────────────────────────────────────────────────────


class TestNormalizeKey:
    def test_strips_and_lowercases(self):
        assert normalize_key("  Coton\n") == "coton"

    def test_none_is_empty(self):
        assert normalize_key(None) == ""


# ── Corrupted data ─────────────────────────────────────────────────────────────


class TestCorruptedData:
    def test_missing_file_raises(self, tmp_path):
        data_dir = _copy_data(tmp_path)
        (data_dir / "fabrics.yaml").unlink()
        with pytest.raises(FileNotFoundError, match="fabrics.yaml"):
            CatalogRegistry(data_dir)

    def test_malformed_yaml_raises_value_error(self, tmp_path):
        data_dir = _copy_data(tmp_path)
        (data_dir / "pieces.yaml").write_text("entries: [unclosed\n", encoding="utf-8")
        with pytest.raises(ValueError, match="Failed to parse"):
            CatalogRegistry(data_dir)

    def test_unknown_default_category_raises(self, tmp_path):
        data_dir = _copy_data(tmp_path)
        path = data_dir / "categories.yaml"
        path.write_text(
            path.read_text(encoding="utf-8").replace(
                "default_category: robe", "default_category: kimono"
            ),
            encoding="utf-8",
        )
        with pytest.raises(ValueError, match="default_category"):
            CatalogRegistry(data_dir)

    def test_unknown_piece_kind_raises(self, tmp_path):
        data_dir = _copy_data(tmp_path)
        path = data_dir / "pieces.yaml"
        path.write_text(
            path.read_text(encoding="utf-8") + "  - id: poche\n    kind: pocket\n",
            encoding="utf-8",
        )
        with pytest.raises(ValueError, match="pocket"):
            CatalogRegistry(data_dir)

    def test_fabric_without_care_tip_raises(self, tmp_path):
        data_dir = _copy_data(tmp_path)
        path = data_dir / "fabrics.yaml"
        path.write_text(
            path.read_text(encoding="utf-8")
            + "\n  - id: satin\n    handling_tip: Épingler dans les marges\n",
            encoding="utf-8",
        )
        with pytest.raises(ValueError, match="satin"):
            CatalogRegistry(data_dir)

    def test_second_sleeve_step_raises(self, tmp_path):
        data_dir = _copy_data(tmp_path)
        path = data_dir / "sewing_order.yaml"
        path.write_text(
            path.read_text(encoding="utf-8") + "  - text: Poser les poignets\n    sleeves: true\n",
            encoding="utf-8",
        )
        with pytest.raises(ValueError, match="sleeve step"):
            CatalogRegistry(data_dir)

    def test_all_problems_reported_together(self, tmp_path):
        data_dir = _copy_data(tmp_path)
        cats = data_dir / "categories.yaml"
        cats.write_text(
            cats.read_text(encoding="utf-8").replace(
                "default_category: robe", "default_category: kimono"
            ),
            encoding="utf-8",
        )
        fabrics = data_dir / "fabrics.yaml"
        fabrics.write_text(
            fabrics.read_text(encoding="utf-8") + "\n  - id: satin\n    care_tip: À sec\n",
            encoding="utf-8",
        )
        with pytest.raises(ValueError) as exc_info:
            CatalogRegistry(data_dir)
        message = str(exc_info.value)
        assert "default_category" in message
        assert "satin" in message
