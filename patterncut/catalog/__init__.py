from .registry import CatalogRegistry, FabricEntry, SewingStep, get_catalog, normalize_key

__all__ = [
    # Entry types (frozen, loaded from YAML)
    "FabricEntry",
    "SewingStep",
    # Registry
    "CatalogRegistry",
    "get_catalog",
    "normalize_key",
]
