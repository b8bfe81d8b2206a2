# src/cheers/lookup/__init__.py
from __future__ import annotations
from typing import Optional
from cheers.brand.brand_models import BrandCatalog
from cheers.brand.catalog import get_catalog
from cheers.config import Settings
from .api_lookup import ApiBrandLookup
from .base import BaseBrandLookup, BrandLookupUnavailable
from .checker import BrandChecker
from .local_lookup import LocalBrandLookup


def get_brand_lookup(mode: Optional[str] = None, catalog: Optional[BrandCatalog] = None,
                     settings: Optional[Settings] = None) -> BaseBrandLookup:
    """
    Factory :
    - "local" (défaut) : classification en mémoire.
    - "api" : stub distant, toujours indisponible pour l'instant.
    """
    cfg = settings or Settings()
    m = (mode or cfg.BRAND_LOOKUP_MODE or "local").lower()
    if m == "local":
        return LocalBrandLookup(catalog or get_catalog(cfg), cfg)
    if m == "api":
        return ApiBrandLookup(cfg.BRAND_API_URL)
    raise ValueError(f"Mode de lookup non supporté: {m}")


def build_checker(settings: Optional[Settings] = None, catalog: Optional[BrandCatalog] = None) -> BrandChecker:
    cfg = settings or Settings()
    cat = catalog or get_catalog(cfg)
    local = LocalBrandLookup(cat, cfg)
    lookup = local if cfg.BRAND_LOOKUP_MODE.lower() == "local" else get_brand_lookup(catalog=cat, settings=cfg)
    return BrandChecker(lookup, local)


__all__ = [
    "ApiBrandLookup",
    "BaseBrandLookup",
    "BrandChecker",
    "BrandLookupUnavailable",
    "LocalBrandLookup",
    "build_checker",
    "get_brand_lookup",
]
