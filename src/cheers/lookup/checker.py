# src/cheers/lookup/checker.py
from __future__ import annotations
import logging
from typing import List
from cheers.brand.brand_models import Category, ClassificationResult
from .base import BaseBrandLookup, BrandLookupUnavailable
from .local_lookup import LocalBrandLookup

logger = logging.getLogger(__name__)


class BrandChecker:
    """Point d'entrée unique pour les appelants (API, CLI).

    `check` passe par la stratégie configurée et retombe sur "unknown" si
    elle est indisponible ; `suggest` reste toujours local.
    """

    def __init__(self, lookup: BaseBrandLookup, local: LocalBrandLookup):
        self.lookup = lookup
        self.local = local

    @property
    def catalog(self):
        return self.local.catalog

    def check(self, query: str) -> ClassificationResult:
        if not query or not query.strip():
            return ClassificationResult(category=Category.UNKNOWN, suggestions=[])
        try:
            return self.lookup.classify(query.strip())
        except BrandLookupUnavailable as e:
            logger.warning(f"🔌 Lookup {self.lookup.name} indisponible ({e}), repli sur 'unknown'")
            return ClassificationResult(category=Category.UNKNOWN, suggestions=[])

    def suggest(self, query: str) -> List[str]:
        return self.local.suggest(query)
