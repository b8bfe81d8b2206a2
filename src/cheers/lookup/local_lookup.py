# src/cheers/lookup/local_lookup.py
from __future__ import annotations
import logging
from typing import List, Optional
from cheers.brand.brand_models import BrandCatalog, ClassificationResult
from cheers.brand.catalog import DEFAULT_CATALOG
from cheers.brand.classifier import classify
from cheers.brand.scorer import FuzzyIndex
from cheers.brand.suggestions import suggest
from cheers.config import Settings
from .base import BaseBrandLookup

logger = logging.getLogger(__name__)


class LocalBrandLookup(BaseBrandLookup):
    """Mode local : listes en mémoire + index fuzzy construit une seule fois."""

    def __init__(self, catalog: Optional[BrandCatalog] = None, settings: Optional[Settings] = None):
        cfg = settings or Settings()
        self.name = "local"
        self.catalog = catalog or DEFAULT_CATALOG
        self.accept_score = cfg.FUZZY_ACCEPT_SCORE
        self.index = FuzzyIndex(
            self.catalog.records(),
            threshold=cfg.FUZZY_THRESHOLD,
            min_match_char_length=cfg.MIN_MATCH_CHAR_LENGTH,
            limit=cfg.MAX_SUGGESTIONS,
        )

    def classify(self, query: str) -> ClassificationResult:
        return classify(query, self.catalog, index=self.index, accept_score=self.accept_score)

    def suggest(self, query: str) -> List[str]:
        return suggest(query, self.index)
