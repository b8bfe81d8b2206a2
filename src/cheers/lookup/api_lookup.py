# src/cheers/lookup/api_lookup.py
from __future__ import annotations
from typing import List, Optional
from cheers.brand.brand_models import ClassificationResult
from .base import BaseBrandLookup, BrandLookupUnavailable


class ApiBrandLookup(BaseBrandLookup):
    """Lookup distant (GET {base_url}/brand?q=...). Pas encore implémenté :
    chaque appel lève BrandLookupUnavailable, l'appelant retombe sur "unknown".
    """

    def __init__(self, base_url: Optional[str] = None):
        self.base_url = base_url
        self.name = f"api:{self.base_url or '-'}"

    def classify(self, query: str) -> ClassificationResult:
        raise BrandLookupUnavailable("API not implemented")

    def suggest(self, query: str) -> List[str]:
        raise BrandLookupUnavailable("API not implemented")
