# src/cheers/brand/classifier.py
from __future__ import annotations
import logging
from typing import Optional
from cheers.brand.brand_models import BrandCatalog, Category, ClassificationResult
from cheers.brand.catalog import normalize, resolve_alias
from cheers.brand.scorer import FuzzyIndex

logger = logging.getLogger(__name__)

ACCEPT_SCORE = 0.25


def comparison_key(query: str, catalog: BrandCatalog) -> str:
    """Requête normalisée, remplacée par le nom canonique si c'est un alias."""
    q_norm = normalize(query)
    canonical = resolve_alias(q_norm, catalog)
    return normalize(canonical) if canonical else q_norm


def match_exact(key: str, catalog: BrandCatalog) -> Optional[Category]:
    if any(normalize(n) == key for n in catalog.owned):
        return Category.OWNED
    if any(normalize(n) == key for n in catalog.competitors):
        return Category.COMPETITOR
    return None


def match_substring(key: str, catalog: BrandCatalog) -> Optional[Category]:
    # pas de longueur minimale : "o" est contenu dans "corona"
    if any(key in normalize(n) for n in catalog.owned):
        return Category.OWNED
    if any(key in normalize(n) for n in catalog.competitors):
        return Category.COMPETITOR
    return None


def classify(query: str, catalog: BrandCatalog, index: Optional[FuzzyIndex] = None,
             accept_score: float = ACCEPT_SCORE) -> ClassificationResult:
    """Classe une saisie libre : exact -> inclusion -> fuzzy -> inconnu.

    Le premier palier qui décide gagne ; à chaque palier nos marques passent
    avant les concurrents. Seuls les paliers exact et inclusion utilisent
    la substitution d'alias, le fuzzy travaille sur la saisie brute.
    """
    key = comparison_key(query, catalog)
    if not key:
        return ClassificationResult(category=Category.UNKNOWN, suggestions=[])

    # 1) exact
    cat = match_exact(key, catalog)
    if cat:
        logger.debug(f"exact: {query!r} -> {cat.value}")
        return ClassificationResult(category=cat, suggestions=[])

    # 2) inclusion (partielle)
    cat = match_substring(key, catalog)
    if cat:
        logger.debug(f"substring: {query!r} -> {cat.value}")
        return ClassificationResult(category=cat, suggestions=[])

    # 3) fuzzy
    if index is None:
        index = FuzzyIndex(catalog.records())
    candidates = index.search(query.strip())
    names = [c.name for c in candidates]
    if candidates and candidates[0].score <= accept_score:
        best = candidates[0]
        logger.debug(f"fuzzy: {query!r} -> {best.name} ({best.score:.3f})")
        return ClassificationResult(category=best.category, suggestions=names[1:])

    # 4) rien trouvé
    return ClassificationResult(category=Category.UNKNOWN, suggestions=names)
