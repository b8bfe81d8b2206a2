# src/cheers/brand/scorer.py
from __future__ import annotations
import math
from typing import Iterable, List, Optional
from rapidfuzz.distance import Levenshtein
from cheers.brand.brand_models import BrandRecord, Candidate

# Au-delà, la requête est tronquée (les noms de marques sont courts)
MAX_PATTERN_LENGTH = 32


def _shares_fragment(pattern: str, window: str, size: int) -> bool:
    return any(pattern[i:i + size] in window for i in range(len(pattern) - size + 1))


def best_window_distance(pattern: str, text: str, max_errors: int, min_fragment: int = 1) -> Optional[int]:
    """Plus petite distance de Levenshtein entre `pattern` et un sous-texte de `text`.

    La position du sous-texte est ignorée. Renvoie None si aucune fenêtre
    ne passe sous `max_errors` en partageant au moins `min_fragment`
    caractères consécutifs avec le pattern.
    """
    m, n = len(pattern), len(text)
    best: Optional[int] = None
    for size in range(max(1, m - max_errors), min(m + max_errors, n) + 1):
        for start in range(0, n - size + 1):
            window = text[start:start + size]
            d = Levenshtein.distance(pattern, window, score_cutoff=max_errors)
            if d > max_errors or (best is not None and d >= best):
                continue
            if not _shares_fragment(pattern, window, min_fragment):
                continue
            best = d
            if best == 0:
                return 0
    return best


def field_norm(text: str) -> float:
    # les noms à plusieurs mots sont pénalisés : score ** (1 / sqrt(nb_mots))
    tokens = len(text.split())
    return round(1 / math.sqrt(tokens), 3) if tokens else 1.0


def fuzzy_score(query: str, name: str, threshold: float = 0.35, min_match_char_length: int = 2) -> Optional[float]:
    """Score dans [0, 1] (0 = parfait) ou None si `name` n'est pas candidat."""
    p = (query or "").strip().lower()[:MAX_PATTERN_LENGTH]
    t = (name or "").lower()
    if not p or not t or len(p) < min_match_char_length:
        return None
    max_errors = int(threshold * len(p))
    d = best_window_distance(p, t, max_errors, min_fragment=min_match_char_length)
    if d is None:
        return None
    score = d / len(p)
    if score > threshold:
        return None
    return score ** field_norm(t) if score > 0 else 0.0


class FuzzyIndex:
    """Index fuzzy sur l'ensemble des marques (nos marques puis concurrents)."""

    def __init__(self, records: Iterable[BrandRecord], threshold: float = 0.35,
                 min_match_char_length: int = 2, limit: int = 5):
        self.records: List[BrandRecord] = list(records)
        self.threshold = threshold
        self.min_match_char_length = min_match_char_length
        self.limit = limit

    def search(self, query: str) -> List[Candidate]:
        if not query or not query.strip():
            return []
        hits = []
        for idx, rec in enumerate(self.records):
            score = fuzzy_score(query, rec.name, self.threshold, self.min_match_char_length)
            if score is not None:
                hits.append((score, idx, rec))
        # tri stable : score croissant puis ordre de l'index
        hits.sort(key=lambda h: (h[0], h[1]))
        return [Candidate(name=r.name, category=r.category, score=s) for s, _, r in hits[: self.limit]]
