# src/cheers/brand/suggestions.py
from __future__ import annotations
from typing import List, Optional
from cheers.brand.scorer import FuzzyIndex


def suggest(query: str, index: FuzzyIndex) -> List[str]:
    """Auto-complétion pendant la frappe (palier fuzzy seul)."""
    q = (query or "").strip()
    if not q:
        return []
    return [c.name for c in index.search(q)]


class SuggestionFeed:
    """Flux de suggestions d'un client, ordonné par numéro de séquence.

    Chaque frappe porte un `seq` croissant ; une réponse plus ancienne que
    la dernière acceptée est jetée au lieu d'écraser la liste affichée.
    """

    def __init__(self, index: FuzzyIndex):
        self.index = index
        self.latest_seq = -1

    def is_stale(self, seq: int) -> bool:
        return seq < self.latest_seq

    def update(self, seq: int, query: str) -> Optional[List[str]]:
        if self.is_stale(seq):
            return None
        self.latest_seq = seq
        return suggest(query, self.index)
