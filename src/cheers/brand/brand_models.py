from __future__ import annotations
import logging
from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Mapping, Tuple
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

logger = logging.getLogger(__name__)


class Category(str, Enum):
    OWNED = "owned"
    COMPETITOR = "competitor"
    UNKNOWN = "unknown"


class BrandRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    category: Category


class BrandCatalog(BaseModel):
    """Listes de référence (marques à nous, concurrents) + table d'alias.

    Construite une fois au démarrage puis passée au classifieur. Les clés
    d'alias sont normalisées à la construction.
    """
    model_config = ConfigDict(frozen=True)

    owned: Tuple[str, ...] = ()
    competitors: Tuple[str, ...] = ()
    aliases: Mapping[str, str] = Field(default_factory=dict, validate_default=True)

    @field_validator("owned", "competitors")
    @classmethod
    def _strip_names(cls, names: Tuple[str, ...]) -> Tuple[str, ...]:
        return tuple(n.strip() for n in names if n and n.strip())

    @field_validator("aliases")
    @classmethod
    def _normalize_alias_keys(cls, aliases: Mapping[str, str]) -> Mapping[str, str]:
        from cheers.brand.catalog import normalize
        out: Dict[str, str] = {}
        for alias, canonical in aliases.items():
            key = normalize(alias)
            if key:
                out[key] = canonical
        # lecture seule : le catalogue par défaut est partagé par tous les lookups
        return MappingProxyType(out)

    @model_validator(mode="after")
    def _warn_on_overlap(self) -> "BrandCatalog":
        from cheers.brand.catalog import normalize
        owned = {normalize(n) for n in self.owned}
        both = sorted(n for n in self.competitors if normalize(n) in owned)
        if both:
            # l'ordre d'évaluation fait gagner "owned"
            logger.warning(f"⚠️ Marques présentes dans les deux listes : {both}")
        return self

    def records(self) -> List[BrandRecord]:
        """Index combiné : d'abord nos marques, puis les concurrents."""
        return (
            [BrandRecord(name=n, category=Category.OWNED) for n in self.owned]
            + [BrandRecord(name=n, category=Category.COMPETITOR) for n in self.competitors]
        )


class Candidate(BaseModel):
    name: str
    category: Category
    score: float  # 0 = parfait, 1 = rien à voir


class ClassificationResult(BaseModel):
    category: Category
    suggestions: List[str] = []
