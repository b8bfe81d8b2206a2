from __future__ import annotations
import json
import logging
import re
import unicodedata
from pathlib import Path
from typing import Optional
from pydantic import ValidationError
from cheers.brand.brand_models import BrandCatalog

logger = logging.getLogger(__name__)

# tout ce qui n'est ni lettre, ni chiffre, ni espace (Unicode)
_NON_ALNUM = re.compile(r"[^\w\s]|_")
_SPACES = re.compile(r"\s+")


def normalize(s: Optional[str]) -> str:
    """Minuscules, sans accents ni ponctuation, espaces compactés."""
    if not s:
        return ""
    # décomposition NFD puis retrait des marques diacritiques ; les lettres non latines restent
    decomposed = unicodedata.normalize("NFD", s.lower())
    out = "".join(c for c in decomposed if not unicodedata.combining(c))
    out = _NON_ALNUM.sub(" ", out)
    return _SPACES.sub(" ", out).strip()


OWNED_BRANDS = (
    "Budweiser",
    "Corona",
    "Stella Artois",
    "Michelob",
    "Goose Island",
    "Hoegaarden",
    "Modelo",
    "Shock Top",
)

COMPETITOR_BRANDS = (
    "Heineken",
    "Amstel",
    "Lagunitas",
    "Dos Equis",
    "Pacifico",
)

# alias / variantes -> nom canonique
ALIASES = {
    "michelob ultra": "Michelob",
    "stella": "Stella Artois",
    "modelo especial": "Modelo",
    "corona extra": "Corona",
}

DEFAULT_CATALOG = BrandCatalog(owned=OWNED_BRANDS, competitors=COMPETITOR_BRANDS, aliases=ALIASES)


def resolve_alias(q_norm: str, catalog: BrandCatalog) -> Optional[str]:
    """Nom canonique si la requête normalisée est un alias connu, sinon None."""
    return catalog.aliases.get(q_norm)


def load_catalog(path: str | Path) -> BrandCatalog:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Fichier de marques introuvable : {p}")
    with p.open("r", encoding="utf-8") as f:
        data = json.load(f)
    try:
        catalog = BrandCatalog.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Fichier de marques invalide ({p}) : {e}") from e
    logger.info(f"📦 {len(catalog.owned)} marques + {len(catalog.competitors)} concurrents chargés depuis {p}")
    return catalog


def get_catalog(settings) -> BrandCatalog:
    if settings.BRANDS_FILE:
        return load_catalog(settings.BRANDS_FILE)
    return DEFAULT_CATALOG
