# src/cheers/config.py
from __future__ import annotations
import os
from dataclasses import dataclass
from dotenv import load_dotenv

# Charger le .env depuis la racine du projet
load_dotenv()

@dataclass(frozen=True)
class Settings:
    # Stratégie de lookup : "local" (listes en mémoire) ou "api" (stub distant)
    BRAND_LOOKUP_MODE: str = os.getenv("BRAND_LOOKUP_MODE", "local")
    BRAND_API_URL: str | None = os.getenv("BRAND_API_URL")

    # (optionnel) listes de marques externalisées en JSON
    BRANDS_FILE: str | None = os.getenv("BRANDS_FILE")

    # Fuzzy : seuil des candidats, score "assez bon" pour classer, etc.
    FUZZY_THRESHOLD: float = float(os.getenv("FUZZY_THRESHOLD", "0.35"))
    FUZZY_ACCEPT_SCORE: float = float(os.getenv("FUZZY_ACCEPT_SCORE", "0.25"))
    MIN_MATCH_CHAR_LENGTH: int = int(os.getenv("MIN_MATCH_CHAR_LENGTH", "2"))
    MAX_SUGGESTIONS: int = int(os.getenv("MAX_SUGGESTIONS", "5"))

    # Affichage
    DEFAULT_LANG: str = os.getenv("DEFAULT_LANG", "en")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

settings = Settings()
