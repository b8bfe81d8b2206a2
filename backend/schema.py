# backend/schema.py
from __future__ import annotations
from typing import Dict, List
from pydantic import BaseModel, Field
from cheers.brand.brand_models import Category


# ---------- Vérification ----------
class CheckIn(BaseModel):
    query: str = Field(..., description="Nom de marque saisi par l'utilisateur")


class CheckOut(BaseModel):
    query: str
    category: Category
    suggestions: List[str] = Field(default_factory=list, description="Au plus 5, la meilleure d'abord")
    title: str
    description: str
    lang: str = "en"


# ---------- Auto-complétion ----------
class SuggestOut(BaseModel):
    query: str
    suggestions: List[str] = Field(default_factory=list)


# ---------- Catalogue ----------
class CatalogOut(BaseModel):
    owned: List[str]
    competitors: List[str]
    aliases: Dict[str, str]
