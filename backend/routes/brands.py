# backend/routes/brands.py
from typing import Optional

from fastapi import APIRouter, Depends, Header, HTTPException, Query

from cheers.config import settings
from cheers.i18n import pick_language, result_message
from cheers.lookup import BrandChecker

from ..deps import get_checker
from ..error_handler import enhanced_error_handler
from ..schema import CatalogOut, CheckIn, CheckOut, SuggestOut

router = APIRouter(prefix="/brands", tags=["brands"])


def _lang(lang: Optional[str], accept_language: Optional[str]) -> str:
    return pick_language(lang or accept_language, default=settings.DEFAULT_LANG)


@router.get("", response_model=CatalogOut)
def list_brands(checker: BrandChecker = Depends(get_checker)):
    c = checker.catalog
    return CatalogOut(owned=list(c.owned), competitors=list(c.competitors), aliases=dict(c.aliases))


@router.post("/check", response_model=CheckOut)
@enhanced_error_handler
def check_brand(
    body: CheckIn,
    lang: Optional[str] = Query(None),
    accept_language: Optional[str] = Header(None),
    checker: BrandChecker = Depends(get_checker),
):
    query = body.query.strip()
    if not query:
        raise HTTPException(status_code=400, detail="Empty query.")
    result = checker.check(query)
    lg = _lang(lang, accept_language)
    msg = result_message(result.category, lg)
    return CheckOut(
        query=query,
        category=result.category,
        suggestions=result.suggestions,
        title=msg["title"],
        description=msg["description"],
        lang=lg,
    )


@router.get("/suggest", response_model=SuggestOut)
@enhanced_error_handler
def suggest_brands(q: str = Query("", max_length=200), checker: BrandChecker = Depends(get_checker)):
    return SuggestOut(query=q, suggestions=checker.suggest(q))
