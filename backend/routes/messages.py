# backend/routes/messages.py
from fastapi import APIRouter, HTTPException

from cheers.i18n import I18N

router = APIRouter(prefix="/i18n", tags=["i18n"])


@router.get("/{lang}")
def get_messages(lang: str):
    """Textes d'affichage (en | pt) pour le front."""
    if lang not in I18N:
        raise HTTPException(status_code=404, detail=f"Unknown language: {lang}")
    return I18N[lang]
