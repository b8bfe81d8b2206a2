# src/cheers/i18n.py
from __future__ import annotations
from typing import Any, Dict, Optional
from cheers.brand.brand_models import Category

I18N: Dict[str, Dict[str, Any]] = {
    "en": {
        "title": "Cheers or Tears? 🍺",
        "subtitle": "Find out instantly if a beer belongs to our company.",
        "placeholder": "Type a beer brand (e.g., Corona...)",
        "btnLabel": "Check beer brand",
        "footer": "Crafted for beer lovers who care where their brew — and earnings — come from.",
        "results": {
            "owned": {"title": "Cheers!", "description": "Go for it! 🍻"},
            "unknown": {"title": "Tears...", "description": "Go for tap water, though."},
            "competitor": {"title": "Really?", "description": "How dare you?"},
        },
        "suggestions": "Did you mean:",
        "noMatch": "No close matches. Try another spelling.",
    },
    "pt": {
        "title": "Cheers ou Tears? 🍺",
        "subtitle": "Descubra na hora se a cerveja pertence à nossa companhia.",
        "placeholder": "Digite uma marca (ex.: Corona...)",
        "btnLabel": "Verificar marca",
        "footer": "Feito para quem se importa com a origem da sua cerveja — e dos seus vencimentos.",
        "results": {
            "owned": {"title": "Saúde", "description": "Manda ver! 🍻"},
            "unknown": {"title": "Não é nossa...", "description": "Melhor beber água. 😉"},
            "competitor": {"title": "Sério mesmo?", "description": "Pede pra sair."},
        },
        "suggestions": "Você quis dizer:",
        "noMatch": "Nenhuma sugestão próxima. Tente outra grafia.",
    },
}

LANGUAGES = tuple(I18N)


def pick_language(preferred: Optional[str], default: str = "en") -> str:
    """"pt" si la langue préférée (ou la 1re d'un Accept-Language) commence par pt."""
    fallback = default if default in I18N else "en"
    if not preferred:
        return fallback
    first = preferred.split(",")[0].split(";")[0].strip().lower()
    if first.startswith("pt"):
        return "pt"
    if first.startswith("en"):
        return "en"
    return fallback


def messages(lang: str) -> Dict[str, Any]:
    return I18N.get(lang, I18N["en"])


def result_message(category: Category | str, lang: str = "en") -> Dict[str, str]:
    key = Category(category).value
    return dict(messages(lang)["results"][key])
