from cheers.brand.brand_models import Category
from cheers.i18n import I18N, messages, pick_language, result_message


def test_pick_language():
    assert pick_language("pt-BR,pt;q=0.9,en;q=0.8") == "pt"
    assert pick_language("en-US") == "en"
    assert pick_language("fr-FR") == "en"
    assert pick_language(None, default="pt") == "pt"
    assert pick_language("de", default="xx") == "en"


def test_result_messages_cover_every_category():
    for lang in I18N:
        for cat in Category:
            msg = result_message(cat, lang)
            assert msg["title"] and msg["description"]
    assert result_message("unknown", "pt")["title"] == "Não é nossa..."


def test_unknown_language_falls_back_to_english():
    assert messages("xx") is I18N["en"]
