# src/cheers/cli.py
import json
import logging
from typing import Optional
import typer
from .brand.brand_models import Category
from .config import settings
from .i18n import messages, pick_language, result_message
from .lookup import build_checker

app = typer.Typer(help="Cheers or Tears : vérifie si une marque de bière est à nous.")

_ICONS = {Category.OWNED: "🍻", Category.COMPETITOR: "⚠️ ", Category.UNKNOWN: "💧"}


def _checker():
    try:
        return build_checker(settings)
    except (FileNotFoundError, ValueError) as e:
        typer.echo(f"❌ {e}", err=True)
        raise typer.Exit(code=1)


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Logs en DEBUG")):
    logging.basicConfig(level=logging.DEBUG if verbose else settings.LOG_LEVEL)


@app.command()
def check(
    query: str = typer.Argument(..., help="Nom de marque saisi"),
    lang: Optional[str] = typer.Option(None, "--lang", help="en | pt"),
    as_json: bool = typer.Option(False, "--json", help="Sortie JSON brute"),
):
    """Classe une marque : owned, competitor ou unknown."""
    if not query.strip():
        typer.echo("⚠️  Saisie vide.", err=True)
        raise typer.Exit(code=1)

    result = _checker().check(query)
    if as_json:
        typer.echo(json.dumps(result.model_dump(mode="json"), ensure_ascii=False))
        return

    lg = pick_language(lang, default=settings.DEFAULT_LANG)
    msg = result_message(result.category, lg)
    typer.echo(f"{_ICONS[result.category]} {msg['title']} {msg['description']}")
    if result.suggestions:
        typer.echo(messages(lg)["suggestions"])
        for s in result.suggestions:
            typer.echo(f"  - {s}")


@app.command()
def suggest(query: str = typer.Argument(..., help="Début de saisie")):
    """Suggestions d'auto-complétion (max 5, la meilleure d'abord)."""
    out = _checker().suggest(query)
    if not out:
        typer.echo(messages(settings.DEFAULT_LANG)["noMatch"])
        return
    for s in out:
        typer.echo(s)


@app.command()
def brands():
    """Affiche les listes de référence et les alias."""
    catalog = _checker().catalog
    typer.echo("Owned:")
    for n in catalog.owned:
        typer.echo(f"  - {n}")
    typer.echo("Competitors:")
    for n in catalog.competitors:
        typer.echo(f"  - {n}")
    typer.echo("Aliases:")
    for alias, canonical in catalog.aliases.items():
        typer.echo(f"  {alias} -> {canonical}")


if __name__ == "__main__":
    app()
