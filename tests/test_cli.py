import json

from typer.testing import CliRunner

from cheers.cli import app

runner = CliRunner()


def test_check_owned():
    result = runner.invoke(app, ["check", "Budweiser", "--lang", "en"])
    assert result.exit_code == 0
    assert "Cheers!" in result.output


def test_check_json_output():
    result = runner.invoke(app, ["check", "Heineken", "--json"])
    assert result.exit_code == 0
    assert json.loads(result.output.strip().splitlines()[-1]) == {"category": "competitor", "suggestions": []}


def test_check_portuguese_with_suggestions():
    result = runner.invoke(app, ["check", "Amstar", "--lang", "pt"])
    assert result.exit_code == 0
    assert "Não é nossa..." in result.output
    assert "Você quis dizer:" in result.output
    assert "Amstel" in result.output


def test_check_blank_query_fails():
    result = runner.invoke(app, ["check", "   "])
    assert result.exit_code == 1


def test_suggest_and_brands():
    result = runner.invoke(app, ["suggest", "Bud"])
    assert result.exit_code == 0
    assert result.output.splitlines()[0] == "Budweiser"

    result = runner.invoke(app, ["brands"])
    assert result.exit_code == 0
    assert "Heineken" in result.output
    assert "stella -> Stella Artois" in result.output
