import msgspec
import pytest
from click.testing import CliRunner

from jsonlookup import ui
from jsonlookup.config import Config
from jsonlookup.main import cli

BOOKS = [
    {"author": "Ann", "book": "First"},
    {"author": "Cat", "book": "Second"},
]


@pytest.fixture
def runner():
    return CliRunner()


def test_lookup(runner, json_file):
    path = json_file(BOOKS)
    result = runner.invoke(cli, ["lookup", str(path), "x[1].author"])
    assert result.exit_code == 0
    assert ui.decolorize(result.output).strip() == "Cat"


def test_lookup_as_json(runner, json_file):
    path = json_file({"items": [1, 2]})
    result = runner.invoke(cli, ["lookup", "--json", str(path), "items"])
    assert result.exit_code == 0
    assert msgspec.json.decode(ui.decolorize(result.output)) == [1, 2]


def test_lookup_not_a_string(runner, json_file):
    path = json_file({"items": [1, 2]})
    result = runner.invoke(cli, ["lookup", str(path), "items"])
    assert result.exit_code == 1
    assert "result was not a string: [1,2]" in result.output


def test_lookup_missing_file(runner, tmp_path):
    result = runner.invoke(cli, ["lookup", str(tmp_path / "nope.json"), "x"])
    assert result.exit_code == 1
    assert "jsonlookup:" in result.output


def test_set(runner, json_file):
    path = json_file(BOOKS)
    result = runner.invoke(cli, ["set", str(path), "x[1].author", "Catniss"])
    assert result.exit_code == 0
    assert msgspec.json.decode(path.read_bytes())[1]["author"] == "Catniss"


def test_set_missing_key(runner, json_file):
    path = json_file(BOOKS)
    before = path.read_bytes()
    result = runner.invoke(cli, ["set", str(path), "x[1].title", "Yeah"])
    assert result.exit_code == 1
    assert "key `title` does not exist" in result.output
    assert path.read_bytes() == before


def test_add(runner, json_file):
    path = json_file(BOOKS)
    result = runner.invoke(
        cli,
        ["add", str(path), "x", '{"author": "Catniss", "book": "Yeah"}'],
    )
    assert result.exit_code == 0
    assert msgspec.json.decode(path.read_bytes())[-1] == {"author": "Catniss", "book": "Yeah"}


def test_add_uses_configured_strategy(runner, json_file):
    Config.HOME_PATH.write_text('[add]\nstrategy = "append"\n')
    path = json_file({"items": []})
    result = runner.invoke(cli, ["add", str(path), "items", "1"])
    assert result.exit_code == 0
    assert msgspec.json.decode(path.read_bytes()) == {"items": [1]}


def test_missing_arguments(runner):
    result = runner.invoke(cli, ["set", "books.json", "x[1].author"])
    assert result.exit_code != 0
    assert "Missing argument" in result.output


def test_setup(runner):
    result = runner.invoke(cli, ["setup"])
    assert result.exit_code == 0
    assert Config.HOME_PATH.exists()
    Config.initialize()
    assert Config.get() == Config()
