"""Unit tests for JSON state files."""

import json

from conftest import voted
from gamebracket.data.loader import DataLoader
from gamebracket.models.results import BracketResults, GameIdName, Pairing


def test_missing_files(tmp_path):
    assert DataLoader.load_pairings(tmp_path / "nope.json") is None
    assert DataLoader.load_opening_results(tmp_path / "nope.json") is None
    assert DataLoader.load_bracket_results(tmp_path / "nope.json") == BracketResults()


def test_pairings_round_trip(tmp_path):
    path = tmp_path / "resources" / "basePairings.json"
    pairings = [
        Pairing(GameIdName("a", "Azul"), GameIdName("b", "Brass")),
        Pairing(GameIdName("c", "Catan"), GameIdName.placeholder()),
    ]

    DataLoader.save_pairings(pairings, path)

    assert DataLoader.load_pairings(path) == pairings
    assert "\t" in path.read_text()


def test_bracket_results_file_layout(tmp_path):
    path = tmp_path / "winnerResults.json"
    results = BracketResults(round1=[voted("a", "b", 5)])

    DataLoader.save_bracket_results(results, path)

    data = json.loads(path.read_text())
    assert list(data) == ["round1"]
    assert data["round1"][0]["game1"] == {"id": "a", "name": "a", "votes": 5, "tie_break": True, "num_voters": 8}
    assert DataLoader.load_bracket_results(path) == results
