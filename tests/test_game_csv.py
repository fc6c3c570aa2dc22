"""Unit tests for the game list CSV."""

import pandas as pd
import pytest

from gamebracket.data.game_csv import read_games, write_name_table, write_rows
from gamebracket.models.game import GameCategory, GameSize


def test_read_games(tmp_path):
    path = tmp_path / "games.csv"
    path.write_text(
        "Title,Category,Size,Not Game,Expansion,Stolen\n"
        "Azul,Bracket,Small,FALSE,FALSE,FALSE\n"
        "Wingspan: European Expansion,Keep,Tiny,FALSE,TRUE,FALSE\n"
        "Dice Tower,Keep,,TRUE,FALSE,TRUE\n"
    )

    games = read_games(path)

    assert [g.title for g in games] == ["Azul", "Wingspan: European Expansion", "Dice Tower"]
    assert games[0].category is GameCategory.BRACKET
    assert games[0].size is GameSize.SMALL
    assert games[1].expansion and not games[1].not_game
    assert games[2].not_game and games[2].stolen
    assert games[2].size is None


def test_read_games_missing_columns(tmp_path):
    path = tmp_path / "games.csv"
    path.write_text("Title,Size\nAzul,Small\n")

    with pytest.raises(ValueError, match="Category"):
        read_games(path)


def test_write_rows_and_name_table(tmp_path):
    rows_path = tmp_path / "out" / "details.csv"
    names_path = tmp_path / "out" / "mechanics.csv"

    write_rows(rows_path, [{"Title": "Azul", "Min Players": "2"}])
    write_name_table(names_path, [("Azul", "Pattern Building"), ("Azul", "Tile Placement")], "Mechanic")

    assert pd.read_csv(rows_path, dtype=str).to_dict(orient="records") == [{"Title": "Azul", "Min Players": "2"}]
    mechanics = pd.read_csv(names_path)
    assert list(mechanics.columns) == ["Title", "Mechanic"]
    assert len(mechanics) == 2
