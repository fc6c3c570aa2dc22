"""Unit tests for terminal prompts."""

import pytest

from conftest import ScriptedPrompter
from gamebracket.config import TournamentConfig
from gamebracket.prompter import Choice, PromptCancelled

CHOICES = [Choice("Azul", "a"), Choice("Brass", "b", "Industrial revolution")]


def test_choose_by_number():
    assert ScriptedPrompter(["2"]).choose("Pick", CHOICES) == "b"


def test_choose_default_and_invalid_answers():
    prompter = ScriptedPrompter(["7", "x", ""])

    assert prompter.choose("Pick", CHOICES, initial=1) == "b"
    assert prompter.output.count("Invalid selection.") == 2
    assert "  2) Brass - Industrial revolution" in prompter.output


def test_choose_cancel():
    with pytest.raises(PromptCancelled):
        ScriptedPrompter(["q"]).choose("Pick", CHOICES)


def test_vote_count_default():
    assert ScriptedPrompter([""]).vote_count("Votes", 0, 8) == 0


def test_end_of_input_cancels():
    with pytest.raises(PromptCancelled):
        ScriptedPrompter([]).vote_count("Votes", 0, 8)


def test_config_paths_and_validation(tmp_path):
    config = TournamentConfig(resources_dir=str(tmp_path))

    assert config.winner_results == tmp_path / "winnerResults.json"
    assert config.input_games_csv.name == "Board Games - Games.csv"
    with pytest.raises(ValueError):
        TournamentConfig(num_voters=0)
