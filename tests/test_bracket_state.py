"""Unit tests for bracket round advancement."""

import copy

import pytest

from conftest import voted
from gamebracket.errors import (
    BracketCompleteError,
    IncompleteResultError,
    MissingSeedDataError,
    UndefinedGameError,
)
from gamebracket.models.results import BracketResults, GameIdName, Pairing
from gamebracket.tournament.bracket_state import BracketStateMachine
from gamebracket.tournament.voting import apply_bye


def round1_results(count=22):
    """Round of voted matchups where game1 ("wN") always beats game2 ("lN")."""
    return [voted(f"w{i}", f"l{i}", 6) for i in range(count)]


def vote_round(matchups, in_loser_bracket=False):
    """Vote every matchup so that game1 wins the vote."""
    for result in matchups:
        if result.is_bye:
            apply_bye(result, 8, in_loser_bracket)
        else:
            for side, votes, flag in ((result.game1, 6, True), (result.game2, 2, False)):
                side.votes, side.tie_break, side.num_voters = votes, flag, 8


def no_seed(in_loser_bracket):
    return None


@pytest.fixture
def machine():
    return BracketStateMachine(no_seed)


def test_round1_comes_from_seed_pairings():
    calls = []
    seeds = [Pairing(GameIdName("a", "A"), GameIdName("b", "B"))]

    def loader(in_loser_bracket):
        calls.append(in_loser_bracket)
        return seeds

    results = BracketResults()
    matchups = BracketStateMachine(loader).advance(results, in_loser_bracket=True)

    assert calls == [True]
    assert results.round1 is matchups
    assert matchups[0].game1.id == "a"
    assert matchups[0].game1.votes is None


def test_missing_seed_pairings_fail(machine):
    with pytest.raises(MissingSeedDataError):
        machine.advance(BracketResults())


def test_round2_has_byes_for_slots_0_and_11(machine):
    """22 round 1 results become 10 contested matchups plus 2 byes."""
    results = BracketResults(round1=round1_results())

    round2 = machine.advance(results)

    assert len(round2) == 12
    assert results.latest_round() == "round2"
    assert [i for i, r in enumerate(round2) if r.is_bye] == [0, 6]
    assert round2[0].game1.id == "w0"
    assert round2[0].game2.id == "" and round2[0].game2.name == ""
    assert round2[6].game1.id == "w11"
    assert (round2[1].game1.id, round2[1].game2.id) == ("w1", "w2")
    assert (round2[11].game1.id, round2[11].game2.id) == ("w20", "w21")


def test_loser_bracket_advances_vote_losers(machine):
    results = BracketResults(round1=round1_results())

    round2 = machine.advance(results, in_loser_bracket=True)

    assert round2[0].game1.id == "l0"
    assert (round2[1].game1.id, round2[1].game2.id) == ("l1", "l2")


def test_round3_byes(machine):
    results = BracketResults(round1=round1_results(), round2=round1_results(12))

    round3 = machine.advance(results)

    assert len(round3) == 8
    assert [i for i, r in enumerate(round3) if r.is_bye] == [1, 2, 5, 6]
    assert [r.game1.id for r in round3] == ["w0", "w2", "w3", "w4", "w6", "w8", "w9", "w10"]


def test_full_bracket_reaches_final_then_stops(machine):
    results = BracketResults(round1=round1_results())
    sizes = []
    while not results.is_complete:
        matchups = machine.advance(results)
        sizes.append(len(matchups))
        vote_round(matchups)

    assert sizes == [12, 8, 4, 2, 1]
    assert len(results.final) == 1
    with pytest.raises(BracketCompleteError):
        machine.advance(results)


def test_loser_bracket_byes_still_advance(machine):
    results = BracketResults(round1=round1_results())
    round2 = machine.advance(results, in_loser_bracket=True)
    vote_round(round2, in_loser_bracket=True)

    round3 = machine.advance(results, in_loser_bracket=True)

    # Slot 0 of round 2 was a bye for l0, who recorded no votes but moves on
    assert round2[0].game1.votes == 0
    assert round3[0].game1.id == "l0"


def test_advance_from_same_saved_state_is_repeatable(machine):
    saved = BracketResults(round1=round1_results()).to_dict()

    first = BracketResults.from_dict(copy.deepcopy(saved))
    second = BracketResults.from_dict(copy.deepcopy(saved))
    machine.advance(first)
    machine.advance(second)

    assert first.latest_round() == second.latest_round() == "round2"
    assert first.to_dict() == second.to_dict()


def test_second_advance_does_not_skip_unvoted_round(machine):
    results = BracketResults(round1=round1_results())
    machine.advance(results)

    with pytest.raises(IncompleteResultError):
        machine.advance(results)
    assert results.round3 is None


def test_short_previous_round_is_undefined(machine):
    results = BracketResults(round1=round1_results(21))

    with pytest.raises(UndefinedGameError):
        machine.advance(results)


def test_final_present_is_complete(machine):
    results = BracketResults(
        round1=[], round2=[], round3=[], quarter_final=[], semi_final=[], final=[voted("a", "b", 5)]
    )

    with pytest.raises(BracketCompleteError):
        machine.advance(results)
