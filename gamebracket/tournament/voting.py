"""Vote entry for matchups and reporting of their outcome."""

import logging
from typing import Callable, List

from ..models.results import VoteResult
from ..prompter import Choice, Prompter
from .victor import get_victor

logger = logging.getLogger(__name__)


def collect_votes(result: VoteResult, prompter: Prompter, num_voters: int) -> None:
    """
    Ask for the votes of a contested matchup and fill in both sides.

    Every voter votes, so game2 gets whatever game1 did not. The designated
    tie-breaker's pick is stored on both sides.
    """
    game1, game2 = result.game1, result.game2
    print(f"\n{game1.name} vs {game2.name}")

    votes = prompter.vote_count(f"Enter Number of Votes for {game1.name}", 0, num_voters)
    tie_breaker_pick = prompter.choose(
        "Select Game the tie-breaker voted for",
        [Choice(game1.name, 1), Choice(game2.name, 2)],
    )

    game1.votes = votes
    game2.votes = num_voters - votes
    game1.tie_break = tie_breaker_pick == 1
    game2.tie_break = tie_breaker_pick == 2

    # Voter count is stored per result in case attendance changes mid-tournament
    game1.num_voters = num_voters
    game2.num_voters = num_voters


def apply_bye(result: VoteResult, num_voters: int, in_loser_bracket: bool = False) -> None:
    """
    Record an uncontested matchup.

    In the winner bracket the sole game gets every vote. In the loser bracket
    it is recorded with no votes, which still advances it there since the
    vote loser is the one that moves on.
    """
    sole, placeholder = result.game1, result.game2
    if in_loser_bracket:
        sole.votes, sole.tie_break = 0, False
        placeholder.votes, placeholder.tie_break = num_voters, True
    else:
        sole.votes, sole.tie_break = num_voters, True
        placeholder.votes, placeholder.tie_break = 0, False
    sole.num_voters = num_voters
    placeholder.num_voters = num_voters


def describe_result(result: VoteResult, in_loser_bracket: bool = False) -> List[str]:
    """Human-readable report lines for a voted matchup."""
    victor = get_victor(result, in_loser_bracket)
    other = result.game2 if victor is result.game1 else result.game1

    if result.is_bye:
        return [f"Bye Round: {victor.name} advances automatically"]

    # In the loser bracket the victor is the side that lost the vote
    vote_winner, vote_loser = (other, victor) if in_loser_bracket else (victor, other)
    lines = [
        f"{vote_winner.name} beats {vote_loser.name}",
        f"{vote_winner.votes} to {vote_loser.votes}",
    ]
    if vote_winner.votes == vote_loser.votes:
        lines.append("Tie broken by the tie-breaker vote")
    bracket = "loser" if in_loser_bracket else "winner"
    lines.append(f"{victor.name} advances in {bracket} bracket")
    return lines


def record_round(
    matchups: List[VoteResult],
    prompter: Prompter,
    num_voters: int,
    in_loser_bracket: bool = False,
    report: Callable[[str], None] = print,
) -> None:
    """Fill in votes for every matchup of a round, reporting each outcome."""
    for result in matchups:
        if result.is_bye:
            apply_bye(result, num_voters, in_loser_bracket)
        else:
            collect_votes(result, prompter, num_voters)
        report("\n" + "\n".join(describe_result(result, in_loser_bracket)) + "\n")
    logger.info("Recorded votes for %d matchups", len(matchups))
