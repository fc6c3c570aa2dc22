"""Winner and loser resolution for a voted matchup."""

from ..errors import IncompleteResultError
from ..models.results import GameResult, VoteResult


def get_winner(result: VoteResult) -> GameResult:
    """
    Side with more votes; on a tie, the side the tie-breaker voted for.

    Raises:
        IncompleteResultError: Votes or tie-break flags are unset, or a tie
            cannot be broken because both or neither side carries the flag
    """
    game1, game2 = result.game1, result.game2
    if not game1.is_complete or not game2.is_complete:
        raise IncompleteResultError(
            f"Vote result for {game1.name!r} vs {game2.name!r} is missing votes or tie-break"
        )

    if game1.votes == game2.votes:
        if game1.tie_break == game2.tie_break:
            raise IncompleteResultError(
                f"Tied vote for {game1.name!r} vs {game2.name!r} has no single tie-break winner"
            )
        return game1 if game1.tie_break else game2
    return game1 if game1.votes > game2.votes else game2


def get_loser(result: VoteResult) -> GameResult:
    """The side that is not the winner."""
    return result.game2 if get_winner(result) is result.game1 else result.game1


def get_victor(result: VoteResult, in_loser_bracket: bool = False) -> GameResult:
    """
    Side that advances from a matchup.

    In the loser bracket the vote loser survives and moves on.
    """
    if in_loser_bracket:
        return get_loser(result)
    return get_winner(result)
