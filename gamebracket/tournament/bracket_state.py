"""Round-by-round advancement of a fixed-shape elimination bracket."""

import logging
from typing import Callable, FrozenSet, List, Optional

from ..errors import BracketCompleteError, MissingSeedDataError, UndefinedGameError
from ..models.results import BracketResults, GameIdName, Pairing, VoteResult
from .victor import get_victor

logger = logging.getLogger(__name__)

SeedLoader = Callable[[bool], Optional[List[Pairing]]]


class BracketStateMachine:
    """Derives the next round of a bracket line from the rounds already voted."""

    # Previous-round slot count and the slots whose victor gets a bye
    ROUND_SHAPES = {
        "round2": (22, frozenset({0, 11})),
        "round3": (12, frozenset({2, 3, 8, 9})),
        "quarter_final": (8, frozenset()),
        "semi_final": (4, frozenset()),
        "final": (2, frozenset()),
    }

    PREVIOUS_ROUND = {
        "round2": "round1",
        "round3": "round2",
        "quarter_final": "round3",
        "semi_final": "quarter_final",
        "final": "semi_final",
    }

    def __init__(self, seed_loader: SeedLoader):
        """
        Initialize state machine.

        Args:
            seed_loader: Returns the round 1 pairings for the winner
                (False) or loser (True) bracket, None if not generated yet
        """
        self.seed_loader = seed_loader

    def advance(self, results: BracketResults, in_loser_bracket: bool = False) -> List[VoteResult]:
        """
        Fill the first empty round of ``results`` and return its matchups.

        The returned list is stored in ``results``; recording votes on it and
        saving ``results`` completes the round.

        Raises:
            BracketCompleteError: The final is already recorded
            MissingSeedDataError: Round 1 is needed but no pairings exist
            UndefinedGameError: A previous-round slot is missing
        """
        round_name = results.next_round()
        if round_name is None:
            raise BracketCompleteError("All data already entered")

        if round_name == "round1":
            matchups = self._seed_round(in_loser_bracket)
        else:
            previous = results.get_round(self.PREVIOUS_ROUND[round_name])
            slots, byes = self.ROUND_SHAPES[round_name]
            matchups = self._build_round(previous, slots, byes, in_loser_bracket)

        results.set_round(round_name, matchups)
        logger.info(
            "Advanced %s bracket to %s with %d matchups",
            "loser" if in_loser_bracket else "winner",
            round_name,
            len(matchups),
        )
        return matchups

    def _seed_round(self, in_loser_bracket: bool) -> List[VoteResult]:
        pairings = self.seed_loader(in_loser_bracket)
        if pairings is None:
            side = "Loser" if in_loser_bracket else "Winner"
            raise MissingSeedDataError(f"{side} pairings file does not exist")
        return [VoteResult.from_pairing(p) for p in pairings]

    def _build_round(
        self,
        previous: List[VoteResult],
        slots: int,
        byes: FrozenSet[int],
        in_loser_bracket: bool,
    ) -> List[VoteResult]:
        matchups = []
        i = 0
        while i < slots:
            game1 = self._victor_at(previous, i, in_loser_bracket)
            if i in byes:
                matchups.append(VoteResult.between(game1, GameIdName.placeholder()))
                i += 1
            else:
                game2 = self._victor_at(previous, i + 1, in_loser_bracket)
                matchups.append(VoteResult.between(game1, game2))
                i += 2
        return matchups

    @staticmethod
    def _victor_at(previous: List[VoteResult], index: int, in_loser_bracket: bool) -> GameIdName:
        if index >= len(previous) or previous[index] is None:
            raise UndefinedGameError(f"Game undefined at slot {index} of the previous round")
        return get_victor(previous[index], in_loser_bracket).as_id_name()
