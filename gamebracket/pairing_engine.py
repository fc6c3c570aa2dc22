"""Weighted random pairing of games."""

import logging
import math
from dataclasses import dataclass
from typing import List, Optional, Sequence

import numpy as np

from .errors import NoOpponentFoundError, UnevenCountError
from .models.game import GameEntity
from .models.results import GameIdName, Pairing
from .scoring import BASE_SCORE, DEFAULT_WEIGHTS, ScoringWeights, score

logger = logging.getLogger(__name__)


@dataclass
class ScoringGame:
    """Pairing state of one game during a single generate_pairings call."""

    game: GameEntity
    seed: float
    score: float = BASE_SCORE
    paired: bool = False
    opponent: str = ""


class PairingEngine:
    """Builds a perfect matching where similar games are more likely to meet."""

    def __init__(
        self,
        rng: Optional[np.random.Generator] = None,
        weights: ScoringWeights = DEFAULT_WEIGHTS,
    ):
        """
        Initialize pairing engine.

        Args:
            rng: Random source, seed it for reproducible draws
            weights: Scoring weights passed to the affinity score
        """
        self.rng = rng if rng is not None else np.random.default_rng()
        self.weights = weights

    def generate_pairings(self, games: Sequence[GameEntity]) -> List[Pairing]:
        """
        Pair every game with exactly one opponent.

        The list is shuffled, then each unpaired game in turn draws its
        opponent from the remaining unpaired games with probability
        proportional to their affinity score.

        Args:
            games: Games to pair, must be an even count

        Returns:
            Pairings in the order they were formed
        """
        if len(games) % 2 == 1:
            raise UnevenCountError(f"List of games has an uneven count ({len(games)})")

        pairing_list = [ScoringGame(game=g, seed=float(self.rng.random())) for g in games]
        pairing_list.sort(key=lambda s: s.seed)

        pairings: List[Pairing] = []
        for current in pairing_list:
            if current.paired:
                continue
            current.paired = True

            total = self._assign_scores(pairing_list, current)
            opponent = self._draw_opponent(pairing_list, total)
            if opponent is None:
                raise NoOpponentFoundError(f"Unable to find pair for {current.game.name}")

            opponent.paired = True
            current.opponent = opponent.game.id
            opponent.opponent = current.game.id
            pairings.append(
                Pairing(
                    game1=GameIdName(id=current.game.id, name=current.game.name),
                    game2=GameIdName(id=opponent.game.id, name=opponent.game.name),
                )
            )

        logger.debug("Generated %d pairings from %d games", len(pairings), len(games))
        return pairings

    def _assign_scores(self, pairing_list: List[ScoringGame], target: ScoringGame) -> float:
        """Store running score totals on each entry and return the grand total."""
        total = 0.0
        for candidate in pairing_list:
            if candidate.paired:
                candidate.score = 0.0
            else:
                total += score(candidate.game, target.game, self.weights)
                candidate.score = total
        return total

    def _draw_opponent(self, pairing_list: List[ScoringGame], total: float) -> Optional[ScoringGame]:
        upper = math.floor(total)
        if upper < 1:
            return None
        r = int(self.rng.integers(1, upper, endpoint=True))
        for candidate in pairing_list:
            if not candidate.paired and candidate.score >= r:
                return candidate
        return None
