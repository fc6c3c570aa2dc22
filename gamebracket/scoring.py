"""Pairwise affinity score between two games.

Games that play at the same player count, take a similar time, and come in
the same size box score higher, which makes them more likely to be drawn
against each other by the pairing engine.
"""

from dataclasses import dataclass, fields
from typing import Optional

from .models.game import GameEntity

BASE_SCORE = 10.0

PLAYER_TOLERANCE = 1
PLAYTIME_TOLERANCE = 30


@dataclass(frozen=True)
class ScoringWeights:
    """Additive bonuses and multiplicative factors used by :func:`score`.

    Additive weights must be >= 0 and multipliers >= 1 so that every score,
    and every running total built from scores, stays non-negative.
    """

    # Additive
    same_max: float = 20
    near_max: float = 10
    same_min: float = 5
    near_playtime: float = 5
    same_size: float = 15

    # Multiplicative
    same_max_min: float = 1.5
    same_playtime_max: float = 1.2
    same_playtime_min: float = 1.2
    expansion: float = 3

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            minimum = 1 if f.name in _MULTIPLIERS else 0
            if value < minimum:
                raise ValueError(f"Scoring weight {f.name} must be >= {minimum}, got {value}")


_MULTIPLIERS = {"same_max_min", "same_playtime_max", "same_playtime_min", "expansion"}

DEFAULT_WEIGHTS = ScoringWeights()


def denull(value: Optional[float]) -> float:
    """Treat a missing numeric attribute as 0."""
    return 0 if value is None else value


def score(a: GameEntity, b: GameEntity, weights: ScoringWeights = DEFAULT_WEIGHTS) -> float:
    """
    Affinity score between two games.

    Args:
        a: First game
        b: Second game
        weights: Bonus and multiplier values

    Returns:
        Non-negative score, BASE_SCORE for games with nothing in common
    """
    max_a, max_b = denull(a.max_players), denull(b.max_players)
    min_a, min_b = denull(a.min_players), denull(b.min_players)
    ptmax_a, ptmax_b = denull(a.max_playtime), denull(b.max_playtime)
    ptmin_a, ptmin_b = denull(a.min_playtime), denull(b.min_playtime)

    total = BASE_SCORE

    # Additives
    if max_a == max_b:
        total += weights.same_max
    if abs(max_a - max_b) <= PLAYER_TOLERANCE:
        total += weights.near_max
    if min_a == min_b:
        total += weights.same_min
    # Both playtime checks share one bonus value
    if abs(ptmax_a - ptmax_b) <= PLAYTIME_TOLERANCE:
        total += weights.near_playtime
    if abs(ptmin_a - ptmin_b) <= PLAYTIME_TOLERANCE:
        total += weights.near_playtime
    if a.size == b.size:
        total += weights.same_size

    # Multipliers
    if max_a == max_b and min_a == min_b:
        total *= weights.same_max_min
    if ptmax_a == ptmax_b:
        total *= weights.same_playtime_max
    if ptmin_a == ptmin_b:
        total *= weights.same_playtime_min
    if a.expansion and b.expansion:
        total *= weights.expansion

    return total
