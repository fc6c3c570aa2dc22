from .game import CatalogGame, GameCategory, GameEntity, GameRow, GameSize
from .results import (
    ROUNDS,
    BracketResults,
    GameIdName,
    GameResult,
    OpeningResults,
    Pairing,
    VoteResult,
    round_title,
)

__all__ = [
    "BracketResults",
    "CatalogGame",
    "GameCategory",
    "GameEntity",
    "GameIdName",
    "GameResult",
    "GameRow",
    "GameSize",
    "OpeningResults",
    "Pairing",
    "ROUNDS",
    "VoteResult",
    "round_title",
]
