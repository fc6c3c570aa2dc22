"""Pairing programs: opening round and the first round of each bracket line."""

import logging
from typing import List, Optional

import numpy as np

from .config import TournamentConfig
from .data.loader import DataLoader
from .errors import MissingSeedDataError, UndefinedGameError
from .models.game import GameEntity
from .models.results import GameResult, Pairing
from .pairing_engine import PairingEngine
from .retrieve_service import RetrieveService
from .tournament.victor import get_loser, get_winner

logger = logging.getLogger(__name__)

NAME_WIDTH = 52


def format_pairings(pairings: List[Pairing]) -> List[str]:
    return [
        f"{p.game1.name.rjust(NAME_WIDTH, '_')} vs {p.game2.name.ljust(NAME_WIDTH, '_')}"
        for p in pairings
    ]


def create_engine(config: TournamentConfig) -> PairingEngine:
    return PairingEngine(rng=np.random.default_rng(config.random_seed))


def load_service(config: TournamentConfig) -> RetrieveService:
    service = RetrieveService.load_json(config.export_json)
    if service is None:
        raise MissingSeedDataError(
            f"Game export {config.export_json} does not exist, run the retrieve program first"
        )
    return service


def bracket_games(service: RetrieveService) -> List[GameEntity]:
    """Bracket-category games that have a catalog id."""
    games = []
    for game in service.games:
        if not game.in_bracket:
            continue
        if game.is_miss or not game.id:
            logger.warning("Skipping %s: no catalog entry to pair on", game.title)
            continue
        games.append(game)
    return games


def resolve_games(service: RetrieveService, results: List[GameResult]) -> List[GameEntity]:
    """Look up the full game for each result by id."""
    game_map = service.games_as_map()
    games = []
    for r in results:
        game = game_map.get(r.id)
        if game is None:
            raise UndefinedGameError(f"{r.id} - {r.name}: not found in map")
        games.append(game)
    return games


def _report(title: str, pairings: List[Pairing]) -> None:
    print(f"\nSuccessfully generated {len(pairings)} pairings for {title}\n")
    for line in format_pairings(pairings):
        print(line)


def base_pairings(config: TournamentConfig, engine: Optional[PairingEngine] = None) -> List[Pairing]:
    """Generate the pairings for the opening round of the tournament."""
    print("\nGenerating pairs for base round")
    service = load_service(config)
    engine = engine or create_engine(config)

    pairings = engine.generate_pairings(bracket_games(service))
    _report("the base round", pairings)

    print("\nWriting pairings to disk")
    DataLoader.save_pairings(pairings, config.base_pairings)
    return pairings


def bracket_pairings(
    config: TournamentConfig,
    in_loser_bracket: bool = False,
    engine: Optional[PairingEngine] = None,
) -> List[Pairing]:
    """
    Generate round 1 of a bracket line from the opening round results.

    Opening winners feed the winner bracket, opening losers the loser bracket.
    """
    side = "loser" if in_loser_bracket else "winner"
    print(f"\nGenerating pairs for {side} round")

    opening = DataLoader.load_opening_results(config.opening_results)
    if opening is None:
        raise MissingSeedDataError("Opening results file does not exist")

    pick = get_loser if in_loser_bracket else get_winner
    advancing = [pick(result) for result in opening.results]

    service = load_service(config)
    engine = engine or create_engine(config)
    pairings = engine.generate_pairings(resolve_games(service, advancing))
    _report(f"the {side} bracket", pairings)

    print("\nWriting pairings to disk")
    target = config.loser_pairings if in_loser_bracket else config.winner_pairings
    DataLoader.save_pairings(pairings, target)
    return pairings


def winner_pairings(config: TournamentConfig, engine: Optional[PairingEngine] = None) -> List[Pairing]:
    return bracket_pairings(config, in_loser_bracket=False, engine=engine)


def loser_pairings(config: TournamentConfig, engine: Optional[PairingEngine] = None) -> List[Pairing]:
    return bracket_pairings(config, in_loser_bracket=True, engine=engine)
