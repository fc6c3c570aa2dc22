"""Tournament programs: enter votes for the next round and save them."""

import logging
from typing import List, Optional

from ..config import TournamentConfig
from ..data.loader import DataLoader
from ..errors import MissingSeedDataError
from ..models.results import BracketResults, OpeningResults, Pairing, VoteResult, round_title
from ..prompter import Prompter
from .bracket_state import BracketStateMachine
from .voting import record_round

logger = logging.getLogger(__name__)


def enter_opening_results(config: TournamentConfig, prompter: Prompter) -> OpeningResults:
    """Collect votes for every base pairing and save them as the opening results."""
    pairings = DataLoader.load_pairings(config.base_pairings)
    if pairings is None:
        raise MissingSeedDataError("Base pairings file does not exist")

    opening = OpeningResults(results=[VoteResult.from_pairing(p) for p in pairings])
    print("\nEnter votes for the Opening Round")
    record_round(opening.results, prompter, config.num_voters)

    # Only reached when every vote was entered
    DataLoader.save_opening_results(opening, config.opening_results)
    return opening


def make_state_machine(config: TournamentConfig) -> BracketStateMachine:
    def seed_loader(in_loser_bracket: bool) -> Optional[List[Pairing]]:
        path = config.loser_pairings if in_loser_bracket else config.winner_pairings
        return DataLoader.load_pairings(path)

    return BracketStateMachine(seed_loader)


def enter_bracket_results(
    config: TournamentConfig,
    prompter: Prompter,
    in_loser_bracket: bool = False,
) -> BracketResults:
    """Advance a bracket line by one round, collect its votes and save."""
    path = config.loser_results if in_loser_bracket else config.winner_results
    results = DataLoader.load_bracket_results(path)

    matchups = make_state_machine(config).advance(results, in_loser_bracket)
    print(f"\nEnter votes for {round_title(results.latest_round())}")
    record_round(matchups, prompter, config.num_voters, in_loser_bracket)

    DataLoader.save_bracket_results(results, path)
    return results


def enter_winner_results(config: TournamentConfig, prompter: Prompter) -> BracketResults:
    return enter_bracket_results(config, prompter, in_loser_bracket=False)


def enter_loser_results(config: TournamentConfig, prompter: Prompter) -> BracketResults:
    return enter_bracket_results(config, prompter, in_loser_bracket=True)
