"""Main CLI interface for the board game tournament."""

import argparse
import logging
import sys

import requests

from .config import TournamentConfig
from .data.catalog import CatalogClient
from .data.game_csv import read_games
from .errors import TournamentError
from .pairings import base_pairings, loser_pairings, winner_pairings
from .prompter import Choice, PromptCancelled, Prompter
from .retrieve_service import RetrieveService
from .tournament.rounds import enter_loser_results, enter_opening_results, enter_winner_results

logger = logging.getLogger(__name__)

PAIRING_PROGRAMS = {
    "base": base_pairings,
    "winner": winner_pairings,
    "loser": loser_pairings,
}

TOURNAMENT_PROGRAMS = {
    "opening": enter_opening_results,
    "winner": enter_winner_results,
    "loser": enter_loser_results,
}


def create_config(args) -> TournamentConfig:
    return TournamentConfig(
        resources_dir=args.resources_dir,
        num_voters=args.voters,
        random_seed=args.seed,
        cache_dir=args.cache_dir,
    )


def run_pairings(args, prompter: Prompter) -> int:
    """Generate pairings for the opening round or a bracket line."""
    round_name = args.round or prompter.choose(
        "Select Round",
        [
            Choice("Base Pairings", "base", "Generate initial set of pairings"),
            Choice("Winner Bracket", "winner", "Generate pairings for the winner bracket from the base winners"),
            Choice("Loser Bracket", "loser", "Generate pairings for the loser bracket from the base losers"),
        ],
    )
    PAIRING_PROGRAMS[round_name](create_config(args))
    return 0


def run_tournament(args, prompter: Prompter) -> int:
    """Enter votes for the next round of the tournament."""
    round_name = args.round or prompter.choose(
        "Select Tournament Round",
        [
            Choice("Opening Round", "opening", "Enter results of the initial pairings"),
            Choice("Winner Bracket", "winner", "Enter results for the next round of the winner bracket"),
            Choice("Loser Bracket", "loser", "Enter results for the next round of the loser bracket"),
        ],
    )
    TOURNAMENT_PROGRAMS[round_name](create_config(args), prompter)
    return 0


def run_retrieve(args, prompter: Prompter) -> int:
    """Enrich the game list with catalog data and write the outputs."""
    config = create_config(args)
    input_path = args.input or config.input_games_csv
    print(f"Loading game list from {input_path}...")
    rows = read_games(input_path)
    print(f"Successfully parsed CSV file - Loaded {len(rows)} games")

    client = CatalogClient(
        base_url=config.catalog_url,
        client_id=config.client_id,
        cache_dir=config.cache_dir,
        timeout=config.request_timeout,
    )
    try:
        service = RetrieveService.load_from_catalog(client, prompter)
    except (requests.exceptions.RequestException, ValueError) as exc:
        logger.error("Encountered error retrieving mechanics and categories: %s", exc)
        print(f"Error: could not load mechanics and categories from the catalog ({exc})")
        return 1
    service.load_games(rows)

    service.write_games_csv(config.game_details_csv)
    service.write_categories_csv(config.game_categories_csv)
    service.write_mechanics_csv(config.game_mechanics_csv)
    service.export_json(config.export_json)

    misses = service.get_misses()
    print(f"\n✓ Retrieved {len(service.games) - len(misses)} of {len(service.games)} games")
    if misses:
        print(f"\nNo catalog match for {len(misses)} games:")
        for game in misses:
            print(f"   - {game.title}")
    return 0


COMMANDS = {
    "pairings": run_pairings,
    "tournament": run_tournament,
    "retrieve": run_retrieve,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Board game tournament - weighted pairings and double elimination brackets"
    )
    parser.add_argument("--resources-dir", default="resources", help="Directory for game lists, pairings and results")
    parser.add_argument("--voters", type=int, default=8, help="Number of voters per matchup (default: 8)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible pairings")
    parser.add_argument("--cache-dir", default=None, help="Cache directory for catalog category/mechanic lists")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Program to run")

    pairings_parser = subparsers.add_parser("pairings", help="Generate pairings")
    pairings_parser.add_argument("round", nargs="?", choices=sorted(PAIRING_PROGRAMS), help="Pairings to generate")

    tournament_parser = subparsers.add_parser("tournament", help="Enter tournament records")
    tournament_parser.add_argument("round", nargs="?", choices=sorted(TOURNAMENT_PROGRAMS), help="Round to enter")

    retrieve_parser = subparsers.add_parser("retrieve", help="Retrieve board game info from the catalog")
    retrieve_parser.add_argument("--input", "-i", default=None, help="Game list CSV (default: <resources>/Board Games - Games.csv)")

    return parser


def main(argv=None, prompter: Prompter = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")
    prompter = prompter or Prompter()

    try:
        command = args.command or prompter.choose(
            "Main Menu",
            [
                Choice("Pairings", "pairings", "Generate initial pairings"),
                Choice("Tournament", "tournament", "Enter tournament records"),
                Choice("Retrieve", "retrieve", "Retrieve board game info from the catalog"),
            ],
        )
        if not hasattr(args, "round"):
            args.round = None
        if not hasattr(args, "input"):
            args.input = None
        status = COMMANDS[command](args, prompter)
    except PromptCancelled as exc:
        print(f"\n{exc}. Nothing was saved.")
        status = 0
    except TournamentError as exc:
        logger.error("%s", exc)
        print(f"Error: {exc}")
        status = 1

    print("Exiting")
    return status


if __name__ == "__main__":
    sys.exit(main())
