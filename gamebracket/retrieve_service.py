"""Enrichment of the game list with catalog data."""

import logging
from datetime import date
from pathlib import Path
from typing import Dict, List, Optional, Union

import requests

from .data.catalog import CatalogClient
from .data.game_csv import write_name_table, write_rows
from .data.loader import DataLoader
from .models.game import CatalogGame, GameEntity, GameRow
from .prompter import Choice, Prompter

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

DESCRIPTION_PREVIEW_LIMIT = 300


class RetrieveService:
    """Holds the enriched games plus the catalog's category and mechanic names."""

    def __init__(
        self,
        mechanics: Optional[Dict[str, str]] = None,
        categories: Optional[Dict[str, str]] = None,
        games: Optional[List[GameEntity]] = None,
        client: Optional[CatalogClient] = None,
        prompter: Optional[Prompter] = None,
    ):
        self.mechanics = mechanics or {}
        self.categories = categories or {}
        self.games: List[GameEntity] = games or []
        self.client = client
        self.prompter = prompter or Prompter()

    @classmethod
    def load_from_catalog(cls, client: CatalogClient, prompter: Optional[Prompter] = None) -> "RetrieveService":
        """Create a service using the mechanic and category lists straight from the catalog."""
        mechanics = client.get_mechanics()
        categories = client.get_categories()
        logger.info("Loaded %d mechanics and %d categories", len(mechanics), len(categories))
        return cls(mechanics=mechanics, categories=categories, client=client, prompter=prompter)

    @classmethod
    def load_json(cls, file_path: PathLike) -> Optional["RetrieveService"]:
        """Recreate a service from a previous :meth:`export_json`; None if never exported."""
        data = DataLoader.read_json(file_path)
        if data is None:
            return None
        return cls(
            mechanics=data.get("mechanics", {}),
            categories=data.get("categories", {}),
            games=[GameEntity.from_dict(g) for g in data.get("games", [])],
        )

    def find_catalog_entry(self, title: str) -> Optional[CatalogGame]:
        """
        Look a title up in the catalog.

        Tries an exact name search first, then a fuzzy one. When the fuzzy
        search finds several games the user picks one (or none).

        Returns:
            Catalog entry, or None if nothing matched
        """
        if self.client is None:
            raise RuntimeError("RetrieveService has no catalog client")
        try:
            res = self.client.search(title, fuzzy=False, exact=True)
            if res.count > 0 and res.games:
                return res.games[0]
            logger.info("Exact search for %s failed, trying fuzzy search", title)

            res = self.client.search(title, fuzzy=True, exact=False)
            if res.count > 0 and res.games:
                logger.info("Fuzzy search returned %d matches", res.count)
                if len(res.games) == 1:
                    return res.games[0]
                return self.select_from_multiple(title, res.games)
            logger.error("Unable to find any results for %s", title)
        except requests.exceptions.RequestException as e:
            logger.error("Errored on searching for %s: %s", title, e)
        return None

    def select_from_multiple(self, title: str, candidates: List[CatalogGame]) -> Optional[CatalogGame]:
        """Let the user pick the right game among several fuzzy matches."""
        choices = [Choice("None", -1, "No matching titles")]
        for i, game in enumerate(candidates):
            description = game.description_preview or None
            if description and len(description) > DESCRIPTION_PREVIEW_LIMIT:
                description = description[:DESCRIPTION_PREVIEW_LIMIT] + "..."
            choices.append(Choice(game.name, i, description))

        index = self.prompter.choose(
            f'{title} returned {len(candidates)} possible options. Select the correct game title for "{title}"',
            choices,
            initial=1,
        )
        return candidates[index] if 0 <= index < len(candidates) else None

    def load_games(self, rows: List[GameRow]) -> None:
        """Look up every row in the catalog; non-game items are added without lookup."""
        for row in rows:
            if row.not_game:
                self.games.append(GameEntity(row=row))
                continue
            entry = self.find_catalog_entry(row.title)
            if entry is None:
                self.games.append(GameEntity(row=row))
                continue
            logger.info("Successfully added %s (catalog id %s)", row.title, entry.id)
            if entry.name != row.title:
                logger.info("\tcatalog name - %s", entry.name)
            self.games.append(GameEntity(row=row, catalog=entry))

    def write_games_csv(self, file_path: PathLike) -> None:
        """Write every game with the detail found in the catalog."""
        today = date.today().strftime("%a %b %d %Y")
        write_rows(file_path, [detail_row(g, today) for g in self.games])

    def write_categories_csv(self, file_path: PathLike) -> None:
        """Write a row for each game/category name pair."""
        write_name_table(file_path, self._name_pairs(self.categories, "categories"), "Category")

    def write_mechanics_csv(self, file_path: PathLike) -> None:
        """Write a row for each game/mechanic name pair."""
        write_name_table(file_path, self._name_pairs(self.mechanics, "mechanics"), "Mechanic")

    def _name_pairs(self, names: Dict[str, str], attr: str):
        pairs = []
        for game in self.games:
            resolved = sorted(names[i] for i in getattr(game.catalog, attr) if i in names)
            pairs.extend((game.title, name) for name in resolved)
        return pairs

    def export_json(self, file_path: PathLike) -> None:
        """Export all collected game data for the pairing programs."""
        DataLoader.write_json(
            file_path,
            {
                "mechanics": self.mechanics,
                "categories": self.categories,
                "games": [g.to_dict() for g in self.games],
            },
        )

    def get_misses(self) -> List[GameEntity]:
        """Games that could not be located in the catalog."""
        return [g for g in self.games if g.is_miss]

    def games_as_map(self) -> Dict[str, GameEntity]:
        """Games with a catalog id, keyed by that id."""
        return {g.id: g for g in self.games if g.id}


def _text(value) -> str:
    return "" if value is None else str(value)


def detail_row(game: GameEntity, add_date: str) -> Dict[str, object]:
    """Flatten a game into the columns of the detail CSV."""
    row, cat = game.row, game.catalog
    return {
        "Title": row.title,
        "Category": row.category.value if row.category else "",
        "Size": row.size.value if row.size else "",
        "Not Game": row.not_game,
        "Expansion": row.expansion,
        "Stolen": row.stolen,
        "Atlas Name": cat.name,
        "Year Published": _text(cat.year_published),
        "Min Players": _text(cat.min_players),
        "Max Players": _text(cat.max_players),
        "Min Playtime": _text(cat.min_playtime),
        "Max Playtime": _text(cat.max_playtime),
        "Min Age": _text(cat.min_age),
        "Price": _text(cat.price),
        "MSRP": _text(cat.msrp),
        "Primary Publisher": _text(cat.primary_publisher),
        "Primary Designer": _text(cat.primary_designer),
        "Reddit All Time Count": _text(cat.reddit_all_time_count),
        "Reddit Week Count": _text(cat.reddit_week_count),
        "Reddit Day Count": _text(cat.reddit_day_count),
        "Add Date": add_date,
    }
