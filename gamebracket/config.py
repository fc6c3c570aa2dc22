"""Tournament configuration."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

DEFAULT_CATALOG_URL = "https://api.boardgameatlas.com/api/"


@dataclass
class TournamentConfig:
    """Configuration knobs shared by every program."""

    resources_dir: str = "resources"
    # Change this after everyone arrives
    num_voters: int = 8
    random_seed: Optional[int] = None

    catalog_url: str = DEFAULT_CATALOG_URL
    client_id: Optional[str] = field(default_factory=lambda: os.environ.get("BOARD_GAME_ATLAS_CLIENT_ID"))
    cache_dir: Optional[str] = None
    request_timeout: int = 30

    def __post_init__(self):
        if self.num_voters < 1:
            raise ValueError(f"num_voters must be at least 1, got {self.num_voters}")

    def _path(self, filename: str) -> Path:
        return Path(self.resources_dir) / filename

    @property
    def input_games_csv(self) -> Path:
        return self._path("Board Games - Games.csv")

    @property
    def game_details_csv(self) -> Path:
        return self._path("BoardGameDetails.csv")

    @property
    def game_categories_csv(self) -> Path:
        return self._path("BoardGameCategories.csv")

    @property
    def game_mechanics_csv(self) -> Path:
        return self._path("BoardGameMechanics.csv")

    @property
    def export_json(self) -> Path:
        return self._path("boardGameData.json")

    @property
    def base_pairings(self) -> Path:
        return self._path("basePairings.json")

    @property
    def winner_pairings(self) -> Path:
        return self._path("winnerPairings.json")

    @property
    def loser_pairings(self) -> Path:
        return self._path("loserPairings.json")

    @property
    def opening_results(self) -> Path:
        return self._path("openingResults.json")

    @property
    def winner_results(self) -> Path:
        return self._path("winnerResults.json")

    @property
    def loser_results(self) -> Path:
        return self._path("loserResults.json")
