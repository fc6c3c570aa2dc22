"""
Pytest configuration and shared fixtures.
"""

from typing import Iterable, List, Optional

import pytest

from gamebracket.config import TournamentConfig
from gamebracket.models.game import CatalogGame, GameCategory, GameEntity, GameRow, GameSize
from gamebracket.models.results import GameIdName, VoteResult
from gamebracket.prompter import Prompter


def make_game(
    game_id: str,
    name: Optional[str] = None,
    min_players: Optional[int] = 2,
    max_players: Optional[int] = 4,
    min_playtime: Optional[int] = 30,
    max_playtime: Optional[int] = 60,
    size: Optional[GameSize] = GameSize.MEDIUM,
    expansion: bool = False,
    category: GameCategory = GameCategory.BRACKET,
) -> GameEntity:
    name = name or f"Game {game_id}"
    return GameEntity(
        row=GameRow(title=name, category=category, size=size, expansion=expansion),
        catalog=CatalogGame(
            id=game_id,
            name=name,
            min_players=min_players,
            max_players=max_players,
            min_playtime=min_playtime,
            max_playtime=max_playtime,
        ),
    )


def voted(game1: str, game2: str, votes1: int, num_voters: int = 8, tie_break_game1: bool = True) -> VoteResult:
    """A fully voted matchup between two ids (names mirror the ids)."""
    result = VoteResult.between(GameIdName(game1, game1), GameIdName(game2, game2))
    result.game1.votes = votes1
    result.game2.votes = num_voters - votes1
    result.game1.tie_break = tie_break_game1
    result.game2.tie_break = not tie_break_game1
    result.game1.num_voters = num_voters
    result.game2.num_voters = num_voters
    return result


class ScriptedPrompter(Prompter):
    """Prompter fed from a fixed list of answers."""

    def __init__(self, answers: Iterable[str]):
        self.answers: List[str] = list(answers)
        self.output: List[str] = []
        super().__init__(input_func=self._next_answer, output_func=self.output.append)

    def _next_answer(self, message: str) -> str:
        if not self.answers:
            raise EOFError("No scripted answers left")
        return self.answers.pop(0)


@pytest.fixture
def config(tmp_path) -> TournamentConfig:
    """Configuration rooted in a temporary resources directory."""
    return TournamentConfig(resources_dir=str(tmp_path / "resources"), num_voters=8, random_seed=7)


@pytest.fixture
def twin_games() -> List[GameEntity]:
    """Two identical games and two unrelated ones."""
    return [
        make_game("a"),
        make_game("b"),
        make_game("c", min_players=8, max_players=12, min_playtime=240, max_playtime=300, size=GameSize.HUGE),
        make_game("d", min_players=16, max_players=20, min_playtime=500, max_playtime=600, size=GameSize.TINY),
    ]
