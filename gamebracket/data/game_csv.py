"""CSV reading and writing for the game list and its enriched outputs."""

import logging
from pathlib import Path
from typing import Dict, List, Sequence, Tuple, Union

import pandas as pd

from ..models.game import GameCategory, GameRow, GameSize

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

INPUT_COLUMNS = ["Title", "Category", "Size", "Not Game", "Expansion", "Stolen"]


def _flag(value: str) -> bool:
    return str(value).strip().upper() == "TRUE"


def read_games(file_path: PathLike) -> List[GameRow]:
    """
    Parse the hand-maintained game list.

    Args:
        file_path: CSV with a header row of INPUT_COLUMNS

    Returns:
        One GameRow per CSV row
    """
    df = pd.read_csv(file_path, dtype=str, keep_default_na=False)
    missing = [c for c in INPUT_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"{file_path} is missing columns: {', '.join(missing)}")

    games = []
    for record in df.to_dict(orient="records"):
        games.append(
            GameRow(
                title=record["Title"].strip(),
                category=GameCategory.parse(record["Category"]),
                size=GameSize.parse(record["Size"]),
                not_game=_flag(record["Not Game"]),
                expansion=_flag(record["Expansion"]),
                stolen=_flag(record["Stolen"]),
            )
        )
    logger.info("Finished parsing %d rows from %s", len(games), file_path)
    return games


def write_rows(file_path: PathLike, rows: Sequence[Dict[str, object]]) -> None:
    """Write dict rows with a header taken from the first row's keys."""
    path = Path(file_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    pd.DataFrame(list(rows)).to_csv(path, index=False)
    logger.info("Wrote %d rows to %s", len(rows), path)


def write_name_table(file_path: PathLike, pairs: Sequence[Tuple[str, str]], column: str) -> None:
    """Write (title, name) pairs as a two-column Title/<column> table."""
    path = Path(file_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    pd.DataFrame(list(pairs), columns=["Title", column]).to_csv(path, index=False)
    logger.info("Wrote %d %s rows to %s", len(pairs), column.lower(), path)
