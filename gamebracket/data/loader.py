"""JSON persistence for pairings, results and the game export."""

import json
import logging
from pathlib import Path
from typing import List, Optional, Union

from ..models.results import BracketResults, OpeningResults, Pairing

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class DataLoader:
    """Loads and saves tournament state files."""

    @staticmethod
    def read_json(file_path: PathLike):
        """
        Read a JSON file.

        Args:
            file_path: Path to JSON file

        Returns:
            Parsed data, or None if the file does not exist
        """
        path = Path(file_path)
        if not path.exists():
            logger.warning("%s does not exist", path)
            return None
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if data is None:
            raise ValueError(f"Error loading in data from {path}")
        return data

    @staticmethod
    def write_json(file_path: PathLike, data) -> None:
        """
        Write data as tab-indented JSON.

        The payload is serialized before the file is opened so a failure
        leaves any existing file intact.
        """
        path = Path(file_path)
        text = json.dumps(data, indent="\t", ensure_ascii=False)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
        logger.debug("Wrote %s", path)

    @staticmethod
    def load_pairings(file_path: PathLike) -> Optional[List[Pairing]]:
        data = DataLoader.read_json(file_path)
        if data is None:
            return None
        return [Pairing.from_dict(p) for p in data]

    @staticmethod
    def save_pairings(pairings: List[Pairing], file_path: PathLike) -> None:
        DataLoader.write_json(file_path, [p.to_dict() for p in pairings])

    @staticmethod
    def load_opening_results(file_path: PathLike) -> Optional[OpeningResults]:
        data = DataLoader.read_json(file_path)
        if data is None:
            return None
        return OpeningResults.from_dict(data)

    @staticmethod
    def save_opening_results(results: OpeningResults, file_path: PathLike) -> None:
        DataLoader.write_json(file_path, results.to_dict())

    @staticmethod
    def load_bracket_results(file_path: PathLike) -> BracketResults:
        """Load a bracket line's results; a missing file is an empty bracket."""
        data = DataLoader.read_json(file_path)
        if data is None:
            return BracketResults()
        return BracketResults.from_dict(data)

    @staticmethod
    def save_bracket_results(results: BracketResults, file_path: PathLike) -> None:
        DataLoader.write_json(file_path, results.to_dict())
