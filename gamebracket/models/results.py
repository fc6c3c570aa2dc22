"""Pairing and voting models persisted between tournament rounds."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple


@dataclass(frozen=True)
class GameIdName:
    """A game reference as stored in pairing files."""

    id: str
    name: str

    @classmethod
    def placeholder(cls) -> "GameIdName":
        """The empty opponent of a bye."""
        return cls(id="", name="")

    @property
    def is_placeholder(self) -> bool:
        return self.id == ""

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name}

    @classmethod
    def from_dict(cls, data: dict) -> "GameIdName":
        return cls(id=str(data.get("id") or ""), name=data.get("name") or "")


@dataclass(frozen=True)
class Pairing:
    """Two games drawn against each other (game2 empty for a bye)."""

    game1: GameIdName
    game2: GameIdName

    @property
    def is_bye(self) -> bool:
        return self.game2.is_placeholder

    def to_dict(self) -> dict:
        return {"game1": self.game1.to_dict(), "game2": self.game2.to_dict()}

    @classmethod
    def from_dict(cls, data: dict) -> "Pairing":
        return cls(
            game1=GameIdName.from_dict(data["game1"]),
            game2=GameIdName.from_dict(data["game2"]),
        )


@dataclass
class GameResult:
    """One side of a matchup with the votes it received."""

    id: str
    name: str
    votes: Optional[int] = None
    tie_break: Optional[bool] = None
    num_voters: Optional[int] = None

    @classmethod
    def from_game(cls, game: GameIdName) -> "GameResult":
        return cls(id=game.id, name=game.name)

    @property
    def is_complete(self) -> bool:
        return self.votes is not None and self.tie_break is not None

    def as_id_name(self) -> GameIdName:
        return GameIdName(id=self.id, name=self.name)

    def to_dict(self) -> dict:
        data = {"id": self.id, "name": self.name}
        if self.votes is not None:
            data["votes"] = self.votes
        if self.tie_break is not None:
            data["tie_break"] = self.tie_break
        if self.num_voters is not None:
            data["num_voters"] = self.num_voters
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "GameResult":
        return cls(
            id=str(data.get("id") or ""),
            name=data.get("name") or "",
            votes=data.get("votes"),
            tie_break=data.get("tie_break"),
            num_voters=data.get("num_voters"),
        )


@dataclass
class VoteResult:
    """A matchup and, once voted, its tallies."""

    game1: GameResult
    game2: GameResult

    @classmethod
    def from_pairing(cls, pairing: Pairing) -> "VoteResult":
        return cls(
            game1=GameResult.from_game(pairing.game1),
            game2=GameResult.from_game(pairing.game2),
        )

    @classmethod
    def between(cls, game1: GameIdName, game2: GameIdName) -> "VoteResult":
        return cls.from_pairing(Pairing(game1, game2))

    @property
    def is_bye(self) -> bool:
        return self.game2.id == ""

    def to_dict(self) -> dict:
        return {"game1": self.game1.to_dict(), "game2": self.game2.to_dict()}

    @classmethod
    def from_dict(cls, data: dict) -> "VoteResult":
        return cls(
            game1=GameResult.from_dict(data["game1"]),
            game2=GameResult.from_dict(data["game2"]),
        )


@dataclass
class OpeningResults:
    """Votes for the opening round that seeds both bracket lines."""

    results: List[VoteResult] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"results": [r.to_dict() for r in self.results]}

    @classmethod
    def from_dict(cls, data: dict) -> "OpeningResults":
        return cls(results=[VoteResult.from_dict(r) for r in data.get("results", [])])


# (attribute, persisted key, display title) in bracket order
ROUNDS: Tuple[Tuple[str, str, str], ...] = (
    ("round1", "round1", "Round 1"),
    ("round2", "round2", "Round 2"),
    ("round3", "round3", "Round 3"),
    ("quarter_final", "quarterFinal", "the Quarter Final"),
    ("semi_final", "semiFinal", "the Semi Final"),
    ("final", "final", "THE FINAL"),
)


@dataclass
class BracketResults:
    """Round-by-round results of one bracket line.

    Slots are filled strictly in order, one per program run. Once ``final``
    is present the bracket is finished.
    """

    round1: Optional[List[VoteResult]] = None
    round2: Optional[List[VoteResult]] = None
    round3: Optional[List[VoteResult]] = None
    quarter_final: Optional[List[VoteResult]] = None
    semi_final: Optional[List[VoteResult]] = None
    final: Optional[List[VoteResult]] = None

    def get_round(self, name: str) -> Optional[List[VoteResult]]:
        return getattr(self, name)

    def set_round(self, name: str, results: List[VoteResult]) -> None:
        if name not in [attr for attr, _, _ in ROUNDS]:
            raise KeyError(f"Unknown round: {name}")
        setattr(self, name, results)

    def next_round(self) -> Optional[str]:
        """Name of the first unset slot, or None when the bracket is finished."""
        for attr, _, _ in ROUNDS:
            if self.get_round(attr) is None:
                return attr
        return None

    def latest_round(self) -> Optional[str]:
        """Name of the last filled slot."""
        latest = None
        for attr, _, _ in ROUNDS:
            if self.get_round(attr) is None:
                break
            latest = attr
        return latest

    @property
    def is_complete(self) -> bool:
        return self.next_round() is None

    def to_dict(self) -> Dict[str, List[dict]]:
        data = {}
        for attr, key, _ in ROUNDS:
            results = self.get_round(attr)
            if results is not None:
                data[key] = [r.to_dict() for r in results]
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "BracketResults":
        bracket = cls()
        for attr, key, _ in ROUNDS:
            if data.get(key) is not None:
                bracket.set_round(attr, [VoteResult.from_dict(r) for r in data[key]])
        return bracket


def round_title(name: str) -> str:
    for attr, _, title in ROUNDS:
        if attr == name:
            return title
    raise KeyError(f"Unknown round: {name}")
