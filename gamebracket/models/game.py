"""Game models: the personal game list row, the catalog entry, and their composition."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class GameCategory(Enum):
    """What the owner wants to do with a game."""

    KEEP = "Keep"
    BRACKET = "Bracket"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["GameCategory"]:
        if not value:
            return None
        for member in cls:
            if member.value.lower() == value.strip().lower():
                return member
        raise ValueError(f"Unknown game category: {value!r}")


class GameSize(Enum):
    """Ordinal box size of a game."""

    TINY = "Tiny"
    SMALL = "Small"
    MEDIUM = "Medium"
    LARGE = "Large"
    HUGE = "Huge"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["GameSize"]:
        if not value:
            return None
        for member in cls:
            if member.value.lower() == value.strip().lower():
                return member
        raise ValueError(f"Unknown game size: {value!r}")


@dataclass
class GameRow:
    """One row of the hand-maintained game list CSV."""

    title: str
    category: Optional[GameCategory] = None
    size: Optional[GameSize] = None
    not_game: bool = False
    expansion: bool = False
    stolen: bool = False

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "category": self.category.value if self.category else None,
            "size": self.size.value if self.size else None,
            "not_game": self.not_game,
            "expansion": self.expansion,
            "stolen": self.stolen,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "GameRow":
        return cls(
            title=data["title"],
            category=GameCategory.parse(data.get("category")),
            size=GameSize.parse(data.get("size")),
            not_game=bool(data.get("not_game", False)),
            expansion=bool(data.get("expansion", False)),
            stolen=bool(data.get("stolen", False)),
        )


def _named(value: Any) -> Optional[str]:
    # Catalog publishers/designers arrive as {"id", "url", "name"} objects
    if isinstance(value, dict):
        return value.get("name")
    return value


def _ids(values: Any) -> List[str]:
    if not isinstance(values, list):
        return []
    ids = []
    for v in values:
        if isinstance(v, dict) and v.get("id"):
            ids.append(str(v["id"]))
        elif isinstance(v, str) and v:
            ids.append(v)
    return ids


@dataclass
class CatalogGame:
    """A board game entry as returned by the catalog API."""

    id: str
    name: str
    year_published: Optional[int] = None
    min_players: Optional[int] = None
    max_players: Optional[int] = None
    min_playtime: Optional[int] = None
    max_playtime: Optional[int] = None
    min_age: Optional[int] = None
    description_preview: Optional[str] = None
    price: Optional[str] = None
    msrp: Optional[float] = None
    primary_publisher: Optional[str] = None
    primary_designer: Optional[str] = None
    mechanics: List[str] = field(default_factory=list)
    categories: List[str] = field(default_factory=list)
    reddit_all_time_count: Optional[int] = None
    reddit_week_count: Optional[int] = None
    reddit_day_count: Optional[int] = None

    @classmethod
    def empty(cls) -> "CatalogGame":
        """Placeholder recorded for titles with no catalog match."""
        return cls(id="", name="")

    @property
    def is_empty(self) -> bool:
        return self.id == ""

    @classmethod
    def from_api(cls, payload: dict) -> "CatalogGame":
        """Build from a raw catalog search result."""
        return cls(
            id=str(payload.get("id") or ""),
            name=payload.get("name") or "",
            year_published=payload.get("year_published"),
            min_players=payload.get("min_players"),
            max_players=payload.get("max_players"),
            min_playtime=payload.get("min_playtime"),
            max_playtime=payload.get("max_playtime"),
            min_age=payload.get("min_age"),
            description_preview=payload.get("description_preview"),
            price=payload.get("price"),
            msrp=payload.get("msrp"),
            primary_publisher=_named(payload.get("primary_publisher")),
            primary_designer=_named(payload.get("primary_designer")),
            mechanics=_ids(payload.get("mechanics")),
            categories=_ids(payload.get("categories")),
            reddit_all_time_count=payload.get("reddit_all_time_count"),
            reddit_week_count=payload.get("reddit_week_count"),
            reddit_day_count=payload.get("reddit_day_count"),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "year_published": self.year_published,
            "min_players": self.min_players,
            "max_players": self.max_players,
            "min_playtime": self.min_playtime,
            "max_playtime": self.max_playtime,
            "min_age": self.min_age,
            "description_preview": self.description_preview,
            "price": self.price,
            "msrp": self.msrp,
            "primary_publisher": self.primary_publisher,
            "primary_designer": self.primary_designer,
            "mechanics": list(self.mechanics),
            "categories": list(self.categories),
            "reddit_all_time_count": self.reddit_all_time_count,
            "reddit_week_count": self.reddit_week_count,
            "reddit_day_count": self.reddit_day_count,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "CatalogGame":
        return cls.from_api(data)


@dataclass
class GameEntity:
    """A game list row together with its catalog entry."""

    row: GameRow
    catalog: CatalogGame = field(default_factory=CatalogGame.empty)

    @property
    def id(self) -> str:
        return self.catalog.id

    @property
    def name(self) -> str:
        return self.catalog.name or self.row.title

    @property
    def title(self) -> str:
        return self.row.title

    @property
    def size(self) -> Optional[GameSize]:
        return self.row.size

    @property
    def expansion(self) -> bool:
        return self.row.expansion

    @property
    def min_players(self) -> Optional[int]:
        return self.catalog.min_players

    @property
    def max_players(self) -> Optional[int]:
        return self.catalog.max_players

    @property
    def min_playtime(self) -> Optional[int]:
        return self.catalog.min_playtime

    @property
    def max_playtime(self) -> Optional[int]:
        return self.catalog.max_playtime

    @property
    def is_miss(self) -> bool:
        """True when a real game found no catalog match."""
        return self.catalog.is_empty and not self.row.not_game

    @property
    def in_bracket(self) -> bool:
        return self.row.category is GameCategory.BRACKET

    def to_dict(self) -> Dict[str, Any]:
        return {"row": self.row.to_dict(), "catalog": self.catalog.to_dict()}

    @classmethod
    def from_dict(cls, data: dict) -> "GameEntity":
        return cls(
            row=GameRow.from_dict(data["row"]),
            catalog=CatalogGame.from_dict(data.get("catalog") or {}),
        )
