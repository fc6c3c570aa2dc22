"""Board game catalog API client."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

import requests

from ..config import DEFAULT_CATALOG_URL
from ..models.game import CatalogGame

logger = logging.getLogger(__name__)


@dataclass
class SearchResults:
    """Games returned for a name search."""

    games: List[CatalogGame] = field(default_factory=list)
    count: int = 0


class CatalogClient:
    """Searches games and lists categories/mechanics, with optional disk cache for the lists."""

    SEARCH = "search"
    CATEGORIES = "categories"
    MECHANICS = "mechanics"

    def __init__(
        self,
        base_url: str = DEFAULT_CATALOG_URL,
        client_id: Optional[str] = None,
        cache_dir: Optional[str] = None,
        timeout: int = 30,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url if base_url.endswith("/") else base_url + "/"
        self.client_id = client_id
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"Accept": "application/json"})
        self.cache_dir = Path(cache_dir) if cache_dir else None
        if self.cache_dir:
            self.cache_dir.mkdir(parents=True, exist_ok=True)
        if not client_id:
            logger.warning("No catalog client_id configured; requests will likely be rejected")

    def search(self, name: str, fuzzy: bool = False, exact: bool = True) -> SearchResults:
        """
        Search the catalog by game name.

        Args:
            name: Title to look up
            fuzzy: Allow approximate name matches
            exact: Only return exact name matches
        """
        payload = self._get(
            self.SEARCH,
            {
                "name": name,
                "fuzzy_match": str(fuzzy).lower(),
                "exact": str(exact).lower(),
            },
        )
        games = [CatalogGame.from_api(g) for g in payload.get("games", []) if isinstance(g, dict)]
        count = payload.get("count", len(games))
        return SearchResults(games=games, count=int(count or 0))

    def get_categories(self) -> Dict[str, str]:
        """Map of category id to category name."""
        return self._named_list(self.CATEGORIES)

    def get_mechanics(self) -> Dict[str, str]:
        """Map of mechanic id to mechanic name."""
        return self._named_list(self.MECHANICS)

    def _named_list(self, key: str) -> Dict[str, str]:
        cache_name = f"{key}.json"
        cached = self._load_cache(cache_name)
        if cached:
            return cached

        payload = self._get(key)
        entries = payload.get(key, [])
        mapping = {
            str(e["id"]): e["name"]
            for e in entries
            if isinstance(e, dict) and e.get("id") and e.get("name") is not None
        }
        if not mapping:
            raise ValueError(f"Catalog returned no {key}")

        self._save_cache(cache_name, mapping)
        return mapping

    def _get(self, key: str, params: Optional[Dict[str, str]] = None) -> Dict:
        query = dict(params or {})
        if self.client_id:
            query["client_id"] = self.client_id
        response = self.session.get(f"{self.base_url}{key}", params=query, timeout=self.timeout)
        response.raise_for_status()
        payload = response.json()
        if not isinstance(payload, dict):
            raise ValueError(f"Unexpected catalog payload for {key}: {type(payload).__name__}")
        return payload

    def _load_cache(self, filename: str) -> Optional[Dict]:
        if not self.cache_dir:
            return None
        path = self.cache_dir / filename
        if not path.exists():
            return None
        try:
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f)
        except json.JSONDecodeError:
            return None

    def _save_cache(self, filename: str, payload: Dict) -> None:
        if not self.cache_dir:
            return
        path = self.cache_dir / filename
        with open(path, "w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2, ensure_ascii=False)
