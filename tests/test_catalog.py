"""Unit tests for the catalog API client."""

import pytest
import requests

from gamebracket.data.catalog import CatalogClient


class FakeResponse:
    def __init__(self, payload, status_code=200):
        self.payload = payload
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} error")

    def json(self):
        return self.payload


class FakeSession:
    def __init__(self, responses):
        self.responses = dict(responses)
        self.headers = {}
        self.calls = []

    def get(self, url, params=None, timeout=None):
        self.calls.append((url, params))
        key = url.rsplit("/", 1)[-1]
        return self.responses[key]


def test_search_parses_games():
    session = FakeSession(
        {"search": FakeResponse({"games": [{"id": "g1", "name": "Azul", "max_players": 4}], "count": 1})}
    )
    client = CatalogClient(base_url="https://catalog.test/api", client_id="abc", session=session)

    res = client.search("Azul", fuzzy=False, exact=True)

    assert res.count == 1
    assert res.games[0].name == "Azul"
    assert res.games[0].max_players == 4
    url, params = session.calls[0]
    assert url == "https://catalog.test/api/search"
    assert params == {"name": "Azul", "fuzzy_match": "false", "exact": "true", "client_id": "abc"}


def test_search_http_error_propagates():
    session = FakeSession({"search": FakeResponse({}, status_code=503)})
    client = CatalogClient(client_id="abc", session=session)

    with pytest.raises(requests.exceptions.HTTPError):
        client.search("Azul")


def test_mechanics_are_cached(tmp_path):
    session = FakeSession(
        {
            "mechanics": FakeResponse(
                {"mechanics": [{"id": "m1", "name": "Drafting", "url": None}, {"id": "m2", "name": None}]}
            )
        }
    )
    client = CatalogClient(client_id="abc", cache_dir=str(tmp_path / "cache"), session=session)

    first = client.get_mechanics()
    second = client.get_mechanics()

    assert first == second == {"m1": "Drafting"}
    assert len(session.calls) == 1
    assert (tmp_path / "cache" / "mechanics.json").exists()


def test_empty_categories_rejected():
    session = FakeSession({"categories": FakeResponse({"categories": []})})
    client = CatalogClient(client_id="abc", session=session)

    with pytest.raises(ValueError):
        client.get_categories()


def test_cached_names_keep_non_ascii(tmp_path):
    session = FakeSession({"categories": FakeResponse({"categories": [{"id": "c1", "name": "Économie"}]})})
    CatalogClient(client_id="abc", cache_dir=str(tmp_path), session=session).get_categories()

    offline = CatalogClient(client_id="abc", cache_dir=str(tmp_path), session=FakeSession({}))

    assert offline.get_categories() == {"c1": "Économie"}
    assert "Économie" in (tmp_path / "categories.json").read_text(encoding="utf-8")
