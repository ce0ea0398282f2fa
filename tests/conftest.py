"""Root pytest configuration for the tool server tests."""

from typing import Any

import pytest

from core import config
from core.http_client import HTTPStatusError

POKEAPI = "https://pokeapi.co/api/v2"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Run every test against default configuration."""
    for name in config.DEFAULTS:
        monkeypatch.delenv(name, raising=False)


# ---------------------------------------------------------------------------
# Fake PokéAPI
# ---------------------------------------------------------------------------


class FakeAPI:
    """Stands in for core.http_client.fetch_json.

    Routes are exact URLs.  A route mapped to an exception instance raises it;
    an unknown URL behaves like a 404.
    """

    def __init__(self):
        self.routes: dict[str, Any] = {}
        self.calls: list[str] = []

    def add(self, url: str, response: Any) -> None:
        self.routes[url] = response

    def __call__(self, url: str, method: str = "GET", payload: Any = None, headers=None) -> Any:
        self.calls.append(url)
        if url not in self.routes:
            raise HTTPStatusError(url, 404, "Not Found")
        response = self.routes[url]
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def pokeapi(monkeypatch) -> FakeAPI:
    """A fake PokéAPI wired into core.pokemon."""
    fake = FakeAPI()
    monkeypatch.setattr("core.pokemon.fetch_json", fake)
    return fake


# ---------------------------------------------------------------------------
# Sample payloads (trimmed-down PokéAPI responses)
# ---------------------------------------------------------------------------


def chain_link(name: str, *children: dict) -> dict:
    """Build a PokéAPI-style evolution chain link."""
    return {
        "species": {"name": name, "url": f"{POKEAPI}/pokemon-species/{name}/"},
        "evolves_to": list(children),
        "is_baby": False,
    }


@pytest.fixture
def pikachu() -> dict:
    return {
        "id": 25,
        "name": "pikachu",
        "height": 4,
        "weight": 60,
        "types": [{"slot": 1, "type": {"name": "electric"}}],
        "stats": [
            {"base_stat": 35, "stat": {"name": "hp"}},
            {"base_stat": 55, "stat": {"name": "attack"}},
            {"base_stat": 90, "stat": {"name": "speed"}},
        ],
        "abilities": [
            {"ability": {"name": "static"}},
            {"ability": {"name": "lightning-rod"}},
        ],
        "moves": [
            {"move": {"name": "mega-punch"}},
            {"move": {"name": "pay-day"}},
            {"move": {"name": "thunder-punch"}},
            {"move": {"name": "slam"}},
            {"move": {"name": "double-edge-x"}},
        ],
        "species": {"name": "pikachu", "url": f"{POKEAPI}/pokemon-species/25/"},
    }


@pytest.fixture
def pikachu_api(pokeapi, pikachu) -> FakeAPI:
    """Fake API that knows pikachu, its species and its evolution chain."""
    pokeapi.add(f"{POKEAPI}/pokemon/pikachu", pikachu)
    pokeapi.add(
        f"{POKEAPI}/pokemon-species/25/",
        {"name": "pikachu", "evolution_chain": {"url": f"{POKEAPI}/evolution-chain/10/"}},
    )
    pokeapi.add(
        f"{POKEAPI}/evolution-chain/10/",
        {"id": 10, "chain": chain_link("pichu", chain_link("pikachu", chain_link("raichu")))},
    )
    return pokeapi
