# =============================================================================
# core/pokemon.py  —  PokéAPI lookups, formatted for humans
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Backs the five Pokémon tools.  Each public function:
#     1. normalizes the user's input (lower-case, trimmed)
#     2. calls PokéAPI once (evolution: three chained calls)
#     3. converts the JSON into a dataclass or list
#     4. returns a short Markdown-ish text block
#
# ERROR CONTRACT:
#   These functions NEVER raise.  A 4xx/5xx from PokéAPI becomes a friendly
#   "not found" message; anything else (network trouble, a payload missing
#   fields) becomes "Error fetching ...: <reason>".  The tool layer hands
#   the string straight back to the client.
#
# DATA SOURCE:
#   PokéAPI (https://pokeapi.co): free, no key.  The base URL can be
#   pointed elsewhere with POKEAPI_BASE_URL (see core/config.py).
# =============================================================================

import logging
import urllib.parse
from typing import Any

from core import config
from core.evolution import flatten_evolution_chain, format_evolution_chain, parse_chain_link
from core.formatting import capitalize_first, format_number, numbered
from core.http_client import HTTPClientError, HTTPStatusError, fetch_json
from core.models import MoveDetails, PokemonInfo, StatValue

logger = logging.getLogger(__name__)

TYPE_LIST_LIMIT = 20
DEFAULT_MOVE_LIMIT = 10
MAX_MOVE_LIMIT = 50

VALID_TYPES = (
    "fire, water, grass, electric, psychic, ice, dragon, dark, fairy, normal, "
    "fighting, poison, ground, flying, bug, rock, ghost, steel"
)

# Payload problems we report instead of raising
_FETCH_ERRORS = (HTTPClientError, AttributeError, KeyError, TypeError, ValueError)


def _describe(error: Exception) -> str:
    if isinstance(error, KeyError):
        return f"missing field {error}"
    return str(error) or error.__class__.__name__


def _resource_url(resource: str, key: str) -> str:
    return f"{config.pokeapi_base_url()}/{resource}/{urllib.parse.quote(key, safe='')}"


def _get_resource(resource: str, key: str) -> Any | None:
    """Fetch one PokéAPI resource, or None if the API says it doesn't exist.

    Network failures still raise HTTPClientError.
    """
    try:
        return fetch_json(_resource_url(resource, key))
    except HTTPStatusError as e:
        logger.info("PokéAPI %s/%s returned HTTP %s", resource, key, e.status)
        return None


# =============================================================================
# Parsing: JSON -> dataclasses
# =============================================================================
def parse_pokemon_info(data: dict[str, Any]) -> PokemonInfo:
    return PokemonInfo(
        name=data["name"],
        id=data["id"],
        height_m=data["height"] / 10,
        weight_kg=data["weight"] / 10,
        types=[t["type"]["name"] for t in data["types"]],
        stats=[StatValue(s["stat"]["name"], s["base_stat"]) for s in data["stats"]],
        abilities=[a["ability"]["name"] for a in data["abilities"]],
    )


def parse_move_details(data: dict[str, Any]) -> MoveDetails:
    """Pull the display fields out of a /move payload.

    The effect text is the English entry with its "[effect_chance]%"
    placeholder filled in (0% when the move has no secondary chance).

    Raises:
        ValueError: If the payload is not a JSON object.
    """
    if not isinstance(data, dict):
        raise ValueError("Malformed move data: expected a JSON object")
    effect = next(
        (e["effect"] for e in data.get("effect_entries") or [] if e["language"]["name"] == "en"),
        "No description available",
    )
    effect = effect.replace("[effect_chance]%", f"{data.get('effect_chance') or 0}%", 1)
    return MoveDetails(
        name=data["name"],
        type=data["type"]["name"],
        power=data.get("power"),
        accuracy=data.get("accuracy"),
        pp=data.get("pp"),
        priority=data.get("priority", 0),
        damage_class=data["damage_class"]["name"],
        effect=effect,
    )


# =============================================================================
# Formatting: dataclasses -> text
# =============================================================================
def format_pokemon_info(info: PokemonInfo) -> str:
    return "\n".join([
        f"**{capitalize_first(info.name)}** (#{info.id})",
        f"**Height:** {format_number(info.height_m)} m",
        f"**Weight:** {format_number(info.weight_kg)} kg",
        f"**Types:** {', '.join(info.types)}",
        "**Base Stats:**",
        *[f"  - {stat.name}: {stat.base_stat}" for stat in info.stats],
        f"**Abilities:** {', '.join(info.abilities)}",
    ])


def format_move_details(move: MoveDetails) -> str:
    return "\n".join([
        f"**{move.name.replace('-', ' ', 1).upper()}**",
        f"**Type:** {move.type}",
        f"**Power:** {move.power or 'N/A'}",
        f"**Accuracy:** {move.accuracy or 'N/A'}%",
        f"**PP:** {move.pp}",
        f"**Priority:** {move.priority}",
        f"**Damage Class:** {move.damage_class}",
        f"**Effect:** {move.effect}",
    ])


def clamp_move_limit(limit: int | None) -> int:
    """Keep the requested move count within 1..50 (default 10)."""
    if limit is None:
        return DEFAULT_MOVE_LIMIT
    return max(1, min(MAX_MOVE_LIMIT, int(limit)))


# =============================================================================
# PUBLIC API — one function per tool
# =============================================================================
def get_pokemon_info(name: str) -> str:
    """Basic facts (id, size, types, stats, abilities) for one Pokémon."""
    key = name.lower().strip()
    if not key:
        return "Error: Pokemon name must not be empty."
    try:
        data = _get_resource("pokemon", key)
        if data is None:
            return (f'Error: Pokemon "{name}" not found. '
                    "Please check the spelling or try a different name.")
        return format_pokemon_info(parse_pokemon_info(data))
    except _FETCH_ERRORS as e:
        logger.warning("get_pokemon_info(%r) failed: %s", name, e)
        return f"Error fetching Pokemon data: {_describe(e)}"


def get_pokemon_by_type(type_name: str) -> str:
    """The first 20 Pokémon of a given type."""
    key = type_name.lower().strip()
    if not key:
        return "Error: Type must not be empty."
    try:
        data = _get_resource("type", key)
        if data is None:
            return f'Error: Type "{type_name}" not found. Valid types include {VALID_TYPES}.'
        names = [entry["pokemon"]["name"] for entry in data["pokemon"][:TYPE_LIST_LIMIT]]
        return "\n".join([
            f"**{capitalize_first(type_name)}-type Pokemon** (showing first {TYPE_LIST_LIMIT}):",
            *numbered([capitalize_first(n) for n in names]),
        ])
    except _FETCH_ERRORS as e:
        logger.warning("get_pokemon_by_type(%r) failed: %s", type_name, e)
        return f"Error fetching Pokemon type data: {_describe(e)}"


def get_pokemon_evolution(name: str) -> str:
    """The full evolution chain a Pokémon belongs to.

    Three requests: the Pokémon, its species (which links to the chain),
    then the chain itself.  Only the first lookup is reported as
    "not found"; a failure further along is a fetch error.
    """
    key = name.lower().strip()
    if not key:
        return "Error: Pokemon name must not be empty."
    try:
        pokemon = _get_resource("pokemon", key)
        if pokemon is None:
            return f'Error: Pokemon "{name}" not found.'
        species = fetch_json(pokemon["species"]["url"])
        chain = fetch_json(species["evolution_chain"]["url"])
        root = parse_chain_link(chain["chain"])
        return format_evolution_chain(name, flatten_evolution_chain(root))
    except _FETCH_ERRORS as e:
        logger.warning("get_pokemon_evolution(%r) failed: %s", name, e)
        return f"Error fetching evolution data: {_describe(e)}"


def get_pokemon_moves(name: str, limit: int | None = DEFAULT_MOVE_LIMIT) -> str:
    """The first `limit` moves a Pokémon can learn, in API order."""
    key = name.lower().strip()
    if not key:
        return "Error: Pokemon name must not be empty."
    try:
        data = _get_resource("pokemon", key)
        if data is None:
            return f'Error: Pokemon "{name}" not found.'
        moves = data["moves"][:clamp_move_limit(limit)]
        move_names = [m["move"]["name"].replace("-", " ", 1) for m in moves]
        return "\n".join([
            f"**Moves for {capitalize_first(name)}** (showing {len(moves)} moves):",
            *numbered(move_names),
        ])
    except _FETCH_ERRORS as e:
        logger.warning("get_pokemon_moves(%r) failed: %s", name, e)
        return f"Error fetching Pokemon moves: {_describe(e)}"


def get_move_details(name: str) -> str:
    """Type, power, accuracy, PP and effect text for one move."""
    key = name.lower().strip().replace(" ", "-", 1)
    if not key:
        return "Error: Move name must not be empty."
    try:
        data = _get_resource("move", key)
        if data is None:
            return f'Error: Move "{name}" not found.'
        return format_move_details(parse_move_details(data))
    except _FETCH_ERRORS as e:
        logger.warning("get_move_details(%r) failed: %s", name, e)
        return f"Error fetching move details: {_describe(e)}"
