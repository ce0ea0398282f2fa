# =============================================================================
# core/evolution.py  —  Evolution chain parsing & flattening
# =============================================================================
#
# THE PIPELINE:
#   1. parse_chain_link()          JSON chain link  -> EvolutionNode tree
#   2. flatten_evolution_chain()   EvolutionNode    -> ["bulbasaur", ...]
#   3. format_evolution_chain()    names            -> "1. Bulbasaur → 2. ..."
#
# Flattening is a pre-order walk: a node's name, then each child's whole
# subtree in the order the API lists them.  Branches are not marked in the
# output; Eevee's chain comes out as Eevee followed by all eight
# evolutions.
#
# There is no cycle or depth guard.  Trees built by parse_chain_link come
# from JSON and cannot contain cycles.
# =============================================================================

from typing import Any

from core.formatting import capitalize_first, numbered
from core.models import EvolutionNode

ARROW = " → "


def parse_chain_link(link: dict[str, Any]) -> EvolutionNode:
    """Build an EvolutionNode tree from a PokéAPI chain link.

    Raises:
        ValueError: If a link is not an object or has no species name.
    """
    if not isinstance(link, dict):
        raise ValueError("Malformed evolution chain: link is not an object")
    species = link.get("species") or {}
    name = species.get("name") if isinstance(species, dict) else None
    if not name:
        raise ValueError("Malformed evolution chain: link without a species name")
    children = tuple(parse_chain_link(child) for child in link.get("evolves_to") or [])
    return EvolutionNode(species_name=name, children=children)


def flatten_evolution_chain(root: EvolutionNode) -> list[str]:
    """Return every species name in the tree, pre-order."""
    names = [root.species_name]
    for child in root.children:
        names.extend(flatten_evolution_chain(child))
    return names


def format_evolution_chain(pokemon_name: str, species_names: list[str]) -> str:
    """Render the flattened chain as a header plus one arrow-joined line."""
    stages = numbered([capitalize_first(name) for name in species_names])
    return "\n".join([
        f"**Evolution Chain for {capitalize_first(pokemon_name)}:**",
        ARROW.join(stages),
    ])
