# =============================================================================
# core/models.py  —  Data Models (the "nouns" of the system)
# =============================================================================
#
# Plain dataclasses describing the data that flows from the third-party API
# into the text formatters.  They carry no behavior.
#
# Every model is built fresh from an API response for a single tool call and
# thrown away once the reply text exists. Nothing is cached or persisted.
# =============================================================================

from dataclasses import dataclass, field
from typing import Optional


# -----------------------------------------------------------------------------
# EvolutionNode — one stage of an evolution chain
# -----------------------------------------------------------------------------
# PokéAPI returns evolution chains as nested "chain links":
#
#   {"species": {"name": "eevee"}, "evolves_to": [ {...}, {...}, ... ]}
#
# Each link becomes one EvolutionNode; its evolves_to list becomes children.
# The tree is finite and acyclic (JSON can't express a cycle), usually no
# deeper than 3 stages.  Branching chains (Eevee, Oddish...) have several
# children on one node.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class EvolutionNode:
    """A species at one evolution stage plus the species it evolves into."""

    species_name: str
    children: tuple["EvolutionNode", ...] = ()


@dataclass
class StatValue:
    """A single base stat, e.g. ("hp", 35)."""

    name: str
    base_stat: int


# -----------------------------------------------------------------------------
# PokemonInfo — the subset of /pokemon/{name} the info tool displays
# -----------------------------------------------------------------------------
@dataclass
class PokemonInfo:
    """Basic facts about one Pokémon."""

    name: str
    id: int
    height_m: float                     # API gives decimetres
    weight_kg: float                    # API gives hectograms
    types: list[str] = field(default_factory=list)
    stats: list[StatValue] = field(default_factory=list)
    abilities: list[str] = field(default_factory=list)


# -----------------------------------------------------------------------------
# MoveDetails — the subset of /move/{name} the move tool displays
# -----------------------------------------------------------------------------
@dataclass
class MoveDetails:
    """Battle data for one move."""

    name: str
    type: str
    power: Optional[int]                # None for status moves
    accuracy: Optional[int]             # None for never-miss moves
    pp: Optional[int]
    priority: int
    damage_class: str
    effect: str                         # English effect text, already filled in
