# ABOUTME: Utils package for paldeaplanner utility functions.
# ABOUTME: Contains the type chart module shared by the engine and the tools.

from paldeaplanner.utils.type_chart import (
    EFFECTIVENESS,
    TYPES,
    PokemonType,
    effectiveness_against,
    get_effectiveness,
    get_immunities,
    get_resistances,
    get_weaknesses,
    multiplier,
    parse_type,
)

__all__ = [
    "EFFECTIVENESS",
    "TYPES",
    "PokemonType",
    "effectiveness_against",
    "get_effectiveness",
    "get_immunities",
    "get_resistances",
    "get_weaknesses",
    "multiplier",
    "parse_type",
]
