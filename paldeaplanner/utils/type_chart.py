# ABOUTME: Type effectiveness chart for the 18 elemental types (Gen 6+ including Fairy).
# ABOUTME: Provides the closed type enumeration and total multiplier lookups.

from enum import Enum

# Effectiveness thresholds
SUPER_EFFECTIVE_THRESHOLD = 2.0
RESISTANCE_THRESHOLD = 0.5
NEUTRAL_VALUE = 1.0
IMMUNITY_VALUE = 0.0


class PokemonType(str, Enum):
    """The 18 elemental types. Values match the species provider's lowercase identifiers."""

    NORMAL = "normal"
    FIRE = "fire"
    WATER = "water"
    ELECTRIC = "electric"
    GRASS = "grass"
    ICE = "ice"
    FIGHTING = "fighting"
    POISON = "poison"
    GROUND = "ground"
    FLYING = "flying"
    PSYCHIC = "psychic"
    BUG = "bug"
    ROCK = "rock"
    GHOST = "ghost"
    DRAGON = "dragon"
    DARK = "dark"
    STEEL = "steel"
    FAIRY = "fairy"


TYPES: list[PokemonType] = list(PokemonType)

_T = PokemonType

# Non-neutral entries per attacking type; every omitted pair is 1.0.
_NON_NEUTRAL: dict[PokemonType, dict[PokemonType, float]] = {
    _T.NORMAL: {_T.ROCK: 0.5, _T.GHOST: 0.0, _T.STEEL: 0.5},
    _T.FIRE: {
        _T.FIRE: 0.5,
        _T.WATER: 0.5,
        _T.GRASS: 2.0,
        _T.ICE: 2.0,
        _T.BUG: 2.0,
        _T.ROCK: 0.5,
        _T.DRAGON: 0.5,
        _T.STEEL: 2.0,
    },
    _T.WATER: {_T.FIRE: 2.0, _T.WATER: 0.5, _T.GRASS: 0.5, _T.GROUND: 2.0, _T.ROCK: 2.0, _T.DRAGON: 0.5},
    _T.ELECTRIC: {
        _T.WATER: 2.0,
        _T.ELECTRIC: 0.5,
        _T.GRASS: 0.5,
        _T.GROUND: 0.0,
        _T.FLYING: 2.0,
        _T.DRAGON: 0.5,
    },
    _T.GRASS: {
        _T.FIRE: 0.5,
        _T.WATER: 2.0,
        _T.GRASS: 0.5,
        _T.POISON: 0.5,
        _T.GROUND: 2.0,
        _T.FLYING: 0.5,
        _T.BUG: 0.5,
        _T.ROCK: 2.0,
        _T.DRAGON: 0.5,
        _T.STEEL: 0.5,
    },
    _T.ICE: {
        _T.FIRE: 0.5,
        _T.WATER: 0.5,
        _T.GRASS: 2.0,
        _T.ICE: 0.5,
        _T.GROUND: 2.0,
        _T.FLYING: 2.0,
        _T.DRAGON: 2.0,
        _T.STEEL: 0.5,
    },
    _T.FIGHTING: {
        _T.NORMAL: 2.0,
        _T.ICE: 2.0,
        _T.POISON: 0.5,
        _T.FLYING: 0.5,
        _T.PSYCHIC: 0.5,
        _T.BUG: 0.5,
        _T.ROCK: 2.0,
        _T.GHOST: 0.0,
        _T.DARK: 2.0,
        _T.STEEL: 2.0,
        _T.FAIRY: 0.5,
    },
    _T.POISON: {
        _T.GRASS: 2.0,
        _T.POISON: 0.5,
        _T.GROUND: 0.5,
        _T.ROCK: 0.5,
        _T.GHOST: 0.5,
        _T.STEEL: 0.0,
        _T.FAIRY: 2.0,
    },
    _T.GROUND: {
        _T.FIRE: 2.0,
        _T.ELECTRIC: 2.0,
        _T.GRASS: 0.5,
        _T.POISON: 2.0,
        _T.FLYING: 0.0,
        _T.BUG: 0.5,
        _T.ROCK: 2.0,
        _T.STEEL: 2.0,
    },
    _T.FLYING: {_T.ELECTRIC: 0.5, _T.GRASS: 2.0, _T.FIGHTING: 2.0, _T.BUG: 2.0, _T.ROCK: 0.5, _T.STEEL: 0.5},
    _T.PSYCHIC: {_T.FIGHTING: 2.0, _T.POISON: 2.0, _T.PSYCHIC: 0.5, _T.DARK: 0.0, _T.STEEL: 0.5},
    _T.BUG: {
        _T.FIRE: 0.5,
        _T.GRASS: 2.0,
        _T.FIGHTING: 0.5,
        _T.POISON: 0.5,
        _T.FLYING: 0.5,
        _T.PSYCHIC: 2.0,
        _T.GHOST: 0.5,
        _T.DARK: 2.0,
        _T.STEEL: 0.5,
        _T.FAIRY: 0.5,
    },
    _T.ROCK: {
        _T.FIRE: 2.0,
        _T.ICE: 2.0,
        _T.FIGHTING: 0.5,
        _T.GROUND: 0.5,
        _T.FLYING: 2.0,
        _T.BUG: 2.0,
        _T.STEEL: 0.5,
    },
    _T.GHOST: {_T.NORMAL: 0.0, _T.PSYCHIC: 2.0, _T.GHOST: 2.0, _T.DARK: 0.5},
    _T.DRAGON: {_T.DRAGON: 2.0, _T.STEEL: 0.5, _T.FAIRY: 0.0},
    _T.DARK: {_T.FIGHTING: 0.5, _T.PSYCHIC: 2.0, _T.GHOST: 2.0, _T.DARK: 0.5, _T.FAIRY: 0.5},
    _T.STEEL: {
        _T.FIRE: 0.5,
        _T.WATER: 0.5,
        _T.ELECTRIC: 0.5,
        _T.ICE: 2.0,
        _T.ROCK: 2.0,
        _T.STEEL: 0.5,
        _T.FAIRY: 2.0,
    },
    _T.FAIRY: {
        _T.FIRE: 0.5,
        _T.FIGHTING: 2.0,
        _T.POISON: 0.5,
        _T.DRAGON: 2.0,
        _T.DARK: 2.0,
        _T.STEEL: 0.5,
    },
}

# 18x18 effectiveness matrix: EFFECTIVENESS[attacking_type][defending_type]
EFFECTIVENESS: dict[PokemonType, dict[PokemonType, float]] = {
    atk: {dfn: _NON_NEUTRAL[atk].get(dfn, NEUTRAL_VALUE) for dfn in TYPES} for atk in TYPES
}

del _T


def parse_type(value: object) -> PokemonType | None:
    """Resolve a loosely-typed identifier to a PokemonType.

    Args:
        value: A PokemonType, or a type name in any letter case (e.g. "Fire", " water ").

    Returns:
        The matching PokemonType, or None when the value is not one of the 18 types.
    """
    if isinstance(value, PokemonType):
        return value
    if not isinstance(value, str):
        return None
    try:
        return PokemonType(value.strip().lower())
    except ValueError:
        return None


def multiplier(attacker: PokemonType | str | None, defender: PokemonType | str | None) -> float:
    """Look up the single-type effectiveness of `attacker` hitting `defender`.

    Unknown identifiers on either side resolve to a neutral 1.0 instead of raising.
    Dual typing is not handled here; callers compound two lookups themselves.
    """
    atk_type = parse_type(attacker)
    def_type = parse_type(defender)
    if atk_type is None or def_type is None:
        return NEUTRAL_VALUE
    return EFFECTIVENESS[atk_type][def_type]


def get_effectiveness(
    atk_type: PokemonType | str,
    def_type1: PokemonType | str,
    def_type2: PokemonType | str | None = None,
) -> float:
    """Calculate the compounded multiplier against a (possibly dual-typed) defender.

    Args:
        atk_type: The attacking type.
        def_type1: The defender's primary type.
        def_type2: The defender's secondary type, or None for monotype.

    Returns:
        Effectiveness multiplier: 0, 0.25, 0.5, 1, 2, or 4.

    Note:
        If def_type1 == def_type2, the multiplier is applied only once
        (e.g., Water vs Fire/Fire = 2x, NOT 4x).
    """
    result = multiplier(atk_type, def_type1)

    if def_type2 is not None and parse_type(def_type2) != parse_type(def_type1):
        result *= multiplier(atk_type, def_type2)

    return result


def effectiveness_against(atk_type: PokemonType | str, defending_types: list[PokemonType]) -> float:
    """Compound the multiplier of one attacking type over an ordered 1-2 type defence."""
    if not defending_types:
        return NEUTRAL_VALUE
    second = defending_types[1] if len(defending_types) > 1 else None
    return get_effectiveness(atk_type, defending_types[0], second)


def get_weaknesses(def_type1: PokemonType | str, def_type2: PokemonType | str | None = None) -> list[PokemonType]:
    """Return attacking types that hit the defender for >=2x."""
    return [
        atk_type for atk_type in TYPES if get_effectiveness(atk_type, def_type1, def_type2) >= SUPER_EFFECTIVE_THRESHOLD
    ]


def get_resistances(def_type1: PokemonType | str, def_type2: PokemonType | str | None = None) -> list[PokemonType]:
    """Return attacking types resisted (<=0.5x, excluding 0x) by the defender."""
    return [
        atk_type
        for atk_type in TYPES
        if IMMUNITY_VALUE < get_effectiveness(atk_type, def_type1, def_type2) <= RESISTANCE_THRESHOLD
    ]


def get_immunities(def_type1: PokemonType | str, def_type2: PokemonType | str | None = None) -> list[PokemonType]:
    """Return attacking types the defender is immune to (0x)."""
    return [atk_type for atk_type in TYPES if get_effectiveness(atk_type, def_type1, def_type2) == IMMUNITY_VALUE]

