# ABOUTME: Nature table mapping each of the 25 natures to its boosted and reduced stat.
# ABOUTME: Provides the 0.9 / 1.0 / 1.1 multiplier used by stat projection.

from enum import Enum

NATURE_BOOST = 1.1
NATURE_DROP = 0.9
NATURE_NEUTRAL = 1.0


class Stat(str, Enum):
    """The six battle statistics, named like the species provider names them."""

    HP = "hp"
    ATTACK = "attack"
    DEFENSE = "defense"
    SPECIAL_ATTACK = "special-attack"
    SPECIAL_DEFENSE = "special-defense"
    SPEED = "speed"


class Nature(str, Enum):
    """All 25 natures."""

    HARDY = "hardy"
    DOCILE = "docile"
    SERIOUS = "serious"
    BASHFUL = "bashful"
    QUIRKY = "quirky"
    LONELY = "lonely"
    BRAVE = "brave"
    ADAMANT = "adamant"
    NAUGHTY = "naughty"
    BOLD = "bold"
    RELAXED = "relaxed"
    IMPISH = "impish"
    LAX = "lax"
    MODEST = "modest"
    MILD = "mild"
    QUIET = "quiet"
    RASH = "rash"
    CALM = "calm"
    GENTLE = "gentle"
    SASSY = "sassy"
    CAREFUL = "careful"
    TIMID = "timid"
    HASTY = "hasty"
    JOLLY = "jolly"
    NAIVE = "naive"


# (boosted stat, reduced stat); neutral natures change nothing
NATURE_EFFECTS: dict[Nature, tuple[Stat | None, Stat | None]] = {
    Nature.HARDY: (None, None),
    Nature.DOCILE: (None, None),
    Nature.SERIOUS: (None, None),
    Nature.BASHFUL: (None, None),
    Nature.QUIRKY: (None, None),
    Nature.LONELY: (Stat.ATTACK, Stat.DEFENSE),
    Nature.BRAVE: (Stat.ATTACK, Stat.SPEED),
    Nature.ADAMANT: (Stat.ATTACK, Stat.SPECIAL_ATTACK),
    Nature.NAUGHTY: (Stat.ATTACK, Stat.SPECIAL_DEFENSE),
    Nature.BOLD: (Stat.DEFENSE, Stat.ATTACK),
    Nature.RELAXED: (Stat.DEFENSE, Stat.SPEED),
    Nature.IMPISH: (Stat.DEFENSE, Stat.SPECIAL_ATTACK),
    Nature.LAX: (Stat.DEFENSE, Stat.SPECIAL_DEFENSE),
    Nature.MODEST: (Stat.SPECIAL_ATTACK, Stat.ATTACK),
    Nature.MILD: (Stat.SPECIAL_ATTACK, Stat.DEFENSE),
    Nature.QUIET: (Stat.SPECIAL_ATTACK, Stat.SPEED),
    Nature.RASH: (Stat.SPECIAL_ATTACK, Stat.SPECIAL_DEFENSE),
    Nature.CALM: (Stat.SPECIAL_DEFENSE, Stat.ATTACK),
    Nature.GENTLE: (Stat.SPECIAL_DEFENSE, Stat.DEFENSE),
    Nature.SASSY: (Stat.SPECIAL_DEFENSE, Stat.SPEED),
    Nature.CAREFUL: (Stat.SPECIAL_DEFENSE, Stat.SPECIAL_ATTACK),
    Nature.TIMID: (Stat.SPEED, Stat.ATTACK),
    Nature.HASTY: (Stat.SPEED, Stat.DEFENSE),
    Nature.JOLLY: (Stat.SPEED, Stat.SPECIAL_ATTACK),
    Nature.NAIVE: (Stat.SPEED, Stat.SPECIAL_DEFENSE),
}


def nature_multiplier(nature: Nature | None, stat: Stat) -> float:
    """Return the nature multiplier for `stat`. HP is never affected."""
    if nature is None or stat is Stat.HP:
        return NATURE_NEUTRAL
    boosted, reduced = NATURE_EFFECTS[nature]
    if boosted is stat:
        return NATURE_BOOST
    if reduced is stat:
        return NATURE_DROP
    return NATURE_NEUTRAL
