# ABOUTME: Stat projection from base stat, level, IVs, EVs and nature.
# ABOUTME: Includes the simplified and competitive variants used for speed comparisons.

from paldeaplanner.engine.models import OpponentProfile, RosterMember
from paldeaplanner.engine.natures import NATURE_NEUTRAL, Stat, nature_multiplier

DEFAULT_IV = 31
DEFAULT_EV = 0
# floor(252 / 4): a fully invested stat
COMPETITIVE_EV_BONUS = 63
COMPETITIVE_NATURE = 1.1


def derive_stat(
    base_stat: int,
    level: int,
    iv: int = DEFAULT_IV,
    ev: int = DEFAULT_EV,
    is_hp_stat: bool = False,
    nature_mult: float = NATURE_NEUTRAL,
) -> int:
    """Project the in-battle value of a stat.

    Args:
        base_stat: Species base value.
        level: Level in 1..100.
        iv: Individual value (0-31).
        ev: Effort value (0-252).
        is_hp_stat: Use the HP formula, which ignores nature.
        nature_mult: 0.9, 1.0 or 1.1.

    Returns:
        The projected stat as an integer.
    """
    scaled = (2 * base_stat + iv + ev // 4) * level // 100
    if is_hp_stat:
        return scaled + level + 10
    return int((scaled + 5) * nature_mult)


def simple_stat(base_stat: int, level: int) -> int:
    """Stat with 31 IVs, no EVs and a neutral nature."""
    return derive_stat(base_stat, level)


def competitive_stat(base_stat: int, level: int) -> int:
    """Stat of a fully invested, nature-boosted opponent."""
    scaled = (2 * base_stat + DEFAULT_IV + COMPETITIVE_EV_BONUS) * level // 100
    return int((scaled + 5) * COMPETITIVE_NATURE)


def member_stat(member: RosterMember, stat: Stat) -> int:
    """Project one stat of a roster member from its spread and nature. Empty slots project to 0."""
    if member.species is None:
        return 0
    return derive_stat(
        member.species.base_stats.get(stat),
        member.level,
        iv=member.ivs.get(stat),
        ev=member.evs.get(stat),
        is_hp_stat=stat is Stat.HP,
        nature_mult=nature_multiplier(member.nature, stat),
    )


def member_speed(member: RosterMember) -> int:
    """Projected speed of a roster member."""
    return member_stat(member, Stat.SPEED)


def opponent_speed(opponent: OpponentProfile, competitive: bool = False) -> int:
    """Projected speed of the opponent, using the competitive variant only when asked to."""
    base = opponent.species.base_stats.speed
    if competitive:
        return competitive_stat(base, opponent.level)
    return simple_stat(base, opponent.level)
