# ABOUTME: Counter suggester tool ranking owned species against a target opponent type.
# ABOUTME: Scores offence and defence vs the type, gives a verdict, and picks a roster member to replace.

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

import polars as pl

from paldeaplanner.engine.models import RosterMember, SpeciesSnapshot
from paldeaplanner.engine.providers import SpeciesResolver
from paldeaplanner.engine.stats import simple_stat
from paldeaplanner.utils.type_chart import (
    SUPER_EFFECTIVE_THRESHOLD,
    PokemonType,
    get_immunities,
    get_resistances,
    get_weaknesses,
    multiplier,
)

logger = logging.getLogger(__name__)

OFFENSE_WEIGHT = 10
IMMUNE_BONUS = 15
RESIST_BONUS = 5
WEAK_PENALTY = -10
MIN_COUNTER_SCORE = 10
# Scanning stops after the batch in which this many counters were found
COUNTER_POOL_TARGET = 12
DEFAULT_BATCH_SIZE = 20
DEFAULT_TOP_N = 6
HUGE_DAMAGE_THRESHOLD = 4.0

_COUNTER_SCHEMA = {
    "name": pl.String,
    "types": pl.String,
    "offense_multiplier": pl.Float64,
    "defense_multiplier": pl.Float64,
    "score": pl.Float64,
    "reason": pl.String,
}


@dataclass(frozen=True)
class CounterVerdict:
    """Verdict for using one species as a counter."""

    label: str
    message: str
    member_speed: int
    speed_delta: int

    @property
    def is_faster(self) -> bool:
        """True when the counter outspeeds the opponent."""
        return self.speed_delta > 0


def best_offense_multiplier(species: SpeciesSnapshot, target_type: PokemonType) -> float:
    """Best single-type multiplier the species' own types deal to the target type."""
    return max(multiplier(own_type, target_type) for own_type in species.types)


def defense_multiplier(species: SpeciesSnapshot, target_type: PokemonType) -> float:
    """Compounded multiplier the target type deals to the species."""
    result = 1.0
    for own_type in species.types:
        result *= multiplier(target_type, own_type)
    return result


def score_counter(species: SpeciesSnapshot, target_type: PokemonType) -> dict[str, Any]:
    """Score a species as a counter to the target type.

    Scoring formula:
        score = best_offense * 10 + defense_bonus
        defense_bonus: immune +15, resists +5, neutral 0, weak -10

    Args:
        species: The candidate species.
        target_type: The opponent type to counter.

    Returns:
        Dict with name, types, offense_multiplier, defense_multiplier, score, reason
    """
    offense = best_offense_multiplier(species, target_type)
    defense = defense_multiplier(species, target_type)
    is_immune = target_type in get_immunities(*species.types)
    is_resistant = target_type in get_resistances(*species.types)

    if is_immune:
        defense_bonus = IMMUNE_BONUS
    elif is_resistant:
        defense_bonus = RESIST_BONUS
    elif target_type in get_weaknesses(*species.types):
        defense_bonus = WEAK_PENALTY
    else:
        defense_bonus = 0

    if is_immune:
        reason = f"Immune to {target_type.value}"
    elif offense >= HUGE_DAMAGE_THRESHOLD:
        reason = "Huge 4x Damage"
    elif offense >= SUPER_EFFECTIVE_THRESHOLD:
        reason = "Super Effective"
    elif is_resistant:
        reason = f"Resists {target_type.value}"
    else:
        reason = ""

    return {
        "name": species.name,
        "types": "/".join(own_type.value for own_type in species.types),
        "offense_multiplier": offense,
        "defense_multiplier": defense,
        "score": offense * OFFENSE_WEIGHT + defense_bonus,
        "reason": reason,
    }


def suggest_counters(
    candidate_pool: Sequence[str],
    resolver: SpeciesResolver,
    target_type: PokemonType,
    top_n: int = DEFAULT_TOP_N,
    batch_size: int = DEFAULT_BATCH_SIZE,
) -> pl.DataFrame:
    """Rank owned species as counters to a target type.

    Candidates are resolved in batches; scanning stops once a batch brings the
    number of qualifying counters (score >= 10) to at least 12. Unresolvable
    names are skipped.

    Args:
        candidate_pool: Owned species names.
        resolver: Species resolver.
        target_type: The opponent type to counter.
        top_n: Number of counters to return.
        batch_size: Names scanned per batch.

    Returns:
        DataFrame with columns: name, types, offense_multiplier, defense_multiplier, score, reason
        Sorted by score DESC, at most top_n rows.
    """
    results: list[dict[str, Any]] = []

    for start in range(0, len(candidate_pool), batch_size):
        for name in candidate_pool[start : start + batch_size]:
            try:
                species = resolver(name)
            except Exception as e:  # noqa: BLE001
                logger.debug("Could not resolve %s: %s", name, e)
                continue
            if species is None:
                continue
            scored = score_counter(species, target_type)
            if scored["score"] >= MIN_COUNTER_SCORE:
                results.append(scored)
        if len(results) >= COUNTER_POOL_TARGET:
            break

    if not results:
        return pl.DataFrame(schema=_COUNTER_SCHEMA)

    df = pl.DataFrame(results, schema=_COUNTER_SCHEMA)
    return df.sort("score", descending=True, maintain_order=True).head(top_n)


def counter_verdict(
    species: SpeciesSnapshot,
    level: int,
    target_type: PokemonType,
    opponent_level: int,
    opponent_speed: int,
) -> CounterVerdict:
    """Give a verdict on using `species` at `level` against the target.

    The checks run in priority order: level, immunity, resist and hit, resist,
    hit, and finally a neutral matchup.
    """
    my_speed = simple_stat(species.base_stats.speed, level)
    delta = my_speed - opponent_speed
    offense = best_offense_multiplier(species, target_type)
    is_effective = offense >= SUPER_EFFECTIVE_THRESHOLD
    is_resistant = target_type in get_resistances(*species.types)

    if level < opponent_level:
        label, message = "Under-leveled", f"Needs to be at least level {opponent_level}"
    elif target_type in get_immunities(*species.types):
        label, message = "Exceptional Choice!", f"Completely Immune to {target_type.value}!"
    elif is_resistant and is_effective:
        label, message = "Great Counter", "Resistant & Super Effective!"
    elif is_resistant:
        label, message = "Solid Defense", f"Resists {target_type.value} (Safe to switch in)"
    elif is_effective:
        label, message = "Offensive Choice", "High damage, but watch your health"
    else:
        label, message = "May not be effective", "Neutral matchup, consider alternatives"

    return CounterVerdict(label=label, message=message, member_speed=my_speed, speed_delta=delta)


def suggest_replacement(roster: Sequence[RosterMember], target_type: PokemonType) -> RosterMember | None:
    """Find the filled roster member with the weakest offence against the target type.

    Lock state is ignored. Ties keep the earliest slot.
    """
    worst: RosterMember | None = None
    worst_score = float("inf")
    for member in roster:
        if member.species is None:
            continue
        score = best_offense_multiplier(member.species, target_type)
        if score < worst_score:
            worst_score = score
            worst = member
    return worst
