# ABOUTME: Greedy team composer that proposes species for the open roster slots.
# ABOUTME: Ranks owned species by base stat total plus a type bonus against a target opponent type.

import asyncio
import logging
from collections.abc import Sequence
from dataclasses import dataclass

import polars as pl

from paldeaplanner.engine.models import ROSTER_SIZE, CompositionReport, RosterMember, SpeciesSnapshot
from paldeaplanner.engine.providers import AsyncSpeciesResolver, SpeciesResolver, normalize_species_name
from paldeaplanner.settings import settings
from paldeaplanner.utils.type_chart import (
    RESISTANCE_THRESHOLD,
    SUPER_EFFECTIVE_THRESHOLD,
    PokemonType,
    multiplier,
    parse_type,
)

logger = logging.getLogger(__name__)

SUPER_EFFECTIVE_BONUS = 150
RESISTED_PENALTY = -100

# Filled in this order when no target type is given
CORE_COVERAGE_TYPES: list[PokemonType] = [PokemonType.FIRE, PokemonType.WATER, PokemonType.GRASS]

RANKING_LOG_SIZE = 10

_RANKING_SCHEMA = {
    "name": pl.String,
    "types": pl.String,
    "bst": pl.Int64,
    "boss_bonus": pl.Int64,
    "score": pl.Int64,
}


@dataclass(frozen=True)
class ScoredCandidate:
    """A resolved candidate with its composition score."""

    species: SpeciesSnapshot
    boss_bonus: int

    @property
    def score(self) -> int:
        """Base stat total plus the boss bonus."""
        return self.species.bst + self.boss_bonus


@dataclass
class _CompositionPlan:
    locked: list[SpeciesSnapshot]
    open_slots: int
    names_to_resolve: list[str]
    target: PokemonType | None


def boss_bonus(species: SpeciesSnapshot, target_type: PokemonType | None) -> int:
    """Type bonus of a candidate against the target opponent type.

    +150 when one of its types hits the target super effectively, -100 when its
    best type is resisted, 0 otherwise or when there is no target.
    """
    if target_type is None:
        return 0
    best = max(multiplier(own_type, target_type) for own_type in species.types)
    if best >= SUPER_EFFECTIVE_THRESHOLD:
        return SUPER_EFFECTIVE_BONUS
    if best <= RESISTANCE_THRESHOLD:
        return RESISTED_PENALTY
    return 0


def rank_candidates(candidates: Sequence[SpeciesSnapshot], target_type: PokemonType | None) -> list[ScoredCandidate]:
    """Score candidates and sort them by score descending, keeping pool order on ties."""
    scored = [ScoredCandidate(species, boss_bonus(species, target_type)) for species in candidates]
    return sorted(scored, key=lambda candidate: candidate.score, reverse=True)


def ranking_frame(ranked: Sequence[ScoredCandidate]) -> pl.DataFrame:
    """Tabulate ranked candidates for inspection."""
    if not ranked:
        return pl.DataFrame(schema=_RANKING_SCHEMA)
    return pl.DataFrame(
        [
            {
                "name": candidate.species.name,
                "types": "/".join(own_type.value for own_type in candidate.species.types),
                "bst": candidate.species.bst,
                "boss_bonus": candidate.boss_bonus,
                "score": candidate.score,
            }
            for candidate in ranked
        ],
        schema=_RANKING_SCHEMA,
    )


def _plan(
    candidate_pool: Sequence[str],
    current_roster: Sequence[RosterMember],
    target_opponent_type: PokemonType | str | None,
    resolution_limit: int | None,
) -> _CompositionPlan:
    if len(current_roster) != ROSTER_SIZE:
        raise ValueError(f"Roster must have exactly {ROSTER_SIZE} slots, got {len(current_roster)}")

    target = parse_type(target_opponent_type) if target_opponent_type is not None else None
    if target_opponent_type is not None and target is None:
        logger.warning("Ignoring unknown target type %r", target_opponent_type)

    locked = [member.species for member in current_roster if member.locked and member.species is not None]
    open_slots = sum(1 for member in current_roster if not member.locked)
    locked_keys = {normalize_species_name(species.name) for species in locked}

    limit = settings.COMPOSER_RESOLUTION_LIMIT if resolution_limit is None else resolution_limit
    names: list[str] = []
    seen: set[str] = set()
    for name in candidate_pool:
        key = normalize_species_name(name)
        if key in locked_keys or key in seen:
            continue
        seen.add(key)
        names.append(name)
    if len(names) > limit:
        logger.info("Resolving only the first %d of %d candidates", limit, len(names))
        names = names[:limit]

    return _CompositionPlan(locked=locked, open_slots=open_slots, names_to_resolve=names, target=target)


def _finish(plan: _CompositionPlan, resolved: list[SpeciesSnapshot], failed: list[str]) -> CompositionReport:
    if failed:
        logger.warning("Resolution failed for %d candidates", len(failed))

    locked_keys = {normalize_species_name(species.name) for species in plan.locked}
    candidates = [species for species in resolved if normalize_species_name(species.name) not in locked_keys]
    ranked = rank_candidates(candidates, plan.target)

    target_label = plan.target.value if plan.target is not None else "general"
    logger.debug("Top %d candidates for %s:", RANKING_LOG_SIZE, target_label)
    for position, candidate in enumerate(ranked[:RANKING_LOG_SIZE], start=1):
        logger.debug(
            "  %d. %s: BST=%d, TypeBonus=%d, TOTAL=%d",
            position,
            candidate.species.name,
            candidate.species.bst,
            candidate.boss_bonus,
            candidate.score,
        )

    team_size = len(plan.locked) + plan.open_slots
    team: list[SpeciesSnapshot] = list(plan.locked)
    chosen: set[str] = set(locked_keys)
    covered: set[PokemonType] = {own_type for species in plan.locked for own_type in species.types}

    def take(species: SpeciesSnapshot) -> None:
        team.append(species)
        chosen.add(normalize_species_name(species.name))
        covered.update(species.types)

    if plan.target is None:
        for core_type in CORE_COVERAGE_TYPES:
            if len(team) >= team_size:
                break
            if core_type in covered:
                continue
            best_fit = next(
                (
                    candidate.species
                    for candidate in ranked
                    if core_type in candidate.species.types
                    and normalize_species_name(candidate.species.name) not in chosen
                ),
                None,
            )
            if best_fit is not None:
                take(best_fit)

    for candidate in ranked:
        if len(team) >= team_size:
            break
        if normalize_species_name(candidate.species.name) not in chosen:
            take(candidate.species)

    names = [species.name for species in team[len(plan.locked) :]]
    logger.info("Composed %d additions from %d resolved candidates", len(names), len(resolved))
    return CompositionReport(names=names, failed_names=failed, ranking=ranking_frame(ranked))


def compose_report(
    candidate_pool: Sequence[str],
    current_roster: Sequence[RosterMember],
    resolver: SpeciesResolver,
    target_opponent_type: PokemonType | str | None = None,
    *,
    resolution_limit: int | None = None,
) -> CompositionReport:
    """Compose additions for the open roster slots and report diagnostics.

    Args:
        candidate_pool: Owned species names, in the caller's order.
        current_roster: The six roster slots; locked slots are kept verbatim.
        resolver: Resolves a name to a SpeciesSnapshot. Returning None or raising
            drops the candidate for this call.
        target_opponent_type: Optional opponent type to build against.
        resolution_limit: Maximum names to resolve. Defaults to settings.

    Returns:
        CompositionReport with the proposed names, failed names and the ranking.

    Raises:
        ValueError: If the roster does not have exactly six slots.
    """
    plan = _plan(candidate_pool, current_roster, target_opponent_type, resolution_limit)
    if plan.open_slots == 0 or not plan.names_to_resolve:
        return CompositionReport(ranking=ranking_frame([]))

    resolved: list[SpeciesSnapshot] = []
    failed: list[str] = []
    for name in plan.names_to_resolve:
        try:
            snapshot = resolver(name)
        except Exception as e:  # noqa: BLE001
            logger.debug("Could not resolve %s: %s", name, e)
            snapshot = None
        if snapshot is None:
            failed.append(name)
        else:
            resolved.append(snapshot)

    return _finish(plan, resolved, failed)


def compose(
    candidate_pool: Sequence[str],
    current_roster: Sequence[RosterMember],
    resolver: SpeciesResolver,
    target_opponent_type: PokemonType | str | None = None,
    *,
    resolution_limit: int | None = None,
) -> list[str]:
    """Propose species names for the non-locked roster slots, in fill order."""
    return compose_report(
        candidate_pool,
        current_roster,
        resolver,
        target_opponent_type,
        resolution_limit=resolution_limit,
    ).names


async def compose_report_async(
    candidate_pool: Sequence[str],
    current_roster: Sequence[RosterMember],
    resolver: AsyncSpeciesResolver,
    target_opponent_type: PokemonType | str | None = None,
    *,
    resolution_limit: int | None = None,
    batch_size: int | None = None,
) -> CompositionReport:
    """Async form of `compose_report`, resolving candidates concurrently in batches.

    Batch size only affects throughput; the result equals the sequential one.
    """
    plan = _plan(candidate_pool, current_roster, target_opponent_type, resolution_limit)
    if plan.open_slots == 0 or not plan.names_to_resolve:
        return CompositionReport(ranking=ranking_frame([]))

    size = settings.COMPOSER_BATCH_SIZE if batch_size is None else batch_size
    if size < 1:
        raise ValueError(f"Batch size must be positive, got {size}")

    resolved: list[SpeciesSnapshot] = []
    failed: list[str] = []
    names = plan.names_to_resolve
    for start in range(0, len(names), size):
        batch = names[start : start + size]
        results = await asyncio.gather(*(resolver(name) for name in batch), return_exceptions=True)
        for name, result in zip(batch, results, strict=True):
            if isinstance(result, Exception):
                logger.debug("Could not resolve %s: %s", name, result)
                failed.append(name)
            elif isinstance(result, BaseException):
                raise result
            elif result is None:
                failed.append(name)
            else:
                resolved.append(result)

    return _finish(plan, resolved, failed)


async def compose_async(
    candidate_pool: Sequence[str],
    current_roster: Sequence[RosterMember],
    resolver: AsyncSpeciesResolver,
    target_opponent_type: PokemonType | str | None = None,
    *,
    resolution_limit: int | None = None,
    batch_size: int | None = None,
) -> list[str]:
    """Async form of `compose`."""
    report = await compose_report_async(
        candidate_pool,
        current_roster,
        resolver,
        target_opponent_type,
        resolution_limit=resolution_limit,
        batch_size=batch_size,
    )
    return report.names
