# ABOUTME: Engine package: stat projection, matchup evaluation, catch utility and team composition.
# ABOUTME: All scoring is pure; species data comes in through caller-supplied resolvers.

from paldeaplanner.engine.catch_utility import adjust_catch_score, score_utility
from paldeaplanner.engine.composer import (
    boss_bonus,
    compose,
    compose_async,
    compose_report,
    compose_report_async,
    rank_candidates,
)
from paldeaplanner.engine.matchup import defensive_score, evaluate, offensive_score, stab_multiplier
from paldeaplanner.engine.models import (
    ROSTER_SIZE,
    BaseStats,
    CatchUtility,
    CompositionReport,
    MatchupResult,
    MoveEntry,
    MoveRef,
    OpponentProfile,
    RosterAnalysis,
    RosterMember,
    SpeciesSnapshot,
    StatSpread,
)
from paldeaplanner.engine.natures import Nature, Stat, nature_multiplier
from paldeaplanner.engine.providers import MappingSpeciesProvider, normalize_species_name
from paldeaplanner.engine.roster import analyze_roster, assign_to_open_slots, open_slot_indices
from paldeaplanner.engine.stats import competitive_stat, derive_stat, member_speed, opponent_speed, simple_stat

__all__ = [
    "ROSTER_SIZE",
    "BaseStats",
    "CatchUtility",
    "CompositionReport",
    "MappingSpeciesProvider",
    "MatchupResult",
    "MoveEntry",
    "MoveRef",
    "Nature",
    "OpponentProfile",
    "RosterAnalysis",
    "RosterMember",
    "SpeciesSnapshot",
    "Stat",
    "StatSpread",
    "adjust_catch_score",
    "analyze_roster",
    "assign_to_open_slots",
    "boss_bonus",
    "competitive_stat",
    "compose",
    "compose_async",
    "compose_report",
    "compose_report_async",
    "defensive_score",
    "derive_stat",
    "evaluate",
    "member_speed",
    "nature_multiplier",
    "normalize_species_name",
    "offensive_score",
    "open_slot_indices",
    "opponent_speed",
    "rank_candidates",
    "score_utility",
    "simple_stat",
    "stab_multiplier",
]
