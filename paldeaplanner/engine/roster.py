# ABOUTME: Roster-wide analysis against a selected opponent.
# ABOUTME: Evaluates every filled slot and picks the best counter and the best catcher.

import logging
from collections.abc import Sequence

from paldeaplanner.engine.catch_utility import BEST_CATCHER_MIN_SCORE
from paldeaplanner.engine.matchup import evaluate
from paldeaplanner.engine.models import (
    ROSTER_SIZE,
    MatchupResult,
    OpponentProfile,
    RosterAnalysis,
    RosterMember,
)

logger = logging.getLogger(__name__)


def _is_better_counter(candidate: MatchupResult, current: MatchupResult | None) -> bool:
    """True when `candidate` should replace `current` as the best counter.

    Equal offence is broken by comparing the two members' speeds, not by whether
    the candidate outspeeds the opponent. Among several members faster than the
    opponent, the fastest one is kept rather than the last one evaluated.
    """
    if current is None:
        return True
    if candidate.offensive_score != current.offensive_score:
        return candidate.offensive_score > current.offensive_score
    # Equal offence: the faster member wins
    return candidate.member_speed > current.member_speed


def analyze_roster(
    roster: Sequence[RosterMember],
    opponent: OpponentProfile,
    *,
    use_move_aware_scoring: bool = True,
    competitive_opponent: bool = False,
) -> RosterAnalysis:
    """Evaluate each roster member against the opponent.

    Args:
        roster: The roster slots; empty slots are skipped.
        opponent: The opponent profile.
        use_move_aware_scoring: Forwarded to the matchup evaluator.
        competitive_opponent: Forwarded to the matchup evaluator.

    Returns:
        RosterAnalysis with one MatchupResult per filled slot (in slot order),
        the best counter's member id, and the best catcher's member id when its
        adjusted catch score exceeds the minimum.
    """
    analysis = RosterAnalysis()
    best_counter: MatchupResult | None = None
    best_catcher: MatchupResult | None = None

    for member in roster:
        result = evaluate(
            member,
            opponent,
            use_move_aware_scoring=use_move_aware_scoring,
            competitive_opponent=competitive_opponent,
        )
        if result is None:
            continue
        analysis.matchups.append(result)

        if _is_better_counter(result, best_counter):
            best_counter = result
        if best_catcher is None or result.catch_score > best_catcher.catch_score:
            best_catcher = result

    if best_counter is not None:
        analysis.best_counter_id = best_counter.member_id
    if best_catcher is not None and best_catcher.catch_score > BEST_CATCHER_MIN_SCORE:
        analysis.best_catcher_id = best_catcher.member_id

    logger.debug(
        "Analyzed %d members vs %s: counter=%s catcher=%s",
        len(analysis.matchups),
        opponent.species.name,
        analysis.best_counter_id,
        analysis.best_catcher_id,
    )
    return analysis


def open_slot_indices(roster: Sequence[RosterMember]) -> list[int]:
    """Indices of slots the composer may fill, in slot order."""
    return [index for index, member in enumerate(roster[:ROSTER_SIZE]) if not member.locked]


def assign_to_open_slots(roster: Sequence[RosterMember], names: Sequence[str]) -> list[tuple[int, str]]:
    """Pair composed names with the non-locked slots they should fill, in order.

    Surplus names are ignored; surplus open slots stay as they are.
    """
    return list(zip(open_slot_indices(roster), names, strict=False))
