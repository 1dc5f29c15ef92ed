# ABOUTME: Matchup evaluator scoring one roster member against one opponent.
# ABOUTME: Computes offensive score with STAB/Tera, defensive score, speed tier and catch utility.

from paldeaplanner.engine.catch_utility import adjust_catch_score, score_utility
from paldeaplanner.engine.models import MatchupResult, OpponentProfile, RosterMember
from paldeaplanner.engine.stats import member_speed, opponent_speed
from paldeaplanner.utils.type_chart import (
    NEUTRAL_VALUE,
    SUPER_EFFECTIVE_THRESHOLD,
    PokemonType,
    effectiveness_against,
)

TERA_NUKE_STAB = 2.0
STAB = 1.5
NO_STAB = 1.0

FASTER = "faster"
SLOWER = "slower"
TIE = "tie"

# (minimum score, message), checked top-down; scores below 1 are "Not Effective"
OFFENSE_MESSAGES: list[tuple[float, str]] = [
    (6.0, "NUCLEAR DAMAGE (OHKO)"),
    (4.0, "Massive Damage"),
    (3.0, "Super Effective"),
    (1.5, "Solid Hit"),
]
LEGACY_OFFENSE_MESSAGES: list[tuple[float, str]] = [
    (4.0, "Huge 4x damage"),
    (2.0, "Super effective 2x"),
]
NOT_EFFECTIVE_MESSAGE = "Not Effective"
NEUTRAL_MESSAGE = "Neutral"

DOUBLE_WEAKNESS_THRESHOLD = 4.0


def stab_multiplier(atk_type: PokemonType, tera_type: PokemonType | None, original_types: tuple[PokemonType, ...]) -> float:
    """Same-type attack bonus for `atk_type`.

    Matching both the Tera type and an original type doubles the hit; matching
    only one of them gives the usual 1.5x.
    """
    is_tera = atk_type == tera_type
    is_original = atk_type in original_types
    if is_tera and is_original:
        return TERA_NUKE_STAB
    if is_tera or is_original:
        return STAB
    return NO_STAB


def attacking_types(member: RosterMember, use_move_aware_scoring: bool = True) -> list[PokemonType]:
    """Types the member is assumed to attack with.

    Natural types plus the Tera type. In move-aware mode, selected damaging moves
    replace that set; a member with no typed damaging moves falls back to it.
    """
    if member.species is None:
        return []

    if use_move_aware_scoring:
        move_types: list[PokemonType] = []
        for move in member.selected_moves:
            if move is None or move.is_status or move.type is None:
                continue
            if move.type not in move_types:
                move_types.append(move.type)
        if move_types:
            return move_types

    types = list(member.species.types)
    tera = member.effective_tera_type
    if tera is not None and tera not in types:
        types.append(tera)
    return types


def offensive_score(
    member: RosterMember,
    opponent: OpponentProfile,
    use_move_aware_scoring: bool = True,
) -> tuple[float, PokemonType | None]:
    """Best damage score the member can threaten and the type achieving it.

    Returns:
        Tuple of (score, best type). The best type is None when nothing scores above 0.
    """
    if member.species is None:
        return 0.0, None

    defending = opponent.defensive_types
    tera = member.effective_tera_type
    best_score = 0.0
    best_type: PokemonType | None = None

    for atk_type in attacking_types(member, use_move_aware_scoring):
        score = effectiveness_against(atk_type, defending)
        if use_move_aware_scoring:
            score *= stab_multiplier(atk_type, tera, member.species.types)
        if score > best_score:
            best_score = score
            best_type = atk_type

    return best_score, best_type


def active_defensive_types(member: RosterMember) -> list[PokemonType]:
    """Tera type alone when it differs from the primary type, else the natural types."""
    if member.species is None:
        return []
    if member.tera_type is not None and member.tera_type != member.species.primary_type:
        return [member.tera_type]
    return list(member.species.types)


def defensive_score(member: RosterMember, opponent: OpponentProfile) -> float:
    """Highest multiplier any of the opponent's attacking types deals to the member."""
    defending = active_defensive_types(member)
    if not defending:
        return NEUTRAL_VALUE
    return max((effectiveness_against(atk_type, defending) for atk_type in opponent.attacking_types), default=0.0)


def offense_message(score: float, use_move_aware_scoring: bool = True) -> str:
    """Human readable verdict for an offensive score."""
    thresholds = OFFENSE_MESSAGES if use_move_aware_scoring else LEGACY_OFFENSE_MESSAGES
    for minimum, message in thresholds:
        if score >= minimum:
            return message
    if score < NEUTRAL_VALUE:
        return NOT_EFFECTIVE_MESSAGE
    return NEUTRAL_MESSAGE


def defense_message(score: float) -> str:
    """Human readable verdict for incoming damage."""
    if score >= DOUBLE_WEAKNESS_THRESHOLD:
        return "4x weakness"
    if score >= SUPER_EFFECTIVE_THRESHOLD:
        return "Super effective incoming"
    return NEUTRAL_MESSAGE


def speed_tier(speed_delta: int) -> str:
    """Classify a speed difference as faster, slower or tie."""
    if speed_delta > 0:
        return FASTER
    if speed_delta < 0:
        return SLOWER
    return TIE


def evaluate(
    member: RosterMember,
    opponent: OpponentProfile,
    *,
    use_move_aware_scoring: bool = True,
    competitive_opponent: bool = False,
) -> MatchupResult | None:
    """Evaluate one roster member against an opponent.

    Args:
        member: The roster member to score.
        opponent: The opponent profile.
        use_move_aware_scoring: Apply STAB/Tera bonuses and restrict to selected damaging
            moves. When False, the simpler type-only evaluation is used.
        competitive_opponent: Estimate the opponent's speed as fully invested.

    Returns:
        The MatchupResult, or None for an empty slot.
    """
    if member.species is None:
        return None

    offense, best_type = offensive_score(member, opponent, use_move_aware_scoring)
    defense = defensive_score(member, opponent)

    my_speed = member_speed(member)
    their_speed = opponent_speed(opponent, competitive=competitive_opponent)
    delta = my_speed - their_speed

    utility = score_utility(member, opponent)

    return MatchupResult(
        member_id=member.member_id,
        offensive_score=offense,
        defensive_score=defense,
        best_move_type=best_type,
        speed_delta=delta,
        speed_tier=speed_tier(delta),
        member_speed=my_speed,
        opponent_speed=their_speed,
        message=offense_message(offense, use_move_aware_scoring),
        defensive_message=defense_message(defense),
        catch_score=adjust_catch_score(utility.score, defense),
        catch_moves=list(utility.move_labels),
    )
