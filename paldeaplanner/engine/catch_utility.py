# ABOUTME: Catch utility scoring: how well a member can weaken an opponent without knocking it out.
# ABOUTME: Scores incapacitate, sleep and paralysis move categories against the opponent's typing.

from paldeaplanner.engine.models import CatchUtility, OpponentProfile, RosterMember
from paldeaplanner.utils.type_chart import PokemonType

INCAPACITATE_MOVES = frozenset({"false-swipe", "hold-back"})
SLEEP_MOVES = frozenset(
    {"spore", "sleep-powder", "hypnosis", "yawn", "sing", "lovely-kiss", "dark-void", "grass-whistle"}
)
PARALYZE_MOVES = frozenset({"thunder-wave", "glare", "stun-spore", "nuzzle"})

INCAPACITATE_SCORE = 50
SLEEP_SCORE = 40
PARALYZE_SCORE = 25

INCAPACITATE_LABEL = "False Swipe"
SLEEP_LABEL = "Sleep Move"
PARALYZE_LABEL = "Paralyze Move"

# Types that nullify a whole category
INCAPACITATE_BLOCKER = PokemonType.GHOST
PARALYSIS_BLOCKER = PokemonType.ELECTRIC

# Types that make one specific move fail
MOVE_BLOCKERS: dict[str, PokemonType] = {
    "spore": PokemonType.GRASS,
    "sleep-powder": PokemonType.GRASS,
    "stun-spore": PokemonType.GRASS,
    "thunder-wave": PokemonType.GROUND,
    "nuzzle": PokemonType.GROUND,
}

RISKY_INCOMING_THRESHOLD = 2.0
SAFE_INCOMING_THRESHOLD = 0.5
RISK_PENALTY = 20
SAFETY_BONUS = 15

BEST_CATCHER_MIN_SCORE = 10


def _usable_moves(known: frozenset[str], category: frozenset[str], opponent_types: frozenset[PokemonType]) -> set[str]:
    return {name for name in known & category if MOVE_BLOCKERS.get(name) not in opponent_types}


def score_utility(member: RosterMember, opponent: OpponentProfile) -> CatchUtility:
    """Score the member's catch utility against the opponent.

    Incapacitating moves are scored independently. Sleep is preferred over
    paralysis: paralysis only counts when no usable sleep move exists.

    Args:
        member: The roster member; its learnable and selected moves are considered.
        opponent: The opponent, whose natural and Tera types can block moves.

    Returns:
        CatchUtility with the unadjusted score and the labels of useful categories.
    """
    if member.species is None:
        return CatchUtility(score=0)

    known = member.known_move_names
    opponent_types = opponent.all_types
    score = 0
    labels: list[str] = []

    if known & INCAPACITATE_MOVES and INCAPACITATE_BLOCKER not in opponent_types:
        score += INCAPACITATE_SCORE
        labels.append(INCAPACITATE_LABEL)

    if _usable_moves(known, SLEEP_MOVES, opponent_types):
        score += SLEEP_SCORE
        labels.append(SLEEP_LABEL)
    elif PARALYSIS_BLOCKER not in opponent_types and _usable_moves(known, PARALYZE_MOVES, opponent_types):
        score += PARALYZE_SCORE
        labels.append(PARALYZE_LABEL)

    return CatchUtility(score=score, move_labels=labels)


def adjust_catch_score(score: int, defensive_score: float) -> int:
    """Apply the survival risk adjustment to a raw catch score."""
    if defensive_score >= RISKY_INCOMING_THRESHOLD:
        return score - RISK_PENALTY
    if defensive_score <= SAFE_INCOMING_THRESHOLD:
        return score + SAFETY_BONUS
    return score
