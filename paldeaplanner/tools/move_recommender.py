# ABOUTME: Move recommender tool listing learnable moves of a wanted type.
# ABOUTME: Considers moves learned at or before the current level, newest first.

from typing import Any

from paldeaplanner.engine.models import SpeciesSnapshot
from paldeaplanner.utils.type_chart import PokemonType

# Only the first entries learned by the current level are inspected
MAX_CANDIDATE_MOVES = 15


def recommend_moves(species: SpeciesSnapshot, current_level: int, target_type: PokemonType) -> list[dict[str, Any]]:
    """Recommend already-learnable moves whose type matches `target_type`.

    Args:
        species: Species whose move pool is searched.
        current_level: Moves learned above this level are ignored.
        target_type: The move type wanted (typically the type hitting the opponent hardest).

    Returns:
        List of dicts with keys: name, level, damage_class, power
        Sorted by level DESC.
    """
    candidates = [move for move in species.move_pool if move.level_learned <= current_level][:MAX_CANDIDATE_MOVES]

    matches = [
        {
            "name": move.name,
            "level": move.level_learned,
            "damage_class": move.damage_class,
            "power": move.power,
        }
        for move in candidates
        if move.type == target_type
    ]
    matches.sort(key=lambda move: move["level"], reverse=True)
    return matches
