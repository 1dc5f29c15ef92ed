# ABOUTME: Held item recommender based on a species' stats, types and evolution method.
# ABOUTME: Suggests an attack booster, type boosters, and Soothe Bell for friendship evolutions.

from dataclasses import dataclass

from paldeaplanner.engine.models import SpeciesSnapshot
from paldeaplanner.utils.type_chart import PokemonType

MAX_RECOMMENDATIONS = 3

TYPE_ITEMS: dict[PokemonType, str] = {
    PokemonType.NORMAL: "Silk Scarf",
    PokemonType.FIRE: "Charcoal",
    PokemonType.WATER: "Mystic Water",
    PokemonType.ELECTRIC: "Magnet",
    PokemonType.GRASS: "Miracle Seed",
    PokemonType.ICE: "Never-Melt Ice",
    PokemonType.FIGHTING: "Black Belt",
    PokemonType.POISON: "Poison Barb",
    PokemonType.GROUND: "Soft Sand",
    PokemonType.FLYING: "Sharp Beak",
    PokemonType.PSYCHIC: "Twisted Spoon",
    PokemonType.BUG: "Silver Powder",
    PokemonType.ROCK: "Hard Stone",
    PokemonType.GHOST: "Spell Tag",
    PokemonType.DRAGON: "Dragon Fang",
    PokemonType.STEEL: "Metal Coat",
    PokemonType.DARK: "Black Glasses",
    PokemonType.FAIRY: "Fairy Feather",
}


@dataclass(frozen=True)
class RecommendedItem:
    """A held item suggestion."""

    name: str
    reason: str


def recommend_items(species: SpeciesSnapshot, evolution_details: str | None = None) -> list[RecommendedItem]:
    """Recommend up to three held items.

    Args:
        species: The species to equip.
        evolution_details: Free-text evolution condition, e.g. "High friendship".

    Returns:
        Recommendations in priority order: attack booster, type boosters, Soothe Bell.
    """
    items: list[RecommendedItem] = []

    if species.base_stats.attack >= species.base_stats.special_attack:
        items.append(RecommendedItem("Muscle Band", "Boosts Physical"))
    else:
        items.append(RecommendedItem("Wise Glasses", "Boosts Special"))

    for own_type in species.types:
        items.append(RecommendedItem(TYPE_ITEMS[own_type], f"Boosts {own_type.value}"))

    if evolution_details and "friendship" in evolution_details.lower():
        items.append(RecommendedItem("Soothe Bell", "Required for Evo"))

    return items[:MAX_RECOMMENDATIONS]
