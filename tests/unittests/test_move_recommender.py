# ABOUTME: Unit tests for the move recommender tool.
# ABOUTME: Tests level filtering, type matching and ordering.

from paldeaplanner.engine.models import MoveEntry
from paldeaplanner.tools.move_recommender import recommend_moves
from paldeaplanner.utils.type_chart import PokemonType


class TestRecommendMoves:
    """Tests for recommend_moves function."""

    def test_filters_and_orders(self, make_species) -> None:
        """Only learnable moves of the wanted type, newest first."""
        species = make_species(
            "totodile",
            ["water"],
            moves=[
                MoveEntry("water-gun", PokemonType.WATER, "special", 40, level_learned=6),
                MoveEntry("bite", PokemonType.DARK, "physical", 60, level_learned=13),
                MoveEntry("aqua-tail", PokemonType.WATER, "physical", 90, level_learned=20),
                MoveEntry("hydro-pump", PokemonType.WATER, "special", 110, level_learned=40),
            ],
        )
        result = recommend_moves(species, 25, PokemonType.WATER)
        assert [move["name"] for move in result] == ["aqua-tail", "water-gun"]
        assert result[0] == {"name": "aqua-tail", "level": 20, "damage_class": "physical", "power": 90}

    def test_only_first_fifteen_learnable(self, make_species) -> None:
        """Moves past the first fifteen learnable ones are ignored."""
        filler = [MoveEntry(f"tackle-{i}", PokemonType.NORMAL, "physical", 40, level_learned=1) for i in range(15)]
        late = MoveEntry("ember", PokemonType.FIRE, "special", 40, level_learned=1)
        species = make_species("x", ["normal"], moves=[*filler, late])
        assert recommend_moves(species, 50, PokemonType.FIRE) == []

    def test_no_match(self, make_species) -> None:
        """No move of the type gives an empty list."""
        species = make_species("x", ["normal"], moves=["tackle"])
        assert recommend_moves(species, 50, PokemonType.FIRE) == []
