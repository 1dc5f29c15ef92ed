# ABOUTME: Unit tests for the team weakness matrix tool.
# ABOUTME: Tests shared weakness detection across roster members.

from paldeaplanner.engine.models import RosterMember
from paldeaplanner.tools.weakness_matrix import team_weakness_matrix
from paldeaplanner.utils.type_chart import PokemonType, get_weaknesses


class TestTeamWeaknessMatrix:
    """Tests for team_weakness_matrix function."""

    def test_shared_weakness(self, make_species, empty_roster) -> None:
        """Types hitting two or more members are listed."""
        empty_roster[0] = RosterMember("slot-0", make_species("a", ["grass"]))
        empty_roster[1] = RosterMember("slot-1", make_species("b", ["bug"]), nickname="Buggy")
        df = team_weakness_matrix(empty_roster)

        fire = df.filter(df["type"] == "fire")
        assert fire["member_count"].to_list() == [2]
        assert fire["members"].to_list() == [["a", "Buggy"]]
        # flying hits both too; poison only hits grass
        assert set(df["type"].to_list()) == {"fire", "flying"}

    def test_sorted_by_count(self, make_species, empty_roster) -> None:
        """The most shared weakness comes first."""
        empty_roster[0] = RosterMember("slot-0", make_species("a", ["grass"]))
        empty_roster[1] = RosterMember("slot-1", make_species("b", ["bug"]))
        empty_roster[2] = RosterMember("slot-2", make_species("c", ["ice"]))
        df = team_weakness_matrix(empty_roster)
        assert df["type"][0] == "fire"
        assert df["member_count"][0] == 3

    def test_dual_type_resistance_cancels(self, make_species, empty_roster) -> None:
        """A resisted weakness does not count."""
        empty_roster[0] = RosterMember("slot-0", make_species("a", ["grass", "water"]))
        empty_roster[1] = RosterMember("slot-1", make_species("b", ["grass"]))
        df = team_weakness_matrix(empty_roster)
        assert "fire" not in df["type"].to_list()

    def test_no_shared_weakness(self, make_species, empty_roster) -> None:
        """A single member never forms a shared weakness."""
        empty_roster[0] = RosterMember("slot-0", make_species("a", ["grass"]))
        df = team_weakness_matrix(empty_roster)
        assert df.is_empty()
        assert df.columns == ["type", "member_count", "members"]

    def test_follows_member_weakness_lists(self, make_species, empty_roster) -> None:
        """Shared weaknesses come from each member's type chart weakness list."""
        empty_roster[0] = RosterMember("slot-0", make_species("a", ["water", "ground"]))
        empty_roster[1] = RosterMember("slot-1", make_species("b", ["ground", "water"]))
        df = team_weakness_matrix(empty_roster)

        assert df["type"].to_list() == [t.value for t in get_weaknesses(PokemonType.WATER, PokemonType.GROUND)]
        assert df["member_count"].to_list() == [2]
