# ABOUTME: Unit tests for catch utility scoring.
# ABOUTME: Tests the incapacitate, sleep and paralysis categories, their type blockers, and the risk adjustment.

import pytest

from paldeaplanner.engine.catch_utility import (
    INCAPACITATE_LABEL,
    PARALYZE_LABEL,
    SLEEP_LABEL,
    adjust_catch_score,
    score_utility,
)
from paldeaplanner.engine.models import MoveRef, OpponentProfile, RosterMember
from paldeaplanner.utils.type_chart import PokemonType


def _member(make_species, moves: list[str]) -> RosterMember:
    return RosterMember("catcher", make_species("catcher", ["normal"], moves=moves))


def _opponent(make_species, types: list[str], tera: PokemonType | None = None) -> OpponentProfile:
    return OpponentProfile(make_species("wild", types), level=20, tera_override=tera)


class TestIncapacitate:
    """Tests for the incapacitate-without-killing category."""

    def test_unblocked_scores_50(self, make_species) -> None:
        """False Swipe vs a normal target scores exactly 50 with its label."""
        result = score_utility(_member(make_species, ["false-swipe"]), _opponent(make_species, ["normal"]))
        assert result.score == 50
        assert result.move_labels == [INCAPACITATE_LABEL]

    def test_ghost_blocks(self, make_species) -> None:
        """Ghost targets nullify the tactic: 0 and no label."""
        result = score_utility(_member(make_species, ["hold-back"]), _opponent(make_species, ["ghost", "grass"]))
        assert result.score == 0
        assert result.move_labels == []

    def test_tera_ghost_blocks(self, make_species) -> None:
        """A Ghost Tera override also blocks."""
        result = score_utility(
            _member(make_species, ["false-swipe"]), _opponent(make_species, ["normal"], tera=PokemonType.GHOST)
        )
        assert result.score == 0

    def test_selected_move_counts(self, make_species) -> None:
        """Selected moves count as known moves."""
        member = RosterMember(
            "catcher",
            make_species("catcher", ["normal"]),
            selected_moves=[MoveRef("false-swipe", PokemonType.NORMAL, "physical", 40)],
        )
        assert score_utility(member, _opponent(make_species, ["water"])).score == 50


class TestSleep:
    """Tests for the sleep category."""

    def test_sleep_scores_40(self, make_species) -> None:
        """A sleep move scores 40."""
        result = score_utility(_member(make_species, ["hypnosis"]), _opponent(make_species, ["water"]))
        assert result.score == 40
        assert result.move_labels == [SLEEP_LABEL]

    def test_spore_fails_on_grass(self, make_species) -> None:
        """Spore against Grass scores nothing."""
        result = score_utility(_member(make_species, ["spore"]), _opponent(make_species, ["grass"]))
        assert result.score == 0
        assert result.move_labels == []

    def test_spore_failure_falls_back_to_paralysis(self, make_species) -> None:
        """When sleep fails, paralysis is evaluated instead."""
        result = score_utility(_member(make_species, ["spore", "glare"]), _opponent(make_species, ["grass"]))
        assert result.score == 25
        assert result.move_labels == [PARALYZE_LABEL]

    def test_other_sleep_move_still_works_on_grass(self, make_species) -> None:
        """A non-powder sleep move still applies when spore is blocked."""
        result = score_utility(_member(make_species, ["spore", "sing"]), _opponent(make_species, ["grass"]))
        assert result.score == 40

    def test_sleep_is_not_added_to_paralysis(self, make_species) -> None:
        """Paralysis only counts when sleep does not apply."""
        result = score_utility(_member(make_species, ["yawn", "thunder-wave"]), _opponent(make_species, ["water"]))
        assert result.score == 40
        assert PARALYZE_LABEL not in result.move_labels


class TestParalysis:
    """Tests for the paralysis category."""

    def test_paralysis_scores_25(self, make_species) -> None:
        """A paralysis move scores 25."""
        result = score_utility(_member(make_species, ["thunder-wave"]), _opponent(make_species, ["water"]))
        assert result.score == 25
        assert result.move_labels == [PARALYZE_LABEL]

    def test_electric_blocks_paralysis(self, make_species) -> None:
        """Electric targets cannot be paralyzed."""
        result = score_utility(_member(make_species, ["glare"]), _opponent(make_species, ["electric"]))
        assert result.score == 0
        assert result.move_labels == []

    def test_thunder_wave_fails_on_ground(self, make_species) -> None:
        """Thunder Wave fails against Ground."""
        result = score_utility(_member(make_species, ["thunder-wave"]), _opponent(make_species, ["ground"]))
        assert result.score == 0

    def test_glare_works_on_ground(self, make_species) -> None:
        """Glare is not blocked by Ground."""
        result = score_utility(_member(make_species, ["thunder-wave", "glare"]), _opponent(make_species, ["ground"]))
        assert result.score == 25


class TestCombined:
    """Tests for combined categories and edge cases."""

    def test_swipe_and_sleep(self, make_species) -> None:
        """Incapacitate and sleep are scored independently."""
        result = score_utility(_member(make_species, ["false-swipe", "spore"]), _opponent(make_species, ["water"]))
        assert result.score == 90
        assert result.move_labels == [INCAPACITATE_LABEL, SLEEP_LABEL]

    def test_no_utility_moves(self, make_species) -> None:
        """Plain attackers score 0."""
        result = score_utility(_member(make_species, ["tackle", "ember"]), _opponent(make_species, ["water"]))
        assert result.score == 0
        assert result.move_labels == []

    def test_empty_member(self, make_species) -> None:
        """Empty slots score 0."""
        assert score_utility(RosterMember("x"), _opponent(make_species, ["water"])).score == 0


class TestAdjustCatchScore:
    """Tests for the survival risk adjustment."""

    @pytest.mark.parametrize(
        ("defensive", "expected"),
        [(4.0, 30), (2.0, 30), (1.0, 50), (0.5, 65), (0.25, 65), (0.0, 65)],
    )
    def test_adjustment(self, defensive: float, expected: int) -> None:
        """-20 when taking >=2x, +15 when taking <=0.5x."""
        assert adjust_catch_score(50, defensive) == expected
