# ABOUTME: Unit tests for stat projection and the nature table.
# ABOUTME: Tests the HP and non-HP formulas, nature multipliers, and the simplified and competitive variants.

import pytest

from paldeaplanner.engine.models import OpponentProfile, RosterMember, StatSpread
from paldeaplanner.engine.natures import NATURE_EFFECTS, Nature, Stat, nature_multiplier
from paldeaplanner.engine.stats import (
    competitive_stat,
    derive_stat,
    member_speed,
    member_stat,
    opponent_speed,
    simple_stat,
)


class TestDeriveStat:
    """Tests for derive_stat function."""

    def test_documented_example(self) -> None:
        """Base 100, level 50, 31 IVs, no EVs, neutral nature = 120."""
        assert derive_stat(base_stat=100, level=50, iv=31, ev=0, is_hp_stat=False, nature_mult=1.0) == 120

    def test_hp_formula(self) -> None:
        """HP adds level + 10 instead of 5: floor(231 * 50 / 100) + 50 + 10 = 175."""
        assert derive_stat(100, 50, iv=31, ev=0, is_hp_stat=True) == 175

    def test_hp_ignores_nature(self) -> None:
        """HP is never affected by the nature multiplier."""
        assert derive_stat(100, 50, is_hp_stat=True, nature_mult=1.1) == derive_stat(100, 50, is_hp_stat=True)

    def test_ev_quarter_floor(self) -> None:
        """EVs count in steps of four: 252 EVs add 63 points before scaling."""
        assert derive_stat(100, 50, ev=252) == 152
        assert derive_stat(100, 50, ev=3) == derive_stat(100, 50, ev=0)

    def test_boosting_nature(self) -> None:
        """A boosting nature multiplies the final value by 1.1, floored."""
        assert derive_stat(100, 50, nature_mult=1.1) == 132

    def test_hindering_nature(self) -> None:
        """A hindering nature multiplies the final value by 0.9, floored."""
        assert derive_stat(100, 50, nature_mult=0.9) == 108

    def test_level_100(self) -> None:
        """Base 100 at level 100 with 31 IVs = 236."""
        assert derive_stat(100, 100) == 236

    def test_zero_iv(self) -> None:
        """0 IVs lower the bracket: floor(200 * 50 / 100) + 5 = 105."""
        assert derive_stat(100, 50, iv=0) == 105


class TestVariants:
    """Tests for the simplified and competitive variants."""

    @pytest.mark.parametrize(("base", "level"), [(45, 5), (100, 50), (102, 61), (150, 100), (1, 1)])
    def test_simple_matches_reduced_formula(self, base: int, level: int) -> None:
        """simple_stat == floor((2*base+31)*level/100)+5."""
        assert simple_stat(base, level) == (2 * base + 31) * level // 100 + 5

    def test_competitive_example(self) -> None:
        """Base 100, level 50: floor((floor(294 * 50 / 100) + 5) * 1.1) = 167."""
        assert competitive_stat(100, 50) == 167

    def test_competitive_exceeds_simple(self) -> None:
        """The competitive estimate is never below the simplified one."""
        for base in range(5, 200, 15):
            assert competitive_stat(base, 60) > simple_stat(base, 60)


class TestNatures:
    """Tests for the nature table."""

    def test_twenty_five_natures(self) -> None:
        """All 25 natures are listed."""
        assert len(Nature) == 25
        assert set(NATURE_EFFECTS) == set(Nature)

    def test_five_neutral_natures(self) -> None:
        """Exactly five natures change nothing."""
        neutral = [n for n, (up, down) in NATURE_EFFECTS.items() if up is None and down is None]
        assert set(neutral) == {Nature.HARDY, Nature.DOCILE, Nature.SERIOUS, Nature.BASHFUL, Nature.QUIRKY}

    def test_non_neutral_natures_change_two_different_stats(self) -> None:
        """Every other nature boosts one stat and lowers a different one, never HP."""
        for up, down in NATURE_EFFECTS.values():
            if up is None:
                continue
            assert up != down
            assert Stat.HP not in (up, down)

    def test_adamant(self) -> None:
        """Adamant boosts Attack and lowers Special Attack."""
        assert nature_multiplier(Nature.ADAMANT, Stat.ATTACK) == 1.1
        assert nature_multiplier(Nature.ADAMANT, Stat.SPECIAL_ATTACK) == 0.9
        assert nature_multiplier(Nature.ADAMANT, Stat.SPEED) == 1.0

    def test_hp_never_affected(self) -> None:
        """HP multiplier is always 1.0."""
        for nature in Nature:
            assert nature_multiplier(nature, Stat.HP) == 1.0

    def test_no_nature_is_neutral(self) -> None:
        """An untracked nature is neutral."""
        assert nature_multiplier(None, Stat.SPEED) == 1.0


class TestMemberProjection:
    """Tests for projecting roster member and opponent stats."""

    def test_default_member_matches_simple_formula(self, make_species) -> None:
        """Default spread (31 IVs, 0 EVs, no nature) equals the simplified variant."""
        member = RosterMember("a", species=make_species("mon", ["normal"], speed=102), level=50)
        assert member_speed(member) == simple_stat(102, 50)

    def test_jolly_speed_investment(self, make_species) -> None:
        """Jolly with 252 speed EVs: floor((floor(294 * 50 / 100) + 5) * 1.1) = 167."""
        member = RosterMember(
            "a",
            species=make_species("mon", ["normal"], speed=100),
            level=50,
            evs=StatSpread(speed=252),
            nature=Nature.JOLLY,
        )
        assert member_speed(member) == 167

    def test_member_hp(self, make_species) -> None:
        """HP uses the HP formula."""
        member = RosterMember("a", species=make_species("mon", ["normal"], base=100), level=50)
        assert member_stat(member, Stat.HP) == 175

    def test_empty_member_projects_zero(self) -> None:
        """Empty slots project to 0."""
        assert member_speed(RosterMember("a")) == 0

    def test_opponent_variants(self, make_species) -> None:
        """Opponent speed uses the competitive variant only when asked."""
        opponent = OpponentProfile(make_species("boss", ["rock"], speed=100), level=50)
        assert opponent_speed(opponent) == 120
        assert opponent_speed(opponent, competitive=True) == 167
