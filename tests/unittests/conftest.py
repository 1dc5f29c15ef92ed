"""Contains configurations for the test run."""

from collections.abc import Callable, Sequence

import pytest

from paldeaplanner.engine.models import BaseStats, MoveEntry, RosterMember, SpeciesSnapshot
from paldeaplanner.utils.type_chart import PokemonType

SpeciesFactory = Callable[..., SpeciesSnapshot]


@pytest.fixture
def make_species() -> SpeciesFactory:
    """Returns a factory building species snapshots with uniform base stats by default."""

    def _make(
        name: str,
        types: Sequence[str],
        base: int = 50,
        speed: int | None = None,
        moves: Sequence[str | MoveEntry] = (),
        species_id: int = 0,
    ) -> SpeciesSnapshot:
        return SpeciesSnapshot(
            id=species_id,
            name=name,
            types=tuple(PokemonType(t) for t in types),
            base_stats=BaseStats(base, base, base, base, base, base if speed is None else speed),
            move_pool=tuple(m if isinstance(m, MoveEntry) else MoveEntry(m) for m in moves),
        )

    return _make


@pytest.fixture
def empty_roster() -> list[RosterMember]:
    """Returns six empty, unlocked roster slots."""
    return [RosterMember(member_id=f"slot-{i}") for i in range(6)]
