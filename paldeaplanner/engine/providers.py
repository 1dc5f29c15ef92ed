# ABOUTME: Contracts for the species data provider the engine consumes.
# ABOUTME: Includes a mapping-backed provider and the provider's name normalization.

import re
from collections.abc import Awaitable, Callable, Iterable, Mapping

from paldeaplanner.engine.models import SpeciesSnapshot

SpeciesResolver = Callable[[str], SpeciesSnapshot | None]
"""Resolve a species name; failure is signalled by returning None or raising."""

AsyncSpeciesResolver = Callable[[str], Awaitable[SpeciesSnapshot | None]]
"""Awaitable form of SpeciesResolver."""

_SEPARATORS = re.compile(r"[\s.]")
_DISALLOWED = re.compile(r"[^a-z0-9-]")


def normalize_species_name(name: str) -> str:
    """Normalize a display name to the provider's identifier form.

    Examples:
        "Tapu Koko" -> "tapu-koko", "Mr. Mime" -> "mr--mime", "Farfetch'd" -> "farfetchd"
    """
    return _DISALLOWED.sub("", _SEPARATORS.sub("-", name.strip().lower()))


class MappingSpeciesProvider:
    """In-memory species provider keyed by normalized name.

    Lookups of unknown names raise KeyError, as a remote provider would fail.
    """

    def __init__(self, species: Iterable[SpeciesSnapshot] | Mapping[str, SpeciesSnapshot] = ()) -> None:
        self._species: dict[str, SpeciesSnapshot] = {}
        items = species.values() if isinstance(species, Mapping) else species
        for snapshot in items:
            self.add(snapshot)

    def add(self, snapshot: SpeciesSnapshot) -> None:
        """Register a snapshot under its normalized name."""
        self._species[normalize_species_name(snapshot.name)] = snapshot

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and normalize_species_name(name) in self._species

    def __len__(self) -> int:
        return len(self._species)

    def resolve(self, name: str) -> SpeciesSnapshot:
        """Return the snapshot for `name`.

        Raises:
            KeyError: If the species is unknown.
        """
        key = normalize_species_name(name)
        if key not in self._species:
            raise KeyError(f"Species '{name}' not found")
        return self._species[key]

    async def resolve_async(self, name: str) -> SpeciesSnapshot:
        """Awaitable form of `resolve`."""
        return self.resolve(name)
