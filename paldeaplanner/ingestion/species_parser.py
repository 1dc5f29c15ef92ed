"""ABOUTME: Parses species provider payloads into SpeciesSnapshot objects.
ABOUTME: Accepts PokeAPI-shaped pokemon records and optional move detail records."""

import logging
from collections.abc import Mapping
from typing import Any

from paldeaplanner.engine.models import STATUS_DAMAGE_CLASS, BaseStats, MoveEntry, SpeciesSnapshot
from paldeaplanner.engine.natures import Stat
from paldeaplanner.utils.type_chart import PokemonType, parse_type

logger = logging.getLogger(__name__)


def _name_of(value: Any) -> str | None:
    """Read a name from either a plain string or a {"name": ...} reference."""
    if isinstance(value, Mapping):
        value = value.get("name")
    return value if isinstance(value, str) else None


def parse_types(payload: Mapping[str, Any]) -> tuple[PokemonType, ...]:
    """Extract the ordered natural types, skipping identifiers outside the 18 types.

    Raises:
        ValueError: If no valid type is present.
    """
    entries = sorted(payload.get("types", []), key=lambda entry: entry.get("slot", 0))
    types: list[PokemonType] = []
    for entry in entries:
        parsed = parse_type(_name_of(entry.get("type")))
        if parsed is None:
            logger.debug("Skipping unknown type in %s: %r", payload.get("name"), entry)
            continue
        if parsed not in types:
            types.append(parsed)
    if not types:
        raise ValueError(f"No valid types for species {payload.get('name')!r}")
    return tuple(types[:2])


def parse_base_stats(payload: Mapping[str, Any]) -> BaseStats:
    """Extract the six base stats. Missing stats count as 0."""
    values = {stat: 0 for stat in Stat}
    for entry in payload.get("stats", []):
        stat_name = _name_of(entry.get("stat"))
        if stat_name is None:
            continue
        try:
            stat = Stat(stat_name)
        except ValueError:
            continue
        values[stat] = int(entry.get("base_stat", 0))
    return BaseStats(**{stat.name.lower(): value for stat, value in values.items()})


def parse_move_entry(entry: Mapping[str, Any], move_details: Mapping[str, Mapping[str, Any]]) -> MoveEntry | None:
    """Build a MoveEntry from a move pool record and its optional detail record.

    Both the nested provider shape ({"move": {...}, "version_group_details": [...]})
    and the flat shape ({"name", "level_learned_at", "learn_method"}) are accepted.
    """
    if "move" in entry:
        name = _name_of(entry["move"])
        group_details = entry.get("version_group_details") or [{}]
        latest = group_details[-1]
        level = int(latest.get("level_learned_at", 0))
        method = _name_of(latest.get("move_learn_method")) or "level-up"
    else:
        name = _name_of(entry.get("name"))
        level = int(entry.get("level_learned_at", 0))
        method = entry.get("learn_method", "level-up")

    if name is None:
        return None

    detail = move_details.get(name, {})
    damage_class = _name_of(detail.get("damage_class")) or detail.get("damageClass") or STATUS_DAMAGE_CLASS
    return MoveEntry(
        name=name,
        type=parse_type(_name_of(detail.get("type"))),
        damage_class=damage_class,
        power=detail.get("power"),
        level_learned=level,
        learn_method=method,
    )


def species_from_payload(
    payload: Mapping[str, Any],
    move_details: Mapping[str, Mapping[str, Any]] | None = None,
) -> SpeciesSnapshot:
    """Convert a provider pokemon record into a SpeciesSnapshot.

    Args:
        payload: Pokemon record with id, name, types, stats and moves.
        move_details: Optional mapping of move name to its detail record
            (type, damage_class, power). Moves without details are typeless status moves.

    Returns:
        The parsed SpeciesSnapshot.

    Raises:
        ValueError: If the record has no name or no valid type.
    """
    name = payload.get("name")
    if not name:
        raise ValueError("Species payload has no name")

    details = move_details or {}
    moves = [parse_move_entry(entry, details) for entry in payload.get("moves", [])]

    return SpeciesSnapshot(
        id=int(payload.get("id", 0)),
        name=name,
        types=parse_types(payload),
        base_stats=parse_base_stats(payload),
        move_pool=tuple(move for move in moves if move is not None),
    )
