"""ABOUTME: Ingestion module for species provider data.
ABOUTME: Converts provider payloads into the engine's read-only snapshots."""

from paldeaplanner.ingestion.species_parser import (
    parse_base_stats,
    parse_move_entry,
    parse_types,
    species_from_payload,
)

__all__ = [
    "parse_base_stats",
    "parse_move_entry",
    "parse_types",
    "species_from_payload",
]
