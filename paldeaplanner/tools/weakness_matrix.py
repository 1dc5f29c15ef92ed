# ABOUTME: Team weakness matrix tool finding attacking types several roster members share a weakness to.
# ABOUTME: Returns a DataFrame of shared weaknesses sorted by how many members they hit.

from collections.abc import Sequence
from typing import Any

import polars as pl

from paldeaplanner.engine.models import RosterMember
from paldeaplanner.utils.type_chart import TYPES, get_weaknesses

# A weakness is only a gap when at least this many members share it
MIN_SHARED_MEMBERS = 2

_WEAKNESS_SCHEMA = {
    "type": pl.String,
    "member_count": pl.Int64,
    "members": pl.List(pl.String),
}


def _member_label(member: RosterMember) -> str:
    if member.nickname:
        return member.nickname
    return member.species.name if member.species is not None else member.member_id


def team_weakness_matrix(roster: Sequence[RosterMember]) -> pl.DataFrame:
    """Find attacking types that hit at least two roster members for >=2x.

    Natural typing is used; Tera is ignored.

    Args:
        roster: The roster slots; empty slots are skipped.

    Returns:
        DataFrame with columns: type, member_count, members
        Sorted by member_count DESC (type chart order on ties).
    """
    weaknesses = [
        (_member_label(member), set(get_weaknesses(*member.species.types)))
        for member in roster
        if member.species is not None
    ]
    rows: list[dict[str, Any]] = []

    for atk_type in TYPES:
        vulnerable = [label for label, weak in weaknesses if atk_type in weak]
        if len(vulnerable) >= MIN_SHARED_MEMBERS:
            rows.append({"type": atk_type.value, "member_count": len(vulnerable), "members": vulnerable})

    if not rows:
        return pl.DataFrame(schema=_WEAKNESS_SCHEMA)

    df = pl.DataFrame(rows, schema=_WEAKNESS_SCHEMA)
    return df.sort("member_count", descending=True, maintain_order=True)
