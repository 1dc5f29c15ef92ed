# ABOUTME: Data classes for the matchup engine: species snapshots, roster members, opponents, results.
# ABOUTME: Species snapshots are read-only inputs; matchup results are derived and never persisted.

from dataclasses import dataclass, field

import polars as pl

from paldeaplanner.engine.natures import Nature, Stat
from paldeaplanner.utils.type_chart import PokemonType

ROSTER_SIZE = 6
MAX_SELECTED_MOVES = 4
MIN_LEVEL = 1
MAX_LEVEL = 100

STATUS_DAMAGE_CLASS = "status"


def _check_level(level: int, owner: str) -> None:
    if not MIN_LEVEL <= level <= MAX_LEVEL:
        raise ValueError(f"{owner} level must be between {MIN_LEVEL} and {MAX_LEVEL}, got {level}")


@dataclass(frozen=True)
class BaseStats:
    """The six base statistics of a species."""

    hp: int
    attack: int
    defense: int
    special_attack: int
    special_defense: int
    speed: int

    def get(self, stat: Stat) -> int:
        """Return the base value for `stat`."""
        return getattr(self, stat.name.lower())

    @property
    def total(self) -> int:
        """Base Stat Total."""
        return self.hp + self.attack + self.defense + self.special_attack + self.special_defense + self.speed


@dataclass(frozen=True)
class MoveEntry:
    """A move in a species' learnable move pool.

    Attributes:
        name: Provider move identifier (e.g. "false-swipe").
        type: Move type, None when the provider did not supply it.
        damage_class: "physical", "special" or "status".
        power: Base power, None for status or variable-power moves.
        level_learned: Level at which the move is learned (0 when not level-up).
        learn_method: Provider learn method (e.g. "level-up", "machine").
    """

    name: str
    type: PokemonType | None = None
    damage_class: str = STATUS_DAMAGE_CLASS
    power: int | None = None
    level_learned: int = 0
    learn_method: str = "level-up"


@dataclass(frozen=True)
class MoveRef:
    """A move selected for one of a roster member's four move slots."""

    name: str
    type: PokemonType | None
    damage_class: str
    power: int | None = None

    @property
    def is_status(self) -> bool:
        """True when the move deals no direct damage."""
        return self.damage_class == STATUS_DAMAGE_CLASS


@dataclass(frozen=True)
class SpeciesSnapshot:
    """Read-only species data supplied by the species data provider."""

    id: int
    name: str
    types: tuple[PokemonType, ...]
    base_stats: BaseStats
    move_pool: tuple[MoveEntry, ...] = ()

    def __post_init__(self) -> None:
        if not 1 <= len(self.types) <= 2:
            raise ValueError(f"{self.name} must have one or two types, got {len(self.types)}")

    @property
    def primary_type(self) -> PokemonType:
        """First natural type."""
        return self.types[0]

    @property
    def bst(self) -> int:
        """Base Stat Total."""
        return self.base_stats.total

    @property
    def move_names(self) -> frozenset[str]:
        """Names of every move in the learnable pool."""
        return frozenset(move.name for move in self.move_pool)


@dataclass(frozen=True)
class StatSpread:
    """Per-stat IV or EV values."""

    hp: int = 0
    attack: int = 0
    defense: int = 0
    special_attack: int = 0
    special_defense: int = 0
    speed: int = 0

    @classmethod
    def uniform(cls, value: int) -> "StatSpread":
        """Spread with the same value in every stat."""
        return cls(value, value, value, value, value, value)

    def get(self, stat: Stat) -> int:
        """Return the value for `stat`."""
        return getattr(self, stat.name.lower())


def _default_ivs() -> StatSpread:
    return StatSpread.uniform(31)


@dataclass
class RosterMember:
    """One of the six roster slots. An empty slot has no species."""

    member_id: str
    species: SpeciesSnapshot | None = None
    level: int = 50
    tera_type: PokemonType | None = None
    ivs: StatSpread = field(default_factory=_default_ivs)
    evs: StatSpread = field(default_factory=StatSpread)
    nature: Nature | None = None
    locked: bool = False
    selected_moves: list[MoveRef | None] = field(default_factory=list)
    nickname: str = ""

    def __post_init__(self) -> None:
        _check_level(self.level, f"Roster member {self.member_id}")
        if len(self.selected_moves) > MAX_SELECTED_MOVES:
            raise ValueError(f"Roster member {self.member_id} can hold at most {MAX_SELECTED_MOVES} moves")

    @property
    def is_empty(self) -> bool:
        """True when no species occupies the slot."""
        return self.species is None

    @property
    def effective_tera_type(self) -> PokemonType | None:
        """The chosen Tera type, defaulting to the primary natural type."""
        if self.tera_type is not None:
            return self.tera_type
        if self.species is None:
            return None
        return self.species.primary_type

    @property
    def known_move_names(self) -> frozenset[str]:
        """Learnable move names plus any explicitly selected moves."""
        names: set[str] = set()
        if self.species is not None:
            names |= self.species.move_names
        names |= {move.name for move in self.selected_moves if move is not None}
        return frozenset(names)


@dataclass(frozen=True)
class OpponentProfile:
    """The opponent a roster is evaluated against."""

    species: SpeciesSnapshot
    level: int
    tera_override: PokemonType | None = None

    def __post_init__(self) -> None:
        _check_level(self.level, f"Opponent {self.species.name}")

    @property
    def defensive_types(self) -> list[PokemonType]:
        """Tera override alone if set, else the natural types."""
        if self.tera_override is not None:
            return [self.tera_override]
        return list(self.species.types)

    @property
    def attacking_types(self) -> list[PokemonType]:
        """Natural types plus the Tera override, deduplicated in order."""
        types = list(self.species.types)
        if self.tera_override is not None and self.tera_override not in types:
            types.append(self.tera_override)
        return types

    @property
    def all_types(self) -> frozenset[PokemonType]:
        """Every type the opponent has naturally or through Tera."""
        return frozenset(self.attacking_types)


@dataclass(frozen=True)
class CatchUtility:
    """How suited a member is to weakening (not defeating) an opponent."""

    score: int
    move_labels: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class MatchupResult:
    """Outcome of evaluating one roster member against one opponent."""

    member_id: str
    offensive_score: float
    defensive_score: float
    best_move_type: PokemonType | None
    speed_delta: int
    speed_tier: str
    member_speed: int
    opponent_speed: int
    message: str
    defensive_message: str
    catch_score: int
    catch_moves: list[str] = field(default_factory=list)


@dataclass
class RosterAnalysis:
    """Per-member matchups plus the roster-wide picks."""

    matchups: list[MatchupResult] = field(default_factory=list)
    best_counter_id: str | None = None
    best_catcher_id: str | None = None


@dataclass
class CompositionReport:
    """Names proposed by the composer along with its diagnostics.

    Attributes:
        names: Proposed species names for the open slots, in fill order.
        failed_names: Candidates whose resolution failed during this call.
        ranking: Scored candidates sorted by score, for inspection.
    """

    names: list[str] = field(default_factory=list)
    failed_names: list[str] = field(default_factory=list)
    ranking: pl.DataFrame = field(default_factory=pl.DataFrame)
