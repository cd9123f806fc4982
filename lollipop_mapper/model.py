"""Mutation records and the pileups they collapse into."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from typing import Any, Mapping, Tuple

_FIRST_INTEGER = re.compile(r"[0-9]+")
_MISSING_POSITIONS = frozenset({"", "NA"})


@dataclass(frozen=True)
class MutationRecord:
    """A single mutation as supplied by a data source.

    Records are never modified after creation; a partial update replaces the
    whole working collection instead.
    """

    mutation_id: str
    mutation_sid: str | None = None
    gene_symbol: str | None = None
    protein_change: str | None = None
    mutation_type: str | None = None
    cancer_type: str | None = None
    protein_pos_start: Any = None
    protein_pos_end: Any = None
    case_id: str | None = None
    extra: Mapping[str, Any] = field(default_factory=dict, compare=False)

    def __post_init__(self) -> None:
        if self.mutation_sid is None:
            object.__setattr__(self, "mutation_sid", self.mutation_id)

    @property
    def normalized_type(self) -> str:
        """Mutation type stripped and lower-cased (``''`` when absent)."""
        if self.mutation_type is None:
            return ""
        return str(self.mutation_type).strip().lower()

    @property
    def protein_start_position(self) -> int | None:
        """Protein start position, falling back to the protein change string."""
        position = _as_position(self.protein_pos_start)
        if position is None:
            position = protein_change_location(self.protein_change)
        return position


def _as_position(value: Any) -> int | None:
    if value is None:
        return None
    if isinstance(value, float) and math.isnan(value):
        return None
    if isinstance(value, str):
        value = value.strip()
        if value in _MISSING_POSITIONS:
            return None
    try:
        position = int(value)
    except (TypeError, ValueError):
        return None
    return position if position >= 0 else None


def protein_change_location(protein_change: str | None) -> int | None:
    """Return the first integer run of *protein_change* (``'V600E'`` -> 600)."""
    if not protein_change:
        return None
    match = _FIRST_INTEGER.search(str(protein_change))
    return int(match.group(0)) if match else None


@dataclass(frozen=True)
class CancerTypeStat:
    cancer_type: str | None
    count: int


@dataclass(frozen=True)
class Pileup:
    """Mutations collapsed onto one protein position.

    A pileup never changes membership; re-aggregation produces new pileups
    with fresh ids, so identity across runs must be keyed on ``location``.
    """

    pileup_id: str
    location: int
    mutations: Tuple[MutationRecord, ...]
    count: int
    label: str = ""
    stats: Tuple[CancerTypeStat, ...] = ()

    def __post_init__(self) -> None:
        if self.count != len(self.mutations):
            raise ValueError(
                f"Pileup {self.pileup_id}: count {self.count} does not match "
                f"{len(self.mutations)} member mutations"
            )

    def content_key(self) -> tuple:
        """Identity-free key (location, count, member ids) for comparisons."""
        return (
            self.location,
            self.count,
            tuple(m.mutation_id for m in self.mutations),
        )
