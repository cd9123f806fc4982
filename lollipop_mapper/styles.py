"""Mutation type taxonomy used to group and rank mutations for colouring."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping

MISSENSE = "missense"
INFRAME = "inframe"
TRUNCATING = "truncating"
FUSION = "fusion"
OTHER = "other"

MAIN_TYPES = (MISSENSE, INFRAME, TRUNCATING, FUSION, OTHER)

_SEPARATORS = re.compile(r"[\s\-]+")

# concrete type -> (main type, priority); lower priority wins count ties
_DEFAULT_TYPES = {
    "missense_mutation": (MISSENSE, 1),
    "missense": (MISSENSE, 1),
    "missense_variant": (MISSENSE, 1),
    "in_frame_ins": (INFRAME, 2),
    "in_frame_insertion": (INFRAME, 2),
    "inframe_insertion": (INFRAME, 2),
    "in_frame_del": (INFRAME, 3),
    "in_frame_deletion": (INFRAME, 3),
    "inframe_deletion": (INFRAME, 3),
    "nonsense_mutation": (TRUNCATING, 4),
    "nonsense": (TRUNCATING, 4),
    "stop_gained": (TRUNCATING, 4),
    "nonstop_mutation": (TRUNCATING, 5),
    "frame_shift_del": (TRUNCATING, 6),
    "frame_shift_ins": (TRUNCATING, 7),
    "frameshift": (TRUNCATING, 7),
    "frameshift_variant": (TRUNCATING, 7),
    "splice_site": (TRUNCATING, 8),
    "splice": (TRUNCATING, 8),
    "fusion": (FUSION, 9),
}

_OTHER_PRIORITY = 10


def normalize_type(mutation_type: str | None) -> str:
    """``'Frame-Shift Del'`` -> ``'frame_shift_del'``."""
    if mutation_type is None:
        return ""
    return _SEPARATORS.sub("_", str(mutation_type).strip().lower())


@dataclass(frozen=True)
class MainTypeGroup:
    """Members of a pileup that share one main type."""

    type: str
    count: int
    priority: int
    mutation_ids: tuple = ()


@dataclass(frozen=True)
class MutationStyles:
    """Immutable mapping of raw mutation types to main-type groups.

    Passed explicitly into the aggregator and the colour resolver rather than
    consulted as global state.
    """

    types: Mapping[str, tuple] = field(
        default_factory=lambda: MappingProxyType(dict(_DEFAULT_TYPES))
    )
    other_priority: int = _OTHER_PRIORITY

    def main_type(self, mutation_type: str | None) -> str:
        entry = self.types.get(normalize_type(mutation_type))
        return entry[0] if entry else OTHER

    def priority(self, mutation_type: str | None) -> int:
        entry = self.types.get(normalize_type(mutation_type))
        return entry[1] if entry else self.other_priority

    def group(self, mutations: Iterable) -> list[MainTypeGroup]:
        """Group *mutations* by main type, most populous group first.

        Count ties go to the group holding the lowest-priority concrete type.
        """
        members: dict[str, list] = {}
        priorities: dict[str, int] = {}
        for mutation in mutations:
            main = self.main_type(mutation.mutation_type)
            members.setdefault(main, []).append(mutation.mutation_id)
            rank = self.priority(mutation.mutation_type)
            priorities[main] = min(rank, priorities.get(main, rank))

        groups = [
            MainTypeGroup(
                type=main,
                count=len(ids),
                priority=priorities[main],
                mutation_ids=tuple(ids),
            )
            for main, ids in members.items()
        ]
        groups.sort(key=lambda g: (-g.count, g.priority))
        return groups


DEFAULT_STYLES = MutationStyles()
