"""Aggregation of mutation records into position-grouped pileups."""

from __future__ import annotations

import itertools
import logging
from collections import Counter
from typing import Dict, Iterable, List, Sequence

from .model import CancerTypeStat, MutationRecord, Pileup
from .styles import DEFAULT_STYLES, MainTypeGroup, MutationStyles

logger = logging.getLogger(__name__)

# Process-wide counter; ids are never reused.
_id_counter = itertools.count(1)


def next_pileup_id() -> str:
    return f"pileup_{next(_id_counter)}"


def remove_redundant_mutations(
    mutations: Iterable[MutationRecord],
) -> List[MutationRecord]:
    """Keep the first record seen for each ``mutation_sid``; drop the rest."""
    seen: set = set()
    unique = []
    for mutation in mutations:
        if mutation.mutation_sid in seen:
            continue
        seen.add(mutation.mutation_sid)
        unique.append(mutation)
    return unique


def longest_common_start(first: str, second: str) -> str:
    """Longest common starting substring of two strings."""
    prefix = []
    for a, b in zip(first, second):
        if a != b:
            break
        prefix.append(a)
    return "".join(prefix)


def generate_label(mutations: Iterable[MutationRecord]) -> str:
    """Join the distinct protein changes of *mutations* into one label.

    The common start of the first and last (sorted) values is written once:
    ``['V600E', 'V600K']`` -> ``'V600E/K'``.
    """
    changes = sorted({m.protein_change for m in mutations if m.protein_change})
    if not changes:
        return ""

    prefix = ""
    if len(changes) > 1:
        prefix = longest_common_start(changes[0], changes[-1])

    return prefix + "/".join(change[len(prefix):] for change in changes)


def cancer_type_stats(mutations: Iterable[MutationRecord]) -> tuple:
    """Mutation counts per cancer type, descending; ties keep first-seen order."""
    counts = Counter(m.cancer_type for m in mutations)
    return tuple(
        CancerTypeStat(cancer_type=cancer_type, count=count)
        for cancer_type, count in counts.most_common()
    )


def convert_to_pileups(mutations: Iterable[MutationRecord]) -> List[Pileup]:
    """Deduplicate *mutations* and pile them up by protein position.

    Records without a resolvable position and fusions are left out. The
    returned list is sorted by descending count, then descending location,
    so ``pileups[0]`` is always the tallest lollipop.
    """
    unique = remove_redundant_mutations(mutations)

    by_location: Dict[int, List[MutationRecord]] = {}
    excluded = 0
    for mutation in unique:
        location = mutation.protein_start_position
        if location is None or mutation.normalized_type == "fusion":
            excluded += 1
            continue
        by_location.setdefault(location, []).append(mutation)

    pileups = [
        Pileup(
            pileup_id=next_pileup_id(),
            location=location,
            mutations=tuple(members),
            count=len(members),
            label=generate_label(members),
            stats=cancer_type_stats(members),
        )
        for location, members in by_location.items()
    ]
    pileups.sort(key=lambda p: (-p.count, -p.location))

    logger.debug(
        "Piled up %d unique mutations (%d excluded) into %d pileups",
        len(unique) - excluded, excluded, len(pileups),
    )
    return pileups


def count_mutations(pileups: Iterable[Pileup]) -> int:
    """Total number of mutations across *pileups* (not the number of pileups)."""
    return sum(p.count for p in pileups)


def map_to_mutations(pileups: Iterable[Pileup]) -> Dict[str, str]:
    """Map each member ``mutation_sid`` to the id of its pileup."""
    return {
        mutation.mutation_sid: pileup.pileup_id
        for pileup in pileups
        for mutation in pileup.mutations
    }


def mutation_type_map(pileup: Pileup) -> Dict[str, List[MutationRecord]]:
    """Group the members of *pileup* by normalized raw mutation type."""
    type_map: Dict[str, List[MutationRecord]] = {}
    for mutation in pileup.mutations:
        type_map.setdefault(mutation.normalized_type, []).append(mutation)
    return type_map


def mutation_type_array(pileup: Pileup) -> List[dict]:
    """``[{'type': ..., 'count': ...}]`` for *pileup*, most frequent first."""
    array = [
        {"type": mutation_type, "count": len(members)}
        for mutation_type, members in mutation_type_map(pileup).items()
    ]
    array.sort(key=lambda entry: -entry["count"])
    return array


def group_mutations_by_main_type(
    pileup: Pileup, styles: MutationStyles = DEFAULT_STYLES
) -> List[MainTypeGroup]:
    """Main-type groups of *pileup*, ranked for colouring."""
    return styles.group(pileup.mutations)


def pileups_by_location(pileups: Sequence[Pileup]) -> Dict[int, Pileup]:
    return {p.location: p for p in pileups}
