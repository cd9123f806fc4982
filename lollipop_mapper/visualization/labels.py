"""Choice of which lollipops carry a text label."""

from __future__ import annotations

from typing import List, Sequence

from ..model import Pileup

# more tied maxima than this and no label is shown at all
MAX_ALLOWED_TIE = 2


def count_ties(pileups: Sequence[Pileup]) -> int:
    """Number of leading pileups sharing the maximum count."""
    if not pileups:
        return 0
    top = pileups[0].count
    ties = 0
    for pileup in pileups:
        if pileup.count < top:
            break
        ties += 1
    return ties


def plan_labels(
    pileups: Sequence[Pileup],
    label_count: int = 1,
    threshold: float = 2,
    max_allowed_tie: int = MAX_ALLOWED_TIE,
) -> List[str]:
    """Return the ids of the pileups to label, tallest first.

    *pileups* must be sorted by descending count. Labels are suppressed
    entirely when too many pileups tie for the maximum to pick a winner, and
    stop at the first pileup below *threshold*. A lone pileup is always
    labelled.
    """
    if len(pileups) == 1:
        return [pileups[0].pileup_id] if label_count > 0 else []

    count = label_count
    ties = count_ties(pileups)
    if count < ties and ties > max_allowed_tie:
        count = 0

    labelled = []
    for pileup in pileups[:max(count, 0)]:
        if pileup.count < threshold:
            break
        labelled.append(pileup.pileup_id)
    return labelled
