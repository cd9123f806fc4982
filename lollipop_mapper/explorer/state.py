"""Mutable state separated from the MutationDiagram controller."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, FrozenSet, List, Mapping, Tuple

from ..model import Pileup
from ..pileup import count_mutations
from ..scale import AxisScale


@dataclass
class DiagramState:
    """Pure-data state for one mutation diagram.

    ``initial_pileups`` is fixed at construction; everything else is replaced
    wholesale by the controller on each transition.
    """

    initial_pileups: List[Pileup]
    current_pileups: List[Pileup] = field(init=False)

    highlighted: Dict[int, Pileup] = field(default_factory=dict)
    multi_select: bool = False
    color_map: Dict[str, str] = field(default_factory=dict)
    pileup_colors: Dict[str, str] = field(default_factory=dict)
    label_plan: Tuple[str, ...] = ()
    max_count: int = -1
    x_axis: AxisScale | None = None
    y_axis: AxisScale | None = None

    def __post_init__(self) -> None:
        self.current_pileups = list(self.initial_pileups)

    def is_filtered(self) -> bool:
        return count_mutations(self.current_pileups) < count_mutations(self.initial_pileups)


@dataclass(frozen=True)
class DiagramSnapshot:
    """Read-only view of a :class:`DiagramState` handed to collaborators."""

    pileups: Tuple[Pileup, ...]
    x_axis: AxisScale
    y_axis: AxisScale
    max_count: int
    colors: Mapping[str, str]
    pileup_colors: Mapping[str, str]
    labels: Tuple[str, ...]
    highlighted: FrozenSet[int]
    filtered: bool
    multi_select: bool

    @classmethod
    def of(cls, state: DiagramState) -> "DiagramSnapshot":
        return cls(
            pileups=tuple(state.current_pileups),
            x_axis=state.x_axis,
            y_axis=state.y_axis,
            max_count=state.max_count,
            colors=MappingProxyType(dict(state.color_map)),
            pileup_colors=MappingProxyType(dict(state.pileup_colors)),
            labels=tuple(state.label_plan),
            highlighted=frozenset(state.highlighted),
            filtered=state.is_filtered(),
            multi_select=state.multi_select,
        )
