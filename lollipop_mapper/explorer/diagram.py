"""MutationDiagram: owner of the lollipop diagram state.

All data decisions behind a lollipop plot live here; renderers only read
:meth:`MutationDiagram.snapshot` and draw it. Every public state change
finishes synchronously and then fires exactly one :class:`DiagramEvent`.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Sequence

from ..config import DiagramOptions
from ..model import MutationRecord, Pileup
from ..pileup import (
    convert_to_pileups,
    count_mutations,
    map_to_mutations,
    pileups_by_location,
)
from ..scale import (
    AxisScale,
    calc_max_count,
    compute_domain_max,
    x_axis_scale,
    y_axis_scale,
)
from ..styles import DEFAULT_STYLES, MutationStyles
from ..visualization.colors import LollipopColorMap
from ..visualization.labels import plan_labels
from .events import DiagramEvent, EventBus, SizeTransition
from .state import DiagramSnapshot, DiagramState

logger = logging.getLogger(__name__)


class MutationDiagram:
    """Pileups, scales, colours, labels and highlights for one gene.

    Parameters
    ----------
    mutations : iterable of MutationRecord
        The full, unfiltered mutation collection.
    sequence_length : int
        Length of the protein sequence (drives the x axis).
    options : DiagramOptions, optional
        Scale, label and colour configuration.
    styles : MutationStyles, optional
        Mutation type taxonomy used for colouring.
    """

    def __init__(
        self,
        mutations: Iterable[MutationRecord],
        sequence_length: int,
        options: DiagramOptions | None = None,
        styles: MutationStyles = DEFAULT_STYLES,
        gene_symbol: str | None = None,
    ) -> None:
        self.mutations = tuple(mutations)
        self.sequence_length = sequence_length
        self.options = options or DiagramOptions()
        self.styles = styles
        self.gene_symbol = gene_symbol

        self.events = EventBus()
        self.color_map = LollipopColorMap(self.options.fill_palette, styles)
        self.mutation_pileup_map: dict[str, str] = {}

        self.state = DiagramState(initial_pileups=convert_to_pileups(self.mutations))
        self._initial_y_max: float | None = None
        self._update_globals()

        logger.info(
            "Diagram%s: %d mutations in %d pileups",
            f" for {gene_symbol}" if gene_symbol else "",
            count_mutations(self.state.initial_pileups),
            len(self.state.initial_pileups),
        )

    # ------------------------------------------------------------------ #
    #  Derivation
    # ------------------------------------------------------------------ #

    def _update_globals(self) -> None:
        """Recompute scales, colours, labels and lookups from the current pileups."""
        s = self.state
        options = self.options

        # the y axis follows the filtered data only when auto adjust is on
        pileups = s.current_pileups if options.y_axis_auto_adjust else s.initial_pileups
        s.max_count = calc_max_count(pileups)
        s.x_axis = x_axis_scale(self.sequence_length, options)
        s.y_axis = y_axis_scale(s.max_count, options)

        # new data may pile up differently, so colours start over
        self.color_map.reset()
        s.pileup_colors = self.color_map(s.current_pileups)
        s.color_map = self.color_map.mapping

        s.label_plan = tuple(plan_labels(
            s.current_pileups,
            label_count=options.lollipop_label_count,
            threshold=options.lollipop_label_threshold,
        ))
        self.mutation_pileup_map = map_to_mutations(s.current_pileups)

    def _replace_pileups(self, pileups: List[Pileup]) -> None:
        s = self.state
        s.current_pileups = pileups

        # highlights are keyed by location; pileup ids change on every run
        by_location = pileups_by_location(pileups)
        s.highlighted = {
            location: by_location[location]
            for location in s.highlighted
            if location in by_location
        }
        self._update_globals()

    # ------------------------------------------------------------------ #
    #  Transitions
    # ------------------------------------------------------------------ #

    def filter(self, mutations: Iterable[MutationRecord]) -> bool:
        """Show only *mutations*, a subset of the original collection.

        Returns
        -------
        bool
            ``True`` if fewer mutations are shown than initially.
        """
        self._replace_pileups(convert_to_pileups(mutations))
        filtered = self.is_filtered()
        logger.debug(
            "Plot updated: %d pileups, filtered=%s",
            len(self.state.current_pileups), filtered,
        )
        self.events.emit(DiagramEvent.PLOT_UPDATED, self.snapshot())
        return filtered

    def reset(self) -> None:
        """Return to the unfiltered view and drop all highlights."""
        self.state.highlighted = {}
        self._replace_pileups(convert_to_pileups(self.mutations))
        self.events.emit(DiagramEvent.PLOT_RESET, self.snapshot())

    def update_options(self, **changes) -> None:
        """Apply option *changes* and rescale (e.g. ``y_axis_auto_adjust=False``)."""
        self.options = self.options.replace(**changes)
        self.color_map.palette = self.options.fill_palette
        self._initial_y_max = None
        self._update_globals()
        self.events.emit(DiagramEvent.PLOT_UPDATED, self.snapshot())

    def highlight(self, location: int) -> SizeTransition | None:
        """Highlight the pileup at *location*.

        Returns the resulting resize, or ``None`` when nothing changed (no
        pileup there, or already highlighted).
        """
        s = self.state
        pileup = pileups_by_location(s.current_pileups).get(location)
        if pileup is None or location in s.highlighted:
            return None

        s.highlighted[location] = pileup
        self.events.emit(DiagramEvent.SELECTION_CHANGED, self.snapshot())
        return SizeTransition(
            location=location,
            old_size=self.options.lollipop_size,
            new_size=self.options.lollipop_highlight_size,
            duration=self.options.animation_duration,
        )

    def remove_highlight(self, location: int) -> SizeTransition | None:
        s = self.state
        if location not in s.highlighted:
            return None

        del s.highlighted[location]
        self.events.emit(DiagramEvent.SELECTION_CHANGED, self.snapshot())
        return SizeTransition(
            location=location,
            old_size=self.options.lollipop_highlight_size,
            new_size=self.options.lollipop_size,
            duration=self.options.animation_duration,
        )

    def clear_highlights(self) -> List[SizeTransition]:
        """Remove every highlight."""
        transitions = [
            SizeTransition(
                location=location,
                old_size=self.options.lollipop_highlight_size,
                new_size=self.options.lollipop_size,
                duration=self.options.animation_duration,
            )
            for location in self.state.highlighted
        ]
        self.state.highlighted = {}
        self.events.emit(DiagramEvent.SELECTION_CHANGED, self.snapshot())
        return transitions

    def highlight_only(self, location: int) -> List[SizeTransition]:
        """Make the pileup at *location* the single highlight.

        Replaces any other highlights in one transition. Nothing changes (and
        no event fires) when there is no pileup there or it already is the
        only highlight.
        """
        s = self.state
        pileup = pileups_by_location(s.current_pileups).get(location)
        if pileup is None or list(s.highlighted) == [location]:
            return []

        transitions = [
            SizeTransition(
                location=other,
                old_size=self.options.lollipop_highlight_size,
                new_size=self.options.lollipop_size,
                duration=self.options.animation_duration,
            )
            for other in s.highlighted
            if other != location
        ]
        if location not in s.highlighted:
            transitions.append(SizeTransition(
                location=location,
                old_size=self.options.lollipop_size,
                new_size=self.options.lollipop_highlight_size,
                duration=self.options.animation_duration,
            ))
        s.highlighted = {location: pileup}
        self.events.emit(DiagramEvent.SELECTION_CHANGED, self.snapshot())
        return transitions

    def highlight_mutation(self, mutation_sid: str) -> SizeTransition | None:
        """Highlight the pileup containing the mutation *mutation_sid*.

        Not every mutation is on the diagram (fusions, unknown positions,
        filtered out), in which case nothing happens.
        """
        pileup_id = self.mutation_pileup_map.get(mutation_sid)
        if pileup_id is None:
            return None
        for pileup in self.state.current_pileups:
            if pileup.pileup_id == pileup_id:
                return self.highlight(pileup.location)
        return None

    def set_multi_select(self, active: bool) -> None:
        """Record whether the multi-selection modifier is held."""
        self.state.multi_select = bool(active)

    # ------------------------------------------------------------------ #
    #  Queries
    # ------------------------------------------------------------------ #

    @property
    def pileups(self) -> Sequence[Pileup]:
        return tuple(self.state.current_pileups)

    @property
    def initial_pileups(self) -> Sequence[Pileup]:
        return tuple(self.state.initial_pileups)

    @property
    def multi_select(self) -> bool:
        return self.state.multi_select

    @property
    def highlighted_locations(self) -> frozenset:
        return frozenset(self.state.highlighted)

    @property
    def highlighted_pileups(self) -> List[Pileup]:
        """Highlighted pileups in diagram order (tallest first)."""
        return [p for p in self.state.current_pileups if p.location in self.state.highlighted]

    @property
    def x_axis(self) -> AxisScale:
        return self.state.x_axis

    @property
    def y_axis(self) -> AxisScale:
        return self.state.y_axis

    @property
    def max_count(self) -> int:
        return self.state.max_count

    @property
    def x_max(self) -> float:
        return self.state.x_axis.domain_max

    @property
    def y_max(self) -> float:
        return self.state.y_axis.domain_max

    @property
    def initial_y_max(self) -> float:
        if self._initial_y_max is None:
            self._initial_y_max = compute_domain_max(
                calc_max_count(self.state.initial_pileups),
                self.options.min_length_y,
                self.options.max_length_y,
            )
        return self._initial_y_max

    @property
    def min_y(self) -> float:
        return self.options.min_length_y

    @property
    def threshold(self) -> float:
        return max(self.state.max_count, self.options.min_length_y)

    def is_filtered(self) -> bool:
        """True if fewer mutations are shown now than initially."""
        return self.state.is_filtered()

    def is_highlighted(self, location: int | None = None) -> bool:
        """Whether *location* is highlighted; without it, whether any is."""
        if location is None:
            return bool(self.state.highlighted)
        return location in self.state.highlighted

    def color_of(self, mutation_id: str) -> str | None:
        """Fill colour resolved for a single mutation, if it is on the diagram."""
        return self.state.color_map.get(mutation_id)

    def lollipop_size(self, location: int) -> int:
        if location in self.state.highlighted:
            return self.options.lollipop_highlight_size
        return self.options.lollipop_size

    def lollipop_shape(self, pileup: Pileup) -> str:
        """Out-of-range pileups (taller than ``max_length_y``) use the special shape."""
        if pileup.count > self.options.max_length_y:
            return self.options.lollipop_shape_special
        return self.options.lollipop_shape_regular

    def lollipop_height(self, pileup: Pileup) -> float:
        return min(pileup.count, self.options.max_length_y)

    def snapshot(self) -> DiagramSnapshot:
        return DiagramSnapshot.of(self.state)
