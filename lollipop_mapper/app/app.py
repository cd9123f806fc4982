"""Dash app factory and server-side state."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence

from ..config import DiagramOptions
from ..explorer import MutationDiagram
from ..model import MutationRecord


@dataclass
class ServerState:
    """Mutable server-side state for the single-user Dash app."""

    records: List[MutationRecord]
    diagram: MutationDiagram
    records_filtered: List[MutationRecord] = field(init=False)

    def __post_init__(self) -> None:
        self.records_filtered = list(self.records)

    def update_filter(
        self,
        cancer_types: Sequence[str] | None = None,
        mutation_types: Sequence[str] | None = None,
    ) -> bool:
        """Recompute the visible records and push them to the diagram.

        Returns whether the diagram is now filtered.
        """
        data = self.records
        if cancer_types:
            data = [r for r in data if r.cancer_type in cancer_types]
        if mutation_types:
            data = [r for r in data if r.mutation_type in mutation_types]
        self.records_filtered = list(data)
        return self.diagram.filter(self.records_filtered)

    def select(self, location: int) -> None:
        """Click semantics: additive in multi-select mode, replacing otherwise."""
        diagram = self.diagram
        if diagram.multi_select:
            if diagram.is_highlighted(location):
                diagram.remove_highlight(location)
            else:
                diagram.highlight(location)
        else:
            diagram.highlight_only(location)


# Module-level singleton, set by create_app()
state: ServerState | None = None


def create_app(
    records: Sequence[MutationRecord],
    sequence_length: int,
    options: DiagramOptions | None = None,
    gene_symbol: str | None = None,
) -> "dash.Dash":
    """Create and configure the Dash application.

    Parameters
    ----------
    records : sequence of MutationRecord
        Full mutation collection for one gene.
    sequence_length : int
        Protein length used for the x axis.
    options : DiagramOptions, optional
        Diagram configuration.
    gene_symbol : str, optional
        Shown as the diagram title.

    Returns
    -------
    dash.Dash
    """
    import dash

    from .layout import build_layout
    from . import callbacks

    global state
    diagram = MutationDiagram(
        records, sequence_length, options=options, gene_symbol=gene_symbol,
    )
    state = ServerState(records=list(records), diagram=diagram)

    app = dash.Dash(__name__, suppress_callback_exceptions=True)
    app.layout = build_layout(state)
    callbacks.register(app)

    return app
