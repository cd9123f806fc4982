"""Dash layout: filter sidebar on the left, diagram and pileup info on the right."""

from __future__ import annotations

from typing import TYPE_CHECKING

from dash import dcc, html

from ..pileup import count_mutations
from . import theme
from .figures import build_lollipop_figure

if TYPE_CHECKING:
    from .app import ServerState


def _options(values) -> list[dict]:
    return [{"label": v, "value": v} for v in sorted({v for v in values if v})]


def build_layout(state: ServerState) -> html.Div:
    """Return the complete app layout."""
    diagram = state.diagram
    n_mutations = count_mutations(diagram.initial_pileups)

    return html.Div(
        style={"display": "flex", "fontFamily": theme.FONT_STACK, "color": theme.TEXT},
        children=[
            # ── Sidebar ──
            html.Div(
                style={
                    "width": theme.SIDEBAR_WIDTH,
                    "padding": "12px",
                    "backgroundColor": theme.PANEL_BG,
                    "borderRight": f"1px solid {theme.BORDER}",
                },
                children=[
                    html.H3(diagram.gene_symbol or "Mutation diagram"),
                    html.Label("Cancer types"),
                    dcc.Dropdown(
                        id="cancer-type-filter",
                        options=_options(r.cancer_type for r in state.records),
                        multi=True,
                    ),
                    html.Label("Mutation types"),
                    dcc.Dropdown(
                        id="mutation-type-filter",
                        options=_options(r.mutation_type for r in state.records),
                        multi=True,
                    ),
                    dcc.Checklist(
                        id="multi-select",
                        options=[{"label": " Multi-select", "value": "multi"}],
                        value=[],
                        style={"marginTop": "10px"},
                    ),
                    html.Button("Reset", id="reset-button", n_clicks=0,
                                style={"marginTop": "10px"}),
                    html.Div(
                        id="status-bar",
                        style={"marginTop": "12px", "color": theme.MUTED},
                        children=f"{n_mutations:,} mutations",
                    ),
                ],
            ),
            # ── Main area ──
            html.Div(
                style={"flex": "1", "padding": "12px"},
                children=[
                    dcc.Graph(
                        id="lollipop-graph",
                        figure=build_lollipop_figure(diagram),
                        config={"displayModeBar": False},
                    ),
                    html.H4("Selected positions"),
                    html.Div(id="pileup-info", children="Click a lollipop"),
                ],
            ),
        ],
    )
