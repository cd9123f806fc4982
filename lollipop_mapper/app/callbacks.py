"""All Dash callbacks for the lollipop diagram app."""

from __future__ import annotations

from dash import Input, Output, callback_context, html, no_update
from dash.exceptions import PreventUpdate

from ..pileup import count_mutations
from . import theme
from .figures import build_lollipop_figure

# Max cancer types listed per selected pileup
_MAX_STATS = 5


def _status_text(diagram) -> str:
    shown = count_mutations(diagram.pileups)
    total = count_mutations(diagram.initial_pileups)
    if diagram.is_filtered():
        return f"{shown:,} / {total:,} mutations"
    return f"{total:,} mutations"


def _pileup_info(diagram):
    """One block per highlighted pileup with its cancer type distribution."""
    pileups = diagram.highlighted_pileups
    if not pileups:
        return "Click a lollipop"

    colors = diagram.snapshot().pileup_colors
    blocks = []
    for p in pileups:
        color = colors.get(p.pileup_id, theme.MUTED)
        stats = [
            html.Li(f"{s.cancer_type or 'unknown'}: {s.count}")
            for s in p.stats[:_MAX_STATS]
        ]
        blocks.append(html.Div(
            style={"borderLeft": f"4px solid {color}", "paddingLeft": "8px", "marginBottom": "8px"},
            children=[
                html.B(p.label or f"Position {p.location}"),
                html.Span(f"  {p.count} mutation(s) at {p.location}",
                          style={"color": theme.MUTED}),
                html.Ul(stats),
            ],
        ))
    return blocks


def register(app):
    """Register all callbacks on the Dash app instance."""

    @app.callback(
        Output("lollipop-graph", "figure"),
        Output("status-bar", "children"),
        Output("pileup-info", "children"),
        Output("cancer-type-filter", "value"),
        Output("mutation-type-filter", "value"),
        Input("cancer-type-filter", "value"),
        Input("mutation-type-filter", "value"),
        Input("multi-select", "value"),
        Input("reset-button", "n_clicks"),
        Input("lollipop-graph", "clickData"),
        prevent_initial_call=True,
    )
    def update_diagram(cancer_types, mutation_types, multi_select, _reset, click_data):
        from .app import state
        if state is None:
            raise PreventUpdate

        diagram = state.diagram
        trigger = callback_context.triggered_id
        filter_values = (no_update, no_update)

        if trigger in ("cancer-type-filter", "mutation-type-filter"):
            state.update_filter(cancer_types or None, mutation_types or None)
        elif trigger == "multi-select":
            diagram.set_multi_select("multi" in (multi_select or []))
            raise PreventUpdate
        elif trigger == "reset-button":
            diagram.reset()
            filter_values = ([], [])
        elif trigger == "lollipop-graph":
            if not click_data or not click_data.get("points"):
                raise PreventUpdate
            point = click_data["points"][0]
            if "customdata" not in point:
                raise PreventUpdate
            state.select(int(point["customdata"][0]))
        else:
            raise PreventUpdate

        return (
            build_lollipop_figure(diagram),
            _status_text(diagram),
            _pileup_info(diagram),
            *filter_values,
        )
