"""Build the lollipop Plotly figure from diagram state."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

import numpy as np
import plotly.graph_objects as go

from ..visualization.colors import to_rgba
from . import theme

if TYPE_CHECKING:
    from ..explorer.diagram import MutationDiagram

# sequence bar, in fractions of the y domain below zero
_SEQ_TOP = -0.04
_SEQ_BOTTOM = -0.12


def marker_diameter(area: float) -> float:
    """Circle diameter (px) for a symbol of the given area (px^2)."""
    return 2 * math.sqrt(area / math.pi)


def build_lollipop_figure(
    diagram: MutationDiagram,
    *,
    title: str | None = None,
    height: int | None = None,
) -> go.Figure:
    """Draw the current diagram state.

    All decisions (pileups, colours, labels, ticks, highlights) are read
    from *diagram*; this function only lays them out.

    Parameters
    ----------
    diagram : MutationDiagram
        Diagram to render.
    title : str, optional
        Text above the plot (defaults to the gene symbol).
    height : int, optional
        Figure height in px (defaults to the configured element height).

    Returns
    -------
    go.Figure
    """
    snap = diagram.snapshot()
    x_max = snap.x_axis.domain_max
    y_max = snap.y_axis.domain_max

    fig = go.Figure()
    fig.add_shape(
        type="rect",
        x0=0, x1=x_max,
        y0=_SEQ_BOTTOM * y_max, y1=_SEQ_TOP * y_max,
        fillcolor=theme.SEQUENCE_FILL,
        line=dict(width=0),
        layer="below",
    )

    pileups = snap.pileups
    if pileups:
        locations = np.array([p.location for p in pileups])
        heights = np.array([diagram.lollipop_height(p) for p in pileups], dtype=float)

        # stems, separated by NaN gaps so a single trace draws them all
        stem_x = np.column_stack((locations, locations, np.full(len(pileups), np.nan))).ravel()
        stem_y = np.column_stack((np.zeros(len(pileups)), heights, np.full(len(pileups), np.nan))).ravel()
        fig.add_trace(go.Scatter(
            x=stem_x, y=stem_y,
            mode="lines",
            line=dict(color=theme.STEM_COLOR, width=1),
            hoverinfo="skip",
            showlegend=False,
        ))

        dim = bool(snap.highlighted)
        colors = []
        for p in pileups:
            color = snap.pileup_colors[p.pileup_id] or theme.MARKER_FALLBACK
            if dim and p.location not in snap.highlighted:
                color = to_rgba(color, theme.DIMMED_ALPHA)
            colors.append(color)

        fig.add_trace(go.Scatter(
            x=locations,
            y=heights,
            mode="markers",
            name="Pileups",
            showlegend=False,
            marker=dict(
                size=[marker_diameter(diagram.lollipop_size(p.location)) for p in pileups],
                symbol=[diagram.lollipop_shape(p) for p in pileups],
                color=colors,
                line=dict(width=0.5, color=theme.MARKER_BORDER),
            ),
            customdata=np.array(
                [[p.location, p.label, p.count, p.pileup_id] for p in pileups],
                dtype=object,
            ),
            hovertemplate=(
                "<b>%{customdata[1]}</b><br>"
                "Position %{customdata[0]}<br>"
                "%{customdata[2]} mutation(s)<extra></extra>"
            ),
        ))

        by_id = {p.pileup_id: p for p in pileups}
        for pileup_id in snap.labels:
            p = by_id[pileup_id]
            fig.add_annotation(
                x=p.location,
                y=diagram.lollipop_height(p),
                text=p.label,
                showarrow=False,
                yshift=12,
                font=dict(family=theme.FONT_STACK, size=theme.FONT_SIZE, color=theme.TEXT),
            )

    fig.update_layout(_base_layout(diagram, snap, title=title, height=height))
    return fig


def _base_layout(diagram, snap, *, title=None, height=None) -> dict:
    """Return layout kwargs carrying the axis ticks from *snap*."""
    options = diagram.options
    x_axis, y_axis = snap.x_axis, snap.y_axis
    return dict(
        title=dict(text=title if title is not None else (diagram.gene_symbol or "")),
        height=height or options.el_height + 120,
        hovermode="closest",
        paper_bgcolor=theme.BACKGROUND,
        plot_bgcolor=theme.BACKGROUND,
        font=dict(family=theme.FONT_STACK, size=theme.FONT_SIZE, color=theme.TEXT),
        margin=dict(
            l=options.margin_left, r=options.margin_right,
            t=options.margin_top + 20, b=options.margin_bottom,
        ),
        xaxis=dict(
            range=[0, x_axis.domain_max],
            tickmode="array",
            tickvals=list(x_axis.tick_values),
            ticktext=list(x_axis.tick_labels),
            showgrid=False,
            zeroline=False,
            linecolor=theme.AXIS_COLOR,
            ticks="outside",
        ),
        yaxis=dict(
            range=[_SEQ_BOTTOM * y_axis.domain_max * 1.1, y_axis.domain_max * 1.15],
            tickmode="array",
            tickvals=list(y_axis.tick_values),
            ticktext=list(y_axis.tick_labels),
            title="# Mutations",
            showgrid=False,
            zeroline=False,
            linecolor=theme.AXIS_COLOR,
            ticks="outside",
        ),
    )
