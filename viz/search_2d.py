from __future__ import annotations

from typing import Sequence

import numpy as np
import plotly.graph_objects as go

from viz.export import search_overlay_rgb


def _xy(cells: Sequence[tuple[int, int]]) -> tuple[list[int], list[int]]:
    return [int(c[0]) for c in cells], [int(c[1]) for c in cells]


def search_figure(
    walls: np.ndarray,
    *,
    path: Sequence[tuple[int, int]] = (),
    open_states: Sequence[tuple[int, int]] = (),
    closed_states: Sequence[tuple[int, int]] = (),
    start: tuple[int, int] | None = None,
    goal: tuple[int, int] | None = None,
    height: int = 520,
) -> go.Figure:
    rgb = search_overlay_rgb(
        walls,
        open_states=open_states,
        closed_states=closed_states,
        start=start,
        goal=goal,
    )
    fig = go.Figure(data=go.Image(z=rgb, hoverinfo="x+y"))
    fig.update_layout(margin=dict(l=0, r=0, t=0, b=0), height=int(height))
    fig.update_yaxes(showticklabels=False, showgrid=False, zeroline=False)
    fig.update_xaxes(showticklabels=False, showgrid=False, zeroline=False)

    # Path as a polyline on top of the raster.
    if path:
        xs, ys = _xy(path)
        fig.add_trace(
            go.Scatter(
                x=xs,
                y=ys,
                mode="lines+markers",
                line=dict(color="#d64541", width=3),
                marker=dict(size=5, color="#d64541"),
                hoverinfo="skip",
                showlegend=False,
            )
        )

    for label, pos, color in (("S", start, "#2ea043"), ("G", goal, "#8250df")):
        if pos is None:
            continue
        fig.add_trace(
            go.Scatter(
                x=[int(pos[0])],
                y=[int(pos[1])],
                mode="markers+text",
                marker=dict(
                    size=12, color=color, line=dict(width=2, color="rgba(0,0,0,0.7)")
                ),
                text=[label],
                textposition="top center",
                hoverinfo="skip",
                showlegend=False,
            )
        )

    return fig


def cost_heatmap_figure(cost: np.ndarray, *, height: int = 520) -> go.Figure:
    c = np.asarray(cost, dtype=np.float64)
    if c.ndim != 2:
        raise ValueError("cost must be a 2D array")
    z = np.where(np.isfinite(c), c, np.nan)
    fig = go.Figure(
        data=go.Heatmap(
            z=z,
            colorscale="Viridis",
            hovertemplate="x=%{x} y=%{y} cost=%{z:.3f}<extra></extra>",
            colorbar=dict(thickness=12),
        )
    )
    fig.update_layout(margin=dict(l=0, r=0, t=0, b=0), height=int(height))
    fig.update_yaxes(autorange="reversed", showticklabels=False, showgrid=False)
    fig.update_xaxes(showticklabels=False, showgrid=False)
    return fig
