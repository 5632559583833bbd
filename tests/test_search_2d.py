from __future__ import annotations

import numpy as np

from pathfinder import AStarGeneric
from tilemap.costs import GridCosts, octile_distance
from viz.search_2d import cost_heatmap_figure, search_figure


def test_search_figure_traces() -> None:
    walls = np.zeros((6, 6), dtype=bool)
    grid = GridCosts.from_walls(walls)
    engine = AStarGeneric()
    res = engine.find_path((0, 0), (5, 3), octile_distance, grid.neighbors8)
    fig = search_figure(
        walls,
        path=res.start_to_goal(),
        open_states=engine.open_states(),
        closed_states=engine.closed_states(),
        start=(0, 0),
        goal=(5, 3),
    )
    # image, path, start marker, goal marker
    assert len(fig.data) == 4
    assert list(fig.data[1].x)[0] == 0
    assert list(fig.data[1].x)[-1] == 5


def test_search_figure_without_path() -> None:
    fig = search_figure(np.zeros((4, 4), dtype=bool))
    assert len(fig.data) == 1


def test_cost_heatmap_masks_blocked() -> None:
    cost = np.ones((3, 3))
    cost[1, 1] = np.inf
    fig = cost_heatmap_figure(cost)
    z = np.asarray(fig.data[0].z, dtype=np.float64)
    assert np.isnan(z[1, 1])
    assert z[0, 0] == 1.0
