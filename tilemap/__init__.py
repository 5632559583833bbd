from __future__ import annotations

from tilemap.costs import (
    DIAGONAL_COST,
    GridCosts,
    manhattan_distance,
    octile_distance,
    step_cost,
)
from tilemap.paths import astar_path
from tilemap.textmap import (
    WALL,
    load_text_map,
    parse_text_map,
    random_tile_map,
    render_path,
    wall_mask,
)

__all__ = [
    "DIAGONAL_COST",
    "GridCosts",
    "WALL",
    "astar_path",
    "load_text_map",
    "manhattan_distance",
    "octile_distance",
    "parse_text_map",
    "random_tile_map",
    "render_path",
    "step_cost",
    "wall_mask",
]
