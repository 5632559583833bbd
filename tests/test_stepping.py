from __future__ import annotations

import numpy as np

from pathfinder import (
    AStarGeneric,
    AStarGenericCached,
    AStarTile8DirCached,
    PathResult,
)
from tilemap.costs import GridCosts, octile_distance
from tilemap.textmap import random_tile_map, wall_mask


def _grid() -> GridCosts:
    tiles = random_tile_map(seed=21, width=28, height=18, density=0.2)
    walls = wall_mask(tiles)
    walls[1, 1] = False
    walls[16, 26] = False
    return GridCosts.from_walls(walls)


START = (1, 1)
GOAL = (26, 16)


def _step_to_end(engine) -> tuple[PathResult, int]:
    calls = 0
    result = PathResult.SEARCHING
    while result == PathResult.SEARCHING:
        result = engine.step()
        calls += 1
    return result, calls


def test_step_before_initialize_is_not_found() -> None:
    for engine in (AStarGeneric(), AStarGenericCached(), AStarTile8DirCached()):
        assert engine.step() == PathResult.NOT_FOUND
        assert engine.get_path() == []
        assert engine.result().path == ()


def test_generic_step_matches_blocking() -> None:
    grid = _grid()
    blocking = AStarGeneric().find_path(START, GOAL, octile_distance, grid.neighbors8)

    engine = AStarGeneric()
    engine.initialize_step(START, GOAL, octile_distance, grid.neighbors8)
    result, _ = _step_to_end(engine)
    assert result == blocking.result
    assert engine.expansions == blocking.expansions
    assert tuple(engine.get_path() if result == PathResult.FOUND else ()) == blocking.path


def test_cached_step_matches_blocking() -> None:
    grid = _grid()
    blocking = AStarGenericCached().find_path(
        START, grid.index(START), GOAL, octile_distance, grid.neighbors8_indexed
    )
    engine = AStarGenericCached()
    engine.initialize_step(
        START, grid.index(START), GOAL, octile_distance, grid.neighbors8_indexed
    )
    result, _ = _step_to_end(engine)
    assert engine.result() == blocking


def test_grid_step_matches_blocking() -> None:
    grid = _grid()
    blocking = AStarTile8DirCached(map_width=grid.width).find_path(
        START, GOAL, grid.move_cost, octile_distance, grid.move_blocked
    )
    engine = AStarTile8DirCached(map_width=grid.width)
    engine.initialize_step(START, GOAL, grid.move_cost, octile_distance, grid.move_blocked)
    result, _ = _step_to_end(engine)
    assert engine.result() == blocking


def test_terminal_result_is_sticky() -> None:
    grid = GridCosts.from_walls(np.zeros((4, 4), dtype=bool))
    engine = AStarGeneric()
    engine.initialize_step((0, 0), (3, 3), octile_distance, grid.neighbors8)
    result, _ = _step_to_end(engine)
    assert result == PathResult.FOUND
    expansions = engine.expansions
    for _ in range(3):
        assert engine.step() == PathResult.FOUND
    assert engine.expansions == expansions


def test_get_path_mid_search() -> None:
    grid = GridCosts.from_walls(np.zeros((18, 28), dtype=bool))
    engine = AStarGeneric()
    engine.initialize_step(START, GOAL, octile_distance, grid.neighbors8)
    assert engine.get_path() == []
    assert engine.step() == PathResult.SEARCHING
    assert engine.get_path() == [START]
    for _ in range(10):
        engine.step()
    partial = engine.get_path()
    assert partial[-1] == START
    assert partial[0] == engine.closed_states()[-1]
    assert engine.status == PathResult.SEARCHING


def test_abandoned_search_is_released_by_next_one() -> None:
    grid = _grid()
    engine = AStarGeneric()
    engine.initialize_step(START, GOAL, octile_distance, grid.neighbors8)
    for _ in range(5):
        engine.step()
    res = engine.find_path(START, GOAL, octile_distance, grid.neighbors8)
    assert engine.nodes_in_use == len(engine.open_states()) + len(engine.closed_states())
    assert res.expansions == engine.expansions
