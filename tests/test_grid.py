from __future__ import annotations

import logging
from collections import Counter

import numpy as np
import pytest

from pathfinder import AStarGeneric, AStarTile8DirCached, PathResult, grid_index
from tilemap.costs import GridCosts, octile_distance, step_cost
from tilemap.textmap import random_tile_map, wall_mask


def test_grid_index_is_row_major() -> None:
    assert grid_index((2, 1), 5) == 7
    assert grid_index((0, 0), 5) == 0
    assert grid_index((4, -1), 5) == -1


def test_open_3x3_diagonal_line() -> None:
    engine = AStarTile8DirCached(map_width=3)
    res = engine.find_path((0, 0), (2, 2), step_cost, octile_distance)
    assert res.result == PathResult.FOUND
    assert res.path == ((2, 2), (1, 1), (0, 0))
    assert res.cost == pytest.approx(2.8)


def test_wall_between_start_and_goal() -> None:
    walls = np.zeros((5, 5), dtype=bool)
    walls[:, 2] = True
    grid = GridCosts.from_walls(walls)
    engine = AStarTile8DirCached(map_width=5)
    res = engine.find_path(
        (0, 2), (4, 2), grid.move_cost, octile_distance, grid.move_blocked
    )
    assert res.result == PathResult.NOT_FOUND
    assert res.path == ()
    assert all(x < 2 for x, _ in engine.closed_states())


def _assert_walkable(grid: GridCosts, path, start, goal) -> None:
    assert path[0] == goal
    assert path[-1] == start
    for cell in path:
        assert grid.is_passable(cell)
    for (x0, y0), (x1, y1) in zip(path, path[1:]):
        assert max(abs(x0 - x1), abs(y0 - y1)) == 1


def test_matches_generic_engine() -> None:
    tiles = random_tile_map(seed=9, width=32, height=24, density=0.22)
    walls = wall_mask(tiles)
    walls[1, 1] = False
    walls[22, 30] = False
    grid = GridCosts.from_walls(walls)
    start, goal = (1, 1), (30, 22)

    plain = AStarGeneric().find_path(start, goal, octile_distance, grid.neighbors8)
    tile = AStarTile8DirCached(map_width=grid.width).find_path(
        start, goal, grid.move_cost, octile_distance, grid.move_blocked
    )
    assert tile.result == plain.result
    if plain.found:
        assert tile.cost == pytest.approx(plain.cost)
        _assert_walkable(grid, tile.path, start, goal)
        _assert_walkable(grid, plain.path, start, goal)


def test_columns_outside_map_width_are_skipped() -> None:
    engine = AStarTile8DirCached(map_width=3)
    engine.find_path((0, 1), (2, 1), step_cost, octile_distance)
    for x, _ in engine.closed_states() + engine.open_states():
        assert 0 <= x < 3


def test_map_height_bounds_rows() -> None:
    engine = AStarTile8DirCached(map_width=4, map_height=2)
    res = engine.find_path((0, 0), (3, 1), step_cost, lambda a, b: 0.0)
    assert res.found
    for _, y in engine.closed_states() + engine.open_states():
        assert 0 <= y < 2


def test_start_outside_map_is_not_found() -> None:
    engine = AStarTile8DirCached(map_width=4, map_height=4)
    res = engine.find_path((5, 0), (1, 1), step_cost, octile_distance)
    assert res.result == PathResult.NOT_FOUND
    assert res.expansions == 0
    assert engine.step() == PathResult.NOT_FOUND


def test_cached_search_skips_blocked_predicate() -> None:
    grid = GridCosts.from_walls(np.zeros((8, 8), dtype=bool))
    calls: Counter = Counter()

    def blocked(a, b) -> bool:
        calls[a] += 1
        return grid.move_blocked(a, b)

    engine = AStarTile8DirCached(map_width=8)
    first = engine.find_path((0, 0), (7, 5), grid.move_cost, octile_distance, blocked)
    assert sum(calls.values()) > 0
    calls.clear()
    second = engine.find_path((0, 0), (7, 5), grid.move_cost, octile_distance, blocked)
    assert sum(calls.values()) == 0
    assert second.path == first.path


def test_cache_hits_do_not_recheck_blocking() -> None:
    open_grid = GridCosts.from_walls(np.zeros((3, 5), dtype=bool))
    engine = AStarTile8DirCached(map_width=5, map_height=3)
    start, goal = (0, 1), (4, 1)

    res = engine.find_path(
        start, goal, open_grid.move_cost, octile_distance, open_grid.move_blocked
    )
    assert res.cost == pytest.approx(4.0)

    walls = np.zeros((3, 5), dtype=bool)
    walls[:, 2] = True
    walled = GridCosts.from_walls(walls)

    # Replayed edges still cross the new wall.
    res = engine.find_path(
        start, goal, walled.move_cost, octile_distance, walled.move_blocked
    )
    assert res.found
    assert res.cost == pytest.approx(4.0)

    for y in range(3):
        engine.clear_cache_position((1, y))
    res = engine.find_path(
        start, goal, walled.move_cost, octile_distance, walled.move_blocked
    )
    assert res.result == PathResult.NOT_FOUND


def test_set_map_width_clears_cache_only_on_change() -> None:
    engine = AStarTile8DirCached(map_width=6)
    engine.find_path((0, 0), (5, 5), step_cost, octile_distance)
    entries = engine.cache_stats()["entries"]
    assert entries > 0
    engine.set_map_width(6)
    assert engine.cache_stats()["entries"] == entries
    engine.set_map_width(7)
    assert engine.cache_stats()["entries"] == 0


def test_clear_cache_index_and_unknown_index() -> None:
    engine = AStarTile8DirCached(map_width=6)
    engine.find_path((0, 0), (5, 5), step_cost, octile_distance)
    entries = engine.cache_stats()["entries"]
    engine.clear_cache_index(engine.index_of((0, 0)))
    assert engine.cache_stats()["entries"] == entries - 1
    engine.clear_cache_index(10**6)
    assert engine.cache_stats()["entries"] == entries - 1
    engine.clear_cache()
    assert engine.cache_stats()["entries"] == 0


def test_map_width_required() -> None:
    engine = AStarTile8DirCached()
    with pytest.raises(ValueError):
        engine.find_path((0, 0), (1, 1), step_cost, octile_distance)
    with pytest.raises(ValueError):
        engine.set_map_width(0)
    with pytest.raises(ValueError):
        engine.set_map_height(-1)


def test_mixing_blocked_and_unblocked_searches_warns(caplog) -> None:
    grid = GridCosts.from_walls(np.zeros((4, 4), dtype=bool))
    engine = AStarTile8DirCached(map_width=4, map_height=4)
    engine.find_path((0, 0), (3, 3), grid.move_cost, octile_distance)
    with caplog.at_level(logging.WARNING, logger="pathfinder.grid"):
        engine.find_path(
            (0, 0), (3, 3), grid.move_cost, octile_distance, grid.move_blocked
        )
    assert any("not re-checked" in r.getMessage() for r in caplog.records)
