from __future__ import annotations

import time
from typing import Any, cast

import numpy as np
import streamlit as st

from pathfinder import (
    AStarGeneric,
    AStarGenericCached,
    AStarTile8DirCached,
    PathResult,
)
from pathfinder.engine import SearchEngine
from tilemap.costs import DIAGONAL_COST, GridCosts, octile_distance
from tilemap.textmap import random_tile_map, wall_mask
from ui.styles import inject_global_styles
from viz.export import overlay_to_png_bytes, path_to_npy_bytes, search_overlay_rgb
from viz.search_2d import search_figure

st.set_page_config(
    page_title="A* Pathfinder",
    page_icon="*",
    layout="wide",
)

inject_global_styles()

ENGINES = ["Tile 8-dir cached", "Generic cached", "Generic"]


def _qp_get(name: str, default: str) -> str:
    try:
        raw = st.query_params.get(name)
    except Exception:
        raw = None

    if raw is None:
        return default
    if isinstance(raw, list):
        return str(raw[0]) if raw else default
    return str(raw)


def _qp_int(name: str, default: int, *, min_value: int, max_value: int) -> int:
    try:
        v = int(float(_qp_get(name, str(default))))
    except ValueError:
        v = default
    return max(min_value, min(max_value, v))


def _engine_state() -> dict[str, Any]:
    # Engines live across reruns so their caches survive.
    if "engines" not in st.session_state:
        st.session_state["engines"] = {
            ENGINES[0]: AStarTile8DirCached(),
            ENGINES[1]: AStarGenericCached(),
            ENGINES[2]: AStarGeneric(),
        }
    return cast(dict[str, Any], st.session_state["engines"])


def _snap_open(walls: np.ndarray, pos: tuple[int, int]) -> tuple[int, int]:
    """Nearest floor tile to pos, scanning rings outward."""
    H, W = walls.shape
    x0, y0 = pos
    for r in range(max(H, W)):
        for y in range(max(0, y0 - r), min(H, y0 + r + 1)):
            for x in range(max(0, x0 - r), min(W, x0 + r + 1)):
                if not walls[y, x]:
                    return (x, y)
    return pos


def _initialize(
    name: str,
    engine: SearchEngine,
    grid: GridCosts,
    start: tuple[int, int],
    goal: tuple[int, int],
) -> None:
    def h(node: tuple[int, int], target: tuple[int, int]) -> float:
        return octile_distance(node, target, diagonal=DIAGONAL_COST)

    if isinstance(engine, AStarTile8DirCached):
        engine.set_map_width(grid.width)
        engine.set_map_height(grid.height)
        engine.initialize_step(start, goal, grid.move_cost, h, grid.move_blocked)
    elif isinstance(engine, AStarGenericCached):
        engine.initialize_step(start, grid.index(start), goal, h, grid.neighbors8_indexed)
    elif isinstance(engine, AStarGeneric):
        engine.initialize_step(start, goal, h, grid.neighbors8)
    else:
        raise ValueError(f"unknown engine: {name}")


with st.sidebar:
    st.markdown("### Map")
    seed = st.number_input("Seed", value=_qp_int("seed", 7, min_value=0, max_value=10**6))
    width = st.slider("Width", min_value=8, max_value=160, value=_qp_int("w", 80, min_value=8, max_value=160))
    height = st.slider("Height", min_value=8, max_value=100, value=_qp_int("h", 25, min_value=8, max_value=100))
    density = st.slider("Wall density", min_value=0.0, max_value=0.6, value=0.28, step=0.01)

    st.markdown("### Search")
    engine_name = st.selectbox("Engine", ENGINES)
    sx = st.slider("Start x", 0, int(width) - 1, 1)
    sy = st.slider("Start y", 0, int(height) - 1, 1)
    gx = st.slider("Goal x", 0, int(width) - 1, int(width) - 2)
    gy = st.slider("Goal y", 0, int(height) - 1, int(height) - 2)
    steps_per_click = st.slider("Steps per click", 1, 500, 25)

tiles = random_tile_map(
    seed=int(seed), width=int(width), height=int(height), density=float(density)
)
walls = wall_mask(tiles)
grid = GridCosts.from_walls(walls)
start = _snap_open(walls, (int(sx), int(sy)))
goal = _snap_open(walls, (int(gx), int(gy)))

engines = _engine_state()
engine = cast(SearchEngine, engines[engine_name])

key = (int(seed), int(width), int(height), float(density), engine_name, start, goal)
if st.session_state.get("search_key") != key:
    if st.session_state.get("map_key") != key[:4]:
        # New map: cached edges no longer describe it.
        for e in engines.values():
            if hasattr(e, "clear_cache"):
                e.clear_cache()
        st.session_state["map_key"] = key[:4]
    _initialize(engine_name, engine, grid, start, goal)
    st.session_state["search_key"] = key
    st.session_state["elapsed_ms"] = 0.0

c0, c1, c2, c3 = st.columns(4)
with c0:
    do_step = st.button("Step", use_container_width=True)
with c1:
    do_run = st.button("Run to end", use_container_width=True)
with c2:
    do_restart = st.button("Restart", use_container_width=True)
with c3:
    do_clear = st.button("Clear cache", use_container_width=True)

if do_clear and hasattr(engine, "clear_cache"):
    engine.clear_cache()
if do_restart or do_clear:
    _initialize(engine_name, engine, grid, start, goal)
    st.session_state["elapsed_ms"] = 0.0

t0 = time.perf_counter()
if do_step:
    for _ in range(int(steps_per_click)):
        if engine.step() != PathResult.SEARCHING:
            break
if do_run:
    while engine.step() == PathResult.SEARCHING:
        pass
st.session_state["elapsed_ms"] = float(st.session_state.get("elapsed_ms", 0.0)) + (
    time.perf_counter() - t0
) * 1000.0

status = engine.status
path = engine.get_path()
res = engine.result()

left, right = st.columns([3, 1])
with left:
    fig = search_figure(
        walls,
        path=path,
        open_states=engine.open_states(),
        closed_states=engine.closed_states(),
        start=start,
        goal=goal,
    )
    st.plotly_chart(fig, use_container_width=True)

with right:
    st.metric("Status", status.name.replace("_", " ").title())
    st.metric("Expansions", int(engine.expansions))
    st.metric("Open", len(engine.open_states()))
    st.metric("Path cost", "-" if res.cost is None else f"{res.cost:.2f}")
    st.caption(f"search time {float(st.session_state['elapsed_ms']):.1f} ms")
    if hasattr(engine, "cache_stats"):
        st.json(engine.cache_stats())

    rgb = search_overlay_rgb(
        walls,
        path=path,
        open_states=engine.open_states(),
        closed_states=engine.closed_states(),
        start=start,
        goal=goal,
    )
    st.download_button(
        "Download PNG",
        data=overlay_to_png_bytes(rgb, scale=6),
        file_name="search.png",
        mime="image/png",
    )
    if res.found:
        st.download_button(
            "Download path (.npy)",
            data=path_to_npy_bytes(res.start_to_goal()),
            file_name="path.npy",
            mime="application/octet-stream",
        )
