from __future__ import annotations

from pathlib import Path
from typing import Iterable

import numpy as np

WALL = "#"
FLOOR = " "
PATH_MARK = "*"


def parse_text_map(
    text: str,
    *,
    width: int | None = None,
    height: int | None = None,
    fill: str = FLOOR,
) -> np.ndarray:
    """Parse an ASCII map into an HxW array of single characters.

    Short rows are padded with `fill`; long rows and extra lines are cut to
    `width`/`height` when those are given. Trailing carriage returns are
    ignored.
    """

    lines = [ln.rstrip("\r") for ln in str(text).split("\n")]
    while lines and lines[-1] == "":
        lines.pop()

    if height is None:
        height = len(lines)
    if width is None:
        width = max((len(ln) for ln in lines), default=0)
    width = int(width)
    height = int(height)
    if width <= 0 or height <= 0:
        raise ValueError("map must be at least 1x1")

    tiles = np.full((height, width), str(fill)[:1] or FLOOR, dtype="<U1")
    for y, ln in enumerate(lines[:height]):
        row = ln[:width]
        if row:
            tiles[y, : len(row)] = list(row)
    return tiles


def load_text_map(
    path: str | Path, *, width: int | None = None, height: int | None = None
) -> np.ndarray:
    text = Path(path).read_text(encoding="utf-8", errors="replace")
    return parse_text_map(text, width=width, height=height)


def wall_mask(tiles: np.ndarray, *, wall: str = WALL) -> np.ndarray:
    t = np.asarray(tiles)
    if t.ndim != 2:
        raise ValueError("tiles must be a 2D array")
    return t == str(wall)


def random_tile_map(
    *,
    seed: int,
    width: int,
    height: int,
    density: float = 0.25,
    border: bool = True,
) -> np.ndarray:
    """Deterministic random wall layout for demos and benchmarks."""

    width = int(width)
    height = int(height)
    if width <= 0 or height <= 0:
        raise ValueError("width and height must be > 0")
    density = float(np.clip(float(density), 0.0, 1.0))

    rng = np.random.default_rng(int(seed))
    walls = rng.random((height, width)) < density
    if bool(border):
        walls[0, :] = True
        walls[-1, :] = True
        walls[:, 0] = True
        walls[:, -1] = True
    return np.where(walls, WALL, FLOOR).astype("<U1")


def render_path(
    tiles: np.ndarray,
    path: Iterable[tuple[int, int]],
    *,
    mark: str = PATH_MARK,
) -> str:
    """Render the map as text with (x, y) path positions overwritten by `mark`."""

    out = np.array(tiles, dtype="<U1", copy=True)
    if out.ndim != 2:
        raise ValueError("tiles must be a 2D array")
    H, W = out.shape
    for x, y in path:
        if 0 <= int(y) < H and 0 <= int(x) < W:
            out[int(y), int(x)] = str(mark)[:1]
    return "\n".join("".join(row) for row in out) + "\n"
