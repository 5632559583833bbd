from __future__ import annotations

import io
from typing import Iterable

import numpy as np
from PIL import Image

PALETTE: dict[str, tuple[int, int, int]] = {
    "floor": (236, 233, 224),
    "wall": (40, 44, 52),
    "closed": (150, 180, 214),
    "open": (247, 200, 115),
    "path": (214, 69, 65),
    "start": (46, 160, 67),
    "goal": (130, 80, 223),
}


def _paint(
    img: np.ndarray, cells: Iterable[tuple[int, int]], color: tuple[int, int, int]
) -> None:
    H, W = img.shape[:2]
    for x, y in cells:
        if 0 <= int(y) < H and 0 <= int(x) < W:
            img[int(y), int(x)] = color


def search_overlay_rgb(
    walls: np.ndarray,
    *,
    path: Iterable[tuple[int, int]] = (),
    open_states: Iterable[tuple[int, int]] = (),
    closed_states: Iterable[tuple[int, int]] = (),
    start: tuple[int, int] | None = None,
    goal: tuple[int, int] | None = None,
) -> np.ndarray:
    """Color a wall mask with the state of a search.

    All positions are (x, y). Later layers win: closed, open, path, then the
    start and goal markers. Returns uint8 HxWx3.
    """

    w = np.asarray(walls, dtype=bool)
    if w.ndim != 2:
        raise ValueError("walls must be a 2D array")

    img = np.empty(w.shape + (3,), dtype=np.uint8)
    img[...] = PALETTE["floor"]
    img[w] = PALETTE["wall"]

    _paint(img, closed_states, PALETTE["closed"])
    _paint(img, open_states, PALETTE["open"])
    _paint(img, path, PALETTE["path"])
    if start is not None:
        _paint(img, [start], PALETTE["start"])
    if goal is not None:
        _paint(img, [goal], PALETTE["goal"])
    return img


def overlay_to_png_bytes(rgb: np.ndarray, *, scale: int = 1) -> bytes:
    """Encode an HxWx3 uint8 image as PNG, upscaled by nearest neighbour."""

    img = np.asarray(rgb)
    if img.ndim != 3 or img.shape[2] != 3:
        raise ValueError("rgb must be HxWx3")
    scale = int(scale)
    if scale <= 0:
        raise ValueError("scale must be >= 1")

    img = np.clip(img, 0, 255).astype(np.uint8)
    if scale > 1:
        img = np.repeat(np.repeat(img, scale, axis=0), scale, axis=1)

    out = io.BytesIO()
    Image.fromarray(img, mode="RGB").save(out, format="PNG")
    return out.getvalue()


def path_to_npy_bytes(path: Iterable[tuple[int, int]]) -> bytes:
    arr = np.asarray(list(path), dtype=np.int64).reshape(-1, 2)
    out = io.BytesIO()
    np.save(out, arr)
    return out.getvalue()
