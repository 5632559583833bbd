from __future__ import annotations

import math

import numpy as np

from pathfinder.core import AddNeighbor, AddNeighborIndexed, Coord
from pathfinder.grid import NEIGHBOR_OFFSETS_8

DIAGONAL_COST = 1.4
SQRT2 = math.sqrt(2.0)

_OFFSETS_4: tuple[Coord, ...] = ((0, -1), (-1, 0), (1, 0), (0, 1))


def manhattan_distance(node: Coord, goal: Coord) -> float:
    return float(abs(node[0] - goal[0]) + abs(node[1] - goal[1]))


def octile_distance(
    node: Coord, goal: Coord, *, diagonal: float = DIAGONAL_COST
) -> float:
    dx = abs(int(node[0]) - int(goal[0]))
    dy = abs(int(node[1]) - int(goal[1]))
    lo = min(dx, dy)
    return float(diagonal) * lo + float(max(dx, dy) - lo)


def step_cost(start: Coord, end: Coord, *, diagonal: float = DIAGONAL_COST) -> float:
    if start[0] != end[0] and start[1] != end[1]:
        return float(diagonal)
    return 1.0


class GridCosts:
    """Callbacks for the engines backed by a 2D cost array.

    `cost[y, x]` is the price of entering tile (x, y); non-finite values
    mark impassable tiles. Diagonal steps are scaled by `diagonal`.
    """

    def __init__(self, cost: np.ndarray, *, diagonal: float = DIAGONAL_COST):
        c = np.asarray(cost, dtype=np.float64)
        if c.ndim != 2:
            raise ValueError("cost must be a 2D array")
        self.cost = c
        self.passable = np.isfinite(c)
        self.height, self.width = c.shape
        self.diagonal = float(diagonal)

    @classmethod
    def from_walls(
        cls, walls: np.ndarray, *, diagonal: float = DIAGONAL_COST
    ) -> GridCosts:
        w = np.asarray(walls, dtype=bool)
        return cls(np.where(w, np.inf, 1.0), diagonal=diagonal)

    def in_bounds(self, pos: Coord) -> bool:
        return 0 <= pos[0] < self.width and 0 <= pos[1] < self.height

    def is_passable(self, pos: Coord) -> bool:
        return self.in_bounds(pos) and bool(self.passable[pos[1], pos[0]])

    def index(self, pos: Coord) -> int:
        return int(pos[1]) * self.width + int(pos[0])

    def move_cost(self, start: Coord, end: Coord) -> float:
        c = float(self.cost[end[1], end[0]])
        if start[0] != end[0] and start[1] != end[1]:
            c *= self.diagonal
        return c

    def move_blocked(self, start: Coord, end: Coord) -> bool:
        return not self.is_passable(end)

    def min_cost(self) -> float:
        finite = self.cost[self.passable]
        return float(np.min(finite)) if finite.size else 0.0

    def neighbors4(self, node: Coord, add_neighbor: AddNeighbor) -> None:
        x, y = node
        for dx, dy in _OFFSETS_4:
            pos = (x + dx, y + dy)
            if self.is_passable(pos):
                add_neighbor(pos, self.move_cost(node, pos))

    def neighbors8(self, node: Coord, add_neighbor: AddNeighbor) -> None:
        x, y = node
        for dx, dy in NEIGHBOR_OFFSETS_8:
            pos = (x + dx, y + dy)
            if self.is_passable(pos):
                add_neighbor(pos, self.move_cost(node, pos))

    def neighbors8_indexed(self, node: Coord, add_neighbor: AddNeighborIndexed) -> None:
        x, y = node
        for dx, dy in NEIGHBOR_OFFSETS_8:
            pos = (x + dx, y + dy)
            if self.is_passable(pos):
                add_neighbor(pos, self.index(pos), self.move_cost(node, pos))
