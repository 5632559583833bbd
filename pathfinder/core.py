from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Hashable, Protocol

NO_SLOT = -1

Coord = tuple[int, int]


class PathResult(enum.IntEnum):
    FOUND = 1
    NOT_FOUND = 2
    SEARCHING = 3


@dataclass(eq=False)
class SearchNode:
    """One explored state of the current search.

    `parent` is the pool slot of the predecessor on the best known path, or
    NO_SLOT for the start node. Nodes compare by `f` only so they can sit
    directly in a heapq list.
    """

    state: Any = None
    parent: int = NO_SLOT
    g: float = 0.0
    h: float = 0.0
    f: float = 0.0
    index: int = 0
    slot: int = NO_SLOT
    live: bool = False

    def __lt__(self, other: SearchNode) -> bool:
        return self.f < other.f

    def reset(self) -> None:
        self.state = None
        self.parent = NO_SLOT
        self.g = 0.0
        self.h = 0.0
        self.f = 0.0
        self.index = 0
        self.live = False


@dataclass(frozen=True)
class SearchResult:
    result: PathResult
    path: tuple[Any, ...] = ()
    cost: float | None = None
    expansions: int = 0

    @property
    def found(self) -> bool:
        return self.result == PathResult.FOUND

    def start_to_goal(self) -> list[Any]:
        # `path` is stored goal first.
        return list(reversed(self.path))


class DestinationCost(Protocol):
    def __call__(self, state: Any, goal: Any) -> float:  # pragma: no cover
        ...


class AddNeighbor(Protocol):
    def __call__(self, neighbor: Hashable, move_cost: float) -> None:  # pragma: no cover
        ...


class AddNeighborIndexed(Protocol):
    def __call__(
        self, neighbor: Any, neighbor_index: int, move_cost: float
    ) -> None:  # pragma: no cover
        ...


class GetNeighbors(Protocol):
    def __call__(self, state: Any, add_neighbor: AddNeighbor) -> None:  # pragma: no cover
        ...


class GetNeighborsIndexed(Protocol):
    def __call__(
        self, state: Any, add_neighbor: AddNeighborIndexed
    ) -> None:  # pragma: no cover
        ...


class MoveCost(Protocol):
    def __call__(self, start: Coord, end: Coord) -> float:  # pragma: no cover
        ...


class MoveBlocked(Protocol):
    def __call__(self, start: Coord, end: Coord) -> bool:  # pragma: no cover
        ...
