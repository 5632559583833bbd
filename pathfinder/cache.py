from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, NamedTuple

logger = logging.getLogger(__name__)


class CachedNeighbor(NamedTuple):
    state: Any
    index: int
    cost: float


@dataclass
class CacheEntry:
    populated: bool = False
    neighbors: list[CachedNeighbor] = field(default_factory=list)

    def record(self, state: Any, index: int, cost: float) -> None:
        self.neighbors.append(CachedNeighbor(state, int(index), float(cost)))


class NeighborCache:
    """Out-edges of each expanded origin, keyed by the origin's index.

    Lives as long as its engine. Entries are filled the first time an
    origin is expanded and replayed afterwards until invalidated.
    """

    def __init__(self) -> None:
        self._entries: dict[int, CacheEntry] = {}
        self.hits = 0
        self.misses = 0

    def lookup(self, index: int) -> list[CachedNeighbor] | None:
        e = self._entries.get(index)
        if e is None or not e.populated:
            self.misses += 1
            return None
        self.hits += 1
        return e.neighbors

    def begin(self, index: int) -> CacheEntry:
        """Start a fresh, unpopulated entry for `index`."""
        e = CacheEntry()
        self._entries[int(index)] = e
        return e

    def clear(self) -> None:
        if self._entries:
            logger.debug("neighbor cache cleared (%d entries)", len(self._entries))
        self._entries.clear()

    def clear_index(self, index: int) -> bool:
        e = self._entries.pop(int(index), None)
        if e is None:
            return False
        logger.debug("neighbor cache entry %d invalidated", int(index))
        return True

    def stats(self) -> dict[str, int]:
        return {"entries": len(self), "hits": self.hits, "misses": self.misses}

    def __contains__(self, index: object) -> bool:
        e = self._entries.get(index)  # type: ignore[arg-type]
        return e is not None and e.populated

    def __len__(self) -> int:
        return sum(1 for e in self._entries.values() if e.populated)
