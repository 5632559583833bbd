from .cache import CachedNeighbor, NeighborCache
from .cached import AStarGenericCached
from .config import DEFAULT_CONFIG, EngineConfig
from .core import NO_SLOT, PathResult, SearchNode, SearchResult
from .generic import AStarGeneric
from .grid import NEIGHBOR_OFFSETS_8, AStarTile8DirCached, grid_index
from .membership import MembershipIndex
from .open_set import OpenSet
from .pool import NodePool

__all__ = [
    "AStarGeneric",
    "AStarGenericCached",
    "AStarTile8DirCached",
    "CachedNeighbor",
    "DEFAULT_CONFIG",
    "EngineConfig",
    "MembershipIndex",
    "NEIGHBOR_OFFSETS_8",
    "NO_SLOT",
    "NeighborCache",
    "NodePool",
    "OpenSet",
    "PathResult",
    "SearchNode",
    "SearchResult",
    "grid_index",
]
