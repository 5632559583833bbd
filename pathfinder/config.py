from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping


@dataclass(frozen=True)
class EngineConfig:
    """Tuning knobs shared by every engine.

    pool_grow_by: node records allocated each time the pool runs dry.
    pool_reserve: node records allocated when the engine is created.
    """

    pool_grow_by: int = 1000
    pool_reserve: int = 0

    def __post_init__(self) -> None:
        if int(self.pool_grow_by) <= 0:
            raise ValueError("pool_grow_by must be > 0")
        if int(self.pool_reserve) < 0:
            raise ValueError("pool_reserve must be >= 0")

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> EngineConfig:
        known = {f.name for f in fields(cls)}
        return cls(**{k: int(v) for k, v in values.items() if k in known})


DEFAULT_CONFIG = EngineConfig()
