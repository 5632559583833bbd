from __future__ import annotations

import pytest

from pathfinder import AStarGeneric, AStarTile8DirCached, DEFAULT_CONFIG, EngineConfig


def test_defaults() -> None:
    assert DEFAULT_CONFIG.pool_grow_by == 1000
    assert DEFAULT_CONFIG.pool_reserve == 0


def test_validation() -> None:
    with pytest.raises(ValueError):
        EngineConfig(pool_grow_by=0)
    with pytest.raises(ValueError):
        EngineConfig(pool_reserve=-1)


def test_from_mapping_ignores_unknown_keys() -> None:
    cfg = EngineConfig.from_mapping({"pool_grow_by": "64", "color": "red"})
    assert cfg.pool_grow_by == 64
    assert cfg.pool_reserve == 0


def test_engines_use_config() -> None:
    cfg = EngineConfig(pool_grow_by=8, pool_reserve=10)
    assert AStarGeneric(config=cfg).pool_capacity == 10
    engine = AStarTile8DirCached(map_width=5, config=cfg)
    assert engine.config is cfg
    assert AStarGeneric().config is DEFAULT_CONFIG
