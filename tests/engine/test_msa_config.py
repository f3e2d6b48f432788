from __future__ import annotations

import json

import numpy as np
import pytest

from monkeysearch.engine.algorithm.config import MSAConfig, MSAConfigData
from monkeysearch.foundation.exceptions import (
    ConfigurationError,
    InvalidParameterError,
    MissingConfigError,
)


def test_builder_defaults():
    cfg = MSAConfig().pop_size(30).max_iterations(50).fixed()
    assert isinstance(cfg, MSAConfigData)
    assert cfg.pop_size == 30
    assert cfg.max_iterations == 50
    assert cfg.climbing_step == 0.2
    assert cfg.somersault_range == 2.0
    assert cfg.watch_policy == "live"
    assert cfg.climb_workers == 1


def test_default_matches_reference_run():
    cfg = MSAConfig.default()
    assert (cfg.pop_size, cfg.max_iterations) == (20, 100)


def test_builder_overrides():
    cfg = (
        MSAConfig()
        .pop_size(10)
        .max_iterations(5)
        .climbing_step(0.05)
        .somersault_range(1.0)
        .watch_policy("SNAPSHOT")
        .climb_workers(np.int64(3))
        .fixed()
    )
    assert cfg.climbing_step == 0.05
    assert cfg.somersault_range == 1.0
    assert cfg.watch_policy == "snapshot"
    assert cfg.climb_workers == 3 and isinstance(cfg.climb_workers, int)


@pytest.mark.parametrize("missing", ["pop_size", "max_iterations"])
def test_builder_requires_fields(missing):
    builder = MSAConfig()
    if missing != "pop_size":
        builder.pop_size(10)
    if missing != "max_iterations":
        builder.max_iterations(10)
    with pytest.raises(MissingConfigError) as excinfo:
        builder.fixed()
    assert missing in str(excinfo.value)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"pop_size": 0, "max_iterations": 10},
        {"pop_size": -4, "max_iterations": 10},
        {"pop_size": 2.5, "max_iterations": 10},
        {"pop_size": True, "max_iterations": 10},
        {"pop_size": 10, "max_iterations": 0},
        {"pop_size": 10, "max_iterations": 10, "climbing_step": 0.0},
        {"pop_size": 10, "max_iterations": 10, "climbing_step": float("nan")},
        {"pop_size": 10, "max_iterations": 10, "somersault_range": -1.0},
        {"pop_size": 10, "max_iterations": 10, "somersault_range": float("inf")},
        {"pop_size": 10, "max_iterations": 10, "watch_policy": "random"},
        {"pop_size": 10, "max_iterations": 10, "climb_workers": 0},
    ],
)
def test_invalid_values_fail_at_construction(kwargs):
    with pytest.raises(InvalidParameterError) as excinfo:
        MSAConfigData(**kwargs)
    assert isinstance(excinfo.value, ConfigurationError)


def test_config_is_frozen():
    cfg = MSAConfig.default()
    with pytest.raises(AttributeError):
        cfg.pop_size = 3  # type: ignore[misc]


def test_serialization():
    cfg = MSAConfig().pop_size(12).max_iterations(7).fixed()
    data = json.loads(cfg.to_json())
    assert data == cfg.to_dict()
    assert MSAConfigData(**data) == cfg
