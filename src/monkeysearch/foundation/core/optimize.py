from __future__ import annotations

from dataclasses import asdict, dataclass, field, is_dataclass
from typing import Any

from monkeysearch.engine.algorithm.config.msa import MSAConfigData
from monkeysearch.engine.algorithm.msa import MonkeySearch
from monkeysearch.foundation.observer import Observer
from monkeysearch.foundation.problem.types import BoxProblem

from .result import OptimizationResult


@dataclass
class OptimizeConfig:
    """
    Canonical configuration for a single optimization run.
    """

    problem: BoxProblem
    algorithm_config: Any
    seed: int | None = None
    observers: list[Observer] = field(default_factory=list)


def _normalize_cfg(cfg: Any) -> MSAConfigData:
    if isinstance(cfg, MSAConfigData):
        return cfg
    if hasattr(cfg, "fixed"):
        return cfg.fixed()
    if is_dataclass(cfg):
        return MSAConfigData(**asdict(cfg))
    return MSAConfigData(**dict(cfg))


def optimize(config: OptimizeConfig) -> OptimizationResult:
    """
    Run a single Monkey Search optimization for the provided problem/config pair.
    """
    if not isinstance(config, OptimizeConfig):
        raise TypeError("optimize() expects an OptimizeConfig instance.")
    algo_cfg = _normalize_cfg(config.algorithm_config)
    algorithm = MonkeySearch(algo_cfg, observers=list(config.observers))
    return algorithm.run(config.problem, seed=config.seed)


__all__ = ["OptimizeConfig", "optimize", "OptimizationResult"]
