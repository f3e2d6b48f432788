"""Monkey Search configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from monkeysearch.foundation.exceptions import InvalidParameterError

from .base import _require_fields, _require_positive_float, _require_positive_int, _SerializableConfig

WATCH_POLICIES = ("live", "snapshot")

DEFAULT_CLIMBING_STEP = 0.2
DEFAULT_SOMERSAULT_RANGE = 2.0


@dataclass(frozen=True)
class MSAConfigData(_SerializableConfig):
    pop_size: int
    max_iterations: int
    climbing_step: float = DEFAULT_CLIMBING_STEP
    somersault_range: float = DEFAULT_SOMERSAULT_RANGE
    watch_policy: str = "live"
    climb_workers: int = 1

    def __post_init__(self) -> None:
        object.__setattr__(self, "pop_size", _require_positive_int("pop_size", self.pop_size))
        object.__setattr__(self, "max_iterations", _require_positive_int("max_iterations", self.max_iterations))
        object.__setattr__(self, "climbing_step", _require_positive_float("climbing_step", self.climbing_step))
        object.__setattr__(self, "somersault_range", _require_positive_float("somersault_range", self.somersault_range))
        object.__setattr__(self, "climb_workers", _require_positive_int("climb_workers", self.climb_workers))
        policy = str(self.watch_policy).lower()
        if policy not in WATCH_POLICIES:
            raise InvalidParameterError("watch_policy", self.watch_policy, f"one of {', '.join(WATCH_POLICIES)}")
        object.__setattr__(self, "watch_policy", policy)


class MSAConfig:
    """Declarative configuration holder for Monkey Search settings."""

    def __init__(self) -> None:
        self._cfg: Dict[str, Any] = {}

    @classmethod
    def default(cls) -> MSAConfigData:
        """Settings of the classic reference run: 20 monkeys, 100 iterations."""
        return cls().pop_size(20).max_iterations(100).fixed()

    def pop_size(self, value: int) -> "MSAConfig":
        self._cfg["pop_size"] = value
        return self

    def max_iterations(self, value: int) -> "MSAConfig":
        self._cfg["max_iterations"] = value
        return self

    def climbing_step(self, value: float) -> "MSAConfig":
        self._cfg["climbing_step"] = value
        return self

    def somersault_range(self, value: float) -> "MSAConfig":
        self._cfg["somersault_range"] = value
        return self

    def watch_policy(self, value: str) -> "MSAConfig":
        self._cfg["watch_policy"] = value
        return self

    def climb_workers(self, value: int) -> "MSAConfig":
        self._cfg["climb_workers"] = value
        return self

    def fixed(self) -> MSAConfigData:
        _require_fields(self._cfg, ("pop_size", "max_iterations"), "MSA")
        return MSAConfigData(
            pop_size=self._cfg["pop_size"],
            max_iterations=self._cfg["max_iterations"],
            climbing_step=self._cfg.get("climbing_step", DEFAULT_CLIMBING_STEP),
            somersault_range=self._cfg.get("somersault_range", DEFAULT_SOMERSAULT_RANGE),
            watch_policy=self._cfg.get("watch_policy", "live"),
            climb_workers=self._cfg.get("climb_workers", 1),
        )


__all__ = ["MSAConfig", "MSAConfigData", "WATCH_POLICIES", "DEFAULT_CLIMBING_STEP", "DEFAULT_SOMERSAULT_RANGE"]
