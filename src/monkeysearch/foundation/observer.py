from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable


@dataclass
class RunContext:
    """
    Encapsulates the static context of an optimization run.
    Passed to on_start events.
    """

    problem: Any  # BoxProblem instance
    algorithm: Any  # Engine instance
    config: Any  # MSAConfigData
    seed: int | None = None
    algorithm_name: str = "msa"


@runtime_checkable
class Observer(Protocol):
    """
    Observer interface for run lifecycle events.
    """

    def on_start(self, ctx: RunContext) -> None:
        """Called once, after the initial population has been evaluated."""
        ...

    def on_iteration(
        self,
        iteration: int,
        best_fitness: float,
        stats: dict[str, Any] | None = None,
    ) -> None:
        """Called after every completed iteration (1-based)."""
        ...

    def on_end(self, result: Any) -> None:
        """Called once at the end of the run with the final result."""
        ...


class NoOpObserver:
    """Default no-op implementation."""

    def on_start(self, ctx: RunContext) -> None:
        return None

    def on_iteration(
        self,
        iteration: int,
        best_fitness: float,
        stats: dict[str, Any] | None = None,
    ) -> None:
        return None

    def on_end(self, result: Any) -> None:
        return None


class CompositeObserver:
    """Fan out lifecycle events to several observers in order."""

    def __init__(self, observers: list[Observer] | None = None) -> None:
        self.observers: list[Observer] = list(observers or [])

    def on_start(self, ctx: RunContext) -> None:
        for obs in self.observers:
            obs.on_start(ctx)

    def on_iteration(
        self,
        iteration: int,
        best_fitness: float,
        stats: dict[str, Any] | None = None,
    ) -> None:
        for obs in self.observers:
            obs.on_iteration(iteration, best_fitness, stats)

    def on_end(self, result: Any) -> None:
        for obs in self.observers:
            obs.on_end(result)


__all__ = ["RunContext", "Observer", "NoOpObserver", "CompositeObserver"]
