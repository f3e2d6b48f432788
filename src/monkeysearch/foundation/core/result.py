from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np


@dataclass
class OptimizationResult:
    """
    Outcome of a single run.

    Attributes:
        X: best position found, shape (n_var,)
        F: fitness of X
        history: best-so-far fitness after each iteration, shape (n_iter,)
        n_eval: number of objective evaluations
        n_iter: completed iterations
        meta: run metadata (problem, seed, config)
    """

    X: np.ndarray
    F: float
    history: np.ndarray
    n_eval: int
    n_iter: int
    meta: dict[str, Any] = field(default_factory=dict)

    @property
    def initial_fitness(self) -> float | None:
        """Best fitness of the initial population, if recorded."""
        value = self.meta.get("initial_best_fitness")
        return None if value is None else float(value)

    def to_dict(self) -> dict[str, Any]:
        return {
            "X": np.asarray(self.X, dtype=float).tolist(),
            "F": float(self.F),
            "history": np.asarray(self.history, dtype=float).tolist(),
            "n_eval": int(self.n_eval),
            "n_iter": int(self.n_iter),
            "meta": dict(self.meta),
        }

    def summary_text(self) -> str:
        position = ", ".join(repr(float(v)) for v in np.asarray(self.X, dtype=float))
        return "\n".join(
            [
                "Final Solution:",
                f"Position: [{position}]",
                f"Fitness: {float(self.F)!r}",
            ]
        )


__all__ = ["OptimizationResult"]
