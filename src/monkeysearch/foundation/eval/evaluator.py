from __future__ import annotations

import logging
import math
import threading

import numpy as np

from monkeysearch.foundation.exceptions import EvaluationError
from monkeysearch.foundation.problem.types import ObjectiveFunction


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


class FitnessEvaluator:
    """
    Calls the objective on single positions and counts evaluations.

    Notes:
        - The objective receives a copy, so it cannot alter agent state.
        - Non-finite values are passed through; callers never treat NaN as an improvement.
        - Counting is lock-protected; the threaded climb phase shares one evaluator.
    """

    def __init__(self, objective: ObjectiveFunction) -> None:
        self.objective = objective
        self.n_eval = 0
        self._lock = threading.Lock()
        self._warned_non_finite = False

    def __call__(self, x: np.ndarray) -> float:
        try:
            raw = self.objective(np.array(x, dtype=float, copy=True))
        except Exception as exc:
            raise EvaluationError(f"Objective raised {type(exc).__name__}: {exc}", solution=np.array(x)) from exc
        try:
            value = float(np.asarray(raw, dtype=float).reshape(()))
        except (TypeError, ValueError) as exc:
            raise EvaluationError(
                f"Objective must return a scalar; got {type(raw).__name__}.", solution=np.array(x)
            ) from exc
        with self._lock:
            self.n_eval += 1
            if not math.isfinite(value) and not self._warned_non_finite:
                self._warned_non_finite = True
                _logger().warning(
                    "Objective returned a non-finite value (%s); NaN proposals are never accepted as improvements.",
                    value,
                )
        return value


__all__ = ["FitnessEvaluator"]
