"""
A single candidate solution: a position in the search box and its fitness.
"""

from __future__ import annotations

import math
import sys
from typing import Callable

import numpy as np

# Placeholder fitness before the first evaluation; never compared as meaningful.
UNEVALUATED = sys.float_info.max


def is_improvement(candidate: float, current: float) -> bool:
    """Strict improvement test that never accepts NaN.

    A non-NaN candidate always improves on a NaN current value.
    """
    if math.isnan(candidate):
        return False
    if math.isnan(current):
        return True
    return candidate < current


class Agent:
    """
    One monkey of the population.

    ``position`` and ``fitness`` only change together, through ``update`` or
    ``evaluate``, so the stored fitness always belongs to the stored position.
    """

    __slots__ = ("_position", "_fitness", "_evaluated")

    def __init__(self, position: np.ndarray, fitness: float | None = None) -> None:
        self._position = np.array(position, dtype=float, copy=True)
        if self._position.ndim != 1:
            raise ValueError("Agent position must be a 1-D vector.")
        self._fitness = UNEVALUATED if fitness is None else float(fitness)
        self._evaluated = fitness is not None

    @property
    def position(self) -> np.ndarray:
        """Read-only view of the current position."""
        view = self._position.view()
        view.flags.writeable = False
        return view

    @property
    def fitness(self) -> float:
        return self._fitness

    @property
    def evaluated(self) -> bool:
        return self._evaluated

    @property
    def n_var(self) -> int:
        return int(self._position.shape[0])

    def update(self, position: np.ndarray, fitness: float) -> None:
        """Replace position and fitness as one step."""
        new_pos = np.array(position, dtype=float, copy=True)
        if new_pos.shape != self._position.shape:
            raise ValueError(f"Position shape {new_pos.shape} does not match agent shape {self._position.shape}.")
        self._position = new_pos
        self._fitness = float(fitness)
        self._evaluated = True

    def evaluate(self, evaluator: Callable[[np.ndarray], float]) -> float:
        self._fitness = float(evaluator(self._position))
        self._evaluated = True
        return self._fitness

    def clone(self) -> "Agent":
        """Deep copy; later mutation of either agent never affects the other."""
        twin = Agent(self._position)
        twin._fitness = self._fitness
        twin._evaluated = self._evaluated
        return twin

    def __repr__(self) -> str:
        fit = f"{self._fitness:.6g}" if self._evaluated else "unevaluated"
        return f"Agent(position={np.array2string(self._position, precision=4)}, fitness={fit})"


__all__ = ["Agent", "UNEVALUATED", "is_improvement"]
