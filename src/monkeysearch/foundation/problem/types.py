from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Protocol

import numpy as np

from monkeysearch.foundation.exceptions import (
    InvalidBoundsError,
    InvalidParameterError,
    ObjectiveError,
)


class ObjectiveFunction(Protocol):
    """Scalar fitness of a single position; lower is better.

    Implementations must be pure: the same position always yields the same
    value, since positions are re-evaluated across operators.
    """

    def __call__(self, x: np.ndarray) -> float: ...


@dataclass(frozen=True)
class BoxProblem:
    """
    Single-objective minimization problem over the box [lower, upper]^n_var.

    The bounds are scalars applied uniformly to every coordinate.
    """

    objective: ObjectiveFunction
    n_var: int
    lower: float
    upper: float
    name: str = "custom"

    def __post_init__(self) -> None:
        if not callable(self.objective):
            raise ObjectiveError(f"Objective must be callable; got {type(self.objective).__name__}.")
        if isinstance(self.n_var, bool) or not isinstance(self.n_var, (int, np.integer)) or self.n_var <= 0:
            raise InvalidParameterError("n_var", self.n_var, "a positive integer")
        try:
            lower = float(self.lower)
            upper = float(self.upper)
        except (TypeError, ValueError) as exc:
            raise InvalidBoundsError(self.lower, self.upper) from exc
        if not (math.isfinite(lower) and math.isfinite(upper)) or lower >= upper:
            raise InvalidBoundsError(self.lower, self.upper)
        object.__setattr__(self, "n_var", int(self.n_var))
        object.__setattr__(self, "lower", lower)
        object.__setattr__(self, "upper", upper)

    def clip(self, x: np.ndarray) -> np.ndarray:
        """Clamp coordinates into the box."""
        return np.clip(x, self.lower, self.upper)

    def contains(self, x: np.ndarray) -> bool:
        x = np.asarray(x, dtype=float)
        return bool(np.all((x >= self.lower) & (x <= self.upper)))


__all__ = ["ObjectiveFunction", "BoxProblem"]
