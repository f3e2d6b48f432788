"""
Classic single-objective benchmark functions.

Every function takes a 1-D array and returns a float. The global minimum
value is 0.0 (schwefel reaches it only up to ~1e-5 per dimension).
"""

from __future__ import annotations

import numpy as np


def sphere(x: np.ndarray) -> float:
    """f(x) = sum(x_i^2); minimum at the origin."""
    x = np.asarray(x, dtype=float)
    return float(np.sum(x * x))


def rastrigin(x: np.ndarray) -> float:
    """Highly multi-modal; minimum at the origin."""
    x = np.asarray(x, dtype=float)
    return float(10.0 * x.size + np.sum(x * x - 10.0 * np.cos(2.0 * np.pi * x)))


def rosenbrock(x: np.ndarray) -> float:
    """Narrow curved valley; minimum at (1, ..., 1)."""
    x = np.asarray(x, dtype=float)
    if x.size < 2:
        return float((1.0 - x[0]) ** 2) if x.size else 0.0
    return float(np.sum(100.0 * (x[1:] - x[:-1] ** 2) ** 2 + (1.0 - x[:-1]) ** 2))


def ackley(x: np.ndarray) -> float:
    """Nearly flat outer region with a deep hole at the origin."""
    x = np.asarray(x, dtype=float)
    n = x.size
    term1 = -20.0 * np.exp(-0.2 * np.sqrt(np.sum(x * x) / n))
    term2 = -np.exp(np.sum(np.cos(2.0 * np.pi * x)) / n)
    # Clamp tiny negative round-off at the optimum.
    return float(max(term1 + term2 + 20.0 + np.e, 0.0))


def griewank(x: np.ndarray) -> float:
    x = np.asarray(x, dtype=float)
    idx = np.arange(1, x.size + 1, dtype=float)
    return float(1.0 + np.sum(x * x) / 4000.0 - np.prod(np.cos(x / np.sqrt(idx))))


def schwefel(x: np.ndarray) -> float:
    """Deceptive; minimum near (420.9687, ..., 420.9687)."""
    x = np.asarray(x, dtype=float)
    return float(418.9828872724338 * x.size - np.sum(x * np.sin(np.sqrt(np.abs(x)))))


__all__ = ["sphere", "rastrigin", "rosenbrock", "ackley", "griewank", "schwefel"]
