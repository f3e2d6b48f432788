"""
Custom objective defined inline and solved with the Monkey Search Algorithm.

Shows the minimal problem interface (a callable taking a 1-D array and returning
a float, plus the box bounds) and the incremental initialize/step interface.

Usage:
    python examples/custom_problem_definition.py
"""
from __future__ import annotations

import numpy as np

from monkeysearch import BoxProblem, MonkeySearch, MSAConfig


def shifted_ellipsoid(x: np.ndarray) -> float:
    """
    Ill-conditioned quadratic with its minimum at x_i = 1.

    f(x) = sum_i (i + 1) * (x_i - 1)^2
    """
    weights = np.arange(1, x.shape[0] + 1, dtype=float)
    return float(np.sum(weights * (x - 1.0) ** 2))


def main() -> None:
    problem = BoxProblem(shifted_ellipsoid, n_var=4, lower=-5.0, upper=5.0, name="shifted_ellipsoid")
    config = MSAConfig().pop_size(30).max_iterations(150).climbing_step(0.05).watch_policy("snapshot").fixed()

    msa = MonkeySearch(config)
    msa.initialize(problem, seed=7)
    while not msa.should_terminate():
        best = msa.step()
        if msa.iteration % 25 == 0:
            print(f"iteration {msa.iteration:4d}  best {best:.6g}")

    result = msa.result()
    print()
    print(result.summary_text())


if __name__ == "__main__":
    main()
