from __future__ import annotations

import logging
from typing import Any

from monkeysearch.foundation.observer import RunContext


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


class ProgressLogger:
    """
    Report the best fitness as ``iteration<TAB>bestFitness`` lines.

    Lines are emitted for iteration 1 and every ``interval`` iterations, after a
    short banner describing the run parameters.
    """

    def __init__(self, interval: int = 10, logger: logging.Logger | None = None) -> None:
        if interval <= 0:
            raise ValueError("interval must be a positive integer.")
        self.interval = int(interval)
        self.logger = logger or _logger()
        self.lines: list[tuple[int, float]] = []

    def on_start(self, ctx: RunContext) -> None:
        problem = ctx.problem
        cfg = ctx.config
        log = self.logger.info
        log("Starting Monkey Search Algorithm")
        log("Parameters:")
        log("\tProblem: %s", problem.name)
        log("\tDimension: %d", problem.n_var)
        log("\tPopulation Size: %d", cfg.pop_size)
        log("\tSearch Space: [%s, %s]", problem.lower, problem.upper)
        log("\tMaximum Iterations: %d", cfg.max_iterations)
        log("Iteration\tBest Fitness")

    def on_iteration(self, iteration: int, best_fitness: float, stats: dict[str, Any] | None = None) -> None:
        if iteration == 1 or iteration % self.interval == 0:
            self.lines.append((iteration, best_fitness))
            self.logger.info("%d\t%s", iteration, best_fitness)

    def on_end(self, result: Any) -> None:
        self.logger.debug("Run finished after %d evaluations.", result.n_eval)


__all__ = ["ProgressLogger"]
