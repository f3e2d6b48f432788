"""Monkey Search run state and result building."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from monkeysearch.engine.algorithm.components.agent import Agent, is_improvement
from monkeysearch.engine.algorithm.components.population import Population
from monkeysearch.engine.algorithm.config.msa import MSAConfigData
from monkeysearch.foundation.core.result import OptimizationResult
from monkeysearch.foundation.eval.evaluator import FitnessEvaluator
from monkeysearch.foundation.problem.types import BoxProblem


@dataclass
class MSAState:
    """Everything that changes during a run."""

    problem: BoxProblem
    config: MSAConfigData
    population: Population
    best: Agent
    rng: np.random.Generator
    evaluator: FitnessEvaluator
    seed: int | None = None
    iteration: int = 0
    history: list[float] = field(default_factory=list)
    initial_best_fitness: float = float("nan")

    @property
    def n_eval(self) -> int:
        return self.evaluator.n_eval

    def update_best(self) -> bool:
        """Re-sort and keep a clone of the population minimum if strictly better.

        Returns True when the stored best changed.
        """
        self.population.sort()
        candidate = self.population.best()
        if is_improvement(candidate.fitness, self.best.fitness):
            self.best = candidate.clone()
            return True
        return False


def build_msa_result(st: MSAState) -> OptimizationResult:
    return OptimizationResult(
        X=np.array(st.best.position, dtype=float, copy=True),
        F=float(st.best.fitness),
        history=np.asarray(st.history, dtype=float),
        n_eval=st.n_eval,
        n_iter=st.iteration,
        meta={
            "algorithm": "msa",
            "problem": st.problem.name,
            "n_var": st.problem.n_var,
            "bounds": [st.problem.lower, st.problem.upper],
            "seed": st.seed,
            "config": st.config.to_dict(),
            "initial_best_fitness": st.initial_best_fitness,
        },
    )


__all__ = ["MSAState", "build_msa_result"]
