"""Monkey Search core algorithm implementation.

Each iteration runs the climb process on every monkey, then the watch-jump
process on every monkey, then one population-wide somersault, and finally
refreshes the best solution seen so far.

Reference:
    Zhao, R. and Tang, W. (2008). Monkey algorithm for global numerical
    optimization. Journal of Uncertain Systems, 2(3), pp. 165-176.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Mapping

import numpy as np

from monkeysearch.engine.algorithm.components.agent import Agent
from monkeysearch.engine.algorithm.components.population import Population
from monkeysearch.engine.algorithm.config.msa import MSAConfigData
from monkeysearch.foundation.core.result import OptimizationResult
from monkeysearch.foundation.eval.evaluator import FitnessEvaluator
from monkeysearch.foundation.exceptions import AlgorithmStateError
from monkeysearch.foundation.observer import CompositeObserver, Observer, RunContext
from monkeysearch.foundation.problem.types import BoxProblem

from .operators import climb, somersault, watch_jump
from .state import MSAState, build_msa_result

__all__ = ["MonkeySearch"]


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


class MonkeySearch:
    """Monkey Search Algorithm for box-bounded minimization.

    Parameters
    ----------
    config : MSAConfigData or mapping
        Algorithm configuration (pop_size, max_iterations, climbing_step,
        somersault_range, watch_policy, climb_workers).
    observers : list of Observer, optional
        Receive on_start / on_iteration / on_end events.

    Examples
    --------
    Basic usage:

    >>> from monkeysearch import MSAConfig, MonkeySearch, make_problem
    >>> config = MSAConfig().pop_size(20).max_iterations(100).fixed()
    >>> result = MonkeySearch(config).run(make_problem("sphere", 5), seed=42)

    Incremental interface:

    >>> msa = MonkeySearch(config)
    >>> msa.initialize(make_problem("sphere", 5), seed=42)
    >>> while not msa.should_terminate():
    ...     best = msa.step()
    >>> result = msa.result()
    """

    def __init__(
        self,
        config: MSAConfigData | Mapping[str, Any],
        observers: list[Observer] | None = None,
    ) -> None:
        if isinstance(config, MSAConfigData):
            self.cfg = config
        elif isinstance(config, Mapping):
            self.cfg = MSAConfigData(**dict(config))
        else:
            raise TypeError(f"MonkeySearch expects MSAConfigData or a mapping; got {type(config).__name__}.")
        self._observer = CompositeObserver(observers)
        self._st: MSAState | None = None

    # -------------------------------------------------------------------------
    # Main run method (batch mode)
    # -------------------------------------------------------------------------

    def run(self, problem: BoxProblem, seed: int | None = None) -> OptimizationResult:
        """Run exactly ``max_iterations`` iterations and return the best solution."""
        self.initialize(problem, seed)
        while not self.should_terminate():
            self.step()
        result = self.result()
        self._observer.on_end(result)
        return result

    # -------------------------------------------------------------------------
    # Incremental interface
    # -------------------------------------------------------------------------

    def initialize(self, problem: BoxProblem, seed: int | None = None) -> None:
        """Create and evaluate the initial population; records the first best."""
        if not isinstance(problem, BoxProblem):
            raise TypeError(f"MonkeySearch expects a BoxProblem; got {type(problem).__name__}.")
        if self.cfg.pop_size < problem.n_var:
            _logger().warning(
                "Population size %d is smaller than the dimension %d; the swarm may collapse early.",
                self.cfg.pop_size,
                problem.n_var,
            )
        rng = np.random.default_rng(seed)
        evaluator = FitnessEvaluator(problem.objective)
        population = Population.initialize(self.cfg.pop_size, problem, evaluator, rng)
        best = population.best().clone()
        self._st = MSAState(
            problem=problem,
            config=self.cfg,
            population=population,
            best=best,
            rng=rng,
            evaluator=evaluator,
            seed=seed,
            initial_best_fitness=best.fitness,
        )
        _logger().debug("Initial population ready: best fitness %.6g", best.fitness)
        self._observer.on_start(RunContext(problem=problem, algorithm=self, config=self.cfg, seed=seed))

    def should_terminate(self) -> bool:
        st = self._require_state()
        return st.iteration >= self.cfg.max_iterations

    def step(self) -> float:
        """Run one full iteration and return the best fitness so far."""
        st = self._require_state()
        if st.iteration >= self.cfg.max_iterations:
            raise AlgorithmStateError(
                f"Iteration budget of {self.cfg.max_iterations} is exhausted.",
                suggestion="Check should_terminate() before calling step()",
            )

        self._climb_phase(st)
        self._watch_jump_phase(st)
        self.somersault_process()
        improved = st.update_best()

        st.iteration += 1
        st.history.append(st.best.fitness)
        if improved:
            _logger().debug("Iteration %d: new best fitness %.6g", st.iteration, st.best.fitness)
        self._observer.on_iteration(
            st.iteration,
            st.best.fitness,
            {"n_eval": st.n_eval, "population_best": st.population.best().fitness},
        )
        return st.best.fitness

    def result(self) -> OptimizationResult:
        return build_msa_result(self._require_state())

    # -------------------------------------------------------------------------
    # Operators
    # -------------------------------------------------------------------------

    def climb_process(self, agent: Agent) -> int:
        st = self._require_state()
        return climb(agent, st.evaluator, st.problem.lower, st.problem.upper, self.cfg.climbing_step)

    def watch_jump_process(self, agent: Agent) -> bool:
        """Watch a uniformly random monkey of the live population and jump toward it if better."""
        st = self._require_state()
        peer = st.population[int(st.rng.integers(len(st.population)))]
        return watch_jump(
            agent,
            peer.position,
            peer.fitness,
            st.evaluator,
            st.rng,
            st.problem.lower,
            st.problem.upper,
        )

    def somersault_process(self) -> np.ndarray:
        st = self._require_state()
        return somersault(
            st.population,
            st.evaluator,
            st.rng,
            st.problem.lower,
            st.problem.upper,
            self.cfg.somersault_range,
        )

    # -------------------------------------------------------------------------
    # Read-only state
    # -------------------------------------------------------------------------

    @property
    def population(self) -> Population:
        return self._require_state().population

    @property
    def best(self) -> Agent:
        """Clone of the best agent seen so far."""
        return self._require_state().best.clone()

    @property
    def best_fitness(self) -> float:
        return self._require_state().best.fitness

    @property
    def iteration(self) -> int:
        return self._require_state().iteration

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _require_state(self) -> MSAState:
        if self._st is None:
            raise AlgorithmStateError("MonkeySearch has not been initialized.")
        return self._st

    def _climb_phase(self, st: MSAState) -> None:
        workers = min(self.cfg.climb_workers, len(st.population))
        if workers <= 1:
            for agent in st.population:
                self.climb_process(agent)
            return
        # Climb draws no random numbers and touches only its own agent.
        with ThreadPoolExecutor(max_workers=workers) as ex:
            list(ex.map(self.climb_process, st.population.agents))

    def _watch_jump_phase(self, st: MSAState) -> None:
        if self.cfg.watch_policy == "live":
            for agent in st.population:
                self.watch_jump_process(agent)
            return
        X = st.population.positions()
        F = st.population.fitness()
        for agent in st.population:
            j = int(st.rng.integers(len(st.population)))
            watch_jump(
                agent,
                X[j],
                float(F[j]),
                st.evaluator,
                st.rng,
                st.problem.lower,
                st.problem.upper,
            )
