from __future__ import annotations

import math
from collections.abc import Iterator
from typing import Callable

import numpy as np

from monkeysearch.foundation.exceptions import InvalidParameterError
from monkeysearch.foundation.problem.types import BoxProblem

from .agent import Agent, is_improvement


def _sort_key(agent: Agent) -> tuple[bool, float]:
    fit = agent.fitness
    return (math.isnan(fit), fit)


class Population:
    """Fixed-size, ordered collection of agents."""

    def __init__(self, agents: list[Agent]) -> None:
        if not agents:
            raise InvalidParameterError("pop_size", 0, "a positive integer")
        self._agents = list(agents)

    @classmethod
    def initialize(
        cls,
        pop_size: int,
        problem: BoxProblem,
        evaluator: Callable[[np.ndarray], float],
        rng: np.random.Generator,
    ) -> "Population":
        """Uniform random positions in the box, each evaluated on creation."""
        if pop_size <= 0:
            raise InvalidParameterError("pop_size", pop_size, "a positive integer")
        agents = []
        for _ in range(pop_size):
            agent = Agent(rng.uniform(problem.lower, problem.upper, size=problem.n_var))
            agent.evaluate(evaluator)
            agents.append(agent)
        pop = cls(agents)
        pop.sort()
        return pop

    def __len__(self) -> int:
        return len(self._agents)

    def __iter__(self) -> Iterator[Agent]:
        return iter(self._agents)

    def __getitem__(self, index: int) -> Agent:
        return self._agents[index]

    @property
    def agents(self) -> tuple[Agent, ...]:
        return tuple(self._agents)

    def sort(self) -> None:
        """Stable ascending sort by fitness; NaN goes last."""
        self._agents.sort(key=_sort_key)

    def best(self) -> Agent:
        """Lowest-fitness agent currently in the population (no sort required)."""
        best = self._agents[0]
        for agent in self._agents[1:]:
            if is_improvement(agent.fitness, best.fitness):
                best = agent
        return best

    def positions(self) -> np.ndarray:
        """Copy of all positions, shape (pop_size, n_var)."""
        return np.stack([agent.position for agent in self._agents]).astype(float, copy=True)

    def fitness(self) -> np.ndarray:
        return np.array([agent.fitness for agent in self._agents], dtype=float)


__all__ = ["Population"]
