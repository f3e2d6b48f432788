"""Monkey Search operators.

This module contains the three search moves and their shared helper:
- Climb: greedy coordinate-wise hill climbing with a fixed step
- Watch-jump: random pull toward a better-placed peer
- Somersault: population-wide scatter around the center of gravity
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Callable

import numpy as np

from monkeysearch.engine.algorithm.components.agent import Agent, is_improvement

Evaluator = Callable[[np.ndarray], float]

__all__ = [
    "center_of_gravity",
    "climb",
    "watch_jump",
    "somersault",
]


def center_of_gravity(positions: np.ndarray) -> np.ndarray:
    """Coordinate-wise arithmetic mean of a (n_agents, n_var) position matrix."""
    positions = np.asarray(positions, dtype=float)
    if positions.ndim != 2 or positions.shape[0] == 0:
        raise ValueError("positions must be a non-empty 2-D array.")
    return positions.mean(axis=0)


def climb(
    agent: Agent,
    evaluator: Evaluator,
    lower: float,
    upper: float,
    step: float,
) -> int:
    """Greedy coordinate-wise climb of one agent.

    Dimensions are visited in order on the running position, so a move
    accepted on dimension ``i`` is already in place when ``i + 1`` is tried.
    Each dimension tries ``+step`` (clamped to ``upper``) first, then
    ``-step`` (clamped to ``lower``); a move is kept only on strict
    improvement, otherwise the coordinate is restored.

    Returns
    -------
    int
        Number of accepted moves.
    """
    x = np.array(agent.position, dtype=float, copy=True)
    current = agent.fitness
    accepted = 0

    for i in range(x.shape[0]):
        original = x[i]

        x[i] = min(original + step, upper)
        trial = evaluator(x)
        if is_improvement(trial, current):
            current = trial
            accepted += 1
            continue

        x[i] = max(original - step, lower)
        trial = evaluator(x)
        if is_improvement(trial, current):
            current = trial
            accepted += 1
            continue

        x[i] = original

    if accepted:
        agent.update(x, current)
    return accepted


def watch_jump(
    agent: Agent,
    peer_position: np.ndarray,
    peer_fitness: float,
    evaluator: Evaluator,
    rng: np.random.Generator,
    lower: float,
    upper: float,
) -> bool:
    """Jump a random fraction of the way toward a better peer.

    Nothing is drawn or evaluated unless the peer is strictly better. The
    proposal replaces the agent only if it strictly improves the agent's
    fitness.

    Returns
    -------
    bool
        True when the agent moved.
    """
    if not is_improvement(peer_fitness, agent.fitness):
        return False

    x = agent.position
    factors = rng.random(x.shape[0])
    proposal = np.clip(x + factors * (np.asarray(peer_position, dtype=float) - x), lower, upper)
    trial = evaluator(proposal)
    if is_improvement(trial, agent.fitness):
        agent.update(proposal, trial)
        return True
    return False


def somersault(
    agents: Iterable[Agent],
    evaluator: Evaluator,
    rng: np.random.Generator,
    lower: float,
    upper: float,
    somersault_range: float,
) -> np.ndarray:
    """Scatter every agent around the population's center of gravity.

    The center is computed once, before any agent moves. Each coordinate uses
    its own factor drawn uniformly from ``[-somersault_range, somersault_range]``.
    The new position is accepted unconditionally.

    Returns
    -------
    np.ndarray
        The center of gravity used for this somersault.
    """
    agents = list(agents)
    center = center_of_gravity(np.stack([agent.position for agent in agents]))
    for agent in agents:
        x = agent.position
        factors = somersault_range * (rng.random(x.shape[0]) * 2.0 - 1.0)
        proposal = np.clip(center + factors * (x - center), lower, upper)
        agent.update(proposal, evaluator(proposal))
    return center
