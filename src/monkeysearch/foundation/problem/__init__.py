"""
Objective interface, box problems and the built-in benchmark registry.
"""

from .benchmarks import ackley, griewank, rastrigin, rosenbrock, schwefel, sphere
from .registry import ProblemSpec, available_problem_names, get_problem_specs, make_problem
from .types import BoxProblem, ObjectiveFunction

__all__ = [
    "ObjectiveFunction",
    "BoxProblem",
    "ProblemSpec",
    "available_problem_names",
    "get_problem_specs",
    "make_problem",
    "sphere",
    "rastrigin",
    "rosenbrock",
    "ackley",
    "griewank",
    "schwefel",
]
