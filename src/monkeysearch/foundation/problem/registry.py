"""
Benchmark registry: specs and factories for the built-in objectives.
"""

from __future__ import annotations

from dataclasses import dataclass

from monkeysearch.foundation.exceptions import InvalidProblemError

from . import benchmarks
from .types import BoxProblem, ObjectiveFunction


@dataclass(frozen=True)
class ProblemSpec:
    """Metadata and objective for a benchmark problem."""

    key: str
    label: str
    objective: ObjectiveFunction
    default_lower: float
    default_upper: float
    default_n_var: int = 5
    description: str = ""

    def build(self, n_var: int | None = None, lower: float | None = None, upper: float | None = None) -> BoxProblem:
        """
        Apply default dimensions and bounds, then validate via BoxProblem.
        """
        return BoxProblem(
            objective=self.objective,
            n_var=self.default_n_var if n_var is None else n_var,
            lower=self.default_lower if lower is None else lower,
            upper=self.default_upper if upper is None else upper,
            name=self.key,
        )


_PROBLEM_SPECS: dict[str, ProblemSpec] = {
    spec.key: spec
    for spec in (
        ProblemSpec("sphere", "Sphere", benchmarks.sphere, -10.0, 10.0, description="Unimodal, separable bowl."),
        ProblemSpec("rastrigin", "Rastrigin", benchmarks.rastrigin, -5.12, 5.12, description="Regular grid of local minima."),
        ProblemSpec("rosenbrock", "Rosenbrock", benchmarks.rosenbrock, -5.0, 10.0, description="Curved valley."),
        ProblemSpec("ackley", "Ackley", benchmarks.ackley, -32.768, 32.768, description="Flat plateau, central hole."),
        ProblemSpec("griewank", "Griewank", benchmarks.griewank, -600.0, 600.0, description="Product term couples variables."),
        ProblemSpec("schwefel", "Schwefel", benchmarks.schwefel, -500.0, 500.0, description="Deceptive, optimum near the box edge."),
    )
}


def get_problem_specs() -> dict[str, ProblemSpec]:
    return dict(_PROBLEM_SPECS)


def available_problem_names() -> tuple[str, ...]:
    return tuple(_PROBLEM_SPECS.keys())


def make_problem(
    name: str,
    n_var: int | None = None,
    *,
    lower: float | None = None,
    upper: float | None = None,
) -> BoxProblem:
    """Build a registered benchmark; unset dimension/bounds use the spec defaults."""
    key = (name or "").strip().lower()
    spec = _PROBLEM_SPECS.get(key)
    if spec is None:
        raise InvalidProblemError(name, list(available_problem_names()))
    return spec.build(n_var, lower, upper)


__all__ = ["ProblemSpec", "get_problem_specs", "available_problem_names", "make_problem"]
