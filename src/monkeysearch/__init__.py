from .foundation.core.optimize import OptimizeConfig, optimize
from .foundation.core.result import OptimizationResult
from .foundation.logging import configure_monkeysearch_logging
from .foundation.observer import NoOpObserver, Observer, RunContext
from .foundation.problem import (
    BoxProblem,
    ObjectiveFunction,
    ackley,
    available_problem_names,
    griewank,
    make_problem,
    rastrigin,
    rosenbrock,
    schwefel,
    sphere,
)
from .engine.algorithm.components import UNEVALUATED, Agent, Population
from .engine.algorithm.config import MSAConfig, MSAConfigData
from .engine.algorithm.msa import MonkeySearch, center_of_gravity
from .hooks import ProgressLogger
from .foundation.exceptions import (
    ConfigurationError,
    InvalidBoundsError,
    InvalidParameterError,
    MonkeySearchError,
)

__version__ = "0.1.0"

__all__ = [
    "optimize",
    "OptimizeConfig",
    "OptimizationResult",
    "MonkeySearch",
    "MSAConfig",
    "MSAConfigData",
    "Agent",
    "Population",
    "UNEVALUATED",
    "center_of_gravity",
    "BoxProblem",
    "ObjectiveFunction",
    "make_problem",
    "available_problem_names",
    "sphere",
    "rastrigin",
    "rosenbrock",
    "ackley",
    "griewank",
    "schwefel",
    "Observer",
    "NoOpObserver",
    "RunContext",
    "ProgressLogger",
    "configure_monkeysearch_logging",
    "MonkeySearchError",
    "ConfigurationError",
    "InvalidParameterError",
    "InvalidBoundsError",
]
