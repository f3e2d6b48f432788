"""
monkeysearch exception hierarchy.

Provides user-friendly exceptions with helpful error messages and suggestions.
All library exceptions inherit from MonkeySearchError for easy catching.

Example:
    try:
        result = optimize(config)
    except MonkeySearchError as e:
        print(f"Optimization failed: {e}")
        print(f"Suggestion: {e.suggestion}")
"""

from __future__ import annotations

from typing import Any


class MonkeySearchError(Exception):
    """
    Base exception for all monkeysearch errors.

    Attributes:
        message: Human-readable error description
        suggestion: Optional suggestion for fixing the error
        details: Optional dict with additional context
    """

    def __init__(
        self,
        message: str,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the full error message with suggestion."""
        msg = self.message
        if self.suggestion:
            msg += f"\n\nSuggestion: {self.suggestion}"
        return msg


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(MonkeySearchError):
    """Raised when configuration is invalid or incomplete."""

    pass


class InvalidParameterError(ConfigurationError):
    """Raised when a numeric or categorical parameter is out of range."""

    def __init__(self, name: str, value: Any, requirement: str) -> None:
        message = f"Invalid value for '{name}': {value!r}."
        suggestion = f"'{name}' must be {requirement}"
        super().__init__(message, suggestion, {"name": name, "value": value})


class InvalidBoundsError(ConfigurationError):
    """Raised when the search box is empty or not finite."""

    def __init__(self, lower: Any, upper: Any) -> None:
        message = f"Invalid search bounds: lower={lower!r}, upper={upper!r}."
        suggestion = "Use finite bounds with lower < upper"
        super().__init__(message, suggestion, {"lower": lower, "upper": upper})


class MissingConfigError(ConfigurationError):
    """Raised when required configuration is missing."""

    def __init__(self, field: str, config_class: str | None = None) -> None:
        message = f"Missing required configuration: '{field}'."
        suggestion = f"Add '{field}' to your configuration"
        if config_class:
            suggestion += f" or use {config_class}.default() for sensible defaults"
        super().__init__(message, suggestion, {"field": field})


# =============================================================================
# Problem Errors
# =============================================================================


class ProblemError(MonkeySearchError):
    """Base class for problem-related errors."""

    pass


class InvalidProblemError(ProblemError):
    """Raised when an unknown problem is specified."""

    def __init__(self, problem: str, available: list[str] | None = None) -> None:
        message = f"Unknown problem '{problem}'."
        if available:
            suggestion = f"Available problems: {', '.join(available)}"
        else:
            suggestion = "Use available_problem_names() to see registered problems."
        super().__init__(message, suggestion, {"problem": problem})


class ObjectiveError(ProblemError):
    """Raised when the objective is not usable as a fitness function."""

    def __init__(self, message: str) -> None:
        suggestion = "Pass a callable mapping a 1-D array of floats to a scalar"
        super().__init__(message, suggestion)


# =============================================================================
# Runtime Errors
# =============================================================================


class OptimizationError(MonkeySearchError):
    """Raised when optimization fails during execution."""

    pass


class EvaluationError(OptimizationError):
    """Raised when objective evaluation fails."""

    def __init__(self, message: str, solution: Any = None) -> None:
        suggestion = "Check your objective function for errors"
        super().__init__(message, suggestion, {"solution": solution})


class AlgorithmStateError(OptimizationError):
    """Raised when the engine is driven out of order."""

    def __init__(self, message: str, suggestion: str | None = None) -> None:
        suggestion = suggestion or "Call initialize(problem, seed) before step() or result()"
        super().__init__(message, suggestion)


# =============================================================================
# Dependency Errors
# =============================================================================


class DependencyError(MonkeySearchError):
    """Raised when an optional dependency is missing."""

    def __init__(self, package: str, feature: str, install_cmd: str | None = None) -> None:
        message = f"'{package}' is required for {feature} but not installed."
        install_cmd = install_cmd or f"pip install {package}"
        suggestion = f"Install with: {install_cmd}"
        super().__init__(message, suggestion, {"package": package, "feature": feature})


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Base
    "MonkeySearchError",
    # Configuration
    "ConfigurationError",
    "InvalidParameterError",
    "InvalidBoundsError",
    "MissingConfigError",
    # Problem
    "ProblemError",
    "InvalidProblemError",
    "ObjectiveError",
    # Runtime
    "OptimizationError",
    "EvaluationError",
    "AlgorithmStateError",
    # Dependencies
    "DependencyError",
]
