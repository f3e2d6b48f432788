from __future__ import annotations

from .evaluator import FitnessEvaluator

__all__ = ["FitnessEvaluator"]
