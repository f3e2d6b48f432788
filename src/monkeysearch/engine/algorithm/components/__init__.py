"""
Shared building blocks for the search engine: agents and populations.
"""

from .agent import UNEVALUATED, Agent, is_improvement
from .population import Population

__all__ = ["Agent", "Population", "UNEVALUATED", "is_improvement"]
