"""
Presentation helpers (plots) for optimization results.
"""

from .visualization import plot_convergence, save_convergence_plot

__all__ = ["plot_convergence", "save_convergence_plot"]
