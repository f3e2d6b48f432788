from __future__ import annotations

from typing import Any

import numpy as np

from monkeysearch.foundation.exceptions import DependencyError


def _require_matplotlib() -> Any:
    try:
        import matplotlib.pyplot as plt

        return plt
    except ImportError as exc:
        raise DependencyError("matplotlib", "convergence plots", "pip install monkeysearch[plot]") from exc


def _get_ax(ax: Any | None) -> Any:
    plt = _require_matplotlib()
    if ax is not None:
        return ax
    fig = plt.figure()
    return fig.add_subplot(111)


def plot_convergence(
    history: np.ndarray,
    ax: Any | None = None,
    label: str | None = None,
    title: str | None = "Best fitness per iteration",
    log_scale: bool = True,
    show: bool = False,
) -> Any:
    """Plot best-so-far fitness against iteration number (1-based)."""
    plt = _require_matplotlib()
    history = np.asarray(history, dtype=float)
    if history.ndim != 1 or history.size == 0:
        raise ValueError("history must be a non-empty 1-D array.")
    ax = _get_ax(ax)
    iterations = np.arange(1, history.size + 1)
    ax.plot(iterations, history, label=label)
    ax.set_xlabel("Iteration")
    ax.set_ylabel("Best fitness")
    if log_scale and np.all(history[np.isfinite(history)] > 0.0):
        ax.set_yscale("log")
    if title:
        ax.set_title(title)
    if label:
        ax.legend()
    if show:
        plt.show()
    return ax


def save_convergence_plot(history: np.ndarray, path: str, **kwargs: Any) -> None:
    plt = _require_matplotlib()
    ax = plot_convergence(history, **kwargs)
    fig = ax.figure
    fig.savefig(path, bbox_inches="tight")
    plt.close(fig)


__all__ = ["plot_convergence", "save_convergence_plot"]
