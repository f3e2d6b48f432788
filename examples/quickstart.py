"""
Minimal monkeysearch quickstart example.

Runs the Monkey Search Algorithm on the 5-dimensional sphere function and
plots the best fitness per iteration.

Usage:
    python examples/quickstart.py

Requirements:
    pip install -e .  # Core only
    pip install -e ".[plot]"  # With matplotlib for plotting
"""
from __future__ import annotations

from monkeysearch import MSAConfig, OptimizeConfig, ProgressLogger, configure_monkeysearch_logging, make_problem, optimize


def main():
    configure_monkeysearch_logging()

    # 1. Define the problem
    problem = make_problem("sphere", n_var=5, lower=-10.0, upper=10.0)

    # 2. Configure the algorithm
    config = MSAConfig().pop_size(20).max_iterations(100).climbing_step(0.2).fixed()

    # 3. Run optimization
    result = optimize(
        OptimizeConfig(
            problem=problem,
            algorithm_config=config,
            seed=42,
            observers=[ProgressLogger(interval=10)],
        )
    )

    # 4. Analyze results
    print()
    print(result.summary_text())
    print(f"Initial best fitness: {result.initial_fitness:.6g}")
    print(f"Objective evaluations: {result.n_eval}")

    # 5. Optional: Visualize
    try:
        import matplotlib.pyplot as plt

        from monkeysearch.ux import plot_convergence

        plot_convergence(result.history, label="MSA")
        plt.tight_layout()
        plt.show()
    except ImportError:
        print("\nInstall matplotlib for visualization: pip install matplotlib")


if __name__ == "__main__":
    main()
