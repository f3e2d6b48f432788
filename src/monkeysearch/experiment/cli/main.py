from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from monkeysearch.engine.algorithm.config.msa import MSAConfig
from monkeysearch.foundation.core.optimize import OptimizeConfig, optimize
from monkeysearch.foundation.core.result import OptimizationResult
from monkeysearch.foundation.exceptions import MonkeySearchError
from monkeysearch.foundation.logging import configure_monkeysearch_logging
from monkeysearch.foundation.problem.registry import make_problem
from monkeysearch.hooks.progress import ProgressLogger

from .parser import parse_args


def _build_run_config(args: argparse.Namespace) -> OptimizeConfig:
    problem = make_problem(args.problem, args.n_var, lower=args.lower, upper=args.upper)
    algo_cfg = (
        MSAConfig()
        .pop_size(args.pop_size)
        .max_iterations(args.max_iterations)
        .climbing_step(args.climbing_step)
        .somersault_range(args.somersault_range)
        .watch_policy(args.watch_policy)
        .climb_workers(args.climb_workers)
        .fixed()
    )
    observers = [] if args.quiet else [ProgressLogger(interval=args.report_interval)]
    return OptimizeConfig(problem=problem, algorithm_config=algo_cfg, seed=args.seed, observers=observers)


def _write_outputs(args: argparse.Namespace, result: OptimizationResult) -> None:
    if args.output:
        out_path = Path(args.output).expanduser()
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(json.dumps(result.to_dict(), indent=2, sort_keys=True), encoding="utf-8")
        logging.getLogger(__name__).info("Result written to %s", out_path)
    if args.plot:
        from monkeysearch.ux.visualization import save_convergence_plot

        save_convergence_plot(result.history, args.plot, title=f"MSA on {result.meta.get('problem')}")


def main(argv: Sequence[str] | None = None) -> int:
    try:
        args = parse_args(argv)
    except (MonkeySearchError, FileNotFoundError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    if args.verbose:
        configure_monkeysearch_logging(level=logging.DEBUG)
    elif not args.quiet:
        configure_monkeysearch_logging()

    try:
        run_cfg = _build_run_config(args)
        result = optimize(run_cfg)
        _write_outputs(args, result)
    except MonkeySearchError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    print()
    print(result.summary_text())
    return 0


def run() -> None:
    raise SystemExit(main())


if __name__ == "__main__":
    run()
