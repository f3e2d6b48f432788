"""
CLI argument parsing and validation helpers.
"""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from typing import Any

from monkeysearch.engine.algorithm.config.msa import (
    DEFAULT_CLIMBING_STEP,
    DEFAULT_SOMERSAULT_RANGE,
    WATCH_POLICIES,
)
from monkeysearch.engine.config.loader import load_run_spec
from monkeysearch.foundation.exceptions import InvalidParameterError
from monkeysearch.foundation.problem.registry import available_problem_names

DEFAULT_PROBLEM = "sphere"
DEFAULT_POP_SIZE = 20
DEFAULT_MAX_ITERATIONS = 100
DEFAULT_REPORT_INTERVAL = 10


def build_pre_parser() -> argparse.ArgumentParser:
    pre_parser = argparse.ArgumentParser(add_help=False)
    pre_parser.add_argument(
        "--config",
        help="Path to a YAML/JSON run specification. CLI arguments override file values.",
    )
    return pre_parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    pre_parser = build_pre_parser()
    pre_args, _ = pre_parser.parse_known_args(argv)

    spec: dict[str, Any] = {}
    if pre_args.config:
        spec = load_run_spec(pre_args.config)

    def _spec_default(key: str, fallback):
        return spec.get(key, fallback)

    def _spec_flag(key: str) -> bool:
        value = spec.get(key, False)
        if not isinstance(value, bool):
            raise InvalidParameterError(key, value, "true or false")
        return value

    parser = argparse.ArgumentParser(
        prog="monkeysearch",
        description="Minimize a benchmark function with the Monkey Search Algorithm.",
        parents=[pre_parser],
    )
    parser.add_argument(
        "--problem",
        choices=available_problem_names(),
        default=_spec_default("problem", DEFAULT_PROBLEM),
        help="Benchmark function to minimize (default: %(default)s).",
    )
    parser.add_argument(
        "--n-var",
        type=int,
        default=_spec_default("n_var", None),
        help="Dimension of the search space (default: the problem's registered dimension, 5).",
    )
    parser.add_argument(
        "--pop-size",
        type=int,
        default=_spec_default("pop_size", DEFAULT_POP_SIZE),
        help="Number of monkeys (default: %(default)s).",
    )
    parser.add_argument(
        "--lower",
        type=float,
        default=_spec_default("lower", None),
        help="Lower bound applied to every coordinate (default: the problem's registered box).",
    )
    parser.add_argument(
        "--upper",
        type=float,
        default=_spec_default("upper", None),
        help="Upper bound applied to every coordinate (default: the problem's registered box).",
    )
    parser.add_argument(
        "--max-iterations",
        type=int,
        default=_spec_default("max_iterations", DEFAULT_MAX_ITERATIONS),
        help="Number of iterations to run (default: %(default)s).",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=_spec_default("seed", None),
        help="Random seed; omit for a non-reproducible run.",
    )
    parser.add_argument(
        "--climbing-step",
        type=float,
        default=_spec_default("climbing_step", DEFAULT_CLIMBING_STEP),
        help="Step length of the climb process (default: %(default)s).",
    )
    parser.add_argument(
        "--somersault-range",
        type=float,
        default=_spec_default("somersault_range", DEFAULT_SOMERSAULT_RANGE),
        help="Half-width of the somersault factor interval (default: %(default)s).",
    )
    parser.add_argument(
        "--watch-policy",
        choices=WATCH_POLICIES,
        default=_spec_default("watch_policy", "live"),
        help="Read watch-jump peers from the live population or a per-phase snapshot.",
    )
    parser.add_argument(
        "--climb-workers",
        type=int,
        default=_spec_default("climb_workers", 1),
        help="Threads used for the climb phase (default: %(default)s).",
    )
    parser.add_argument(
        "--report-interval",
        type=int,
        default=_spec_default("report_interval", DEFAULT_REPORT_INTERVAL),
        help="Log the best fitness every N iterations (default: %(default)s).",
    )
    parser.add_argument(
        "--plot",
        default=_spec_default("plot", None),
        help="Save a convergence plot to this path (requires matplotlib).",
    )
    parser.add_argument(
        "--output",
        default=_spec_default("output", None),
        help="Write the result as JSON to this path.",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        default=_spec_flag("quiet"),
        help="Only print the final solution.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        default=_spec_flag("verbose"),
        help="Enable debug logging.",
    )

    args = parser.parse_args(argv)
    args.config_spec = spec
    return finalize_args(parser, args)


def finalize_args(parser: argparse.ArgumentParser, args: argparse.Namespace) -> argparse.Namespace:
    """Validate options the library does not own."""
    if args.quiet and args.verbose:
        parser.error("--quiet and --verbose cannot be used together.")
    if args.report_interval <= 0:
        parser.error("--report-interval must be a positive integer.")
    return args


__all__ = ["parse_args", "build_pre_parser", "finalize_args"]
