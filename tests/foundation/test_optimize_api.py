from __future__ import annotations

import json

import numpy as np
import pytest

import monkeysearch
from monkeysearch import MSAConfig, OptimizeConfig, make_problem, optimize


def test_optimize_with_builder_and_fixed_config():
    problem = make_problem("sphere", 4)
    builder = MSAConfig().pop_size(10).max_iterations(15)
    a = optimize(OptimizeConfig(problem=problem, algorithm_config=builder, seed=5))
    b = optimize(OptimizeConfig(problem=problem, algorithm_config=builder.fixed(), seed=5))
    assert np.array_equal(a.X, b.X)
    assert a.n_iter == 15


def test_optimize_with_mapping_config():
    problem = make_problem("schwefel", 2)
    result = optimize(OptimizeConfig(problem=problem, algorithm_config={"pop_size": 5, "max_iterations": 4}, seed=0))
    assert result.history.shape == (4,)
    assert np.all((result.X >= -500.0) & (result.X <= 500.0))


def test_optimize_rejects_other_inputs():
    with pytest.raises(TypeError):
        optimize({"problem": "sphere"})  # type: ignore[arg-type]


def test_custom_objective():
    problem = monkeysearch.BoxProblem(lambda x: float(np.sum(np.abs(x - 1.0))), 3, -4.0, 4.0, name="l1")
    result = optimize(OptimizeConfig(problem=problem, algorithm_config=MSAConfig.default(), seed=2))
    assert result.meta["problem"] == "l1"
    assert result.F < result.initial_fitness


def test_result_serialization_and_summary():
    result = optimize(
        OptimizeConfig(problem=make_problem("sphere", 2), algorithm_config=MSAConfig.default(), seed=1)
    )
    payload = json.loads(json.dumps(result.to_dict()))
    assert payload["F"] == result.F
    assert payload["n_eval"] == result.n_eval
    text = result.summary_text()
    assert text.splitlines()[0] == "Final Solution:"
    assert text.splitlines()[2] == f"Fitness: {result.F!r}"


def test_public_namespace():
    for name in ("optimize", "MonkeySearch", "Agent", "Population", "UNEVALUATED", "ProgressLogger"):
        assert hasattr(monkeysearch, name)
    assert monkeysearch.__version__
