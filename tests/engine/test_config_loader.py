from __future__ import annotations

import json

import pytest

from monkeysearch.engine.config.loader import load_run_spec
from monkeysearch.foundation.exceptions import ConfigurationError


def test_loads_json_and_normalizes_keys(tmp_path):
    path = tmp_path / "run.json"
    path.write_text(json.dumps({"problem": "ackley", "n-var": 3, "max_iterations": 7}), encoding="utf-8")
    spec = load_run_spec(path)
    assert spec == {"problem": "ackley", "n_var": 3, "max_iterations": 7}


def test_nested_msa_section_overrides_top_level(tmp_path):
    path = tmp_path / "run.json"
    path.write_text(
        json.dumps({"pop_size": 10, "msa": {"pop-size": 30, "climbing_step": 0.1}}),
        encoding="utf-8",
    )
    spec = load_run_spec(path)
    assert spec["pop_size"] == 30
    assert spec["climbing_step"] == 0.1
    assert "msa" not in spec


def test_top_level_must_be_mapping(tmp_path):
    path = tmp_path / "run.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_run_spec(path)


def test_msa_section_must_be_mapping(tmp_path):
    path = tmp_path / "run.json"
    path.write_text(json.dumps({"msa": [1]}), encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_run_spec(path)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_run_spec(tmp_path / "nope.yaml")


def test_loads_yaml(tmp_path):
    pytest.importorskip("yaml")
    path = tmp_path / "run.yml"
    path.write_text("problem: rastrigin\nmsa:\n  pop_size: 12\n  watch_policy: snapshot\n", encoding="utf-8")
    spec = load_run_spec(path)
    assert spec == {"problem": "rastrigin", "pop_size": 12, "watch_policy": "snapshot"}


def test_empty_yaml_is_an_empty_spec(tmp_path):
    pytest.importorskip("yaml")
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_run_spec(path) == {}


def test_malformed_json_is_a_configuration_error(tmp_path):
    path = tmp_path / "run.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigurationError) as excinfo:
        load_run_spec(path)
    assert "not valid JSON" in str(excinfo.value)


def test_malformed_yaml_is_a_configuration_error(tmp_path):
    pytest.importorskip("yaml")
    path = tmp_path / "run.yaml"
    path.write_text("problem: sphere: rastrigin\n", encoding="utf-8")
    with pytest.raises(ConfigurationError) as excinfo:
        load_run_spec(path)
    assert "not valid YAML" in str(excinfo.value)
