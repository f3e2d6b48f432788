"""
Config loading utilities shared by CLI and programmatic entrypoints.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from monkeysearch.foundation.exceptions import ConfigurationError, DependencyError


def load_run_spec(path: str | Path) -> Dict[str, Any]:
    """
    Load a YAML or JSON run specification.

    Keys use the CLI option names with underscores (``pop_size``,
    ``max_iterations``, ``lower`` ...). A nested ``msa`` mapping is merged
    over the top level.
    """
    spec_path = Path(path).expanduser().resolve()
    if not spec_path.exists():
        raise FileNotFoundError(f"Config file '{spec_path}' does not exist.")
    suffix = spec_path.suffix.lower()
    if suffix in {".yaml", ".yml"}:
        try:
            import yaml  # type: ignore
        except ImportError as exc:  # pragma: no cover - optional dependency
            raise DependencyError("pyyaml", "YAML config files", "pip install monkeysearch[yaml]") from exc
        with spec_path.open("r", encoding="utf-8") as fh:
            try:
                data = yaml.safe_load(fh) or {}
            except yaml.YAMLError as exc:
                raise ConfigurationError(f"Config file '{spec_path}' is not valid YAML: {exc}") from exc
    else:
        with spec_path.open("r", encoding="utf-8") as fh:
            try:
                data = json.load(fh)
            except json.JSONDecodeError as exc:
                raise ConfigurationError(f"Config file '{spec_path}' is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file '{spec_path}' must contain a mapping at the top level.")
    nested = data.pop("msa", None) or {}
    if not isinstance(nested, dict):
        raise ConfigurationError(f"'msa' section in '{spec_path}' must be a mapping.")
    merged = {str(k).replace("-", "_"): v for k, v in data.items()}
    merged.update({str(k).replace("-", "_"): v for k, v in nested.items()})
    return merged


__all__ = ["load_run_spec"]
