"""Base utilities for algorithm configuration."""

from __future__ import annotations

import json
import math
from dataclasses import asdict
from numbers import Integral
from typing import Any, Dict, Tuple

from monkeysearch.foundation.exceptions import InvalidParameterError, MissingConfigError


class _SerializableConfig:
    """Mixin to serialize dataclass configs."""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), sort_keys=True)


def _require_fields(cfg: Dict[str, Any], fields: Tuple[str, ...], name: str) -> None:
    """Validate that required fields are present in configuration."""
    for field in fields:
        if field not in cfg:
            raise MissingConfigError(field, config_class=f"{name}Config")


def _require_positive_int(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, Integral) or value <= 0:
        raise InvalidParameterError(name, value, "a positive integer")
    return int(value)


def _require_positive_float(name: str, value: Any) -> float:
    try:
        fval = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidParameterError(name, value, "a positive, finite number") from exc
    if not (math.isfinite(fval) and fval > 0.0):
        raise InvalidParameterError(name, value, "a positive, finite number")
    return fval
