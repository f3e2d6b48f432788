"""Algorithm configuration builders."""

from .msa import (
    DEFAULT_CLIMBING_STEP,
    DEFAULT_SOMERSAULT_RANGE,
    WATCH_POLICIES,
    MSAConfig,
    MSAConfigData,
)

__all__ = [
    "MSAConfig",
    "MSAConfigData",
    "WATCH_POLICIES",
    "DEFAULT_CLIMBING_STEP",
    "DEFAULT_SOMERSAULT_RANGE",
]
