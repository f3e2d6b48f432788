"""
Monkey Search Algorithm module.

This package provides the MSA implementation with modular components:
- `msa.py`: main MonkeySearch class (run / initialize / step loop)
- `operators.py`: climb, watch-jump and somersault moves
- `state.py`: MSAState + result building

References:
    Zhao, R. and Tang, W. (2008). Monkey algorithm for global numerical
    optimization. Journal of Uncertain Systems, 2(3), pp. 165-176.
"""

from .msa import MonkeySearch
from .operators import center_of_gravity, climb, somersault, watch_jump
from .state import MSAState, build_msa_result

__all__ = [
    "MonkeySearch",
    # Operators
    "center_of_gravity",
    "climb",
    "watch_jump",
    "somersault",
    # State
    "MSAState",
    "build_msa_result",
]
