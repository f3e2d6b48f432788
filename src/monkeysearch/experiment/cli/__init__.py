"""
Command-line driver for Monkey Search runs.
"""

from .main import main
from .parser import parse_args

__all__ = ["main", "parse_args"]
