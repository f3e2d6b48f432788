from .progress import ProgressLogger

__all__ = ["ProgressLogger"]
