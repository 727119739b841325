# wavebatch/picking/__init__.py
from .waves import Wave, WavePlanner
from .batching import Item, Batch, BatchPacker
from .solution import Solution, SolutionBuilder, plan

__all__ = [
    "Wave",
    "WavePlanner",
    "Item",
    "Batch",
    "BatchPacker",
    "Solution",
    "SolutionBuilder",
    "plan",
]
