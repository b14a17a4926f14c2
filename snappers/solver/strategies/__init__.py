"""
Strategies Package - Concrete strategy implementations.

Import this module to register all built-in strategies.
"""

from .first_solution import FirstSolutionStrategy
from .all_solutions import AllSolutionsStrategy

__all__ = [
    "FirstSolutionStrategy",
    "AllSolutionsStrategy",
]
