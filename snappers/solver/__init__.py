"""
Solver Package - Chain-reaction simulator and tap-sequence search for Snappers.

The board is a 5x6 grid of critters with 0-4 hit points. Tapping a cell
removes one hit point; tapping a red (1) critter sets off a blast whose
projectiles damage other critters and can set off further blasts. The
solver looks for a sequence of taps, within a budget, that clears the
whole board.

Public API:
    - BoardState: Immutable 5x6 board
    - Color: Critter values
    - TapResult: Outcome of tapping one cell
    - Solution / SolutionSet: Search results
    - SolutionMetrics: Performance statistics
    - SolutionContext: Search inputs and limits
    - SolverStrategy: Abstract base for strategies
    - tap(): Run one tap through the blast simulator
    - create_strategy(): Factory function
    - get_strategy_names(): List available strategies
    - describe_strategies(): Strategy names and descriptions for help text

Usage:
    from snappers.solver import BoardState, SolutionContext, create_strategy

    board = BoardState.from_cells({(1, 1): 1, (1, 2): 1})
    context = SolutionContext(board=board, max_taps=2)

    solution = create_strategy("first").solve(context)
    for t in solution.taps:
        print(f"Tap ({t.x},{t.y})")
"""

# Core data structures
from .board import BoardState, Color, Coordinate, COLUMNS, ROWS, in_bounds
from .move import TapResult, SOLVED_ESTIMATE
from .solution import Solution, SolutionSet, SolutionMetrics
from .context import SolutionContext, MAX_TAPS

# Simulation
from .blast import tap
from .evaluator import improve_estimate

# Strategy framework
from .base import SolverStrategy
from .factory import (
    create_strategy,
    get_strategy_names,
    describe_strategies,
    register_strategy,
    DEFAULT_STRATEGY,
)

# Import strategies to register them
from . import strategies

__all__ = [
    # Data structures
    "BoardState",
    "Color",
    "Coordinate",
    "COLUMNS",
    "ROWS",
    "in_bounds",
    "TapResult",
    "SOLVED_ESTIMATE",
    "Solution",
    "SolutionSet",
    "SolutionMetrics",
    "SolutionContext",
    "MAX_TAPS",
    # Simulation
    "tap",
    "improve_estimate",
    # Strategy framework
    "SolverStrategy",
    "create_strategy",
    "get_strategy_names",
    "describe_strategies",
    "register_strategy",
    "DEFAULT_STRATEGY",
]
