"""
Solution Module - Results of strategy computation.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from .board import BoardState, Coordinate
from .move import TapResult


@dataclass
class SolutionMetrics:
    """
    Performance metrics for solution computation.

    Attributes:
        computation_time_ms: Time taken in milliseconds
        states_explored: Number of taps simulated
        dead_branches: Number of search nodes with no way forward
        strategy_name: Name of strategy that computed this solution
    """
    computation_time_ms: float = 0.0
    states_explored: int = 0
    dead_branches: int = 0
    strategy_name: str = ""


@dataclass
class Solution:
    """
    Result of a strategy computation.

    Attributes:
        initial_board: Board the search started from
        taps: Ordered sequence of taps (each carries the board after it)
        is_solved: True if the taps clear the board
        was_cancelled: True if stopped by the timeout before completion
        metrics: Performance statistics
    """
    initial_board: BoardState
    taps: Tuple[TapResult, ...] = ()
    is_solved: bool = False
    was_cancelled: bool = False
    metrics: SolutionMetrics = field(default_factory=SolutionMetrics)

    @property
    def tap_count(self) -> int:
        """Number of taps in solution."""
        return len(self.taps)

    @property
    def positions(self) -> Tuple[Coordinate, ...]:
        """Tapped (x, y) coordinates in order."""
        return tuple(t.position for t in self.taps)

    @property
    def board_states(self) -> List[BoardState]:
        """Board state after each tap (first is initial)."""
        return [self.initial_board] + [t.board for t in self.taps]

    @property
    def final_board(self) -> BoardState:
        if self.taps:
            return self.taps[-1].board
        return self.initial_board

    def describe(self) -> List[str]:
        """One line per tap, numbered from 000."""
        return [f"{i:03d}: {t}" for i, t in enumerate(self.taps)]


@dataclass
class SolutionSet:
    """
    Every solution found by an exhaustive search.

    Attributes:
        initial_board: Board the search started from
        solutions: Solutions in the order they were found
        was_cancelled: True if stopped by the timeout before completion
        metrics: Performance statistics
    """
    initial_board: BoardState
    solutions: List[Solution] = field(default_factory=list)
    was_cancelled: bool = False
    metrics: SolutionMetrics = field(default_factory=SolutionMetrics)

    def __len__(self) -> int:
        return len(self.solutions)

    def __iter__(self) -> Iterator[Solution]:
        return iter(self.solutions)

    @property
    def best(self) -> Optional[Solution]:
        """Shortest solution (earliest found wins ties), or None."""
        if not self.solutions:
            return None
        return min(self.solutions, key=lambda s: s.tap_count)

    def sequences(self) -> List[Tuple[Coordinate, ...]]:
        """Tap coordinates of every solution, in discovery order."""
        return [s.positions for s in self.solutions]
