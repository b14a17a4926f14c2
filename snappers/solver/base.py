"""
Base Strategy Module - Abstract base class for solving strategies.
"""

import time
from abc import ABC, abstractmethod
from typing import List

from .board import BoardState
from .blast import tap
from .evaluator import improve_estimate
from .move import TapResult
from .context import SolutionContext
from .solution import Solution, SolutionMetrics


class SolverStrategy(ABC):
    """
    Abstract base class for all solving strategies.

    Subclasses must implement the solve() method and define
    name and description class attributes.

    Attributes:
        name: Short identifier for the strategy
        description: Human-readable description
    """
    name: str = "base"
    description: str = "Base strategy"

    def __init__(self):
        self._states_explored = 0
        self._dead_branches = 0

    @abstractmethod
    def solve(self, context: SolutionContext) -> Solution:
        """
        Search for a tap sequence that clears context.board.

        Must periodically check context.is_cancelled() and give up
        with was_cancelled set if True.

        Args:
            context: Solution context with board, tap budget and limits

        Returns:
            Solution with taps and metrics
        """
        pass

    def find_possible_taps(
        self,
        board: BoardState,
        stop_at_solution: bool,
        taps_left: int
    ) -> List[TapResult]:
        """
        Simulate every affordable tap on the board and rank the outcomes.

        A cell is a candidate if it holds a critter whose value does not
        exceed the taps left. Cells are scanned column by column.

        Args:
            board: Current board state
            stop_at_solution: Return as soon as a tap solves the board
            taps_left: Remaining tap budget

        Returns:
            Tap outcomes sorted by estimate (best first). In
            stop_at_solution mode a solving tap ends the scan early and
            the unsorted outcomes so far are returned, solving tap last.
        """
        results: List[TapResult] = []

        for x, y, value in board.occupied():
            if value > taps_left:
                continue

            result = improve_estimate(tap(board, x, y))
            results.append(result)
            self._states_explored += 1

            if stop_at_solution and result.solves_board:
                return results

        # sorted() is stable, so ties keep scan order
        return sorted(results, key=lambda r: r.estimate, reverse=True)

    def _check_cancelled(self, context: SolutionContext) -> bool:
        return context.is_cancelled()

    def _reset_metrics(self) -> None:
        self._states_explored = 0
        self._dead_branches = 0

    def _build_metrics(self, start_time: float) -> SolutionMetrics:
        """Collect counters from the current run."""
        return SolutionMetrics(
            computation_time_ms=(time.perf_counter() - start_time) * 1000,
            states_explored=self._states_explored,
            dead_branches=self._dead_branches,
            strategy_name=self.name
        )
