"""
First Solution Strategy - Best-first backtracking that stops at the first hit.

Tries the highest-ranked tap first and backtracks on failure. The search
stops as soon as any sequence within the tap budget clears the board, so
the result fits the budget but is not necessarily the shortest.
"""

import logging
import time
from typing import Optional, Tuple

from ..base import SolverStrategy
from ..blast import tap
from ..board import BoardState
from ..evaluator import improve_estimate
from ..move import TapResult
from ..context import SolutionContext
from ..solution import Solution
from ..factory import register_strategy

logger = logging.getLogger(__name__)


@register_strategy
class FirstSolutionStrategy(SolverStrategy):
    """
    Depth-first search over ranked taps, returning the first solution found.

    Algorithm:
        1. If the board is clear, succeed with the taps so far
        2. If the budget is used up, fail this branch
        3. Rank all affordable taps (stopping early at a solving tap)
        4. Recurse on each in turn with one tap less; the first success wins

    When context.first_tap is set, that tap is applied unconditionally
    and the search continues from the resulting board.
    """
    name = "first"
    description = "First solution - Best-first backtracking, stops at first hit"

    def __init__(self):
        super().__init__()
        self._cancelled = False

    def solve(self, context: SolutionContext) -> Solution:
        """
        Find one tap sequence that clears the board within the budget.

        Args:
            context: Solution context with board, budget and optional first tap

        Returns:
            Solution; is_solved is False if no sequence fits the budget

        Raises:
            ValueError: If the required first tap is on an empty cell or
                the budget leaves no room for it
        """
        start_time = time.perf_counter()
        self._reset_metrics()
        self._cancelled = False

        board = context.board
        prefix: Tuple[TapResult, ...] = ()
        taps_left = context.max_taps

        if context.first_tap is not None:
            if taps_left < 1:
                raise ValueError("A required first tap needs a budget of at least one tap")
            x, y = context.first_tap
            first = improve_estimate(tap(board, x, y))
            self._states_explored += 1
            prefix = (first,)
            board = first.board
            taps_left -= 1
            logger.debug(f"[First] Starting with required tap ({x},{y})")

        found = self._search(board, prefix, taps_left, context)

        solution = Solution(
            initial_board=context.board,
            taps=found if found is not None else (),
            is_solved=found is not None,
            was_cancelled=self._cancelled,
            metrics=self._build_metrics(start_time)
        )

        if solution.is_solved:
            logger.info(
                f"[First] Board solved in {solution.tap_count} taps, "
                f"{solution.metrics.states_explored} taps simulated"
            )
            for line in solution.describe():
                logger.info(f"[First] {line}")
            context.report_solution(solution)
        elif self._cancelled:
            logger.warning(f"[First] Search timed out after {context.elapsed_time():.1f}s")
        else:
            logger.info(f"[First] Board NOT solved within {context.max_taps} taps")

        return solution

    def _search(
        self,
        board: BoardState,
        taps: Tuple[TapResult, ...],
        taps_left: int,
        context: SolutionContext
    ) -> Optional[Tuple[TapResult, ...]]:
        """Return the solving tap sequence below this node, or None."""
        if board.is_solved():
            return taps

        if taps_left == 0:
            return None

        if self._check_cancelled(context):
            self._cancelled = True
            return None

        candidates = self.find_possible_taps(board, True, taps_left)
        if not candidates:
            self._dead_branches += 1
            return None

        for candidate in candidates:
            found = self._search(candidate.board, taps + (candidate,), taps_left - 1, context)
            if found is not None:
                return found
            if self._cancelled:
                return None

        return None
