"""
All Solutions Strategy - Exhaustive enumeration of solving tap sequences.

Explores every affordable tap at every level and records each sequence
that ends on a clear board. A branch stops descending once its board is
clear, so recorded sequences never carry taps after the board is solved.
"""

import logging
import time
from typing import List, Tuple

from ..base import SolverStrategy
from ..board import BoardState
from ..move import TapResult
from ..context import SolutionContext
from ..solution import Solution, SolutionSet
from ..factory import register_strategy

logger = logging.getLogger(__name__)


@register_strategy
class AllSolutionsStrategy(SolverStrategy):
    """
    Depth-first enumeration of every solution within the tap budget.

    When context.first_tap is set, only sequences starting with that tap
    are recorded. The constraint is applied by restricting the candidates
    at the root, so other first taps are never explored.
    """
    name = "all"
    description = "All solutions - Exhaustive search over every tap sequence"

    def __init__(self):
        super().__init__()
        self._cancelled = False

    def solve(self, context: SolutionContext) -> Solution:
        """
        Enumerate every solution and return the shortest one.

        Returns:
            Shortest Solution found, or an unsolved Solution if none
        """
        solutions = self.solve_all(context)
        best = solutions.best
        if best is None:
            return Solution(
                initial_board=context.board,
                was_cancelled=solutions.was_cancelled,
                metrics=solutions.metrics
            )
        best.metrics = solutions.metrics
        return best

    def solve_all(self, context: SolutionContext) -> SolutionSet:
        """
        Find every tap sequence that clears the board within the budget.

        Args:
            context: Solution context with board, budget and optional first tap

        Returns:
            SolutionSet with solutions in discovery order (possibly empty)
        """
        start_time = time.perf_counter()
        self._reset_metrics()
        self._cancelled = False

        found: List[Solution] = []
        self._search(context.board, (), context.max_taps, context, found)

        result = SolutionSet(
            initial_board=context.board,
            solutions=found,
            was_cancelled=self._cancelled,
            metrics=self._build_metrics(start_time)
        )

        logger.info(
            f"[All] {len(result)} solutions within {context.max_taps} taps, "
            f"{result.metrics.states_explored} taps simulated"
        )
        if self._cancelled:
            logger.warning(f"[All] Search timed out after {context.elapsed_time():.1f}s")

        return result

    def _search(
        self,
        board: BoardState,
        taps: Tuple[TapResult, ...],
        taps_left: int,
        context: SolutionContext,
        found: List[Solution]
    ) -> None:
        if board.is_solved():
            # An already clear board has no first tap to match
            if context.first_tap is not None and not taps:
                return
            self._record(Solution(initial_board=context.board, taps=taps, is_solved=True),
                         context, found)
            return

        if taps_left == 0:
            return

        if self._check_cancelled(context):
            self._cancelled = True
            return

        candidates = self.find_possible_taps(board, False, taps_left)
        if not taps and context.first_tap is not None:
            candidates = [c for c in candidates if c.position == context.first_tap]

        if not candidates:
            self._dead_branches += 1
            return

        for candidate in candidates:
            self._search(candidate.board, taps + (candidate,), taps_left - 1, context, found)
            if self._cancelled:
                return

    def _record(self, solution: Solution, context: SolutionContext,
                found: List[Solution]) -> None:
        found.append(solution)
        logger.info(f"[All] The board was solved. Solution {len(found)}:")
        for line in solution.describe():
            logger.info(f"[All] {line}")
        context.report_solution(solution)
