"""
Solution Context Module - Inputs shared by a strategy run.
"""

import time
from dataclasses import dataclass, field
from typing import Callable, Optional, TYPE_CHECKING

from .board import BoardState, Coordinate, in_bounds

if TYPE_CHECKING:
    from .solution import Solution

# Hard ceiling on the tap budget (and so on recursion depth)
MAX_TAPS = 32


@dataclass
class SolutionContext:
    """
    Search inputs and run-time limits passed to strategies.

    Attributes:
        board: Board to solve
        max_taps: Maximum number of taps in a solution
        first_tap: Optional (x, y) the solution must start with
        timeout_sec: Maximum computation time in seconds, None for no limit
        start_time: When computation started
        on_solution: Optional callback invoked with each solution found
    """
    board: BoardState
    max_taps: int
    first_tap: Optional[Coordinate] = None
    timeout_sec: Optional[float] = None
    start_time: float = field(default_factory=time.perf_counter)
    on_solution: Optional[Callable[["Solution"], None]] = None

    def __post_init__(self):
        if self.max_taps < 0:
            raise ValueError(f"Tap budget must not be negative, got {self.max_taps}")
        if self.max_taps > MAX_TAPS:
            raise ValueError(f"Tap budget {self.max_taps} exceeds the limit of {MAX_TAPS}")
        if self.first_tap is not None:
            x, y = self.first_tap
            if not in_bounds(x, y):
                raise ValueError(f"First tap ({x},{y}) is outside the board")
            self.first_tap = (x, y)

    def is_cancelled(self) -> bool:
        """
        Check if the timeout has been exceeded.

        Returns:
            True if strategy should stop execution
        """
        if self.timeout_sec is None:
            return False
        return self.elapsed_time() > self.timeout_sec

    def report_solution(self, solution: "Solution") -> None:
        if self.on_solution:
            self.on_solution(solution)

    def elapsed_time(self) -> float:
        """Seconds elapsed since computation started."""
        return time.perf_counter() - self.start_time

