"""
Move Module - Outcome of tapping a single cell.
"""

import sys
from dataclasses import dataclass, replace

from .board import BoardState, Coordinate

# Estimate of a tap that leaves the board empty. Compares above any
# score that strikes and the heuristic can accumulate.
SOLVED_ESTIMATE = sys.maxsize

# Base estimate of every valid tap, and the score of each projectile strike
BASE_ESTIMATE = 1000
STRIKE_ESTIMATE = 1000


@dataclass(frozen=True)
class TapResult:
    """
    Result of tapping one cell.

    Attributes:
        x: Column of the tapped cell
        y: Row of the tapped cell
        board: Board after the tap and any chain reaction
        estimate: Desirability used to rank candidate taps (higher is better)
        strikes: Number of cells hit by projectiles
        ticks: Simulation ticks the chain reaction ran for
    """
    x: int
    y: int
    board: BoardState
    estimate: int
    strikes: int = 0
    ticks: int = 0

    @property
    def position(self) -> Coordinate:
        return (self.x, self.y)

    @property
    def solves_board(self) -> bool:
        """True if this tap leaves the board empty."""
        return self.estimate == SOLVED_ESTIMATE

    @property
    def blasted(self) -> bool:
        """True if the tap set off a chain reaction."""
        return self.ticks > 0

    def with_estimate(self, estimate: int) -> 'TapResult':
        return replace(self, estimate=estimate)

    def __str__(self) -> str:
        return f"X = {self.x} Y = {self.y}"
