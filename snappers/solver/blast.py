"""
Blast Simulator - Time-stepped chain reaction triggered by a tap.

Tapping a red critter makes it burst into four projectiles that fly
along the row and column. A projectile stops at the first critter it
hits and removes one hit point from it; if that critter was red, it
bursts as well. The simulation runs tick by tick until no projectile
remains on the board.
"""

import logging
from typing import List, Tuple

from .board import BoardState, COLUMNS, ROWS, CRITICAL_VALUE, in_bounds
from .move import TapResult, BASE_ESTIMATE, STRIKE_ESTIMATE, SOLVED_ESTIMATE
from .shrapnel import Shrapnel, spawn

logger = logging.getLogger(__name__)

# A projectile crosses the board in at most this many ticks
_LONGEST_FLIGHT = max(COLUMNS, ROWS)


def tap(board: BoardState, x: int, y: int) -> TapResult:
    """
    Tap a cell and run any resulting chain reaction.

    The input board is not modified; the result carries a new board.
    The estimate is the raw blast score (see evaluator.improve_estimate
    for the refined ranking value).

    Args:
        board: Board before the tap
        x: Column of the tapped cell
        y: Row of the tapped cell

    Returns:
        TapResult with resulting board and raw estimate

    Raises:
        ValueError: If the cell is outside the board or empty
    """
    if not in_bounds(x, y):
        raise ValueError(f"Tap ({x},{y}) is outside the board")

    value = board.get_cell(x, y)
    if value == 0:
        raise ValueError(f"Cannot tap empty cell ({x},{y})")

    rows = board.to_rows()
    rows[y][x] -= 1

    if value != CRITICAL_VALUE:
        return TapResult(x=x, y=y, board=_freeze(rows), estimate=BASE_ESTIMATE)

    max_ticks = board.count_cells() * _LONGEST_FLIGHT
    strikes, ticks = _run_blast(rows, x, y, max_ticks)
    result_board = _freeze(rows)

    if result_board.is_solved():
        estimate = SOLVED_ESTIMATE
    else:
        estimate = BASE_ESTIMATE + strikes * STRIKE_ESTIMATE

    logger.debug(f"[Blast] Tap ({x},{y}): {strikes} strikes over {ticks} ticks")

    return TapResult(
        x=x, y=y, board=result_board, estimate=estimate,
        strikes=strikes, ticks=ticks
    )


def _run_blast(rows: List[List[int]], x: int, y: int, max_ticks: int) -> Tuple[int, int]:
    """
    Run the chain reaction in place on a working grid.

    Every tick moves all projectiles that were active at the start of the
    tick by one cell. Strikes are applied in order against the live grid,
    so a projectile that reaches a cell emptied earlier in the same tick
    flies on through it. Projectiles spawned during a tick first move on
    the next tick.

    Returns:
        (number of strikes, number of ticks run)
    """
    active: List[Shrapnel] = spawn(x, y, 0)
    strikes = 0
    tick = 0

    while active:
        tick += 1
        if tick > max_ticks:
            raise RuntimeError(f"Blast at ({x},{y}) did not settle within {max_ticks} ticks")

        in_flight: List[Shrapnel] = []
        spawned: List[Shrapnel] = []

        for shrapnel in active:
            shrapnel.advance()

            if not in_bounds(shrapnel.x, shrapnel.y):
                continue

            hit = rows[shrapnel.y][shrapnel.x]
            if hit == 0:
                in_flight.append(shrapnel)
                continue

            if hit == CRITICAL_VALUE:
                spawned.extend(spawn(shrapnel.x, shrapnel.y, tick))

            rows[shrapnel.y][shrapnel.x] = hit - 1
            strikes += 1

        active = in_flight + spawned

    return strikes, tick


def _freeze(rows: List[List[int]]) -> BoardState:
    return BoardState(grid=tuple(tuple(row) for row in rows))
