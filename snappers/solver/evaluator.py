"""
Move Evaluator - Refines raw tap scores into a ranking heuristic.

Boards are preferred when the remaining critters are weak (low values)
and when they can still reach each other through row/column blasts.
"""

from .board import BoardState, COLUMNS, ROWS
from .move import TapResult


def remaining_work(board: BoardState) -> int:
    """
    Sum of (5 - value) * 100 over all non-empty cells.

    Weaker critters contribute more, so boards full of red critters
    score higher than boards with a few strong ones.
    """
    return sum((5 - value) * 100 for _, _, value in board.occupied())


def can_hit_other(board: BoardState, x: int, y: int) -> bool:
    """True if another critter shares the row or column of (x, y)."""
    for other_y in range(ROWS):
        if other_y != y and board.get_cell(x, other_y):
            return True
    for other_x in range(COLUMNS):
        if other_x != x and board.get_cell(other_x, y):
            return True
    return False


def count_blast_graphs(board: BoardState) -> int:
    """
    Estimate how many separate groups of critters remain.

    Starts at 1 and adds one for every critter that shares neither row
    nor column with another critter. This is a cheap approximation, not
    a connected-components count: chains that link through several rows
    and columns still count as a single group.
    """
    graphs = 1
    for x, y, _ in board.occupied():
        if not can_hit_other(board, x, y):
            graphs += 1
    return graphs


def improve_estimate(result: TapResult) -> TapResult:
    """
    Add the board-shape heuristic to a tap's raw estimate.

    Solving taps are already at the maximum and are returned unchanged.
    """
    if result.solves_board:
        return result

    bonus = remaining_work(result.board) // count_blast_graphs(result.board)
    return result.with_estimate(result.estimate + bonus)
