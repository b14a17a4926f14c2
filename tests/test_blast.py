"""
Tests for the blast simulator.

Coordinates are (x, y): x is the column (0-4), y the row (0-5).
"""

import sys
from pathlib import Path

import numpy as np
import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from snappers.solver import BoardState, Color, COLUMNS, ROWS, SOLVED_ESTIMATE, tap
from snappers.solver.shrapnel import Direction, SPAWN_ORDER, Shrapnel, spawn


def random_board(rng: np.random.Generator) -> BoardState:
    """Random board, about half the cells empty."""
    values = rng.choice(5, size=(ROWS, COLUMNS), p=[0.5, 0.2, 0.1, 0.1, 0.1])
    return BoardState.from_rows(values.tolist())


def test_spawn_order_is_down_right_up_left():
    assert SPAWN_ORDER == (Direction.DOWN, Direction.RIGHT, Direction.UP, Direction.LEFT)
    assert [s.direction for s in spawn(2, 3, 4)] == list(SPAWN_ORDER)
    assert all((s.x, s.y, s.time_step) == (2, 3, 4) for s in spawn(2, 3, 4))


def test_shrapnel_advance():
    shrapnel = Shrapnel(x=2, y=2, direction=Direction.DOWN)
    shrapnel.advance()
    assert (shrapnel.x, shrapnel.y, shrapnel.time_step) == (2, 3, 1)

    shrapnel = Shrapnel(x=2, y=2, direction=Direction.LEFT, time_step=3)
    shrapnel.advance()
    assert (shrapnel.x, shrapnel.y, shrapnel.time_step) == (1, 2, 4)


def test_non_critical_tap_only_decrements_cell():
    board = BoardState.from_cells({(2, 3): Color.ORANGE, (2, 0): Color.RED})
    result = tap(board, 2, 3)

    assert result.board == BoardState.from_cells({(2, 3): Color.GREEN, (2, 0): Color.RED})
    assert result.estimate == 1000
    assert result.strikes == 0
    assert result.ticks == 0
    assert not result.blasted


def test_tap_does_not_modify_input_board():
    board = BoardState.from_cells({(1, 1): Color.RED, (1, 2): Color.RED})
    before = board.to_rows()
    tap(board, 1, 1)
    assert board.to_rows() == before


def test_blast_clears_column_neighbour():
    """Red at (1,1) hits the red at (1,2) below it; the board is cleared."""
    board = BoardState.from_cells({(1, 1): Color.RED, (1, 2): Color.RED})
    result = tap(board, 1, 1)

    assert result.board.is_solved()
    assert result.solves_board
    assert result.estimate == SOLVED_ESTIMATE
    assert result.strikes == 1
    # Longest flight: the down projectile of the second blast leaves at tick 5
    assert result.ticks == 5


def test_chain_reaction_along_row():
    """
    (0,0) blasts, its right projectile sets off (2,0) at tick 2, whose
    right projectile hits the green at (4,0) at tick 4.
    """
    board = BoardState.from_cells({(0, 0): Color.RED, (2, 0): Color.RED, (4, 0): Color.GREEN})
    result = tap(board, 0, 0)

    assert result.board == BoardState.from_cells({(4, 0): Color.RED})
    assert result.strikes == 2
    assert result.estimate == 3000
    # The down projectile from (2,0) is the last to leave the board
    assert result.ticks == 8


def test_projectile_passes_cell_emptied_in_same_tick():
    """
    Two projectiles reach the red at (1,1) on the same tick. The first
    destroys it, the second flies on through the now empty cell.
    """
    board = BoardState.from_cells({
        (2, 2): Color.RED,
        (2, 1): Color.RED,
        (1, 2): Color.RED,
        (1, 1): Color.RED,
    })
    result = tap(board, 2, 2)

    assert result.board.is_solved()
    assert result.strikes == 3


def test_second_projectile_in_same_tick_hits_weakened_cell():
    """Same layout with a green at (1,1): both projectiles strike it."""
    board = BoardState.from_cells({
        (2, 2): Color.RED,
        (2, 1): Color.RED,
        (1, 2): Color.RED,
        (1, 1): Color.GREEN,
    })
    result = tap(board, 2, 2)

    assert result.board.is_solved()
    assert result.strikes == 4


def test_blast_without_targets():
    board = BoardState.from_cells({(0, 0): Color.RED, (3, 4): Color.GREEN})
    result = tap(board, 0, 0)

    assert result.board == BoardState.from_cells({(3, 4): Color.GREEN})
    assert result.strikes == 0
    assert result.estimate == 1000
    assert result.blasted


def test_tap_empty_cell_raises():
    with pytest.raises(ValueError):
        tap(BoardState.from_cells({(0, 0): Color.RED}), 1, 1)


def test_tap_outside_board_raises():
    with pytest.raises(ValueError):
        tap(BoardState.from_cells({(0, 0): Color.RED}), 5, 0)


@pytest.mark.parametrize("seed", range(20))
def test_random_boards_conserve_hit_points(seed):
    """Every tap removes exactly 1 + strikes hit points and settles quickly."""
    rng = np.random.default_rng(seed)
    board = random_board(rng)

    for x, y, value in board.occupied():
        result = tap(board, x, y)

        assert board.total_value() - result.board.total_value() == 1 + result.strikes
        assert result.ticks <= board.count_cells() * max(COLUMNS, ROWS)

        if value != Color.RED:
            assert result.ticks == 0
            assert result.board.diff(board) == [(x, y)]
            assert result.board.get_cell(x, y) == value - 1
        else:
            assert result.ticks > 0

        if result.board.is_solved():
            assert result.estimate == SOLVED_ESTIMATE
        else:
            assert result.estimate == 1000 * (1 + result.strikes)
