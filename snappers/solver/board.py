"""
Board State Module - Immutable 5x6 board representation for Snappers.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Iterator, List, Sequence, Tuple

# Grid dimensions (x = column, y = row)
COLUMNS = 5
ROWS = 6

Coordinate = Tuple[int, int]


class Color(IntEnum):
    """Critter colors. The value is the number of hits needed to clear the cell."""
    NONE = 0
    RED = 1
    GREEN = 2
    ORANGE = 3
    BLUE = 4


# Only decrementing a red critter sets off a blast
CRITICAL_VALUE = Color.RED
MAX_VALUE = Color.BLUE


def in_bounds(x: int, y: int) -> bool:
    """Check whether (x, y) lies on the 5x6 grid."""
    return 0 <= x < COLUMNS and 0 <= y < ROWS


@dataclass(frozen=True)
class BoardState:
    """
    Immutable board state representation.

    Uses tuple-of-tuples for hashability and immutability. The grid is
    stored row by row, so a cell is addressed as grid[y][x].

    Attributes:
        grid: 6 rows of 5 cell values, each in [0, 4]
    """
    grid: Tuple[Tuple[int, ...], ...]

    def __post_init__(self):
        _validate_grid(self.grid)

    @classmethod
    def empty(cls) -> 'BoardState':
        """Create a board with no critters."""
        return cls(grid=tuple((0,) * COLUMNS for _ in range(ROWS)))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> 'BoardState':
        """
        Create BoardState from a 2D list of rows.

        Args:
            rows: 6 rows of 5 integer values

        Returns:
            BoardState instance

        Raises:
            ValueError: If the grid has the wrong shape or invalid values
        """
        if len(rows) != ROWS:
            raise ValueError(f"Board must have {ROWS} rows, got {len(rows)}")
        grid = tuple(
            tuple(_checked_value(x, y, value) for x, value in enumerate(row))
            for y, row in enumerate(rows)
        )
        return cls(grid=grid)

    @classmethod
    def from_cells(cls, cells: Dict[Coordinate, int]) -> 'BoardState':
        """
        Create BoardState from a sparse {(x, y): value} mapping.

        Cells not present in the mapping are empty.
        """
        rows = [[0] * COLUMNS for _ in range(ROWS)]
        for (x, y), value in cells.items():
            if not in_bounds(x, y):
                raise ValueError(f"Cell ({x},{y}) is outside the {COLUMNS}x{ROWS} board")
            rows[y][x] = value
        return cls.from_rows(rows)

    def get_cell(self, x: int, y: int) -> int:
        """
        Get value at specific cell position.

        Returns:
            Cell value (0-4), 0 for empty or out-of-bounds positions
        """
        if in_bounds(x, y):
            return self.grid[y][x]
        return 0

    def is_solved(self) -> bool:
        """True when every cell is empty."""
        return all(cell == 0 for row in self.grid for cell in row)

    def decrement(self, x: int, y: int) -> 'BoardState':
        """
        Remove one hit point from a cell.

        Returns a new BoardState; the original is unchanged.

        Raises:
            ValueError: If the cell is already empty
        """
        if self.get_cell(x, y) == 0:
            raise ValueError(f"Cannot decrement empty cell ({x},{y})")
        rows = self.to_rows()
        rows[y][x] -= 1
        return BoardState(grid=tuple(tuple(row) for row in rows))

    def occupied(self) -> Iterator[Tuple[int, int, int]]:
        """Yield (x, y, value) for every non-empty cell, column by column."""
        for x in range(COLUMNS):
            for y in range(ROWS):
                value = self.grid[y][x]
                if value:
                    yield x, y, value

    def count_cells(self) -> int:
        """Count non-empty cells on the board."""
        return sum(1 for row in self.grid for cell in row if cell)

    def total_value(self) -> int:
        """Sum of all cell values (total hits still needed)."""
        return sum(cell for row in self.grid for cell in row)

    def diff(self, other: 'BoardState') -> List[Coordinate]:
        """
        Find cells that differ between this board and another.

        Returns:
            List of (x, y) tuples where cells differ
        """
        if not isinstance(other, BoardState):
            raise TypeError("Can only diff against another BoardState")

        return [
            (x, y)
            for y in range(ROWS)
            for x in range(COLUMNS)
            if self.grid[y][x] != other.grid[y][x]
        ]

    def to_rows(self) -> List[List[int]]:
        """Convert to a mutable 2D list (a fresh copy)."""
        return [list(row) for row in self.grid]

    def __str__(self) -> str:
        return "\n".join(
            " ".join(str(cell) if cell else "." for cell in row)
            for row in self.grid
        )


def _validate_grid(grid: Tuple[Tuple[int, ...], ...]) -> None:
    if len(grid) != ROWS:
        raise ValueError(f"Board must have {ROWS} rows, got {len(grid)}")
    for y, row in enumerate(grid):
        if len(row) != COLUMNS:
            raise ValueError(f"Row {y} must have {COLUMNS} cells, got {len(row)}")
        for x, value in enumerate(row):
            _checked_value(x, y, value)


def _checked_value(x: int, y: int, value) -> int:
    """Return the cell value as a plain int, rejecting bools, floats and strings."""
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= MAX_VALUE:
        raise ValueError(
            f"Cell ({x},{y}) has invalid value {value!r}, expected an integer 0-{int(MAX_VALUE)}"
        )
    return int(value)
