from enum import Enum
from typing import NamedTuple

# ----------------------------
# Grid geometry (row 0 is the top row, col 0 the left column)
# ----------------------------
ROWS = 5
COLS = 4


class IllegalCoordinateError(ValueError):
    """A coordinate left the grid."""

    def __init__(self, row, col):
        super().__init__(f"illegal coordinate ({row}, {col})")
        self.row = row
        self.col = col


class Coor(NamedTuple):
    row: int
    col: int

    def __add__(self, other):
        return Coor(self.row + other.row, self.col + other.col)


class Direction(Enum):
    UP = (-1, 0)
    RIGHT = (0, 1)
    LEFT = (0, -1)
    DOWN = (1, 0)


def in_bounds(coor):
    return 0 <= coor.row < ROWS and 0 <= coor.col < COLS


def apply_move(coor, direction):
    """Return the cell one step from `coor` in `direction`.

    Raises IllegalCoordinateError when the step leaves the board.
    """
    dr, dc = direction.value
    row, col = coor.row + dr, coor.col + dc
    nxt = Coor(row, col)
    if not in_bounds(nxt):
        raise IllegalCoordinateError(row, col)
    return nxt
