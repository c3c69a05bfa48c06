import random

import pytest

from board_state_class import Board, Piece
from classic_start import classic_start
from geometry import Coor, Direction

_OPPOSITE = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


@pytest.fixture
def start():
    return classic_start()


@pytest.fixture
def corner_board():
    """1x1 piece at (0, 0) with (0, 1) and (1, 0) left empty.

      A . T T
      . B T T
      C D E F
      C D E F
      G G H I
    """
    return Board((
        Piece(2, 2, Coor(0, 2)),
        Piece(1, 1, Coor(0, 0)),
        Piece(1, 1, Coor(1, 1)),
        Piece(2, 1, Coor(2, 0)),
        Piece(2, 1, Coor(2, 1)),
        Piece(2, 1, Coor(2, 2)),
        Piece(2, 1, Coor(2, 3)),
        Piece(1, 2, Coor(4, 0)),
        Piece(1, 1, Coor(4, 2)),
        Piece(1, 1, Coor(4, 3)),
    ))


@pytest.fixture
def solved_board():
    """Target already at the exit.

      B D D C
      B E F C
      G H H .
      I T T J
      I T T J
    """
    return Board((
        Piece(2, 2, Coor(3, 1)),
        Piece(2, 1, Coor(0, 0)),
        Piece(2, 1, Coor(0, 3)),
        Piece(1, 2, Coor(0, 1)),
        Piece(1, 1, Coor(1, 1)),
        Piece(1, 1, Coor(1, 2)),
        Piece(1, 1, Coor(2, 0)),
        Piece(1, 2, Coor(2, 1)),
        Piece(2, 1, Coor(3, 0)),
        Piece(2, 1, Coor(3, 3)),
    ))


@pytest.fixture
def deadlock_board():
    """Every cell filled, target boxed in at (1, 1)."""
    return Board((
        Piece(2, 2, Coor(1, 1)),
        Piece(1, 2, Coor(0, 0)),
        Piece(1, 2, Coor(0, 2)),
        Piece(2, 1, Coor(1, 0)),
        Piece(2, 1, Coor(1, 3)),
        Piece(1, 2, Coor(3, 0)),
        Piece(1, 2, Coor(3, 2)),
        Piece(1, 2, Coor(4, 0)),
        Piece(1, 1, Coor(4, 2)),
        Piece(1, 1, Coor(4, 3)),
    ))


@pytest.fixture
def scramble():
    """Random walk through successors, never undoing the previous slide."""
    def walk(board, steps, seed=0):
        rng = random.Random(seed)
        visited = [board]
        prev = None
        for _ in range(steps):
            moves = board.legal_moves()
            if prev is not None:
                moves = [m for m in moves if m != prev] or moves
            index, direction = rng.choice(moves)
            board = board.apply_move(index, direction)
            prev = (index, _OPPOSITE[direction])
            visited.append(board)
        return visited
    return walk
