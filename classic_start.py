from board_state_class import Board, Piece
from geometry import Coor


# ----------------------------
# Classic starting layout
# ----------------------------
def classic_start():
    """The canonical 5x4 opening; the 2x2 hero must reach the bottom exit.

      2  1  1  3
      2  1  1  3
      0  4  4  0
      5  7  8  6
      5  9 10  6
    """
    hero = Piece(2, 2, Coor(0, 1))

    # vertical 2x1 blocks
    v1 = Piece(2, 1, Coor(0, 0))
    v2 = Piece(2, 1, Coor(0, 3))
    v3 = Piece(2, 1, Coor(3, 0))
    v4 = Piece(2, 1, Coor(3, 3))

    # the one horizontal 1x2 block
    h1 = Piece(1, 2, Coor(2, 1))

    # four 1x1 soldiers
    s1 = Piece(1, 1, Coor(3, 1))
    s2 = Piece(1, 1, Coor(3, 2))
    s3 = Piece(1, 1, Coor(4, 1))
    s4 = Piece(1, 1, Coor(4, 2))

    return Board((hero, v1, v2, h1, v3, v4, s1, s2, s3, s4))
