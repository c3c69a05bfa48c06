from dataclasses import dataclass

from geometry import (
    COLS,
    ROWS,
    Coor,
    Direction,
    IllegalCoordinateError,
    apply_move,
    in_bounds,
)

# Anchor the target piece must reach
SOLUTION = Coor(3, 1)
NUM_PIECES = 10

# Bits per packed coordinate in Board.__hash__ (3 for the 5x4 grid)
_FIELD_BITS = max(ROWS - 1, COLS - 1).bit_length()
_FIELD_MASK = (1 << _FIELD_BITS) - 1


# ----------------------------
# Data structures
# ----------------------------
@dataclass(frozen=True, order=True)
class Piece:
    # field order is the canonical sort order: height, width, row, col
    height: int
    width: int
    anchor: Coor

    def __post_init__(self):
        if self.height < 1 or self.width < 1:
            raise ValueError(f"piece extent must be positive, got {self.height}x{self.width}")

    def bottom_right(self):
        return self.anchor + Coor(self.height - 1, self.width - 1)

    def occupied_spaces(self):
        return [self.anchor + Coor(dr, dc)
                for dr in range(self.height)
                for dc in range(self.width)]

    def adjacent_spaces(self):
        """Cells just outside each edge of the piece, keyed by Direction.

        Off-grid cells are dropped, so an empty list means the piece
        cannot slide that way.
        """
        spaces = {d: [] for d in Direction}
        top_left = self.anchor
        bottom_left = self.anchor + Coor(self.height - 1, 0)
        top_right = self.anchor + Coor(0, self.width - 1)

        for dc in range(self.width):
            _push(spaces, Direction.UP, top_left + Coor(0, dc))
            _push(spaces, Direction.DOWN, bottom_left + Coor(0, dc))
        for dr in range(self.height):
            _push(spaces, Direction.LEFT, top_left + Coor(dr, 0))
            _push(spaces, Direction.RIGHT, top_right + Coor(dr, 0))
        return spaces

    def move(self, direction):
        """Return this piece slid one cell; raises IllegalCoordinateError off-grid."""
        apply_move(self.bottom_right(), direction)
        return Piece(self.height, self.width, apply_move(self.anchor, direction))


def _push(spaces, direction, edge_cell):
    try:
        spaces[direction].append(apply_move(edge_cell, direction))
    except IllegalCoordinateError:
        pass


class Board:
    """One puzzle state: ten pieces, index 0 being the target piece.

    Equality and hashing go through the canonical layout, so two boards
    whose same-shaped pieces are listed in a different order are the same
    search node.
    """

    __slots__ = ("pieces", "_key", "_hash")

    def __init__(self, pieces, validate=True):
        pieces = tuple(pieces)
        if len(pieces) != NUM_PIECES:
            raise ValueError(f"expected {NUM_PIECES} pieces, got {len(pieces)}")
        self.pieces = pieces
        self._key = None
        self._hash = None
        if validate:
            errs = validate_state(self)
            if errs:
                raise ValueError("invalid board: " + "; ".join(errs))

    def target_piece(self):
        return self.pieces[0]

    def is_solution(self):
        return self.target_piece().anchor == SOLUTION

    # ----------------------------
    # Moves
    # ----------------------------
    def legal_moves(self):
        """All (piece index, Direction) pairs that slide into free cells."""
        occupied = [set(p.occupied_spaces()) for p in self.pieces]
        moves = []
        for n, piece in enumerate(self.pieces):
            for direction, spaces in piece.adjacent_spaces().items():
                if not spaces:
                    continue
                blocked = any(
                    not occupied[m].isdisjoint(spaces)
                    for m in range(len(self.pieces)) if m != n
                )
                if not blocked:
                    moves.append((n, direction))
        return moves

    def apply_move(self, index, direction, validate=True):
        pieces = list(self.pieces)
        pieces[index] = pieces[index].move(direction)
        return Board(pieces, validate=validate)

    def successors(self):
        """Neighbouring boards paired with their unit move cost."""
        out = []
        for index, direction in self.legal_moves():
            try:
                out.append((self.apply_move(index, direction, validate=False), 1))
            except IllegalCoordinateError as e:
                raise RuntimeError(
                    f"legal move ({index}, {direction.name}) left the board"
                ) from e
        return out

    # ----------------------------
    # Canonical identity
    # ----------------------------
    def canonical_key(self):
        if self._key is None:
            self._key = tuple((p.height, p.width, p.anchor.row, p.anchor.col)
                              for p in sorted(self.pieces))
        return self._key

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return self.canonical_key() == other.canonical_key()

    def __hash__(self):
        if self._hash is None:
            packed = 0
            i = 0
            for _, _, row, col in self.canonical_key():
                for bits in (row, col):
                    packed |= (bits & _FIELD_MASK) << (i * _FIELD_BITS)
                    i += 1
            self._hash = packed
        return self._hash

    # ----------------------------
    # Rendering support
    # ----------------------------
    def to_grid(self):
        """Piece index owning each cell, None where empty."""
        grid = [[None] * COLS for _ in range(ROWS)]
        for n, piece in enumerate(self.pieces):
            for c in piece.occupied_spaces():
                if not in_bounds(c):
                    raise ValueError(f"piece {n} covers off-grid cell {tuple(c)}")
                if grid[c.row][c.col] is not None:
                    raise ValueError(f"cell {tuple(c)} claimed by pieces {grid[c.row][c.col]} and {n}")
                grid[c.row][c.col] = n
        return grid

    def __str__(self):
        lines = []
        for row in self.to_grid():
            lines.append("".join(f"{0 if n is None else n + 1:>3}" for n in row))
        return "\n".join(lines)

    def __repr__(self):
        return f"Board({list(self.pieces)!r})"


def validate_state(board):
    errs = []
    owner = {}
    for idx, p in enumerate(board.pieces):
        if not (in_bounds(p.anchor) and in_bounds(p.bottom_right())):
            errs.append(f"Piece {idx} OOB: {p}")
            continue
        for c in p.occupied_spaces():
            if c in owner:
                errs.append(f"Overlap at {tuple(c)} between {owner[c]} and {idx}")
            else:
                owner[c] = idx
    return errs
