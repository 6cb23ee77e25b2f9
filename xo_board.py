"""
XO board model: placed pieces, occupancy, win/draw detection and the two
static evaluation functions used by the minimax search.

- Board: dimension x dimension, cells addressed by (x, y), both in [0, dimension)
- A board is an ordered list of immutable pieces; occupancy is derived from it
- Evaluations are always from the computer's point of view
  (positive = good for the computer, negative = good for the human)
"""

from typing import Iterator, List, NamedTuple, Optional, Tuple

import numpy as np

from xo_config import (
    DIMENSION, EMPTY, COMPUTER, HUMAN, CHAR_MAP,
    LINE_WIN, LINE_TWO, POTENTIAL_WEIGHT, BLOCK_WEIGHT, STRATEGIC_CELLS,
)


class Piece(NamedTuple):
    id: int
    x: int
    y: int
    owner: int


class Move(NamedTuple):
    x: int
    y: int


class Board:
    def __init__(self, dimension: int = DIMENSION, pieces: Optional[List[Piece]] = None, score: float = 0.0):
        self.dimension = dimension
        self.pieces: List[Piece] = list(pieces) if pieces else []
        # Annotation set by the search; not part of the position
        self.score = score
        self._grid: Optional[np.ndarray] = None

    def __str__(self):
        return self.render()

    def render(self, marks=CHAR_MAP) -> str:
        # One text row per x; `marks` maps each side to its character
        grid = self.grid()
        return "\n".join(
            " ".join(marks[int(v)] for v in grid[x]) for x in range(self.dimension)
        )

    def __repr__(self):
        return f"Board(dimension={self.dimension}, pieces={self.pieces!r}, score={self.score!r})"

    @property
    def piece_count(self) -> int:
        return len(self.pieces)

    def copy(self, score: Optional[float] = None) -> "Board":
        # Pieces are immutable, so a new list is a full copy
        return Board(self.dimension, self.pieces, self.score if score is None else score)

    # ---------- Occupancy ----------
    def grid(self) -> np.ndarray:
        """
        Occupancy grid indexed [x, y]: EMPTY, COMPUTER or HUMAN per cell.
        Cached until the next add/undo, so the array is read-only.
        """
        if self._grid is None:
            grid = np.zeros((self.dimension, self.dimension), dtype=int)
            for p in self.pieces:
                grid[p.x, p.y] = p.owner
            grid.setflags(write=False)
            self._grid = grid
        return self._grid

    def lines(self) -> Iterator[np.ndarray]:
        # rows (fixed x), columns (fixed y), main diagonal, anti-diagonal
        grid = self.grid()
        for i in range(self.dimension):
            yield grid[i, :]
        for i in range(self.dimension):
            yield grid[:, i]
        yield np.diag(grid)
        yield np.diag(np.fliplr(grid))

    def is_empty_cell(self, x: int, y: int) -> bool:
        return not any(p.x == x and p.y == y for p in self.pieces)

    def occupant(self, x: int, y: int) -> Optional[int]:
        for p in self.pieces:
            if p.x == x and p.y == y:
                return p.owner
        return None

    def is_valid_move(self, move: Move) -> bool:
        return 0 <= move.x < self.dimension and 0 <= move.y < self.dimension and self.is_empty_cell(move.x, move.y)

    def valid_moves(self) -> List[Move]:
        # Row-major: x outer, y inner. The search relies on this order for tie-breaking.
        return [
            Move(x, y)
            for x in range(self.dimension)
            for y in range(self.dimension)
            if self.is_empty_cell(x, y)
        ]

    # ---------- Placing pieces ----------
    def add_piece(self, x: int, y: int, side: int) -> None:
        """
        Append a piece for `side` at (x, y).

        The cell is NOT checked: callers must only place on empty cells
        (see is_empty_cell / is_valid_move). Placing on an occupied cell
        leaves the board with duplicate coordinates.
        """
        self.pieces.append(Piece(len(self.pieces), x, y, side))
        self._grid = None

    def make_move(self, move: Move, side: int = COMPUTER) -> "Board":
        # New board with one extra piece; self is left untouched
        next_board = self.copy()
        next_board.add_piece(move.x, move.y, side)
        return next_board

    def undo_move(self, move: Move) -> None:
        # Remove the most recent piece at the move's cell, if any
        for i in range(len(self.pieces) - 1, -1, -1):
            p = self.pieces[i]
            if p.x == move.x and p.y == move.y:
                del self.pieces[i]
                self._grid = None
                return

    # ---------- Terminal test ----------
    def check_finish(self) -> Tuple[bool, Optional[int]]:
        """
        Returns (finished, winner):
          (True, side)  if `side` owns a full row, column or diagonal
          (True, None)  if the board is full with no winner (draw)
          (False, None) otherwise
        """
        # A line sums to +dimension / -dimension only when one side owns all of it
        sums = [int(line.sum()) for line in self.lines()]
        for side in (HUMAN, COMPUTER):
            if side * self.dimension in sums:
                return True, side
        if len(self.pieces) == self.dimension * self.dimension:
            return True, None
        return False, None

    def has_immediate_winning_move(self, side: int) -> Tuple[bool, Optional[Move]]:
        # First winning cell in row-major order
        for move in self.valid_moves():
            finished, winner = self.make_move(move, side).check_finish()
            if finished and winner == side:
                return True, move
        return False, None

    # ---------- Static evaluation ----------
    def _line_counts(self) -> Iterator[Tuple[int, int]]:
        for line in self.lines():
            yield int(np.count_nonzero(line == COMPUTER)), int(np.count_nonzero(line == HUMAN))

    def evaluate_simple(self) -> int:
        """
        Line counting:
          all computer -> +100, all human -> -100
          computer has dimension-1 and human none -> +10, and the mirror -> -10
          anything else -> 0
        """
        n = self.dimension
        score = 0
        for mine, theirs in self._line_counts():
            if mine == n:
                score += LINE_WIN
            elif theirs == n:
                score -= LINE_WIN
            elif mine == n - 1 and theirs == 0:
                score += LINE_TWO
            elif theirs == n - 1 and mine == 0:
                score -= LINE_TWO
        return score

    def evaluate_weighted(self) -> int:
        """
        Computer-minus-human sum of three sub-scores:
          1. strategic cells: center and corners to their occupant (3x3 only)
          2. potential lines: a line held by one side only gives it 2 per piece
          3. blocking: a line where one side is one piece short (and the other
             side is absent) gives 5 to the side that has to block it
        """
        n = self.dimension
        totals = {COMPUTER: 0, HUMAN: 0}

        grid = self.grid()
        for (x, y), weight in STRATEGIC_CELLS.get(n, {}).items():
            owner = int(grid[x, y])
            if owner != EMPTY:
                totals[owner] += weight

        for mine, theirs in self._line_counts():
            if mine > 0 and theirs == 0:
                totals[COMPUTER] += POTENTIAL_WEIGHT * mine
            elif theirs > 0 and mine == 0:
                totals[HUMAN] += POTENTIAL_WEIGHT * theirs

            if mine == n - 1 and theirs == 0:
                totals[HUMAN] += BLOCK_WEIGHT
            elif theirs == n - 1 and mine == 0:
                totals[COMPUTER] += BLOCK_WEIGHT

        return totals[COMPUTER] - totals[HUMAN]
