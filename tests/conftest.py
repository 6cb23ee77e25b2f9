"""
Shared pytest fixtures for the XO tests.

Boards are function-scoped: several tests add pieces to them.
"""

import matplotlib

# No display in test runs
matplotlib.use("Agg")

import pytest

from xo_board import Board
from xo_config import COMPUTER, HUMAN


def _make_board(computer=(), human=()):
    """Board with computer pieces placed first, then human pieces."""
    board = Board()
    for x, y in computer:
        board.add_piece(x, y, COMPUTER)
    for x, y in human:
        board.add_piece(x, y, HUMAN)
    return board


@pytest.fixture
def empty_board():
    return Board()


@pytest.fixture
def drawn_board():
    # O X O / O X X / X O O -> full, no line
    board = Board()
    layout = [
        [COMPUTER, HUMAN, COMPUTER],
        [COMPUTER, HUMAN, HUMAN],
        [HUMAN, COMPUTER, COMPUTER],
    ]
    for x in range(3):
        for y in range(3):
            board.add_piece(x, y, layout[x][y])
    return board


@pytest.fixture
def alternating_eight():
    # Human, Computer, Human, ... on the first 8 cells; (2, 2) stays empty
    board = Board()
    for i in range(8):
        board.add_piece(i // 3, i % 3, HUMAN if i % 2 == 0 else COMPUTER)
    return board


@pytest.fixture
def make_board():
    return _make_board
