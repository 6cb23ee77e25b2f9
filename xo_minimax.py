"""
Minimax search with alpha-beta pruning for XO.

- The computer is Max, the human is Min
- The evaluation function is passed in explicitly (see EVALUATORS)
- Before searching, find_next_board takes three shortcuts:
    empty board -> play the center
    computer can win now -> win
    human can win next move -> block
- Ties keep the first best move in row-major order (strict > / < comparisons)
"""

import math
import numbers
from typing import Callable, Dict, Optional

from xo_board import Board, Move
from xo_config import COMPUTER, HUMAN, OPENING_SCORE, WIN_SCORE, BLOCK_SCORE

Evaluator = Callable[[Board], float]

EVALUATORS: Dict[str, Evaluator] = {
    "easy": Board.evaluate_simple,
    "hard": Board.evaluate_weighted,
}


def get_evaluator(difficulty: str) -> Evaluator:
    try:
        return EVALUATORS[difficulty]
    except KeyError:
        raise KeyError(f"Unknown difficulty {difficulty!r}, expected one of {sorted(EVALUATORS)}") from None


def search_depth(board: Board) -> int:
    # Remaining plies, so the search always reaches the end of the game
    return board.dimension * board.dimension - board.piece_count


def _check_depth(board: Board, depth: int) -> None:
    assert isinstance(depth, numbers.Integral) and 0 <= depth <= board.dimension * board.dimension, \
        f"depth must be in [0, {board.dimension * board.dimension}], got {depth!r}"


def find_next_board(
    board: Board,
    depth: int,
    alpha: float = -math.inf,
    beta: float = math.inf,
    evaluate: Evaluator = Board.evaluate_weighted,
) -> Optional[Board]:
    """
    Return the board after the computer's best move, annotated with its score.

    Returns None when the game on `board` is already finished (no move to make).
    `board` itself is never modified.
    """
    _check_depth(board, depth)

    finished, _ = board.check_finish()
    if finished:
        return None

    if board.piece_count == 0:
        center = board.dimension // 2
        opening = board.make_move(Move(center, center), COMPUTER)
        opening.score = OPENING_SCORE
        return opening

    found, move = board.has_immediate_winning_move(COMPUTER)
    if found:
        winning = board.make_move(move, COMPUTER)
        winning.score = WIN_SCORE
        return winning

    found, move = board.has_immediate_winning_move(HUMAN)
    if found:
        blocking = board.make_move(move, COMPUTER)
        blocking.score = BLOCK_SCORE
        return blocking

    return maximize(board, depth, alpha, beta, evaluate)


def maximize(board: Board, depth: int, alpha: float, beta: float, evaluate: Evaluator) -> Optional[Board]:
    """
    Computer to move. Returns the best child board annotated with its minimax
    value, a copy of `board` annotated with its static value at a leaf, or None
    if there is no move to make.
    """
    finished, _ = board.check_finish()
    if depth == 0 or finished:
        return board.copy(score=evaluate(board))

    max_eval = -math.inf
    best_board = None
    for move in board.valid_moves():
        child = board.make_move(move, COMPUTER)
        eval_val = minimize(child, depth - 1, alpha, beta, evaluate)
        if eval_val > max_eval:
            max_eval = eval_val
            best_board = child
        alpha = max(alpha, eval_val)
        if beta <= alpha:
            break  # prune

    if best_board is None:
        return None
    best_board.score = max_eval
    return best_board


def minimize(board: Board, depth: int, alpha: float, beta: float, evaluate: Evaluator) -> float:
    # Human to move; only the value matters
    finished, _ = board.check_finish()
    if depth == 0 or finished:
        return evaluate(board)

    min_eval = math.inf
    for move in board.valid_moves():
        child = board.make_move(move, HUMAN)
        reply = maximize(child, depth - 1, alpha, beta, evaluate)
        eval_val = reply.score
        if eval_val < min_eval:
            min_eval = eval_val
        beta = min(beta, eval_val)
        if beta <= alpha:
            break  # prune
    return min_eval
