"""
Console XO game against the minimax engine.

- Whoever starts plays X, the other side plays O
- Cells are numbered 1-9 row by row:
     1 | 2 | 3
     4 | 5 | 6
     7 | 8 | 9
- 'u' takes back your last move (and the computer's answer)
- Who starts alternates between games; difficulty is 'easy' or 'hard'
- The board can also be followed live in a matplotlib window

Run: python xo_play.py
"""

import math
import random
from typing import Callable, Dict, List, Optional, Tuple

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.colors import ListedColormap

from xo_board import Board, Move
from xo_config import (
    COMPUTER, HUMAN, EMPTY, CHAR_MAP, CHAR_MAP_COMPUTER_FIRST, SIDE_NAMES,
    DEFAULT_DIFFICULTY, PLOT_PAUSE,
)
from xo_minimax import EVALUATORS, Evaluator, find_next_board, get_evaluator, search_depth


# ---------- Engine glue ----------
def computer_move(board: Board, evaluate: Evaluator) -> Board:
    next_board = find_next_board(board, search_depth(board), -math.inf, math.inf, evaluate)
    if next_board is None:
        # The shell only asks for a move while the game is running
        raise RuntimeError(f"Engine found no move on an unfinished board:\n{board}")
    return next_board


def random_move(board: Board, rng: random.Random) -> Move:
    return rng.choice(board.valid_moves())


def parse_cell(text: str, dimension: int) -> Move:
    # "5" -> Move(1, 1) on a 3x3 board
    k = int(text) - 1
    if not 0 <= k < dimension * dimension:
        raise ValueError(f"cell must be between 1 and {dimension * dimension}")
    return Move(k // dimension, k % dimension)


def _take_back(board: Board, history: List[Tuple[Move, int]]) -> bool:
    # Undo everything back to (and including) the last human move
    if not any(side == HUMAN for _, side in history):
        return False
    while history:
        move, side = history.pop()
        board.undo_move(move)
        if side == HUMAN:
            break
    return True


def marks_for(human_first: bool) -> Dict[int, str]:
    # X goes to whoever starts
    return CHAR_MAP if human_first else CHAR_MAP_COMPUTER_FIRST


def result_message(winner: Optional[int]) -> str:
    if winner == COMPUTER:
        return "Result: the computer wins!"
    if winner == HUMAN:
        return "Result: you win!"
    return "Result: draw."


# ---------- Printing ----------
def print_board(board: Board, marks: Dict[int, str] = CHAR_MAP) -> None:
    print(board.render(marks))
    print()


# ---------- Games ----------
def play_game(
    difficulty: str = DEFAULT_DIFFICULTY,
    human_first: bool = True,
    read_move: Callable[[str], str] = input,
    verbose: bool = True,
    show_plot: bool = False,
) -> Optional[int]:
    """
    Play one game against the engine. Returns the winner (COMPUTER / HUMAN)
    or None for a draw.

    With show_plot the board is also redrawn in a matplotlib window after
    every move; the window is closed when the game ends.
    """
    evaluate = get_evaluator(difficulty)
    marks = marks_for(human_first)
    board = Board()
    history: List[Tuple[Move, int]] = []
    human_turn = human_first

    fig = ax = None
    if show_plot:
        plt.ion()
        fig, ax = plt.subplots(figsize=(4, 4))

    if verbose:
        print(f"Difficulty: {difficulty} | {'You start' if human_first else 'Computer starts'}")
        print(f"You are {marks[HUMAN]}, the computer is {marks[COMPUTER]}")

    try:
        while True:
            if verbose:
                print_board(board, marks)
            if ax is not None:
                ax.clear()
                draw_board(board, ax, marks)
                plt.pause(PLOT_PAUSE)

            finished, winner = board.check_finish()
            if finished:
                if verbose:
                    print(result_message(winner))
                return winner

            if human_turn:
                text = read_move("Your move (1-9, u = undo): ").strip().lower()
                if text == "u":
                    if not _take_back(board, history) and verbose:
                        print("Nothing to take back")
                    continue
                try:
                    move = parse_cell(text, board.dimension)
                except ValueError:
                    if verbose:
                        print("Invalid input")
                    continue
                if not board.is_valid_move(move):
                    if verbose:
                        print("Cell is taken")
                    continue
                board.add_piece(move.x, move.y, HUMAN)
                history.append((move, HUMAN))
            else:
                board = computer_move(board, evaluate)
                last = board.pieces[-1]
                history.append((Move(last.x, last.y), COMPUTER))
                if verbose:
                    print(f"Computer plays {last.x * board.dimension + last.y + 1} (score {board.score:g})")

            human_turn = not human_turn
    finally:
        if fig is not None:
            plt.close(fig)
            plt.ioff()


def play_vs_random(difficulty=DEFAULT_DIFFICULTY, ai_first=True, seed=None, verbose=True):
    # Engine against a random agent; the random agent takes the human side
    rng = random.Random(seed)
    evaluate = get_evaluator(difficulty)
    board = Board()
    ai_turn = ai_first

    while True:
        finished, winner = board.check_finish()
        if finished:
            if verbose:
                print_board(board, marks_for(not ai_first))
                print(result_message(winner))
            return winner

        if ai_turn:
            board = computer_move(board, evaluate)
        else:
            move = random_move(board, rng)
            board.add_piece(move.x, move.y, HUMAN)
        ai_turn = not ai_turn


# ---------- Visualization w/ Matplotlib ----------
def _build_visual_grid(board: Board) -> np.ndarray:
    """
    Numeric grid for imshow:
      0 = empty
      1 = computer
      2 = human
    """
    grid = board.grid()
    return np.where(grid == HUMAN, 2, np.where(grid == COMPUTER, 1, 0))


def draw_board(board: Board, ax=None, marks: Dict[int, str] = CHAR_MAP):
    # Draw the board on `ax` (a new figure if None) and return the axes
    if ax is None:
        _, ax = plt.subplots(figsize=(4, 4))

    cmap = ListedColormap([
        "#FFFFFF",  # 0 empty
        "#AEC7E8",  # 1 computer
        "#FF9896",  # 2 human
    ])
    n = board.dimension
    ax.imshow(_build_visual_grid(board), cmap=cmap, vmin=0, vmax=2, interpolation="nearest")

    for p in board.pieces:
        # imshow puts the column (y) on the horizontal axis
        ax.text(p.y, p.x, marks[p.owner], ha="center", va="center", fontsize=32)

    ax.set_xticks(np.arange(-0.5, n, 1), minor=True)
    ax.set_yticks(np.arange(-0.5, n, 1), minor=True)
    ax.grid(which="minor", color="black", linewidth=2)
    ax.set_xticks([])
    ax.set_yticks([])

    finished, winner = board.check_finish()
    if finished:
        ax.set_title(result_message(winner).replace("Result: ", ""))
    else:
        ax.set_title(f"{board.piece_count} pieces placed")
    return ax


# ---------- Main ----------
def main():
    print("=== XO (Minimax with alpha-beta pruning) ===")
    print("Whoever starts plays X. Cells:\n")
    print(" 1 | 2 | 3\n-----------\n 4 | 5 | 6\n-----------\n 7 | 8 | 9\n")

    tally = {COMPUTER: 0, HUMAN: 0, EMPTY: 0}
    human_first = True
    while True:
        try:
            choice = input(f"Difficulty {sorted(EVALUATORS)} (enter = {DEFAULT_DIFFICULTY}, q = quit): ")
            choice = choice.strip().lower() or DEFAULT_DIFFICULTY
            if choice == "q":
                break
            if choice not in EVALUATORS:
                print("Unknown difficulty")
                continue
            show_plot = input("Show the board in a window? [y/N]: ").strip().lower() == "y"
            winner = play_game(choice, human_first=human_first, read_move=input, show_plot=show_plot)
        except EOFError:
            break
        tally[EMPTY if winner is None else winner] += 1
        human_first = not human_first

    print(
        f"Summary: {tally[HUMAN]} wins, {tally[COMPUTER]} losses, {tally[EMPTY]} draws "
        f"({SIDE_NAMES[HUMAN]} vs {SIDE_NAMES[COMPUTER]})"
    )


if __name__ == "__main__":
    main()
