"""
Shared constants for the XO (tic-tac-toe) minimax game.

Sides are plain integers so a board can be laid out as a numpy grid:
  0 = empty (nobody), +1 = computer, -1 = human
"""

# Board configuration
DIMENSION = 3

# Sides
EMPTY = 0
COMPUTER = 1
HUMAN = -1

# Character representation for display: whoever starts plays X
CHAR_MAP = {
    EMPTY: '.',
    COMPUTER: 'O',
    HUMAN: 'X',
}
CHAR_MAP_COMPUTER_FIRST = {
    EMPTY: '.',
    COMPUTER: 'X',
    HUMAN: 'O',
}

SIDE_NAMES = {
    COMPUTER: "Computer",
    HUMAN: "Human",
}

# Simple evaluation: score of a single line
LINE_WIN = 100
LINE_TWO = 10

# Weighted evaluation
CENTER_WEIGHT = 10
CORNER_WEIGHT = 3
POTENTIAL_WEIGHT = 2
BLOCK_WEIGHT = 5

# Strategic cells per board dimension; only the 3x3 layout is known
STRATEGIC_CELLS = {
    3: {
        (1, 1): CENTER_WEIGHT,
        (0, 0): CORNER_WEIGHT,
        (0, 2): CORNER_WEIGHT,
        (2, 0): CORNER_WEIGHT,
        (2, 2): CORNER_WEIGHT,
    },
}

# Score annotations for the search shortcuts.
# WIN_SCORE is finite so that WIN_SCORE - 1 stays strictly below it.
OPENING_SCORE = 100.0
WIN_SCORE = 1e9
BLOCK_SCORE = WIN_SCORE - 1

# Seconds between redraws of the live board window
PLOT_PAUSE = 0.1

# Difficulty: "easy" = simple line counting, "hard" = weighted heuristic
DEFAULT_DIFFICULTY = "hard"
