from dataclasses import dataclass
from enum import Enum


BOARD_SIZE = 3                          # fixed 3x3 grid
BOARD_CELLS = BOARD_SIZE * BOARD_SIZE   # cells 0..8, row-major

# rows top-to-bottom, columns left-to-right, main diag, anti diag
WINNING_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)


class Mark(Enum):
    """
    value of one cell, values are the serialized symbols
    """
    EMPTY = "_"
    A = "A"
    B = "B"

    def other(self):
        # toggle between the two player marks
        if self is Mark.A:
            return Mark.B
        if self is Mark.B:
            return Mark.A
        raise ValueError("EMPTY has no opponent")

    @property
    def label(self):
        # glyph shown on screen
        return {Mark.A: "X", Mark.B: "O"}.get(self, "")


@dataclass(frozen=True)
class Win:
    player: Mark
    line: tuple


@dataclass(frozen=True)
class Draw:
    """
    full board, no line
    """


DRAW = Draw()


def new_board():
    """
    fresh board, all cells empty
    """
    return [Mark.EMPTY] * BOARD_CELLS


def index_to_row_col(index):
    return divmod(index, BOARD_SIZE)


def row_col_to_index(row, col):
    return row * BOARD_SIZE + col


def evaluate_winning_line(board):
    """
    scan the 8 lines in fixed order
    returns: (player, line) for the first complete line, or None
    """
    for line in WINNING_LINES:
        a, b, c = line
        mark = board[a]
        if mark is not Mark.EMPTY and mark == board[b] == board[c]:
            return mark, line
    return None


def is_board_full(board):
    return all(cell is not Mark.EMPTY for cell in board)


def empty_cells(board):
    return [i for i, cell in enumerate(board) if cell is Mark.EMPTY]


def derive_outcome(board):
    """
    Win, DRAW, or None while the game is still open
    """
    found = evaluate_winning_line(board)
    if found is not None:
        player, line = found
        return Win(player, line)
    if is_board_full(board):
        return DRAW
    return None
