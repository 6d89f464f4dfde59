import logging

from .board import BOARD_SIZE, Mark, row_col_to_index
from .game_logic import EngineError, GameEngine, MoveStatus

logger = logging.getLogger(__name__)

HELP_TEXT = "Enter a cell 0-8 or row,col (e.g. 1,2). r = restart, s = suspend/resume, q = quit."

ERROR_TEXT = {
    EngineError.INVALID_INDEX: "!! No such cell. Use 0-8 or row,col from 0-2.",
    EngineError.CELL_OCCUPIED: "!! Cell already taken. Try again.",
    EngineError.GAME_ALREADY_OVER: "!! Game is over. Press r to restart.",
}


def parse_cell(text):
    """
    '4' or '1,1' -> cell index, None when unreadable
    out of range values are passed through for the engine to reject
    """
    text = text.strip()
    try:
        if ',' in text:
            row, col = (int(part) for part in text.split(','))
            if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
                return -1
            return row_col_to_index(row, col)
        return int(text)
    except ValueError:
        return None


def format_board(board):
    """
    3 text rows, empty cells show their index
    """
    rows = []
    for r in range(BOARD_SIZE):
        cells = board[r*BOARD_SIZE:(r+1)*BOARD_SIZE]
        rows.append(" " + " | ".join(
            mark.label if mark is not Mark.EMPTY else str(r*BOARD_SIZE + c)
            for c, mark in enumerate(cells)))
    return "\n-----------\n".join(rows)


class ConsoleGame:
    """
    two players sharing one terminal
    """
    def __init__(self, input_func=input, output=print):
        self.engine = GameEngine()
        self._input = input_func
        self._print = output

    def print_board(self):
        self._print("")
        self._print(format_board(self.engine.board))
        self._print("")

    def suspend_and_resume(self):
        """
        drop the engine and rebuild it from a snapshot record
        """
        saved = self.engine.snapshot().to_dict()
        self.engine = GameEngine(saved_state=saved)
        self._print("[*] Game suspended and resumed.")

    def handle(self, line):
        """
        process one input line
        returns: False when the player quits
        """
        cmd = line.strip().lower()
        if cmd == 'q':
            return False
        if cmd == 'r':
            self.engine.reset()
            self._print("New game.")
            self.print_board()
            return True
        if cmd == 's':
            self.suspend_and_resume()
            self.print_board()
            return True

        index = parse_cell(line)
        if index is None:
            self._print("!! Invalid input. " + HELP_TEXT)
            return True
        res = self.engine.apply_move(index)
        if not res.ok:
            self._print(ERROR_TEXT[res.error])
            return True
        self.print_board()
        if res.status is MoveStatus.WIN:
            self._print(f"Player {res.player.label} wins!")
        elif res.status is MoveStatus.DRAW:
            self._print("It's a draw!")
        return True

    def prompt(self):
        if self.engine.is_over:
            return "Game over (r = restart, q = quit): "
        return f"Player {self.engine.current_player.label}'s turn: "

    def run(self):
        self._print("--- Tic-Tac-Toe ---")
        self._print(HELP_TEXT)
        self.print_board()
        while True:
            try:
                line = self._input(self.prompt())
            except (EOFError, KeyboardInterrupt):
                self._print("")
                break
            if not self.handle(line):
                break
        logger.info("console game finished after %d moves", self.engine.move_count)
        self._print("Exiting.")
