import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .board import (
    BOARD_CELLS, DRAW, Mark, Win,
    derive_outcome, empty_cells, new_board,
)
from .snapshot import SerializedState, SnapshotFormatError

logger = logging.getLogger(__name__)


class EngineError(Enum):
    INVALID_INDEX = "invalid_index"          # index outside 0..8
    CELL_OCCUPIED = "cell_occupied"          # target cell already marked
    GAME_ALREADY_OVER = "game_already_over"  # move after win/draw
    INVALID_STATE = "invalid_state"          # malformed snapshot on restore


class MoveStatus(Enum):
    CONTINUE = "continue"
    WIN = "win"
    DRAW = "draw"
    INVALID = "invalid"


@dataclass(frozen=True)
class MoveResult:
    """
    what happened after apply_move
    player: next to move on CONTINUE, winner on WIN
    """
    status: MoveStatus
    cell_index: Optional[int]
    player: Optional[Mark] = None
    line: Optional[tuple] = None
    error: Optional[EngineError] = None

    @property
    def ok(self):
        return self.status is not MoveStatus.INVALID


@dataclass(frozen=True)
class RestoreResult:
    error: Optional[EngineError] = None

    @property
    def ok(self):
        return self.error is None


@dataclass
class GameState:
    """
    board, player to move (winner once won), game over flag, cached outcome
    """
    board: list = field(default_factory=new_board)
    current_player: Mark = Mark.A
    is_over: bool = False
    outcome: object = None    # Win, DRAW or None

    def copy(self):
        return GameState(list(self.board), self.current_player,
                         self.is_over, self.outcome)


def _invalid(index, error):
    return MoveResult(MoveStatus.INVALID, index, error=error)


class GameEngine:
    """
    tic-tac-toe rules and state, single owner of the GameState
    """
    def __init__(self, saved_state=None):
        """
        fresh game, or restored one when a snapshot is given
        """
        self._state = GameState()
        if saved_state is not None:
            self.restore(saved_state)

    # ------------------------------------------------------------------
    # read-only views for presentation code
    # ------------------------------------------------------------------

    @property
    def board(self):
        return tuple(self._state.board)

    @property
    def current_player(self):
        return self._state.current_player

    @property
    def is_over(self):
        return self._state.is_over

    @property
    def outcome(self):
        return self._state.outcome

    @property
    def winner(self):
        outcome = self._state.outcome
        return outcome.player if isinstance(outcome, Win) else None

    @property
    def winning_line(self):
        outcome = self._state.outcome
        return outcome.line if isinstance(outcome, Win) else None

    @property
    def move_count(self):
        return BOARD_CELLS - len(empty_cells(self._state.board))

    def is_cell_empty(self, index):
        """
        true if index valid and cell blank
        """
        if _valid_index(index):
            return self._state.board[index] is Mark.EMPTY
        return False

    def legal_moves(self):
        if self._state.is_over:
            return []
        return empty_cells(self._state.board)

    # ------------------------------------------------------------------
    # mutation
    # ------------------------------------------------------------------

    def apply_move(self, index):
        """
        place the current player's mark, check result
        returns: MoveResult, state untouched when status is INVALID
        """
        state = self._state
        if not _valid_index(index):
            return _invalid(index, EngineError.INVALID_INDEX)
        if state.is_over:
            return _invalid(index, EngineError.GAME_ALREADY_OVER)
        if state.board[index] is not Mark.EMPTY:
            return _invalid(index, EngineError.CELL_OCCUPIED)

        player = state.current_player
        state.board[index] = player
        logger.debug("%s -> cell %d", player.value, index)

        outcome = derive_outcome(state.board)
        if isinstance(outcome, Win):
            # current_player stays on the winner
            state.is_over = True; state.outcome = outcome
            logger.debug("%s wins on %s", player.value, outcome.line)
            return MoveResult(MoveStatus.WIN, index, player, outcome.line)
        if outcome == DRAW:
            state.is_over = True; state.outcome = DRAW
            logger.debug("board full, draw")
            return MoveResult(MoveStatus.DRAW, index)

        state.current_player = player.other()
        return MoveResult(MoveStatus.CONTINUE, index, state.current_player)

    def reset(self):
        """
        back to fresh state
        """
        self._state = GameState()
        logger.debug("game reset")

    # ------------------------------------------------------------------
    # suspend / resume
    # ------------------------------------------------------------------

    def snapshot(self):
        state = self._state
        return SerializedState(
            board=tuple(state.board),
            current_player=state.current_player,
            is_over=state.is_over,
        )

    def restore(self, saved):
        """
        replace state from a SerializedState or its dict form
        outcome, game over flag and player are re-derived from the board
        """
        try:
            if isinstance(saved, SerializedState):
                record = saved.validate()
            elif isinstance(saved, Mapping):
                record = SerializedState.from_dict(saved)
            else:
                raise SnapshotFormatError(
                    f"cannot restore from {type(saved).__name__}")
        except SnapshotFormatError as exc:
            logger.warning("rejected snapshot: %s", exc)
            return RestoreResult(EngineError.INVALID_STATE)

        board = list(record.board)
        outcome = derive_outcome(board)
        is_over = outcome is not None
        if isinstance(outcome, Win):
            player = outcome.player
        elif outcome == DRAW:
            player = Mark.A       # ninth move is always A's
        else:
            player = Mark.A if (BOARD_CELLS - len(empty_cells(board))) % 2 == 0 else Mark.B

        if is_over != record.is_over or player is not record.current_player:
            logger.warning(
                "snapshot claims player=%s over=%s, board says player=%s over=%s",
                record.current_player.value, record.is_over, player.value, is_over)

        self._state = GameState(board, player, is_over, outcome)
        return RestoreResult()


def _valid_index(index):
    # bool is an int subclass, not a cell number
    return (isinstance(index, int) and not isinstance(index, bool)
            and 0 <= index < BOARD_CELLS)
