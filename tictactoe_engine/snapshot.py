"""
serialized game record that survives a suspend/resume cycle

logical shape:
    {"version": 1, "board": ["_", "A", ...9 cells], "currentPlayer": "A", "isOver": false}
"""
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from .board import BOARD_CELLS, Mark

SNAPSHOT_VERSION = 1

KEY_VERSION = "version"
KEY_BOARD = "board"
KEY_PLAYER = "currentPlayer"
KEY_GAME_OVER = "isOver"


class SnapshotFormatError(ValueError):
    """
    record does not have the expected shape
    """


def _parse_mark(value, allowed):
    # accept Mark members or their symbols
    if isinstance(value, Mark):
        mark = value
    elif isinstance(value, str):
        try:
            mark = Mark(value)
        except ValueError:
            raise SnapshotFormatError(f"unknown cell symbol {value!r}") from None
    else:
        raise SnapshotFormatError(f"cell value must be a symbol, got {type(value).__name__}")
    if mark not in allowed:
        raise SnapshotFormatError(f"{mark.value!r} not allowed here")
    return mark


def _parse_board(cells):
    if isinstance(cells, (str, bytes)) or not isinstance(cells, Sequence):
        raise SnapshotFormatError("board must be a sequence of cells")
    if len(cells) != BOARD_CELLS:
        raise SnapshotFormatError(f"board must have {BOARD_CELLS} cells, got {len(cells)}")
    return tuple(_parse_mark(c, tuple(Mark)) for c in cells)


@dataclass(frozen=True)
class SerializedState:
    """
    immutable copy of board, player to move (or last mover) and game over flag
    """
    board: tuple
    current_player: Mark
    is_over: bool
    version: int = SNAPSHOT_VERSION

    def validate(self):
        """
        re-check a record built by hand
        returns: normalized copy, raises SnapshotFormatError
        """
        if self.version != SNAPSHOT_VERSION:
            raise SnapshotFormatError(f"unsupported snapshot version {self.version!r}")
        if not isinstance(self.is_over, bool):
            raise SnapshotFormatError("isOver must be a boolean")
        return SerializedState(
            board=_parse_board(self.board),
            current_player=_parse_mark(self.current_player, (Mark.A, Mark.B)),
            is_over=self.is_over,
            version=self.version,
        )

    def to_dict(self):
        return {
            KEY_VERSION: self.version,
            KEY_BOARD: [cell.value for cell in self.board],
            KEY_PLAYER: self.current_player.value,
            KEY_GAME_OVER: self.is_over,
        }

    @classmethod
    def from_dict(cls, data):
        """
        parse the logical record, raises SnapshotFormatError on bad input
        """
        if not isinstance(data, Mapping):
            raise SnapshotFormatError("snapshot must be a mapping")
        missing = [k for k in (KEY_BOARD, KEY_PLAYER, KEY_GAME_OVER) if k not in data]
        if missing:
            raise SnapshotFormatError(f"snapshot missing keys: {', '.join(missing)}")
        version = data.get(KEY_VERSION, SNAPSHOT_VERSION)
        if isinstance(version, bool) or not isinstance(version, int):
            raise SnapshotFormatError("version must be an integer")
        state = cls(
            board=data[KEY_BOARD],
            current_player=data[KEY_PLAYER],
            is_over=data[KEY_GAME_OVER],
            version=version,
        )
        return state.validate()
