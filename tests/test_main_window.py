"""Tests for the Qt window wiring (offscreen platform)."""

import pytest

from tictactoe_engine.board import Mark


@pytest.fixture
def window(qapp):
    from tictactoe_engine.ui.main_window import TicTacToeWindow

    win = TicTacToeWindow()
    yield win
    win.close()
    win.deleteLater()


def _click(win, *cells):
    for idx in cells:
        win.board_widget.cell_clicked.emit(idx)


def test_fresh_window_labels(window) -> None:
    assert window.turn_label.text() == "Player X's turn"
    assert window.message_label.text() == ""


def test_clicks_alternate_turn_indicator(window) -> None:
    _click(window, 4)

    assert window.engine.board[4] is Mark.A
    assert window.turn_label.text() == "Player O's turn"


def test_taken_cell_is_ignored(window) -> None:
    _click(window, 4, 4)

    assert window.engine.move_count == 1
    assert window.turn_label.text() == "Player O's turn"


def test_win_keeps_winner_in_turn_indicator(window) -> None:
    _click(window, 0, 3, 1, 4, 2)

    assert window.message_label.text() == "Player X wins!"
    assert window.turn_label.text() == "Player X's turn"
    assert window.board_widget._accept_clicks is False


def test_draw_message(window) -> None:
    _click(window, 0, 1, 2, 4, 3, 5, 7, 6, 8)

    assert window.message_label.text() == "It's a draw!"


def test_restart_clears_board(window) -> None:
    _click(window, 0, 3, 1, 4, 2)
    window.reset_button.click()

    assert window.engine.move_count == 0
    assert window.message_label.text() == ""
    assert window.board_widget._accept_clicks is True


def test_recreate_window_restores_state(window) -> None:
    from tictactoe_engine.ui.main_window import recreate_window

    _click(window, 0, 3, 1, 4, 2)
    new_window = recreate_window(window)
    try:
        assert new_window is not window
        assert new_window.engine.board == window.engine.board
        assert new_window.engine.winning_line == (0, 1, 2)
        assert new_window.message_label.text() == "Player X wins!"
        assert new_window.board_widget._accept_clicks is False
    finally:
        new_window.close()
        new_window.deleteLater()


def test_bad_saved_state_falls_back_to_fresh_game(qapp) -> None:
    from tictactoe_engine.ui.main_window import TicTacToeWindow

    win = TicTacToeWindow(saved_state={"board": ["Z"], "currentPlayer": "A", "isOver": False})
    try:
        assert win.engine.move_count == 0
        assert win.turn_label.text() == "Player X's turn"
    finally:
        win.close()
        win.deleteLater()


def test_board_widget_maps_points_to_cells(qapp) -> None:
    from tictactoe_engine.game_logic import GameEngine
    from tictactoe_engine.ui.board_widget import BoardWidget

    widget = BoardWidget(GameEngine())
    widget.resize(300, 300)

    assert widget.cell_at(150, 150) == 4
    assert widget.cell_at(10, 290) == 6
    assert widget.cell_at(299, 0) == 2
    assert widget.cell_at(-5, 10) is None
    widget.deleteLater()


def test_board_widget_paints_without_error(window) -> None:
    _click(window, 0, 3, 1, 4, 2)
    window.board_widget.resize(200, 200)

    pixmap = window.board_widget.grab()
    assert not pixmap.isNull()
