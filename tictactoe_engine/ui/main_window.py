import logging

from ..game_logic import GameEngine, MoveStatus
from ..ui.board_widget import BoardWidget

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QMenuBar, QMenu, QSizePolicy
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, Signal, Slot

logger = logging.getLogger(__name__)

WINDOW_TITLE = "Tic-Tac-Toe"


def turn_text(player):
    return f"Player {player.label}'s turn"


def status_text(engine):
    """
    message for a finished game, empty while in progress
    """
    if engine.winner is not None:
        return f"Player {engine.winner.label} wins!"
    if engine.is_over:
        return "It's a draw!"
    return ""


class TicTacToeWindow(QMainWindow):
    """
    single screen: turn indicator, board, status message, restart
    """
    recreate_requested = Signal()   # ask the owner for a fresh window

    def __init__(self, saved_state=None):
        """
        init engine (restored if saved_state given), ui widgets, signals
        """
        super().__init__()
        self.engine = GameEngine()
        if saved_state is not None:
            result = self.engine.restore(saved_state)
            if not result.ok:
                # fall back to a fresh game
                logger.warning("could not restore window state: %s", result.error.value)
        self.board_widget = BoardWidget(self.engine, parent=self)
        self._setup_ui()
        self._refresh_from_engine()

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle(WINDOW_TITLE)
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()            # top menu
        self.turn_label = QLabel("")
        f = QFont(); f.setPointSize(14); f.setBold(True); self.turn_label.setFont(f)
        self.turn_label.setAlignment(Qt.AlignCenter)
        self.main_layout.addWidget(self.turn_label)
        self.main_layout.addWidget(self.board_widget, 1)
        self.board_widget.cell_clicked.connect(self._on_cell_clicked)

        self._create_bottom_controls()     # status + restart
        self.main_layout.addWidget(self.controls_bottom_widget)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        new_action = QAction("New Game", self)
        new_action.triggered.connect(self.reset_game)
        recreate_action = QAction("Recreate Window", self)
        recreate_action.triggered.connect(self._request_recreate)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        for act in (new_action, recreate_action): game_menu.addAction(act)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_bottom_controls(self):
        # status label + restart button
        self.controls_bottom_widget = QWidget()
        hl = QHBoxLayout(self.controls_bottom_widget)
        self.message_label = QLabel("")
        f = QFont(); f.setPointSize(12); self.message_label.setFont(f)
        self.message_label.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
        self.message_label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        self.message_label.setWordWrap(True)
        self.reset_button = QPushButton("Restart"); self.reset_button.clicked.connect(self.reset_game)
        hl.addWidget(self.message_label); hl.addStretch(1); hl.addWidget(self.reset_button)

    def _update_message(self, text, is_success=False):
        # set message text + style
        style = "color: lime; font-weight: bold;" if is_success else ""
        self.message_label.setStyleSheet(style)
        self.message_label.setText(text)

    def _refresh_from_engine(self):
        # repaint everything from engine state (after restore / reset)
        self.turn_label.setText(turn_text(self.engine.current_player))
        self._update_message(status_text(self.engine), is_success=self.engine.is_over)
        self.board_widget.set_accept_clicks(not self.engine.is_over)
        self.board_widget.update()

    @Slot(int)
    def _on_cell_clicked(self, index):
        res = self.engine.apply_move(index)
        if not res.ok:
            # taps on taken cells or after game over are ignored
            logger.debug("ignored tap on %s: %s", index, res.error.value)
            return
        self.board_widget.update()
        if res.status is MoveStatus.CONTINUE:
            self.turn_label.setText(turn_text(res.player))
            return
        # win keeps the turn indicator on the winner
        self.board_widget.set_accept_clicks(False)
        self._update_message(status_text(self.engine), is_success=True)

    @Slot()
    def reset_game(self):
        self.engine.reset()
        self._refresh_from_engine()

    def save_instance_state(self):
        """
        record to hand back to a new window after teardown
        """
        return self.engine.snapshot().to_dict()

    @Slot()
    def _request_recreate(self):
        self.recreate_requested.emit()


def recreate_window(window):
    """
    tear a window down and build a new one from its saved state
    """
    saved = window.save_instance_state()
    geometry = window.saveGeometry()
    window.close(); window.deleteLater()
    new_window = TicTacToeWindow(saved_state=saved)
    new_window.restoreGeometry(geometry)
    logger.info("window recreated (%s moves restored)", new_window.engine.move_count)
    return new_window
