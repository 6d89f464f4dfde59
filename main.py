import argparse
import logging
import os
import sys

# -----------------------------------------------------------------------------
# COLOR CONSTANTS
# -----------------------------------------------------------------------------

WINDOW_COLOR = "#353535"
WINDOW_TEXT_COLOR = "#ffffff"
BASE_COLOR = "#232323"
ALT_BASE_COLOR = "#353535"
TEXT_COLOR = "#ffffff"
BUTTON_COLOR = "#424242"
BUTTON_TEXT_COLOR = "#ffffff"
HIGHLIGHT_COLOR = "#2a82da"
HIGHLIGHTED_TEXT_COLOR = "#ffffff"

DISABLED_TEXT_COLOR = "#7f7f7f"

# -----------------------------------------------------------------------------
# LOGGING
# -----------------------------------------------------------------------------

def configure_logging(level=None):
    """
    root logger at LOG_LEVEL (default INFO)
    """
    if level is None:
        level = os.getenv("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

# -----------------------------------------------------------------------------
# PALETTE SETUP
# -----------------------------------------------------------------------------

def apply_default_palette(app):
    """
    Apply the default dark theme palette using predefined constants.
    """
    from PySide6.QtGui import QPalette, QColor

    palette = QPalette()
    roles = {
        QPalette.Window: WINDOW_COLOR,
        QPalette.WindowText: WINDOW_TEXT_COLOR,
        QPalette.Base: BASE_COLOR,
        QPalette.AlternateBase: ALT_BASE_COLOR,
        QPalette.Text: TEXT_COLOR,
        QPalette.Button: BUTTON_COLOR,
        QPalette.ButtonText: BUTTON_TEXT_COLOR,
        QPalette.Highlight: HIGHLIGHT_COLOR,
        QPalette.HighlightedText: HIGHLIGHTED_TEXT_COLOR,
    }
    for role, color in roles.items():
        palette.setColor(role, QColor(color))
    # disabled roles
    for role in (QPalette.Text, QPalette.ButtonText, QPalette.WindowText):
        palette.setColor(QPalette.Disabled, role, QColor(DISABLED_TEXT_COLOR))
    app.setPalette(palette)

# -----------------------------------------------------------------------------
# ENTRY POINT
# -----------------------------------------------------------------------------

def run_gui(argv):
    from PySide6.QtWidgets import QApplication
    from tictactoe_engine.ui.main_window import TicTacToeWindow, recreate_window

    app = QApplication(argv)
    app.setStyle('Fusion')
    apply_default_palette(app)

    holder = {}

    def show(window):
        # keep a reference, old one is torn down by recreate_window
        window.recreate_requested.connect(lambda: show(recreate_window(holder["window"])))
        holder["window"] = window
        window.show()

    show(TicTacToeWindow())
    return app.exec()


def main(argv=None):
    parser = argparse.ArgumentParser(description="Two-player Tic-Tac-Toe")
    parser.add_argument(
        "--console",
        action="store_true",
        help="play in the terminal instead of a window"
    )
    args, qt_args = parser.parse_known_args(argv)
    configure_logging()

    if args.console:
        from tictactoe_engine.console import ConsoleGame
        ConsoleGame().run()
        return 0
    return run_gui([sys.argv[0]] + qt_args)


if __name__ == '__main__':
    sys.exit(main())
