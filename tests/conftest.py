"""Shared fixtures for the engine and presentation tests."""

import os

import pytest

# Qt widgets are created without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from tictactoe_engine.game_logic import GameEngine


def play(engine, moves):
    """Apply a sequence of cell indices and return the last result."""

    result = None
    for index in moves:
        result = engine.apply_move(index)
        assert result.ok, f"move {index} rejected: {result.error}"
    return result


@pytest.fixture
def engine() -> GameEngine:
    return GameEngine()


@pytest.fixture(scope="session")
def qapp():
    """Single QApplication for the whole session; skips when Qt is unavailable."""

    widgets = pytest.importorskip("PySide6.QtWidgets")
    app = widgets.QApplication.instance() or widgets.QApplication([])
    yield app
