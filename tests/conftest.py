"""Shared fixtures for the trig_explorer test suite."""

import os

import pytest

# Qt widgets are exercised without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qapp():
    """A QApplication for widget tests; skips when the Qt GUI stack cannot load."""
    QtWidgets = pytest.importorskip("PySide6.QtWidgets")
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app
