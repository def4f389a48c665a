import os
import time

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtCore import QCoreApplication
from PyQt6.QtWidgets import QApplication

from core.models import WindowEntry
from core.registry import InMemoryWindowRegistry
from core.search import WindowSearchController


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


def wait_until(predicate, timeout=2.0):
    """Process Qt events until predicate() is true or timeout seconds pass."""
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        QCoreApplication.processEvents()
        if predicate():
            return True
        time.sleep(0.005)
    QCoreApplication.processEvents()
    return predicate()


@pytest.fixture
def windows():
    return [
        WindowEntry(title="", process_name="x", handle=1),
        WindowEntry(title="Notepad", process_name="notepad", handle=2),
        WindowEntry(title="Visual Studio Code", process_name="Code", handle=3),
        WindowEntry(title="Mozilla Firefox", process_name="firefox", handle=4),
    ]


@pytest.fixture
def registry(qapp, windows):
    return InMemoryWindowRegistry(windows)


@pytest.fixture
def controller(registry):
    controller = WindowSearchController(registry)
    yield controller
    controller.shutdown()
    QCoreApplication.processEvents()
