"""pytest configuration and fixtures for product-slides tests."""

import os
import time

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt6.QtCore import QCoreApplication
from PyQt6.QtWidgets import QApplication

from product_slides.protocols import AlertSink, AppConfig, ClipboardSink, set_app_config


@pytest.fixture(scope="session")
def qapp():
    """Create QApplication instance for tests."""
    app = QApplication.instance() or QApplication([])
    yield app
    # Don't quit - may cause issues with other tests


@pytest.fixture(autouse=True)
def default_config():
    """Every test starts from the default configuration."""
    set_app_config(AppConfig())
    yield
    set_app_config(AppConfig())


def wait_until(predicate, timeout=2.0):
    """Pump the Qt event loop until predicate() is true or timeout expires."""
    deadline = time.monotonic() + timeout
    while not predicate():
        if time.monotonic() > deadline:
            return False
        QCoreApplication.processEvents()
        time.sleep(0.005)
    return True


class FakeTaskManager:
    """Records background runs so tests resolve them in any order."""

    def __init__(self):
        self.calls = []
        self.cleaned = False

    def run(self, target, args=(), kwargs=None, generation=0, on_success=None, on_error=None):
        self.calls.append({
            "target": target,
            "args": args,
            "kwargs": kwargs or {},
            "generation": generation,
            "on_success": on_success,
            "on_error": on_error,
        })

    def succeed(self, index, result):
        call = self.calls[index]
        call["on_success"](call["generation"], result)

    def fail(self, index, error):
        call = self.calls[index]
        call["on_error"](call["generation"], error)

    def cleanup(self):
        self.cleaned = True


class RecordingClipboard(ClipboardSink):
    def __init__(self):
        self.texts = []

    def write_text(self, text):
        self.texts.append(text)


class RecordingAlerts(AlertSink):
    def __init__(self):
        self.alerts = []

    def alert(self, text):
        self.alerts.append(text)


@pytest.fixture
def task_manager():
    return FakeTaskManager()


@pytest.fixture
def raw_items():
    return [
        {"id": "p1", "title": "Pen", "image": "pen.png", "price": 10},
        {"id": "p2", "title": "Cup", "image": "cup.png", "price": None,
         "isAvailable": False, "note": "chipped"},
        {"id": "p3", "title": "Mug", "image": "mug.png", "price": 250.5},
    ]
