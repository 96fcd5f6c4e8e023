"""Qt-backed clipboard and alert sinks."""

import logging
from typing import Optional

from PyQt6.QtGui import QClipboard, QGuiApplication
from PyQt6.QtWidgets import QMessageBox, QWidget

from product_slides.io.exceptions import ExportSinkError
from product_slides.protocols import AlertSink, ClipboardSink

logger = logging.getLogger(__name__)


class QtClipboardSink(ClipboardSink):
    """Writes text to the system clipboard and verifies it stuck."""

    def __init__(self, clipboard: Optional[QClipboard] = None):
        self._clipboard = clipboard

    def _resolve_clipboard(self) -> QClipboard:
        if self._clipboard is not None:
            return self._clipboard
        if QGuiApplication.instance() is None:
            raise ExportSinkError("No running Qt application; clipboard unavailable")
        clipboard = QGuiApplication.clipboard()
        if clipboard is None:
            raise ExportSinkError("Clipboard is not supported in this environment")
        return clipboard

    def write_text(self, text: str) -> None:
        clipboard = self._resolve_clipboard()
        clipboard.setText(text)
        if clipboard.text() != text:
            raise ExportSinkError("Clipboard rejected the text")
        logger.debug(f"Copied {len(text)} characters to clipboard")


class MessageBoxAlertSink(AlertSink):
    """Blocking acknowledgment via QMessageBox."""

    def __init__(self, parent: Optional[QWidget] = None, title: str = "Product Slides"):
        self._parent = parent
        self._title = title

    def alert(self, text: str) -> None:
        QMessageBox.information(self._parent, self._title, text)


class LoggingAlertSink(AlertSink):
    """Non-blocking alert for headless use; records and logs each alert."""

    def __init__(self):
        self.alerts = []

    def alert(self, text: str) -> None:
        self.alerts.append(text)
        logger.info(f"Alert: {text}")
