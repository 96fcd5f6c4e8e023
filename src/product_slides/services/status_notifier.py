"""Transient status messages with a trailing clear timer."""

import logging
from PyQt6.QtCore import QObject, QTimer, pyqtSignal

logger = logging.getLogger(__name__)

# --- Module-level constants ---
DEFAULT_DURATION_MS = 3000


class StatusNotifier(QObject):
    """
    Shows one status message at a time.

    Each show() overwrites the displayed text immediately and restarts the
    clear timer, so the last call wins both the content and the deadline.

    Usage:
        notifier = StatusNotifier()
        notifier.message_changed.connect(status_label.setText)
        notifier.show("Saved", 2000)
    """

    message_changed = pyqtSignal(str)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._message = ""
        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.timeout.connect(self.clear)

    @property
    def message(self) -> str:
        return self._message

    @property
    def is_pending(self) -> bool:
        """True while a clear is scheduled."""
        return self._timer.isActive()

    def show(self, message: str, duration_ms: int = DEFAULT_DURATION_MS) -> None:
        """Replace the current message and restart the clear timer."""
        self._timer.start(max(0, int(duration_ms)))
        self._set_message(message)

    def clear(self) -> None:
        """Clear the message. Safe to call repeatedly."""
        self._timer.stop()
        self._set_message("")

    def _set_message(self, message: str) -> None:
        if message == self._message:
            return
        self._message = message
        if message:
            logger.debug(f"Status: {message}")
        self.message_changed.emit(message)
