"""
Signal blocking helpers.

Used when the view is populated programmatically, so filling the edit
widgets for a new record never looks like a user edit.
"""

from contextlib import contextmanager
from PyQt6.QtWidgets import QWidget
import logging

logger = logging.getLogger(__name__)


class SignalService:
    """
    Examples:
        # Block signals (context manager):
        with SignalService.block_signals(checkbox):
            checkbox.setChecked(True)

        # Multiple widgets:
        with SignalService.block_signals(price_edit, note_edit):
            price_edit.setText("10")
            note_edit.setText("")
    """

    @staticmethod
    @contextmanager
    def block_signals(*widgets: QWidget):
        """Context manager for blocking widget signals."""
        previous = []
        for widget in widgets:
            if widget is not None:
                previous.append((widget, widget.blockSignals(True)))
                logger.debug(f"Blocked signals on {type(widget).__name__}")

        try:
            yield
        finally:
            for widget, was_blocked in reversed(previous):
                widget.blockSignals(was_blocked)
