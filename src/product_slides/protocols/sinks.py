"""
Sink ABC contracts for the catalog session.

The session never touches widgets, the clipboard or dialogs directly. It
talks to these contracts, so the Qt view and headless recorders are
interchangeable.

Design Philosophy:
- Explicit inheritance over duck typing
- Fail-loud over fail-silent
"""

from abc import ABC, ABCMeta, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from PyQt6.QtCore import QObject

from product_slides.models import EditValues


# PyQt-specific metaclass that combines ABCMeta with Qt's metaclass
_QtMetaclass = type(QObject)


class PyQtWidgetMeta(_QtMetaclass, ABCMeta):
    """Metaclass for PyQt widgets that implement sink ABCs."""
    pass


class ImageLoadState(Enum):
    """States of the per-navigation image load."""
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


@dataclass(frozen=True)
class ImageDisplay:
    """
    Everything the render sink needs to draw the image area.

    ``image`` is a QImage for LOADED, otherwise None. On FAILED,
    ``source`` is the placeholder reference instead of the record's image.
    """
    state: ImageLoadState
    source: str = ""
    alt_text: str = ""
    image: Optional[Any] = None
    loading: bool = False
    opacity: float = 1.0


class RenderSink(ABC):
    """
    ABC for anything that displays the current slide.

    Holds the editable widgets, so it is also where pending edits live.
    """

    @abstractmethod
    def show_product(self, title: str, values: EditValues, position: str) -> None:
        """
        Display a record.

        Args:
            title: Record title
            values: Editable field values mirroring the stored record
            position: Position label, e.g. "Product 2 of 5"
        """
        pass

    @abstractmethod
    def show_image(self, display: ImageDisplay) -> None:
        """Update the image area."""
        pass

    @abstractmethod
    def show_message(self, text: str) -> None:
        """Show a terminal message in place of a product (no data / load error)."""
        pass

    @abstractmethod
    def set_status(self, text: str) -> None:
        """Display transient status text. Empty string clears it."""
        pass

    @abstractmethod
    def read_edit_values(self) -> EditValues:
        """Return the live values of the editable fields."""
        pass

    @abstractmethod
    def set_edit_values(self, values: EditValues) -> None:
        """Overwrite the editable fields without triggering edit callbacks."""
        pass


class ClipboardSink(ABC):
    """ABC for clipboard backends."""

    @abstractmethod
    def write_text(self, text: str) -> None:
        """
        Place text on the clipboard.

        Raises:
            ExportSinkError: If the clipboard is unavailable or refuses the write
        """
        pass


class AlertSink(ABC):
    """ABC for blocking acknowledgment prompts."""

    @abstractmethod
    def alert(self, text: str) -> None:
        """Show text and block until the user acknowledges it."""
        pass
