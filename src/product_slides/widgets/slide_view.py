"""Single-product slide widget implementing the RenderSink contract."""

import logging
from typing import Optional, TYPE_CHECKING

from PyQt6.QtCore import QLocale, Qt
from PyQt6.QtGui import QDoubleValidator, QPixmap
from PyQt6.QtWidgets import (
    QCheckBox, QFormLayout, QGraphicsOpacityEffect, QHBoxLayout, QLabel,
    QLineEdit, QPushButton, QVBoxLayout, QWidget,
)

from product_slides.models import EditValues
from product_slides.protocols import ImageDisplay, ImageLoadState, PyQtWidgetMeta, RenderSink
from product_slides.services.image_sequencer import PLACEHOLDER_IMAGE
from product_slides.services.signal_service import SignalService

if TYPE_CHECKING:
    from product_slides.services.catalog_session import CatalogSession

logger = logging.getLogger(__name__)

# --- Module-level constants ---
IMAGE_SIZE = 320
STATUS_COLOR = "#1a4d8c"
MAX_PRICE = 1e12


def placeholder_pixmap() -> QPixmap:
    """Render the inline SVG placeholder. Null pixmap if SVG support is missing."""
    _, _, svg = PLACEHOLDER_IMAGE.partition(",")
    pixmap = QPixmap()
    pixmap.loadFromData(svg.encode("utf-8"), "SVG")
    return pixmap


class SlideView(QWidget, RenderSink, metaclass=PyQtWidgetMeta):
    """
    Slide view for one product at a time.

    Usage:
        view = SlideView()
        session = CatalogSession(view, clipboard=QtClipboardSink())
        view.bind(session)
        session.load("data.json")
        view.show()
    """

    def __init__(self, parent=None):
        super().__init__(parent)
        self._session: Optional['CatalogSession'] = None
        self._setup_ui()
        self._set_editing_enabled(False)

    def _setup_ui(self):
        layout = QVBoxLayout(self)

        self._title_label = QLabel("Loading products...")
        self._title_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._title_label.setWordWrap(True)
        font = self._title_label.font()
        font.setPointSize(font.pointSize() + 4)
        font.setBold(True)
        self._title_label.setFont(font)
        layout.addWidget(self._title_label)

        # Image area with loading indicator
        self._image_label = QLabel()
        self._image_label.setFixedSize(IMAGE_SIZE, IMAGE_SIZE)
        self._image_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._opacity = QGraphicsOpacityEffect(self._image_label)
        self._opacity.setOpacity(1.0)
        self._image_label.setGraphicsEffect(self._opacity)
        self._loading_label = QLabel("Loading image...")
        self._loading_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._loading_label.setVisible(False)
        layout.addWidget(self._image_label, alignment=Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._loading_label)

        # Editable fields
        form = QFormLayout()
        self._price_edit = QLineEdit()
        self._price_edit.setPlaceholderText("Price (PKR)")
        validator = QDoubleValidator(0.0, MAX_PRICE, 2, self._price_edit)
        validator.setNotation(QDoubleValidator.Notation.StandardNotation)
        # parse_price only understands "." decimals, whatever the system locale
        price_locale = QLocale.c()
        price_locale.setNumberOptions(QLocale.NumberOption.RejectGroupSeparator)
        validator.setLocale(price_locale)
        self._price_edit.setValidator(validator)
        form.addRow("Price:", self._price_edit)

        self._not_available_check = QCheckBox("Not available")
        form.addRow("", self._not_available_check)

        self._note_edit = QLineEdit()
        self._note_edit.setPlaceholderText("Additional note")
        form.addRow("Note:", self._note_edit)
        layout.addLayout(form)

        self._position_label = QLabel("")
        self._position_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._position_label)

        # Navigation
        buttons = QHBoxLayout()
        self._prev_btn = QPushButton("◀ Previous")
        self._next_btn = QPushButton("Next ▶")
        self._copy_btn = QPushButton("Copy All")
        buttons.addWidget(self._prev_btn)
        buttons.addWidget(self._copy_btn)
        buttons.addWidget(self._next_btn)
        layout.addLayout(buttons)

        self._status_label = QLabel("")
        self._status_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._status_label.setStyleSheet(f"color: {STATUS_COLOR};")
        layout.addWidget(self._status_label)

    def _set_editing_enabled(self, enabled: bool):
        for widget in (self._price_edit, self._not_available_check, self._note_edit,
                       self._prev_btn, self._next_btn, self._copy_btn):
            widget.setEnabled(enabled)

    # ========== SESSION WIRING ==========

    def bind(self, session: 'CatalogSession') -> None:
        """Connect user input to session commands."""
        self._session = session
        self._prev_btn.clicked.connect(session.previous)
        self._next_btn.clicked.connect(session.next)
        self._copy_btn.clicked.connect(session.copy_all)
        self._price_edit.textChanged.connect(lambda _text: session.on_edit())
        self._not_available_check.toggled.connect(lambda _checked: session.on_edit())
        self._note_edit.textChanged.connect(lambda _text: session.on_edit())

    # ========== RenderSink ==========

    def show_product(self, title: str, values: EditValues, position: str) -> None:
        self._title_label.setText(title)
        self.set_edit_values(values)
        self._position_label.setText(position)
        self._set_editing_enabled(True)

    def show_image(self, display: ImageDisplay) -> None:
        self._loading_label.setVisible(display.loading)
        self._image_label.setToolTip(display.alt_text)
        self._image_label.setAccessibleName(display.alt_text)

        if display.state == ImageLoadState.LOADED and display.image is not None:
            pixmap = QPixmap.fromImage(display.image).scaled(
                IMAGE_SIZE, IMAGE_SIZE,
                Qt.AspectRatioMode.KeepAspectRatio,
                Qt.TransformationMode.SmoothTransformation,
            )
            self._image_label.setPixmap(pixmap)
        elif display.state == ImageLoadState.FAILED:
            pixmap = placeholder_pixmap()
            if pixmap.isNull():
                self._image_label.clear()
                self._image_label.setText(display.alt_text or "Image unavailable")
            else:
                self._image_label.setPixmap(pixmap)
        elif display.state == ImageLoadState.IDLE:
            self._image_label.clear()

        self._opacity.setOpacity(display.opacity)

    def show_message(self, text: str) -> None:
        self._title_label.setText(text)
        self._position_label.setText("")
        self.set_edit_values(EditValues())
        self._image_label.clear()
        self._loading_label.setVisible(False)
        self._set_editing_enabled(False)

    def set_status(self, text: str) -> None:
        self._status_label.setText(text)

    def read_edit_values(self) -> EditValues:
        return EditValues(
            price_text=self._price_edit.text(),
            not_available=self._not_available_check.isChecked(),
            note_text=self._note_edit.text(),
        )

    def set_edit_values(self, values: EditValues) -> None:
        with SignalService.block_signals(self._price_edit, self._not_available_check, self._note_edit):
            self._price_edit.setText(values.price_text)
            self._not_available_check.setChecked(values.not_available)
            self._note_edit.setText(values.note_text)

    # ========== ACCESSORS ==========

    @property
    def title_text(self) -> str:
        return self._title_label.text()

    @property
    def position_text(self) -> str:
        return self._position_label.text()

    @property
    def status_text(self) -> str:
        return self._status_label.text()

    @property
    def is_loading(self) -> bool:
        return not self._loading_label.isHidden()

    def closeEvent(self, event):
        """Cleanup on close."""
        if self._session is not None:
            self._session.shutdown()
        super().closeEvent(event)
