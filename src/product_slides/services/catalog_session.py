"""
Catalog Session.

The single owner of a slide-editing session: the store, the autosave rule,
the image sequencer and the status notifier. Implements the user commands
(previous, next, edit, copy all) in the order that keeps them consistent:
flush pending edits first, then move the cursor, then re-render and
reload the image.
"""

import logging
from dataclasses import replace
from typing import Any, Iterable, Optional

from product_slides.io import (
    CatalogLoadError,
    ExportSinkError,
    fetch_catalog_document,
    resolve_image_reference,
)
from product_slides.models import EditValues
from product_slides.protocols import AlertSink, ClipboardSink, RenderSink, get_app_config
from product_slides.services.catalog_store import CatalogStore
from product_slides.services.change_detector import ChangeDetector
from product_slides.services.export_formatter import format_catalog
from product_slides.services.image_sequencer import ImageLoadSequencer
from product_slides.services.status_notifier import StatusNotifier

logger = logging.getLogger(__name__)

# --- User-visible messages ---
NO_PRODUCTS_MESSAGE = "No products found."
LOAD_ERROR_MESSAGE = "Error loading data. Check log (Failed to fetch)."
COPY_SUCCESS_STATUS = "Product list copied to clipboard!"
COPY_SUCCESS_ALERT = "Data copied to clipboard and ready to share on WhatsApp!"
COPY_ERROR_MESSAGE = "Error: Could not copy data to clipboard."


class CatalogSession:
    """
    Session context wiring the catalog core to its sinks.

    Usage:
        view = SlideView()
        session = CatalogSession(view, clipboard=QtClipboardSink(),
                                 alerts=MessageBoxAlertSink(view))
        view.bind(session)
        session.load("data.json")
    """

    def __init__(
        self,
        render_sink: RenderSink,
        clipboard: Optional[ClipboardSink] = None,
        alerts: Optional[AlertSink] = None,
        store: Optional[CatalogStore] = None,
        notifier: Optional[StatusNotifier] = None,
        sequencer: Optional[ImageLoadSequencer] = None,
    ):
        self.store = store or CatalogStore()
        self.notifier = notifier or StatusNotifier()
        self.detector = ChangeDetector(self.store, self.notifier)
        self.sequencer = sequencer or ImageLoadSequencer(notifier=self.notifier)
        self._sink = render_sink
        self._clipboard = clipboard
        self._alerts = alerts
        self._source = ""

        self.notifier.message_changed.connect(self._sink.set_status)
        self.sequencer.display_changed.connect(self._sink.show_image)

    # ========== LOADING ==========

    def load(self, source: Optional[str] = None) -> bool:
        """
        Fetch the catalog document and show the first product.

        Returns:
            True if at least one product was loaded. On failure the catalog
            is empty and the sink shows a terminal message.
        """
        source = source or get_app_config().data_source
        try:
            items = fetch_catalog_document(source, timeout=get_app_config().fetch_timeout_s)
        except CatalogLoadError as e:
            logger.error(f"Could not fetch product data: {e}")
            self._enter_empty(LOAD_ERROR_MESSAGE)
            return False
        self._source = source
        return self.load_items(items)

    def load_items(self, raw_items: Iterable[Any]) -> bool:
        """Load already-decoded items. Same failure handling as load()."""
        items = list(raw_items)
        if not items:
            logger.warning("Catalog document contains no products")
            self._enter_empty(NO_PRODUCTS_MESSAGE)
            return False
        try:
            self.store.load(items)
        except CatalogLoadError as e:
            logger.error(f"Malformed product data: {e}")
            self._enter_empty(LOAD_ERROR_MESSAGE)
            return False
        self.show_current()
        return True

    def _enter_empty(self, message: str) -> None:
        self.store.clear()
        self.sequencer.reset()
        self.notifier.clear()
        self._sink.show_message(message)

    # ========== DISPLAY ==========

    def show_current(self) -> None:
        """Render the record at the cursor and start loading its image."""
        record = self.store.current_record()
        if record is None:
            return
        self._sink.show_product(
            record.title,
            EditValues.from_record(record),
            self.store.position_label(),
        )
        self.notifier.clear()
        self.sequencer.request(
            resolve_image_reference(self._source, record.image),
            alt_text=record.title,
        )

    # ========== NAVIGATION ==========

    def navigate(self, delta: int) -> None:
        """Silently save pending edits, move the cursor, re-render."""
        if self.store.is_empty:
            return
        self.detector.flush(self._sink.read_edit_values(), interactive=False)
        self.store.seek(delta)
        self.show_current()

    def previous(self) -> None:
        self.navigate(-1)

    def next(self) -> None:
        self.navigate(1)

    # ========== EDITING ==========

    def on_edit(self) -> bool:
        """Autosave hook for edit widgets. Returns True if a write happened."""
        if self.store.is_empty:
            return False
        return self.detector.flush(self._sink.read_edit_values(), interactive=True)

    def edit_price(self, text: str) -> bool:
        return self._edit(price_text=text)

    def edit_availability(self, not_available: bool) -> bool:
        return self._edit(not_available=not_available)

    def edit_note(self, text: str) -> bool:
        return self._edit(note_text=text)

    def _edit(self, **changes) -> bool:
        if self.store.is_empty:
            return False
        values = replace(self._sink.read_edit_values(), **changes)
        self._sink.set_edit_values(values)
        return self.on_edit()

    # ========== EXPORT ==========

    def export_text(self) -> str:
        """Silently save pending edits, then format the whole catalog."""
        if not self.store.is_empty:
            self.detector.flush(self._sink.read_edit_values(), interactive=False)
        return format_catalog(self.store.records)

    def copy_all(self) -> Optional[str]:
        """
        Copy the formatted catalog to the clipboard.

        Clipboard failures are reported through the status line and an
        alert; the catalog is not affected.

        Returns:
            The exported text, or None when the catalog is empty.
        """
        if self.store.is_empty:
            return None
        text = self.export_text()
        config = get_app_config()
        try:
            if self._clipboard is None:
                raise ExportSinkError("No clipboard configured")
            self._clipboard.write_text(text)
        except ExportSinkError as e:
            logger.error(f"Failed to copy data: {e}")
            self.notifier.show(COPY_ERROR_MESSAGE, config.error_status_ms)
            self._alert(COPY_ERROR_MESSAGE)
        else:
            logger.info(f"Copied {len(self.store)} products to clipboard")
            self.notifier.show(COPY_SUCCESS_STATUS, config.copy_status_ms)
            self._alert(COPY_SUCCESS_ALERT)
        return text

    def _alert(self, text: str) -> None:
        if self._alerts is not None:
            self._alerts.alert(text)

    def shutdown(self) -> None:
        """Stop timers and wait briefly for image threads."""
        self.notifier.clear()
        self.sequencer.shutdown()
