"""
Change Detector / Autosave.

Reconciles the live edit widgets into the current record, writing only when
a normalized value actually differs from what is stored.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from product_slides.models import EditValues, ProductRecord, parse_price
from product_slides.protocols import get_app_config
from product_slides.services.catalog_store import CatalogStore
from product_slides.services.status_notifier import StatusNotifier

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NormalizedEdit:
    """Edit values converted to the stored representation."""
    price: Optional[float]
    is_available: bool
    note: str

    def differs_from(self, record: ProductRecord) -> bool:
        """Field-by-field value comparison against a stored record."""
        return (
            self.price != record.price
            or self.is_available != record.is_available
            or self.note != record.note
        )


def normalize_edit(values: EditValues, record: ProductRecord) -> NormalizedEdit:
    """
    Convert raw widget values into stored form.

    Price text that is not a finite number leaves the stored price untouched.
    """
    try:
        price = parse_price(values.price_text)
    except ValueError:
        logger.debug(f"Ignoring unparseable price {values.price_text!r} for {record.id}")
        price = record.price
    return NormalizedEdit(
        price=price,
        is_available=not values.not_available,
        note=(values.note_text or "").strip(),
    )


class ChangeDetector:
    """
    Autosave rule for the current record.

    Usage:
        detector = ChangeDetector(store, notifier)
        detector.flush(view.read_edit_values(), interactive=True)   # on input
        detector.flush(view.read_edit_values(), interactive=False)  # before navigating
    """

    def __init__(self, store: CatalogStore, notifier: Optional[StatusNotifier] = None):
        self._store = store
        self._notifier = notifier

    def flush(self, values: EditValues, interactive: bool = False) -> bool:
        """
        Commit values to the current record if anything changed.

        All three fields are written together. In interactive mode a
        confirmation naming the record is shown; silent mode writes quietly.

        Returns:
            True if a write happened.
        """
        record = self._store.current_record()
        if record is None:
            return False

        edit = normalize_edit(values, record)
        if not edit.differs_from(record):
            return False

        self._store.apply_edit(edit.price, edit.is_available, edit.note)
        logger.info(
            f"Updated product {record.id}: price={record.price}, "
            f"is_available={record.is_available}, note={record.note!r}"
        )

        if interactive and self._notifier is not None:
            self._notifier.show(
                f'Data for "{record.title}" updated!',
                get_app_config().update_status_ms,
            )
        return True
