"""
Catalog Store.

Owns the ordered list of product records and the current-index cursor.
All reads and writes of records go through this object.
"""

import logging
import threading
from typing import Any, Iterable, List, Optional

from product_slides.io.exceptions import CatalogLoadError
from product_slides.models import ProductRecord, normalize_item

logger = logging.getLogger(__name__)


class CatalogStore:
    """
    Ordered catalog plus a wraparound cursor.

    Every mutation is serialized behind one lock, so the store stays
    consistent even if a caller drives it from more than one thread.
    """

    def __init__(self):
        self._lock = threading.RLock()
        self._records: List[ProductRecord] = []
        self._cursor = 0

    # ========== READ ACCESS ==========

    def __len__(self) -> int:
        return len(self._records)

    @property
    def is_empty(self) -> bool:
        return not self._records

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def records(self) -> List[ProductRecord]:
        """Snapshot of the records in display order."""
        with self._lock:
            return list(self._records)

    def current_record(self) -> Optional[ProductRecord]:
        """Record at the cursor, or None when the catalog is empty."""
        with self._lock:
            if not self._records:
                return None
            return self._records[self._cursor]

    def position_label(self) -> str:
        """Human readable cursor position, e.g. "Product 2 of 5"."""
        with self._lock:
            if not self._records:
                return ""
            return f"Product {self._cursor + 1} of {len(self._records)}"

    # ========== MUTATION ==========

    def load(self, raw_items: Iterable[Any]) -> None:
        """
        Normalize and replace the catalog, resetting the cursor to 0.

        Raises:
            CatalogLoadError: If raw_items is empty or any item is malformed.
                The catalog is left empty in that case.
        """
        with self._lock:
            self._records = []
            self._cursor = 0
            items = list(raw_items)
            if not items:
                raise CatalogLoadError("No products found")
            records = [normalize_item(item, index) for index, item in enumerate(items)]
            self._records = records
            logger.info(f"Loaded {len(records)} products")

    def clear(self) -> None:
        """Empty the catalog."""
        with self._lock:
            self._records = []
            self._cursor = 0

    def seek(self, delta: int) -> Optional[ProductRecord]:
        """
        Move the cursor by delta with wraparound.

        Any delta lands in [0, len) via modulo arithmetic. No-op when empty.

        Returns:
            The new current record, or None when the catalog is empty.
        """
        with self._lock:
            if not self._records:
                return None
            self._cursor = (self._cursor + delta) % len(self._records)
            return self._records[self._cursor]

    def apply_edit(self, price: Optional[float], is_available: bool, note: str) -> None:
        """Overwrite the current record's mutable fields unconditionally."""
        with self._lock:
            record = self.current_record()
            if record is None:
                return
            record.price = price
            record.is_available = is_available
            record.note = note
