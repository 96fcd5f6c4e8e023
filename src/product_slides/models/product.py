"""
Product record model and ingestion normalization.

Records are normalized once at load time so the rest of the application
never has to deal with absent keys:
- missing ``isAvailable`` becomes ``True``
- missing ``note`` becomes ``""``
- ``price`` is either ``None`` or a finite float
"""

import logging
import math
from dataclasses import dataclass
from typing import Any, Dict, Optional

from product_slides.io.exceptions import CatalogLoadError

logger = logging.getLogger(__name__)


@dataclass
class ProductRecord:
    """A single catalog entry as stored in the session."""
    id: Any
    title: str
    image: str
    price: Optional[float] = None
    is_available: bool = True
    note: str = ""


@dataclass(frozen=True)
class EditValues:
    """
    Raw values of the editable widgets for the current record.

    ``not_available`` is the checkbox state and is inverted relative to
    ``ProductRecord.is_available``.
    """
    price_text: str = ""
    not_available: bool = False
    note_text: str = ""

    @classmethod
    def from_record(cls, record: ProductRecord) -> 'EditValues':
        """Widget values that exactly mirror a stored record."""
        return cls(
            price_text=format_price_text(record.price),
            not_available=not record.is_available,
            note_text=record.note,
        )


def format_price_text(price: Optional[float]) -> str:
    """Render a stored price for an input field (``10.0`` -> ``"10"``)."""
    if price is None:
        return ""
    if float(price).is_integer():
        return str(int(price))
    return repr(float(price))


def parse_price(text: str) -> Optional[float]:
    """
    Parse price text from an input field.

    Returns None for blank text. Raises ValueError for text that is not a
    finite number.
    """
    stripped = (text or "").strip()
    if stripped == "":
        return None
    value = float(stripped)
    if not math.isfinite(value):
        raise ValueError(f"price must be finite: {stripped!r}")
    return value


def _coerce_source_price(value: Any, index: int) -> Optional[float]:
    if value is None:
        return None
    if isinstance(value, bool):
        raise CatalogLoadError(f"Item {index}: price must be a number, got {value!r}")
    if isinstance(value, (int, float)):
        try:
            price = float(value)
        except OverflowError:
            raise CatalogLoadError(f"Item {index}: price is out of range, got {value!r}") from None
    elif isinstance(value, str):
        try:
            price = parse_price(value)
        except ValueError:
            raise CatalogLoadError(f"Item {index}: price must be a number, got {value!r}") from None
        if price is None:
            return None
    else:
        raise CatalogLoadError(f"Item {index}: price must be a number, got {value!r}")
    if not math.isfinite(price):
        raise CatalogLoadError(f"Item {index}: price must be finite, got {value!r}")
    return price


def _require_text(item: Dict[str, Any], key: str, index: int) -> str:
    value = item.get(key)
    if not isinstance(value, str) or not value.strip():
        raise CatalogLoadError(f"Item {index}: missing or empty '{key}'")
    return value


def normalize_item(item: Any, index: int) -> ProductRecord:
    """
    Convert one raw source item into a ProductRecord.

    Args:
        item: Decoded JSON object with camelCase keys
        index: 0-based position in the source document (used for errors and
            as a fallback id)

    Raises:
        CatalogLoadError: If the item is not an object or violates the record
            invariants (title, image, finite price).
    """
    if not isinstance(item, dict):
        raise CatalogLoadError(f"Item {index}: expected an object, got {type(item).__name__}")

    title = _require_text(item, "title", index)
    image = _require_text(item, "image", index)
    price = _coerce_source_price(item.get("price"), index)

    is_available = item.get("isAvailable")
    if is_available is None:
        is_available = True
    elif not isinstance(is_available, bool):
        raise CatalogLoadError(f"Item {index}: isAvailable must be a boolean, got {is_available!r}")

    note = item.get("note")
    if note is None:
        note = ""
    elif not isinstance(note, str):
        note = str(note)

    return ProductRecord(
        id=item.get("id", index + 1),
        title=title,
        image=image,
        price=price,
        is_available=is_available,
        note=note,
    )
