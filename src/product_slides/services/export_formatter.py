"""Formats the catalog as a shareable plain-text report."""

from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Optional

from product_slides.models import ProductRecord

# --- Module-level constants ---
HEADER = "--- PRODUCT LIST ---"
FOOTER = "--- END ---"
SEPARATOR = "---"
CURRENCY = "PKR"
INDENT = "   "


def format_price(price: Optional[float]) -> str:
    """Price rounded half-up to whole units, or N/A."""
    if price is None:
        return "N/A"
    rounded = Decimal(repr(float(price))).to_integral_value(rounding=ROUND_HALF_UP)
    if rounded == 0:
        rounded = abs(rounded)
    return f"{rounded:f} {CURRENCY}"


def format_record(number: int, record: ProductRecord) -> str:
    lines = [f"{number}. {record.title}"]
    if record.is_available:
        lines.append(f"{INDENT}- Price: {format_price(record.price)}")
    else:
        lines.append(f"{INDENT}- Status: *Not Available*")
    if record.note:
        lines.append(f"{INDENT}- Note: {record.note}")
    return "\n".join(lines)


def format_catalog(records: Iterable[ProductRecord]) -> str:
    """
    Serialize records, in order, into the product list report.

    Example:
        --- PRODUCT LIST ---

        1. Pen
           - Price: 10 PKR
        ---
        2. Cup
           - Status: *Not Available*
           - Note: chipped

        --- END ---
    """
    body = f"\n{SEPARATOR}\n".join(
        format_record(number, record) for number, record in enumerate(records, start=1)
    )
    return f"{HEADER}\n\n{body}\n\n{FOOTER}"
