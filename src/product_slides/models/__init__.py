"""Catalog data model."""

from .product import (
    ProductRecord,
    EditValues,
    normalize_item,
    parse_price,
    format_price_text,
)

__all__ = [
    "ProductRecord",
    "EditValues",
    "normalize_item",
    "parse_price",
    "format_price_text",
]
