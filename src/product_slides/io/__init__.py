"""Catalog and image IO."""

from .exceptions import (
    ProductSlidesError,
    CatalogLoadError,
    ImageLoadError,
    ExportSinkError,
)
from .data_source import fetch_catalog_document, resolve_image_reference
from .image_fetcher import fetch_image_bytes, load_image

__all__ = [
    "ProductSlidesError",
    "CatalogLoadError",
    "ImageLoadError",
    "ExportSinkError",
    "fetch_catalog_document",
    "resolve_image_reference",
    "fetch_image_bytes",
    "load_image",
]
