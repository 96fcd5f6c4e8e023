"""IO exceptions."""


class ProductSlidesError(Exception):
    """Base class for all product-slides errors."""


class CatalogLoadError(ProductSlidesError):
    """Raised when the catalog source is unreachable, malformed or empty."""


class ImageLoadError(ProductSlidesError):
    """Raised when a product image cannot be fetched or decoded."""


class ExportSinkError(ProductSlidesError):
    """Raised when the exported report cannot be written to the clipboard."""
