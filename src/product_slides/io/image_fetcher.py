"""Fetch and decode product images. Runs inside background tasks."""

import logging

import requests
from PyQt6.QtGui import QImage

from .data_source import DEFAULT_TIMEOUT_S, is_http_source, resolve_local_path
from .exceptions import ImageLoadError

logger = logging.getLogger(__name__)


def fetch_image_bytes(reference: str, timeout: float = DEFAULT_TIMEOUT_S) -> bytes:
    """
    Fetch raw image bytes for a record's image reference.

    Raises:
        ImageLoadError: If the reference is empty, the resource is missing or
            the transport fails.
    """
    if not reference:
        raise ImageLoadError("Empty image reference")

    if is_http_source(reference):
        try:
            response = requests.get(reference, timeout=timeout)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            raise ImageLoadError(f"Failed to fetch image {reference}: {e}") from e
        return response.content

    path = resolve_local_path(reference)
    try:
        return path.read_bytes()
    except OSError as e:
        raise ImageLoadError(f"Failed to read image {path}: {e}") from e


def load_image(reference: str, timeout: float = DEFAULT_TIMEOUT_S) -> QImage:
    """
    Fetch and decode an image.

    QImage (unlike QPixmap) is safe to build outside the GUI thread.

    Raises:
        ImageLoadError: On fetch failure or if the bytes cannot be decoded.
    """
    data = fetch_image_bytes(reference, timeout)
    image = QImage()
    if not image.loadFromData(data) or image.isNull():
        raise ImageLoadError(f"Could not decode image {reference}")
    logger.debug(f"Decoded image {reference} ({image.width()}x{image.height()})")
    return image
