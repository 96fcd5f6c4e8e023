"""Fetch the catalog JSON document from a file or an HTTP(S) URL."""

import json
import logging
from pathlib import Path
from typing import Any, List
from urllib.parse import urljoin, urlparse
from urllib.request import url2pathname

import requests

from .exceptions import CatalogLoadError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_S = 10.0


def is_http_source(source: str) -> bool:
    """True for http:// and https:// references."""
    return urlparse(source).scheme in ("http", "https")


def resolve_local_path(source: str) -> Path:
    """Turn a plain path or file:// URI into a Path."""
    parsed = urlparse(source)
    if parsed.scheme == "file":
        return Path(url2pathname(parsed.path))
    return Path(source)


def resolve_image_reference(base_source: str, reference: str) -> str:
    """
    Resolve a record's image reference relative to the catalog source.

    Absolute paths and URIs are returned unchanged. Relative references are
    joined to the URL or to the directory of the catalog file.
    """
    if not base_source or not reference:
        return reference
    if urlparse(reference).scheme in ("http", "https", "file", "data"):
        return reference
    if Path(reference).is_absolute():
        return reference
    if is_http_source(base_source):
        return urljoin(base_source, reference)
    return str(resolve_local_path(base_source).parent / reference)


def _read_text(source: str, timeout: float) -> str:
    if is_http_source(source):
        try:
            response = requests.get(source, timeout=timeout)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            raise CatalogLoadError(f"Failed to fetch {source}: {e}") from e
        return response.text

    path = resolve_local_path(source)
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        raise CatalogLoadError(f"Failed to read {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise CatalogLoadError(f"{path} is not valid UTF-8: {e}") from e


def fetch_catalog_document(source: str, timeout: float = DEFAULT_TIMEOUT_S) -> List[Any]:
    """
    Fetch and decode the catalog document.

    Args:
        source: Filesystem path, file:// URI or http(s):// URL
        timeout: Request timeout in seconds for HTTP sources

    Returns:
        The list of raw (un-normalized) items. May be empty.

    Raises:
        CatalogLoadError: On transport failure, non-success status, unreadable
            file, invalid JSON or an unexpected document shape.
    """
    logger.info(f"Fetching catalog from {source}")
    text = _read_text(source, timeout)

    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        raise CatalogLoadError(f"Invalid JSON in {source}: {e}") from e

    if isinstance(document, dict) and isinstance(document.get("items"), list):
        document = document["items"]
    if not isinstance(document, list):
        raise CatalogLoadError(
            f"Catalog document must be a list of products, got {type(document).__name__}"
        )

    logger.debug(f"Fetched {len(document)} raw items from {source}")
    return document
