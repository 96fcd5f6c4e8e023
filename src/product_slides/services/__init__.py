"""
Service layer for the catalog session.

Store, autosave, image sequencing, export, status and clipboard services.
"""

from .catalog_store import CatalogStore
from .change_detector import ChangeDetector, NormalizedEdit, normalize_edit
from .status_notifier import StatusNotifier
from .image_sequencer import ImageLoadSequencer, PLACEHOLDER_IMAGE, IMAGE_FAILED_MESSAGE
from .export_formatter import format_catalog, format_price
from .clipboard_service import QtClipboardSink, MessageBoxAlertSink, LoggingAlertSink
from .signal_service import SignalService
from .catalog_session import CatalogSession

__all__ = [
    "CatalogStore",
    "ChangeDetector",
    "NormalizedEdit",
    "normalize_edit",
    "StatusNotifier",
    "ImageLoadSequencer",
    "PLACEHOLDER_IMAGE",
    "IMAGE_FAILED_MESSAGE",
    "format_catalog",
    "format_price",
    "QtClipboardSink",
    "MessageBoxAlertSink",
    "LoggingAlertSink",
    "SignalService",
    "CatalogSession",
]
