"""
Sink protocol definitions and configuration.

ABC-based contracts for the render surface, clipboard and alert prompt,
plus the application configuration hooks.
"""

from .sinks import (
    RenderSink,
    ClipboardSink,
    AlertSink,
    ImageDisplay,
    ImageLoadState,
    PyQtWidgetMeta,
)
from .app_config import AppConfig, set_app_config, get_app_config

__all__ = [
    "RenderSink",
    "ClipboardSink",
    "AlertSink",
    "ImageDisplay",
    "ImageLoadState",
    "PyQtWidgetMeta",
    "AppConfig",
    "set_app_config",
    "get_app_config",
]
