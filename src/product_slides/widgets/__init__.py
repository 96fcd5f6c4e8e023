"""Render sinks: the PyQt6 slide view and a headless recorder."""

from .slide_view import SlideView
from .headless_sink import HeadlessRenderSink

__all__ = [
    "SlideView",
    "HeadlessRenderSink",
]
