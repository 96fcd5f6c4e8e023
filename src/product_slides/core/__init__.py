"""
Core utilities.

Qt threading helpers and logging setup with no catalog-specific logic.
"""

from .background_task import BackgroundTask, BackgroundTaskManager
from .log_utils import setup_logging, get_current_log_file_path, discover_logs

__all__ = [
    "BackgroundTask",
    "BackgroundTaskManager",
    "setup_logging",
    "get_current_log_file_path",
    "discover_logs",
]
