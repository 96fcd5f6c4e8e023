"""
Core Log Utilities for product-slides.

Logging setup and log file discovery for the application process.
"""

import logging
import sys
import time
from pathlib import Path
from typing import Optional, List

from product_slides.protocols import AppConfig, get_app_config

logger = logging.getLogger(__name__)

FILE_HANDLER_NAME = "product_slides_file"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_configured = False


def _get_log_dir(config: AppConfig) -> Path:
    """Return configured log directory or default."""
    if config.log_dir:
        return Path(config.log_dir)
    return Path.home() / ".local" / "share" / "product_slides" / "logs"


def setup_logging(config: Optional[AppConfig] = None, to_file: bool = True) -> Optional[Path]:
    """
    Configure the root logger once per process.

    Installs a stderr handler and, when ``to_file`` is set, a timestamped
    file handler in the configured log directory.

    Returns:
        Path of the log file, or None when file logging is off or failed.
    """
    global _configured
    config = config or get_app_config()
    root = logging.getLogger()
    level = getattr(logging, config.log_level.upper(), logging.INFO)
    root.setLevel(level)

    if _configured:
        return _find_file_handler_path(root)

    formatter = logging.Formatter(LOG_FORMAT)

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(formatter)
    root.addHandler(stream_handler)

    log_path = None
    if to_file:
        log_dir = _get_log_dir(config)
        try:
            log_dir.mkdir(parents=True, exist_ok=True)
            log_path = log_dir / f"{config.log_prefix}{int(time.time())}.log"
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.set_name(FILE_HANDLER_NAME)
            file_handler.setFormatter(formatter)
            root.addHandler(file_handler)
        except OSError as e:
            logger.warning(f"Failed to initialize file logging in {log_dir}: {e}")
            log_path = None

    _configured = True
    logger.debug(f"Logging configured (level={config.log_level}, file={log_path})")
    return log_path


def _find_file_handler_path(target: logging.Logger) -> Optional[Path]:
    for handler in target.handlers:
        if isinstance(handler, logging.FileHandler) and handler.get_name() == FILE_HANDLER_NAME:
            return Path(handler.baseFilename)
    return None


def get_current_log_file_path() -> str:
    """Get the current log file path from the logging system."""
    path = _find_file_handler_path(logging.getLogger())
    if path is None:
        raise RuntimeError("No file handler is attached to the root logger")
    return str(path)


def discover_logs(config: Optional[AppConfig] = None) -> List[Path]:
    """
    Discover application log files, newest first.

    Args:
        config: Configuration whose log_dir and log_prefix are searched

    Returns:
        Paths of matching log files
    """
    config = config or get_app_config()
    log_dir = _get_log_dir(config)
    if not log_dir.exists():
        return []
    logs = [p for p in log_dir.glob(f"{config.log_prefix}*.log") if p.is_file()]
    return sorted(logs, key=lambda p: p.stat().st_mtime, reverse=True)
