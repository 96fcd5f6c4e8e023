"""Application configuration.

Provides the knobs an embedding application (or the command line) can set
before creating a session.
"""

from typing import Optional
from dataclasses import dataclass


@dataclass
class AppConfig:
    """Configuration for a product-slides session.

    Attributes:
        data_source: Path, file:// URI or http(s):// URL of the catalog JSON
        fetch_timeout_s: Timeout for fetching the catalog document
        image_timeout_s: Timeout for remote image fetches
        update_status_ms: Duration of the "updated" confirmation status
        copy_status_ms: Duration of the "copied" status
        error_status_ms: Duration of the clipboard error status
        image_error_status_ms: Duration of the image failure warning
        log_dir: Directory for log files (None uses the default location)
        log_prefix: Prefix for log file names
        log_level: Root log level name
    """

    data_source: str = "data.json"
    fetch_timeout_s: float = 10.0
    image_timeout_s: float = 10.0
    update_status_ms: int = 2000
    copy_status_ms: int = 3000
    error_status_ms: int = 4000
    image_error_status_ms: int = 4000
    log_dir: Optional[str] = None
    log_prefix: str = "product_slides_"
    log_level: str = "INFO"


# Global config instance (set by application)
_app_config: Optional[AppConfig] = None


def set_app_config(config: AppConfig) -> None:
    """Set the global application configuration.

    Args:
        config: AppConfig instance
    """
    global _app_config
    _app_config = config


def get_app_config() -> AppConfig:
    """Get the current application configuration.

    Returns:
        Current AppConfig or default if not set
    """
    if _app_config is None:
        return AppConfig()
    return _app_config
