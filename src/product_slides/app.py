"""
Entry point for product-slides.

- Parses CLI flags (data source, export mode, logging, timeouts)
- Builds and installs the AppConfig
- Either prints the formatted product list (--export) or opens the slide view
"""

import argparse
import logging
import sys
from typing import List, Optional

from product_slides.core import setup_logging
from product_slides.io import CatalogLoadError, fetch_catalog_document
from product_slides.protocols import AppConfig, set_app_config

logger = logging.getLogger(__name__)


def _parse_args(argv: List[str]) -> argparse.Namespace:
    defaults = AppConfig()
    p = argparse.ArgumentParser(prog="product-slides", add_help=True)
    p.add_argument("source", nargs="?", default=defaults.data_source,
                   help=f"Catalog JSON path or URL (default: {defaults.data_source}).")
    p.add_argument("--export", action="store_true",
                   help="Print the formatted product list and exit.")
    p.add_argument("--log-level", type=str, default=defaults.log_level,
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                   help="Root log level.")
    p.add_argument("--log-dir", type=str, default=None,
                   help="Directory for log files.")
    p.add_argument("--no-log-file", action="store_true",
                   help="Log to stderr only.")
    p.add_argument("--image-timeout", type=float, default=defaults.image_timeout_s,
                   help="Timeout in seconds for remote image fetches.")
    return p.parse_args(argv)


def build_config(args: argparse.Namespace) -> AppConfig:
    return AppConfig(
        data_source=args.source,
        image_timeout_s=args.image_timeout,
        log_dir=args.log_dir,
        log_level=args.log_level,
    )


def export_report(config: AppConfig) -> str:
    """
    Load the catalog and format it without creating any Qt objects.

    Raises:
        CatalogLoadError: If the source cannot be loaded or has no products.
    """
    from product_slides.services.catalog_store import CatalogStore
    from product_slides.services.export_formatter import format_catalog

    store = CatalogStore()
    store.load(fetch_catalog_document(config.data_source, timeout=config.fetch_timeout_s))
    return format_catalog(store.records)


def run_gui(config: AppConfig) -> int:
    from PyQt6.QtWidgets import QApplication

    from product_slides.services import CatalogSession, MessageBoxAlertSink, QtClipboardSink
    from product_slides.widgets import SlideView

    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationName("Product Slides")

    view = SlideView()
    view.setWindowTitle("Product Slides")
    session = CatalogSession(
        view,
        clipboard=QtClipboardSink(),
        alerts=MessageBoxAlertSink(view),
    )
    view.bind(session)
    view.show()
    session.load(config.data_source)

    exit_code = app.exec()
    session.shutdown()
    return exit_code


def main(argv: Optional[List[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    args = _parse_args(argv)
    config = build_config(args)
    set_app_config(config)
    setup_logging(config, to_file=not args.no_log_file and not args.export)

    if args.export:
        try:
            print(export_report(config))
        except CatalogLoadError as e:
            logger.error(f"Could not load product data: {e}")
            return 1
        return 0

    return run_gui(config)


if __name__ == "__main__":
    raise SystemExit(main())
