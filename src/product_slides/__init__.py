"""
product-slides: single-product slide editor for small in-memory catalogs.

Loads a JSON list of products, pages through them one at a time with
wraparound, autosaves edits only when values really change, loads each
product image in the background, and exports the list as shareable text.

Architecture:
- Tier 1 (Core): Qt threading helpers and logging setup
- Tier 2 (Protocols): Sink ABCs and application configuration
- Tier 3 (Services): Store, autosave, image sequencing, export, session
- Tier 4 (Widgets): PyQt6 slide view and headless sink
"""

__version__ = "0.1.0"

__all__ = [
    "__version__",
]
