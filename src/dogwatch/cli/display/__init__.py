"""Display layer for CLI output."""

from .console import console
from .tables import _render_item_fields_table, _render_watchlist_table

__all__ = [
    "console",
    "_render_watchlist_table",
    "_render_item_fields_table",
]
