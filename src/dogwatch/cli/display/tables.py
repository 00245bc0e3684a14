"""Table builders for CLI output.

- Functions named _render_*_table() for consistency
- Header style: "bold cyan"
- Primary column (first) styled as "bold"
"""

from rich.markup import escape
from rich.table import Table


def _render_watchlist_table(items, title=None):
    """
    Create table for watchlist items.

    Args:
        items: List of WatchlistItem objects, in watchlist order
        title: Table title

    Returns:
        Rich Table object
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Title", style="bold", no_wrap=False)
    table.add_column("IMDB", style="green")
    table.add_column("TVDB", style="magenta")

    for item in items:
        table.add_row(
            escape(item.title or "N/A"),
            escape(item.imdb_id or ""),
            escape(item.tvdb_id or ""),
        )

    return table


def _render_item_fields_table(item):
    """
    Create table listing every field DogNZB returned for an item.

    Args:
        item: WatchlistItem

    Returns:
        Rich Table object
    """
    table = Table(title=escape(item.title) or None, show_header=True, header_style="bold cyan")
    table.add_column("Field", style="bold")
    table.add_column("Value", style="white", no_wrap=False)

    for name, value in item.fields.items():
        table.add_row(escape(name), escape(value))

    return table
