"""List command group - show the items in DogNZB watchlists."""

import sys

import rich_click as click
from rich.markup import escape

from ...api.dognzb import DogNZBApiError
from ...models import ResourceKind
from ..core import WatchlistGroup, with_dognzb
from ..display import _render_item_fields_table, _render_watchlist_table
from .common import console, error_message, kind_title, print_section_header

DETAILED_HELP = "Show every field DogNZB returns for each item"


def _show_watchlist(dognzb, kind, detailed) -> bool:
    """Print one watchlist; returns False if it could not be fetched."""
    try:
        items = dognzb.list_items(kind)
    except DogNZBApiError as e:
        console.print(error_message(escape(f"Failed to list {kind_title(kind)} watchlist: {e}")))
        return False

    if not items:
        console.print(f"[yellow]Your {kind_title(kind)} watchlist is empty.[/yellow]")
        return True

    console.print(f"[green]Found {len(items)} items in your {kind_title(kind)} watchlist[/green]\n")

    if detailed:
        for item in items:
            console.print(_render_item_fields_table(item))
            console.print()
    else:
        console.print(_render_watchlist_table(items))

    return True


def _detailed(flag: bool) -> bool:
    # --detailed may be given to the group instead of the subcommand
    parent = click.get_current_context().parent
    return flag or bool(parent and parent.params.get("detailed"))


@click.group('list', cls=WatchlistGroup, invoke_without_command=True)
@click.option("--detailed", "-d", is_flag=True, help=DETAILED_HELP)
@click.pass_context
def list_group(ctx, detailed):
    """List items in your DogNZB watchlists.

    By default, shows both the movie and TV watchlists. Use a subcommand to show only one.
    """
    if ctx.invoked_subcommand is None:
        ctx.invoke(_list_all, detailed=detailed)


@with_dognzb
def _list_all(dognzb, detailed):
    ok = True
    for kind in ResourceKind:
        print_section_header(f"{kind_title(kind)} Watchlist")
        ok = _show_watchlist(dognzb, kind, detailed) and ok

    if not ok:
        sys.exit(1)


@list_group.command('movies')
@click.option("--detailed", "-d", is_flag=True, help=DETAILED_HELP)
@with_dognzb
def list_movies(dognzb, detailed):
    """List the movie watchlist."""
    if not _show_watchlist(dognzb, ResourceKind.MOVIE, _detailed(detailed)):
        sys.exit(1)


@list_group.command('tv')
@click.option("--detailed", "-d", is_flag=True, help=DETAILED_HELP)
@with_dognzb
def list_tv(dognzb, detailed):
    """List the TV watchlist."""
    if not _show_watchlist(dognzb, ResourceKind.TV, _detailed(detailed)):
        sys.exit(1)


# Export for lazy loading
cli = list_group
