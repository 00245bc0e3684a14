"""Add command group - add items to DogNZB watchlists."""

import rich_click as click

from ...models import ResourceKind
from ..core import WatchlistGroup, with_dognzb
from .common import apply_to_ids, kind_title


def _add(dognzb, kind, ids):
    apply_to_ids(
        ids,
        lambda item_id: dognzb.add(kind, item_id),
        lambda item_id: f"Added {item_id} to {kind_title(kind)} watchlist",
    )


@click.group('add', cls=WatchlistGroup)
def add_group():
    """Add movies or TV shows to your DogNZB watchlists."""
    pass


@add_group.command('movies')
@click.argument('ids', nargs=-1, required=True)
@with_dognzb
def add_movies(dognzb, ids):
    """Add movies by IMDB id (e.g. tt0111161)."""
    _add(dognzb, ResourceKind.MOVIE, ids)


@add_group.command('tv')
@click.argument('ids', nargs=-1, required=True)
@with_dognzb
def add_tv(dognzb, ids):
    """Add TV shows by TVDB id (e.g. 81189)."""
    _add(dognzb, ResourceKind.TV, ids)


# Export for lazy loading
cli = add_group
