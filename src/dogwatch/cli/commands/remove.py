"""Remove command group - remove items from DogNZB watchlists."""

import logging

import rich_click as click

from ...models import ResourceKind
from ..core import WatchlistGroup, with_dognzb
from .common import apply_to_ids, kind_title

logger = logging.getLogger(__name__)


def _remove(dognzb, kind, ids):
    def action(item_id):
        result = dognzb.remove(kind, item_id)
        logger.info("Removed %s from %s watchlist: %s", item_id, kind.label, result)
        details = [f"{name}: {value}" for name, value in result.fields.items() if value]
        if result.error_description:
            details.append(result.error_description)
        return ", ".join(details)

    apply_to_ids(
        ids,
        action,
        lambda item_id: f"Removed {item_id} from {kind_title(kind)} watchlist",
    )


@click.group('remove', cls=WatchlistGroup)
def remove_group():
    """Remove movies or TV shows from your DogNZB watchlists."""
    pass


@remove_group.command('movies')
@click.argument('ids', nargs=-1, required=True)
@with_dognzb
def remove_movies(dognzb, ids):
    """Remove movies by IMDB id."""
    _remove(dognzb, ResourceKind.MOVIE, ids)


@remove_group.command('tv')
@click.argument('ids', nargs=-1, required=True)
@with_dognzb
def remove_tv(dognzb, ids):
    """Remove TV shows by TVDB id."""
    _remove(dognzb, ResourceKind.TV, ids)


# Export for lazy loading
cli = remove_group
