"""Version command - print the dogwatch version."""

import rich_click as click

from ... import __version__
from .common import console


@click.command('version')
def version():
    """Print the version number of dogwatch."""
    console.print(f"dogwatch {__version__}", highlight=False)


# Export for lazy loading
cli = version
