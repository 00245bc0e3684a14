"""dogwatch CLI - Command-line interface for DogNZB watchlists."""

import sys

# Configure rich-click BEFORE importing click
import rich_click as click

# Enable rich-click formatting
click.rich_click.USE_RICH_MARKUP = True
click.rich_click.SHOW_ARGUMENTS = True
click.rich_click.GROUP_ARGUMENTS_OPTIONS = True
click.rich_click.MAX_WIDTH = 100

from .. import __version__
from ..config import setup_logging
from .core import ConfigurationError, DogwatchContext, DogwatchGroup
from .display.console import console

# Commands that run without configuration
NO_CONFIG_COMMANDS = ['version']


@click.group(
    cls=DogwatchGroup,
    commands_package='dogwatch.cli.commands',
    context_settings=dict(
        help_option_names=['-h', '--help'],
    ),
)
@click.version_option(version=__version__, prog_name='dogwatch', help='Show the version and exit.')
@click.option(
    '-a',
    '--api',
    'api_key',
    envvar='DOGNZB_API',
    default=None,
    help='DogNZB API key (or set DOGNZB_API)',
)
@click.option(
    '-c',
    '--config',
    envvar='DOGWATCH_CONFIG',
    default=None,
    help='Path to config file (or set DOGWATCH_CONFIG)',
)
@click.option(
    '-v',
    '--verbose',
    is_flag=True,
    help='Log debug output to stderr',
)
@click.pass_context
def cli(ctx, api_key, config, verbose):
    """dogwatch is a cli tool to interact with DogNZB's watchlists."""

    if ctx.invoked_subcommand in NO_CONFIG_COMMANDS:
        return

    try:
        ctx.obj = DogwatchContext.create(config, api_key)
    except ConfigurationError as e:
        console.print(f"[red]Configuration Error:[/red] {e}")
        sys.exit(1)

    setup_logging(ctx.obj.config, verbose=verbose)


if __name__ == '__main__':
    cli()
