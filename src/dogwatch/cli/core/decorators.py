"""Dependency injection decorators for CLI commands."""

from functools import wraps
import sys

import rich_click as click

from ..commands.common import console, error_message
from .context import DogwatchContext
from .exceptions import ConfigurationError


def with_dognzb(f):
    """
    Inject a DogNZB API client built from the resolved API key and config.

    Exits with status 1 when no API key is available.

    Usage:
        @with_dognzb
        def command(dognzb, ...):
            pass
    """
    @wraps(f)
    @click.pass_context
    def wrapper(ctx, *args, **kwargs):
        from ..services.dognzb import DogNZBService

        dogwatch_ctx = ctx.find_object(DogwatchContext)
        try:
            api_key = dogwatch_ctx.resolve_api_key()
        except ConfigurationError as e:
            console.print(error_message(str(e)))
            console.print("  [dim]Pass --api or set DOGNZB_API[/dim]")
            sys.exit(1)

        with DogNZBService.from_config(dogwatch_ctx.config, api_key) as dognzb:
            return f(dognzb=dognzb, **kwargs)
    return wrapper
