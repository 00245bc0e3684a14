"""Plugin loader for lazy command loading, aliases, and global options."""

import importlib
import os
from typing import Optional

import rich_click as click
from rich_click import RichGroup

from .context import DogwatchContext

# Modules in the commands package that hold helpers rather than commands
IGNORED_MODULES = {"common"}

COMMAND_ALIASES = {
    'ls': 'list',
    'rm': 'remove',
}

KIND_ALIASES = {
    'movie': 'movies',
    'show': 'tv',
    'shows': 'tv',
}


class LazyCommandGroup(click.Group):
    """Group that loads commands lazily from a directory."""

    def __init__(self, *args, commands_package: str = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.commands_package = commands_package or 'dogwatch.cli.commands'

    def list_commands(self, ctx):
        """
        List all available commands by discovering Python files and registered commands.

        Returns:
            List of command names
        """
        rv = []

        try:
            package = importlib.import_module(self.commands_package)
            commands_dir = os.path.dirname(package.__file__)

            for filename in os.listdir(commands_dir):
                if not filename.endswith('.py') or filename.startswith('_'):
                    continue
                cmd_name = filename[:-3]
                if cmd_name in IGNORED_MODULES:
                    continue
                if cmd_name.endswith('_cmd'):
                    cmd_name = cmd_name[:-4]
                rv.append(cmd_name)

        except (ImportError, AttributeError, FileNotFoundError):
            pass

        if self.commands:
            for name in self.commands.keys():
                if name not in rv:
                    rv.append(name)

        rv.sort()
        return rv

    def get_command(self, ctx, name):
        """
        Import and return a command by name.

        Args:
            ctx: Click context
            name: Command name

        Returns:
            Click command or None if not found
        """
        if name in self.commands:
            return self.commands[name]

        if name in IGNORED_MODULES:
            return None

        for module_name in (name, f"{name}_cmd"):
            try:
                mod = importlib.import_module(f'{self.commands_package}.{module_name}')
            except ImportError:
                continue
            cmd = getattr(mod, 'cli', None) or getattr(mod, name, None)
            if cmd:
                return cmd

        return None


class AliasedGroup(click.Group):
    """Group that supports command aliases."""

    def __init__(self, *args, aliases: Optional[dict] = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.aliases = aliases if aliases is not None else dict(COMMAND_ALIASES)

    def get_command(self, ctx, cmd_name):
        """
        Get command by name, resolving aliases.

        Args:
            ctx: Click context
            cmd_name: Command name or alias

        Returns:
            Click command or None
        """
        resolved_name = self.aliases.get(cmd_name, cmd_name)
        return super().get_command(ctx, resolved_name)

    def resolve_command(self, ctx, args):
        # Report the canonical name so invoked_subcommand never holds an alias
        cmd_name, cmd, args = super().resolve_command(ctx, args)
        return (cmd.name if cmd is not None else cmd_name), cmd, args


def _store_global_option(ctx, param, value):
    """
    Callback to store a global option value on the shared context.

    The root group has already created the DogwatchContext by the time a
    subcommand parses its options, so late values override the root's.
    """
    if value is None or ctx.resilient_parsing:
        return

    dogwatch_ctx = ctx.find_object(DogwatchContext)
    if dogwatch_ctx is not None:
        setattr(dogwatch_ctx, param.name, value)


class GlobalOptionsMixin:
    """Adds options every command accepts, wherever they appear on the line."""

    # expose_value=False keeps these out of command signatures; the
    # callback stores the value on the DogwatchContext instead
    GLOBAL_OPTIONS = [
        click.Option(
            ['-a', '--api', 'api_key'],
            default=None,
            help='DogNZB API key (or set DOGNZB_API)',
            expose_value=False,
            is_eager=True,
            callback=_store_global_option,
        ),
    ]

    def _add_global_options(self, cmd):
        """
        Add global options to a command if not already present.

        Args:
            cmd: Click command to add options to

        Returns:
            Command with global options added
        """
        for global_opt in self.GLOBAL_OPTIONS:
            option_exists = any(
                p.name == global_opt.name for p in cmd.params
            )

            if not option_exists:
                cmd.params.insert(0, global_opt)

        return cmd


class DogwatchGroup(GlobalOptionsMixin, LazyCommandGroup, AliasedGroup, RichGroup):
    """
    Combined group with lazy loading, aliases, and global options support.

    This is the main group class used for the dogwatch CLI, combining
    lazy command loading, command aliases, global options, and rich-click
    formatting for help output.
    """

    def get_command(self, ctx, cmd_name):
        """Get command with alias resolution, lazy loading, and global options."""
        resolved_name = self.aliases.get(cmd_name, cmd_name)
        cmd = LazyCommandGroup.get_command(self, ctx, resolved_name)

        if cmd is not None:
            cmd = self._add_global_options(cmd)

        return cmd


class WatchlistGroup(GlobalOptionsMixin, AliasedGroup, RichGroup):
    """Group whose subcommands address the movie and TV watchlists."""

    def __init__(self, *args, aliases: Optional[dict] = None, **kwargs):
        super().__init__(*args, aliases=aliases or dict(KIND_ALIASES), **kwargs)

    def get_command(self, ctx, cmd_name):
        """Get command with alias resolution and global options."""
        cmd = super().get_command(ctx, cmd_name)

        if cmd is not None:
            cmd = self._add_global_options(cmd)

        return cmd
