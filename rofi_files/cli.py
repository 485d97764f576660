"""
rofi-files - directory browser for rofi's script mode
Command Line Interface
"""
import logging
import sys
import click
from rich.console import Console
from rich.markup import escape

from rofi_files.config.config_manager import ConfigManager, config_command, cache_dir, log_path
from rofi_files.core.directory_lister import DirectoryLister
from rofi_files.core.navigator import Navigator
from rofi_files.errors import RofiFilesError, StateError
from rofi_files.ui.file_icons import IconCatalog
from rofi_files.utils.launcher import Launcher
from rofi_files.utils.state_store import LastDirectoryStore

err_console = Console(stderr=True)


def _setup_logging(config: dict) -> None:
    path = log_path(config)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise StateError(f"Cannot create log directory {path.parent}: {e}") from e

    try:
        logging.basicConfig(
            filename=str(path),
            level=getattr(logging, str(config.get('log_level', 'WARNING')).upper(), logging.WARNING),
            format='%(asctime)s - %(levelname)s: %(message)s',
            force=True
        )
    except OSError as e:
        raise StateError(f"Cannot open log file {path}: {e}") from e


def _build_navigator(config: dict) -> Navigator:
    store = LastDirectoryStore(cache_dir(config))
    store.ensure_cache_dir()
    _setup_logging(config)

    catalog = IconCatalog.from_files(config['icons_path'], config['generic_icons_path'])
    return Navigator(
        store=store,
        lister=DirectoryLister(catalog),
        launcher=Launcher(config.get('opener')),
        prompt=config.get('prompt') or 'Files'
    )


class PathCommand(click.Command):
    """Command whose arguments are never parsed as options.

    rofi passes entry names verbatim, so names like ``-x`` or ``--`` are paths.
    """

    def parse_args(self, ctx, args):
        return super().parse_args(ctx, ['--', *args])


@click.command(cls=PathCommand, context_settings=dict(help_option_names=[]))
@click.argument('path', required=False, type=click.Path())
def cli(path):
    """rofi-files - browse directories from rofi

    Without PATH the last visited directory (or home) is listed. PATH is
    resolved against that directory: directories are listed and remembered,
    files are executed or opened.
    Examples:
        rofi -show files -modi files:rofi-files
    """
    try:
        navigator = _build_navigator(ConfigManager.load_config())
        output = navigator.navigate(path)
    except RofiFilesError as e:
        logging.error(str(e))
        err_console.print(f"[bold red]Error:[/] {escape(str(e))}")
        sys.exit(1)

    if output is not None:
        click.echo(output)


@click.command(context_settings=dict(help_option_names=['-h', '--help']))
@click.argument('action', type=click.Choice(['view', 'reset', 'set']), required=False)
@click.argument('key', required=False)
@click.argument('value', required=False)
def config(action, key=None, value=None):
    """Manage rofi-files configuration."""
    if not action:
        click.echo("Usage: rofi-files-config [view|reset|set] [key] [value]")
        return

    if not config_command(action, key, value):
        sys.exit(1)


def main():
    """Entry point for the CLI."""
    cli(prog_name="rofi-files")


def config_main():
    """Entry point for the configuration CLI."""
    config(prog_name="rofi-files-config")


if __name__ == '__main__':
    main()
