import click
import logging
from pathlib import Path

from .context import AppContext
from ..cache import ListingCache
from ..config import APP_NAME, DATA_FILE, HISTORY_FILE, VERSION
from ..shell import InteractiveShell

# Import all commands directly (no groups)
from .commands.core import list_top
from .commands.cache_management import cache_stats
from .commands.general import help


@click.group(invoke_without_command=True)
@click.version_option(VERSION, prog_name=APP_NAME)
@click.option('--data-file', type=click.Path(dir_okay=False, path_type=Path), default=DATA_FILE,
              show_default=True, help='CSV file with Airbnb listings')
@click.option('--history-file', type=click.Path(dir_okay=False, path_type=Path), default=HISTORY_FILE,
              show_default=True, help='File used to remember interactive commands')
@click.option('--verbose', '-v', is_flag=True, help='Show debug logging')
@click.pass_context
def cli(ctx: click.Context, data_file: Path, history_file: Path, verbose: bool):
    """Airbnb CLI - show the highest-priced Airbnb listings

    Run without a command to start the interactive shell.
    """

    # Commands dispatched from the interactive shell arrive with state already loaded
    if ctx.obj is not None:
        return

    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)

    cache = ListingCache(data_file)
    click.echo("⏳ Loading Airbnb data...")
    cache.preload()

    if cache.load_error:
        click.echo(f"❌ Failed to load data: {cache.load_error}")
    else:
        click.echo(f"✅ Data loaded successfully! {len(cache.get())} listings ready.")

    ctx.obj = AppContext(cache=cache, history_file=history_file)

    if ctx.invoked_subcommand is None:
        InteractiveShell(cli, ctx.obj).run()


# Register all commands directly (maintaining flat structure)
cli.add_command(list_top)
cli.add_command(list_top, name='ptoplist')
cli.add_command(cache_stats)
cli.add_command(help)

if __name__ == '__main__':
    cli()
