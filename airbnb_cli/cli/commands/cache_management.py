"""
Cache Management CLI Commands

Commands for inspecting the in-memory listings cache
"""

import click

from ..context import AppContext, pass_app


@click.command()
@pass_app
def cache_stats(app: AppContext):
    """Show what was loaded from the listings file"""
    stats = app.cache.get_stats()

    click.echo("📊 Cache Statistics:")
    click.echo(f"   Data file: {stats['data_file']} ({stats['source']})")
    click.echo(f"   Loaded: {'Yes' if stats['loaded'] else 'No'}")
    click.echo(f"   Listings cached: {stats['total_records']}")
    click.echo(f"   Rows dropped: {stats['discarded_rows']}")
    if stats['error']:
        click.echo(f"   ❌ Load error: {stats['error']}")
