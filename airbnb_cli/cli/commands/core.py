"""
Core CLI Commands

Main functionality for ranking listings: list-top
"""

import click
import logging

from ..context import AppContext, pass_app
from ...cli_utils import format_table, validate_count
from ...ranking import rank_listings

logger = logging.getLogger(__name__)


@click.command(context_settings={'ignore_unknown_options': True})
@click.argument('count', required=False, callback=validate_count)
@pass_app
def list_top(app: AppContext, count: int):
    """List the top COUNT highest-priced listings (default: 10)"""

    try:
        click.echo(f"🔍 Fetching top {count} Airbnb listings...")
        listings = rank_listings(app.cache.get(), count)

        if not listings:
            click.echo("📋 No listings found.")
            if app.cache.load_error:
                click.echo(f"💡 The listings file could not be loaded: {app.cache.load_error}")
            return

        rows = [(rank, listing.to_display_row()) for rank, listing in enumerate(listings, 1)]
        click.echo(format_table(rows))
        click.echo(f"✅ Showing {len(listings)} of {len(app.cache.get())} listings")

    except click.ClickException:
        raise
    except Exception as e:
        logger.exception("list-top failed")
        click.echo(f"❌ Error: {str(e)}")
