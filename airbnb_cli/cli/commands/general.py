"""
Help CLI Command

Detailed help for all commands
"""

import click

from ...config import DATA_FILE, DEFAULT_COUNT, HISTORY_FILE


@click.command()
def help():
    """Show detailed help for all available commands"""
    click.echo("🏠 Airbnb CLI - Top-priced listing ranker")
    click.echo("=" * 50)
    click.echo()
    click.echo("📋 LISTING COMMANDS:")
    click.echo(f"  list-top [number]      - Show the N highest-priced listings (default: {DEFAULT_COUNT})")
    click.echo("  ptoplist [number]      - Same as list-top")
    click.echo()
    click.echo("🗄️  CACHE:")
    click.echo("  cache-stats            - Show what was loaded from the listings file")
    click.echo()
    click.echo("💡 NOTES:")
    click.echo(f"  • Listings are read once at startup from {DATA_FILE} (override with --data-file)")
    click.echo("  • Prices like \"$1,234.50\" are ranked as numbers; rows without a valid price are skipped")
    click.echo(f"  • Interactive commands are saved to {HISTORY_FILE} for arrow-key recall")
    click.echo("  • Type 'exit' or press Ctrl-D to leave the interactive shell")
    click.echo()
    click.echo("📖 For detailed help on any command:")
    click.echo("  airbnb-cli <command> --help")
