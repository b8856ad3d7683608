"""
CLI Utilities Library

Table formatting, menus and argument validation shared by the CLI commands
and the interactive shell.
"""

import click
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .config import DEFAULT_COUNT


# Constants
YES_VALUES = ("t", "true")
NO_VALUES = ("f", "false")
MISSING_LABEL = "N/A"
HEADER_COLORS = ["blue", "green", "yellow", "cyan", "magenta"]

# (rank, field name -> display value)
TableRow = Tuple[int, Dict[str, Any]]


def value_label(value: Any) -> str:
    """
    Map a cell value to the text shown in the table.

    Booleans and "t"/"f"/"true"/"false" become "Yes"/"No", None becomes "N/A",
    everything else is shown as-is.
    """
    if value is None:
        return MISSING_LABEL
    if isinstance(value, bool):
        return "Yes" if value else "No"
    if isinstance(value, str):
        lowered = value.lower()
        if lowered in YES_VALUES:
            return "Yes"
        if lowered in NO_VALUES:
            return "No"
    return str(value)


def style_label(label: str, text: Optional[str] = None) -> str:
    """Colour already-padded cell text according to its label"""
    text = label if text is None else text
    if label == "Yes":
        return click.style(text, fg="green")
    if label == "No":
        return click.style(text, fg="red")
    if label == MISSING_LABEL:
        return click.style(text, dim=True)
    return text


def format_value(value: Any) -> str:
    """Format a value for table display, coloured by label"""
    return style_label(value_label(value))


def collect_columns(rows: Sequence[TableRow]) -> List[str]:
    """Field names across all rows, in first-seen order"""
    columns = []
    for _, row in rows:
        for key in row:
            if key not in columns:
                columns.append(key)
    return columns


def format_table(rows: Sequence[TableRow]) -> str:
    """
    Format ranked rows into a CLI table.

    Args:
        rows: (rank, row) pairs where each row maps field name to display value

    Returns:
        The table as a string with a leading "#" column, or a notice if there is no data
    """
    if not rows:
        return "No data available."

    columns = collect_columns(rows)
    headers = ["#"] + columns

    labelled = [
        [str(rank)] + [value_label(row.get(column)) for column in columns]
        for rank, row in rows
    ]

    # Widths are measured on the plain text before any colour is applied
    col_widths = [
        max([len(header)] + [len(cells[i]) for cells in labelled])
        for i, header in enumerate(headers)
    ]

    header_row = " | ".join(
        click.style(f"{header:<{width}}", fg=HEADER_COLORS[i % len(HEADER_COLORS)], bold=True)
        for i, (header, width) in enumerate(zip(headers, col_widths))
    )
    separator = "-+-".join("-" * width for width in col_widths)

    lines = [header_row, separator]
    for cells in labelled:
        rank_cell = click.style(f"{cells[0]:<{col_widths[0]}}", fg="bright_black")
        value_cells = [
            style_label(cell, f"{cell:<{width}}")
            for cell, width in zip(cells[1:], col_widths[1:])
        ]
        lines.append(" | ".join([rank_cell] + value_cells))

    return "\n".join(lines)


def show_menu() -> None:
    """Print the welcome text with the available commands."""
    click.echo()
    click.echo("🏠 Welcome to the Airbnb CLI!")
    click.echo()
    click.echo("Available commands:")
    click.echo(f"  list-top [number]  - Show the top N highest-priced Airbnb listings (default: {DEFAULT_COUNT})")
    click.echo("  cache-stats        - Show what was loaded from the listings file")
    click.echo("  help               - Show detailed help for all commands")
    click.echo("  exit               - Leave the CLI (or press Ctrl-D)")
    click.echo()
    click.echo("Type a command to continue:")


def show_short_help() -> None:
    """Print the one-line reminder shown after each command."""
    click.echo()
    click.echo("💡 Commands: list-top [number], cache-stats, help, exit")


def validate_count(ctx: click.Context, param: click.Parameter, value: Optional[str]) -> int:
    """
    Validate the listing count argument.

    Args:
        value: Raw count text, or None when omitted

    Returns:
        The count as a positive integer, DEFAULT_COUNT when omitted or blank

    Raises:
        click.BadParameter: If the count is not a positive integer
    """
    if value is None or not str(value).strip():
        return DEFAULT_COUNT

    try:
        count = int(str(value).strip())
    except ValueError:
        raise click.BadParameter(f"'{value}' is not a number. Please enter a valid positive number.")

    if count <= 0:
        raise click.BadParameter(f"{count} is not positive. Please enter a valid positive number.")

    return count
