"""
Interactive Shell

Reads one command line at a time and runs it through the click command group,
so the interactive and one-shot modes share the same command definitions.
"""

import logging
from typing import List

import click

from .cli_utils import show_menu, show_short_help
from .config import APP_NAME, HISTORY_SIZE, PROMPT
from .history import enable_line_editing, load_history, save_history

logger = logging.getLogger(__name__)

EXIT_COMMANDS = ("exit", "quit")


class InteractiveShell:
    """Read-dispatch loop over a click group with already-loaded application state"""

    def __init__(self, group: click.Group, app, prompt: str = PROMPT, prog_name: str = APP_NAME):
        self.group = group
        self.app = app
        self.prompt = prompt
        self.prog_name = prog_name

    def run(self):
        """Show the menu and process commands until end of input or exit"""
        history = load_history(self.app.history_file)
        enable_line_editing(history, HISTORY_SIZE)
        show_menu()

        while True:
            try:
                line = click.prompt(self.prompt, default="", show_default=False, prompt_suffix="")
            except click.Abort:
                # Ctrl-D / Ctrl-C at the prompt
                click.echo()
                break

            tokens = line.split()
            if not tokens:
                continue

            if tokens[0].lower() in EXIT_COMMANDS:
                break

            if self.dispatch(tokens):
                save_history(self.app.history_file, line)
                show_short_help()

        click.echo("👋 Exiting Airbnb CLI. Have a great day!")

    def dispatch(self, tokens: List[str]) -> bool:
        """
        Run one command line through the command group.

        Args:
            tokens: Command name followed by its arguments

        Returns:
            True if the command ran, False if it was rejected
        """
        logger.debug(f"Dispatching command: {tokens}")
        try:
            self.group.main(args=tokens, prog_name=self.prog_name, standalone_mode=False, obj=self.app)
            return True
        except click.ClickException as e:
            e.show()
            click.echo(f"❌ Invalid command: {' '.join(tokens)}")
            return False
        except click.Abort:
            click.echo("❌ Command aborted")
            return False
