"""
Command history for the interactive shell.

History is an append-only text file with one command per line. It is read at
shell startup to seed arrow-key recall and written after each successful
command. Failures here never stop the shell.
"""

import logging
from pathlib import Path
from typing import List, Union

from .config import HISTORY_SIZE

try:
    import readline
except ImportError:  # Windows ships without GNU readline
    readline = None

logger = logging.getLogger(__name__)


def load_history(path: Union[str, Path]) -> List[str]:
    """
    Load previous commands from the history file.

    Args:
        path: Path to the history file

    Returns:
        List of commands, oldest first. Empty if the file is missing or unreadable.
    """
    path = Path(path)
    if not path.exists():
        return []

    try:
        with open(path, 'r', encoding='utf-8') as f:
            return [line.rstrip('\n') for line in f if line.strip()]
    except OSError as e:
        logger.warning(f"Error loading history from {path}: {str(e)}")
        return []


def save_history(path: Union[str, Path], command: str) -> bool:
    """
    Append a command to the history file.

    Returns:
        True if the command was written, False if it was blank or the write failed
    """
    command = command.strip()
    if not command:
        return False

    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'a', encoding='utf-8') as f:
            f.write(command + '\n')
        return True
    except OSError as e:
        logger.warning(f"Error saving history to {path}: {str(e)}")
        return False


def enable_line_editing(history: List[str], size: int = HISTORY_SIZE) -> bool:
    """Seed readline with the most recent `size` commands for arrow-key recall"""
    if readline is None:
        logger.info("readline is not available, command recall disabled")
        return False

    readline.clear_history()
    readline.set_history_length(size)
    for command in history[-size:]:
        readline.add_history(command)
    return True
