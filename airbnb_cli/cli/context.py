from dataclasses import dataclass
from pathlib import Path

import click

from ..cache import ListingCache
from ..config import HISTORY_FILE


@dataclass
class AppContext:
    """Application state shared by every command in one process"""
    cache: ListingCache
    history_file: Path = HISTORY_FILE


pass_app = click.make_pass_decorator(AppContext)
