# Sharutils — (c) 2025 sharutils contributors — MIT Licensed
"""Global console instances for the sharutils command-line tools."""
from rich.console import Console

from sharutils.themes import get_one_theme

console = Console(theme=get_one_theme())
err_console = Console(stderr=True, theme=get_one_theme())
