"""
Sharutils command-line tools

Copyright (c) 2025 sharutils contributors.
Licensed under the MIT License. See LICENSE file for details.
"""

from .exceptions import ParseError, SharutilsError
from .logger import logger
from .parser import (
    OptionCatalog,
    OptionDefinition,
    OptionParser,
    ParsedCommand,
    generate_help,
    parse_command_line,
    standard_options,
)
from .version import __version__

__all__ = [
    "OptionCatalog",
    "OptionDefinition",
    "OptionParser",
    "ParseError",
    "ParsedCommand",
    "SharutilsError",
    "__version__",
    "generate_help",
    "logger",
    "parse_command_line",
    "standard_options",
]
