"""
Sharutils command-line tools

Copyright (c) 2025 sharutils contributors.
Licensed under the MIT License. See LICENSE file for details.
"""

from .catalog import OptionCatalog, standard_options
from .help import HELP_COLUMN_WIDTH, format_option_line, generate_help
from .option_definition import OptionDefinition, OptionValidator
from .option_parser import OptionParser, parse_command_line
from .parsed_command import ParsedCommand

__all__ = [
    "HELP_COLUMN_WIDTH",
    "OptionCatalog",
    "OptionDefinition",
    "OptionParser",
    "OptionValidator",
    "ParsedCommand",
    "format_option_line",
    "generate_help",
    "parse_command_line",
    "standard_options",
]
