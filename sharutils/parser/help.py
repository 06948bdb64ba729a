# Sharutils — (c) 2025 sharutils contributors — MIT Licensed
"""
Plain-text help rendering for an `OptionCatalog`.

Output layout:

    Usage: uudecode [OPTIONS] [input-file...]

    Decode an encoded file

    Options:
      -o, --output-file              Direct output to file

Options are listed in catalog order. The trigger column is padded to
`HELP_COLUMN_WIDTH`; triggers that do not fit push their help text onto the
next line.
"""
from __future__ import annotations

from typing import Iterable

from sharutils.parser.option_definition import OptionDefinition

HELP_COLUMN_WIDTH = 30


def format_option_line(definition: OptionDefinition) -> str:
    """Format one option as an indented help line."""
    flags = definition.get_flags_text()
    help_text = definition.help
    if help_text and len(flags) > HELP_COLUMN_WIDTH:
        return f"  {flags}\n{'':<{HELP_COLUMN_WIDTH + 3}}{help_text}"
    return f"  {flags:<{HELP_COLUMN_WIDTH}} {help_text}".rstrip()


def generate_help(
    command: str,
    description: str,
    usage: str,
    catalog: Iterable[OptionDefinition],
) -> str:
    """
    Render the help text for a tool.

    Args:
        command (str): Program name shown on the usage line.
        description (str): One-line description of the program.
        usage (str): Usage pattern following the program name.
        catalog (Iterable[OptionDefinition]): Options to list, in order.

    Returns:
        str: The help text, without a trailing newline.
    """
    lines = [
        f"Usage: {command} {usage}".rstrip(),
        "",
        description,
        "",
        "Options:",
    ]
    lines.extend(format_option_line(definition) for definition in catalog)
    return "\n".join(lines)
