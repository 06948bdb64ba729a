# Sharutils — (c) 2025 sharutils contributors — MIT Licensed
"""
Shared command-line front end for the sharutils tools.

`SharutilsTool` owns everything that happens around a parse:

- help (`-h`), pager help (`-!`) and version (`-v[=MODE]`) handling
- loading and saving option state (`-r FILE`, `-R FILE`)
- positional argument checks, delegated to `check_arguments()`
- diagnostics on stderr and the exit status

Subclasses provide the catalog, the argument checks and the configuration
report. Exit status is 0 on success and 1 on any error.
"""
from __future__ import annotations

import os
import shlex
import subprocess
import sys
from typing import Sequence

from rich.markup import escape

from sharutils.console import console, err_console
from sharutils.exceptions import ParseError, SharutilsError, UsageError
from sharutils.logger import logger
from sharutils.option_state import (
    apply_option_state,
    load_option_state,
    save_option_state,
)
from sharutils.parser import (
    OptionCatalog,
    OptionDefinition,
    ParsedCommand,
    generate_help,
    parse_command_line,
    standard_options,
)
from sharutils.validators import (
    validate_existing_file,
    validate_file_path,
    validate_version_mode,
)
from sharutils.version import __version__

DEFAULT_PAGER = "less -F -R"
DEFAULT_VERSION_MODE = "copyright"

COPYRIGHT_NOTICE = (
    "Copyright (C) 2025 sharutils contributors\n"
    "This is free software; see the source for copying conditions.\n"
    "There is NO warranty; not even for MERCHANTABILITY or FITNESS FOR A\n"
    "PARTICULAR PURPOSE."
)

LICENSE_NOTICE = (
    "Copyright (C) 2025 sharutils contributors\n"
    "\n"
    "Permission is hereby granted, free of charge, to any person obtaining a copy\n"
    "of this software and associated documentation files (the \"Software\"), to deal\n"
    "in the Software without restriction, including without limitation the rights\n"
    "to use, copy, modify, merge, publish, distribute, sublicense, and/or sell\n"
    "copies of the Software, and to permit persons to whom the Software is\n"
    "furnished to do so, subject to the conditions of the MIT License.\n"
    "\n"
    "THE SOFTWARE IS PROVIDED \"AS IS\", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR\n"
    "IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,\n"
    "FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT."
)


def tool_options() -> list[OptionDefinition]:
    """Options every tool adds on top of `standard_options()`."""
    return [
        OptionDefinition(
            flag="v",
            name="version",
            takes_value=True,
            default=DEFAULT_VERSION_MODE,
            validator=validate_version_mode,
            help="Output version information and exit [=MODE]",
        ),
        OptionDefinition(
            flag="!",
            name="more-help",
            help="Extended usage information passed through pager",
        ),
        OptionDefinition(
            flag="R",
            name="save-opts",
            takes_value=True,
            validator=validate_file_path,
            help="Save the option state to a config file [=FILE]",
        ),
        OptionDefinition(
            flag="r",
            name="load-opts",
            takes_value=True,
            validator=validate_existing_file,
            help="Load options from the config file FILE",
        ),
    ]


def get_version_text(mode: str | None, program: str) -> str:
    """Return the version banner for a `--version` mode (first letter v, c or n)."""
    mode = (mode or DEFAULT_VERSION_MODE).strip().lower()
    if mode.startswith("v"):
        return f"{program} {__version__}"
    banner = f"{program} {__version__} (sharutils)"
    if mode.startswith("n"):
        return f"{banner}\n{LICENSE_NOTICE}"
    return f"{banner}\n{COPYRIGHT_NOTICE}"


def handle_version_output(mode: str | None, program: str) -> None:
    console.print(
        get_version_text(mode, program), markup=False, highlight=False, soft_wrap=True
    )


def display_text(value: str) -> str:
    """
    Make user-supplied text safe to print with console markup.

    Arguments decoded with `os.fsdecode` may hold lone surrogates for bytes
    that are not valid UTF-8; those are shown as `\\xNN` escapes. Markup is
    escaped so the text is printed as given.
    """
    return escape(os.fsencode(value).decode("utf-8", "backslashreplace"))


def print_user_line(text: str, *, err: bool = False) -> None:
    """Print a markup line that embeds `display_text()` values, verbatim and unwrapped."""
    (err_console if err else console).print(
        text, highlight=False, emoji=False, soft_wrap=True
    )


def get_pager_command() -> list[str]:
    """Pager command from `$PAGER`, falling back to `less -F -R`."""
    return shlex.split(os.environ.get("PAGER") or DEFAULT_PAGER)


def handle_more_help(help_text: str) -> None:
    """Pipe `help_text` through the pager, printing it directly if it cannot start."""
    command = get_pager_command()
    try:
        completed = subprocess.run(
            command, input=f"{help_text}\n", text=True, check=False
        )
    except OSError as error:
        logger.debug("Pager %s unavailable: %s", command, error)
    else:
        if completed.returncode:
            logger.debug("Pager %s exited with status %d", command, completed.returncode)
        return
    console.print(help_text, markup=False, highlight=False, soft_wrap=True)


def log_parsed_command(parsed: ParsedCommand) -> None:
    """Log the structure of a parsed command at DEBUG level."""
    logger.debug("Executable: %r", parsed.executable_path)
    for name, value in parsed.iter_options():
        if value is None:
            logger.debug("Option: --%s", name)
        else:
            logger.debug("Option: --%s = %r", name, value)
    for index, argument in enumerate(parsed.arguments):
        logger.debug("Argument [%d]: %r", index, argument)


class SharutilsTool:
    """
    Base class for a sharutils command-line tool.

    Subclasses set `name`, `description` and `usage`, return their own
    options from `get_options()`, and implement `check_arguments()` and
    `report()`.
    """

    name: str = "sharutils"
    description: str = ""
    usage: str = "[OPTIONS]"

    def __init__(self) -> None:
        self.catalog: OptionCatalog = (
            OptionCatalog(standard_options())
            .without("version")
            .extended(self.get_options())
            .extended(tool_options())
        )

    def get_options(self) -> list[OptionDefinition]:
        return []

    def get_help(self) -> str:
        return generate_help(self.name, self.description, self.usage, self.catalog)

    def check_arguments(self, parsed: ParsedCommand) -> None:
        """Raise `UsageError` if the positional arguments are unacceptable."""

    def report(self, parsed: ParsedCommand) -> None:
        """Print the resolved configuration."""

    def print_error(self, error: SharutilsError) -> None:
        print_user_line(f"[error]Error:[/] {display_text(str(error))}", err=True)

    def run(self, argv: Sequence[str | bytes] | None = None) -> int:
        """
        Parse `argv` (defaults to `sys.argv`) and act on it.

        Returns:
            int: Process exit status.
        """
        args = sys.argv if argv is None else argv
        try:
            parsed = parse_command_line(self.catalog, args)
        except ParseError as error:
            self.print_error(error)
            err_console.print("\nUse --help for usage information.", style="hint")
            return 1

        log_parsed_command(parsed)

        if parsed.is_option_set("help"):
            console.print(self.get_help(), markup=False, highlight=False, soft_wrap=True)
            return 0
        if parsed.is_option_set("more-help"):
            handle_more_help(self.get_help())
            return 0
        if parsed.is_option_set("version"):
            handle_version_output(parsed.option_value("version"), self.name)
            return 0

        try:
            if parsed.has_value("load-opts"):
                state = load_option_state(
                    parsed.option_value_or("load-opts", ""), program=self.name
                )
                parsed = apply_option_state(parsed, state, self.catalog)
            if parsed.has_value("save-opts"):
                save_path = parsed.option_value_or("save-opts", "")
                save_option_state(save_path, parsed, self.name)
                print_user_line(
                    f"Configuration: Options saved to [value]{display_text(save_path)}[/]"
                )
            self.check_arguments(parsed)
        except UsageError as error:
            self.print_error(error)
            err_console.print(
                f"Usage: {self.name} {escape(self.usage)}", style="hint", highlight=False
            )
            return 1
        except SharutilsError as error:
            self.print_error(error)
            return 1

        self.report(parsed)
        return 0
