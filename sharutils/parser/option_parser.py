# Sharutils — (c) 2025 sharutils contributors — MIT Licensed
"""
This module implements `OptionParser`, the state machine that turns a raw
argument sequence into a `ParsedCommand` according to an `OptionCatalog`.

Grammar (POSIX/GNU style, one token of lookahead):
- `--`             terminator; every remaining token becomes a positional argument
- `--name`         long option; value-taking options resolve their value
- `--name=value`   long option with an inline value, used as-is
- `-abc`           group of short flags; only the last may take a value
- `-` or `word`    first positional argument; it and everything after it are
                   positional, options are no longer recognized

Value resolution for a value-taking option without an inline value:
1. the next token, if there is one and it does not start with `-`
2. otherwise the option's default, consuming nothing
3. otherwise `MissingValueError`

Every resolved value goes through the option's validator. The first violation
aborts the parse; no partial result is ever returned.

Known limitation: a value that itself starts with `-` (a negative number, or
`-` for stdin) is only reachable as `--name=value`. `-o -5` reads `-5` as a
flag group, the same as traditional Unix tools.

Example Usage:
    catalog = OptionCatalog([
        OptionDefinition("h", "help"),
        OptionDefinition("o", "output-file", takes_value=True),
    ])
    parsed = parse_command_line(catalog, ["uudecode", "-o", "out.bin", "in.uu"])

    # parsed.options == {"output-file": "out.bin"}
    # parsed.arguments == ("in.uu",)
"""
from __future__ import annotations

import os
from typing import Iterable

from sharutils.exceptions import (
    DuplicateOptionError,
    InvalidFlagCombinationError,
    MissingExecutableError,
    MissingValueError,
    OptionValidationError,
    UnknownOptionError,
)
from sharutils.logger import logger
from sharutils.parser.catalog import OptionCatalog
from sharutils.parser.option_definition import OptionDefinition
from sharutils.parser.parsed_command import ParsedCommand

TERMINATOR = "--"


class OptionParser:
    """
    Parses command lines against a compiled `OptionCatalog`.

    The parser keeps no state between calls; everything a parse needs lives in
    local variables, so one parser may serve any number of parses.
    """

    def __init__(self, catalog: OptionCatalog | Iterable[OptionDefinition]) -> None:
        if not isinstance(catalog, OptionCatalog):
            catalog = OptionCatalog(catalog)
        self.catalog: OptionCatalog = catalog

    def parse(self, args: Iterable[str | bytes]) -> ParsedCommand:
        """
        Parse a full argument sequence, executable path first.

        Args:
            args (Iterable[str | bytes]): Raw process arguments. Bytes are
                decoded with `os.fsdecode`.

        Returns:
            ParsedCommand: The validated invocation.

        Raises:
            ParseError: The first rule violation found, scanning left to right.
        """
        tokens = [os.fsdecode(arg) for arg in args]
        if not tokens:
            raise MissingExecutableError(
                "no executable path: the argument list is empty"
            )

        executable_path = tokens[0]
        options: dict[str, str | None] = {}
        arguments: list[str] = []

        i = 1
        while i < len(tokens):
            token = tokens[i]
            if token == TERMINATOR:
                arguments.extend(tokens[i + 1 :])
                break
            elif token.startswith("--"):
                i = self._handle_long_option(token, tokens, i, options)
            elif token.startswith("-") and len(token) > 1:
                i = self._handle_short_group(token, tokens, i, options)
            else:
                arguments.extend(tokens[i:])
                break

        parsed = ParsedCommand(
            executable_path=executable_path,
            options=options,
            arguments=tuple(arguments),
        )
        logger.debug(
            "Parsed %s: options=%s arguments=%s",
            executable_path,
            dict(parsed.options),
            list(parsed.arguments),
        )
        return parsed

    def _handle_long_option(
        self,
        token: str,
        tokens: list[str],
        i: int,
        options: dict[str, str | None],
    ) -> int:
        name, has_inline, inline_value = token[2:].partition("=")
        definition = self.catalog.get_by_name(name)
        if definition is None:
            raise UnknownOptionError(f"--{name}")
        self._check_duplicate(definition, options)

        if has_inline:
            if not definition.takes_value:
                raise OptionValidationError(
                    f"option '{definition.long}' does not accept a value"
                )
            self._record(definition, inline_value, options)
            return i + 1

        if definition.takes_value:
            return self._resolve_value(definition, tokens, i + 1, options)

        options[definition.name] = None
        return i + 1

    def _handle_short_group(
        self,
        token: str,
        tokens: list[str],
        i: int,
        options: dict[str, str | None],
    ) -> int:
        flags = token[1:]
        last = len(flags) - 1
        for position, flag in enumerate(flags):
            definition = self.catalog.get_by_flag(flag)
            if definition is None:
                raise UnknownOptionError(f"-{flag}")
            self._check_duplicate(definition, options)

            if not definition.takes_value:
                options[definition.name] = None
                continue

            if position != last:
                raise InvalidFlagCombinationError(
                    f"'{definition.short}' takes a value and must be the last "
                    f"flag in '{token}'"
                )
            return self._resolve_value(definition, tokens, i + 1, options)
        return i + 1

    def _resolve_value(
        self,
        definition: OptionDefinition,
        tokens: list[str],
        next_index: int,
        options: dict[str, str | None],
    ) -> int:
        """Resolve a value from the next token or the default; return the new cursor."""
        if next_index < len(tokens) and not tokens[next_index].startswith("-"):
            self._record(definition, tokens[next_index], options)
            return next_index + 1
        if definition.default is not None:
            self._record(definition, definition.default, options)
            return next_index
        raise MissingValueError(
            f"option '{definition.long}' ('{definition.short}') requires a value"
        )

    @staticmethod
    def _check_duplicate(
        definition: OptionDefinition, options: dict[str, str | None]
    ) -> None:
        if definition.name in options:
            raise DuplicateOptionError(
                f"option '{definition.long}' was specified more than once"
            )

    @staticmethod
    def _record(
        definition: OptionDefinition, value: str, options: dict[str, str | None]
    ) -> None:
        if definition.validator is not None:
            try:
                definition.validator(value)
            except ValueError as error:
                raise OptionValidationError(str(error)) from error
        options[definition.name] = value

    def __str__(self) -> str:
        return f"OptionParser(options={len(self.catalog)})"

    def __repr__(self) -> str:
        return str(self)


def parse_command_line(
    catalog: OptionCatalog | Iterable[OptionDefinition],
    args: Iterable[str | bytes],
) -> ParsedCommand:
    """Parse `args` against `catalog`; see `OptionParser.parse`."""
    return OptionParser(catalog).parse(args)
