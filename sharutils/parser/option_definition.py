# Sharutils — (c) 2025 sharutils contributors — MIT Licensed
"""
Defines the `OptionDefinition` dataclass used by `OptionCatalog` to describe
one recognizable command-line option.

Each definition pairs a single-character short flag with a long name. The long
name doubles as the key under which the parsed value is stored in a
`ParsedCommand`.

Key Attributes:
- `flag`: Short trigger, e.g. `o` for `-o`
- `name`: Long trigger and result key, e.g. `output-file` for `--output-file`
- `takes_value`: Whether the option consumes a value
- `default`: Value used when the option is given without one
- `validator`: Callable checking a resolved value, raising `ValueError`
- `help`: Description shown by the help renderer

Used By:
- `OptionCatalog`
- `OptionParser`
- `generate_help`
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from sharutils.exceptions import OptionDefinitionError

OptionValidator = Callable[[str], None]


@dataclass(frozen=True)
class OptionDefinition:
    """
    Represents one command-line option.

    Attributes:
        flag (str): Single character short trigger (`-<flag>`).
        name (str): Long trigger (`--<name>`) and key in parsed results.
        takes_value (bool): True if the option consumes a value.
        default (str | None): Value used when the option is present without one.
            Never applied to options the user did not mention.
        validator (OptionValidator | None): Pure callable that raises `ValueError`
            to reject a value. Must not consume tokens or touch parser state.
        help (str): Help text for the option.
    """

    flag: str
    name: str
    takes_value: bool = False
    default: str | None = None
    validator: OptionValidator | None = None
    help: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.flag, str) or len(self.flag) != 1:
            raise OptionDefinitionError(
                f"Flag {self.flag!r} for '{self.name}' must be a single character"
            )
        if self.flag == "-" or self.flag.isspace():
            raise OptionDefinitionError(f"Flag {self.flag!r} is not a valid short flag")
        if not isinstance(self.name, str) or not self.name:
            raise OptionDefinitionError(f"Option '-{self.flag}' must have a name")
        if self.name.startswith("-"):
            raise OptionDefinitionError(
                f"Name '{self.name}' must be given without leading dashes"
            )
        if "=" in self.name or any(char.isspace() for char in self.name):
            raise OptionDefinitionError(
                f"Name '{self.name}' must not contain '=' or whitespace"
            )
        if self.validator is not None and not callable(self.validator):
            raise OptionDefinitionError(f"Validator for '{self.name}' is not callable")
        if self.default is not None and not self.takes_value:
            raise OptionDefinitionError(
                f"Option '{self.name}' does not take a value and cannot have a default"
            )

    @property
    def short(self) -> str:
        return f"-{self.flag}"

    @property
    def long(self) -> str:
        return f"--{self.name}"

    def get_flags_text(self) -> str:
        """Get the trigger text shown in help output, e.g. `-o, --output-file`."""
        return f"{self.short}, {self.long}"
