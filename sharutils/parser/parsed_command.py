# Sharutils — (c) 2025 sharutils contributors — MIT Licensed
"""
Defines `ParsedCommand`, the immutable result of a successful parse.

A key in `options` means the user specified that option. Its value is the
resolved string for value-taking options, or `None` for bare flags. Options
the user never mentioned are absent; defaults are never back-filled.

Collaborators read a `ParsedCommand` only through four queries:
- `is_option_set(name)`
- `option_value(name)`
- `option_value_or(name, default)`
- `has_value(name)`
"""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterable, Mapping


@dataclass(frozen=True)
class ParsedCommand:
    """
    Represents a validated command invocation.

    Attributes:
        executable_path (str): The first raw argument, never validated.
        options (Mapping[str, str | None]): Read-only mapping of option name to
            its resolved value, or `None` for options given without a value.
        arguments (tuple[str, ...]): Positional arguments in input order.
    """

    executable_path: str
    options: Mapping[str, str | None] = field(default_factory=dict)
    arguments: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "options", MappingProxyType(dict(self.options)))
        object.__setattr__(self, "arguments", tuple(self.arguments))

    def is_option_set(self, name: str) -> bool:
        """Return True if the user specified the option."""
        return name in self.options

    def option_value(self, name: str) -> str | None:
        """Return the option's resolved value, or None if unset or valueless."""
        return self.options.get(name)

    def option_value_or(self, name: str, default: Any) -> Any:
        """Return the option's resolved value, or `default` if there is none."""
        value = self.options.get(name)
        return default if value is None else value

    def has_value(self, name: str) -> bool:
        """Return True if the option is set and carries a value."""
        return self.options.get(name) is not None

    def with_options(self, options: Mapping[str, str | None]) -> ParsedCommand:
        """
        Return a copy with `options` added underneath the current ones.

        Options already present on this command win over the given ones.
        """
        merged = dict(options)
        merged.update(self.options)
        return ParsedCommand(
            executable_path=self.executable_path,
            options=merged,
            arguments=self.arguments,
        )

    def iter_options(self) -> Iterable[tuple[str, str | None]]:
        return self.options.items()

    def __hash__(self) -> int:
        return hash(
            (self.executable_path, tuple(sorted(self.options.items())), self.arguments)
        )
