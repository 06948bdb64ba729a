# Sharutils — (c) 2025 sharutils contributors — MIT Licensed
"""
Compiles option definitions into an immutable, indexed `OptionCatalog`.

A catalog is built once per tool at startup. Compilation indexes every
definition by short flag and by long name and fails with `DuplicateOptionError`
the first time either index would receive a second entry for the same key.
After that the indices are read-only, so one catalog can be shared freely
between parses.

Also provides `standard_options()`, the options every sharutils tool accepts.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Iterator, Mapping

from sharutils.exceptions import DuplicateOptionError
from sharutils.parser.option_definition import OptionDefinition


class OptionCatalog:
    """
    Ordered, immutable collection of `OptionDefinition` objects.

    Iteration yields definitions in declaration order, which is also the order
    used by the help renderer. Lookups go through the precomputed flag and
    name indices.
    """

    def __init__(self, definitions: Iterable[OptionDefinition] = ()) -> None:
        flag_map: dict[str, OptionDefinition] = {}
        name_map: dict[str, OptionDefinition] = {}
        for definition in definitions:
            if definition.flag in flag_map:
                existing = flag_map[definition.flag]
                raise DuplicateOptionError(
                    f"Flag '{definition.short}' is already used by option "
                    f"'{existing.name}'"
                )
            if definition.name in name_map:
                raise DuplicateOptionError(
                    f"Name '{definition.long}' is declared more than once"
                )
            flag_map[definition.flag] = definition
            name_map[definition.name] = definition
        self._definitions: tuple[OptionDefinition, ...] = tuple(name_map.values())
        self._flag_map: Mapping[str, OptionDefinition] = MappingProxyType(flag_map)
        self._name_map: Mapping[str, OptionDefinition] = MappingProxyType(name_map)

    @property
    def definitions(self) -> tuple[OptionDefinition, ...]:
        return self._definitions

    def get_by_flag(self, flag: str) -> OptionDefinition | None:
        """Return the definition triggered by the short flag character, if any."""
        return self._flag_map.get(flag)

    def get_by_name(self, name: str) -> OptionDefinition | None:
        """Return the definition triggered by the long name, if any."""
        return self._name_map.get(name)

    def without(self, *names: str) -> OptionCatalog:
        """Return a new catalog with the named options removed."""
        return OptionCatalog(
            definition for definition in self._definitions if definition.name not in names
        )

    def extended(self, definitions: Iterable[OptionDefinition]) -> OptionCatalog:
        """Return a new catalog with `definitions` appended after the current ones."""
        return OptionCatalog((*self._definitions, *definitions))

    def __iter__(self) -> Iterator[OptionDefinition]:
        return iter(self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)

    def __contains__(self, name: object) -> bool:
        return name in self._name_map

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OptionCatalog):
            return False
        return self._definitions == other._definitions

    def __hash__(self) -> int:
        return hash(self._definitions)

    def __str__(self) -> str:
        names = ", ".join(definition.name for definition in self._definitions)
        return f"OptionCatalog({names})"

    def __repr__(self) -> str:
        return str(self)


def standard_options() -> list[OptionDefinition]:
    """Return the options shared by every sharutils tool."""
    return [
        OptionDefinition(
            flag="h",
            name="help",
            help="Display usage information and exit",
        ),
        OptionDefinition(
            flag="v",
            name="version",
            help="Output version information and exit",
        ),
    ]
