# Sharutils — (c) 2025 sharutils contributors — MIT Licensed
"""option_state.py
Save and load parsed option state for `--save-opts` / `--load-opts`.

State files hold the program name and the options given on the command line:

    program = "uuencode"

    [options]
    base64 = true
    version = "copyright"

Bare flags are stored as `true`, values as strings. Files ending in `.yaml` or
`.yml` are written with PyYAML; anything else is TOML.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from sharutils.exceptions import (
    MissingValueError,
    OptionStateError,
    OptionValidationError,
    UnknownOptionError,
)
from sharutils.logger import logger
from sharutils.parser import OptionCatalog, ParsedCommand

TRANSIENT_OPTIONS = frozenset({"help", "more-help", "version", "save-opts", "load-opts"})


class OptionState(BaseModel):
    """Option state model for sharutils state files."""

    program: str
    options: dict[str, str | bool] = Field(default_factory=dict)

    @field_validator("options")
    @classmethod
    def validate_flags(cls, value: dict[str, str | bool]) -> dict[str, str | bool]:
        for name, option_value in value.items():
            if name in TRANSIENT_OPTIONS:
                raise ValueError(f"Option '{name}' cannot be loaded from saved options")
            if option_value is False:
                raise ValueError(f"Option '{name}' cannot be stored as false")
        return value

    @classmethod
    def from_parsed(cls, parsed: ParsedCommand, program: str) -> OptionState:
        return cls(
            program=program,
            options={
                name: True if value is None else value
                for name, value in parsed.iter_options()
                if name not in TRANSIENT_OPTIONS
            },
        )

    def to_parsed_options(self) -> dict[str, str | None]:
        return {
            name: None if value is True else value
            for name, value in self.options.items()
        }


def _is_yaml(path: Path) -> bool:
    return path.suffix in (".yaml", ".yml")


def save_option_state(
    file_path: Path | str, parsed: ParsedCommand, program: str
) -> OptionState:
    """
    Write the options of `parsed` to a state file.

    Args:
        file_path (Path | str): Destination; `.yaml`/`.yml` selects YAML, else TOML.
        parsed (ParsedCommand): The command whose options are saved.
        program (str): Name of the tool the state belongs to.

    Returns:
        OptionState: The state that was written.

    Raises:
        OptionStateError: If the file cannot be written.
    """
    path = Path(file_path)
    state = OptionState.from_parsed(parsed, program)
    data = state.model_dump()
    try:
        with path.open("w", encoding="UTF-8") as state_file:
            if _is_yaml(path):
                yaml.safe_dump(data, state_file, sort_keys=False)
            else:
                toml.dump(data, state_file)
    except (OSError, UnicodeEncodeError) as error:
        raise OptionStateError(f"Could not save options to '{path}': {error}") from error
    logger.debug("Saved %d option(s) to %s", len(state.options), path)
    return state


def load_option_state(file_path: Path | str, program: str | None = None) -> OptionState:
    """
    Read a state file written by `save_option_state`.

    When `program` is given, the file must have been saved by that tool.

    Raises:
        OptionStateError: If the file is missing, unparsable, malformed or
            belongs to another program.
    """
    path = Path(file_path)
    if not path.is_file():
        raise OptionStateError(f"No such option state file: {path}")

    try:
        with path.open("r", encoding="UTF-8") as state_file:
            if _is_yaml(path):
                raw_state: Any = yaml.safe_load(state_file)
            else:
                raw_state = toml.load(state_file)
    except (OSError, yaml.YAMLError, toml.TomlDecodeError) as error:
        raise OptionStateError(f"Could not read options from '{path}': {error}") from error

    if not isinstance(raw_state, dict):
        raise OptionStateError(
            f"Option state file '{path}' must contain a table with 'program' and 'options'"
        )
    try:
        state = OptionState.model_validate(raw_state)
    except ValidationError as error:
        raise OptionStateError(f"Invalid option state in '{path}': {error}") from error
    if program is not None and state.program != program:
        raise OptionStateError(
            f"Option state in '{path}' was saved by '{state.program}', not '{program}'"
        )
    logger.debug("Loaded %d option(s) from %s", len(state.options), path)
    return state


def apply_option_state(
    parsed: ParsedCommand, state: OptionState, catalog: OptionCatalog
) -> ParsedCommand:
    """
    Merge loaded options underneath the ones given on the command line.

    Every stored option must exist in `catalog`, and stored values go through
    the same validators as command-line values.

    Raises:
        UnknownOptionError: If the state names an option the catalog lacks.
        MissingValueError: If a value-taking option was stored without a value
            and has no default.
        OptionValidationError: If a stored value is rejected.
    """
    options = state.to_parsed_options()
    for name, value in options.items():
        definition = catalog.get_by_name(name)
        if definition is None:
            raise UnknownOptionError(f"--{name} (from saved options)")
        if value is None:
            if not definition.takes_value:
                continue
            if definition.default is None:
                raise MissingValueError(
                    f"option '{definition.long}' requires a value (from saved options)"
                )
            value = options[name] = definition.default
        elif not definition.takes_value:
            raise OptionValidationError(
                f"option '{definition.long}' does not accept a value"
            )
        if definition.validator is not None:
            try:
                definition.validator(value)
            except ValueError as error:
                raise OptionValidationError(str(error)) from error
    return parsed.with_options(options)
