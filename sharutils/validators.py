# Sharutils — (c) 2025 sharutils contributors — MIT Licensed
"""
Value validators for sharutils option definitions.

A validator takes the raw string value of an option and returns nothing when
the value is acceptable. It raises `ValueError` with a user-facing message
otherwise; the parser turns that into an `OptionValidationError` carrying the
message unchanged.

Validators must not consume tokens or keep state. The file validators make at
most one filesystem probe each.

Included Validators:
- validate_file_path: Path is non-empty and its parent directory exists.
- validate_existing_file: Path names an existing regular file.
- validate_version_mode: Value selects a version output mode.
"""
from pathlib import Path

VERSION_MODES = {
    "v": "version",
    "c": "copyright",
    "n": "notice",
}


def validate_file_path(value: str) -> None:
    """Validator for output file paths."""
    if not value:
        raise ValueError("file path must not be empty")
    if "\0" in value:
        raise ValueError(f"file path {value!r} contains a NUL byte")
    parent = Path(value).parent
    if parent != Path(".") and not parent.is_dir():
        raise ValueError(f"directory '{parent}' does not exist")


def validate_existing_file(value: str) -> None:
    """Validator for input file paths."""
    if not value:
        raise ValueError("file path must not be empty")
    if not Path(value).is_file():
        raise ValueError(f"file '{value}' does not exist")


def validate_version_mode(value: str) -> None:
    """Validator for `--version[=MODE]`; accepts any prefix of version, copyright or notice."""
    mode = value.strip().lower()
    if not mode or not VERSION_MODES.get(mode[0], "").startswith(mode):
        raise ValueError(
            f"invalid version mode '{value}'; "
            f"choose one of {{{', '.join(VERSION_MODES.values())}}}"
        )
