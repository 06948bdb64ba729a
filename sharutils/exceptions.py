# Sharutils — (c) 2025 sharutils contributors — MIT Licensed
"""
Defines all custom exception classes used by sharutils.

Parse failures form a closed set. A single parse raises at most one of them,
the first rule violation met while scanning the arguments from left to right.
Each carries a human-readable category so callers can render it as
`"<Category>: <detail>"`.

Exception Hierarchy:
- SharutilsError
    ├── OptionDefinitionError
    ├── OptionStateError
    ├── UsageError
    └── ParseError
         ├── OptionValidationError
         ├── UnknownOptionError
         │    └── MissingExecutableError
         ├── MissingValueError
         ├── InvalidFlagCombinationError
         └── DuplicateOptionError

The parsing engine never prints or exits; reporting belongs to the tools.
"""


class SharutilsError(Exception):
    """Base exception for sharutils."""


class OptionDefinitionError(SharutilsError):
    """Exception raised when an option definition is malformed."""


class OptionStateError(SharutilsError):
    """Exception raised when a saved option state file cannot be read or written."""


class UsageError(SharutilsError):
    """Exception raised when a tool is given the wrong positional arguments."""


class ParseError(SharutilsError):
    """Base class for failures of a single command line parse."""

    category: str = "Parse error"

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail

    def __str__(self) -> str:
        return f"{self.category}: {self.detail}"


class OptionValidationError(ParseError):
    """Exception raised when a value is rejected by an option or its validator."""

    category = "Validation error"


class UnknownOptionError(ParseError):
    """Exception raised when a short flag or long name is not in the catalog."""

    category = "Unknown option"


class MissingExecutableError(UnknownOptionError):
    """Exception raised when the argument sequence lacks even the executable path."""


class MissingValueError(ParseError):
    """Exception raised when a value-taking option has no value and no default."""

    category = "Missing value"


class InvalidFlagCombinationError(ParseError):
    """Exception raised when a value-taking short flag is not last in a group."""

    category = "Invalid flag combination"


class DuplicateOptionError(ParseError):
    """Exception raised when an option is given twice or declared twice."""

    category = "Duplicate option"
