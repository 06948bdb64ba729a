import pytest

from sharutils.exceptions import (
    DuplicateOptionError,
    MissingExecutableError,
    MissingValueError,
    OptionValidationError,
    UnknownOptionError,
)
from sharutils.parser import OptionParser, ParsedCommand, parse_command_line


def test_only_executable(catalog):
    parsed = parse_command_line(catalog, ["exe"])
    assert parsed.executable_path == "exe"
    assert parsed.options == {}
    assert parsed.arguments == ()


def test_empty_input_has_no_executable(catalog):
    with pytest.raises(MissingExecutableError) as excinfo:
        parse_command_line(catalog, [])
    assert isinstance(excinfo.value, UnknownOptionError)


def test_long_flag(catalog):
    parsed = parse_command_line(catalog, ["exe", "--help"])
    assert parsed.options == {"help": None}
    assert parsed.arguments == ()


def test_long_option_with_equals(catalog):
    parsed = parse_command_line(catalog, ["exe", "--file=test.txt"])
    assert parsed.options == {"file": "test.txt"}


def test_long_option_equals_splits_on_first_equals(catalog):
    parsed = parse_command_line(catalog, ["exe", "--file=a=b"])
    assert parsed.option_value("file") == "a=b"


def test_long_option_equals_allows_empty_value(catalog):
    parsed = parse_command_line(catalog, ["exe", "--file="])
    assert parsed.options == {"file": ""}
    assert parsed.has_value("file")


def test_long_option_equals_allows_leading_dash(catalog):
    parsed = parse_command_line(catalog, ["exe", "--file=-42"])
    assert parsed.option_value("file") == "-42"


def test_short_and_equals_forms_are_equivalent(catalog):
    short = parse_command_line(catalog, ["exe", "-f", "test.txt"])
    long = parse_command_line(catalog, ["exe", "--file=test.txt"])
    spaced = parse_command_line(catalog, ["exe", "--file", "test.txt"])
    assert short == long == spaced
    assert short.options == {"file": "test.txt"}


def test_missing_value(catalog):
    with pytest.raises(MissingValueError):
        parse_command_line(catalog, ["exe", "-f"])
    with pytest.raises(MissingValueError):
        parse_command_line(catalog, ["exe", "--file"])


def test_value_is_not_taken_from_a_flag(catalog):
    with pytest.raises(MissingValueError):
        parse_command_line(catalog, ["exe", "-f", "-m"])


def test_default_used_without_consuming(catalog):
    parsed = parse_command_line(catalog, ["exe", "-o"])
    assert parsed.options == {"output": "default.txt"}
    assert parsed.arguments == ()

    parsed = parse_command_line(catalog, ["exe", "--output", "-m"])
    assert parsed.options == {"output": "default.txt", "base64": None}


def test_next_token_wins_over_default(catalog):
    parsed = parse_command_line(catalog, ["exe", "-o", "out.txt", "in.txt"])
    assert parsed.options == {"output": "out.txt"}
    assert parsed.arguments == ("in.txt",)


def test_defaults_are_not_back_filled(catalog):
    parsed = parse_command_line(catalog, ["exe", "-m"])
    assert "output" not in parsed.options
    assert not parsed.is_option_set("output")


def test_duplicate_long(catalog):
    with pytest.raises(DuplicateOptionError):
        parse_command_line(catalog, ["exe", "--help", "--help"])


def test_duplicate_across_forms(catalog):
    with pytest.raises(DuplicateOptionError):
        parse_command_line(catalog, ["exe", "-h", "--help"])
    with pytest.raises(DuplicateOptionError):
        parse_command_line(catalog, ["exe", "--file=a", "-f", "b"])


def test_unknown_long(catalog):
    with pytest.raises(UnknownOptionError) as excinfo:
        parse_command_line(catalog, ["exe", "--bogus"])
    assert str(excinfo.value) == "Unknown option: --bogus"


def test_unknown_empty_long_name(catalog):
    with pytest.raises(UnknownOptionError):
        parse_command_line(catalog, ["exe", "--=value"])


def test_bare_flag_rejects_inline_value(catalog):
    with pytest.raises(OptionValidationError) as excinfo:
        parse_command_line(catalog, ["exe", "--help=yes"])
    assert "does not accept a value" in str(excinfo.value)


def test_bare_flag_never_consumes_next_token(catalog):
    parsed = parse_command_line(catalog, ["exe", "--base64", "file.txt"])
    assert parsed.options == {"base64": None}
    assert parsed.arguments == ("file.txt",)


def test_terminator(catalog):
    parsed = parse_command_line(
        catalog, ["exe", "--help", "--", "--not-an-option", "file.txt"]
    )
    assert parsed.options == {"help": None}
    assert parsed.arguments == ("--not-an-option", "file.txt")


def test_terminator_alone(catalog):
    parsed = parse_command_line(catalog, ["exe", "--"])
    assert parsed.options == {}
    assert parsed.arguments == ()


def test_positional_stops_option_scanning(catalog):
    parsed = parse_command_line(catalog, ["exe", "-m", "in.txt", "--help", "-f", "x"])
    assert parsed.options == {"base64": None}
    assert parsed.arguments == ("in.txt", "--help", "-f", "x")


def test_single_dash_is_positional(catalog):
    parsed = parse_command_line(catalog, ["exe", "-m", "-", "out.txt"])
    assert parsed.options == {"base64": None}
    assert parsed.arguments == ("-", "out.txt")


def test_dash_is_not_consumed_as_value(catalog):
    with pytest.raises(MissingValueError):
        parse_command_line(catalog, ["exe", "-f", "-"])


def test_validator_failure_carries_message(catalog):
    with pytest.raises(OptionValidationError) as excinfo:
        parse_command_line(catalog, ["exe", "--name="])
    assert excinfo.value.detail == "value must not be empty"
    assert str(excinfo.value) == "Validation error: value must not be empty"
    assert isinstance(excinfo.value.__cause__, ValueError)


def test_validator_runs_on_defaults():
    from sharutils.parser import OptionCatalog, OptionDefinition

    def reject_all(value: str) -> None:
        raise ValueError(f"'{value}' rejected")

    catalog = OptionCatalog(
        [OptionDefinition("v", "version", takes_value=True, default="x", validator=reject_all)]
    )
    with pytest.raises(OptionValidationError, match="'x' rejected"):
        parse_command_line(catalog, ["exe", "-v"])


def test_first_violation_wins(catalog):
    with pytest.raises(UnknownOptionError):
        parse_command_line(catalog, ["exe", "--bogus", "--help", "--help"])
    with pytest.raises(DuplicateOptionError):
        parse_command_line(catalog, ["exe", "--help", "--help", "--bogus"])


def test_bytes_arguments_are_decoded(catalog):
    parsed = parse_command_line(catalog, [b"exe", b"-f", b"in.txt", b"out"])
    assert parsed.executable_path == "exe"
    assert parsed.options == {"file": "in.txt"}
    assert parsed.arguments == ("out",)


def test_parse_is_repeatable(catalog):
    parser = OptionParser(catalog)
    args = ["exe", "-mf", "in.txt", "--", "-h"]
    first = parser.parse(args)
    second = parser.parse(args)
    assert first == second
    assert args == ["exe", "-mf", "in.txt", "--", "-h"]


def test_parser_accepts_definition_list(catalog):
    parser = OptionParser(list(catalog))
    assert parser.parse(["exe", "-h"]).options == {"help": None}
    assert str(parser) == "OptionParser(options=5)"


def test_result_is_immutable(catalog):
    parsed = parse_command_line(catalog, ["exe", "-h"])
    with pytest.raises(TypeError):
        parsed.options["base64"] = None  # type: ignore[index]
    assert isinstance(parsed, ParsedCommand)
