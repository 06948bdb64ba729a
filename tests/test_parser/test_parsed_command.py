from sharutils.parser import ParsedCommand


def make_command() -> ParsedCommand:
    return ParsedCommand(
        executable_path="uudecode",
        options={"ignore-chmod": None, "output-file": "out.bin"},
        arguments=["in.uu"],
    )


def test_queries():
    parsed = make_command()
    assert parsed.is_option_set("ignore-chmod")
    assert not parsed.is_option_set("help")

    assert parsed.option_value("output-file") == "out.bin"
    assert parsed.option_value("ignore-chmod") is None
    assert parsed.option_value("help") is None

    assert parsed.option_value_or("output-file", "fallback") == "out.bin"
    assert parsed.option_value_or("ignore-chmod", "fallback") == "fallback"
    assert parsed.option_value_or("help", 3) == 3

    assert parsed.has_value("output-file")
    assert not parsed.has_value("ignore-chmod")
    assert not parsed.has_value("help")


def test_arguments_are_a_tuple():
    assert make_command().arguments == ("in.uu",)


def test_with_options_keeps_command_line_values():
    parsed = make_command().with_options(
        {"output-file": "saved.bin", "more": "x", "ignore-chmod": "ignored"}
    )
    assert parsed.options == {
        "output-file": "out.bin",
        "more": "x",
        "ignore-chmod": None,
    }
    assert parsed.arguments == ("in.uu",)
    assert parsed.executable_path == "uudecode"


def test_equality_and_hash():
    assert make_command() == make_command()
    assert hash(make_command()) == hash(make_command())
    assert make_command() != ParsedCommand("uudecode")
