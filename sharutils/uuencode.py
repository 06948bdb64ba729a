# Sharutils — (c) 2025 sharutils contributors — MIT Licensed
"""
`uuencode` front end: encode a file into email-friendly text.

Usage: uuencode [OPTIONS] [input-file] output-name

With one positional argument the input is read from standard input and the
argument names the file recorded in the encoded header. With two, the first is
the input file.
"""
from __future__ import annotations

from typing import Sequence

from sharutils.cli import SharutilsTool, display_text, print_user_line
from sharutils.console import console
from sharutils.exceptions import UsageError
from sharutils.parser import OptionDefinition, ParsedCommand
from sharutils.utils import setup_logging


class UUEncode(SharutilsTool):
    name = "uuencode"
    description = "Encode a file into email-friendly text"
    usage = "[OPTIONS] [input-file] output-name"

    def get_options(self) -> list[OptionDefinition]:
        return [
            OptionDefinition(
                flag="m",
                name="base64",
                help="Convert using base64 instead of traditional uuencoding",
            ),
            OptionDefinition(
                flag="e",
                name="encode-file-name",
                help="Encode the output file name",
            ),
        ]

    def check_arguments(self, parsed: ParsedCommand) -> None:
        if not parsed.arguments:
            raise UsageError("Missing required output-name argument")
        if len(parsed.arguments) > 2:
            raise UsageError("Too many arguments provided")

    def report(self, parsed: ParsedCommand) -> None:
        if parsed.is_option_set("base64"):
            console.print("Configuration: Using base64 encoding", highlight=False)
        else:
            console.print("Configuration: Using traditional uuencoding", highlight=False)

        if parsed.is_option_set("encode-file-name"):
            console.print("Configuration: Output filename will be encoded", highlight=False)

        if len(parsed.arguments) == 1:
            console.print("Input: Reading from standard input", highlight=False)
            output_name = parsed.arguments[0]
        else:
            input_file, output_name = parsed.arguments
            print_user_line(f"Input file: [value]{display_text(input_file)}[/]")
        print_user_line(f"Output name: [value]{display_text(output_name)}[/]")


def main(argv: Sequence[str | bytes] | None = None) -> int:
    setup_logging()
    return UUEncode().run(argv)


if __name__ == "__main__":
    raise SystemExit(main())
