# Sharutils — (c) 2025 sharutils contributors — MIT Licensed
"""
`uudecode` front end: decode one or more encoded files.

Usage: uudecode [OPTIONS] [input-file...]

With no input files the encoded data is read from standard input. The output
name comes from each file's header unless `--output-file` overrides it, which
is only allowed for a single input.
"""
from __future__ import annotations

from typing import Sequence

from sharutils.cli import SharutilsTool, display_text, print_user_line
from sharutils.console import console
from sharutils.exceptions import UsageError
from sharutils.parser import OptionDefinition, ParsedCommand
from sharutils.utils import setup_logging
from sharutils.validators import validate_file_path


class UUDecode(SharutilsTool):
    name = "uudecode"
    description = "Decode an encoded file"
    usage = "[OPTIONS] [input-file...]"

    def get_options(self) -> list[OptionDefinition]:
        return [
            OptionDefinition(
                flag="o",
                name="output-file",
                takes_value=True,
                validator=validate_file_path,
                help="Direct output to file",
            ),
            OptionDefinition(
                flag="c",
                name="ignore-chmod",
                help="Ignore fchmod(3P) errors",
            ),
        ]

    def check_arguments(self, parsed: ParsedCommand) -> None:
        if parsed.is_option_set("output-file") and len(parsed.arguments) > 1:
            raise UsageError(
                "--output-file cannot be used when multiple input files are provided; "
                "each encoded file must name its own output"
            )

    def report(self, parsed: ParsedCommand) -> None:
        if parsed.is_option_set("ignore-chmod"):
            console.print("Configuration: Will ignore fchmod() errors", highlight=False)
        else:
            console.print(
                "Configuration: Will respect file permission errors", highlight=False
            )

        output_file = parsed.option_value("output-file")
        if output_file is not None:
            print_user_line(
                "Configuration: Output will be written to "
                f"[value]{display_text(output_file)}[/]"
            )
        else:
            console.print(
                "Configuration: Output filename will be taken from encoded data",
                highlight=False,
            )

        if not parsed.arguments:
            console.print("Input: Reading from standard input", highlight=False)
            return
        console.print(f"Input files ({len(parsed.arguments)}):", highlight=False)
        for index, input_file in enumerate(parsed.arguments, start=1):
            label = display_text(f"[{index}]")
            print_user_line(f"  {label}: [value]{display_text(input_file)}[/]")


def main(argv: Sequence[str | bytes] | None = None) -> int:
    setup_logging()
    return UUDecode().run(argv)


if __name__ == "__main__":
    raise SystemExit(main())
