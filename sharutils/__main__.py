"""
Sharutils command-line tools

Copyright (c) 2025 sharutils contributors.
Licensed under the MIT License. See LICENSE file for details.

Run a tool by name, e.g. `python -m sharutils uuencode -m in.bin in.bin`.
"""

import sys
from typing import Any

from sharutils.console import err_console
from sharutils.uudecode import main as uudecode_main
from sharutils.uuencode import main as uuencode_main

TOOLS = {
    "uuencode": uuencode_main,
    "uudecode": uudecode_main,
}


def main(argv: list[str] | None = None) -> Any:
    args = sys.argv[1:] if argv is None else argv
    if not args or args[0] not in TOOLS:
        err_console.print(
            f"usage: python -m sharutils {{{','.join(TOOLS)}}} [OPTIONS] ...",
            markup=False,
            highlight=False,
        )
        return 1
    return TOOLS[args[0]](args)


if __name__ == "__main__":
    sys.exit(main())
