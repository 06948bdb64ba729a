# Sharutils — (c) 2025 sharutils contributors — MIT Licensed
"""
Color constants and the Rich theme used by the sharutils consoles.

`OneColors` holds hex values from the One Dark palette so they can be dropped
straight into Rich markup, e.g. `f"[{OneColors.DARK_RED}]error[/]"`.
"""
from rich.theme import Theme


class OneColors:
    """One Dark palette."""

    BLACK = "#282C34"
    GUTTER_GREY = "#4B5263"
    COMMENT_GREY = "#5C6370"
    WHITE = "#ABB2BF"
    DARK_RED = "#BE5046"
    LIGHT_RED = "#E06C75"
    GREEN = "#98C379"
    LIGHT_YELLOW = "#E5C07B"
    DARK_YELLOW = "#D19A66"
    BLUE = "#61AFEF"
    MAGENTA = "#C678DD"
    CYAN = "#56B6C2"


def get_one_theme() -> Theme:
    """Return a Rich theme mapping semantic style names onto `OneColors`."""
    return Theme(
        {
            "error": f"bold {OneColors.LIGHT_RED}",
            "warning": OneColors.DARK_YELLOW,
            "hint": OneColors.COMMENT_GREY,
            "success": OneColors.GREEN,
            "title": f"bold {OneColors.BLUE}",
            "value": OneColors.CYAN,
        }
    )
