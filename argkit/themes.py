# Argkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Color palette and Rich theme used for argkit console output.

`OneColors` holds plain hex colors plus `_b` bold variants so they can be dropped
straight into Rich markup (`f"[{OneColors.DARK_RED}]..."`).
"""
from rich.theme import Theme


class OneColors:
    """One Dark inspired palette."""

    BLACK = "#282C34"
    WHITE = "#ABB2BF"
    DARK_RED = "#E06C75"
    GREEN = "#98C379"
    DARK_YELLOW = "#D19A66"
    LIGHT_YELLOW = "#E5C07B"
    BLUE = "#61AFEF"
    CYAN = "#56B6C2"
    COMMENT_GREY = "#5C6370"

    WHITE_b = f"bold {WHITE}"
    DARK_RED_b = f"bold {DARK_RED}"
    GREEN_b = f"bold {GREEN}"
    BLUE_b = f"bold {BLUE}"
    CYAN_b = f"bold {CYAN}"


def get_theme() -> Theme:
    """Return the Rich theme with the named styles argkit prints with."""
    return Theme(
        {
            "usage": OneColors.WHITE_b,
            "heading": OneColors.BLUE_b,
            "flag": OneColors.CYAN,
            "error": OneColors.DARK_RED_b,
            "hint": OneColors.COMMENT_GREY,
            "version": OneColors.GREEN_b,
        }
    )
