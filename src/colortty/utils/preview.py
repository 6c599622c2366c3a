"""
One-line 24-bit ANSI preview of a color scheme.

Draws a dot per color on the scheme's own background: the foreground
first, then the normal and bright ANSI colors.
"""

from ..color import ColorValue
from ..scheme import ColorScheme

RESET = "\x1b[0m"
SWATCH = "●"


def background_escape(color: ColorValue) -> str:
    """Escape sequence setting a 24-bit background color."""
    return "\x1b[48;2;{};{};{}m".format(*color.to_rgb_triplet())


def swatch(color: ColorValue) -> str:
    """A dot drawn in the given 24-bit foreground color."""
    return "\x1b[38;2;{};{};{}m{}".format(*color.to_rgb_triplet(), SWATCH)


def render_preview(scheme: ColorScheme) -> str:
    """
    Render all scheme colors in one line.

    Returns:
        Line with escape sequences, terminated by a reset
    """
    parts = [
        background_escape(scheme.background),
        " ",
        swatch(scheme.foreground),
        "  ",
        "".join(swatch(color) for color in scheme.normal_colors),
        "  ",
        "".join(swatch(color) for color in scheme.bright_colors),
        " ",
        RESET,
    ]
    return "".join(parts)
