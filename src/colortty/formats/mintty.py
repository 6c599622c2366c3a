"""
mintty color theme parser (.minttyrc).

Themes are line-oriented "Key=R,G,B" settings with decimal channels.
"""

import re

from ..color import ColorValue
from ..errors import MalformedColor
from ..scheme import ColorScheme, SchemeBuilder
from .base import SchemeParser, decode_text

# mintty setting name -> scheme slot
MINTTY_KEYS = {
    "Black": "black",
    "Red": "red",
    "Green": "green",
    "Yellow": "yellow",
    "Blue": "blue",
    "Magenta": "magenta",
    "Cyan": "cyan",
    "White": "white",
    "BoldBlack": "bright_black",
    "BoldRed": "bright_red",
    "BoldGreen": "bright_green",
    "BoldYellow": "bright_yellow",
    "BoldBlue": "bright_blue",
    "BoldMagenta": "bright_magenta",
    "BoldCyan": "bright_cyan",
    "BoldWhite": "bright_white",
    "ForegroundColour": "foreground",
    "BackgroundColour": "background",
    "CursorColour": "cursor",
}

_INTEGER = re.compile(r"[+-]?[0-9]+")


def parse_mintty_color(value: str) -> ColorValue:
    """
    Parse an "R,G,B" decimal triplet.

    Raises:
        MalformedColor: If the value is not three integers
        OutOfRange: If a channel is outside [0, 255]
    """
    parts = [part.strip() for part in value.split(",")]
    if len(parts) != 3 or not all(_INTEGER.fullmatch(part) for part in parts):
        raise MalformedColor(f"invalid color representation: {value.strip()!r}")
    red, green, blue = (int(part) for part in parts)
    return ColorValue.from_rgb_triplet(red, green, blue)


class MinttyParser(SchemeParser):
    """Parser for mintty .minttyrc themes."""

    format_name = "mintty"
    extensions = (".minttyrc",)

    def parse(self, data: bytes | str, name: str = "") -> ColorScheme:
        builder = SchemeBuilder(name=name)

        for line in decode_text(data).splitlines():
            stripped = line.strip()
            if not stripped or stripped.startswith("#") or "=" not in stripped:
                continue

            key, value = stripped.split("=", 1)
            slot = MINTTY_KEYS.get(key.strip())
            if slot is None:
                # Other mintty options (Font, Columns, ...) are not colors
                continue

            builder.set(slot, parse_mintty_color(value))

        return builder.build()
