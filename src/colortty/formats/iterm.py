"""
iTerm2 color theme parser (.itermcolors).

Themes are XML property lists: a root dictionary mapping color names
("Ansi 0 Color", "Foreground Color", ...) to dictionaries of float
components in [0.0, 1.0].
"""

import plistlib

from ..color import ColorValue
from ..errors import MalformedScheme, MissingField
from ..scheme import ANSI_SLOT_NAMES, ColorScheme, SchemeBuilder
from .base import SchemeParser

# iTerm2 color key -> scheme slot
ITERM_REQUIRED_KEYS = {
    **{f"Ansi {index} Color": slot for index, slot in enumerate(ANSI_SLOT_NAMES)},
    "Foreground Color": "foreground",
    "Background Color": "background",
}
ITERM_OPTIONAL_KEYS = {
    "Cursor Color": "cursor",
    "Cursor Text Color": "cursor_text",
    "Selection Color": "selection_background",
    "Selected Text Color": "selection_foreground",
}

COMPONENT_KEYS = ("Red Component", "Green Component", "Blue Component")


def parse_iterm_color(key: str, entry: object) -> ColorValue:
    """
    Convert one iTerm2 color dictionary.

    "Alpha Component" and "Color Space" are ignored.

    Raises:
        MissingField: If the entry is not a dictionary or lacks a component
        MalformedColor: If a component is not a number in [0.0, 1.0]
    """
    if not isinstance(entry, dict) or any(c not in entry for c in COMPONENT_KEYS):
        raise MissingField([key])
    red, green, blue = (entry[c] for c in COMPONENT_KEYS)
    return ColorValue.from_float_triplet(red, green, blue)


def load_plist(data: bytes | str) -> dict:
    """
    Load the root dictionary of a property list.

    Raises:
        MalformedScheme: If the data is not a plist or its root is not a dict
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    # plistlib reports bad XML values with arbitrary exception types
    # (AttributeError for a bad <date>, LookupError for an unknown encoding)
    try:
        root = plistlib.loads(data)
    except Exception as exc:
        raise MalformedScheme(f"invalid property list: {exc}") from exc
    if not isinstance(root, dict):
        raise MalformedScheme("root dict was not found")
    return root


class ITermParser(SchemeParser):
    """Parser for iTerm2 .itermcolors themes."""

    format_name = "iterm"
    extensions = (".itermcolors",)

    def parse(self, data: bytes | str, name: str = "") -> ColorScheme:
        root = load_plist(data)
        builder = SchemeBuilder(name=name)

        missing = [key for key in ITERM_REQUIRED_KEYS if key not in root]
        if missing:
            raise MissingField(missing)

        for key, slot in ITERM_REQUIRED_KEYS.items():
            builder.set(slot, parse_iterm_color(key, root[key]))

        for key, slot in ITERM_OPTIONAL_KEYS.items():
            if key in root:
                builder.set(slot, parse_iterm_color(key, root[key]))

        return builder.build()
