"""
Gogh color theme parser (.sh).

Gogh distributes themes as shell scripts assigning hex colors to
variables, e.g. export COLOR_01="#282a36". Variable names are matched
case-insensitively since theme authors vary in style.
"""

import re

from ..color import ColorValue
from ..errors import MalformedColor
from ..scheme import ANSI_SLOT_NAMES, ColorScheme, SchemeBuilder
from .base import SchemeParser, decode_text

# Gogh variable (upper case) -> scheme slot
GOGH_VARIABLES = {
    **{f"COLOR_{index + 1:02d}": slot for index, slot in enumerate(ANSI_SLOT_NAMES)},
    "FOREGROUND_COLOR": "foreground",
    "BACKGROUND_COLOR": "background",
    "CURSOR_COLOR": "cursor",
}
PROFILE_NAME_VARIABLE = "PROFILE_NAME"

# NAME=VALUE with optional export, optional quotes and a trailing comment
_ASSIGNMENT = re.compile(
    r"""^\s*(?:export\s+)?(?P<name>[A-Za-z_][A-Za-z0-9_]*)=
        (?:"(?P<double>[^"]*)"|'(?P<single>[^']*)'|(?P<bare>[^\s"']*))
        (?:\s+\#.*)?\s*$""",
    re.VERBOSE,
)
_REFERENCE = re.compile(r"\$(?:\{(?P<braced>\w+)\}|(?P<plain>\w+))")


def split_assignment(line: str) -> tuple[str, str] | None:
    """
    Split a shell assignment into (NAME, value) with quotes removed.

    Returns:
        Upper-cased name and value, or None if the line is not an assignment
    """
    match = _ASSIGNMENT.match(line)
    if match is None:
        return None
    value = next(
        v for v in match.group("double", "single", "bare") if v is not None
    )
    return match.group("name").upper(), value


class GoghParser(SchemeParser):
    """Parser for Gogh shell-script themes."""

    format_name = "gogh"
    extensions = (".sh",)

    def parse(self, data: bytes | str, name: str = "") -> ColorScheme:
        builder = SchemeBuilder(name=name)
        assigned: dict[str, ColorValue] = {}

        for line in decode_text(data).splitlines():
            assignment = split_assignment(line)
            if assignment is None:
                continue
            variable, value = assignment

            if variable == PROFILE_NAME_VARIABLE:
                if not builder.name:
                    builder.name = value.strip()
                continue

            slot = GOGH_VARIABLES.get(variable)
            if slot is None:
                continue

            color = self._resolve(value, assigned)
            assigned[variable] = color
            builder.set(slot, color)

        return builder.build()

    @staticmethod
    def _resolve(value: str, assigned: dict[str, ColorValue]) -> ColorValue:
        """Parse a hex literal or a $VARIABLE reference to an earlier color."""
        reference = _REFERENCE.fullmatch(value.strip())
        if reference is None:
            return ColorValue.from_hex(value)

        target = (reference.group("braced") or reference.group("plain")).upper()
        if target not in assigned:
            raise MalformedColor(f"unresolved color reference: {value!r}")
        return assigned[target]
