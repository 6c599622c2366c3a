"""
Conversion pipeline: detect, parse, serialize.

All functions are pure; nothing here reads files, touches the network or
keeps state between calls.
"""

from pathlib import PurePath

from .config.constants import DEFAULT_TARGET_FORMAT
from .formats import SchemeParser, detect_format, get_parser
from .formats.base import STDIN_NAME
from .scheme import ColorScheme
from .serializers import get_serializer


def parse(
    format: str | type[SchemeParser], data: bytes | str, name: str = ""
) -> ColorScheme:
    """
    Parse raw input in a known format.

    Args:
        format: Format name ("iterm", "mintty", "gogh") or parser class
        data: Raw input
        name: Scheme name

    Returns:
        Parsed color scheme

    Raises:
        ColorSchemeError: On unknown format or invalid input
    """
    parser_class = get_parser(format) if isinstance(format, str) else format
    return parser_class().parse(data, name=name)


def serialize(scheme: ColorScheme, target: str = DEFAULT_TARGET_FORMAT) -> str:
    """
    Render a scheme in a target format.

    Raises:
        UnknownFormat: If the target is not recognized
    """
    return get_serializer(target)().serialize(scheme)


def scheme_name_from_filename(filename: str | None) -> str:
    """Derive a scheme name from a file name ("Dracula.itermcolors" -> "Dracula")."""
    if not filename or filename == STDIN_NAME:
        return ""
    return PurePath(filename).stem


def convert(
    data: bytes | str,
    filename: str | None = None,
    hint: str | None = None,
    target: str = DEFAULT_TARGET_FORMAT,
) -> str:
    """
    Convert a scheme from its source format to the target format.

    Args:
        data: Raw input
        filename: Source file name used for detection and naming
        hint: Explicit source format, overrides detection
        target: Output format

    Returns:
        Target configuration text
    """
    parser_class = detect_format(filename, hint)
    scheme = parse(parser_class, data, name=scheme_name_from_filename(filename))
    return serialize(scheme, target)
