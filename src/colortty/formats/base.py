"""
Abstract base class for color scheme parsers with dynamic parser discovery.

This module provides a plugin-style architecture where new source formats
can be added by simply creating a new file in the formats/ directory.
Each parser registers itself by implementing SchemeParser and providing
a format name and the file extensions it claims.
"""

import importlib
import inspect
from abc import ABC, abstractmethod
from pathlib import Path

from ..errors import AmbiguousInput, MalformedScheme, UnknownFormat
from ..scheme import ColorScheme

# File name used on the command line for standard input
STDIN_NAME = "-"


class SchemeParser(ABC):
    """Turns one source format into a ColorScheme."""

    # Class attributes for parser registration
    # Subclasses must override format_name to be discovered
    format_name: str | None = None
    extensions: tuple[str, ...] = ()

    @abstractmethod
    def parse(self, data: bytes | str, name: str = "") -> ColorScheme:
        """
        Parse raw input into a color scheme.

        Args:
            data: Raw file content
            name: Scheme name (may be empty for anonymous input)

        Returns:
            Fully populated color scheme

        Raises:
            ColorSchemeError: If the input is not a valid scheme
        """
        pass

    @classmethod
    def matches_filename(cls, filename: str) -> bool:
        """Check if a file name carries one of this format's extensions."""
        return any(filename.endswith(ext) for ext in cls.extensions)


def decode_text(data: bytes | str) -> str:
    """
    Decode raw input as UTF-8 text.

    Raises:
        MalformedScheme: If the bytes are not valid UTF-8
    """
    if isinstance(data, str):
        return data
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise MalformedScheme(f"input is not valid UTF-8 text: {exc}") from exc


# Parser registry - populated automatically by scanning formats/ directory
_PARSER_REGISTRY: dict[str, type[SchemeParser]] = {}


def discover_parsers() -> dict[str, type[SchemeParser]]:
    """
    Discover and load all scheme parsers from the formats/ directory.

    Scans all Python files in formats/, imports them, and finds all
    SchemeParser subclasses that define a format_name.

    Returns:
        Dictionary mapping format names to parser classes
    """
    if _PARSER_REGISTRY:
        # Already discovered
        return _PARSER_REGISTRY

    formats_dir = Path(__file__).parent

    parser_files = sorted(
        f for f in formats_dir.glob("*.py") if f.stem not in ("base", "__init__")
    )

    for parser_file in parser_files:
        module = importlib.import_module(f".{parser_file.stem}", package=__package__)

        for _, obj in inspect.getmembers(module, inspect.isclass):
            if (
                issubclass(obj, SchemeParser)
                and obj is not SchemeParser
                and obj.format_name is not None
            ):
                _PARSER_REGISTRY[obj.format_name] = obj

    return _PARSER_REGISTRY


def get_parser(format_name: str) -> type[SchemeParser]:
    """
    Look up a parser by format name.

    Raises:
        UnknownFormat: If no parser has this name
    """
    parsers = discover_parsers()
    if format_name not in parsers:
        raise UnknownFormat(format_name)
    return parsers[format_name]


def detect_format(
    filename: str | None = None, hint: str | None = None
) -> type[SchemeParser]:
    """
    Choose the parser for an input.

    An explicit hint always wins. Otherwise the file extension decides;
    file content is never inspected.

    Args:
        filename: Input file name, None or "-" for piped input
        hint: Explicit format name ("iterm", "mintty", "gogh")

    Returns:
        Parser class for the input

    Raises:
        UnknownFormat: If the hint names no known format
        AmbiguousInput: If there is no hint and the name does not decide

    Example:
        >>> parser_class = detect_format("Dracula.itermcolors")
        >>> scheme = parser_class().parse(content, name="Dracula")
    """
    if hint is not None:
        return get_parser(hint)

    if not filename or filename == STDIN_NAME:
        raise AmbiguousInput()

    for parser_class in discover_parsers().values():
        if parser_class.matches_filename(filename):
            return parser_class

    raise AmbiguousInput(filename)


def list_available_formats() -> list[str]:
    """
    Get a list of all available source formats.

    Returns:
        List of format names
    """
    return sorted(discover_parsers().keys())
