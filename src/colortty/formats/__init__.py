"""
Color scheme parsers with automatic parser discovery.

New source formats are automatically discovered - just create a new file
in this directory that defines a SchemeParser subclass with a format_name.
"""

from .base import (
    SchemeParser,
    decode_text,
    detect_format,
    discover_parsers,
    get_parser,
    list_available_formats,
)

# Import specific parsers for direct access if needed
from .gogh import GoghParser
from .iterm import ITermParser
from .mintty import MinttyParser

__all__ = [
    "SchemeParser",
    "GoghParser",
    "ITermParser",
    "MinttyParser",
    "decode_text",
    "detect_format",
    "discover_parsers",
    "get_parser",
    "list_available_formats",
]
