"""colortty - color scheme converter for alacritty"""

__version__ = "0.1.0"

from .color import ColorValue
from .config.settings import AppSettings, SettingsManager
from .convert import convert, parse, serialize
from .errors import (
    AmbiguousInput,
    ColorSchemeError,
    ColortyError,
    MalformedColor,
    MalformedScheme,
    MissingField,
    OutOfRange,
    UnknownFormat,
)
from .formats import SchemeParser, detect_format
from .providers import Provider
from .scheme import ColorScheme

__all__ = [
    "ColorValue",
    "ColorScheme",
    "SchemeParser",
    "Provider",
    "parse",
    "serialize",
    "convert",
    "detect_format",
    "SettingsManager",
    "AppSettings",
    "ColortyError",
    "ColorSchemeError",
    "UnknownFormat",
    "AmbiguousInput",
    "MalformedColor",
    "OutOfRange",
    "MissingField",
    "MalformedScheme",
]
