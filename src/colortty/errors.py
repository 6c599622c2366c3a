"""
Error kinds raised by colortty.

Parse failures derive from ColorSchemeError, remote repository failures
from ProviderError. Nothing in the library terminates the process; the CLI
runner turns these into exit codes.
"""


class ColortyError(Exception):
    """Base class for all colortty errors."""


class ColorSchemeError(ColortyError):
    """A color scheme could not be detected or parsed."""


class UnknownFormat(ColorSchemeError):
    """Explicit format name is not recognized."""

    def __init__(self, name: str):
        super().__init__(f"unknown color scheme format: {name}")
        self.name = name


class AmbiguousInput(ColorSchemeError):
    """Format cannot be inferred and no explicit format was given."""

    def __init__(self, filename: str | None = None):
        if filename:
            message = f"cannot infer input format from file name: {filename}"
        else:
            message = "input format is not specified and cannot be inferred"
        super().__init__(message)
        self.filename = filename


class MalformedColor(ColorSchemeError):
    """A color literal is syntactically invalid or numerically out of range."""


class OutOfRange(ColorSchemeError):
    """An integer channel value lies outside [0, 255]."""


class MissingField(ColorSchemeError):
    """Required scheme slots were never set while parsing."""

    def __init__(self, fields: list[str]):
        super().__init__(f"missing required colors: {', '.join(fields)}")
        self.fields = list(fields)


class MalformedScheme(ColorSchemeError):
    """The input as a whole cannot be read (bad encoding, invalid plist, ...)."""


class ProviderError(ColortyError):
    """A remote color scheme repository could not be used."""


class UnknownProvider(ProviderError):
    """Provider name is not recognized."""

    def __init__(self, name: str):
        super().__init__(f"unknown color scheme provider: {name}")
        self.name = name


class FetchError(ProviderError):
    """An HTTP request failed or returned a non-success status."""
