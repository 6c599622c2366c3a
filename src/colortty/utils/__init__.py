"""Utility modules for fetch logging and terminal previews."""

from .logging_wrapper import LoggingProviderWrapper
from .preview import render_preview

__all__ = [
    "LoggingProviderWrapper",
    "render_preview",
]
