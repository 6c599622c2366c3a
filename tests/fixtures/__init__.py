"""
Test fixtures for colortty tests.

This module provides:
- Theme files in fixtures/themes (Dracula in every source format)
- Generators for mintty, iTerm2 and Gogh inputs
"""

from .sample_data import (
    DRACULA_GOGH_HEX,
    DRACULA_ITERM_HEX,
    DRACULA_MINTTY_HEX,
    XTERM_COLORS,
    make_gogh_script,
    make_iterm_dict,
    make_itermcolors,
    make_minttyrc,
    read_fixture,
)

__all__ = [
    "DRACULA_GOGH_HEX",
    "DRACULA_ITERM_HEX",
    "DRACULA_MINTTY_HEX",
    "XTERM_COLORS",
    "make_gogh_script",
    "make_iterm_dict",
    "make_itermcolors",
    "make_minttyrc",
    "read_fixture",
]
