"""Command-line interface for colortty."""

from .parser import apply_cli_settings, create_cli_parser
from .runner import run_cli

__all__ = ["create_cli_parser", "apply_cli_settings", "run_cli"]
