"""Command-line argument parser for colortty."""

import argparse

from ..config.settings import AppSettings
from ..formats import list_available_formats
from ..providers import list_available_providers


def create_cli_parser() -> argparse.ArgumentParser:
    """Create command line argument parser."""
    parser = argparse.ArgumentParser(
        prog="colortty",
        description="colortty - color scheme converter for alacritty",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # List color schemes at https://github.com/mbadolato/iTerm2-Color-Schemes
  colortty list
  colortty list -p iterm

  # List color schemes at https://github.com/Gogh-Co/Gogh
  colortty list -p gogh

  # Get a color scheme from a provider
  colortty get <color scheme name>
  colortty get -p gogh <color scheme name>

  # Convert with implicit input type
  colortty convert some-color.itermcolors
  colortty convert some-color.minttyrc
  colortty convert some-color.sh

  # Convert with explicit input type
  colortty convert -i mintty some-color-theme

  # Convert stdin (explicit input type is necessary)
  cat some-color-theme | colortty convert -i iterm -
        """,
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log HTTP requests and progress to stderr",
    )

    # Network and cache parameters
    net_group = parser.add_argument_group("network settings")
    net_group.add_argument(
        "--timeout", type=float, help="HTTP timeout in seconds (default: 30)"
    )
    net_group.add_argument(
        "--cache-dir", help="Cache directory for downloaded color schemes"
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    # convert
    convert_parser = subparsers.add_parser(
        "convert", help="Convert a color scheme file to alacritty configuration"
    )
    convert_parser.add_argument(
        "source", help="Color scheme file, or '-' to read standard input"
    )
    convert_parser.add_argument(
        "--input-format",
        "-i",
        choices=list_available_formats(),
        metavar="INPUT_FORMAT",
        help="Input format: %(choices)s (default: from file extension)",
    )
    convert_parser.add_argument(
        "--output", "-o", help="Write to this file instead of standard output"
    )

    # list
    list_parser = subparsers.add_parser(
        "list", help="List color schemes provided by a repository"
    )
    list_parser.add_argument(
        "--provider",
        "-p",
        choices=list_available_providers(),
        help="Color scheme provider: %(choices)s",
    )
    list_parser.add_argument(
        "--update",
        "-u",
        action="store_true",
        help="Download the repository again instead of using the cache",
    )
    list_parser.add_argument(
        "--no-preview", action="store_true", help="Only print color scheme names"
    )

    # get
    get_parser = subparsers.add_parser(
        "get", help="Get a color scheme from a repository"
    )
    get_parser.add_argument("name", help="Color scheme name")
    get_parser.add_argument(
        "--provider",
        "-p",
        choices=list_available_providers(),
        help="Color scheme provider: %(choices)s",
    )
    get_parser.add_argument(
        "--output", "-o", help="Write to this file instead of standard output"
    )

    return parser


def apply_cli_settings(args: argparse.Namespace, settings: AppSettings) -> AppSettings:
    """Apply CLI arguments to settings object."""
    # Network settings
    if args.timeout is not None:
        settings.http_timeout_sec = args.timeout
    if args.cache_dir:
        settings.cache_dir = args.cache_dir

    # Provider settings
    if getattr(args, "provider", None):
        settings.default_provider = args.provider

    return settings
