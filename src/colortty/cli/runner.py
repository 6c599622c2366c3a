"""CLI command runner for colortty."""

import argparse
import sys
from dataclasses import replace
from pathlib import Path

from ..config.settings import AppSettings, SettingsManager
from ..convert import convert, serialize
from ..errors import ColortyError
from ..formats.base import STDIN_NAME
from ..providers import Provider, get_provider
from ..utils import LoggingProviderWrapper, render_preview
from .parser import apply_cli_settings


def make_log_callback(verbose: bool):
    """Create a (message, level) callback printing to stderr."""

    def log(message: str, level: str) -> None:
        if verbose or level in ("warning", "error"):
            print(f"[{level}] {message}", file=sys.stderr)

    return log


def create_provider(settings: AppSettings, verbose: bool = False) -> Provider:
    """Create the configured provider, wrapped with HTTP logging when verbose."""
    log = make_log_callback(verbose)
    provider = get_provider(
        settings.default_provider,
        cache_root=settings.cache_dir or None,
        timeout_sec=settings.http_timeout_sec,
        batch_size=settings.download_batch_size,
        log_callback=log,
    )
    if verbose:
        return LoggingProviderWrapper(provider, log)
    return provider


def read_source(source: str) -> bytes:
    """Read a scheme from a file, or from standard input for '-'."""
    if source == STDIN_NAME:
        return sys.stdin.buffer.read()
    return Path(source).read_bytes()


def write_output(text: str, output: str | None) -> None:
    if output:
        Path(output).write_text(text, encoding="utf-8")
    else:
        sys.stdout.write(text)


def run_convert(args: argparse.Namespace, settings: AppSettings) -> int:
    """Convert a local scheme file."""
    data = read_source(args.source)
    text = convert(data, filename=args.source, hint=args.input_format)
    write_output(text, args.output)
    return 0


def run_list(args: argparse.Namespace, settings: AppSettings) -> int:
    """List schemes of a provider with a one-line preview each."""
    provider = create_provider(settings, args.verbose)
    color_schemes = provider.list(refresh=args.update)

    width = max((len(name) for name, _ in color_schemes), default=0)
    for name, scheme in color_schemes:
        if args.no_preview:
            print(name)
        else:
            print(f"{name.ljust(width)}  {render_preview(scheme)}")
    return 0


def run_get(
    args: argparse.Namespace, settings: AppSettings, settings_manager: SettingsManager
) -> int:
    """Fetch one scheme from a provider and print it as alacritty configuration."""
    provider = create_provider(settings, args.verbose)
    scheme = provider.get(args.name)
    write_output(serialize(scheme), args.output)

    settings_manager.add_scheme_to_history(settings.default_provider, args.name)
    settings_manager.save()
    return 0


def run_cli(args: argparse.Namespace) -> int:
    """Run a parsed colortty command and return the exit status."""
    try:
        # Load settings
        settings_manager = SettingsManager()
        settings = settings_manager.load()

        # Apply CLI arguments to a copy; only history is persisted
        settings = apply_cli_settings(args, replace(settings))

        if args.command == "convert":
            return run_convert(args, settings)
        if args.command == "list":
            return run_list(args, settings)
        if args.command == "get":
            return run_get(args, settings, settings_manager)

        print(f"error: no such subcommand: `{args.command}`", file=sys.stderr)
        return 1

    except (ColortyError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
