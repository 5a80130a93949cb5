"""Claro — command-line entry point."""
from __future__ import annotations

import argparse
import configparser
import sys
from pathlib import Path
from typing import Optional

from claro.core.constants import (
    PROG_NAME, VERSION_TEXT, DEFAULT_SETTINGS, EXIT_OK, EXIT_USAGE,
)
from claro.core.errors import ClaroError
from claro.core.interpreter import Interpreter
from claro.core.settings_manager import SettingsManager

_OPTIONS = ("-e", "-i", "-h", "--help", "--version", "-c", "--config", "-v", "--verbose")


class UsageError(Exception):
    """Bad command-line arguments; always exits with EXIT_USAGE."""


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:        # type: ignore[override]
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog=PROG_NAME,
        description="Claro line-oriented command interpreter",
        add_help=False,
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("-e", dest="file", metavar="<file>",
                      help="Execute the code from the specified file")
    mode.add_argument("-i", dest="interactive", action="store_true",
                      help="Enter interactive mode")
    mode.add_argument("-h", "--help", dest="help", action="store_true",
                      help="Show this help message")
    mode.add_argument("--version", dest="version", action="store_true",
                      help="Show version information")
    parser.add_argument("-c", "--config", type=Path, default=None,
                        help=f"Settings file (default: ./{DEFAULT_SETTINGS} if present)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Write log messages to stderr")
    return parser


def _make_log_fn(verbose: bool):
    if not verbose:
        return None

    def log(level: str, msg: str) -> None:
        print(f"[{level}] {msg}", file=sys.stderr)

    return log


def main(argv: Optional[list[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    parser = build_parser()

    if not argv:
        parser.print_help()
        return EXIT_OK
    if argv[0] not in _OPTIONS:
        print(f"Error: Invalid option: {argv[0]}", file=sys.stderr)
        parser.print_help()
        return EXIT_USAGE

    try:
        args = parser.parse_args(argv)
    except UsageError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        parser.print_help()
        return EXIT_USAGE

    if args.help:
        parser.print_help()
        return EXIT_OK
    if args.version:
        print(VERSION_TEXT)
        return EXIT_OK
    if args.file is None and not args.interactive:
        parser.print_help()
        return EXIT_USAGE

    # An explicit --config must exist; the implicit ./claro.ini is optional.
    try:
        if args.config is not None:
            settings = SettingsManager(args.config, required=True)
        else:
            settings = SettingsManager(Path(DEFAULT_SETTINGS))
        settings.validate()
        interp = Interpreter(settings, log_fn=_make_log_fn(args.verbose))
    except (configparser.Error, ValueError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_USAGE

    # Top-level boundary: anything that escapes a batch ends up here.
    try:
        if args.file is not None:
            interp.run_file(args.file)
        else:
            interp.run_interactive()
    except ClaroError as exc:
        interp.report(exc)
        return settings.error_exit_code
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
