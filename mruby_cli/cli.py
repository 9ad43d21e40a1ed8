"""Command-line entry point for ``mruby-cli``."""

from __future__ import annotations

import argparse
import sys

from pydantic import ValidationError
from rich.markup import escape

from mruby_cli import __version__
from mruby_cli.config import SetupConfig
from mruby_cli.scaffolder import ConsoleReporter, FilesystemError, Scaffolder
from mruby_cli.utils import console, print_error, print_success, print_warning


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mruby-cli",
        description="mruby-cli -- scaffold a new mruby command-line project",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  mruby-cli --setup widget\n"
            "  mruby-cli -s widget -o ~/src\n"
            "  mruby-cli --version\n"
        ),
    )
    parser.add_argument(
        "-s", "--setup",
        metavar="NAME",
        default=None,
        help="Set up a new project named NAME",
    )
    parser.add_argument(
        "-o", "--output",
        metavar="DIR",
        default=None,
        help="Directory to create the project in (default: $MRUBY_CLI_OUTPUT_DIR or .)",
    )
    parser.add_argument(
        "-v", "--version",
        action="store_true",
        help="Print the mruby-cli version",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return a process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        console.print(f"mruby-cli version {__version__}", highlight=False)
        return 0

    if args.setup is None:
        parser.print_help()
        return 0

    try:
        config = SetupConfig.from_env(args.setup, args.output)
    except ValidationError as exc:
        reason = exc.errors()[0]["msg"]
        print_error(f"Error: invalid project name {escape(repr(args.setup))}: {escape(reason)}")
        return 1

    if config.project_root.is_dir():
        print_warning(f"{escape(str(config.project_root))} already exists; generated files will be overwritten")

    try:
        Scaffolder(config.name, ConsoleReporter(console), config.output_dir).run()
    except FilesystemError as exc:
        print_error(f"Error: {escape(str(exc))}")
        return 1

    print_success(f"Created {escape(config.name)}")
    return 0


def run() -> None:
    """Console-script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
