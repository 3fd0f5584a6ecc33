"""CLI entry point for vaultmeta."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import NoReturn

from loguru import logger

from .. import __version__
from ..app.factory import create_application
from ..core.config import Config
from . import commands

HANDLERS = {
    "get": commands.handle_get,
    "frontmatter": commands.handle_frontmatter,
    "prototypes": commands.handle_prototypes,
    "values": commands.handle_values,
    "patch": commands.handle_patch,
    "set": commands.handle_set,
    "clear": commands.handle_clear,
}


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="vaultmeta",
        description="Read and edit metadata of notes in a markdown vault",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--vault", type=Path, default=None, help="Vault root directory")
    parser.add_argument("--config", type=Path, default=None, help="TOML config file")
    parser.add_argument(
        "-c",
        "--current",
        default=None,
        help="Note id to treat as the current note",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=False)

    # Read commands
    get_parser = subparsers.add_parser("get", help="Merged metadata of a note")
    commands.add_get_arguments(get_parser)

    fm_parser = subparsers.add_parser("frontmatter", help="Frontmatter of a note")
    commands.add_read_arguments(fm_parser)

    proto_parser = subparsers.add_parser("prototypes", help="Frontmatter of a prototype note")
    proto_parser.add_argument("sub_path", help="Path below the prototypes root")

    values_parser = subparsers.add_parser("values", help="Frontmatter of a values note")
    values_parser.add_argument("sub_path", help="Path below the values root")

    # Write commands
    patch_parser = subparsers.add_parser("patch", help="Write individual frontmatter fields")
    commands.add_patch_arguments(patch_parser)

    set_parser = subparsers.add_parser("set", help="Replace all frontmatter fields")
    commands.add_write_arguments(set_parser)

    clear_parser = subparsers.add_parser("clear", help="Remove frontmatter fields")
    commands.add_clear_arguments(clear_parser)

    return parser


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr at DEBUG or WARNING level."""
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")


def load_config(args: argparse.Namespace) -> Config:
    config = Config.from_env_or_file(args.config)
    if args.vault is not None:
        config.vault_path = args.vault
    return config


def main(argv: list[str] | None = None) -> NoReturn:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    handler = HANDLERS.get(args.command)
    if handler is None:
        parser.print_help()
        sys.exit(0)

    try:
        with create_application(load_config(args)) as app:
            if args.current:
                app.active.focus(args.current)
            handler(args, app)

        sys.exit(0)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
