"""Read commands for vaultmeta CLI."""

from __future__ import annotations

import argparse
from typing import TYPE_CHECKING

from ...core.types import DEFAULT_SOURCES
from .common import parse_sources, print_record

if TYPE_CHECKING:
    from ...app.application import Application


def add_read_arguments(parser: argparse.ArgumentParser) -> None:
    """Add the target file option shared by read commands."""
    parser.add_argument(
        "-f",
        "--file",
        default=None,
        help="Note id (vault-relative path without extension); defaults to --current",
    )


def add_get_arguments(parser: argparse.ArgumentParser) -> None:
    add_read_arguments(parser)
    parser.add_argument(
        "-s",
        "--sources",
        type=parse_sources,
        default=DEFAULT_SOURCES,
        help="all, none, default, or a comma list of file,frontmatter,inline,cache",
    )


def handle_get(args, app: "Application") -> None:
    """Handle get command.

    Args:
        args: Parsed command arguments.
        app: Initialized application.
    """
    print_record(app.metadata.get(args.file, args.sources))


def handle_frontmatter(args, app: "Application") -> None:
    """Handle frontmatter command."""
    print_record(app.metadata.frontmatter(args.file))


def handle_prototypes(args, app: "Application") -> None:
    """Handle prototypes command."""
    print_record(app.metadata.prototypes(args.sub_path))


def handle_values(args, app: "Application") -> None:
    """Handle values command."""
    print_record(app.metadata.values(args.sub_path))
