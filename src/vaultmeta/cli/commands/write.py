"""Write commands for vaultmeta CLI."""

from __future__ import annotations

import argparse
from typing import TYPE_CHECKING

from .common import add_redirect_arguments, parse_value, print_record, read_data, redirects

if TYPE_CHECKING:
    from ...app.application import Application


def add_write_arguments(parser: argparse.ArgumentParser) -> None:
    """Add target, data and redirect options shared by patch and set."""
    parser.add_argument("-f", "--file", default=None, help="Note id; defaults to --current")
    parser.add_argument("pairs", nargs="*", metavar="KEY=VALUE", help="Fields to write")
    parser.add_argument("--json", default=None, help="Fields to write as a JSON object")
    add_redirect_arguments(parser)


def add_patch_arguments(parser: argparse.ArgumentParser) -> None:
    add_write_arguments(parser)
    parser.add_argument(
        "-p",
        "--property",
        default=None,
        help="Write a single VALUE (or the --json document) under this property",
    )


def add_clear_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-f", "--file", default=None, help="Note id; defaults to --current")
    parser.add_argument(
        "names",
        nargs="*",
        metavar="PROPERTY",
        help="Properties to remove (all frontmatter when omitted)",
    )
    add_redirect_arguments(parser)


def handle_patch(args, app: "Application") -> None:
    """Handle patch command.

    Args:
        args: Parsed command arguments.
        app: Initialized application.
    """
    if args.property is not None:
        if args.json is not None:
            data = parse_value(args.json)
        elif len(args.pairs) == 1:
            data = parse_value(args.pairs[0])
        else:
            raise ValueError("--property takes exactly one VALUE")
    else:
        data = read_data(args)

    to_values, prototype = redirects(args)
    result = app.metadata.patch(
        args.file,
        data,
        property_name=args.property,
        to_values=to_values,
        prototype=prototype,
    )
    print_record(result)


def handle_set(args, app: "Application") -> None:
    """Handle set command."""
    to_values, prototype = redirects(args)
    result = app.metadata.set(
        args.file,
        read_data(args),
        to_values=to_values,
        prototype=prototype,
    )
    print_record(result)


def handle_clear(args, app: "Application") -> None:
    """Handle clear command."""
    to_values, prototype = redirects(args)
    result = app.metadata.clear(
        args.file,
        args.names or None,
        to_values=to_values,
        prototype=prototype,
    )
    print_record(result)
