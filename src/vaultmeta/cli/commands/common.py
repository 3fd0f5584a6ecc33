"""Argument parsing helpers shared by vaultmeta commands."""

from __future__ import annotations

import argparse
import json
from typing import Any

from ...core.types import DEFAULT_SOURCES, Sources, SourceSet

SOURCE_NAMES = {
    "file": "file_metadata",
    "frontmatter": "frontmatter",
    "inline": "dataview_inline",
    "cache": "file_cache",
}


def parse_sources(spec: str) -> Sources:
    """Parse a ``--sources`` value.

    Accepts ``all``, ``none``, ``default`` or a comma separated list of
    ``file``, ``frontmatter``, ``inline`` and ``cache``.
    """
    spec = spec.strip().lower()
    if spec == "all":
        return True
    if spec == "none":
        return False
    if spec == "default":
        return DEFAULT_SOURCES

    names = [name.strip() for name in spec.split(",") if name.strip()]
    unknown = [name for name in names if name not in SOURCE_NAMES]
    if unknown:
        raise argparse.ArgumentTypeError(
            f"unknown source(s): {', '.join(unknown)} "
            f"(choose from {', '.join(SOURCE_NAMES)})"
        )

    flags = {attr: False for attr in SOURCE_NAMES.values()}
    for name in names:
        flags[SOURCE_NAMES[name]] = True
    return SourceSet(**flags)


def parse_value(raw: str) -> Any:
    """Decode a value as JSON, falling back to the raw string."""
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


def parse_assignments(pairs: list[str]) -> dict[str, Any]:
    """Parse ``key=value`` pairs into a record.

    Raises:
        ValueError: If a pair has no ``=`` or an empty key.
    """
    data: dict[str, Any] = {}
    for pair in pairs:
        key, sep, raw = pair.partition("=")
        if not sep or not key:
            raise ValueError(f"Expected key=value, got {pair!r}")
        data[key] = parse_value(raw)
    return data


def read_data(args: argparse.Namespace) -> dict[str, Any]:
    """Collect write data from ``--json`` and positional ``key=value`` pairs."""
    data: dict[str, Any] = {}
    if args.json:
        decoded = json.loads(args.json)
        if not isinstance(decoded, dict):
            raise ValueError("--json must decode to an object")
        data.update(decoded)
    data.update(parse_assignments(args.pairs))
    return data


def add_redirect_arguments(parser: argparse.ArgumentParser) -> None:
    """Add ``--values`` / ``--prototype`` namespace redirect options."""
    parser.add_argument(
        "--values", action="store_true", help="Target the values namespace"
    )
    parser.add_argument(
        "--values-path",
        default=None,
        metavar="SUB_PATH",
        help="Target SUB_PATH inside the values namespace",
    )
    parser.add_argument(
        "--prototype", action="store_true", help="Target the prototypes namespace"
    )
    parser.add_argument(
        "--prototype-path",
        default=None,
        metavar="SUB_PATH",
        help="Target SUB_PATH inside the prototypes namespace",
    )


def redirects(args: argparse.Namespace) -> tuple[bool | str, bool | str]:
    """Get the (to_values, prototype) redirects from parsed arguments."""
    return (args.values_path or args.values, args.prototype_path or args.prototype)


def print_record(record: Any) -> None:
    """Print a record as JSON."""
    print(json.dumps(record, indent=2, default=str, ensure_ascii=False))
