"""Command implementations for vaultmeta CLI."""

from .common import parse_assignments, parse_sources, parse_value
from .read import (
    add_get_arguments,
    add_read_arguments,
    handle_frontmatter,
    handle_get,
    handle_prototypes,
    handle_values,
)
from .write import (
    add_clear_arguments,
    add_patch_arguments,
    add_write_arguments,
    handle_clear,
    handle_patch,
    handle_set,
)

__all__ = [
    "parse_sources",
    "parse_value",
    "parse_assignments",
    "add_get_arguments",
    "add_read_arguments",
    "handle_get",
    "handle_frontmatter",
    "handle_prototypes",
    "handle_values",
    "add_write_arguments",
    "add_patch_arguments",
    "add_clear_arguments",
    "handle_patch",
    "handle_set",
    "handle_clear",
]
