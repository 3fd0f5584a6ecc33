"""Deep path access for nested records."""

from .deep import (
    VALUE_KEY,
    DeepRecord,
    contains,
    get,
    get_with_callbacks,
    lookup,
    set_deep,
    when_found,
)
from .paths import PathLike, resolve_path

__all__ = [
    "PathLike",
    "resolve_path",
    "lookup",
    "contains",
    "get",
    "get_with_callbacks",
    "when_found",
    "set_deep",
    "DeepRecord",
    "VALUE_KEY",
]
