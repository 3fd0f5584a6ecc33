"""Path expression parsing.

A path is either a dot-joined string (``"a.b.c"``) or an already segmented
sequence of keys (``["a", "b", "c"]``). Both resolve to the same list.
"""

from __future__ import annotations

from typing import Sequence, Union

from ..core.exceptions import InvalidPathError

PathLike = Union[str, Sequence[str]]

SEPARATOR = "."


def resolve_path(path: PathLike) -> list[str]:
    """Normalize a path expression into an ordered list of keys.

    Args:
        path: Dot-separated string or sequence of string keys.

    Returns:
        A new list of keys; never empty.

    Raises:
        InvalidPathError: If the path is empty, has an empty segment, or
            contains a non-string key.
    """
    if isinstance(path, str):
        if not path:
            raise InvalidPathError(path)
        keys = path.split(SEPARATOR)
    else:
        keys = list(path)
        if not keys:
            raise InvalidPathError(path)

    for key in keys:
        if not isinstance(key, str):
            raise InvalidPathError(path, f"key {key!r} is not a string")
        if not key:
            raise InvalidPathError(path, "empty segment")

    return keys
