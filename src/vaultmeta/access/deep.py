"""Deep property access on nested records.

Free functions taking the record explicitly, plus ``DeepRecord``, a thin
wrapper that offers the same operations as methods on one record.

Note that ``set_deep`` stores its payload under a ``"value"`` key of the
node the path addresses, while ``contains``/``get`` address that node
itself::

    record = {}
    set_deep("a.b", 5, record)
    record == {"a": {"b": {"value": 5}}}
    get("a.b", record) == {"value": 5}
    get("a.b.value", record) == 5
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import Any, Callable

from ..core.exceptions import NotAnObjectError
from ..core.types import NOT_FOUND, Found, Lookup
from .paths import PathLike, resolve_path

VALUE_KEY = "value"

_MISSING = object()


def lookup(path: PathLike, record: Any) -> Lookup:
    """Walk ``record`` along ``path``.

    Args:
        path: Dot-separated string or sequence of keys.
        record: Nested mapping to search.

    Returns:
        ``Found(value)`` if every key was present, otherwise ``NOT_FOUND``.
    """
    node = record
    for key in resolve_path(path):
        if not isinstance(node, Mapping) or key not in node:
            return NOT_FOUND
        node = node[key]
    return Found(node)


def contains(path: PathLike, record: Any) -> bool:
    """Check whether every key of ``path`` exists in ``record``."""
    return bool(lookup(path, record))


def get(path: PathLike, record: Any, default: Any = _MISSING) -> Any:
    """Get a deep property, or ``None`` when any link is missing.

    Args:
        path: Dot-separated string or sequence of keys.
        record: Nested mapping to read from.
        default: Returned when the path is not found. A zero-argument
            callable is invoked and its result returned instead.

    Returns:
        The value found, the default, or ``None``.
    """
    result = lookup(path, record)
    if result:
        return result.value
    if default is _MISSING:
        return None
    if callable(default):
        return default()
    return default


def when_found(
    result: Lookup,
    on_found: Callable[[Any], Any] | None = None,
    on_not_found: Callable[[], Any] | None = None,
) -> Any:
    """Branch on a lookup result.

    Returns ``on_found(value)`` (or ``True`` without a handler) when found;
    otherwise calls ``on_not_found`` if given and returns ``False``.
    """
    if result:
        if on_found is not None:
            return on_found(result.value)
        return True

    if on_not_found is not None:
        on_not_found()
    return False


def get_with_callbacks(
    path: PathLike,
    record: Any,
    on_found: Callable[[Any], Any] | None = None,
    on_not_found: Callable[[], Any] | None = None,
) -> Any:
    """Look up ``path`` and dispatch to the matching handler."""
    return when_found(lookup(path, record), on_found, on_not_found)


def set_deep(path: PathLike, value: Any, record: MutableMapping[str, Any]) -> None:
    """Set a deep property, creating missing intermediate records.

    Args:
        path: Dot-separated string or sequence of keys.
        value: Value to store, or a callable receiving the previous stored
            value (``None`` if unset) and returning the new one.
        record: Mapping to modify in place.

    Raises:
        NotAnObjectError: If an existing node along the path is not a mapping.
    """
    keys = resolve_path(path)

    node = record
    for key in keys:
        if not isinstance(node, MutableMapping):
            raise NotAnObjectError(key, keys)
        if key not in node:
            node[key] = {}
        node = node[key]

    if not isinstance(node, MutableMapping):
        raise NotAnObjectError(keys[-1], keys)

    if callable(value):
        node[VALUE_KEY] = value(node.get(VALUE_KEY))
    else:
        node[VALUE_KEY] = value


class DeepRecord:
    """Deep-access helpers bound to a single record.

    Example:
        props = DeepRecord(metadata)
        if props.has_prop("status.done"):
            ...
        props.set_prop("counter", lambda n: (n or 0) + 1)
    """

    def __init__(self, record: MutableMapping[str, Any]):
        self.record = record

    def has_prop(
        self,
        path: PathLike,
        on_found: Callable[[Any], Any] | None = None,
        on_not_found: Callable[[], Any] | None = None,
    ) -> Any:
        """Check for a deep property, optionally branching on the result."""
        if on_found is None and on_not_found is None:
            return contains(path, self.record)
        return get_with_callbacks(path, self.record, on_found, on_not_found)

    def get_prop(self, path: PathLike, default: Any = _MISSING) -> Any:
        return get(path, self.record, default)

    def set_prop(self, path: PathLike, value: Any) -> None:
        set_deep(path, value, self.record)

    def __repr__(self) -> str:
        return f"DeepRecord({self.record!r})"
