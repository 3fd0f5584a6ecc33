"""Type definitions for vaultmeta."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar, Union

Record = dict[str, Any]

T = TypeVar("T")


@dataclass(frozen=True)
class EntityHandle:
    """A storable entity (a note) as seen by the host.

    Attributes:
        path: Vault-relative path, including the extension when there is one.
        extension: File extension without the leading dot, or empty.
    """

    path: str
    extension: str = ""

    @property
    def name(self) -> str:
        """Base name without folder or extension."""
        return self.canonical_id.rsplit("/", 1)[-1]

    @property
    def canonical_id(self) -> str:
        """Path without the trailing ``.<extension>``."""
        if self.extension and self.path.endswith(f".{self.extension}"):
            return self.path[: -(len(self.extension) + 1)]
        return self.path


@dataclass(frozen=True)
class SourceSet:
    """Which contributors participate in a metadata merge.

    Attributes:
        file_metadata: The reserved ``file`` field describing the note itself.
        frontmatter: The YAML block at the top of a note.
        dataview_inline: Inline ``key:: value`` fields computed from the body.
        file_cache: Values held in the process-lifetime side cache.
    """

    file_metadata: bool = True
    frontmatter: bool = True
    dataview_inline: bool = True
    file_cache: bool = True


DEFAULT_SOURCES = SourceSet()

# ``True`` selects every source, ``False`` selects none.
Sources = Union[SourceSet, bool]


class Namespace(Enum):
    """Configured roots a read or write can be redirected into."""

    PROTOTYPES = "prototypes"
    VALUES = "values"


@dataclass(frozen=True)
class Found(Generic[T]):
    """Successful deep lookup carrying the value found."""

    value: T

    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True)
class NotFound:
    """Failed deep lookup."""

    def __bool__(self) -> bool:
        return False


NOT_FOUND = NotFound()

Lookup = Union[Found[Any], NotFound]
