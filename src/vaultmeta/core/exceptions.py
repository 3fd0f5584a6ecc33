"""Custom exceptions for vaultmeta."""

from __future__ import annotations

from typing import Sequence


class VaultMetaError(Exception):
    """Base exception for all vaultmeta errors."""

    pass


class InvalidPathError(VaultMetaError):
    """Path expression is empty or malformed."""

    def __init__(self, path: object, reason: str = "path must contain at least one key"):
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid path {path!r}: {reason}")


class NotAnObjectError(VaultMetaError):
    """A path segment points at a value that cannot hold child keys."""

    def __init__(self, key: str, path: Sequence[str]):
        """Initialize exception with the offending key and full path.

        Args:
            key: Key whose current value is not a mapping.
            path: Full resolved path being written.
        """
        self.key = key
        self.path = list(path)
        super().__init__(
            f"Property {key!r} in path {'.'.join(self.path)!r} is not an object; "
            "child property values cannot be set"
        )


class ConflictingTargetError(VaultMetaError):
    """Both the values and prototype redirects were requested."""

    def __init__(self) -> None:
        super().__init__(
            "Cannot target the values namespace and the prototype namespace at the same time"
        )


class NoCurrentEntityError(VaultMetaError):
    """No entity is focused in the current context."""

    def __init__(self) -> None:
        super().__init__("No current file")


class UnimplementedError(VaultMetaError):
    """Operation has no removal strategy for the configured writer."""

    pass


class FrontmatterError(VaultMetaError):
    """Frontmatter block could not be parsed into a mapping."""

    def __init__(self, entity_id: str | None, reason: str):
        self.entity_id = entity_id
        self.reason = reason
        super().__init__(f"Unable to parse frontmatter for {entity_id!r}: {reason}")
