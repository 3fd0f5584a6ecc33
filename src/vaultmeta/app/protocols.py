"""Protocol definitions for the collaborators the metadata core depends on.

The core never talks to a vault, an inline-field index or a frontmatter
editor directly. It depends on these narrow interfaces, which lets the host
plug in its own storage and lets tests substitute in-memory fakes.

Protocols are organized by role:
- Read: StorageLookup, CombinedRecordProvider
- Write: FieldPatchWriter, FieldRemover
- Context: ActiveEntityProvider

Example:
    class MyFacade:
        def __init__(
            self,
            storage: StorageLookup,
            writer: FieldPatchWriter,
        ):
            self._storage = storage
            self._writer = writer
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..core.types import EntityHandle, Record


# =============================================================================
# Read Protocols
# =============================================================================


@runtime_checkable
class StorageLookup(Protocol):
    """Protocol for resolving entities and reading their frontmatter."""

    def resolve_entity(self, entity_id: str) -> "EntityHandle | None":
        """Get the handle for an entity id, or None if it does not exist."""
        ...

    def read_frontmatter(self, entity_id: str) -> "Record":
        """Get the frontmatter record of an entity (empty if none)."""
        ...


@runtime_checkable
class CombinedRecordProvider(Protocol):
    """Protocol for the full computed view of an entity.

    The returned record merges frontmatter with inline computed fields and
    carries a reserved ``file`` key describing the entity itself.
    """

    def page(self, entity_id: str) -> "Record | None":
        """Get the combined record for an entity, or None if unknown."""
        ...


# =============================================================================
# Write Protocols
# =============================================================================


@runtime_checkable
class FieldPatchWriter(Protocol):
    """Protocol for writing single top-level frontmatter fields."""

    def update(self, property_name: str, value: Any, entity_id: str) -> None:
        """Write one field of an entity's frontmatter."""
        ...


@runtime_checkable
class FieldRemover(Protocol):
    """Protocol for writers that can also remove fields."""

    def delete(self, property_name: str, entity_id: str) -> None:
        """Remove one field from an entity's frontmatter."""
        ...


# =============================================================================
# Context Protocols
# =============================================================================


@runtime_checkable
class ActiveEntityProvider(Protocol):
    """Protocol for the host's notion of the currently focused entity."""

    def current(self) -> "EntityHandle | None":
        """Get the focused entity, or None when nothing is focused."""
        ...
