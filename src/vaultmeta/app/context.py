"""Active entity tracking for hosts without their own workspace."""

from __future__ import annotations

from loguru import logger

from ..core.types import EntityHandle


class FocusedEntity:
    """ActiveEntityProvider that remembers a single focused entity.

    Example:
        active = FocusedEntity()
        active.focus("journal/2024-01-01")
        active.current()  # EntityHandle(path="journal/2024-01-01.md", extension="md")
    """

    def __init__(self, handle: EntityHandle | None = None, extension: str = "md"):
        self._handle = handle
        self._extension = extension

    def current(self) -> EntityHandle | None:
        return self._handle

    def focus(self, target: str | EntityHandle) -> EntityHandle:
        """Focus an entity by canonical id or handle.

        Args:
            target: Canonical id (no extension) or an EntityHandle.

        Returns:
            The handle now in focus.
        """
        if isinstance(target, EntityHandle):
            handle = target
        elif self._extension:
            handle = EntityHandle(path=f"{target}.{self._extension}", extension=self._extension)
        else:
            handle = EntityHandle(path=target)

        self._handle = handle
        logger.debug(f"Focused entity: {handle.canonical_id!r}")
        return handle

    def blur(self) -> None:
        """Clear the focus."""
        self._handle = None
