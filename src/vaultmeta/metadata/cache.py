"""Process-lifetime scratch records, one per entity."""

from __future__ import annotations

from loguru import logger

from ..core.types import Record


class SideCache:
    """Mutable per-entity records that are never persisted.

    Entries are created on first access and live until explicitly cleared.
    Callers mutate the returned record directly.

    Example:
        cache = SideCache()
        cache.entry("notes/today")["mood"] = "good"
        cache.entry("notes/today")  # {"mood": "good"}
    """

    def __init__(self) -> None:
        self._entries: dict[str, Record] = {}

    def entry(self, entity_id: str) -> Record:
        """Get the record for ``entity_id``, creating an empty one if needed."""
        if entity_id not in self._entries:
            logger.debug(f"Creating side cache entry for {entity_id!r}")
        return self._entries.setdefault(entity_id, {})

    def clear(self, entity_id: str | None = None) -> None:
        """Drop one entry, or every entry when no id is given."""
        if entity_id is None:
            self._entries.clear()
        else:
            self._entries.pop(entity_id, None)

    def __contains__(self, entity_id: object) -> bool:
        return entity_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)
