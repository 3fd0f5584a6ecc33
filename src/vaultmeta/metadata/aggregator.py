"""Merging of metadata from several sources into one flat record.

Sources, in the order they are layered:

1. Side cache (base layer, only when ``file_cache`` is enabled)
2. Live sources, which win on key collisions:
   - frontmatter
   - inline computed fields
   - the reserved ``file`` record

Inline fields and the ``file`` record only exist in the combined provider's
view, so they are disabled by filtering that view after the fact.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger

from ..core.types import Record, Sources, SourceSet

if TYPE_CHECKING:
    from ..app.protocols import CombinedRecordProvider, StorageLookup
    from .cache import SideCache

FILE_KEY = "file"


class SourceAggregator:
    """Resolves the merged metadata record of an entity.

    Example:
        aggregator = SourceAggregator(storage, provider, cache)
        aggregator.resolve("notes/today", SourceSet(dataview_inline=False))
    """

    def __init__(
        self,
        storage: "StorageLookup",
        provider: "CombinedRecordProvider",
        cache: "SideCache",
    ):
        """Initialize SourceAggregator.

        Args:
            storage: Reads frontmatter for an entity.
            provider: Supplies the combined record (frontmatter, inline
                fields and ``file``).
            cache: Side cache overlaid beneath live sources.
        """
        self._storage = storage
        self._provider = provider
        self._cache = cache

    def resolve(self, entity_id: str, sources: Sources) -> Record:
        """Get the metadata of ``entity_id`` from the selected sources.

        Args:
            entity_id: Canonical id of the entity.
            sources: A SourceSet, ``True`` for everything, ``False`` for nothing.

        Returns:
            A new record; callers may mutate it freely.
        """
        if sources is False:
            return {}

        if sources is True:
            values = self._page(entity_id)
            use_cache = True
        else:
            values = self._live_values(entity_id, sources)
            use_cache = sources.file_cache

        if use_cache:
            # live sources overwrite cached values on collision
            values = {**self._cache.entry(entity_id), **values}

        logger.debug(f"Resolved {len(values)} metadata keys for {entity_id!r}")
        return values

    def _live_values(self, entity_id: str, sources: SourceSet) -> Record:
        if not (sources.dataview_inline or sources.file_metadata):
            if sources.frontmatter:
                return dict(self._storage.read_frontmatter(entity_id))
            return {}

        values = self._page(entity_id)
        frontmatter: Record | None = None

        if not sources.file_metadata:
            values.pop(FILE_KEY, None)

        if not sources.dataview_inline:
            frontmatter = self._storage.read_frontmatter(entity_id)
            for key in list(values):
                if key != FILE_KEY and key not in frontmatter:
                    del values[key]

        if not sources.frontmatter:
            if frontmatter is None:
                frontmatter = self._storage.read_frontmatter(entity_id)
            for key in frontmatter:
                values.pop(key, None)

        return values

    def _page(self, entity_id: str) -> Record:
        page = self._provider.page(entity_id)
        if page is None:
            logger.debug(f"No combined record for {entity_id!r}")
            return {}
        return dict(page)
