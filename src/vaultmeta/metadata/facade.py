"""Public metadata API for reading and editing entity metadata.

``MetadataFacade`` composes the key resolver, side cache and source
aggregator with the host's storage and writer. ``CurrentMetadata`` is a
view of the same operations bound to the focused entity.

Example:
    meta = MetadataFacade(config, storage, provider, writer, active)
    meta.get("projects/alpha")
    meta.patch("projects/alpha", {"status": "done"})
    meta.clear("projects/alpha", "draft")
    meta.current.cache["scratch"] = 1
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Iterable, Union

from loguru import logger

from ..access.deep import DeepRecord
from ..app.protocols import FieldRemover
from ..core.exceptions import UnimplementedError
from ..core.types import DEFAULT_SOURCES, EntityHandle, Namespace, Record, Sources
from .aggregator import SourceAggregator
from .cache import SideCache
from .keys import EntityKeyResolver, FileRef, Redirect

if TYPE_CHECKING:
    from ..app.protocols import (
        ActiveEntityProvider,
        CombinedRecordProvider,
        FieldPatchWriter,
        StorageLookup,
    )
    from ..core.config import Config

PropertySelection = Union[str, Iterable[str], Mapping[str, Any], None]


class CurrentMetadata:
    """Metadata of the entity currently in focus."""

    def __init__(self, api: "MetadataFacade"):
        self._api = api

    @property
    def data(self) -> Record:
        """All metadata from the default sources."""
        return self._api.get()

    @property
    def note(self) -> EntityHandle:
        """The focused entity.

        Raises:
            NoCurrentEntityError: If nothing is focused.
        """
        return self._api.keys.current_handle()

    @property
    def path(self) -> str:
        """Canonical id of the focused entity."""
        return self.note.canonical_id

    @property
    def frontmatter(self) -> Record:
        return self._api.frontmatter()

    @property
    def cache(self) -> Record:
        """Side cache entry; mutations are visible to later reads."""
        return self._api.cache()


class MetadataFacade:
    """Read and write metadata across frontmatter, inline fields and cache.

    Attributes:
        keys: Resolves file references and namespace redirects.
        side_cache: Per-entity scratch records.
        aggregator: Merges the enabled sources.
    """

    def __init__(
        self,
        config: "Config",
        storage: "StorageLookup",
        provider: "CombinedRecordProvider",
        writer: "FieldPatchWriter",
        active: "ActiveEntityProvider",
        side_cache: SideCache | None = None,
    ):
        """Initialize MetadataFacade.

        Args:
            config: Supplies the namespace root paths.
            storage: Frontmatter reads.
            provider: Combined record reads.
            writer: Per-field frontmatter writes (and removals, if supported).
            active: Supplies the focused entity.
            side_cache: Shared cache; a fresh one is created when omitted.
        """
        self.keys = EntityKeyResolver(config, active)
        self.side_cache = side_cache if side_cache is not None else SideCache()
        self.aggregator = SourceAggregator(storage, provider, self.side_cache)
        self._storage = storage
        self._writer = writer

    # --- Current entity ---

    @property
    def current(self) -> CurrentMetadata:
        return CurrentMetadata(self)

    @property
    def data(self) -> Record:
        """All metadata from the default sources for the focused entity."""
        return self.current.data

    # --- Reads ---

    def get(self, file_ref: FileRef = None, sources: Sources = DEFAULT_SOURCES) -> Record:
        """Get the metadata of an entity from the given sources.

        Args:
            file_ref: Canonical id or handle; defaults to the focused entity.
            sources: Sources to merge. Defaults to all of them.

        Returns:
            The merged record.
        """
        return self.aggregator.resolve(self.keys.resolve(file_ref), sources)

    def frontmatter(self, file_ref: FileRef = None) -> Record:
        """Get just the frontmatter of an entity."""
        return self._storage.read_frontmatter(self.keys.resolve(file_ref))

    def cache(self, file_ref: FileRef = None) -> Record:
        """Get just the side cache entry of an entity."""
        return self.side_cache.entry(self.keys.resolve(file_ref))

    def prototypes(self, sub_path: str) -> Record:
        """Get the frontmatter stored under the prototypes root."""
        return self.frontmatter(self.keys.with_namespace(Namespace.PROTOTYPES, sub_path))

    def values(self, sub_path: str) -> Record:
        """Get the frontmatter stored under the values root."""
        return self.frontmatter(self.keys.with_namespace(Namespace.VALUES, sub_path))

    def wrap(self, record: Record) -> DeepRecord:
        """Attach deep-access helpers to a record."""
        return DeepRecord(record)

    # --- Writes ---

    def patch(
        self,
        file_ref: FileRef,
        data: Any,
        property_name: str | None = None,
        to_values: Redirect = False,
        prototype: Redirect = False,
    ) -> Record:
        """Patch individual frontmatter properties.

        Args:
            file_ref: Target entity; defaults to the focused entity.
            data: Mapping of properties to write, or any value when
                ``property_name`` is given.
            property_name: Write all of ``data`` under this single property.
            to_values: Redirect the write into the values namespace.
            prototype: Redirect the write into the prototypes namespace.

        Returns:
            The refreshed metadata of the target.

        Raises:
            ConflictingTargetError: If both redirects are requested.
        """
        target = self.keys.resolve_target(file_ref, to_values, prototype)

        if property_name is not None:
            self._update(target, {property_name: data})
        else:
            self._update(target, data)

        return self.get(target)

    def set(
        self,
        file_ref: FileRef,
        data: Mapping[str, Any],
        to_values: Redirect = False,
        prototype: Redirect = False,
    ) -> Record:
        """Replace all frontmatter of an entity with ``data``.

        Returns:
            The refreshed metadata of the target.
        """
        target = self.keys.resolve_target(file_ref, to_values, prototype)

        self._remove(target, self._select(target, None))
        self._update(target, data)

        return self.get(target)

    def clear(
        self,
        file_ref: FileRef = None,
        properties: PropertySelection = None,
        to_values: Redirect = False,
        prototype: Redirect = False,
    ) -> Record:
        """Remove frontmatter properties from an entity.

        Args:
            file_ref: Target entity; defaults to the focused entity.
            properties: A property name, a sequence of names, or a mapping
                whose keys are removed. None removes every frontmatter key.
            to_values: Redirect into the values namespace.
            prototype: Redirect into the prototypes namespace.

        Returns:
            The refreshed metadata of the target.

        Raises:
            ConflictingTargetError: If both redirects are requested.
            UnimplementedError: If the writer cannot remove fields.
        """
        target = self.keys.resolve_target(file_ref, to_values, prototype)
        self._remove(target, self._select(target, properties))
        return self.get(target)

    def _select(self, target: str, properties: PropertySelection) -> list[str]:
        if properties is None:
            return list(self._storage.read_frontmatter(target))
        if isinstance(properties, str):
            return [properties]
        if isinstance(properties, Mapping):
            return list(properties.keys())
        return list(properties)

    def _update(self, target: str, data: Mapping[str, Any]) -> None:
        for name, value in data.items():
            self._writer.update(name, value, target)
        logger.info(f"Patched {len(data)} properties on {target!r}")

    def _remove(self, target: str, names: list[str]) -> None:
        if not names:
            return
        if not isinstance(self._writer, FieldRemover):
            raise UnimplementedError(
                f"{type(self._writer).__name__} cannot remove properties from {target!r}"
            )
        for name in names:
            self._writer.delete(name, target)
        logger.info(f"Cleared {len(names)} properties on {target!r}")
