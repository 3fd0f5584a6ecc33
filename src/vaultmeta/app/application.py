"""Application container class.

This module provides the Application class that owns the metadata facade
and its side cache, with an explicit init/shutdown lifecycle.

Use create_application() from vaultmeta.app to create a properly configured instance.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from loguru import logger

from ..metadata.cache import SideCache
from ..metadata.facade import MetadataFacade

if TYPE_CHECKING:
    from ..core.config import Config
    from .protocols import (
        ActiveEntityProvider,
        CombinedRecordProvider,
        FieldPatchWriter,
        StorageLookup,
    )


@dataclass
class Collaborators:
    """The adapters an Application reads and writes through."""

    storage: StorageLookup
    provider: CombinedRecordProvider
    writer: FieldPatchWriter
    active: ActiveEntityProvider


class Application:
    """Application container with wired collaborators and lifecycle management.

    The facade is built by init() and torn down by shutdown(). reconfigure()
    rebuilds it with new settings, along with any adapters the application
    built from its config; the side cache survives reconfiguration but not
    shutdown.

    Attributes:
        storage: StorageLookup used for frontmatter reads.
        provider: CombinedRecordProvider used for full records.
        writer: FieldPatchWriter used for edits.
        active: ActiveEntityProvider supplying the current entity.

    Example:
        with create_application(Config.from_env()) as app:
            app.active.focus("projects/alpha")
            app.metadata.current.data
    """

    def __init__(
        self,
        config: "Config",
        storage: "StorageLookup",
        provider: "CombinedRecordProvider",
        writer: "FieldPatchWriter",
        active: "ActiveEntityProvider",
        rewire: "Callable[[Config], Collaborators] | None" = None,
    ):
        """Initialize Application with wired collaborators.

        This constructor is for internal use. Use create_application() instead.

        Args:
            rewire: Builds collaborators for a new config on reconfigure().
                Without it the given collaborators are kept.
        """
        self._rewire = rewire
        self._config = config
        self._side_cache = SideCache()
        self._metadata: MetadataFacade | None = None

        self.storage = storage
        self.provider = provider
        self.writer = writer
        self.active = active

    @property
    def config(self) -> "Config":
        """Get application configuration."""
        return self._config

    @property
    def side_cache(self) -> SideCache:
        return self._side_cache

    @property
    def initialized(self) -> bool:
        return self._metadata is not None

    @property
    def metadata(self) -> MetadataFacade:
        """Get the metadata facade.

        Raises:
            RuntimeError: If the application has not been initialized.
        """
        if self._metadata is None:
            raise RuntimeError("Application is not initialized; call init() first")
        return self._metadata

    def init(self) -> "Application":
        """Build the metadata facade."""
        if self._metadata is None:
            self._metadata = MetadataFacade(
                self._config,
                self.storage,
                self.provider,
                self.writer,
                self.active,
                side_cache=self._side_cache,
            )
            logger.debug("Metadata facade initialized")
        return self

    def reconfigure(self, config: "Config") -> "Application":
        """Rebuild the facade and config-built adapters, keeping cached values."""
        self._metadata = None
        self._config = config

        if self._rewire is not None:
            collaborators = self._rewire(config)
            self.storage = collaborators.storage
            self.provider = collaborators.provider
            self.writer = collaborators.writer
            self.active = collaborators.active

        logger.debug("Reconfiguring metadata facade")
        return self.init()

    def shutdown(self) -> None:
        """Tear down the facade and drop every side cache entry."""
        self._metadata = None
        self._side_cache.clear()
        logger.debug("Metadata facade shut down")

    def __enter__(self) -> "Application":
        return self.init()

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.shutdown()
