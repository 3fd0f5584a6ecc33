"""Application composition root and dependency injection.

This module provides the factory function for creating configured
Application instances with all collaborators wired together.

Example:
    from vaultmeta.app import create_application
    from vaultmeta.core.config import Config

    with create_application(Config(vault_path=Path("~/vault").expanduser())) as app:
        app.metadata.get("projects/alpha")
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger

from ..core.config import Config
from .application import Application, Collaborators
from .context import FocusedEntity

if TYPE_CHECKING:
    from .protocols import (
        ActiveEntityProvider,
        CombinedRecordProvider,
        FieldPatchWriter,
        StorageLookup,
    )


def create_application(
    config: Config | None = None,
    *,
    storage: "StorageLookup | None" = None,
    provider: "CombinedRecordProvider | None" = None,
    writer: "FieldPatchWriter | None" = None,
    active: "ActiveEntityProvider | None" = None,
) -> Application:
    """Create an Application with default filesystem adapters.

    Any collaborator passed explicitly replaces the default and is kept as
    is on reconfigure(); defaults are rebuilt from the new config. The
    returned application is not initialized; call init() or use it as a
    context manager.

    Args:
        config: Application configuration. Loaded from env/file when None.
        storage: StorageLookup; defaults to VaultStorage.
        provider: CombinedRecordProvider; defaults to InlineFieldProvider.
        writer: FieldPatchWriter; defaults to FrontmatterWriter.
        active: ActiveEntityProvider; defaults to an unfocused FocusedEntity.

    Returns:
        Application ready for init().
    """
    if config is None:
        config = Config.from_env_or_file()

    focused: FocusedEntity | None = None

    def wire(cfg: Config) -> Collaborators:
        nonlocal focused

        built_storage, built_provider, built_writer = storage, provider, writer
        if storage is None or provider is None or writer is None:
            from ..vault import FrontmatterWriter, InlineFieldProvider, VaultStorage

            vault = VaultStorage(cfg)
            built_storage = storage or vault
            built_provider = provider or InlineFieldProvider(vault)
            built_writer = writer or FrontmatterWriter(vault)
            logger.debug(f"Using vault at {cfg.vault_path}")

        built_active = active
        if active is None:
            previous = focused.current() if focused is not None else None
            focused = FocusedEntity(extension=cfg.note_extension)
            if previous is not None:
                focused.focus(previous.canonical_id)
            built_active = focused

        return Collaborators(
            storage=built_storage,
            provider=built_provider,
            writer=built_writer,
            active=built_active,
        )

    collaborators = wire(config)
    return Application(
        config=config,
        storage=collaborators.storage,
        provider=collaborators.provider,
        writer=collaborators.writer,
        active=collaborators.active,
        rewire=wire,
    )
