"""Pytest configuration and fixtures."""

import pytest
from pathlib import Path

from vaultmeta.app.context import FocusedEntity
from vaultmeta.core.config import Config
from vaultmeta.metadata.cache import SideCache
from vaultmeta.metadata.facade import MetadataFacade
from vaultmeta.vault import FrontmatterWriter, InlineFieldProvider, VaultStorage

from tests.fakes import InMemoryProvider, InMemoryStorage, RecordingWriter


@pytest.fixture
def config(tmp_path: Path) -> Config:
    """Provide a config rooted at a temporary vault."""
    return Config(
        vault_path=tmp_path / "vault",
        prototypes_root_path="_proto/",
        values_root_path="_values/",
    )


@pytest.fixture
def active() -> FocusedEntity:
    """Provide an unfocused active entity provider."""
    return FocusedEntity()


@pytest.fixture
def storage() -> InMemoryStorage:
    """Provide in-memory frontmatter storage with two notes."""
    return InMemoryStorage(
        notes={
            "notes/alpha": {"status": "active", "tags": ["a", "b"]},
            "notes/beta": {},
        }
    )


@pytest.fixture
def provider(storage: InMemoryStorage) -> InMemoryProvider:
    """Provide a combined record provider with inline fields for alpha."""
    return InMemoryProvider(storage, inline={"notes/alpha": {"rating": 4}})


@pytest.fixture
def writer(storage: InMemoryStorage) -> RecordingWriter:
    """Provide a writer recording updates into the in-memory storage."""
    return RecordingWriter(storage)


@pytest.fixture
def side_cache() -> SideCache:
    """Provide an empty side cache."""
    return SideCache()


@pytest.fixture
def facade(config, storage, provider, writer, active, side_cache) -> MetadataFacade:
    """Provide a facade wired to in-memory collaborators."""
    return MetadataFacade(config, storage, provider, writer, active, side_cache=side_cache)


@pytest.fixture
def vault_storage(config: Config) -> VaultStorage:
    """Provide filesystem storage over an empty temporary vault."""
    config.vault_path.mkdir(parents=True, exist_ok=True)
    return VaultStorage(config)


@pytest.fixture
def write_note(config: Config):
    """Write a note into the temporary vault."""

    def _write(entity_id: str, text: str) -> Path:
        path = config.vault_path / f"{entity_id}.md"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def vault_provider(vault_storage: VaultStorage) -> InlineFieldProvider:
    """Provide the inline field provider over the temporary vault."""
    return InlineFieldProvider(vault_storage)


@pytest.fixture
def vault_writer(vault_storage: VaultStorage) -> FrontmatterWriter:
    """Provide the frontmatter writer over the temporary vault."""
    return FrontmatterWriter(vault_storage)
