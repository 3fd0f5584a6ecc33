"""Vault storage backed by an fsspec filesystem.

Entities map to note files: ``<vault>/<entity_id>.<note_extension>``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import fsspec
from loguru import logger

from ..core.exceptions import FrontmatterError
from ..core.types import EntityHandle, Record
from .parsing import parse_frontmatter

if TYPE_CHECKING:
    from ..core.config import Config


class VaultStorage:
    """StorageLookup over a directory of markdown notes.

    Example:
        storage = VaultStorage(config)
        storage.resolve_entity("projects/alpha")
        # EntityHandle(path="projects/alpha.md", extension="md")
        storage.read_frontmatter("projects/alpha")
        # {"status": "active"}
    """

    def __init__(self, config: "Config", fs: Any = None):
        """Initialize VaultStorage.

        Args:
            config: Vault root, note extension and filesystem protocol.
            fs: Filesystem to use instead of ``fsspec.filesystem(config.fs_protocol)``.
        """
        self._root = str(config.vault_path).rstrip("/")
        self._extension = config.note_extension
        self._fs = fs if fs is not None else fsspec.filesystem(config.fs_protocol)

    @property
    def fs(self) -> Any:
        return self._fs

    @property
    def extension(self) -> str:
        return self._extension

    def relative_path(self, entity_id: str) -> str:
        """Vault-relative note path for an entity."""
        if self._extension:
            return f"{entity_id}.{self._extension}"
        return entity_id

    def note_path(self, entity_id: str) -> str:
        """Filesystem path of the note for an entity."""
        return f"{self._root}/{self.relative_path(entity_id)}"

    def exists(self, entity_id: str) -> bool:
        return self._fs.isfile(self.note_path(entity_id))

    def resolve_entity(self, entity_id: str) -> EntityHandle | None:
        if not self.exists(entity_id):
            return None
        return EntityHandle(path=self.relative_path(entity_id), extension=self._extension)

    def read_note(self, entity_id: str) -> str | None:
        """Get the raw text of a note, or None if it does not exist."""
        path = self.note_path(entity_id)
        if not self._fs.isfile(path):
            return None
        with self._fs.open(path, "r", encoding="utf-8") as f:
            return f.read()

    def write_note(self, entity_id: str, text: str) -> None:
        """Write the raw text of a note, creating parent folders."""
        path = self.note_path(entity_id)
        parent = path.rsplit("/", 1)[0]
        self._fs.makedirs(parent, exist_ok=True)
        with self._fs.open(path, "w", encoding="utf-8") as f:
            f.write(text)
        logger.debug(f"Wrote note {entity_id!r} ({len(text)} chars)")

    def info(self, entity_id: str) -> dict[str, Any]:
        """Filesystem details for an existing note."""
        return self._fs.info(self.note_path(entity_id))

    def read_frontmatter(self, entity_id: str) -> Record:
        """Get the frontmatter of a note.

        Missing notes and notes without frontmatter yield an empty record.
        Unparseable frontmatter is logged and treated as absent.
        """
        text = self.read_note(entity_id)
        if text is None:
            return {}

        try:
            return parse_frontmatter(text, entity_id).data
        except FrontmatterError as e:
            logger.warning(str(e))
            return {}
