"""Combined note records: frontmatter, inline fields and file details."""

from __future__ import annotations

from typing import Any

from loguru import logger

from ..core.exceptions import FrontmatterError
from ..core.types import Record
from .parsing import FrontmatterResult, extract_inline_fields, parse_frontmatter
from .storage import VaultStorage


class InlineFieldProvider:
    """CombinedRecordProvider that reads notes from a VaultStorage.

    The record for a note holds its frontmatter, its inline ``key:: value``
    fields layered on top, and a reserved ``file`` record.
    """

    def __init__(self, storage: VaultStorage):
        self._storage = storage

    def page(self, entity_id: str) -> Record | None:
        text = self._storage.read_note(entity_id)
        if text is None:
            return None

        try:
            parsed = parse_frontmatter(text, entity_id)
        except FrontmatterError as e:
            logger.warning(str(e))
            parsed = FrontmatterResult(content=text)

        values: Record = dict(parsed.data)
        values.update(extract_inline_fields(parsed.content))
        values["file"] = self._file_record(entity_id, parsed.data)
        return values

    def _file_record(self, entity_id: str, frontmatter: Record) -> dict[str, Any]:
        info = self._storage.info(entity_id)
        folder, _, name = entity_id.rpartition("/")
        return {
            "name": name,
            "path": self._storage.relative_path(entity_id),
            "folder": folder,
            "ext": self._storage.extension,
            "size": info.get("size"),
            "mtime": info.get("mtime"),
            "frontmatter": dict(frontmatter),
        }
