"""Per-field frontmatter edits on vault notes."""

from __future__ import annotations

from typing import Any

from loguru import logger

from .parsing import parse_frontmatter, render_frontmatter
from .storage import VaultStorage


class FrontmatterWriter:
    """FieldPatchWriter and FieldRemover for notes in a VaultStorage.

    Each call rewrites a single top-level frontmatter field and leaves the
    note body untouched. Notes are created on first write.
    """

    def __init__(self, storage: VaultStorage):
        self._storage = storage

    def update(self, property_name: str, value: Any, entity_id: str) -> None:
        """Set one frontmatter field, creating the note if needed.

        Raises:
            FrontmatterError: If the existing frontmatter cannot be parsed.
        """
        text = self._storage.read_note(entity_id) or ""
        parsed = parse_frontmatter(text, entity_id)

        parsed.data[property_name] = value
        self._storage.write_note(entity_id, render_frontmatter(parsed.data, parsed.content))
        logger.debug(f"Updated {property_name!r} on {entity_id!r}")

    def delete(self, property_name: str, entity_id: str) -> None:
        """Remove one frontmatter field; missing notes or fields are ignored.

        Raises:
            FrontmatterError: If the existing frontmatter cannot be parsed.
        """
        text = self._storage.read_note(entity_id)
        if text is None:
            return

        parsed = parse_frontmatter(text, entity_id)
        if property_name not in parsed.data:
            return

        del parsed.data[property_name]
        self._storage.write_note(entity_id, render_frontmatter(parsed.data, parsed.content))
        logger.debug(f"Removed {property_name!r} from {entity_id!r}")
