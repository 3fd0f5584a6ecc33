"""Tests for FrontmatterWriter."""

import pytest

from vaultmeta.core.exceptions import FrontmatterError
from vaultmeta.vault.writer import FrontmatterWriter


class TestUpdate:
    """Tests for FrontmatterWriter.update."""

    def test_adds_field_and_keeps_body(self, vault_writer: FrontmatterWriter, write_note):
        """New fields are appended and the body is untouched."""
        path = write_note("notes/alpha", "---\nstatus: active\n---\nBody text\n")

        vault_writer.update("priority", 2, "notes/alpha")

        assert path.read_text() == "---\nstatus: active\npriority: 2\n---\nBody text\n"

    def test_replaces_field(self, vault_writer: FrontmatterWriter, vault_storage, write_note):
        """Existing fields are overwritten in place."""
        write_note("notes/alpha", "---\nstatus: active\n---\n")
        vault_writer.update("status", "done", "notes/alpha")
        assert vault_storage.read_frontmatter("notes/alpha") == {"status": "done"}

    def test_adds_block_to_plain_note(self, vault_writer: FrontmatterWriter, write_note):
        """A note without frontmatter gains a block."""
        path = write_note("notes/plain", "Just text\n")
        vault_writer.update("seen", True, "notes/plain")
        assert path.read_text() == "---\nseen: true\n---\nJust text\n"

    def test_creates_missing_note(self, vault_writer: FrontmatterWriter, vault_storage):
        """Writing to a missing note creates it."""
        vault_writer.update("kind", "task", "_proto/task")
        assert vault_storage.read_frontmatter("_proto/task") == {"kind": "task"}

    def test_nested_value(self, vault_writer: FrontmatterWriter, vault_storage):
        """Structured values are stored as YAML."""
        vault_writer.update("meta", {"a": [1, 2]}, "notes/new")
        assert vault_storage.read_frontmatter("notes/new") == {"meta": {"a": [1, 2]}}

    def test_invalid_frontmatter_raises(self, vault_writer: FrontmatterWriter, write_note):
        """Writes refuse to clobber unparseable frontmatter."""
        path = write_note("notes/bad", "---\nkey: [unclosed\n---\n")

        with pytest.raises(FrontmatterError):
            vault_writer.update("x", 1, "notes/bad")
        assert path.read_text() == "---\nkey: [unclosed\n---\n"


class TestDelete:
    """Tests for FrontmatterWriter.delete."""

    def test_removes_field(self, vault_writer: FrontmatterWriter, vault_storage, write_note):
        """Only the named field is removed."""
        write_note("notes/alpha", "---\nstatus: active\ntags: [a]\n---\nBody\n")
        vault_writer.delete("status", "notes/alpha")
        assert vault_storage.read_frontmatter("notes/alpha") == {"tags": ["a"]}

    def test_removing_last_field_drops_block(self, vault_writer: FrontmatterWriter, write_note):
        """An emptied block is removed from the note."""
        path = write_note("notes/alpha", "---\nstatus: active\n---\nBody\n")
        vault_writer.delete("status", "notes/alpha")
        assert path.read_text() == "Body\n"

    def test_missing_field_untouched(self, vault_writer: FrontmatterWriter, write_note):
        """Removing an absent field leaves the file as it was."""
        text = "---\nstatus:   active\n---\nBody\n"
        path = write_note("notes/alpha", text)
        vault_writer.delete("other", "notes/alpha")
        assert path.read_text() == text

    def test_missing_note(self, vault_writer: FrontmatterWriter, vault_storage):
        """Removing from a missing note does not create it."""
        vault_writer.delete("status", "notes/missing")
        assert vault_storage.exists("notes/missing") is False
