"""Tests for EntityKeyResolver."""

import pytest

from vaultmeta.app.context import FocusedEntity
from vaultmeta.core.config import Config
from vaultmeta.core.exceptions import ConflictingTargetError, NoCurrentEntityError
from vaultmeta.core.types import EntityHandle, Namespace
from vaultmeta.metadata.keys import EntityKeyResolver


@pytest.fixture
def resolver(config: Config, active: FocusedEntity) -> EntityKeyResolver:
    return EntityKeyResolver(config, active)


class TestCanonicalId:
    """Tests for canonical_id."""

    def test_string_returned_as_is(self):
        """Strings are already canonical."""
        assert EntityKeyResolver.canonical_id("notes/alpha") == "notes/alpha"

    def test_handle_extension_stripped(self):
        """Handles lose their trailing extension."""
        handle = EntityHandle(path="notes/alpha.md", extension="md")
        assert EntityKeyResolver.canonical_id(handle) == "notes/alpha"

    def test_handle_without_extension(self):
        """Handles without an extension keep their path."""
        assert EntityKeyResolver.canonical_id(EntityHandle(path="notes/raw")) == "notes/raw"

    def test_none(self):
        """None stays None."""
        assert EntityKeyResolver.canonical_id(None) is None


class TestNamespaces:
    """Tests for with_namespace."""

    def test_values_prefix(self, resolver: EntityKeyResolver):
        """Values ids are the configured root concatenated with the sub-path."""
        assert resolver.with_namespace(Namespace.VALUES, "foo") == "_values/" + "foo"

    def test_prototypes_prefix(self, resolver: EntityKeyResolver):
        """Prototype ids use the prototypes root."""
        assert resolver.with_namespace(Namespace.PROTOTYPES, "task") == "_proto/task"

    def test_default_roots_concatenate_without_separator(self, active):
        """The default roots carry no trailing separator."""
        resolver = EntityKeyResolver(Config(), active)
        assert resolver.with_namespace(Namespace.VALUES, "/x") == "_/_assets/_data/_values/x"


class TestCurrent:
    """Tests for the current entity fallback."""

    def test_no_current_entity(self, resolver: EntityKeyResolver):
        """Nothing focused raises NoCurrentEntityError."""
        with pytest.raises(NoCurrentEntityError):
            resolver.current_id()

    def test_current_id(self, resolver: EntityKeyResolver, active: FocusedEntity):
        """The focused handle's canonical id is used."""
        active.focus("daily/today")
        assert resolver.current_id() == "daily/today"
        assert resolver.resolve() == "daily/today"

    def test_explicit_file_wins(self, resolver: EntityKeyResolver, active: FocusedEntity):
        """An explicit file is used even when an entity is focused."""
        active.focus("daily/today")
        assert resolver.resolve("notes/alpha") == "notes/alpha"


class TestResolveTarget:
    """Tests for resolve_target."""

    @pytest.mark.parametrize("file_ref", [None, "notes/alpha", EntityHandle("a.md", "md")])
    @pytest.mark.parametrize("to_values", [True, "sub"])
    @pytest.mark.parametrize("prototype", [True, "sub"])
    def test_conflicting_redirects(self, resolver, file_ref, to_values, prototype):
        """Both redirects at once always fail."""
        with pytest.raises(ConflictingTargetError):
            resolver.resolve_target(file_ref, to_values, prototype)

    def test_plain_file(self, resolver: EntityKeyResolver):
        """Without redirects the file's canonical id is the target."""
        assert resolver.resolve_target("notes/alpha") == "notes/alpha"

    def test_plain_current(self, resolver: EntityKeyResolver, active: FocusedEntity):
        """Without file or redirects the current entity is the target."""
        active.focus("notes/beta")
        assert resolver.resolve_target() == "notes/beta"

    def test_values_with_file(self, resolver: EntityKeyResolver):
        """The explicit file is placed under the values root."""
        assert resolver.resolve_target("foo", to_values=True) == "_values/foo"

    def test_values_file_beats_string(self, resolver: EntityKeyResolver):
        """An explicit file takes precedence over a redirect sub-path."""
        assert resolver.resolve_target("foo", to_values="bar") == "_values/foo"

    def test_values_string(self, resolver: EntityKeyResolver):
        """A string redirect supplies the sub-path when no file is given."""
        assert resolver.resolve_target(None, to_values="bar") == "_values/bar"

    def test_values_current(self, resolver: EntityKeyResolver, active: FocusedEntity):
        """A flag redirect without a file uses the current entity."""
        active.focus("notes/beta")
        assert resolver.resolve_target(None, to_values=True) == "_values/notes/beta"

    def test_prototype_rules_mirror_values(self, resolver, active):
        """Prototype redirects follow the same three rules."""
        active.focus("notes/beta")
        assert resolver.resolve_target("foo", prototype=True) == "_proto/foo"
        assert resolver.resolve_target(None, prototype="bar") == "_proto/bar"
        assert resolver.resolve_target(None, prototype=True) == "_proto/notes/beta"

    def test_handle_redirect(self, resolver: EntityKeyResolver):
        """Handles are canonicalized before prefixing."""
        handle = EntityHandle(path="task.md", extension="md")
        assert resolver.resolve_target(handle, prototype=True) == "_proto/task"

    def test_falsy_redirects_ignored(self, resolver: EntityKeyResolver):
        """Empty-string redirects count as not requested."""
        assert resolver.resolve_target("foo", to_values="", prototype=False) == "foo"
