"""Canonical entity identifiers and namespace redirects."""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

from ..core.exceptions import ConflictingTargetError, NoCurrentEntityError
from ..core.types import EntityHandle, Namespace

if TYPE_CHECKING:
    from ..app.protocols import ActiveEntityProvider
    from ..core.config import Config

FileRef = Union[str, EntityHandle, None]

# A redirect is either a flag or an explicit sub-path inside the namespace.
Redirect = Union[bool, str, None]


class EntityKeyResolver:
    """Derives canonical ids for entities and their namespaced variants.

    Attributes:
        config: Supplies the prototype and values root paths.
        active: Supplies the current entity when no file is given.
    """

    def __init__(self, config: "Config", active: "ActiveEntityProvider"):
        self.config = config
        self.active = active

    @staticmethod
    def canonical_id(file_ref: FileRef) -> str | None:
        """Get the canonical id of a file reference.

        Args:
            file_ref: A canonical id string, an EntityHandle, or None.

        Returns:
            The id string, the handle's path minus its extension, or None.
        """
        if file_ref is None:
            return None
        if isinstance(file_ref, str):
            return file_ref
        return file_ref.canonical_id

    def current_handle(self) -> EntityHandle:
        """Get the focused entity.

        Raises:
            NoCurrentEntityError: If nothing is focused.
        """
        handle = self.active.current()
        if handle is None:
            raise NoCurrentEntityError()
        return handle

    def current_id(self) -> str:
        """Get the canonical id of the focused entity."""
        return self.current_handle().canonical_id

    def namespace_root(self, kind: Namespace) -> str:
        if kind is Namespace.PROTOTYPES:
            return self.config.prototypes_root_path
        return self.config.values_root_path

    def with_namespace(self, kind: Namespace, sub_path: str) -> str:
        """Prefix ``sub_path`` with the configured root for ``kind``.

        The root and sub-path are concatenated as-is, so a separator must be
        part of one of them.
        """
        return self.namespace_root(kind) + sub_path

    def resolve(self, file_ref: FileRef = None) -> str:
        """Get the canonical id of ``file_ref``, defaulting to the current entity."""
        return self.canonical_id(file_ref) or self.current_id()

    def resolve_target(
        self,
        file_ref: FileRef = None,
        to_values: Redirect = False,
        prototype: Redirect = False,
    ) -> str:
        """Resolve the entity a write operation should target.

        Args:
            file_ref: Explicit file, if any.
            to_values: Redirect into the values namespace. A string is used
                as the sub-path when no explicit file is given.
            prototype: Redirect into the prototypes namespace, same rules.

        Returns:
            Canonical id of the target entity.

        Raises:
            ConflictingTargetError: If both redirects are requested.
            NoCurrentEntityError: If a fallback to the current entity is
                needed and nothing is focused.
        """
        if to_values and prototype:
            raise ConflictingTargetError()

        if to_values:
            return self._redirect(Namespace.VALUES, file_ref, to_values)
        if prototype:
            return self._redirect(Namespace.PROTOTYPES, file_ref, prototype)
        return self.resolve(file_ref)

    def _redirect(self, kind: Namespace, file_ref: FileRef, redirect: Redirect) -> str:
        if file_ref:
            sub_path = self.canonical_id(file_ref)
        elif isinstance(redirect, str):
            sub_path = redirect
        else:
            sub_path = self.current_id()
        return self.with_namespace(kind, sub_path)
