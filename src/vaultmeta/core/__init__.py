"""Core types, configuration and errors for vaultmeta."""

from .config import DEFAULT_PROTOTYPES_ROOT_PATH, DEFAULT_VALUES_ROOT_PATH, Config
from .exceptions import (
    ConflictingTargetError,
    FrontmatterError,
    InvalidPathError,
    NoCurrentEntityError,
    NotAnObjectError,
    UnimplementedError,
    VaultMetaError,
)
from .types import (
    DEFAULT_SOURCES,
    NOT_FOUND,
    EntityHandle,
    Found,
    Lookup,
    Namespace,
    NotFound,
    Record,
    Sources,
    SourceSet,
)

__all__ = [
    "Config",
    "DEFAULT_PROTOTYPES_ROOT_PATH",
    "DEFAULT_VALUES_ROOT_PATH",
    "VaultMetaError",
    "InvalidPathError",
    "NotAnObjectError",
    "ConflictingTargetError",
    "NoCurrentEntityError",
    "UnimplementedError",
    "FrontmatterError",
    "EntityHandle",
    "SourceSet",
    "DEFAULT_SOURCES",
    "Sources",
    "Namespace",
    "Found",
    "NotFound",
    "NOT_FOUND",
    "Lookup",
    "Record",
]
