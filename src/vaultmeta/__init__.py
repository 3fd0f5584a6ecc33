"""vaultmeta - metadata access for markdown vaults.

Reads metadata for a note from frontmatter, inline ``key:: value`` fields,
file details and a process-lifetime side cache, merged with a fixed
precedence; writes frontmatter one field at a time; and addresses nested
fields of any record through dot-separated paths.

Example:
    from vaultmeta import Config, create_application

    with create_application(Config(vault_path=vault)) as app:
        meta = app.metadata
        meta.patch("projects/alpha", {"status": "done"})
        meta.get("projects/alpha", SourceSet(dataview_inline=False))
"""

from .core import (
    DEFAULT_SOURCES,
    Config,
    EntityHandle,
    Namespace,
    SourceSet,
    VaultMetaError,
)
from .access import DeepRecord, contains, get, lookup, resolve_path, set_deep

# app must be imported before metadata: the facade depends on app.protocols
from .app import Application, create_application
from .metadata import MetadataFacade, SideCache

__version__ = "0.1.0"

__all__ = [
    "Config",
    "EntityHandle",
    "SourceSet",
    "DEFAULT_SOURCES",
    "Namespace",
    "VaultMetaError",
    "resolve_path",
    "lookup",
    "contains",
    "get",
    "set_deep",
    "DeepRecord",
    "Application",
    "create_application",
    "MetadataFacade",
    "SideCache",
]
