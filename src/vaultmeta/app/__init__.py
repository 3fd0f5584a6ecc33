"""Application composition root and dependency injection.

This module provides:
- Protocol definitions for the collaborators the core depends on (protocols.py)
- The Application class for lifecycle management
- The create_application factory

Example:
    from vaultmeta.app import create_application
    from vaultmeta.core.config import Config

    with create_application(Config()) as app:
        app.metadata.get("projects/alpha")
"""

from .application import Application, Collaborators
from .context import FocusedEntity
from .factory import create_application
from .protocols import (
    ActiveEntityProvider,
    CombinedRecordProvider,
    FieldPatchWriter,
    FieldRemover,
    StorageLookup,
)

__all__ = [
    "Application",
    "Collaborators",
    "create_application",
    "FocusedEntity",
    "StorageLookup",
    "CombinedRecordProvider",
    "FieldPatchWriter",
    "FieldRemover",
    "ActiveEntityProvider",
]
