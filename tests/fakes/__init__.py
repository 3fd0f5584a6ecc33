"""Test fakes for testing without a real vault.

This module provides in-memory implementations of the collaborator
protocols the metadata core depends on.

Example:
    from tests.fakes import InMemoryStorage, InMemoryProvider, RecordingWriter

    storage = InMemoryStorage(notes={"a": {"x": 1}})
    facade = MetadataFacade(
        config,
        storage,
        InMemoryProvider(storage),
        RecordingWriter(storage),
        FocusedEntity(),
    )
"""

from .collaborators import (
    InMemoryProvider,
    InMemoryStorage,
    RecordingWriter,
    UpdateOnlyWriter,
)

__all__ = [
    "InMemoryStorage",
    "InMemoryProvider",
    "RecordingWriter",
    "UpdateOnlyWriter",
]
