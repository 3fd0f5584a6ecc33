"""Multi-source metadata resolution.

Submodules
----------
keys
    EntityKeyResolver: canonical ids and namespace redirects
cache
    SideCache: process-lifetime per-entity records
aggregator
    SourceAggregator: source selection and merge precedence
facade
    MetadataFacade / CurrentMetadata: the public read/write surface
"""

from .aggregator import FILE_KEY, SourceAggregator
from .cache import SideCache
from .facade import CurrentMetadata, MetadataFacade
from .keys import EntityKeyResolver, FileRef, Redirect

__all__ = [
    "EntityKeyResolver",
    "FileRef",
    "Redirect",
    "SideCache",
    "SourceAggregator",
    "FILE_KEY",
    "MetadataFacade",
    "CurrentMetadata",
]
