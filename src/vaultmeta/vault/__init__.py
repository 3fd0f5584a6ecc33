"""Filesystem-backed vault adapters.

- VaultStorage: StorageLookup over ``<vault>/<id>.<ext>`` notes
- InlineFieldProvider: CombinedRecordProvider with inline fields and ``file``
- FrontmatterWriter: FieldPatchWriter / FieldRemover for frontmatter
"""

from .parsing import (
    FrontmatterResult,
    extract_inline_fields,
    parse_frontmatter,
    render_frontmatter,
)
from .provider import InlineFieldProvider
from .storage import VaultStorage
from .writer import FrontmatterWriter

__all__ = [
    "VaultStorage",
    "InlineFieldProvider",
    "FrontmatterWriter",
    "FrontmatterResult",
    "parse_frontmatter",
    "render_frontmatter",
    "extract_inline_fields",
]
