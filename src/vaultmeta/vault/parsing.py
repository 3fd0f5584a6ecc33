"""Markdown note parsing: YAML frontmatter and inline fields."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any

import yaml

from ..core.exceptions import FrontmatterError

_FRONTMATTER_RE = re.compile(
    r"\A---[ \t]*\r?\n(.*?)^---[ \t]*(?:\r?\n|\Z)",
    re.MULTILINE | re.DOTALL,
)

# key:: value on its own line, optionally as a list item
_LINE_FIELD_RE = re.compile(
    r"^[ \t]*(?:[-*+][ \t]+)?(\w[\w \-]*?)[ \t]*::[ \t]*(.*?)[ \t]*$",
    re.MULTILINE,
)

# [key:: value] or (key:: value) anywhere in a line
_BRACKET_FIELD_RE = re.compile(r"[\[\(](\w[\w \-]*?)[ \t]*::[ \t]*([^\]\)]*?)[ \t]*[\]\)]")

_CODE_FENCE_RE = re.compile(r"^(```|~~~).*?^\1[ \t]*$", re.MULTILINE | re.DOTALL)


@dataclass
class FrontmatterResult:
    """Result of splitting a note into frontmatter and body.

    Attributes:
        data: Parsed frontmatter mapping (empty when absent).
        content: Note body after the frontmatter block.
        has_frontmatter: Whether a frontmatter block was present.
    """

    data: dict[str, Any] = field(default_factory=dict)
    content: str = ""
    has_frontmatter: bool = False


def parse_frontmatter(text: str, entity_id: str | None = None) -> FrontmatterResult:
    """Split a note into its YAML frontmatter and body.

    Args:
        text: Raw note text.
        entity_id: Used in error messages only.

    Returns:
        FrontmatterResult with parsed data and remaining content.

    Raises:
        FrontmatterError: If the block is not valid YAML or not a mapping.
    """
    match = _FRONTMATTER_RE.match(text)
    if not match:
        return FrontmatterResult(content=text)

    try:
        data = yaml.safe_load(match.group(1))
    except yaml.YAMLError as exc:
        raise FrontmatterError(entity_id, str(exc)) from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise FrontmatterError(entity_id, f"expected a mapping, got {type(data).__name__}")

    return FrontmatterResult(
        data=data,
        content=text[match.end():],
        has_frontmatter=True,
    )


def render_frontmatter(data: dict[str, Any], content: str) -> str:
    """Serialize frontmatter and body back into note text.

    An empty mapping drops the frontmatter block entirely.
    """
    if not data:
        return content

    block = yaml.safe_dump(data, sort_keys=False, allow_unicode=True, default_flow_style=False)
    return f"---\n{block}---\n{content}"


def extract_inline_fields(content: str) -> dict[str, Any]:
    """Find ``key:: value`` fields in a note body.

    Fields inside fenced code blocks are ignored. A key that appears more
    than once collects its values into a list; an empty value is None.

    Args:
        content: Note body (without frontmatter).

    Returns:
        Mapping of field names to values, in order of first appearance.
    """
    body = _CODE_FENCE_RE.sub("", content)

    found: list[tuple[int, str, str]] = []
    for match in _LINE_FIELD_RE.finditer(body):
        found.append((match.start(), match.group(1), match.group(2)))
    for match in _BRACKET_FIELD_RE.finditer(body):
        found.append((match.start(), match.group(1), match.group(2)))
    found.sort(key=lambda item: item[0])

    fields: dict[str, Any] = {}
    for _, key, raw in found:
        value = raw.strip() or None
        if key not in fields:
            fields[key] = value
        elif isinstance(fields[key], list):
            fields[key].append(value)
        else:
            fields[key] = [fields[key], value]

    return fields
