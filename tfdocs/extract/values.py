"""Flatten a parsed tree into ordered Value records."""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from ..hcl.tree import Attribute, Block, ExprKind, SyntaxTree
from ..models import Comment, Value
from .comments import normalize_comment_group

_QUOTE_PATTERNS = ('\\"', '"')


def trim_quotes(text: str) -> str:
    """Strip one escaped quote and one plain quote from each end, once per pattern."""
    result = text
    for pattern in _QUOTE_PATTERNS:
        if result.startswith(pattern):
            result = result[len(pattern) :]
        if result.endswith(pattern):
            result = result[: -len(pattern)]
    return result


def render_attributes(attributes: Sequence[Attribute]) -> Dict[str, str]:
    """Render literal and list attributes to strings; other kinds are skipped."""
    rendered: Dict[str, str] = {}
    for attribute in attributes:
        value = attribute.value
        name = trim_quotes(attribute.name)
        if value.kind is ExprKind.LITERAL:
            rendered[name] = trim_quotes(value.text)
        elif value.kind is ExprKind.LIST:
            elements = [
                trim_quotes(item.text) for item in value.items if item.kind is ExprKind.LITERAL
            ]
            rendered[name] = f"[{', '.join(elements)}]"
    return rendered


def extract_value(block: Block) -> Value:
    if not block.keys:
        raise ValueError("block has no key tokens")
    attributes: Optional[Dict[str, str]] = None
    if block.body is not None:
        attributes = render_attributes(block.body)
    comment = normalize_comment_group(block.lead_comment) or Comment()
    return Value(
        keyword=block.keys[0],
        identifiers=tuple(trim_quotes(key) for key in block.keys[1:]),
        attributes=attributes,
        comment=comment,
    )


def extract_values(tree: SyntaxTree) -> List[Value]:
    """Return one Value per top-level block, in source order."""
    return [extract_value(block) for block in tree.blocks]


__all__ = ["extract_value", "extract_values", "render_attributes", "trim_quotes"]
