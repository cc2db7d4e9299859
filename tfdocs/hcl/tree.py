"""Generic syntax tree handed from the HCL parser to the value extractor.

The tree only carries what extraction needs: top-level blocks with their raw
key tokens, attribute expressions classified as literal, list or other, and
comment groups with 1-based positions.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class ExprKind(str, Enum):
    LITERAL = "literal"
    LIST = "list"
    OTHER = "other"


@dataclass(frozen=True)
class Expr:
    """An attribute value. `text` is raw source for literals, `items` holds list elements."""

    kind: ExprKind
    text: str = ""
    items: Tuple["Expr", ...] = ()


@dataclass(frozen=True)
class Attribute:
    name: str
    value: Expr


@dataclass(frozen=True)
class RawComment:
    """A single comment token exactly as written, delimiters included."""

    text: str
    line: int
    column: int
    end_line: int


@dataclass(frozen=True)
class CommentGroup:
    """Comments on consecutive lines, in source order. Never empty."""

    comments: Tuple[RawComment, ...]

    @property
    def line(self) -> int:
        return self.comments[0].line

    @property
    def column(self) -> int:
        return self.comments[0].column

    @property
    def end_line(self) -> int:
        return self.comments[-1].end_line


@dataclass(frozen=True)
class Block:
    """A top-level item.

    `keys` are raw tokens with quotes intact; the first is the keyword. `body`
    is None when the item has no nested-attribute object (a bare
    `name = value` attribute at file level).
    """

    keys: Tuple[str, ...]
    body: Optional[Tuple[Attribute, ...]] = None
    lead_comment: Optional[CommentGroup] = None
    line: int = 0


@dataclass(frozen=True)
class SyntaxTree:
    blocks: Tuple[Block, ...] = ()
    comments: Tuple[CommentGroup, ...] = ()


__all__ = [
    "Attribute",
    "Block",
    "CommentGroup",
    "Expr",
    "ExprKind",
    "RawComment",
    "SyntaxTree",
]
