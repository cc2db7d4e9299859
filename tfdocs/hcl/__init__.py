"""HCL parsing: tree-sitter adapter and the generic syntax tree it produces."""

from .parser import HclParser
from .tree import Attribute, Block, CommentGroup, Expr, ExprKind, RawComment, SyntaxTree

__all__ = [
    "Attribute",
    "Block",
    "CommentGroup",
    "Expr",
    "ExprKind",
    "HclParser",
    "RawComment",
    "SyntaxTree",
]
