"""Tree-sitter powered HCL parser producing the generic syntax tree."""

from __future__ import annotations

import re
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from tree_sitter import Node, Parser
from tree_sitter_language_pack import get_parser

from ..errors import HclSyntaxError
from ..logging import get_logger
from .tree import Attribute, Block, CommentGroup, Expr, ExprKind, RawComment, SyntaxTree

_LANGUAGE = "hcl"
# Attributes whose value is a type constraint such as list(string), kept as source text.
_TYPE_ATTRIBUTES = frozenset({"type"})
_NUMBER = re.compile(r"-\s*\d+(\.\d+)?([eE][+-]?\d+)?")

logger = get_logger("hcl")


class HclParser:
    """Parses HCL / Terraform text with the tree-sitter HCL grammar."""

    def __init__(self) -> None:
        self._parser: Optional[Parser] = None

    def parse(self, text: str) -> SyntaxTree:
        """Return the generic tree for `text` or raise HclSyntaxError."""
        source = text.encode("utf-8")
        tree = self._get_parser().parse(source)
        root = tree.root_node
        if root.has_error:
            bad = _first_error(root)
            line, column = bad.start_point[0] + 1, bad.start_point[1] + 1
            raise HclSyntaxError(
                f"syntax error at line {line}, column {column}", line=line, column=column
            )

        comments = list(_iter_comments(root, source))
        file_groups = _group_comments([comment for comment, _ in comments])
        lead_candidates = _group_comments([comment for comment, leading in comments if leading])
        leads = {group.end_line: group for group in lead_candidates}

        blocks = [
            self._convert_item(item, source, leads) for item in _top_level_items(root)
        ]
        logger.debug("Parsed %d blocks and %d comment groups", len(blocks), len(file_groups))
        return SyntaxTree(blocks=tuple(blocks), comments=tuple(file_groups))

    def _get_parser(self) -> Parser:
        if self._parser is None:
            self._parser = get_parser(_LANGUAGE)
        return self._parser

    def _convert_item(
        self, node: Node, source: bytes, leads: Dict[int, CommentGroup]
    ) -> Block:
        line = node.start_point[0] + 1
        lead = leads.get(line - 1)
        if node.type == "attribute":
            name = next(child for child in node.named_children if child.type != "comment")
            return Block(keys=(_node_text(name, source),), body=None, lead_comment=lead, line=line)

        keys: List[str] = []
        attributes: List[Attribute] = []
        opened = False
        for child in node.children:
            if child.type == "block_start":
                opened = True
            elif not opened and child.type in ("identifier", "string_lit"):
                keys.append(_node_text(child, source))
            elif child.type == "body":
                attributes.extend(
                    _convert_attribute(item, source)
                    for item in child.named_children
                    if item.type == "attribute"
                )
        return Block(keys=tuple(keys), body=tuple(attributes), lead_comment=lead, line=line)


def _top_level_items(root: Node) -> Iterator[Node]:
    for child in root.named_children:
        if child.type == "body":
            for item in child.named_children:
                if item.type in ("block", "attribute"):
                    yield item
        elif child.type in ("block", "attribute"):
            yield child


def _convert_attribute(node: Node, source: bytes) -> Attribute:
    named = [child for child in node.named_children if child.type != "comment"]
    name = _node_text(named[0], source)
    expression = next((child for child in named[1:] if child.type == "expression"), None)
    if expression is None:
        value = Expr(ExprKind.OTHER)
    else:
        value = _convert_expression(expression, source, type_constraint=name in _TYPE_ATTRIBUTES)
    return Attribute(name=name, value=value)


def _convert_expression(node: Node, source: bytes, *, type_constraint: bool = False) -> Expr:
    named = [child for child in node.named_children if child.type != "comment"]
    if len(named) != 1:
        return Expr(ExprKind.OTHER)
    term = named[0]
    text = _node_text(term, source)

    if term.type in ("literal_value", "string_lit", "variable_expr"):
        return Expr(ExprKind.LITERAL, text=text)
    if type_constraint and term.type == "function_call":
        return Expr(ExprKind.LITERAL, text=text)
    if term.type == "template_expr":
        inner = term.named_children[0] if term.named_children else None
        if inner is not None and inner.type == "quoted_template":
            return Expr(ExprKind.LITERAL, text=text)
        return Expr(ExprKind.OTHER)
    if term.type == "operation" and _NUMBER.fullmatch(text):
        return Expr(ExprKind.LITERAL, text=text.replace(" ", ""))
    if term.type == "collection_value" and term.named_children:
        collection = term.named_children[0]
        if collection.type == "tuple":
            items = tuple(
                _convert_expression(element, source)
                for element in collection.named_children
                if element.type == "expression"
            )
            return Expr(ExprKind.LIST, items=items)
    return Expr(ExprKind.OTHER)


def _iter_comments(root: Node, source: bytes) -> Iterator[Tuple[RawComment, bool]]:
    """Yield every comment in source order, flagged when it may lead a top-level block.

    Comments inside a block body and comments trailing code on the same line
    cannot lead a block.
    """
    stack: List[Tuple[Node, bool]] = [(root, False)]
    while stack:
        node, in_block = stack.pop()
        if node.type == "comment":
            comment = RawComment(
                text=_node_text(node, source),
                line=node.start_point[0] + 1,
                column=node.start_point[1] + 1,
                end_line=node.end_point[0] + 1,
            )
            yield comment, not in_block and not _is_trailing(node)
            continue
        nested = in_block or node.type == "block"
        stack.extend((child, nested) for child in reversed(node.children))


def _is_trailing(node: Node) -> bool:
    previous = node.prev_sibling
    return (
        previous is not None
        and previous.type != "comment"
        and previous.end_point[0] == node.start_point[0]
    )


def _group_comments(comments: Sequence[RawComment]) -> List[CommentGroup]:
    groups: List[CommentGroup] = []
    current: List[RawComment] = []
    for comment in comments:
        if current and comment.line > current[-1].end_line + 1:
            groups.append(CommentGroup(comments=tuple(current)))
            current = []
        current.append(comment)
    if current:
        groups.append(CommentGroup(comments=tuple(current)))
    return groups


def _first_error(root: Node) -> Node:
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type == "ERROR" or node.is_missing:
            return node
        stack.extend(reversed(node.children))
    return root


def _node_text(node: Node, source: bytes) -> str:
    return source[node.start_byte : node.end_byte].decode("utf-8", errors="replace")


__all__ = ["HclParser"]
