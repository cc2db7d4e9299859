"""Comment normalization and module description resolution."""

from __future__ import annotations

from typing import Iterable, List, Optional

from ..hcl.tree import CommentGroup
from ..models import Comment


def tidy_comment(comment: str) -> str:
    """Strip comment delimiters and surrounding whitespace from one raw comment.

    Interior lines of a block comment are kept verbatim.
    """
    result = comment
    if result.startswith("//"):
        result = result[2:]
    elif result.startswith("/*"):
        result = result[2:]
        if result.endswith("*/"):
            result = result[:-2]
    elif result.startswith("#"):
        result = result[1:]
    return result.strip()


def normalize_comment_group(group: Optional[CommentGroup]) -> Optional[Comment]:
    """Collapse a comment group into one Comment, or None for an absent/empty group."""
    if group is None or not group.comments:
        return None
    text = " ".join(tidy_comment(raw.text) for raw in group.comments)
    return Comment(text=text, line=group.line, column=group.column)


def extract_comments(groups: Iterable[CommentGroup]) -> List[Comment]:
    comments: List[Comment] = []
    for group in groups:
        comment = normalize_comment_group(group)
        if comment is not None:
            comments.append(comment)
    return comments


def resolve_description(comments: Iterable[Comment], title: str) -> str:
    """Return the first file-level comment (line 1) that starts with the module title."""
    for comment in comments:
        if comment.line != 1:
            continue
        text = comment.text.strip()
        if text.startswith(title):
            return text
    return ""


__all__ = [
    "extract_comments",
    "normalize_comment_group",
    "resolve_description",
    "tidy_comment",
]
