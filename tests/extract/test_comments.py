"""Tests for comment normalization and description resolution."""

from __future__ import annotations

import pytest

from tfdocs.extract.comments import (
    extract_comments,
    normalize_comment_group,
    resolve_description,
    tidy_comment,
)
from tfdocs.hcl.tree import CommentGroup, RawComment
from tfdocs.models import Comment


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("// Here's a comment", "Here's a comment"),
        ("/* True\nmultiline\ncomment */", "True\nmultiline\ncomment"),
        ("# hash comment  ", "hash comment"),
        ("//", ""),
        ("plain text", "plain text"),
    ],
)
def test_tidy_comment(raw: str, expected: str) -> None:
    assert tidy_comment(raw) == expected


def test_normalize_joins_group_with_single_spaces() -> None:
    group = CommentGroup(
        (
            RawComment("// first", 3, 5, 3),
            RawComment("//   second  ", 4, 5, 4),
        )
    )

    assert normalize_comment_group(group) == Comment(text="first second", line=3, column=5)


def test_normalize_absent_or_empty_group() -> None:
    assert normalize_comment_group(None) is None
    assert normalize_comment_group(CommentGroup(())) is None


def test_extract_comments_drops_empty_groups() -> None:
    groups = [
        CommentGroup((RawComment("# a", 1, 1, 1),)),
        CommentGroup(()),
        CommentGroup((RawComment("# b", 9, 1, 9),)),
    ]

    assert [comment.text for comment in extract_comments(groups)] == ["a", "b"]


def test_resolve_description_picks_first_line_one_match() -> None:
    comments = [
        Comment(text="test module description", line=1, column=1),
        Comment(text="test another module description", line=1, column=1),
    ]

    assert resolve_description(comments, "test") == "test module description"


def test_resolve_description_skips_comments_below_line_one() -> None:
    comments = [
        Comment(text="test module description", line=2, column=1),
        Comment(text="test another module description", line=1, column=1),
    ]

    assert resolve_description(comments, "test") == "test another module description"


def test_resolve_description_requires_title_prefix() -> None:
    comments = [Comment(text="unrelated header", line=1, column=1)]

    assert resolve_description(comments, "network") == ""
    assert resolve_description([], "network") == ""
