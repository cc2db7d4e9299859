"""Extraction pipeline: values, comments and typed classifiers."""

from .classifiers import (
    CLASSIFIERS,
    ClassificationResult,
    classify,
    extract_modules,
    extract_outputs,
    extract_resources,
    extract_variables,
)
from .comments import extract_comments, normalize_comment_group, resolve_description, tidy_comment
from .values import extract_values, trim_quotes

__all__ = [
    "CLASSIFIERS",
    "ClassificationResult",
    "classify",
    "extract_comments",
    "extract_modules",
    "extract_outputs",
    "extract_resources",
    "extract_values",
    "extract_variables",
    "normalize_comment_group",
    "resolve_description",
    "tidy_comment",
    "trim_quotes",
]
