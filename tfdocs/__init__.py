"""Extract structured documentation from Terraform module directories."""

from .assembler import ModuleAssembler, module_link, module_path, parse_module
from .errors import (
    DiscoveryError,
    HclSyntaxError,
    InputError,
    ModuleIOError,
    SemanticError,
    TfDocsError,
)
from .models import Comment, ModuleDocument, ModuleReference, Output, Resource, SourceFile, Value, Variable
from .scanner import DocumentScanner, find_and_parse

__all__ = [
    "Comment",
    "DiscoveryError",
    "DocumentScanner",
    "HclSyntaxError",
    "InputError",
    "ModuleAssembler",
    "ModuleDocument",
    "ModuleIOError",
    "ModuleReference",
    "Output",
    "Resource",
    "SemanticError",
    "SourceFile",
    "TfDocsError",
    "Value",
    "Variable",
    "find_and_parse",
    "module_link",
    "module_path",
    "parse_module",
]
