"""Exception hierarchy raised by the extraction pipeline."""

from __future__ import annotations

from typing import Optional


class TfDocsError(RuntimeError):
    """Base class for every failure surfaced by tfdocs.

    Errors optionally carry the module and file they were raised for so the
    caller can report them without re-deriving the context.
    """

    def __init__(
        self,
        message: str,
        *,
        module: Optional[str] = None,
        filename: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.module = module
        self.filename = filename

    def with_context(
        self, *, module: Optional[str] = None, filename: Optional[str] = None
    ) -> "TfDocsError":
        """Fill in context that is not already set and return the same error."""
        if self.module is None:
            self.module = module
        if self.filename is None:
            self.filename = filename
        return self

    def __str__(self) -> str:
        location = [part for part in (self.module, self.filename) if part]
        if not location:
            return self.message
        return f"{'/'.join(location)}: {self.message}"


class InputError(TfDocsError):
    """Raised for empty scan roots or module names."""


class DiscoveryError(TfDocsError):
    """Raised when a scan root holds no module directories."""


class ModuleIOError(TfDocsError):
    """Raised when a directory or configuration file cannot be read."""


class HclSyntaxError(TfDocsError):
    """Raised when configuration text fails to parse."""

    def __init__(
        self,
        message: str,
        *,
        line: int = 0,
        column: int = 0,
        module: Optional[str] = None,
        filename: Optional[str] = None,
    ) -> None:
        super().__init__(message, module=module, filename=filename)
        self.line = line
        self.column = column


class SemanticError(TfDocsError):
    """Raised when a classified block misses a required identifier or attribute."""

    def __init__(
        self,
        message: str,
        *,
        kind: str,
        field: str,
        module: Optional[str] = None,
        filename: Optional[str] = None,
    ) -> None:
        super().__init__(message, module=module, filename=filename)
        self.kind = kind
        self.field = field


__all__ = [
    "DiscoveryError",
    "HclSyntaxError",
    "InputError",
    "ModuleIOError",
    "SemanticError",
    "TfDocsError",
]
