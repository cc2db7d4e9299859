"""Helper utilities for constructing temporary module trees in tests."""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import List, Mapping

from tfdocs.models import ModuleDocument
from tfdocs.scanner import DocumentScanner


class ModuleBuilder:
    """Writes configuration files below a throwaway scan root and rescans it."""

    def __init__(self, tmp_path: Path) -> None:
        self.root = tmp_path / "modules"
        self.root.mkdir()
        self._scanner = DocumentScanner()

    def write(self, files: Mapping[str, str]) -> None:
        """Write `path -> contents` entries below the scan root."""
        for relative, content in files.items():
            path = self.root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            normalised = textwrap.dedent(content).lstrip("\n")
            path.write_text(normalised, encoding="utf-8")

    def scan(self) -> List[ModuleDocument]:
        return self._scanner.scan(self.root)

    def path(self) -> Path:
        return self.root


__all__ = ["ModuleBuilder"]
