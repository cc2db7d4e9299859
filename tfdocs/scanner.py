"""Scan a directory tree and build one ModuleDocument per module directory."""

from __future__ import annotations

import os
from pathlib import Path
from typing import List, Optional

from .assembler import ModuleAssembler, module_path
from .config import TfDocsConfig
from .errors import DiscoveryError, InputError, ModuleIOError, TfDocsError
from .hcl.parser import HclParser
from .logging import get_logger
from .models import ModuleDocument
from .module_scanner import list_module_files, locate_module_dirs, read_module_files


class DocumentScanner:
    """Coordinates discovery, loading and assembly for a scan root."""

    def __init__(
        self,
        config: Optional[TfDocsConfig] = None,
        parser: Optional[HclParser] = None,
    ) -> None:
        self.config = config
        self.assembler = ModuleAssembler(
            parser, strict=config.strict if config is not None else True
        )
        self.logger = get_logger("scanner")

    def scan(self, root: str | Path | None = None) -> List[ModuleDocument]:
        """Return the documents of every module under `root`, in discovery order.

        Without `root` the directory the configuration was loaded for is scanned.
        """
        if root is None and self.config is not None:
            root = self.config.root
        if root is None or root == "":
            raise InputError("directory cannot be empty")
        root_path = Path(root)
        if not root_path.exists():
            raise ModuleIOError(f"directory not found: {root}")
        if not root_path.is_dir():
            raise ModuleIOError(f"path is not a directory: {root}")

        config = self.config or TfDocsConfig(root=root_path.absolute())
        extensions = config.extensions
        module_dirs = locate_module_dirs(
            root_path,
            extensions=extensions,
            exclude_paths=config.exclude_paths,
            max_depth=config.max_depth,
        )
        if not module_dirs:
            raise DiscoveryError(f"no modules found in path {root}")
        self.logger.info("Found %d module directories under %s", len(module_dirs), root)

        documents: List[ModuleDocument] = []
        for directory in module_dirs:
            title = Path(os.path.abspath(directory)).name
            try:
                names = list_module_files(directory, extensions)
                sources = read_module_files(directory, names)
                document = self.assembler.assemble(
                    sources, title, module_path(root_path, directory)
                )
            except TfDocsError as exc:
                raise exc.with_context(module=str(directory))
            self.logger.debug(
                "Module %s: %d variables, %d outputs, %d resources, %d modules",
                document.link,
                len(document.variables),
                len(document.outputs),
                len(document.resources),
                len(document.modules),
            )
            documents.append(document)
        return documents


def find_and_parse(root: str | Path, config: Optional[TfDocsConfig] = None) -> List[ModuleDocument]:
    """Scan `root` with the given (or default) configuration."""
    return DocumentScanner(config).scan(root)


__all__ = ["DocumentScanner", "find_and_parse"]
