"""Merge the extracted elements of a module's files into one ModuleDocument."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence, Union

from .errors import InputError, TfDocsError
from .extract.classifiers import MODULE, OUTPUT, RESOURCE, VARIABLE, classify
from .extract.comments import extract_comments, resolve_description
from .extract.values import extract_values
from .hcl.parser import HclParser
from .logging import get_logger
from .models import Comment, ModuleDocument, ModuleReference, Output, Resource, SourceFile, Variable

PATH_SEPARATOR = "/"
LINK_DELIMITER = "-"
TITLE_SEPARATOR = "_"


def module_path(root: Union[str, Path], module_dir: Union[str, Path]) -> str:
    """Directory segments strictly between the scan root and the module's leaf directory."""
    root_path = Path(root).absolute()
    target = Path(module_dir).absolute()
    try:
        parts = target.relative_to(root_path).parts
    except ValueError:
        return ""
    return PATH_SEPARATOR.join(parts[:-1])


def module_link(path: str, title: str) -> str:
    """Flatten `path` and `title` into an anchor-safe identifier like `network-aws_vpc`."""
    link = path.replace(PATH_SEPARATOR, LINK_DELIMITER) + TITLE_SEPARATOR + title
    if link.startswith(TITLE_SEPARATOR):
        link = link[len(TITLE_SEPARATOR) :]
    return link


class ModuleAssembler:
    """Builds ModuleDocuments from raw configuration files."""

    def __init__(self, parser: Optional[HclParser] = None, *, strict: bool = True) -> None:
        self.parser = parser or HclParser()
        self.strict = strict
        self.logger = get_logger("assembler")

    def assemble(
        self,
        sources: Sequence[Union[SourceFile, str]],
        module_name: str,
        path: str = "",
    ) -> ModuleDocument:
        """Return the document for one module; any failure aborts the whole module."""
        if not module_name:
            raise InputError("module name cannot be empty")

        files = [
            source if isinstance(source, SourceFile) else SourceFile(name=f"<input-{index}>", text=source)
            for index, source in enumerate(sources)
        ]

        trees = []
        for source in files:
            try:
                trees.append(self.parser.parse(source.text))
            except TfDocsError as exc:
                raise exc.with_context(module=module_name, filename=source.name)

        comments: List[Comment] = []
        variables: List[Variable] = []
        outputs: List[Output] = []
        resources: List[Resource] = []
        modules: List[ModuleReference] = []
        warnings: List[str] = []

        for source, tree in zip(files, trees):
            comments.extend(extract_comments(tree.comments))
            values = extract_values(tree)
            self.logger.debug("%s/%s: %d blocks", module_name, source.name, len(values))
            for keyword, bucket in (
                (VARIABLE, variables),
                (OUTPUT, outputs),
                (MODULE, modules),
                (RESOURCE, resources),
            ):
                try:
                    result = classify(values, keyword, strict=self.strict)
                except TfDocsError as exc:
                    raise exc.with_context(module=module_name, filename=source.name)
                bucket.extend(result.items)
                for error in result.errors:
                    error.with_context(module=module_name, filename=source.name)
                    self.logger.warning("Skipping element: %s", error)
                    warnings.append(str(error))

        return ModuleDocument(
            title=module_name,
            path=path,
            link=module_link(path, module_name),
            description=resolve_description(comments, module_name),
            variables=tuple(variables),
            outputs=tuple(outputs),
            resources=tuple(resources),
            modules=tuple(modules),
            warnings=tuple(warnings),
        )


def parse_module(
    sources: Sequence[Union[SourceFile, str]], module_name: str, path: str = ""
) -> ModuleDocument:
    """Assemble one module with a default strict assembler."""
    return ModuleAssembler().assemble(sources, module_name, path)


__all__ = ["ModuleAssembler", "module_link", "module_path", "parse_module"]
