"""Render ModuleDocuments as Markdown (Jinja templates) or JSON."""

from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path
from typing import List, Optional, Sequence

from jinja2 import Environment, FileSystemLoader, TemplateError, TemplateNotFound

from .models import ModuleDocument

_BUILTIN_TEMPLATES = Path(__file__).parent / "templates"
MARKDOWN_TEMPLATE = "modules.md.j2"


class RenderError(RuntimeError):
    """Raised when a template cannot be loaded or rendered."""


def _escape_cell(value: object) -> str:
    text = str(value)
    return text.replace("|", "\\|").replace("\n", "<br>")


def _create_env(templates_dir: Optional[Path]) -> Environment:
    search_path: List[str] = []
    if templates_dir is not None:
        search_path.append(str(templates_dir))
    search_path.append(str(_BUILTIN_TEMPLATES))
    env = Environment(
        loader=FileSystemLoader(search_path),
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    env.filters["cell"] = _escape_cell
    return env


def render_markdown(
    documents: Sequence[ModuleDocument], templates_dir: Optional[Path] = None
) -> str:
    """Render every document into a single Markdown page with a table of contents."""
    env = _create_env(templates_dir)
    try:
        template = env.get_template(MARKDOWN_TEMPLATE)
    except TemplateNotFound as exc:
        raise RenderError(f"template not found: {exc.name}") from exc
    except TemplateError as exc:
        raise RenderError(f"invalid template {MARKDOWN_TEMPLATE}: {exc}") from exc
    try:
        return template.render(modules=list(documents))
    except TemplateError as exc:
        raise RenderError(f"cannot render {MARKDOWN_TEMPLATE}: {exc}") from exc


def render_json(documents: Sequence[ModuleDocument]) -> str:
    payload = [asdict(document) for document in documents]
    return json.dumps(payload, indent=2) + "\n"


__all__ = ["MARKDOWN_TEMPLATE", "RenderError", "render_json", "render_markdown"]
