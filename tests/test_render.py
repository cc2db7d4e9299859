"""Tests for tfdocs.render."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from tfdocs.models import ModuleDocument, ModuleReference, Output, Resource, Variable
from tfdocs.render import RenderError, render_json, render_markdown


def _document() -> ModuleDocument:
    return ModuleDocument(
        title="vpc",
        path="network/aws",
        link="network-aws_vpc",
        description="vpc builds the network",
        variables=(
            Variable(name="cidr", type="string", description="range | mask"),
            Variable(name="azs", type="list", default="[a, b]"),
        ),
        outputs=(Output(name="id", description="VPC id"),),
        resources=(Resource(type="aws_vpc", name="this", description="the vpc"),),
        modules=(ModuleReference(name="subnets", source="./subnets"),),
    )


def test_render_markdown_sections_and_anchor() -> None:
    markdown = render_markdown([_document()])

    assert "- [network/aws/vpc](#network-aws_vpc)" in markdown
    assert '<a name="network-aws_vpc"></a>' in markdown
    assert "## vpc" in markdown
    assert "vpc builds the network" in markdown
    assert "| `cidr` | string | range \\| mask |  | yes |" in markdown
    assert "| `azs` | list |  | [a, b] | no |" in markdown
    assert "| `id` | VPC id |" in markdown
    assert "| `aws_vpc` | `this` | the vpc |" in markdown
    assert "| `subnets` | `./subnets` |  |" in markdown


def test_render_markdown_omits_empty_sections() -> None:
    markdown = render_markdown([ModuleDocument(title="bare", link="bare")])

    assert "## bare" in markdown
    assert "### Variables" not in markdown
    assert "### Outputs" not in markdown


def test_render_markdown_prefers_custom_templates(tmp_path: Path) -> None:
    (tmp_path / "modules.md.j2").write_text(
        "{% for module in modules %}{{ module.link }};{% endfor %}", encoding="utf-8"
    )

    assert render_markdown([_document()], templates_dir=tmp_path) == "network-aws_vpc;"


def test_render_json_round_trips_fields() -> None:
    payload = json.loads(render_json([_document()]))

    assert payload[0]["link"] == "network-aws_vpc"
    assert payload[0]["variables"][0] == {
        "name": "cidr",
        "type": "string",
        "description": "range | mask",
        "default": "",
        "required": True,
    }
    assert payload[0]["modules"][0]["source"] == "./subnets"


def test_render_markdown_reports_template_syntax_errors(tmp_path: Path) -> None:
    (tmp_path / "modules.md.j2").write_text("{% if %}", encoding="utf-8")

    with pytest.raises(RenderError, match="invalid template modules.md.j2"):
        render_markdown([_document()], templates_dir=tmp_path)


def test_render_markdown_reports_render_time_errors(tmp_path: Path) -> None:
    (tmp_path / "modules.md.j2").write_text("{{ modules[0].title.missing() }}", encoding="utf-8")

    with pytest.raises(RenderError, match="cannot render modules.md.j2"):
        render_markdown([_document()], templates_dir=tmp_path)
