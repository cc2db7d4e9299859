"""End-to-end tests for tfdocs.scanner."""

from __future__ import annotations

from pathlib import Path

import pytest

from tfdocs.config import TfDocsConfig
from tfdocs.errors import DiscoveryError, InputError, ModuleIOError, SemanticError
from tfdocs.models import ModuleDocument, ModuleReference, Output, Resource, Variable
from tfdocs.scanner import DocumentScanner, find_and_parse

_FILE_TF = """
// {name} is a test module

variable "test" {{
  type        = "string"
  description = "this is a variable"
}}

output "test" {{
  value       = "${{var.test}}"
  description = "output description"
}}
"""

_MAIN_TF = """
// this is a resource
resource "aws_ami" "ami" {
  name = "test"
}

// here's a module
module "test" {
  source = "../"
}
"""


def _expected(title: str, path: str = "", link: str | None = None) -> ModuleDocument:
    return ModuleDocument(
        title=title,
        path=path,
        link=link or title,
        description=f"{title} is a test module",
        variables=(
            Variable(name="test", type="string", description="this is a variable"),
        ),
        outputs=(Output(name="test", description="output description"),),
        resources=(Resource(type="aws_ami", name="ami", description="this is a resource"),),
        modules=(ModuleReference(name="test", source="../", description="here's a module"),),
    )


def _module_files(name: str) -> dict[str, str]:
    return {"file.tf": _FILE_TF.format(name=name), "main.tf": _MAIN_TF}


def test_scan_single_module_root(tmp_path: Path) -> None:
    root = tmp_path / "depth1"
    root.mkdir()
    for filename, content in _module_files("depth1").items():
        (root / filename).write_text(content.lstrip("\n"), encoding="utf-8")

    documents = find_and_parse(root)

    assert documents == [_expected("depth1")]
    assert documents[0].variables[0].required is True


def test_scan_direct_children(module_builder) -> None:
    module_builder.write({f"module1/{name}": body for name, body in _module_files("module1").items()})
    module_builder.write({f"module2/{name}": body for name, body in _module_files("module2").items()})

    documents = module_builder.scan()

    assert documents == [_expected("module1"), _expected("module2")]


def test_scan_nested_modules_get_path_and_link(module_builder) -> None:
    module_builder.write(
        {f"network/aws/vpc/{name}": body for name, body in _module_files("vpc").items()}
    )

    documents = module_builder.scan()

    assert documents == [_expected("vpc", path="network/aws", link="network-aws_vpc")]


def test_description_requires_title_prefix(module_builder) -> None:
    module_builder.write(
        {
            "storage/main.tf": """
            // buckets for logs

            output "bucket" {
              value = "logs"
            }
            """
        }
    )

    documents = module_builder.scan()

    assert documents[0].description == ""
    assert documents[0].outputs == (Output(name="bucket"),)


def test_scan_rejects_empty_root() -> None:
    with pytest.raises(InputError, match="directory cannot be empty"):
        DocumentScanner().scan("")


def test_scan_rejects_missing_root(tmp_path: Path) -> None:
    with pytest.raises(ModuleIOError):
        DocumentScanner().scan(tmp_path / "missing")


def test_scan_without_modules(tmp_path: Path) -> None:
    (tmp_path / "docs").mkdir()

    with pytest.raises(DiscoveryError, match="no modules found in path"):
        DocumentScanner().scan(tmp_path)


def test_scan_propagates_semantic_errors_with_context(module_builder) -> None:
    module_builder.write(
        {
            "good/main.tf": 'output "ok" {}\n',
            "bad/variables.tf": 'variable "untyped" {}\n',
        }
    )

    with pytest.raises(SemanticError) as excinfo:
        module_builder.scan()

    assert excinfo.value.module == "bad"
    assert excinfo.value.filename == "variables.tf"


def test_lenient_config_keeps_valid_elements(module_builder) -> None:
    module_builder.write(
        {
            "mixed/variables.tf": """
            variable "untyped" {}

            variable "typed" {
              type = "string"
            }
            """
        }
    )
    config = TfDocsConfig(root=module_builder.path(), strict=False)

    documents = DocumentScanner(config).scan(module_builder.path())

    assert [variable.name for variable in documents[0].variables] == ["typed"]
    assert documents[0].warnings == ("mixed/variables.tf: type is required for a variable",)


def test_scan_uses_configured_extensions(module_builder) -> None:
    module_builder.write({"app/main.hcl": 'output "ok" {}\n', "other/main.tf": 'output "no" {}\n'})
    config = TfDocsConfig(root=module_builder.path(), extensions=[".hcl"])

    documents = DocumentScanner(config).scan(module_builder.path())

    assert [document.title for document in documents] == ["app"]


def test_scan_without_root_uses_configured_root(module_builder) -> None:
    module_builder.write({"app/main.tf": 'output "ok" {}\n'})
    config = TfDocsConfig(root=module_builder.path())

    documents = DocumentScanner(config).scan()

    assert [document.title for document in documents] == ["app"]


def test_scan_without_root_or_config_is_rejected() -> None:
    with pytest.raises(InputError, match="directory cannot be empty"):
        DocumentScanner().scan()
