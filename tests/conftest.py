from __future__ import annotations

from pathlib import Path

import pytest

from tests._fixtures.module_builder import ModuleBuilder
from tfdocs.hcl.parser import HclParser


@pytest.fixture
def module_builder(tmp_path: Path) -> ModuleBuilder:
    """Provide a reusable module tree builder rooted at the pytest tmp_path."""
    return ModuleBuilder(tmp_path)


@pytest.fixture(scope="session")
def hcl_parser() -> HclParser:
    return HclParser()
