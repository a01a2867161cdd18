from __future__ import annotations

from pathlib import Path
from typing import List

import pytest

from docsite.models import ModuleArtifact
from tests._fixtures.modules import shapes_modules
from tests._fixtures.project_builder import ProjectBuilder


@pytest.fixture
def sample_modules() -> List[ModuleArtifact]:
    """Provide the ``shapes`` sample project modules."""
    return shapes_modules()


@pytest.fixture
def project_builder(tmp_path: Path) -> ProjectBuilder:
    """Provide a project builder rooted at the pytest tmp_path."""
    return ProjectBuilder(tmp_path)
