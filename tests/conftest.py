from __future__ import annotations

from pathlib import Path

import pytest

from tests._fixtures.project_builder import SAMPLE_APP, ProjectBuilder


@pytest.fixture
def project_builder(tmp_path: Path) -> ProjectBuilder:
    """Provide a reusable project builder rooted at the pytest tmp_path."""
    return ProjectBuilder(tmp_path)


@pytest.fixture
def sample_project(project_builder: ProjectBuilder) -> ProjectBuilder:
    """A small React application covering every record kind."""
    project_builder.write(SAMPLE_APP)
    return project_builder
