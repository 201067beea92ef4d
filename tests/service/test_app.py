"""Tests for the FastAPI service mode."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import pytest
from fastapi.testclient import TestClient

from appdocs.config import AppDocsConfig
from appdocs.pipeline import Pipeline
from appdocs.service import create_app
from tests._fixtures.project_builder import ProjectBuilder


@pytest.fixture
def created() -> List[AppDocsConfig]:
    return []


@pytest.fixture
def client(created: List[AppDocsConfig]) -> TestClient:
    def factory(config: AppDocsConfig, language: Optional[str]) -> Pipeline:
        created.append(config)
        return Pipeline(config, language=language, echo=lambda line: None)

    return TestClient(create_app(factory))


def test_health_endpoint(client: TestClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_analyze_components(client: TestClient, sample_project: ProjectBuilder) -> None:
    response = client.post("/analyze", json={"path": str(sample_project.path("src")), "kind": "components"})
    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 5
    assert data["counts"]["layout"] == 1


def test_analyze_rejects_unknown_kind(client: TestClient, sample_project: ProjectBuilder) -> None:
    response = client.post("/analyze", json={"path": str(sample_project.path()), "kind": "widgets"})
    assert response.status_code == 422


def test_analyze_missing_path_returns_404(client: TestClient, tmp_path: Path) -> None:
    response = client.post("/analyze", json={"path": str(tmp_path / "missing"), "kind": "stores"})
    assert response.status_code == 404
    assert "missing" in response.json()["detail"]


def test_render_html(client: TestClient, sample_project: ProjectBuilder, created: List[AppDocsConfig]) -> None:
    response = client.post(
        "/render/html",
        json={"project": str(sample_project.path()), "kind": "types", "name": "Acme", "lang": "en"},
    )
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "Type reference" in response.text
    assert created[0].project_name == "Acme"


def test_render_html_unknown_kind_returns_400(client: TestClient, sample_project: ProjectBuilder) -> None:
    response = client.post("/render/html", json={"project": str(sample_project.path()), "kind": "bogus"})
    assert response.status_code == 400
    assert "bogus" in response.json()["detail"]


def test_render_html_missing_project_returns_404(client: TestClient, tmp_path: Path) -> None:
    response = client.post("/render/html", json={"project": str(tmp_path / "nope")})
    assert response.status_code == 404
