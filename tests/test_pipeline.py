"""Tests for the generation pipeline."""

from __future__ import annotations

from pathlib import Path
from typing import List

import pytest

from appdocs.config import load_config
from appdocs.models import DocumentKind
from appdocs.pipeline import (
    Pipeline,
    RunState,
    UnknownDocumentKindError,
    analyze_components,
    analyze_stores,
    analyze_types,
    parse_kind,
)
from appdocs.rendering.pdf import PageOptions, RenderError
from tests._fixtures.project_builder import ProjectBuilder


class FakePrinter:
    def __init__(self, error: Exception | None = None) -> None:
        self.error = error
        self.printed: List[str] = []

    async def print_pdf(self, html: str, options: PageOptions) -> bytes:
        if self.error is not None:
            raise self.error
        self.printed.append(html)
        return b"%PDF-fake"


def _pipeline(project: ProjectBuilder, lines: List[str], **kwargs) -> Pipeline:
    return Pipeline(load_config(project.path()), echo=lines.append, **kwargs)


def test_parse_kind() -> None:
    assert parse_kind("all") is DocumentKind.ALL
    assert parse_kind(DocumentKind.TYPES) is DocumentKind.TYPES
    with pytest.raises(UnknownDocumentKindError, match="bogus"):
        parse_kind("bogus")


def test_analysis_reports(sample_project: ProjectBuilder) -> None:
    components = analyze_components(sample_project.path("src"))
    assert components["total"] == 5
    assert components["counts"] == {"ui": 1, "shared": 1, "layout": 1, "page": 1, "other": 1}

    stores = analyze_stores(sample_project.path("src/store"))
    assert stores["total"] == 2
    assert stores["with_persistence"] == 1

    types = analyze_types(sample_project.path("src/types/index.ts"))
    assert types["total"] == 7
    assert types["counts"]["const-table"] == 1


def test_analysis_of_missing_path_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        analyze_components(tmp_path / "nope")


def test_generate_html_walks_every_state(sample_project: ProjectBuilder, tmp_path: Path) -> None:
    lines: List[str] = []
    output = tmp_path / "site" / "index.html"

    run = _pipeline(sample_project, lines).generate_html("all", output)

    assert run.state is RunState.WRITTEN
    assert run.history == [
        RunState.IDLE,
        RunState.SCANNING,
        RunState.EXTRACTING,
        RunState.AGGREGATING,
        RunState.RENDERING,
    ]
    html = output.read_text(encoding="utf-8")
    assert "BusinessConnect" in html
    assert 'id="component-Button"' in html
    assert 'id="type-Company"' in html
    assert 'id="store-useAuthStore"' in html
    assert "Found 5 components" in lines
    assert "Found 7 types" in lines
    assert "Found 2 stores" in lines
    assert lines[-1] == f"Documentation written to {output}"


def test_single_topic_only_scans_what_it_needs(sample_project: ProjectBuilder, tmp_path: Path) -> None:
    lines: List[str] = []
    _pipeline(sample_project, lines).generate_html("developer", tmp_path / "dev.html")
    assert not any(line.startswith("Scanning") for line in lines)


def test_generate_pdf_with_injected_printer(sample_project: ProjectBuilder, tmp_path: Path) -> None:
    lines: List[str] = []
    printer = FakePrinter()
    output = tmp_path / "types.pdf"

    run = _pipeline(sample_project, lines, language="en", printer=printer).generate_pdf("types", output)

    assert run.state is RunState.WRITTEN
    assert output.read_bytes() == b"%PDF-fake"
    assert "Type reference" in printer.printed[0]


def test_pdf_rejects_all_before_touching_output(sample_project: ProjectBuilder, tmp_path: Path) -> None:
    output = tmp_path / "all.pdf"
    with pytest.raises(UnknownDocumentKindError):
        _pipeline(sample_project, [], printer=FakePrinter()).generate_pdf("all", output)
    assert not output.exists()


def test_failed_render_marks_run_failed(sample_project: ProjectBuilder, tmp_path: Path) -> None:
    pipeline = _pipeline(sample_project, [], printer=FakePrinter(error=RenderError("no chromium")))
    output = tmp_path / "components.pdf"
    with pytest.raises(RenderError):
        pipeline.generate_pdf("components", output)
    assert not output.exists()


def test_render_html_returns_page_without_writing(sample_project: ProjectBuilder) -> None:
    html = _pipeline(sample_project, []).render_html("components")
    assert "<!DOCTYPE html>" in html
    assert "Documentation des composants" in html


def test_empty_project_produces_valid_document(project_builder: ProjectBuilder, tmp_path: Path) -> None:
    output = tmp_path / "empty.html"
    run = _pipeline(project_builder, []).generate_html("all", output)
    assert run.state is RunState.WRITTEN
    assert "Aucun élément détecté." in output.read_text(encoding="utf-8")
