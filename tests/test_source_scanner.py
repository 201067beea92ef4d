"""Tests for appdocs.source_scanner."""

from __future__ import annotations

from pathlib import Path
from typing import List, Tuple

import pytest

from appdocs.source_scanner import ScanKind, SourceScanner, accepts
from tests._fixtures.project_builder import ProjectBuilder


@pytest.mark.parametrize(
    ("name", "kind", "expected"),
    [
        ("Button.tsx", ScanKind.COMPONENTS, True),
        ("Legacy.jsx", ScanKind.COMPONENTS, True),
        ("helpers.ts", ScanKind.COMPONENTS, False),
        ("index.tsx", ScanKind.COMPONENTS, False),
        ("Button.test.tsx", ScanKind.COMPONENTS, False),
        ("Button.spec.tsx", ScanKind.COMPONENTS, False),
        ("authStore.ts", ScanKind.STORES, True),
        ("authStore.test.ts", ScanKind.STORES, False),
        ("env.d.ts", ScanKind.TYPES, False),
        ("models.ts", ScanKind.TYPES, True),
        ("Widget.tsx", ScanKind.TYPES, False),
    ],
)
def test_accepts_filters_by_kind(name: str, kind: ScanKind, expected: bool) -> None:
    assert accepts(name, kind) is expected


def test_iter_components_walks_depth_first_in_sorted_order(sample_project: ProjectBuilder) -> None:
    scanner = SourceScanner()
    paths = [source.relative_path for source in scanner.iter_components(sample_project.path("src"))]

    assert paths == [
        "App.tsx",
        "components/layout/Header.tsx",
        "components/shared/SectorBadge.tsx",
        "components/ui/Button.tsx",
        "pages/Dashboard.tsx",
    ]


def test_scan_yields_file_contents(sample_project: ProjectBuilder) -> None:
    scanner = SourceScanner()
    sources = list(scanner.iter_stores(sample_project.path("src/store")))

    assert [source.relative_path for source in sources] == [
        "authStore.ts",
        "counterStore.ts",
        "helpers.ts",
    ]
    assert "useAuthStore" in sources[0].content
    assert Path(sources[0].path).is_absolute()


def test_single_file_root_is_yielded_as_is(sample_project: ProjectBuilder) -> None:
    scanner = SourceScanner()
    sources = list(scanner.iter_types(sample_project.path("src/types/index.ts")))

    assert len(sources) == 1
    assert sources[0].relative_path == "index.ts"


def test_scan_rejects_missing_directory(tmp_path: Path) -> None:
    scanner = SourceScanner()
    missing = tmp_path / "missing"
    with pytest.raises(FileNotFoundError) as excinfo:
        scanner.iter_components(missing)
    assert str(missing) in str(excinfo.value)


def test_unreadable_file_is_reported_and_skipped(project_builder: ProjectBuilder) -> None:
    project_builder.write({"src/Good.tsx": "export function Good() { return null; }\n"})
    (project_builder.path("src") / "Broken.tsx").write_bytes(b"\xff\xfe\x00broken")
    errors: List[Tuple[Path, Exception]] = []

    scanner = SourceScanner(on_error=lambda path, exc: errors.append((path, exc)))
    sources = list(scanner.iter_components(project_builder.path("src")))

    assert [source.relative_path for source in sources] == ["Good.tsx"]
    assert len(errors) == 1
    assert errors[0][0].name == "Broken.tsx"
    assert isinstance(errors[0][1], UnicodeDecodeError)


def test_empty_directory_yields_nothing(tmp_path: Path) -> None:
    empty = tmp_path / "empty"
    empty.mkdir()
    assert list(SourceScanner().iter_components(empty)) == []
