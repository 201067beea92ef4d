"""Tests for .appdocs.yml loading."""

from __future__ import annotations

import pytest

from appdocs.config import CONFIG_FILENAME, DEFAULT_PROJECT_NAME, ConfigError, load_config
from appdocs.models import Language
from tests._fixtures.project_builder import ProjectBuilder


def test_defaults_without_config_file(project_builder: ProjectBuilder) -> None:
    config = load_config(project_builder.path())
    assert config.root == project_builder.path().resolve()
    assert config.project_name == DEFAULT_PROJECT_NAME
    assert config.language is Language.FR
    assert config.paths.components == "src"
    assert config.paths.types == "src/types/index.ts"


def test_values_are_read_from_yaml(project_builder: ProjectBuilder) -> None:
    project_builder.write(
        {
            CONFIG_FILENAME: """
                project:
                  name: Acme Portal
                  language: EN
                paths:
                  components: app/components/
                  stores: app/state
            """,
        }
    )
    config = load_config(project_builder.path())
    assert config.project_name == "Acme Portal"
    assert config.language is Language.EN
    assert config.paths.components == "app/components"
    assert config.paths.stores == "app/state"
    assert config.paths.types == "src/types/index.ts"


def test_config_file_path_is_accepted(project_builder: ProjectBuilder) -> None:
    project_builder.write({CONFIG_FILENAME: "project:\n  name: Direct\n"})
    config = load_config(project_builder.path(CONFIG_FILENAME))
    assert config.project_name == "Direct"
    assert config.root == project_builder.path().resolve()


@pytest.mark.parametrize(
    "content",
    [
        "project: [unclosed\n",
        "- just\n- a list\n",
        "project:\n  language: de\n",
    ],
)
def test_invalid_config_raises(project_builder: ProjectBuilder, content: str) -> None:
    project_builder.write({CONFIG_FILENAME: content})
    with pytest.raises(ConfigError):
        load_config(project_builder.path())


def test_scan_root_falls_back_to_src_then_root(project_builder: ProjectBuilder) -> None:
    config = load_config(project_builder.path())
    root = project_builder.path().resolve()
    assert config.resolve_scan_root("stores") == root

    project_builder.write({"src/App.tsx": "export function App() { return null; }\n"})
    assert config.resolve_scan_root("stores") == root / "src"

    project_builder.write({"src/store/uiStore.ts": "export const x = 1;\n"})
    assert config.resolve_scan_root("stores") == root / "src" / "store"
