"""Project configuration loading (.appdocs.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .models import Language

CONFIG_FILENAME = ".appdocs.yml"
DEFAULT_PROJECT_NAME = "BusinessConnect"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class ScanPaths:
    """Directories (relative to the project root) scanned for each record kind."""

    components: str = "src"
    stores: str = "src/store"
    types: str = "src/types/index.ts"


@dataclass
class AppDocsConfig:
    """Settings read from .appdocs.yml; CLI flags take precedence."""

    root: Path
    project_name: str = DEFAULT_PROJECT_NAME
    language: Language = Language.FR
    paths: ScanPaths = field(default_factory=ScanPaths)

    def resolve_scan_root(self, kind: str) -> Path:
        """Return the file or directory to scan for ``kind``, falling back to src/ or the root."""
        configured = getattr(self.paths, kind)
        candidate = self.root / configured
        if candidate.exists():
            return candidate
        src = self.root / "src"
        if src.is_dir():
            return src
        return self.root


def load_config(config_path: Path) -> AppDocsConfig:
    """Load configuration from ``config_path`` (a project directory or the file itself)."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return AppDocsConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    project = _as_dict(data.get("project"))
    project_name = _as_str(project.get("name")) or DEFAULT_PROJECT_NAME
    language = _as_language(project.get("language"))

    paths_data = _as_dict(data.get("paths"))
    paths = ScanPaths()
    for key in ("components", "stores", "types"):
        value = _as_str(paths_data.get(key))
        if value:
            setattr(paths, key, value.strip("/"))

    return AppDocsConfig(
        root=root,
        project_name=project_name,
        language=language,
        paths=paths,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Any:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read {path.name}: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return {} if loaded is None else loaded


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) else None


def _as_language(value: Any) -> Language:
    if value is None:
        return Language.FR
    try:
        return Language(str(value).lower())
    except ValueError as exc:
        raise ConfigError(f"Unsupported language '{value}' (expected fr or en)") from exc


__all__ = [
    "AppDocsConfig",
    "CONFIG_FILENAME",
    "ConfigError",
    "DEFAULT_PROJECT_NAME",
    "ScanPaths",
    "load_config",
]
