"""Source tree scanning for the documentation extractors."""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path
from typing import Callable, Iterator, Optional

from .logging import get_logger, log_skipped
from .models import SourceFile

ErrorChannel = Callable[[Path, Exception], None]

UI_EXTENSIONS: tuple[str, ...] = (".tsx", ".jsx")
SOURCE_EXTENSIONS: tuple[str, ...] = (".ts",)
DECLARATION_SUFFIX = ".d.ts"
INDEX_PREFIX = "index"
TEST_MARKERS: tuple[str, ...] = (".test", ".spec")


class ScanKind(str, Enum):
    """Which extractor the scanned files are destined for."""

    COMPONENTS = "components"
    STORES = "stores"
    TYPES = "types"


def accepts(name: str, kind: ScanKind) -> bool:
    """Return True when a file base name is a candidate for ``kind`` scans."""
    lower = name.lower()
    if lower.startswith(INDEX_PREFIX):
        return False
    if any(marker in lower for marker in TEST_MARKERS):
        return False
    if kind is ScanKind.COMPONENTS:
        return lower.endswith(UI_EXTENSIONS)
    if lower.endswith(DECLARATION_SUFFIX):
        return False
    return lower.endswith(SOURCE_EXTENSIONS)


class SourceScanner:
    """Walks a source tree depth-first and yields files for extraction.

    Directory entries are visited in sorted name order so repeated runs on the
    same tree produce identical output. I/O failures on a directory or file
    are handed to ``on_error`` and the offending entry is skipped.
    """

    def __init__(self, on_error: Optional[ErrorChannel] = None) -> None:
        self.logger = get_logger("scanner")
        self._on_error = on_error or self._log_error

    def iter_components(self, root: str | Path) -> Iterator[SourceFile]:
        return self.scan(root, ScanKind.COMPONENTS)

    def iter_stores(self, root: str | Path) -> Iterator[SourceFile]:
        return self.scan(root, ScanKind.STORES)

    def iter_types(self, root: str | Path) -> Iterator[SourceFile]:
        return self.scan(root, ScanKind.TYPES)

    def scan(self, root: str | Path, kind: ScanKind) -> Iterator[SourceFile]:
        """Return a lazy sequence of source files under ``root``.

        ``root`` may also be a single file, in which case it is yielded on its
        own (if readable) regardless of naming filters; type scans accept a
        file or a directory.
        """
        root_path = Path(root).expanduser().resolve()
        if not root_path.exists():
            raise FileNotFoundError(f"Path not found: {root}")
        if root_path.is_file():
            return self._single(root_path)
        if not root_path.is_dir():
            raise NotADirectoryError(f"Path is neither a file nor a directory: {root}")
        return self._walk(root_path, root_path, kind)

    def _single(self, path: Path) -> Iterator[SourceFile]:
        source = self._read(path, path.parent)
        if source is not None:
            yield source

    def _walk(self, directory: Path, root: Path, kind: ScanKind) -> Iterator[SourceFile]:
        try:
            with os.scandir(directory) as iterator:
                entries = sorted(iterator, key=lambda entry: entry.name)
        except OSError as exc:
            self._on_error(directory, exc)
            return

        for entry in entries:
            path = Path(entry.path)
            try:
                is_dir = entry.is_dir()
                is_file = entry.is_file()
            except OSError as exc:
                self._on_error(path, exc)
                continue
            if is_dir:
                yield from self._walk(path, root, kind)
            elif is_file and accepts(entry.name, kind):
                source = self._read(path, root)
                if source is not None:
                    yield source

    def _read(self, path: Path, root: Path) -> SourceFile | None:
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            self._on_error(path, exc)
            return None
        return SourceFile(
            path=str(path),
            relative_path=path.relative_to(root).as_posix(),
            content=content,
        )

    def _log_error(self, path: Path, exc: Exception) -> None:
        log_skipped(self.logger, path, exc)


__all__ = [
    "ErrorChannel",
    "ScanKind",
    "SourceScanner",
    "accepts",
]
