"""Base classes for structural extractors."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import PurePosixPath
from typing import Callable, Generic, Iterable, List, Optional, Sequence, TypeVar, Union

from ..logging import get_logger, log_skipped
from ..models import SourceFile

T = TypeVar("T")
R = TypeVar("R")


@dataclass(frozen=True)
class Matched(Generic[T]):
    """A construct pattern matched; ``value`` holds what it captured."""

    value: T
    position: int = 0


@dataclass(frozen=True)
class NoMatch:
    """No pattern in the list matched."""


NO_MATCH = NoMatch()

MatchResult = Union[Matched[T], NoMatch]


@dataclass(frozen=True)
class NamePattern:
    """One entry of a prioritised pattern list; ``group`` names the capture to keep."""

    label: str
    regex: re.Pattern[str]
    group: str = "name"


def first_match(text: str, patterns: Sequence[NamePattern]) -> MatchResult[str]:
    """Try ``patterns`` in order and return the first capture found in ``text``."""
    for pattern in patterns:
        match = pattern.regex.search(text)
        if match:
            return Matched(match.group(pattern.group), match.start())
    return NO_MATCH


def name_or_stem(result: MatchResult[str], relative_path: str) -> str:
    """Captured name, or the file's base name when nothing matched."""
    if isinstance(result, Matched):
        return result.value
    name = PurePosixPath(relative_path).name
    return name.split(".", 1)[0] or name


class Extractor(ABC, Generic[R]):
    """Contract for extractors turning one source file into metadata records.

    ``extract_text`` is pure: it receives raw text and returns records without
    touching the filesystem or shared state. ``extract`` wraps it so that a
    failure on one file is logged and yields no records instead of aborting
    the whole run.
    """

    name: str = "extractor"

    def __init__(self) -> None:
        self.logger = get_logger(f"extractors.{self.name}")

    @abstractmethod
    def extract_text(self, text: str, relative_path: str) -> List[R]:
        """Return every record found in ``text``."""

    def extract_source(self, source: SourceFile) -> List[R]:
        return self.extract_text(source.content, source.relative_path)

    def extract(self, source: SourceFile) -> List[R]:
        try:
            records = self.extract_source(source)
        except Exception as exc:
            log_skipped(self.logger, source.relative_path, exc)
            return []
        self.logger.debug("%s: %d record(s) from %s", self.name, len(records), source.relative_path)
        return records

    def extract_all(
        self,
        sources: Iterable[SourceFile],
        *,
        on_record: Optional[Callable[[R], None]] = None,
    ) -> List[R]:
        records: List[R] = []
        for source in sources:
            for record in self.extract(source):
                records.append(record)
                if on_record is not None:
                    on_record(record)
        return records


__all__ = [
    "Extractor",
    "MatchResult",
    "Matched",
    "NO_MATCH",
    "NamePattern",
    "NoMatch",
    "first_match",
    "name_or_stem",
]
