"""Core data models shared across appdocs components."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple


class ComponentCategory(str, Enum):
    """Fixed component groups derived from directory names."""

    UI = "ui"
    SHARED = "shared"
    LAYOUT = "layout"
    PAGE = "page"
    OTHER = "other"


class TypeKind(str, Enum):
    """Kinds of type-level declarations the type extractor recognises."""

    INTERFACE = "interface"
    TYPE_ALIAS = "type-alias"
    ENUM = "enum"
    CONST_TABLE = "const-table"


class Topic(str, Enum):
    """Documentation subject areas, in their fixed combined order."""

    COMPONENTS = "components"
    TYPES = "types"
    ARCHITECTURE = "architecture"
    DEVELOPER = "developer"


class DocumentKind(str, Enum):
    """Documents that can be requested from the generators."""

    COMPONENTS = "components"
    ARCHITECTURE = "architecture"
    DEVELOPER = "developer"
    TYPES = "types"
    ALL = "all"

    @property
    def topics(self) -> Tuple[Topic, ...]:
        if self is DocumentKind.ALL:
            return tuple(Topic)
        return (Topic(self.value),)


class Language(str, Enum):
    FR = "fr"
    EN = "en"


@dataclass(frozen=True)
class SourceFile:
    """A file selected by the scanner for extraction."""

    path: str
    relative_path: str
    content: str


@dataclass(frozen=True)
class PropRecord:
    name: str
    type: str
    required: bool
    description: Optional[str] = None


@dataclass(frozen=True)
class ImportRecord:
    module: str
    named: Tuple[str, ...] = ()
    default: Optional[str] = None


@dataclass(frozen=True)
class ComponentRecord:
    """One UI component found in a source file."""

    name: str
    relative_path: str
    category: ComponentCategory
    description: str
    props: Tuple[PropRecord, ...] = ()
    imports: Tuple[ImportRecord, ...] = ()
    hooks: Tuple[str, ...] = ()
    default_export: bool = False


@dataclass(frozen=True)
class StateField:
    name: str
    type: str


@dataclass(frozen=True)
class ActionRecord:
    name: str
    parameters: str


@dataclass(frozen=True)
class PersistenceConfig:
    storage_key: str
    backend: str = "localStorage"
    partial: bool = False


@dataclass(frozen=True)
class StoreRecord:
    """One state-container module."""

    name: str
    relative_path: str
    description: str
    state: Tuple[StateField, ...] = ()
    actions: Tuple[ActionRecord, ...] = ()
    persistence: Optional[PersistenceConfig] = None


@dataclass(frozen=True)
class PropertyRecord:
    name: str
    type: str
    optional: bool = False
    description: Optional[str] = None


@dataclass(frozen=True)
class TypeRecord:
    """One type-level declaration (interface, alias, enum or constant table)."""

    name: str
    kind: TypeKind
    properties: Tuple[PropertyRecord, ...]
    exported: bool
    definition: str
    relative_path: str = ""
    description: Optional[str] = None
    extends: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Section:
    """Table-of-contents entry for a rendered document."""

    id: str
    title: str
    level: int


@dataclass(frozen=True)
class DocumentMetadata:
    project_name: str
    language: Language
    generated_at: datetime
    kind: DocumentKind


def _frozen_mapping() -> Mapping[Any, Any]:
    return MappingProxyType({})


@dataclass(frozen=True)
class DocumentModel:
    """Complete in-memory representation of one documentation output."""

    metadata: DocumentMetadata
    topics: Tuple[Topic, ...]
    sections: Tuple[Section, ...]
    grouped_components: Mapping[ComponentCategory, Tuple[ComponentRecord, ...]] = field(
        default_factory=_frozen_mapping
    )
    grouped_types: Mapping[TypeKind, Tuple[TypeRecord, ...]] = field(default_factory=_frozen_mapping)
    stores: Tuple[StoreRecord, ...] = ()
    counts: Mapping[str, int] = field(default_factory=_frozen_mapping)


def record_to_dict(record: Any) -> Dict[str, Any]:
    """Serialise a record dataclass into JSON-compatible primitives."""
    return _normalise(asdict(record))


def _normalise(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {
            (key.value if isinstance(key, Enum) else key): _normalise(item)
            for key, item in value.items()
        }
    if isinstance(value, (list, tuple)):
        return [_normalise(item) for item in value]
    return value


__all__ = [
    "ActionRecord",
    "ComponentCategory",
    "ComponentRecord",
    "DocumentKind",
    "DocumentMetadata",
    "DocumentModel",
    "ImportRecord",
    "Language",
    "PersistenceConfig",
    "PropRecord",
    "PropertyRecord",
    "Section",
    "SourceFile",
    "StateField",
    "StoreRecord",
    "Topic",
    "TypeKind",
    "TypeRecord",
    "record_to_dict",
]
