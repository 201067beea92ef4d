"""Metadata aggregation: grouping, counts, JSON reports and document models."""

from __future__ import annotations

from datetime import datetime
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from .models import (
    ComponentCategory,
    ComponentRecord,
    DocumentKind,
    DocumentMetadata,
    DocumentModel,
    Section,
    StoreRecord,
    Topic,
    TypeKind,
    TypeRecord,
    record_to_dict,
)
from .rendering.boilerplate import (
    ARCHITECTURE_SUBSECTIONS,
    DEVELOPER_SUBSECTIONS,
    STATE_SUBSECTION,
)
from .rendering.labels import LabelSet

PERSISTED_GROUP = "persisted"
MEMORY_GROUP = "memory"


def group_components(
    records: Iterable[ComponentRecord],
) -> Dict[ComponentCategory, Tuple[ComponentRecord, ...]]:
    """Group components into the five fixed categories (all keys always present)."""
    grouped: Dict[ComponentCategory, List[ComponentRecord]] = {category: [] for category in ComponentCategory}
    for record in records:
        grouped[record.category].append(record)
    return {category: tuple(items) for category, items in grouped.items()}


def group_types(records: Iterable[TypeRecord]) -> Dict[TypeKind, Tuple[TypeRecord, ...]]:
    grouped: Dict[TypeKind, List[TypeRecord]] = {kind: [] for kind in TypeKind}
    for record in records:
        grouped[record.kind].append(record)
    return {kind: tuple(items) for kind, items in grouped.items()}


def group_stores(records: Iterable[StoreRecord]) -> Dict[str, Tuple[StoreRecord, ...]]:
    persisted: List[StoreRecord] = []
    memory: List[StoreRecord] = []
    for record in records:
        (persisted if record.persistence is not None else memory).append(record)
    return {PERSISTED_GROUP: tuple(persisted), MEMORY_GROUP: tuple(memory)}


def component_report(records: Sequence[ComponentRecord]) -> Dict[str, Any]:
    grouped = group_components(records)
    return {
        "total": len(records),
        "grouped": {category.value: [record_to_dict(r) for r in items] for category, items in grouped.items()},
        "counts": {category.value: len(items) for category, items in grouped.items()},
    }


def store_report(records: Sequence[StoreRecord]) -> Dict[str, Any]:
    grouped = group_stores(records)
    return {
        "total": len(records),
        "grouped": {group: [record_to_dict(r) for r in items] for group, items in grouped.items()},
        "with_persistence": len(grouped[PERSISTED_GROUP]),
    }


def type_report(records: Sequence[TypeRecord]) -> Dict[str, Any]:
    grouped = group_types(records)
    return {
        "total": len(records),
        "grouped": {kind.value: [record_to_dict(r) for r in items] for kind, items in grouped.items()},
        "counts": {kind.value: len(items) for kind, items in grouped.items()},
    }


def section_id(*parts: str) -> str:
    return "-".join(part.replace(" ", "-").lower() for part in parts)


class DocumentAggregator:
    """Assembles the immutable DocumentModel consumed by one renderer call."""

    def __init__(self, labels: LabelSet) -> None:
        self.labels = labels

    def build(
        self,
        kind: DocumentKind,
        *,
        project_name: str,
        components: Sequence[ComponentRecord] = (),
        types: Sequence[TypeRecord] = (),
        stores: Sequence[StoreRecord] = (),
        generated_at: Optional[datetime] = None,
    ) -> DocumentModel:
        topics = kind.topics
        grouped_components = group_components(components)
        grouped_types = group_types(types)
        store_groups = group_stores(stores)

        sections: List[Section] = []
        for topic in topics:
            sections.extend(self.topic_sections(topic, grouped_components, grouped_types, stores))

        counts: Dict[str, int] = {
            "components": len(components),
            "types": len(types),
            "stores": len(stores),
            "stores.persisted": len(store_groups[PERSISTED_GROUP]),
        }
        counts.update({f"components.{c.value}": len(items) for c, items in grouped_components.items()})
        counts.update({f"types.{k.value}": len(items) for k, items in grouped_types.items()})

        metadata = DocumentMetadata(
            project_name=project_name,
            language=self.labels.locale,
            generated_at=generated_at or datetime.now(),
            kind=kind,
        )
        return DocumentModel(
            metadata=metadata,
            topics=topics,
            sections=tuple(sections),
            grouped_components=MappingProxyType(grouped_components),
            grouped_types=MappingProxyType(grouped_types),
            stores=tuple(stores),
            counts=MappingProxyType(counts),
        )

    def topic_sections(
        self,
        topic: Topic,
        grouped_components: Dict[ComponentCategory, Tuple[ComponentRecord, ...]],
        grouped_types: Dict[TypeKind, Tuple[TypeRecord, ...]],
        stores: Sequence[StoreRecord],
    ) -> List[Section]:
        """Level-1 root for ``topic`` followed by its level-2 subsections."""
        sections = [Section(id=topic.value, title=self.labels[f"topic.{topic.value}"], level=1)]
        if topic is Topic.COMPONENTS:
            for category, items in grouped_components.items():
                if items:
                    sections.append(self._sub(topic, category.value, f"category.{category.value}"))
        elif topic is Topic.TYPES:
            for type_kind, items in grouped_types.items():
                if items:
                    sections.append(self._sub(topic, type_kind.value, f"kind.{type_kind.value}"))
        elif topic is Topic.ARCHITECTURE:
            for name in ARCHITECTURE_SUBSECTIONS:
                sections.append(self._sub(topic, name, f"section.{name}"))
            if stores:
                sections.append(self._sub(topic, STATE_SUBSECTION, f"section.{STATE_SUBSECTION}"))
        elif topic is Topic.DEVELOPER:
            for name in DEVELOPER_SUBSECTIONS:
                sections.append(self._sub(topic, name, f"section.{name}"))
        return sections

    def _sub(self, topic: Topic, name: str, label_key: str) -> Section:
        return Section(id=section_id(topic.value, name), title=self.labels[label_key], level=2)


__all__ = [
    "DocumentAggregator",
    "component_report",
    "group_components",
    "group_stores",
    "group_types",
    "section_id",
    "store_report",
    "type_report",
]
