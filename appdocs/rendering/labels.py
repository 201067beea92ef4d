"""Localised label sets injected into the aggregator and renderers."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from types import MappingProxyType
from typing import Mapping, Tuple

from ..models import DocumentKind, Language

_FR_LABELS: Mapping[str, str] = MappingProxyType(
    {
        "document.components": "Documentation des composants",
        "document.types": "Référence des types",
        "document.architecture": "Architecture technique",
        "document.developer": "Guide du développeur",
        "document.all": "Documentation technique complète",
        "cover.generated": "Généré le",
        "cover.summary": "Synthèse",
        "toc.title": "Table des matières",
        "topic.components": "Composants",
        "topic.types": "Types",
        "topic.architecture": "Architecture",
        "topic.developer": "Guide du développeur",
        "category.ui": "Composants UI",
        "category.shared": "Composants partagés",
        "category.layout": "Mises en page",
        "category.page": "Pages",
        "category.other": "Autres composants",
        "kind.interface": "Interfaces",
        "kind.type-alias": "Alias de types",
        "kind.enum": "Énumérations",
        "kind.const-table": "Tables de constantes",
        "section.stack": "Stack technique",
        "section.layout": "Organisation des dossiers",
        "section.state": "Gestion d'état",
        "section.setup": "Installation",
        "section.conventions": "Conventions de nommage",
        "section.workflow": "Ajouter un composant",
        "column.name": "Nom",
        "column.type": "Type",
        "column.required": "Requis",
        "column.description": "Description",
        "column.parameters": "Paramètres",
        "column.value": "Valeur",
        "column.path": "Chemin",
        "column.role": "Rôle",
        "column.command": "Commande",
        "column.element": "Élément",
        "column.convention": "Convention",
        "column.technology": "Technologie",
        "column.usage": "Usage",
        "badge.required": "requis",
        "badge.optional": "optionnel",
        "badge.persisted": "persisté",
        "badge.exported": "exporté",
        "heading.props": "Propriétés",
        "heading.hooks": "Hooks utilisés",
        "heading.state": "État",
        "heading.actions": "Actions",
        "heading.definition": "Définition",
        "heading.properties": "Propriétés",
        "label.file": "Fichier",
        "label.storage": "Stockage",
        "label.extends": "Étend",
        "empty.props": "Aucune propriété déclarée.",
        "empty.hooks": "Aucun hook utilisé.",
        "empty.state": "Aucun champ d'état.",
        "empty.actions": "Aucune action.",
        "empty.properties": "Aucune propriété.",
        "empty.topic": "Aucun élément détecté.",
        "count.components": "composants",
        "count.types": "types",
        "count.stores": "stores",
        "count.persisted": "persistés",
        "footer.page": "Page",
    }
)

_EN_LABELS: Mapping[str, str] = MappingProxyType(
    {
        "document.components": "Component documentation",
        "document.types": "Type reference",
        "document.architecture": "Technical architecture",
        "document.developer": "Developer guide",
        "document.all": "Complete technical documentation",
        "cover.generated": "Generated on",
        "cover.summary": "Summary",
        "toc.title": "Table of contents",
        "topic.components": "Components",
        "topic.types": "Types",
        "topic.architecture": "Architecture",
        "topic.developer": "Developer guide",
        "category.ui": "UI components",
        "category.shared": "Shared components",
        "category.layout": "Layouts",
        "category.page": "Pages",
        "category.other": "Other components",
        "kind.interface": "Interfaces",
        "kind.type-alias": "Type aliases",
        "kind.enum": "Enums",
        "kind.const-table": "Constant tables",
        "section.stack": "Tech stack",
        "section.layout": "Directory layout",
        "section.state": "State management",
        "section.setup": "Setup",
        "section.conventions": "Naming conventions",
        "section.workflow": "Adding a component",
        "column.name": "Name",
        "column.type": "Type",
        "column.required": "Required",
        "column.description": "Description",
        "column.parameters": "Parameters",
        "column.value": "Value",
        "column.path": "Path",
        "column.role": "Role",
        "column.command": "Command",
        "column.element": "Element",
        "column.convention": "Convention",
        "column.technology": "Technology",
        "column.usage": "Usage",
        "badge.required": "required",
        "badge.optional": "optional",
        "badge.persisted": "persisted",
        "badge.exported": "exported",
        "heading.props": "Props",
        "heading.hooks": "Hooks used",
        "heading.state": "State",
        "heading.actions": "Actions",
        "heading.definition": "Definition",
        "heading.properties": "Properties",
        "label.file": "File",
        "label.storage": "Storage",
        "label.extends": "Extends",
        "empty.props": "No props declared.",
        "empty.hooks": "No hooks used.",
        "empty.state": "No state fields.",
        "empty.actions": "No actions.",
        "empty.properties": "No properties.",
        "empty.topic": "Nothing detected.",
        "count.components": "components",
        "count.types": "types",
        "count.stores": "stores",
        "count.persisted": "persisted",
        "footer.page": "Page",
    }
)

_FR_MONTHS = (
    "janvier", "février", "mars", "avril", "mai", "juin",
    "juillet", "août", "septembre", "octobre", "novembre", "décembre",
)
_EN_MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


@dataclass(frozen=True)
class LabelSet:
    """Static strings and date formatting for one output language."""

    locale: Language
    labels: Mapping[str, str]
    months: Tuple[str, ...]

    def __getitem__(self, key: str) -> str:
        return self.labels.get(key, key)

    def document_title(self, kind: DocumentKind) -> str:
        return self[f"document.{kind.value}"]

    def format_timestamp(self, moment: datetime) -> str:
        month = self.months[moment.month - 1]
        if self.locale is Language.FR:
            return f"{moment.day} {month} {moment.year} à {moment:%H:%M}"
        hour = moment.hour % 12 or 12
        suffix = "AM" if moment.hour < 12 else "PM"
        return f"{month} {moment.day}, {moment.year} at {hour}:{moment:%M} {suffix}"


_LABEL_SETS = {
    Language.FR: LabelSet(locale=Language.FR, labels=_FR_LABELS, months=_FR_MONTHS),
    Language.EN: LabelSet(locale=Language.EN, labels=_EN_LABELS, months=_EN_MONTHS),
}


def labels_for(language: Language | str) -> LabelSet:
    """Return the label set for ``language`` (``fr`` or ``en``)."""
    return _LABEL_SETS[Language(language)]


__all__ = ["LabelSet", "labels_for"]
