"""Type extractor: interfaces, type aliases, enums and exported lookup tables."""

from __future__ import annotations

import re
from typing import Callable, List, Tuple

from ..models import PropertyRecord, TypeKind, TypeRecord
from .base import Extractor
from .syntax import (
    clean_type,
    expression_end,
    find_closing,
    iter_members,
    leading_doc_comment,
    split_members,
    split_top_level,
)

_INTERFACE = re.compile(
    r"^[ \t]*(?P<export>export\s+)?(?:declare\s+)?interface\s+(?P<name>\w+)"
    r"(?:\s*<[^{]*?>)?(?:\s+extends\s+(?P<extends>[^{]+?))?\s*\{",
    re.MULTILINE,
)
_TYPE_ALIAS = re.compile(
    r"^[ \t]*(?P<export>export\s+)?(?:declare\s+)?type\s+(?P<name>\w+)(?:\s*<[^=]*?>)?\s*=\s*",
    re.MULTILINE,
)
_ENUM = re.compile(
    r"^[ \t]*(?P<export>export\s+)?(?:declare\s+)?(?:const\s+)?enum\s+(?P<name>\w+)\s*\{",
    re.MULTILINE,
)
_CONST_TABLE = re.compile(
    r"^[ \t]*(?P<export>export\s+)?const\s+(?P<name>\w+)"
    r"(?:\s*:\s*(?P<annotation>[^=]+?))?\s*=\s*(?P<open>[\[{])",
    re.MULTILINE,
)
_TABLE_NAME = re.compile(r"^[A-Z][A-Z0-9_]*$")
_AS_CONST = re.compile(r"\s*as\s+const\b")
_ENUM_MEMBER = re.compile(r"^(?P<name>[A-Za-z_$][\w$]*|'[^']*'|\"[^\"]*\")\s*(?:=\s*(?P<value>[\s\S]+))?$")


def is_table_name(name: str) -> bool:
    """Lookup tables are SCREAMING_CASE or carry LABEL/CONFIG in their name."""
    return bool(_TABLE_NAME.match(name)) or "LABEL" in name or "CONFIG" in name


def union_arms(expression: str) -> Tuple[str, ...]:
    """Top-level ``|`` arms of a type expression, trimmed and without empties."""
    return tuple(arm.strip() for arm in split_top_level(expression, "|") if arm.strip())


def union_properties(expression: str) -> Tuple[PropertyRecord, ...]:
    """One pseudo-property per union arm: ``value_1``, ``value_2``..."""
    arms = union_arms(expression)
    if len(arms) < 2:
        return ()
    return tuple(
        PropertyRecord(name=f"value_{index}", type=clean_type(arm))
        for index, arm in enumerate(arms, start=1)
    )


def interface_properties(body: str) -> Tuple[PropertyRecord, ...]:
    return tuple(
        PropertyRecord(
            name=member.name,
            type=member.type,
            optional=member.optional,
            description=member.description,
        )
        for member in iter_members(body)
    )


def extract_interfaces(text: str, relative_path: str = "") -> List[TypeRecord]:
    records: List[TypeRecord] = []
    for match in _INTERFACE.finditer(text):
        open_index = match.end() - 1
        close_index = find_closing(text, open_index)
        if close_index == -1:
            continue
        extends = match.group("extends")
        records.append(
            TypeRecord(
                name=match.group("name"),
                kind=TypeKind.INTERFACE,
                properties=interface_properties(text[open_index + 1 : close_index]),
                exported=match.group("export") is not None,
                definition=text[match.start() : close_index + 1].strip(),
                relative_path=relative_path,
                description=leading_doc_comment(text, match.start()),
                extends=tuple(part.strip() for part in split_top_level(extends, ",") if part.strip())
                if extends
                else (),
            )
        )
    return records


def extract_type_aliases(text: str, relative_path: str = "") -> List[TypeRecord]:
    records: List[TypeRecord] = []
    for match in _TYPE_ALIAS.finditer(text):
        start = match.end()
        end = expression_end(text, start)
        expression = text[start:end].strip()
        if expression.startswith("{"):
            close_index = find_closing(expression, 0)
            body = expression[1:close_index] if close_index != -1 else expression[1:]
            properties = interface_properties(body)
        else:
            properties = union_properties(expression)
        records.append(
            TypeRecord(
                name=match.group("name"),
                kind=TypeKind.TYPE_ALIAS,
                properties=properties,
                exported=match.group("export") is not None,
                definition=text[match.start() : end].strip(),
                relative_path=relative_path,
                description=leading_doc_comment(text, match.start()),
            )
        )
    return records


def extract_enums(text: str, relative_path: str = "") -> List[TypeRecord]:
    records: List[TypeRecord] = []
    for match in _ENUM.finditer(text):
        open_index = match.end() - 1
        close_index = find_closing(text, open_index)
        if close_index == -1:
            continue
        properties: List[PropertyRecord] = []
        ordinal = 0
        for raw in split_members(text[open_index + 1 : close_index]):
            member = _ENUM_MEMBER.match(raw.text)
            if not member:
                continue
            value = member.group("value")
            if value is None:
                value = str(ordinal)
                ordinal += 1
            elif value.strip().isdigit():
                ordinal = int(value.strip()) + 1
            properties.append(
                PropertyRecord(
                    name=member.group("name").strip("'\""),
                    type=clean_type(value),
                    description=raw.doc,
                )
            )
        records.append(
            TypeRecord(
                name=match.group("name"),
                kind=TypeKind.ENUM,
                properties=tuple(properties),
                exported=match.group("export") is not None,
                definition=text[match.start() : close_index + 1].strip(),
                relative_path=relative_path,
                description=leading_doc_comment(text, match.start()),
            )
        )
    return records


def extract_const_tables(text: str, relative_path: str = "") -> List[TypeRecord]:
    records: List[TypeRecord] = []
    for match in _CONST_TABLE.finditer(text):
        name = match.group("name")
        if not is_table_name(name):
            continue
        open_index = match.end() - 1
        close_index = find_closing(text, open_index)
        if close_index == -1:
            continue
        body = text[open_index + 1 : close_index]
        if match.group("open") == "{":
            properties = tuple(
                PropertyRecord(name=member.name, type=member.type, description=member.description)
                for member in iter_members(body)
            )
        else:
            properties = tuple(
                PropertyRecord(name=f"item_{index}", type=clean_type(raw.text), description=raw.doc)
                for index, raw in enumerate(split_members(body), start=1)
            )
        end = close_index + 1
        suffix = _AS_CONST.match(text, end)
        if suffix:
            end = suffix.end()
        annotation = match.group("annotation")
        records.append(
            TypeRecord(
                name=name,
                kind=TypeKind.CONST_TABLE,
                properties=properties,
                exported=match.group("export") is not None,
                definition=text[match.start() : end].strip(),
                relative_path=relative_path,
                description=leading_doc_comment(text, match.start()),
                extends=(clean_type(annotation),) if annotation else (),
            )
        )
    return records


_KIND_EXTRACTORS: Tuple[Callable[[str, str], List[TypeRecord]], ...] = (
    extract_interfaces,
    extract_type_aliases,
    extract_enums,
    extract_const_tables,
)


class TypeExtractor(Extractor[TypeRecord]):
    """Runs each declaration-kind extractor over the file independently."""

    name = "types"

    def extract_text(self, text: str, relative_path: str) -> List[TypeRecord]:
        records: List[TypeRecord] = []
        for extract_kind in _KIND_EXTRACTORS:
            records.extend(extract_kind(text, relative_path))
        return records


__all__ = [
    "TypeExtractor",
    "extract_const_tables",
    "extract_enums",
    "extract_interfaces",
    "extract_type_aliases",
    "interface_properties",
    "is_table_name",
    "union_arms",
    "union_properties",
]
