"""Component extractor for React function components (.tsx/.jsx)."""

from __future__ import annotations

import re
from dataclasses import replace
from pathlib import PurePath, PurePosixPath
from typing import Dict, List, Optional, Tuple

from ..models import ComponentCategory, ComponentRecord, ImportRecord, PropRecord, SourceFile
from .base import Extractor, Matched, MatchResult, NO_MATCH, NamePattern, first_match, name_or_stem
from .syntax import block_after, detect_hooks, iter_members, leading_doc_comment

_NAME_PATTERNS: Tuple[NamePattern, ...] = (
    NamePattern("export-default-function", re.compile(r"export\s+default\s+function\s+(?P<name>[A-Z]\w*)")),
    NamePattern("export-function", re.compile(r"export\s+function\s+(?P<name>[A-Z]\w*)")),
    NamePattern("export-const", re.compile(r"export\s+const\s+(?P<name>[A-Z]\w*)\s*[:=]")),
    NamePattern("function", re.compile(r"^function\s+(?P<name>[A-Z]\w*)", re.MULTILINE)),
    NamePattern(
        "arrow-const",
        re.compile(
            r"^const\s+(?P<name>[A-Z]\w*)\s*(?::\s*[^=]+)?=\s*(?:async\s*)?"
            r"(?:\([^)]*\)|\w+)\s*(?::\s*[^=]+)?=>",
            re.MULTILINE,
        ),
    ),
)

_PROPS_DECLARATION = re.compile(
    r"(?:export\s+)?(?:interface\s+(?P<iface>\w*Props)\b[^{]*|type\s+(?P<alias>\w*Props)\s*=\s*)\{"
)
_DEFAULT_EXPORT = re.compile(r"export\s+default\s+(?:function\s+)?(?P<name>[A-Z]\w*)")
_IMPORT = re.compile(
    r"^import\s+['\"](?P<bare>[^'\"]+)['\"]"
    r"|^import\s+(?:type\s+)?(?P<clause>[^'\";]*?)\s+from\s+['\"](?P<module>[^'\"]+)['\"]",
    re.MULTILINE,
)

_CATEGORY_MARKERS: Tuple[Tuple[Tuple[str, ...], ComponentCategory], ...] = (
    (("/ui/",), ComponentCategory.UI),
    (("/shared/",), ComponentCategory.SHARED),
    (("/layout/", "/layouts/"), ComponentCategory.LAYOUT),
    (("/pages/",), ComponentCategory.PAGE),
)


def categorize(path: str) -> ComponentCategory:
    """Category from directory names in ``path``; file contents never matter."""
    normalised = "/" + path.replace("\\", "/").lstrip("/")
    for markers, category in _CATEGORY_MARKERS:
        if any(marker in normalised for marker in markers):
            return category
    return ComponentCategory.OTHER


def category_path(source: SourceFile) -> str:
    """``relative_path`` prefixed with the name of the directory it is relative to.

    Scanning ``src/pages`` directly still yields ``pages/Login.tsx``, so the
    scan root's own name takes part in categorisation.
    """
    root = PurePath(source.path)
    for _ in PurePosixPath(source.relative_path).parts:
        root = root.parent
    if not root.name:
        return source.relative_path
    return f"{root.name}/{source.relative_path}"


def component_name(text: str) -> MatchResult[str]:
    return first_match(text, _NAME_PATTERNS)


def props_body(text: str, component: str) -> MatchResult[str]:
    """Body of ``<Component>Props`` if declared, else of the first ``*Props`` declaration."""
    candidates: List[Tuple[str, str]] = []
    for match in _PROPS_DECLARATION.finditer(text):
        block = block_after(text, match.end() - 1)
        if block is None:
            continue
        start, end = block
        name = match.group("iface") or match.group("alias") or ""
        candidates.append((name, text[start + 1 : end]))
    if not candidates:
        return NO_MATCH
    for name, body in candidates:
        if name == f"{component}Props":
            return Matched(body)
    return Matched(candidates[0][1])


def parse_props(body: str) -> Tuple[PropRecord, ...]:
    return tuple(
        PropRecord(
            name=member.name,
            type=member.type,
            required=not member.optional,
            description=member.description,
        )
        for member in iter_members(body)
    )


def parse_imports(text: str) -> Tuple[ImportRecord, ...]:
    records: List[ImportRecord] = []
    for match in _IMPORT.finditer(text):
        if match.group("bare"):
            records.append(ImportRecord(module=match.group("bare")))
            continue
        default, named = _parse_import_clause(match.group("clause"))
        records.append(ImportRecord(module=match.group("module"), named=named, default=default))
    return tuple(records)


def _parse_import_clause(clause: str) -> Tuple[Optional[str], Tuple[str, ...]]:
    clause = clause.strip()
    named: Dict[str, None] = {}
    default: Optional[str] = None

    brace_start = clause.find("{")
    if brace_start != -1:
        brace_end = clause.find("}", brace_start)
        inner = clause[brace_start + 1 : brace_end if brace_end != -1 else len(clause)]
        for part in inner.split(","):
            binding = part.strip()
            if binding.startswith("type "):
                binding = binding[5:].strip()
            if " as " in binding:
                binding = binding.split(" as ", 1)[1].strip()
            if binding:
                named.setdefault(binding, None)
        clause = (clause[:brace_start] + clause[brace_end + 1 :] if brace_end != -1 else clause[:brace_start])

    for part in clause.split(","):
        binding = part.strip()
        if not binding:
            continue
        if binding.startswith("* as "):
            binding = binding[5:].strip()
        default = binding
        break
    return default, tuple(named)


class ComponentExtractor(Extractor[ComponentRecord]):
    """Builds one ComponentRecord per UI file."""

    name = "components"

    def extract_text(self, text: str, relative_path: str) -> List[ComponentRecord]:
        name_result = component_name(text)
        name = name_or_stem(name_result, relative_path)

        description = None
        if isinstance(name_result, Matched):
            description = leading_doc_comment(text, name_result.position)
        if not description:
            description = f"{name} component"

        props_result = props_body(text, name)
        props = parse_props(props_result.value) if isinstance(props_result, Matched) else ()

        default_match = _DEFAULT_EXPORT.search(text)
        return [
            ComponentRecord(
                name=name,
                relative_path=relative_path,
                category=categorize(relative_path),
                description=description,
                props=props,
                imports=parse_imports(text),
                hooks=detect_hooks(text),
                default_export=bool(default_match and default_match.group("name") == name),
            )
        ]

    def extract_source(self, source: SourceFile) -> List[ComponentRecord]:
        category = categorize(category_path(source))
        return [replace(record, category=category) for record in super().extract_source(source)]


__all__ = [
    "ComponentExtractor",
    "categorize",
    "category_path",
    "component_name",
    "parse_imports",
    "parse_props",
    "props_body",
]
