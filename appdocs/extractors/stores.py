"""Store extractor for zustand-style state containers."""

from __future__ import annotations

import re
from pathlib import PurePosixPath
from typing import Iterable, List, Optional, Tuple

from ..models import ActionRecord, PersistenceConfig, StateField, StoreRecord
from .base import (
    NO_MATCH,
    Extractor,
    Matched,
    MatchResult,
    NamePattern,
    NoMatch,
    first_match,
    name_or_stem,
)
from .syntax import (
    Member,
    block_after,
    find_closing,
    iter_members,
    leading_doc_comment,
    split_top_level,
    strip_quotes,
)

STORE_LIBRARY = "zustand"
EXCLUDED_ACTIONS = frozenset({"set", "get"})
DEFAULT_BACKEND = "localStorage"

_NAME_PATTERNS: Tuple[NamePattern, ...] = (
    NamePattern("store-hook", re.compile(r"(?:export\s+)?const\s+(?P<name>use[A-Z]\w*Store)\s*[:=]")),
    NamePattern("hook", re.compile(r"(?:export\s+)?const\s+(?P<name>use[A-Z]\w*)\s*=\s*create\b")),
)
_STORE_CONSTRUCTION = re.compile(r"\bcreate\s*(?:<[^>]*>)?\s*\(")
_CREATE_GENERIC = re.compile(r"\bcreate\s*<\s*(?P<name>\w+)\s*>")
_SHAPE_DECLARATION = re.compile(
    r"(?:export\s+)?(?:interface\s+(?P<iface>\w+)\b[^{=;]*|type\s+(?P<alias>\w+)\s*=\s*)\{"
)
_INITIALIZER = re.compile(
    r"\(\s*set\s*(?:,\s*get\s*)?(?:,\s*\w+\s*)?\)\s*=>\s*\(\s*\{"
)
_ARROW_START = re.compile(r"^(?:async\s*)?\(")
_PERSIST_CALL = re.compile(r"\bpersist\s*(?:<[^>]*>)?\s*\(")
_STORAGE_KEY = re.compile(r"\bname\s*:\s*(?P<key>'[^']*'|\"[^\"]*\"|`[^`]*`)")
_STORAGE_BACKEND = re.compile(
    r"\bstorage\s*:\s*(?:createJSONStorage\s*\(\s*\(\s*\)\s*=>\s*)?(?P<backend>[\w$.]+)"
)


def is_store_candidate(relative_path: str, text: str) -> bool:
    """Store files are named ``*store*`` or build a store with the zustand ``create`` call."""
    stem = PurePosixPath(relative_path).name.split(".", 1)[0]
    if "store" in stem.lower():
        return True
    return bool(_STORE_CONSTRUCTION.search(text)) and STORE_LIBRARY in text


def action_parameters(expression: str) -> Optional[str]:
    """Parameter list when ``expression`` reads as ``(params) => ...``; None for state.

    This is a syntactic check on the declared right-hand side only. A leading
    ``async`` keyword is accepted before the parameter list.
    """
    match = _ARROW_START.match(expression)
    if not match:
        return None
    open_index = match.end() - 1
    close_index = find_closing(expression, open_index)
    if close_index == -1:
        return None
    if not expression[close_index + 1 :].lstrip().startswith("=>"):
        return None
    return " ".join(expression[open_index + 1 : close_index].split())


def store_name(text: str) -> MatchResult[str]:
    return first_match(text, _NAME_PATTERNS)


def _declared_shapes(text: str) -> List[Tuple[str, str]]:
    bodies: List[Tuple[str, str]] = []
    for match in _SHAPE_DECLARATION.finditer(text):
        block = block_after(text, match.end() - 1)
        if block is None:
            continue
        start, end = block
        bodies.append((match.group("iface") or match.group("alias") or "", text[start + 1 : end]))
    return bodies


def shape_body(text: str) -> MatchResult[str]:
    """Body of the declared store shape.

    Preference order: the type passed to ``create<...>`` when it is declared in
    the file, then a declaration named ``*State`` or ``*Store``. A shape imported
    from elsewhere gives no match.
    """
    bodies = _declared_shapes(text)
    generic = _CREATE_GENERIC.search(text)
    if generic:
        for name, body in bodies:
            if name == generic.group("name"):
                return Matched(body)
    for name, body in bodies:
        if name.endswith(("State", "Store")):
            return Matched(body)
    return NO_MATCH


def first_declaration_body(text: str) -> MatchResult[str]:
    bodies = _declared_shapes(text)
    return Matched(bodies[0][1]) if bodies else NO_MATCH


def initializer_body(text: str) -> MatchResult[str]:
    """Object literal returned by the ``(set, get) => ({ ... })`` initializer."""
    match = _INITIALIZER.search(text)
    if not match:
        return NO_MATCH
    start = match.end() - 1
    end = find_closing(text, start)
    if end == -1:
        return NO_MATCH
    return Matched(text[start + 1 : end])


def partition_fields(
    members: Iterable[Member],
) -> Tuple[Tuple[StateField, ...], Tuple[ActionRecord, ...]]:
    """Split members into state fields and actions; ``set``/``get`` are dropped."""
    state: List[StateField] = []
    actions: List[ActionRecord] = []
    seen: set[str] = set()
    for member in members:
        if member.name in EXCLUDED_ACTIONS or member.name in seen:
            continue
        seen.add(member.name)
        parameters = action_parameters(member.type)
        if parameters is None:
            state.append(StateField(name=member.name, type=member.type))
        else:
            actions.append(ActionRecord(name=member.name, parameters=parameters))
    return tuple(state), tuple(actions)


def persistence_config(text: str) -> Optional[PersistenceConfig]:
    """Storage settings from the options passed to ``persist(initializer, options)``."""
    match = _PERSIST_CALL.search(text)
    if not match:
        return None
    open_index = match.end() - 1
    close_index = find_closing(text, open_index)
    arguments = text[open_index + 1 : close_index if close_index != -1 else len(text)]
    parts = split_top_level(arguments, ",")
    options = ",".join(parts[1:]) if len(parts) > 1 else ""

    key_match = _STORAGE_KEY.search(options)
    backend_match = _STORAGE_BACKEND.search(options)
    return PersistenceConfig(
        storage_key=strip_quotes(key_match.group("key")) if key_match else "",
        backend=backend_match.group("backend") if backend_match else DEFAULT_BACKEND,
        partial="partialize" in options,
    )


class StoreExtractor(Extractor[StoreRecord]):
    """Builds a StoreRecord for each file that looks like a state container."""

    name = "stores"

    def extract_text(self, text: str, relative_path: str) -> List[StoreRecord]:
        if not is_store_candidate(relative_path, text):
            return []

        name_result = store_name(text)
        name = name_or_stem(name_result, relative_path)
        description = None
        if isinstance(name_result, Matched):
            description = leading_doc_comment(text, name_result.position)
        if not description:
            description = f"State store {name}"

        body = shape_body(text)
        if isinstance(body, NoMatch):
            body = initializer_body(text)
        if isinstance(body, NoMatch):
            body = first_declaration_body(text)
        if isinstance(body, Matched):
            state, actions = partition_fields(iter_members(body.value))
        else:
            state, actions = (), ()

        return [
            StoreRecord(
                name=name,
                relative_path=relative_path,
                description=description,
                state=state,
                actions=actions,
                persistence=persistence_config(text),
            )
        ]


__all__ = [
    "EXCLUDED_ACTIONS",
    "StoreExtractor",
    "action_parameters",
    "first_declaration_body",
    "initializer_body",
    "is_store_candidate",
    "partition_fields",
    "persistence_config",
    "shape_body",
    "store_name",
]
