"""Pattern helpers for reading TypeScript surface syntax without a parser.

Everything here works on raw text: bracket matching, splitting a body into
top-level members and picking up documentation comments. String literals and
comments are skipped while counting brackets; anything beyond that (template
literal interpolation, regex literals) is taken at face value.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence

_HOOK_PATTERN = re.compile(r"\buse[A-Z]\w*")
_MEMBER_PATTERN = re.compile(
    r"^(?:readonly\s+)?"
    r"(?P<name>[A-Za-z_$][\w$]*|'[^']*'|\"[^\"]*\")"
    r"(?P<optional>\?)?\s*:\s*(?P<type>[\s\S]+)$"
)
_WHITESPACE = re.compile(r"\s+")

_OPENERS = {"{": "}", "(": ")", "[": "]"}
_CLOSERS = {"}", ")", "]"}
_QUOTES = {"'", '"', "`"}
_CONTINUATION_ENDINGS = ("|", "&", ":", "=>", "=", "?", "<", "(", "[", "{")


@dataclass(frozen=True)
class RawMember:
    """One top-level member of a braced body with the doc comment before it."""

    text: str
    doc: Optional[str] = None


@dataclass(frozen=True)
class Member:
    name: str
    type: str
    optional: bool
    description: Optional[str] = None


def find_closing(text: str, open_index: int) -> int:
    """Return the index of the bracket closing the one at ``open_index`` (or -1)."""
    opener = text[open_index]
    closer = _OPENERS[opener]
    depth = 0
    index = open_index
    length = len(text)
    while index < length:
        skipped = _skip_non_code(text, index)
        if skipped != index:
            index = skipped
            continue
        char = text[index]
        if char == opener:
            depth += 1
        elif char == closer:
            depth -= 1
            if depth == 0:
                return index
        index += 1
    return -1


def block_after(text: str, position: int, opener: str = "{") -> Optional[tuple[int, int]]:
    """Locate the first ``opener`` at or after ``position`` and return (start, end) of the block.

    ``start`` is the index of the opening bracket and ``end`` the index of the
    matching closing bracket.
    """
    start = text.find(opener, position)
    if start == -1:
        return None
    end = find_closing(text, start)
    if end == -1:
        return None
    return start, end


def split_top_level(text: str, separators: Sequence[str]) -> List[str]:
    """Split ``text`` on single-character separators that sit outside any brackets."""
    parts: List[str] = []
    current: List[str] = []
    nesting = _Nesting()
    index = 0
    length = len(text)
    while index < length:
        skipped = _skip_non_code(text, index, keep=current)
        if skipped != index:
            index = skipped
            continue
        char = text[index]
        if not nesting.feed(text, index) and char in separators:
            parts.append("".join(current))
            current = []
            index += 1
            continue
        current.append(char)
        index += 1
    parts.append("".join(current))
    return parts


def split_members(body: str) -> List[RawMember]:
    """Break a braced body into members separated by ``;``, ``,`` or line breaks.

    A ``/** ... */`` comment that precedes a member is attached to it; plain
    ``//`` and ``/* */`` comments are dropped. A line break does not end a
    member when the expression is visibly unfinished (trailing ``|``, ``=>``,
    ``:`` and the like) or when the next line starts with ``|`` or ``&``.
    """
    members: List[RawMember] = []
    current: List[str] = []
    pending_doc: Optional[str] = None
    nesting = _Nesting()
    index = 0
    length = len(body)

    def flush() -> None:
        nonlocal current, pending_doc
        text = "".join(current).strip()
        if text:
            members.append(RawMember(text=text, doc=pending_doc))
            pending_doc = None
        current = []

    while index < length:
        char = body[index]
        if body.startswith("//", index):
            end = body.find("\n", index)
            index = length if end == -1 else end
            continue
        if body.startswith("/*", index):
            end = body.find("*/", index + 2)
            end = length if end == -1 else end + 2
            comment = body[index:end]
            if nesting.flat and not "".join(current).strip() and comment.startswith("/**"):
                pending_doc = comment_text(comment)
            index = end
            continue
        if char in _QUOTES:
            end = _string_end(body, index)
            current.append(body[index:end])
            index = end
            continue
        if nesting.feed(body, index):
            pass
        elif char in ";,":
            flush()
            index += 1
            continue
        elif char == "\n":
            if not _continues(body, index, "".join(current)):
                flush()
                index += 1
                continue
        current.append(char)
        index += 1
    flush()
    return members


def expression_end(text: str, start: int) -> int:
    """Index where the expression beginning at ``start`` ends.

    The expression stops at a top-level ``;`` or at a line break once it is
    complete; a following line that starts with ``|`` or ``&`` continues it.
    """
    nesting = _Nesting()
    index = start
    length = len(text)
    while index < length:
        skipped = _skip_non_code(text, index)
        if skipped != index:
            index = skipped
            continue
        if nesting.feed(text, index):
            index += 1
            continue
        char = text[index]
        if char == ";":
            return index
        if char == "\n" and not _continues(text, index, text[start:index]):
            return index
        index += 1
    return length


def parse_member(raw: RawMember) -> Optional[Member]:
    """Read ``name?: type`` from a member; the preceding doc comment becomes its description."""
    match = _MEMBER_PATTERN.match(raw.text.strip())
    if not match:
        return None
    name = match.group("name").strip("'\"")
    return Member(
        name=name,
        type=clean_type(match.group("type")),
        optional=match.group("optional") is not None,
        description=raw.doc,
    )


def iter_members(body: str) -> Iterator[Member]:
    for raw in split_members(body):
        member = parse_member(raw)
        if member is not None:
            yield member


def clean_type(expression: str) -> str:
    """Collapse whitespace and strip a trailing statement terminator."""
    collapsed = _WHITESPACE.sub(" ", expression).strip()
    return collapsed.rstrip(";,").rstrip()


def comment_text(comment: str) -> Optional[str]:
    """Return the first meaningful line of a ``/** ... */`` block."""
    inner = comment.strip()
    if inner.startswith("/**"):
        inner = inner[3:]
    elif inner.startswith("/*"):
        inner = inner[2:]
    if inner.endswith("*/"):
        inner = inner[:-2]
    for line in inner.splitlines():
        cleaned = line.strip().lstrip("*").strip()
        if cleaned and not cleaned.startswith("@"):
            return cleaned
    return None


def leading_doc_comment(text: str, position: int) -> Optional[str]:
    """Description from the doc comment that ends right before ``position``.

    Only whitespace may separate the comment's closing ``*/`` from the
    declaration; the comment must open with ``/**``.
    """
    prefix = text[:position].rstrip()
    if not prefix.endswith("*/"):
        return None
    start = prefix.rfind("/*")
    if start == -1 or not prefix.startswith("/**", start):
        return None
    return comment_text(prefix[start:])


def detect_hooks(text: str) -> tuple[str, ...]:
    """Hook identifiers in first-seen order, without duplicates."""
    seen: dict[str, None] = {}
    for match in _HOOK_PATTERN.finditer(text):
        seen.setdefault(match.group(0), None)
    return tuple(seen)


def strip_quotes(value: str) -> str:
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in _QUOTES:
        return value[1:-1]
    return value


class _Nesting:
    """Bracket and generic-angle depth while scanning text character by character."""

    def __init__(self) -> None:
        self.brackets = 0
        self.angles = 0

    @property
    def flat(self) -> bool:
        return self.brackets == 0 and self.angles == 0

    def feed(self, text: str, index: int) -> bool:
        """Account for the character at ``index``; True when it is a bracket or nested."""
        char = text[index]
        if char in _OPENERS:
            self.brackets += 1
            return True
        if char in _CLOSERS:
            self.brackets = max(self.brackets - 1, 0)
            return True
        if char == "<" and _opens_generic(text, index):
            self.angles += 1
            return True
        if char == ">" and self.angles > 0 and text[index - 1] != "=":
            self.angles -= 1
            return True
        return not self.flat


def _skip_non_code(text: str, index: int, keep: Optional[List[str]] = None) -> int:
    """Return the index past a string literal or comment starting at ``index``."""
    char = text[index]
    if char in _QUOTES:
        end = _string_end(text, index)
        if keep is not None:
            keep.append(text[index:end])
        return end
    if text.startswith("//", index):
        end = text.find("\n", index)
        return len(text) if end == -1 else end
    if text.startswith("/*", index):
        end = text.find("*/", index + 2)
        return len(text) if end == -1 else end + 2
    return index


def _string_end(text: str, index: int) -> int:
    quote = text[index]
    cursor = index + 1
    length = len(text)
    while cursor < length:
        char = text[cursor]
        if char == "\\":
            cursor += 2
            continue
        if char == quote:
            return cursor + 1
        if char == "\n" and quote != "`":
            return cursor
        cursor += 1
    return length


def _opens_generic(text: str, index: int) -> bool:
    # `Array<string>` opens a generic; `a < b` does not.
    return index > 0 and (text[index - 1].isalnum() or text[index - 1] in "_$")


def _continues(body: str, index: int, current: str) -> bool:
    stripped = current.strip()
    if not stripped:
        return True
    if stripped.endswith(_CONTINUATION_ENDINGS):
        return True
    following = body[index + 1 :].lstrip()
    return following.startswith(("|", "&", "=>", "?", ":")) and not following.startswith("//")


__all__ = [
    "Member",
    "RawMember",
    "block_after",
    "clean_type",
    "comment_text",
    "detect_hooks",
    "expression_end",
    "find_closing",
    "iter_members",
    "leading_doc_comment",
    "parse_member",
    "split_members",
    "split_top_level",
    "strip_quotes",
]
