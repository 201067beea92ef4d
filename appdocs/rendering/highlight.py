"""Lightweight TypeScript highlighting for verbatim type definitions."""

from __future__ import annotations

import re

from markupsafe import Markup, escape

_TOKEN = re.compile(
    r"(?P<comment>//[^\n]*|/\*[\s\S]*?\*/)"
    r"|(?P<string>'(?:\\.|[^'\\\n])*'|\"(?:\\.|[^\"\\\n])*\"|`(?:\\.|[^`\\])*`)"
    r"|(?P<keyword>\b(?:export|interface|type|enum|const|extends|readonly|keyof|typeof|in|as|declare)\b)"
    r"|(?P<builtin>\b(?:string|number|boolean|void|null|undefined|any|unknown|never|Record|Partial|Promise|Array)\b)"
    r"|(?P<number>\b\d+(?:\.\d+)?\b)"
)
_SPAN = Markup('<span class="tok-{kind}">{text}</span>')


def highlight(source: str) -> Markup:
    """Return ``source`` escaped, with tokens wrapped in ``tok-*`` spans."""
    parts = []
    last = 0
    for match in _TOKEN.finditer(source):
        parts.append(escape(source[last : match.start()]))
        parts.append(_SPAN.format(kind=match.lastgroup, text=match.group(0)))
        last = match.end()
    parts.append(escape(source[last:]))
    return Markup("").join(parts)


__all__ = ["highlight"]
