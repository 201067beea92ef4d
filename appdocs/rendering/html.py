"""HTML rendering of document models through Jinja templates."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Dict, Iterable

from jinja2 import Environment, FileSystemLoader, StrictUndefined
from markupsafe import Markup, escape

from ..logging import get_logger
from ..models import DocumentModel, StoreRecord, TypeKind, TypeRecord
from . import boilerplate
from .highlight import highlight
from .labels import LabelSet

TEMPLATE_NAME = "document.html.j2"
DEFAULT_TEMPLATES_DIR = Path(__file__).with_name("templates")

_IDENTIFIER = re.compile(r"\b[A-Za-z_]\w*\b")
_ANCHOR = Markup('<a class="xref" href="#{target}">{text}</a>')

logger = get_logger("rendering.html")


def anchor_id(prefix: str, name: str) -> str:
    """Stable fragment identifier for a record card."""
    return f"{prefix}-{re.sub(r'[^A-Za-z0-9_-]+', '-', name).strip('-')}"


class CrossReferences:
    """Links type expressions and hook names to the cards that define them."""

    def __init__(self, types: Iterable[TypeRecord] = (), stores: Iterable[StoreRecord] = ()) -> None:
        self._targets: Dict[str, str] = {record.name: anchor_id("type", record.name) for record in types}
        self._stores: Dict[str, str] = {record.name: anchor_id("store", record.name) for record in stores}

    def link_type(self, expression: str) -> Markup:
        if not self._targets:
            return escape(expression)
        parts = []
        last = 0
        for match in _IDENTIFIER.finditer(expression):
            target = self._targets.get(match.group(0))
            if target is None:
                continue
            parts.append(escape(expression[last : match.start()]))
            parts.append(_ANCHOR.format(target=target, text=match.group(0)))
            last = match.end()
        parts.append(escape(expression[last:]))
        return Markup("").join(parts)

    def link_hook(self, hook: str) -> Markup:
        target = self._stores.get(hook)
        if target is None:
            return escape(hook)
        return _ANCHOR.format(target=target, text=hook)


class HtmlRenderer:
    """Renders a :class:`DocumentModel` into one self-contained HTML page.

    Rendering runs in three passes inside the template: the cover page, the
    table of contents built from ``model.sections`` and one body per topic.
    Every interpolated value is escaped by the environment.
    """

    def __init__(self, labels: LabelSet, *, templates_dir: Path | None = None) -> None:
        self.labels = labels
        self.templates_dir = templates_dir or DEFAULT_TEMPLATES_DIR
        self._env = self._create_env(self.templates_dir)

    def render(self, model: DocumentModel, *, for_print: bool = False) -> str:
        """Return the page for ``model``.

        ``for_print`` adds the verbatim, highlighted definition of each type
        and the paginated print rules used by the PDF renderer.
        """
        references = CrossReferences(
            (record for records in model.grouped_types.values() for record in records),
            model.stores,
        )
        template = self._env.get_template(TEMPLATE_NAME)
        html = template.render(
            model=model,
            metadata=model.metadata,
            labels=self.labels,
            title=self.labels.document_title(model.metadata.kind),
            generated_at=self.labels.format_timestamp(model.metadata.generated_at),
            for_print=for_print,
            refs=references,
            boilerplate=_boilerplate_for(model),
            type_kinds=tuple(TypeKind),
        )
        logger.debug("Rendered %s document (%d characters)", model.metadata.kind.value, len(html))
        return html

    def write(self, model: DocumentModel, output: Path, *, for_print: bool = False) -> Path:
        html = self.render(model, for_print=for_print)
        output = Path(output)
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(html, encoding="utf-8")
        return output

    @staticmethod
    def _create_env(templates_dir: Path) -> Environment:
        env = Environment(
            loader=FileSystemLoader(str(templates_dir)),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )
        env.filters["highlight"] = highlight
        env.filters["anchor"] = anchor_id
        return env


def _boilerplate_for(model: DocumentModel) -> Dict[str, object]:
    language = model.metadata.language
    return {
        "stack": boilerplate.TECH_STACK[language],
        "layout": boilerplate.DIRECTORY_LAYOUT[language],
        "setup": boilerplate.SETUP_COMMANDS[language],
        "conventions": boilerplate.NAMING_CONVENTIONS[language],
        "workflow": boilerplate.WORKFLOW_STEPS[language],
        "introductions": boilerplate.INTRODUCTIONS[language],
    }


__all__ = [
    "CrossReferences",
    "DEFAULT_TEMPLATES_DIR",
    "HtmlRenderer",
    "TEMPLATE_NAME",
    "anchor_id",
]
