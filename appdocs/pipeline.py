"""Generation pipeline: scan, extract, aggregate, render."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Sequence

from .aggregator import DocumentAggregator, component_report, store_report, type_report
from .config import AppDocsConfig
from .extractors import ComponentExtractor, StoreExtractor, TypeExtractor
from .logging import get_logger, log_transition
from .models import ComponentRecord, DocumentKind, DocumentModel, Language, StoreRecord, Topic, TypeRecord
from .rendering import HtmlRenderer, PdfPrinter, PdfRenderer, labels_for
from .source_scanner import SourceScanner

HTML_KINDS: Sequence[DocumentKind] = tuple(DocumentKind)
PDF_KINDS: Sequence[DocumentKind] = tuple(kind for kind in DocumentKind if kind is not DocumentKind.ALL)

Echo = Callable[[str], None]


class UnknownDocumentKindError(ValueError):
    """Raised when a requested document kind is not offered by a generator."""


class RunState(str, Enum):
    IDLE = "idle"
    SCANNING = "scanning"
    EXTRACTING = "extracting"
    AGGREGATING = "aggregating"
    RENDERING = "rendering"
    WRITTEN = "written"
    FAILED = "failed"


def parse_kind(value: str | DocumentKind, allowed: Sequence[DocumentKind] = HTML_KINDS) -> DocumentKind:
    """Return the document kind named ``value`` if ``allowed`` offers it."""
    try:
        kind = DocumentKind(value)
    except ValueError:
        kind = None
    if kind is None or kind not in allowed:
        choices = ", ".join(item.value for item in allowed)
        raise UnknownDocumentKindError(f"Unknown document type '{value}' (expected one of: {choices})")
    return kind


@dataclass
class GenerationRun:
    """Progress of a single generation request."""

    kind: DocumentKind
    output: Path
    state: RunState = RunState.IDLE
    history: List[RunState] = field(default_factory=list)
    error: Optional[str] = None

    def advance(self, state: RunState) -> None:
        self.history.append(self.state)
        self.state = state

    def fail(self, exc: BaseException) -> None:
        self.error = str(exc)
        self.advance(RunState.FAILED)


def analyze_components(path: str | Path, scanner: SourceScanner | None = None) -> Dict[str, Any]:
    """Grouped component report for every UI file under ``path``."""
    scanner = scanner or SourceScanner()
    return component_report(ComponentExtractor().extract_all(scanner.iter_components(path)))


def analyze_stores(path: str | Path, scanner: SourceScanner | None = None) -> Dict[str, Any]:
    scanner = scanner or SourceScanner()
    return store_report(StoreExtractor().extract_all(scanner.iter_stores(path)))


def analyze_types(path: str | Path, scanner: SourceScanner | None = None) -> Dict[str, Any]:
    scanner = scanner or SourceScanner()
    return type_report(TypeExtractor().extract_all(scanner.iter_types(path)))


class Pipeline:
    """Coordinates one documentation run for a project.

    Only the record kinds needed by the requested topics are scanned. Status
    lines go to ``echo`` (stdout by default); diagnostics go to the logger.
    """

    def __init__(
        self,
        config: AppDocsConfig,
        *,
        language: Language | str | None = None,
        scanner: SourceScanner | None = None,
        printer: PdfPrinter | None = None,
        echo: Echo = print,
    ) -> None:
        self.config = config
        self.labels = labels_for(language or config.language)
        self.scanner = scanner or SourceScanner()
        self.printer = printer
        self.echo = echo
        self.logger = get_logger("pipeline")
        self.component_extractor = ComponentExtractor()
        self.store_extractor = StoreExtractor()
        self.type_extractor = TypeExtractor()

    def collect_components(self) -> List[ComponentRecord]:
        root = self.config.resolve_scan_root("components")
        self.echo(f"Scanning components in {root}")
        return self.component_extractor.extract_all(
            self.scanner.iter_components(root), on_record=self._trace
        )

    def collect_stores(self) -> List[StoreRecord]:
        root = self.config.resolve_scan_root("stores")
        self.echo(f"Scanning stores in {root}")
        return self.store_extractor.extract_all(self.scanner.iter_stores(root), on_record=self._trace)

    def collect_types(self) -> List[TypeRecord]:
        root = self.config.resolve_scan_root("types")
        self.echo(f"Scanning types in {root}")
        return self.type_extractor.extract_all(self.scanner.iter_types(root), on_record=self._trace)

    def build_model(
        self,
        kind: DocumentKind,
        run: GenerationRun | None = None,
        *,
        generated_at: datetime | None = None,
    ) -> DocumentModel:
        topics = kind.topics
        components: List[ComponentRecord] = []
        stores: List[StoreRecord] = []
        types: List[TypeRecord] = []

        if run is not None:
            self._advance(run, RunState.SCANNING)
        if Topic.COMPONENTS in topics:
            components = self.collect_components()
            self.echo(f"Found {len(components)} components")
        if Topic.TYPES in topics:
            types = self.collect_types()
            self.echo(f"Found {len(types)} types")
        if Topic.ARCHITECTURE in topics:
            stores = self.collect_stores()
            self.echo(f"Found {len(stores)} stores")
        if run is not None:
            self._advance(run, RunState.EXTRACTING)
            self._advance(run, RunState.AGGREGATING)

        return DocumentAggregator(self.labels).build(
            kind,
            project_name=self.config.project_name,
            components=components,
            types=types,
            stores=stores,
            generated_at=generated_at,
        )

    def generate_html(self, kind: str | DocumentKind, output: str | Path) -> GenerationRun:
        run = GenerationRun(kind=parse_kind(kind, HTML_KINDS), output=Path(output))
        return self._execute(run, lambda model: HtmlRenderer(self.labels).write(model, run.output))

    def render_html(self, kind: str | DocumentKind) -> str:
        """Return the HTML page for ``kind`` without touching the filesystem."""
        return HtmlRenderer(self.labels).render(self.build_model(parse_kind(kind, HTML_KINDS)))

    def generate_pdf(self, kind: str | DocumentKind, output: str | Path) -> GenerationRun:
        run = GenerationRun(kind=parse_kind(kind, PDF_KINDS), output=Path(output))
        renderer = PdfRenderer(self.labels, printer=self.printer)
        return self._execute(run, lambda model: renderer.write(model, run.output))

    def _execute(self, run: GenerationRun, write: Callable[[DocumentModel], Path]) -> GenerationRun:
        self.logger.info("Generating %s document into %s", run.kind.value, run.output)
        try:
            model = self.build_model(run.kind, run)
            self._advance(run, RunState.RENDERING)
            write(model)
        except Exception as exc:
            previous = run.state
            run.fail(exc)
            log_transition(self.logger, run.kind.value, previous.value, run.state.value)
            raise
        self._advance(run, RunState.WRITTEN)
        self.echo(f"Documentation written to {run.output}")
        return run

    def _advance(self, run: GenerationRun, state: RunState) -> None:
        previous = run.state
        run.advance(state)
        log_transition(self.logger, run.kind.value, previous.value, state.value)

    def _trace(self, record: Any) -> None:
        self.logger.debug("Extracted %s %s", type(record).__name__, getattr(record, "name", "?"))


__all__ = [
    "GenerationRun",
    "HTML_KINDS",
    "PDF_KINDS",
    "Pipeline",
    "RunState",
    "UnknownDocumentKindError",
    "analyze_components",
    "analyze_stores",
    "analyze_types",
    "parse_kind",
]
