"""PDF rendering: paginated HTML printed by headless Chromium."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Protocol

from markupsafe import escape
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import async_playwright

from ..logging import get_logger
from ..models import DocumentModel
from .html import HtmlRenderer
from .labels import LabelSet

logger = get_logger("rendering.pdf")

_CHROME_STYLE = "font-size:8px;width:100%;padding:0 0.75in;color:#64748b;"


class RenderError(RuntimeError):
    """Raised when the print engine cannot produce a document."""


@dataclass(frozen=True)
class PageOptions:
    """Page geometry and running header/footer passed to the print engine."""

    format: str = "A4"
    margin_top: str = "1in"
    margin_bottom: str = "1in"
    margin_side: str = "0.75in"
    print_background: bool = True
    header_template: str = "<span></span>"
    footer_template: str = "<span></span>"

    def to_pdf_kwargs(self) -> Dict[str, Any]:
        return {
            "format": self.format,
            "margin": {
                "top": self.margin_top,
                "bottom": self.margin_bottom,
                "left": self.margin_side,
                "right": self.margin_side,
            },
            "print_background": self.print_background,
            "display_header_footer": True,
            "header_template": self.header_template,
            "footer_template": self.footer_template,
        }


def page_options_for(model: DocumentModel, labels: LabelSet) -> PageOptions:
    """Running header with project and document title, footer with page numbers."""
    title = labels.document_title(model.metadata.kind)
    header = (
        f'<div style="{_CHROME_STYLE}display:flex;justify-content:space-between;">'
        f"<span>{escape(model.metadata.project_name)}</span><span>{escape(title)}</span></div>"
    )
    footer = (
        f'<div style="{_CHROME_STYLE}text-align:center;">'
        f'{escape(labels["footer.page"])} <span class="pageNumber"></span> / <span class="totalPages"></span></div>'
    )
    return PageOptions(header_template=header, footer_template=footer)


class PdfPrinter(Protocol):
    """Turns a complete HTML page into PDF bytes."""

    async def print_pdf(self, html: str, options: PageOptions) -> bytes: ...


class PlaywrightPrinter:
    """Prints HTML with a headless Chromium driven by Playwright."""

    def __init__(self, *, headless: bool = True) -> None:
        self.headless = headless

    async def print_pdf(self, html: str, options: PageOptions) -> bytes:
        try:
            async with async_playwright() as playwright:
                browser = await playwright.chromium.launch(headless=self.headless)
                try:
                    page = await browser.new_page()
                    await page.set_content(html, wait_until="networkidle")
                    return await page.pdf(**options.to_pdf_kwargs())
                finally:
                    await browser.close()
        except PlaywrightError as exc:
            raise RenderError(f"Chromium failed to print the document: {exc}") from exc


class PdfRenderer:
    """Renders a document model to a PDF file.

    The HTML is produced by :class:`HtmlRenderer` in print mode, so type
    definitions are included with syntax highlighting. The output file is
    only written once the printer has returned the full document.
    """

    def __init__(
        self,
        labels: LabelSet,
        *,
        printer: PdfPrinter | None = None,
        html_renderer: HtmlRenderer | None = None,
    ) -> None:
        self.labels = labels
        self.printer = printer or PlaywrightPrinter()
        self.html_renderer = html_renderer or HtmlRenderer(labels)

    async def render(self, model: DocumentModel) -> bytes:
        html = self.html_renderer.render(model, for_print=True)
        options = page_options_for(model, self.labels)
        logger.debug("Printing %s document", model.metadata.kind.value)
        return await self.printer.print_pdf(html, options)

    async def write_async(self, model: DocumentModel, output: Path) -> Path:
        data = await self.render(model)
        output = Path(output)
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_bytes(data)
        return output

    def write(self, model: DocumentModel, output: Path) -> Path:
        return asyncio.run(self.write_async(model, output))


__all__ = [
    "PageOptions",
    "PdfPrinter",
    "PdfRenderer",
    "PlaywrightPrinter",
    "RenderError",
    "page_options_for",
]
