"""Rendering of document models to HTML and PDF."""

from __future__ import annotations

from .html import HtmlRenderer
from .labels import LabelSet, labels_for
from .pdf import PageOptions, PdfPrinter, PdfRenderer, PlaywrightPrinter, RenderError

__all__ = [
    "HtmlRenderer",
    "LabelSet",
    "PageOptions",
    "PdfPrinter",
    "PdfRenderer",
    "PlaywrightPrinter",
    "RenderError",
    "labels_for",
]
