"""
mock_backend.py
- Purpose: Deterministic analysis backend for local development, demos and tests.
- No network calls. Text comes from the document itself (PyMuPDF for PDFs).
"""

import html
import logging
from pathlib import Path
from typing import ClassVar

from app.analysis.base import AnalysisBackend, is_pdf, read_document_text
from app.analysis.coercion import coerce_analysis, fallback_analysis
from app.pdf.extract import extract_text_from_file
from app.schemas.analysis import DocumentAnalysis

logger = logging.getLogger("app.analysis.mock")


class MockAnalysisBackend(AnalysisBackend):
    """Returns the marketing demo's issue/fix lists with fixed scores."""

    name = "mock"

    DEFAULT_RESPONSE: ClassVar[dict[str, object]] = {
        "issues": [
            {"type": "No semantic structure", "severity": "high",
             "description": "Content is not tagged with headings, lists or landmarks."},
            {"type": "Missing alt text", "severity": "high",
             "description": "Images have no text alternative.", "location": "Images"},
            {"type": "Incorrect reading order", "severity": "medium",
             "description": "Screen readers announce content out of visual order."},
            {"type": "Unlabeled form fields", "severity": "low",
             "description": "Form fields have no programmatic label.", "location": "Forms"},
        ],
        "fixes": [
            {"type": "Heading structure", "description": "Added a proper heading hierarchy."},
            {"type": "Alt text", "description": "Added alt text for all images."},
            {"type": "Reading order", "description": "Restored a logical reading order."},
            {"type": "Form labels", "description": "Labeled every form field."},
        ],
        "beforeScore": 25,
        "afterScore": 95,
    }

    def analyze(self, path: Path, filename: str) -> DocumentAnalysis:
        try:
            path = Path(path)
            text = extract_text_from_file(path).text if is_pdf(filename) else read_document_text(path)
        except Exception:
            logger.exception("analysis.mock_failed", extra={"upload_filename": filename})
            return fallback_analysis()

        raw = dict(self.DEFAULT_RESPONSE)
        raw["originalText"] = text
        raw["accessibleHtml"] = _to_html(filename, text)
        return coerce_analysis(raw)


def _to_html(filename: str, text: str) -> str:
    paragraphs = [p.strip() for p in text.split("\n\n") if p.strip()]
    body = "\n".join(f"<p>{html.escape(p)}</p>" for p in paragraphs)
    title = html.escape(Path(filename).stem or "Document")
    return f"<article>\n<h1>{title}</h1>\n{body}\n</article>"
