"""
gemini_backend.py
- Purpose: Analysis Provider Adapter backed by Gemini.
- Owns: input encoding by file kind, response coercion, total-failure fallback.
- Design: analyze() never raises; any failure becomes fallback_analysis().
"""

import logging
from pathlib import Path

from app.analysis.base import AnalysisBackend, is_pdf, read_document_text
from app.analysis.coercion import coerce_analysis, fallback_analysis
from app.llm.client import llm_generate_json
from app.llm.providers.gemini import GeminiProvider
from app.llm.types import InlineDocument
from app.schemas.analysis import DocumentAnalysis

logger = logging.getLogger("app.analysis.gemini")

PROMPT_VERSION = "v1"


class GeminiAnalysisBackend(AnalysisBackend):
    name = "gemini"

    def __init__(self, provider: GeminiProvider | None = None):
        self.provider = provider or GeminiProvider()

    def analyze(self, path: Path, filename: str) -> DocumentAnalysis:
        try:
            if is_pdf(filename):
                return self._analyze_pdf(Path(path))
            return self._analyze_text(Path(path))
        except Exception:
            logger.exception("analysis.provider_failed", extra={"upload_filename": filename})
            return fallback_analysis()

    def _analyze_pdf(self, path: Path) -> DocumentAnalysis:
        raw = llm_generate_json(
            purpose="analyze_pdf",
            prompt_name="analyze_pdf",
            prompt_version=PROMPT_VERSION,
            variables={},
            documents=[InlineDocument(data=path.read_bytes(), mime_type="application/pdf")],
            provider=self.provider,
        )
        return coerce_analysis(raw)

    def _analyze_text(self, path: Path) -> DocumentAnalysis:
        document_text = read_document_text(path)
        raw = llm_generate_json(
            purpose="analyze_text",
            prompt_name="analyze_text",
            prompt_version=PROMPT_VERSION,
            variables={"document_text": document_text},
            provider=self.provider,
        )
        return coerce_analysis(raw, original_text_default=document_text)
