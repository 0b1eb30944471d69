"""Tests for AnalysisBackendFactory and MockAnalysisBackend."""

import pytest
from fastapi.testclient import TestClient

from app.analysis.factory import AnalysisBackendFactory
from app.analysis.gemini_backend import GeminiAnalysisBackend
from app.analysis.mock_backend import MockAnalysisBackend
from app.api.deps import get_settings
from app.core.config import Settings
from app.main import create_app


class TestAnalysisBackendFactory:
    def test_creates_mock_backend(self) -> None:
        backend = AnalysisBackendFactory.create(Settings(ANALYSIS_BACKEND="mock"))
        assert isinstance(backend, MockAnalysisBackend)

    def test_creates_gemini_backend_with_configured_key(self) -> None:
        backend = AnalysisBackendFactory.create(Settings(ANALYSIS_BACKEND="Gemini", GEMINI_API_KEY="secret"))
        assert isinstance(backend, GeminiAnalysisBackend)
        assert backend.provider.api_key == "secret"

    def test_unknown_backend_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown analysis backend"):
            AnalysisBackendFactory.create(Settings(ANALYSIS_BACKEND="openai"))


class TestMockAnalysisBackend:
    def test_pdf_text_is_extracted(self, tmp_path, sample_pdf_bytes) -> None:
        pdf = tmp_path / "document-1-1.pdf"
        pdf.write_bytes(sample_pdf_bytes)

        a = MockAnalysisBackend().analyze(pdf, "hello.pdf")

        assert "Hello PDF World" in a.original_text
        assert "<h1>hello</h1>" in a.accessible_html
        assert "<p>Hello PDF World</p>" in a.accessible_html
        assert (a.before_score, a.after_score) == (25, 95)
        assert len(a.issues) == 4
        assert len(a.fixes) == 4

    def test_text_is_escaped_into_html(self, tmp_path) -> None:
        doc = tmp_path / "notes.docx"
        doc.write_text("Tom & Jerry <script>", encoding="utf-8")

        a = MockAnalysisBackend().analyze(doc, "notes.docx")

        assert a.original_text == "Tom & Jerry <script>"
        assert "Tom &amp; Jerry &lt;script&gt;" in a.accessible_html

    def test_is_deterministic(self, tmp_path) -> None:
        doc = tmp_path / "a.doc"
        doc.write_text("same", encoding="utf-8")
        assert MockAnalysisBackend().analyze(doc, "a.doc") == MockAnalysisBackend().analyze(doc, "a.doc")

    def test_corrupt_pdf_falls_back(self, tmp_path) -> None:
        pdf = tmp_path / "broken.pdf"
        pdf.write_bytes(b"not a pdf at all")

        a = MockAnalysisBackend().analyze(pdf, "broken.pdf")

        assert (a.before_score, a.after_score) == (0, 0)
        assert a.issues[0].type == "Analysis Error"


class TestAppConstruction:
    def test_create_app_rejects_unknown_backend(self) -> None:
        with pytest.raises(ValueError, match="Unknown analysis backend"):
            create_app(Settings(ANALYSIS_BACKEND="bogus"))

    def test_create_app_builds_configured_backend(self) -> None:
        app = create_app(Settings(ANALYSIS_BACKEND="mock"))
        assert isinstance(app.state.analysis_backend, MockAnalysisBackend)

        with TestClient(app) as client:
            resp = client.get("/api/health")
        assert resp.json() == {"status": "ok", "analysis_backend": "mock"}

    def test_backend_follows_overridden_settings(self) -> None:
        app = create_app(Settings(ANALYSIS_BACKEND="gemini"))
        app.dependency_overrides[get_settings] = lambda: Settings(ANALYSIS_BACKEND="mock")
        try:
            with TestClient(app) as client:
                resp = client.get("/api/health")
        finally:
            app.dependency_overrides.clear()
        assert resp.json()["analysis_backend"] == "mock"
