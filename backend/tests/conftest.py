import fitz
import pytest
from fastapi.testclient import TestClient

from app.analysis.base import AnalysisBackend
from app.api.deps import get_analysis_backend, get_temp_storage
from app.main import app
from app.schemas.analysis import DocumentAnalysis, Fix, Issue
from app.services.storage.temp_storage import TempUploadStorage


class FakeBackend(AnalysisBackend):
    """Records every call and returns a canned analysis (or raises)."""

    name = "fake"

    def __init__(self, result: DocumentAnalysis | None = None, exc: Exception | None = None):
        self.result = result or DocumentAnalysis(
            original_text="Quarterly report",
            accessible_html="<h1>Report</h1>",
            issues=[Issue(type="Missing alt text", severity="high", description="Chart has no alt text")],
            fixes=[Fix(type="Added alt text", description="Described the chart")],
            before_score=20,
            after_score=95,
        )
        self.exc = exc
        self.calls: list[tuple] = []

    def analyze(self, path, filename):
        # Record whether the temp file existed while the backend was running.
        self.calls.append((path, filename, path.exists()))
        if self.exc is not None:
            raise self.exc
        return self.result


@pytest.fixture
def upload_dir(tmp_path):
    d = tmp_path / "uploads"
    d.mkdir()
    return d


@pytest.fixture
def fake_backend():
    return FakeBackend()


@pytest.fixture
def client(fake_backend, upload_dir):
    app.dependency_overrides[get_analysis_backend] = lambda: fake_backend
    app.dependency_overrides[get_temp_storage] = lambda: TempUploadStorage(upload_dir, max_bytes=10 * 1024 * 1024)
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def sample_pdf_bytes() -> bytes:
    """A minimal single-page PDF with known text content."""
    doc = fitz.open()
    page = doc.new_page()
    page.insert_text((72, 72), "Hello PDF World")
    data = doc.tobytes()
    doc.close()
    return data
