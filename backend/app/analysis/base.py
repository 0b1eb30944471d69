from abc import ABC, abstractmethod
from pathlib import Path

from app.schemas.analysis import DocumentAnalysis


class AnalysisBackend(ABC):
    """Contract for anything that turns an uploaded document into a DocumentAnalysis."""

    name: str = "base"

    @abstractmethod
    def analyze(self, path: Path, filename: str) -> DocumentAnalysis:
        """Analyze the file at `path`. `filename` is the original upload name."""


def is_pdf(filename: str) -> bool:
    return filename.lower().endswith(".pdf")


def read_document_text(path: Path) -> str:
    # Non-PDF uploads are read as text; undecodable bytes become U+FFFD.
    return path.read_text(encoding="utf-8", errors="replace")
