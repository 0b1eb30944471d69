from app.analysis.base import AnalysisBackend
from app.analysis.gemini_backend import GeminiAnalysisBackend
from app.analysis.mock_backend import MockAnalysisBackend
from app.core.config import Settings
from app.llm.providers.gemini import GeminiProvider


class AnalysisBackendFactory:
    """Creates the configured analysis backend."""

    SUPPORTED = ("gemini", "mock")

    @classmethod
    def create(cls, settings: Settings) -> AnalysisBackend:
        backend = (settings.ANALYSIS_BACKEND or "").strip().lower()
        if backend == "mock":
            return MockAnalysisBackend()
        if backend == "gemini":
            return GeminiAnalysisBackend(provider=GeminiProvider(api_key=settings.GEMINI_API_KEY))
        raise ValueError(
            f"Unknown analysis backend '{settings.ANALYSIS_BACKEND}'. Choose from: {list(cls.SUPPORTED)}"
        )
