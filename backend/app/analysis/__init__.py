from app.analysis.base import AnalysisBackend
from app.analysis.coercion import coerce_analysis, fallback_analysis
from app.analysis.factory import AnalysisBackendFactory

__all__ = ["AnalysisBackend", "AnalysisBackendFactory", "coerce_analysis", "fallback_analysis"]
