"""
analysis.py (schemas)
- Purpose: Wire DTOs for document analysis and download.
- Design: snake_case in Python, camelCase on the wire (the upload page reads camelCase).
"""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

Severity = Literal["high", "medium", "low"]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Issue(CamelModel):
    type: str
    severity: Severity
    description: str
    location: Optional[str] = None


class Fix(CamelModel):
    type: str
    description: str


class DocumentAnalysis(CamelModel):
    """
    Normalized result of one analysis. Every field is always present;
    see app.analysis.coercion for the defaults applied to provider output.
    """
    original_text: str
    accessible_html: str
    issues: list[Issue] = Field(default_factory=list)
    fixes: list[Fix] = Field(default_factory=list)
    before_score: int
    after_score: int


class ScorePair(CamelModel):
    before: int
    after: int


class AnalysisResponse(CamelModel):
    """
    Response of POST /api/analyze-document.
    processing_time is the measured wall-clock duration of the analysis, in seconds.
    """
    filename: str
    score: ScorePair
    processing_time: float
    issues: list[Issue]
    fixes: list[Fix]
    accessible_html: str
    original_text: str

    @classmethod
    def from_analysis(cls, filename: str, analysis: DocumentAnalysis, processing_time: float) -> "AnalysisResponse":
        return cls(
            filename=filename,
            score=ScorePair(before=analysis.before_score, after=analysis.after_score),
            processing_time=processing_time,
            issues=analysis.issues,
            fixes=analysis.fixes,
            accessible_html=analysis.accessible_html,
            original_text=analysis.original_text,
        )


class DownloadRequest(CamelModel):
    accessible_html: Optional[str] = None
    format: Optional[str] = None
    filename: Optional[str] = None


class ErrorResponse(BaseModel):
    error: str
    code: str
    details: Optional[str] = None
