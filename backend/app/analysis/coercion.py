"""
coercion.py
- Purpose: Turn whatever JSON the provider returned into a complete DocumentAnalysis.
- Design: One table of field defaults (FIELD_DEFAULTS); everything else is a pure function
  so it can be tested without any network call.

Rules:
- A field that is missing, null, or of the wrong type gets its default.
- An explicit 0 score is a real score and is kept.
- Scores are rounded to int and clamped to [0, 100]. after >= before is NOT enforced.
- Issue/fix items that are not objects are dropped; unknown severities become "medium".
"""

from __future__ import annotations

import math
from typing import Any, Mapping

from app.schemas.analysis import DocumentAnalysis, Fix, Issue

ORIGINAL_TEXT_PLACEHOLDER = "Document content could not be extracted"
ACCESSIBLE_HTML_PLACEHOLDER = "<p>Content could not be processed</p>"

FIELD_DEFAULTS: dict[str, Any] = {
    "originalText": ORIGINAL_TEXT_PLACEHOLDER,
    "accessibleHtml": ACCESSIBLE_HTML_PLACEHOLDER,
    "issues": [],
    "fixes": [],
    "beforeScore": 25,
    "afterScore": 95,
}

SEVERITIES = ("high", "medium", "low")
DEFAULT_SEVERITY = "medium"

FALLBACK_HTML = """
<article>
  <header>
    <h1>Document Analysis Failed</h1>
  </header>
  <main>
    <p>We encountered an issue analyzing your document. This could be due to:</p>
    <ul>
      <li>Unsupported document format</li>
      <li>Corrupted file</li>
      <li>API service temporarily unavailable</li>
    </ul>
    <p>Please try uploading your document again or contact support if the issue persists.</p>
  </main>
</article>
""".strip()


def coerce_analysis(raw: Mapping[str, Any] | None, *, original_text_default: str | None = None) -> DocumentAnalysis:
    """
    Partial decode with field-level defaults.

    `original_text_default` overrides the table entry for originalText; the text
    branch passes the document itself so the caller still sees the content.
    """
    data: Mapping[str, Any] = raw if isinstance(raw, Mapping) else {}
    text_default = original_text_default if original_text_default is not None else FIELD_DEFAULTS["originalText"]

    return DocumentAnalysis(
        original_text=_coerce_text(data.get("originalText"), text_default),
        accessible_html=_coerce_text(data.get("accessibleHtml"), FIELD_DEFAULTS["accessibleHtml"]),
        issues=_coerce_issues(data.get("issues")),
        fixes=_coerce_fixes(data.get("fixes")),
        before_score=_coerce_score(data.get("beforeScore"), FIELD_DEFAULTS["beforeScore"]),
        after_score=_coerce_score(data.get("afterScore"), FIELD_DEFAULTS["afterScore"]),
    )


def fallback_analysis() -> DocumentAnalysis:
    """The fixed zero-score result used whenever the real analysis path fails."""
    return DocumentAnalysis(
        original_text="Document analysis failed - content could not be extracted",
        accessible_html=FALLBACK_HTML,
        issues=[
            Issue(
                type="Analysis Error",
                severity="high",
                description="Document could not be analyzed due to technical issues",
                location="Document processing",
            )
        ],
        fixes=[],
        before_score=0,
        after_score=0,
    )


def _coerce_text(value: Any, default: str) -> str:
    if isinstance(value, str) and value.strip():
        return value
    return default


def _coerce_score(value: Any, default: int) -> int:
    if isinstance(value, bool) or value is None:
        return default
    if isinstance(value, str):
        text = value.strip()
        try:
            value = int(text)
        except ValueError:
            try:
                value = float(text)
            except ValueError:
                return default
    # ints are clamped as-is; arbitrarily large JSON integers do not fit in a float
    if isinstance(value, int):
        return max(0, min(100, value))
    if not isinstance(value, float) or math.isnan(value):
        return default
    if math.isinf(value):
        return 100 if value > 0 else 0
    return max(0, min(100, int(round(value))))


def _coerce_severity(value: Any) -> str:
    if isinstance(value, str) and value.strip().lower() in SEVERITIES:
        return value.strip().lower()
    return DEFAULT_SEVERITY


def _coerce_issues(value: Any) -> list[Issue]:
    if not isinstance(value, list):
        return list(FIELD_DEFAULTS["issues"])

    issues: list[Issue] = []
    for item in value:
        if not isinstance(item, Mapping):
            continue
        location = item.get("location")
        issues.append(
            Issue(
                type=_coerce_text(item.get("type"), "Unknown"),
                severity=_coerce_severity(item.get("severity")),
                description=item.get("description") if isinstance(item.get("description"), str) else "",
                location=location if isinstance(location, str) and location.strip() else None,
            )
        )
    return issues


def _coerce_fixes(value: Any) -> list[Fix]:
    if not isinstance(value, list):
        return list(FIELD_DEFAULTS["fixes"])

    fixes: list[Fix] = []
    for item in value:
        if not isinstance(item, Mapping):
            continue
        fixes.append(
            Fix(
                type=_coerce_text(item.get("type"), "Unknown"),
                description=item.get("description") if isinstance(item.get("description"), str) else "",
            )
        )
    return fixes
