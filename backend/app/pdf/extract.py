"""app/pdf/extract.py

Deterministic PDF -> text extraction (PyMuPDF).
Used by the mock analysis backend; the Gemini backend sends the PDF bytes as-is.
"""

from pathlib import Path

import fitz  # PyMuPDF

from app.core import AppError, ErrorCode, ErrorReason
from app.pdf.types import ExtractedPDF


def extract_text_from_bytes(pdf_bytes: bytes) -> ExtractedPDF:
    if not pdf_bytes:
        raise AppError(
            code=ErrorCode.VALIDATION_ERROR,
            reason=ErrorReason.INVALID_INPUT.value,
            message="Empty PDF bytes",
            status_code=400,
        )

    texts: list[str] = []
    pages_with_text = 0
    with fitz.open(stream=pdf_bytes, filetype="pdf") as doc:
        page_count = doc.page_count
        for page in doc:
            t = page.get_text("text") or ""
            if t.strip():
                pages_with_text += 1
            texts.append(t.strip())

    return ExtractedPDF(
        text="\n\n".join(t for t in texts if t),
        page_count=page_count,
        pages_with_text=pages_with_text,
    )


def extract_text_from_file(path: Path) -> ExtractedPDF:
    return extract_text_from_bytes(Path(path).read_bytes())
