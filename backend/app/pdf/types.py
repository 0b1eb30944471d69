"""app/pdf/types.py

Lightweight dataclass for PDF extraction output.
"""


from dataclasses import dataclass


@dataclass(frozen=True)
class ExtractedPDF:
    text: str
    page_count: int
    pages_with_text: int
    strategy: str = "pymupdf"
