"""
error_reasons.py
- Purpose: Human-friendly "reason" strings.
- Keep these stable; the upload page shows them as-is.
"""

from enum import Enum


class ErrorReason(str, Enum):

    INVALID_INPUT = "Invalid input"
    NO_FILE = "No file uploaded"
    INVALID_FILE_TYPE = "Only PDF, DOC, and DOCX files are allowed"
    FILE_TOO_LARGE = "File too large"
    UPLOAD_FAILED = "Failed to store uploaded file"

    ANALYSIS_FAILED = "Failed to analyze document"
    NO_CONTENT = "No document content provided"
    DOWNLOAD_FAILED = "Failed to generate download"

    INTERNAL_ERROR = "Internal server error"
