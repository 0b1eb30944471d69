"""
file_validators.py
- Purpose: Centralized validation for document uploads (presence + extension).
- Design: Raise AppError with stable error codes for UI + logs.
"""

import os
from typing import Iterable

from fastapi import UploadFile

from app.core import AppError, ErrorCode, ErrorReason

ALLOWED_EXTENSIONS = frozenset({".pdf", ".doc", ".docx"})


def file_extension(filename: str | None) -> str:
    return os.path.splitext(os.path.basename(filename or ""))[1].lower()


def validate_document_upload(
    document: UploadFile | None,
    allowed_extensions: Iterable[str] = ALLOWED_EXTENSIONS,
) -> None:
    # Basic presence check
    if document is None or not document.filename:
        raise AppError(code=ErrorCode.FILE_MISSING, reason=ErrorReason.NO_FILE.value, status_code=400)

    # Extension check (case-insensitive); content-type is not trusted.
    ext = file_extension(document.filename)
    if ext not in set(allowed_extensions):
        raise AppError(
            code=ErrorCode.INVALID_FILE_TYPE,
            reason=ErrorReason.INVALID_FILE_TYPE.value,
            status_code=400,
            details=f"extension={ext or '(none)'}",
        )

    # Note: size enforcement happens during the streaming write in TempUploadStorage
    # because UploadFile doesn't always expose size.
