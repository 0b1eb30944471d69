# app/core/error_codes.py
from enum import Enum

class ErrorCode(str, Enum):
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"

    # Upload
    FILE_MISSING = "FILE_MISSING"
    INVALID_FILE_TYPE = "INVALID_FILE_TYPE"
    FILE_TOO_LARGE = "FILE_TOO_LARGE"

    # Analysis / download
    ANALYSIS_FAILED = "ANALYSIS_FAILED"
    MISSING_CONTENT = "MISSING_CONTENT"
    DOWNLOAD_FAILED = "DOWNLOAD_FAILED"

    # Temp storage
    STORAGE_ERROR = "STORAGE_ERROR"
