"""
errors.py
- Purpose: AppError used across services/validators for consistent errors.
- Pattern: raise AppError(...) in service/validator, handler converts to JSON response.
"""

from dataclasses import dataclass
from typing import Any

from fastapi import status as http_status
from app.core.error_codes import ErrorCode
from app.core.error_reasons import ErrorReason


@dataclass
class AppError(Exception):
    code: ErrorCode
    reason: str
    status_code: int = http_status.HTTP_400_BAD_REQUEST
    details: str | None = None
    message: str | None = None  # Optional human-readable message

    def __post_init__(self) -> None:
        super().__init__(self.message or self.reason)

    def to_dict(self) -> dict[str, Any]:
        # Wire shape the upload page reads: top-level "error" string + optional "details".
        payload: dict[str, Any] = {
            "error": self.message if self.message else self.reason,
            "code": self.code.value if isinstance(self.code, ErrorCode) else str(self.code),
        }
        if self.details:
            payload["details"] = self.details
        return payload


# Convenience constructors (keeps services cleaner)
def bad_request(reason: str = ErrorReason.INVALID_INPUT, *, code: ErrorCode = ErrorCode.VALIDATION_ERROR, details: str | None = None) -> AppError:
    return AppError(code=code, reason=_text(reason), status_code=http_status.HTTP_400_BAD_REQUEST, details=details)


def internal_error(reason: str = ErrorReason.INTERNAL_ERROR, *, code: ErrorCode = ErrorCode.INTERNAL_ERROR, details: str | None = None) -> AppError:
    return AppError(code=code, reason=_text(reason), status_code=http_status.HTTP_500_INTERNAL_SERVER_ERROR, details=details)


def _text(reason: str) -> str:
    return reason.value if isinstance(reason, ErrorReason) else str(reason)
