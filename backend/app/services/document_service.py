# app/services/document_service.py
"""
document_service.py
- Purpose: Orchestrates "upload -> analyze -> respond" and "html -> download".
- Owns: validation, transient storage lifecycle, timing, error mapping.
- Design: Thick service; routers remain thin and easy to reason about.
"""

import logging
import time
from pathlib import Path
from typing import Iterable

from fastapi import UploadFile

from app.analysis.base import AnalysisBackend
from app.core import AppError, ErrorCode, ErrorReason
from app.core.errors import bad_request, internal_error
from app.core.request_context import set_context
from app.documents.render import RenderedDocument, build_download
from app.schemas.analysis import AnalysisResponse, DownloadRequest
from app.services.storage.temp_storage import TempUploadStorage
from app.validations.file_validators import ALLOWED_EXTENSIONS, validate_document_upload

logger = logging.getLogger("app.document_service")


class DocumentService:
    def __init__(
        self,
        backend: AnalysisBackend,
        storage: TempUploadStorage,
        allowed_extensions: Iterable[str] = ALLOWED_EXTENSIONS,
    ):
        self.backend = backend
        self.storage = storage
        self.allowed_extensions = frozenset(allowed_extensions)

    def analyze_upload(self, document: UploadFile | None) -> AnalysisResponse:
        # Rejections happen before anything touches disk or the backend.
        validate_document_upload(document, self.allowed_extensions)
        filename = document.filename
        set_context(document_name=filename)

        path: Path | None = None
        try:
            path = self.storage.save(document)

            logger.info("analysis.started", extra={"backend": self.backend.name})
            t0 = time.perf_counter()
            analysis = self.backend.analyze(path, filename)
            elapsed = round(time.perf_counter() - t0, 2)
            logger.info(
                "analysis.finished",
                extra={
                    "backend": self.backend.name,
                    "duration_s": elapsed,
                    "issues": len(analysis.issues),
                    "before_score": analysis.before_score,
                    "after_score": analysis.after_score,
                },
            )

            return AnalysisResponse.from_analysis(filename, analysis, processing_time=elapsed)
        except AppError:
            raise
        except Exception as e:
            logger.exception("analysis.unexpected_error")
            raise internal_error(ErrorReason.ANALYSIS_FAILED, code=ErrorCode.ANALYSIS_FAILED, details=str(e)) from e
        finally:
            if path is not None:
                self.storage.remove(path)

    def build_download(self, req: DownloadRequest) -> RenderedDocument:
        if not req.accessible_html:
            raise bad_request(ErrorReason.NO_CONTENT, code=ErrorCode.MISSING_CONTENT)

        try:
            rendered = build_download(req.accessible_html, req.format, req.filename)
        except Exception as e:
            logger.exception("download.failed", extra={"format": req.format})
            raise internal_error(ErrorReason.DOWNLOAD_FAILED, code=ErrorCode.DOWNLOAD_FAILED, details=str(e)) from e

        logger.info("download.built", extra={"format": req.format, "bytes": len(rendered.content)})
        return rendered
