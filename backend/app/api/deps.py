from fastapi import Depends, Request

from app.analysis.base import AnalysisBackend
from app.analysis.factory import AnalysisBackendFactory
from app.core.config import Settings
from app.services.document_service import DocumentService
from app.services.storage.temp_storage import TempUploadStorage


def get_settings(request: Request) -> Settings:
    """Settings the running app was built with (see create_app)."""
    return request.app.state.settings


def get_analysis_backend(request: Request, cfg: Settings = Depends(get_settings)) -> AnalysisBackend:
    """
    Provides the analysis backend selected by the app's settings.
    The instance built by create_app is reused; overridden settings get their own backend.
    """
    if cfg is request.app.state.settings:
        return request.app.state.analysis_backend
    return AnalysisBackendFactory.create(cfg)


def get_temp_storage(cfg: Settings = Depends(get_settings)) -> TempUploadStorage:
    return TempUploadStorage(upload_dir=cfg.UPLOAD_DIR, max_bytes=cfg.MAX_UPLOAD_BYTES)


def get_document_service(
    backend: AnalysisBackend = Depends(get_analysis_backend),
    storage: TempUploadStorage = Depends(get_temp_storage),
    cfg: Settings = Depends(get_settings),
) -> DocumentService:
    """
    Service dependency for the document flows.
    Injects the analysis backend and the transient upload storage.
    """
    return DocumentService(backend=backend, storage=storage, allowed_extensions=cfg.allowed_extensions)
