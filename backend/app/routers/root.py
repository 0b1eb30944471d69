from fastapi import APIRouter, Depends

from app.api.deps import get_settings
from app.core.config import Settings

router = APIRouter(prefix="/api", tags=["Root"])


@router.get("/")
def root(cfg: Settings = Depends(get_settings)):
    """Service name and the routes a client needs."""
    return {
        "service": cfg.app_name,
        "analysis_backend": cfg.ANALYSIS_BACKEND.strip().lower(),
        "endpoints": {
            "analyze": "/api/analyze-document",
            "download": "/api/download-document",
            "health": "/api/health",
        },
        "docs": "/docs",
    }
