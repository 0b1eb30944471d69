from fastapi import APIRouter, Depends

from app.analysis.base import AnalysisBackend
from app.api.deps import get_analysis_backend

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health")
def health(backend: AnalysisBackend = Depends(get_analysis_backend)):
    return {"status": "ok", "analysis_backend": backend.name}
