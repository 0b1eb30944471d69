"""
documents.py
- Purpose: API routes for analyzing uploaded documents and downloading accessible versions.
- Design: Keep router thin. Delegate business logic to services.
"""

from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.responses import Response

from app.api.deps import get_document_service
from app.documents.render import content_disposition
from app.schemas.analysis import AnalysisResponse, DownloadRequest, ErrorResponse
from app.services.document_service import DocumentService

router = APIRouter(prefix="/api", tags=["Documents"])

_ERRORS = {400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}


@router.post(
    "/analyze-document",
    response_model=AnalysisResponse,
    response_model_exclude_none=True,
    responses=_ERRORS,
)
def analyze_document(
    document: UploadFile | None = File(None),
    svc: DocumentService = Depends(get_document_service),
):
    return svc.analyze_upload(document)


@router.post("/download-document", responses=_ERRORS)
def download_document(
    req: DownloadRequest,
    svc: DocumentService = Depends(get_document_service),
):
    rendered = svc.build_download(req)
    return Response(
        content=rendered.content,
        media_type=rendered.media_type,
        headers={"Content-Disposition": content_disposition(rendered.filename)},
    )
