from app.client.api_client import DocumentApiClient, DocumentApiError, DownloadedDocument
from app.client.narration import NarrationService, NullNarrationService
from app.client.upload_flow import FlowState, InvalidTransition, NarrationState, UploadFlow

__all__ = [
    "DocumentApiClient",
    "DocumentApiError",
    "DownloadedDocument",
    "FlowState",
    "InvalidTransition",
    "NarrationService",
    "NarrationState",
    "NullNarrationService",
    "UploadFlow",
]
