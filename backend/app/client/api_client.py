"""
api_client.py
- Purpose: HTTP client for the two document endpoints.
"""

import logging
import mimetypes
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import httpx

logger = logging.getLogger("app.client")

_FILENAME = re.compile(r'filename="([^"]+)"')


class DocumentApiError(Exception):
    def __init__(self, status_code: int, error: str, details: str | None = None):
        super().__init__(f"{status_code}: {error}" + (f" ({details})" if details else ""))
        self.status_code = status_code
        self.error = error
        self.details = details


@dataclass(frozen=True)
class DownloadedDocument:
    filename: str
    content: bytes
    content_type: str


class DocumentApiClient:
    def __init__(self, base_url: str = "http://localhost:8000", *, timeout: float = 300.0, client: httpx.Client | None = None):
        self._client = client or httpx.Client(base_url=base_url, timeout=timeout)

    def close(self) -> None:
        self._client.close()

    def analyze(self, path: Path) -> dict[str, Any]:
        path = Path(path)
        mime = mimetypes.guess_type(path.name)[0] or "application/octet-stream"
        with path.open("rb") as fh:
            resp = self._client.post("/api/analyze-document", files={"document": (path.name, fh, mime)})
        self._raise_for_error(resp)
        return resp.json()

    def download(self, accessible_html: str, fmt: str, filename: str) -> DownloadedDocument:
        resp = self._client.post(
            "/api/download-document",
            json={"accessibleHtml": accessible_html, "format": fmt, "filename": filename},
        )
        self._raise_for_error(resp)
        match = _FILENAME.search(resp.headers.get("content-disposition", ""))
        return DownloadedDocument(
            filename=match.group(1) if match else f"accessible-{filename}",
            content=resp.content,
            content_type=resp.headers.get("content-type", ""),
        )

    def _raise_for_error(self, resp: httpx.Response) -> None:
        if resp.is_success:
            return
        try:
            body = resp.json()
        except ValueError:
            body = {}
        error = body.get("error") if isinstance(body, dict) else None
        details = body.get("details") if isinstance(body, dict) else None
        logger.warning("client.request_failed", extra={"status_code": resp.status_code, "error": error})
        raise DocumentApiError(resp.status_code, error or resp.reason_phrase, details)
