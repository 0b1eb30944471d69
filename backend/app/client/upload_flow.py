"""
upload_flow.py
- Purpose: State machine behind the upload page (drop zone -> spinner -> results).
- Owns: upload/result state, narration sub-state, download format selection.
- Design: Transitions only on caller action or endpoint response; no timers.
  Narration goes through an injected NarrationService, never a global engine.
"""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Any, Optional

from app.client.api_client import DocumentApiClient, DocumentApiError, DownloadedDocument
from app.client.narration import NarrationService, NullNarrationService
from app.documents.render import DOWNLOAD_FORMATS

logger = logging.getLogger("app.client.flow")


class FlowState(str, Enum):
    IDLE = "IDLE"
    UPLOADING = "UPLOADING"
    RESULTS = "RESULTS"


class NarrationState(str, Enum):
    STOPPED = "STOPPED"
    PLAYING = "PLAYING"
    PAUSED = "PAUSED"


class InvalidTransition(Exception):
    pass


class UploadFlow:
    def __init__(self, api: DocumentApiClient, narration: NarrationService | None = None):
        self.api = api
        self.narration = narration or NullNarrationService()

        self.state = FlowState.IDLE
        self.narration_state = NarrationState.STOPPED
        self.download_format = "pdf"
        self.results: Optional[dict[str, Any]] = None
        self.last_error: Optional[DocumentApiError] = None

    # ---- upload ----

    def upload(self, path: Path) -> dict[str, Any]:
        """IDLE -> UPLOADING -> RESULTS, or back to IDLE when the endpoint rejects the file."""
        if self.state is not FlowState.IDLE:
            raise InvalidTransition(f"cannot upload while {self.state.value}")

        self.state = FlowState.UPLOADING
        self.last_error = None
        try:
            results = self.api.analyze(Path(path))
        except DocumentApiError as e:
            self.last_error = e
            self.state = FlowState.IDLE
            raise
        except Exception:
            self.state = FlowState.IDLE
            raise

        self.results = results
        self.state = FlowState.RESULTS
        return results

    def reset(self) -> None:
        """Upload another: drop results and return to the drop zone."""
        self.stop_narration()
        self.results = None
        self.last_error = None
        self.state = FlowState.IDLE

    # ---- narration ----

    def narration_script(self) -> str:
        r = self._require_results()
        score = r.get("score") or {}
        issues = r.get("issues") or []
        fixes = r.get("fixes") or []
        lines = [
            f"Accessibility summary for {r.get('filename', 'your document')}.",
            f"The score improved from {score.get('before', 0)} to {score.get('after', 0)} percent.",
            f"We found {len(issues)} issue{'s' if len(issues) != 1 else ''}"
            f" and applied {len(fixes)} fix{'es' if len(fixes) != 1 else ''}.",
        ]
        lines += [f"{i.get('severity', '')} severity: {i.get('type', '')}. {i.get('description', '')}" for i in issues]
        return " ".join(line.strip() for line in lines if line.strip())

    def toggle_narration(self) -> NarrationState:
        """STOPPED -> PLAYING, PLAYING -> PAUSED, PAUSED -> PLAYING."""
        self._require_results()
        if self.narration_state is NarrationState.STOPPED:
            self.narration_state = NarrationState.PLAYING
            self.narration.start(self.narration_script(), self._on_narration_done)
        elif self.narration_state is NarrationState.PLAYING:
            self.narration.pause()
            self.narration_state = NarrationState.PAUSED
        else:
            self.narration.resume()
            self.narration_state = NarrationState.PLAYING
        return self.narration_state

    def stop_narration(self) -> None:
        if self.narration_state is not NarrationState.STOPPED:
            self.narration.stop()
        self.narration_state = NarrationState.STOPPED

    def _on_narration_done(self) -> None:
        self.narration_state = NarrationState.STOPPED

    # ---- download ----

    def select_format(self, fmt: str) -> None:
        fmt = fmt.lower()
        if fmt not in DOWNLOAD_FORMATS:
            raise ValueError(f"Unknown download format '{fmt}'. Choose from: {list(DOWNLOAD_FORMATS)}")
        self.download_format = fmt

    def download(self, dest_dir: Path | None = None) -> DownloadedDocument:
        r = self._require_results()
        doc = self.api.download(r.get("accessibleHtml", ""), self.download_format, r.get("filename", "document"))
        if dest_dir is not None:
            target = Path(dest_dir) / doc.filename
            target.write_bytes(doc.content)
            logger.info("client.download_saved", extra={"path": str(target), "bytes": len(doc.content)})
        return doc

    def _require_results(self) -> dict[str, Any]:
        if self.state is not FlowState.RESULTS or self.results is None:
            raise InvalidTransition(f"no results while {self.state.value}")
        return self.results
