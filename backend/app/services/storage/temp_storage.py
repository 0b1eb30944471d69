"""
temp_storage.py
- Purpose: Transient on-disk storage for uploads while they are being analyzed.
- Owns: collision-resistant naming, size ceiling during the streaming write, deletion.
- Design: Infrastructure adapter; no business logic.
"""

import logging
import os
import random
import time
from pathlib import Path

from fastapi import UploadFile

from app.core import AppError, ErrorCode, ErrorReason
from app.validations.file_validators import file_extension

logger = logging.getLogger("app.storage.temp")

CHUNK_SIZE = 1024 * 1024


class TempUploadStorage:
    """
    Writes an UploadFile to `upload_dir` and removes it again.

    File names are `document-<epoch ms>-<random 9 digits><ext>`; no locking is
    needed because concurrent requests never pick the same name in practice.
    """

    def __init__(self, upload_dir: str | os.PathLike, max_bytes: int):
        self._dir = Path(upload_dir)
        self._max_bytes = max_bytes

    @property
    def upload_dir(self) -> Path:
        return self._dir

    def _build_name(self, filename: str | None) -> str:
        suffix = random.randint(0, 10**9 - 1)
        return f"document-{int(time.time() * 1000)}-{suffix:09d}{file_extension(filename)}"

    def save(self, file: UploadFile) -> Path:
        """Stream the upload to disk. Oversized uploads are rejected and leave nothing behind."""
        size = getattr(file, "size", None)
        if size is not None and size > self._max_bytes:
            raise self._too_large(size)

        try:
            self._dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise AppError(
                code=ErrorCode.STORAGE_ERROR,
                reason=ErrorReason.UPLOAD_FAILED.value,
                status_code=500,
                details=str(e),
            ) from e

        path = self._dir / self._build_name(file.filename)
        written = 0
        try:
            with path.open("wb") as out:
                while True:
                    chunk = file.file.read(CHUNK_SIZE)
                    if not chunk:
                        break
                    written += len(chunk)
                    if written > self._max_bytes:
                        raise self._too_large(written)
                    out.write(chunk)
        except AppError:
            self.remove(path)
            raise
        except OSError as e:
            self.remove(path)
            raise AppError(
                code=ErrorCode.STORAGE_ERROR,
                reason=ErrorReason.UPLOAD_FAILED.value,
                status_code=500,
                details=str(e),
            ) from e

        logger.info("upload.stored", extra={"path": str(path), "bytes": written})
        return path

    def remove(self, path: Path) -> None:
        """Delete a stored upload. Failures are logged, never raised."""
        try:
            Path(path).unlink(missing_ok=True)
        except OSError:
            logger.warning("upload.cleanup_failed", extra={"path": str(path)}, exc_info=True)

    def _too_large(self, size: int) -> AppError:
        return AppError(
            code=ErrorCode.FILE_TOO_LARGE,
            reason=ErrorReason.FILE_TOO_LARGE.value,
            status_code=400,
            details=f"limit={self._max_bytes} bytes, received>={size} bytes",
        )
