import io
import re

import pytest
from fastapi import UploadFile

from app.core import AppError, ErrorCode
from app.services.storage.temp_storage import TempUploadStorage


def _upload(name: str, content: bytes) -> UploadFile:
    return UploadFile(file=io.BytesIO(content), filename=name)


def test_save_writes_bytes_under_generated_name(tmp_path):
    storage = TempUploadStorage(tmp_path / "uploads", max_bytes=1024)
    path = storage.save(_upload("Quarterly Report.PDF", b"%PDF-1.4"))

    assert path.read_bytes() == b"%PDF-1.4"
    assert path.parent == tmp_path / "uploads"
    assert re.fullmatch(r"document-\d+-\d{9}\.pdf", path.name)


def test_generated_names_do_not_collide(tmp_path):
    storage = TempUploadStorage(tmp_path, max_bytes=1024)
    paths = {storage.save(_upload("a.pdf", b"x")) for _ in range(50)}
    assert len(paths) == 50


def test_oversized_stream_is_rejected_and_removed(tmp_path):
    storage = TempUploadStorage(tmp_path, max_bytes=10)
    with pytest.raises(AppError) as ei:
        storage.save(_upload("big.pdf", b"x" * 11))

    assert ei.value.code == ErrorCode.FILE_TOO_LARGE
    assert ei.value.status_code == 400
    assert list(tmp_path.iterdir()) == []


def test_exactly_max_bytes_is_accepted(tmp_path):
    storage = TempUploadStorage(tmp_path, max_bytes=10)
    assert storage.save(_upload("ok.pdf", b"x" * 10)).stat().st_size == 10


def test_remove_is_idempotent(tmp_path):
    storage = TempUploadStorage(tmp_path, max_bytes=10)
    path = storage.save(_upload("a.pdf", b"x"))
    storage.remove(path)
    storage.remove(path)
    assert not path.exists()
