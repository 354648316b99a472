from pathlib import Path

import pytest
from fastapi import HTTPException

from wholesale.core.config import get_settings
from wholesale.core.storage_utils import LocalStorage
from wholesale.services.upload_service import UploadService

PNG = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32


def test_upload_returns_public_url(client, buyer):
    resp = client.post(
        "/uploads",
        files={"file": ("logo.png", PNG, "image/png")},
        headers=buyer["headers"],
    )
    assert resp.status_code == 201
    url = resp.json()["url"]
    assert url.startswith("http://testserver/uploads/files/file-")
    assert url.endswith(".png")

    # served back by the local backend
    path = url[len("http://testserver"):]
    assert client.get(path).content == PNG


def test_upload_requires_auth(client):
    resp = client.post("/uploads", files={"file": ("logo.png", PNG, "image/png")})
    assert resp.status_code == 401


def test_upload_rejects_type(client, buyer):
    resp = client.post(
        "/uploads",
        files={"file": ("run.sh", b"echo hi", "text/x-shellscript")},
        headers=buyer["headers"],
    )
    assert resp.status_code == 400


def test_upload_rejects_empty_file(client, buyer):
    resp = client.post(
        "/uploads",
        files={"file": ("logo.png", b"", "image/png")},
        headers=buyer["headers"],
    )
    assert resp.status_code == 400


def test_size_limit(tmp_path):
    service = UploadService(LocalStorage(tmp_path, "http://cdn.test"), max_bytes=10)

    with pytest.raises(HTTPException) as exc_info:
        service.upload("big.pdf", "application/pdf", b"x" * 11)
    assert exc_info.value.status_code == 413

    url = service.upload("ok.pdf", "application/pdf", b"x" * 10)
    stored = Path(tmp_path) / url[len("http://cdn.test/uploads/"):]
    assert stored.read_bytes() == b"x" * 10


def test_local_storage_writes_under_root_and_serves_from_uploads(tmp_path):
    storage = LocalStorage(tmp_path, get_settings().BACKEND_URL + "/")
    url = storage.upload("files/a.png", PNG)

    assert url == "http://testserver/uploads/files/a.png"
    assert (tmp_path / "files" / "a.png").read_bytes() == PNG
