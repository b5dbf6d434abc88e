"""Local Blob Store: tests for upload guards and returned URLs."""

import pytest

from lendshelf.core.errors import UploadError
from lendshelf.infrastructure.blob_store import LocalBlobStore


@pytest.fixture
def store(tmp_path) -> LocalBlobStore:
    return LocalBlobStore(str(tmp_path), "/uploads/", max_bytes=8)


async def test_upload_writes_file_and_returns_url(store, tmp_path):
    url = await store.upload("owner-1/a.png", b"abc", "image/png")

    assert url == "/uploads/owner-1/a.png"
    assert (tmp_path / "owner-1" / "a.png").read_bytes() == b"abc"


@pytest.mark.parametrize("data,content_type", [
    (b"", "image/png"),
    (b"123456789", "image/png"),
    (b"abc", "application/pdf"),
    (b"abc", ""),
])
async def test_upload_rejects_bad_payloads(store, tmp_path, data, content_type):
    with pytest.raises(UploadError):
        await store.upload("owner-1/a.png", data, content_type)
    assert not (tmp_path / "owner-1").exists()


async def test_upload_rejects_path_escaping_root(store):
    with pytest.raises(UploadError) as exc:
        await store.upload("../outside.png", b"abc", "image/png")
    assert exc.value.http_status == 502
