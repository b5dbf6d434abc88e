"""Local Blob Store: writes listing images to disk and returns their public URL.

Invariants:
    - Paths are relative and owner-scoped ("{owner_id}/{name}.{ext}")
    - A path can never resolve outside the storage root
    - Empty, oversized, and non-image payloads raise UploadError before any write

Design Decisions:
    - Blocking file IO pushed to a worker thread (asyncio.to_thread) so uploads
      never stall the event loop
    - Object-storage backends implement the same BlobStore protocol
"""

import asyncio
import logging
from pathlib import Path

from lendshelf.core.errors import UploadError

logger = logging.getLogger(__name__)


class LocalBlobStore:
    """Filesystem-backed BlobStore."""

    def __init__(self, root_dir: str, public_base_url: str, max_bytes: int):
        self.root = Path(root_dir).resolve()
        self.public_base_url = public_base_url.rstrip("/")
        self.max_bytes = max_bytes

    async def upload(self, path: str, data: bytes, content_type: str) -> str:
        """Store `data` at `path` and return the URL it is served from."""
        if not data:
            raise UploadError("file is empty")
        if len(data) > self.max_bytes:
            raise UploadError(
                f"file exceeds {self.max_bytes} bytes",
            )
        if not (content_type or "").startswith("image/"):
            raise UploadError(f"unsupported content type '{content_type}'")

        target = self._resolve(path)
        try:
            await asyncio.to_thread(self._write, target, data)
        except OSError as e:
            logger.error(f"Blob write failed for {path}: {e}")
            raise UploadError("storage unavailable")
        logger.info(f"Stored blob {path} ({len(data)} bytes)")
        return f"{self.public_base_url}/{path}"

    def _resolve(self, path: str) -> Path:
        target = (self.root / path).resolve()
        if self.root not in target.parents:
            raise UploadError("invalid storage path")
        return target

    @staticmethod
    def _write(target: Path, data: bytes) -> None:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(data)
