"""
Video Application Service.

Orchestrates the upload and listing use cases.
"""

import logging
import uuid
from pathlib import Path
from typing import List

import aiofiles

from .outputs import discard_file
from .upload_validator import UploadValidator
from ..domain.interfaces import ArtifactCatalog
from ..domain.models import Artifact, UploadPolicy
from ..domain.sizes import parse_size
from ...core.errors import SizeExceeded, VideoTransformerError

UPLOAD_CHUNK_SIZE = 1024 * 1024  # 1MB


class VideoService:
    """Application service for video management"""

    def __init__(
        self,
        catalog: ArtifactCatalog,
        upload_validator: UploadValidator,
        uploads_path: Path
    ):
        self.catalog = catalog
        self.upload_validator = upload_validator
        self.uploads_path = Path(uploads_path)
        self.logger = logging.getLogger(__name__)

    async def upload_video(self, original_name: str, stream, policy: UploadPolicy) -> Artifact:
        """
        Store an incoming file, validate it and register it.

        `stream` is anything with an awaitable `read(size)`, such as an
        UploadFile. A file that fails validation is removed again; the catalog
        only ever sees accepted uploads.
        """
        # A malformed policy is rejected before anything touches the disk
        max_bytes = parse_size(policy.max_size_text)

        display_name = Path(original_name or "upload").name
        target_path = self.uploads_path / f"{uuid.uuid4()}{Path(display_name).suffix.lower()}"

        try:
            file_size = await self._store_upload(stream, target_path, max_bytes)
            duration = await self.upload_validator.validate(file_size, target_path, policy)
            artifact = await self.catalog.create(
                name=display_name,
                size_bytes=file_size,
                duration_seconds=duration,
                locator=self.catalog.to_locator(target_path)
            )
        except (VideoTransformerError, OSError):
            await discard_file(target_path)
            raise

        self.logger.info(f"Uploaded {display_name} as {artifact.artifact_id} ({file_size} bytes, {duration:.2f}s)")
        return artifact

    async def get_all_videos(self) -> List[Artifact]:
        """All videos, newest first"""
        return await self.catalog.list_ordered()

    async def _store_upload(self, stream, target_path: Path, max_bytes: int) -> int:
        """Copy the stream to disk and return the byte count, stopping once it passes max_bytes"""
        target_path.parent.mkdir(parents=True, exist_ok=True)
        file_size = 0

        async with aiofiles.open(target_path, "wb") as f:
            while True:
                chunk = await stream.read(UPLOAD_CHUNK_SIZE)
                if not chunk:
                    break
                file_size += len(chunk)
                if file_size > max_bytes:
                    self.logger.info(f"Stopped reading {target_path.name} after {file_size} bytes, limit is {max_bytes}")
                    raise SizeExceeded(file_size, max_bytes)
                await f.write(chunk)

        return file_size
