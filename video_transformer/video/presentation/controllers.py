"""
Video HTTP Controllers.

Handle HTTP requests and responses for video operations.
"""

import logging
from typing import Optional

from fastapi import HTTPException, UploadFile

from ..application.link_issuer import LinkIssuer
from ..application.merge_engine import MergeEngine
from ..application.trim_engine import TrimEngine
from ..application.video_service import VideoService
from ..domain.models import Artifact, UploadPolicy
from ...core.config import UploadConfig
from ...core.errors import InvalidRequest, VideoTransformerError
from .schemas import (
    MergeVideoRequest, ShareVideoRequest, ShareVideoResponse, SharedVideoResponse,
    TrimVideoRequest, VideoInfoResponse, VideoListResponse
)


def to_http_exception(error: VideoTransformerError) -> HTTPException:
    """Map a core error to its HTTP status with a stable code and message"""
    return HTTPException(status_code=error.status_code, detail=error.to_detail())


class VideoController:
    """Controller for video operations"""

    def __init__(
        self,
        video_service: VideoService,
        trim_engine: TrimEngine,
        merge_engine: MergeEngine,
        link_issuer: LinkIssuer,
        upload_defaults: UploadConfig,
        base_url: str
    ):
        self.video_service = video_service
        self.trim_engine = trim_engine
        self.merge_engine = merge_engine
        self.link_issuer = link_issuer
        self.upload_defaults = upload_defaults
        self.base_url = base_url.rstrip("/")
        self.logger = logging.getLogger(__name__)

    async def upload_video(
        self,
        file: UploadFile,
        max_size: Optional[str] = None,
        min_duration: Optional[int] = None,
        max_duration: Optional[int] = None
    ) -> VideoInfoResponse:
        """Upload a video under size and duration constraints"""
        policy = UploadPolicy(
            max_size_text=max_size if max_size is not None else self.upload_defaults.max_size,
            min_duration_seconds=min_duration if min_duration is not None else self.upload_defaults.min_duration_seconds,
            max_duration_seconds=max_duration if max_duration is not None else self.upload_defaults.max_duration_seconds
        )

        try:
            artifact = await self.video_service.upload_video(file.filename, file, policy)
        except VideoTransformerError as e:
            raise to_http_exception(e)
        finally:
            await file.close()

        return self._convert_to_response(artifact)

    async def trim_video(self, request: TrimVideoRequest) -> VideoInfoResponse:
        """Trim a stored video"""
        try:
            if request.start is None and request.end is None:
                raise InvalidRequest("At least one of start or end is required.")
            artifact = await self.trim_engine.trim(request.video_id, request.start, request.end)
        except VideoTransformerError as e:
            raise to_http_exception(e)

        return self._convert_to_response(artifact)

    async def merge_videos(self, request: MergeVideoRequest) -> VideoInfoResponse:
        """Merge stored videos in the requested order"""
        try:
            artifact = await self.merge_engine.merge(request.video_ids)
        except VideoTransformerError as e:
            raise to_http_exception(e)

        return self._convert_to_response(artifact)

    async def list_videos(self) -> VideoListResponse:
        """List all videos, newest first"""
        videos = await self.video_service.get_all_videos()
        video_responses = [self._convert_to_response(video) for video in videos]
        return VideoListResponse(videos=video_responses, total_count=len(video_responses))

    async def share_video(self, request: ShareVideoRequest) -> ShareVideoResponse:
        """Issue an expiring share link"""
        try:
            issued = await self.link_issuer.issue(request.video_id, request.expiry_in_seconds)
        except VideoTransformerError as e:
            raise to_http_exception(e)

        return ShareVideoResponse(
            link_id=issued.link_id,
            link=f"{self.base_url}/videos/shared/{issued.link_id}",
            expiry=issued.expires_at
        )

    async def get_shared_video(self, link_id: str) -> SharedVideoResponse:
        """Resolve a share link to the video's public address"""
        try:
            locator = await self.link_issuer.resolve(link_id)
        except VideoTransformerError as e:
            raise to_http_exception(e)

        return SharedVideoResponse(link=f"{self.base_url}/{locator}")

    def _convert_to_response(self, artifact: Artifact) -> VideoInfoResponse:
        """Convert domain model to response model"""
        return VideoInfoResponse(
            id=artifact.artifact_id,
            name=artifact.name,
            size_bytes=artifact.size_bytes,
            duration_seconds=artifact.duration_seconds,
            url=artifact.locator,
            created_at=artifact.created_at
        )
