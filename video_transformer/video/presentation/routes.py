"""
Video API Routes.

FastAPI route definitions for uploading, transforming, listing and sharing videos.
"""

from typing import Optional

from fastapi import APIRouter, Depends, File, Query, UploadFile

from .auth import BearerTokenAuth
from .controllers import VideoController
from .schemas import (
    MergeVideoRequest, ShareVideoRequest, ShareVideoResponse, SharedVideoResponse,
    TrimVideoRequest, VideoInfoResponse, VideoListResponse
)


def create_video_routes(video_controller: VideoController, auth: BearerTokenAuth) -> APIRouter:
    """Create video API routes with dependency injection"""

    router = APIRouter(prefix="/videos", tags=["videos"], dependencies=[Depends(auth)])

    @router.post("/upload", response_model=VideoInfoResponse, status_code=201)
    async def upload_video(
        file: UploadFile = File(..., description="Video file"),
        max_size: Optional[str] = Query(None, description="Maximum size, e.g. 100mb or 1gb (default 20mb)"),
        min_duration: Optional[int] = Query(None, description="Minimum duration in seconds (default 5)"),
        max_duration: Optional[int] = Query(None, description="Maximum duration in seconds (default 60)")
    ):
        """
        Upload a video with size and duration constraints.

        The file is rejected if it is larger than **max_size** or if its
        duration falls outside **min_duration**..**max_duration**.
        """
        return await video_controller.upload_video(file, max_size, min_duration, max_duration)

    @router.post("/trim", response_model=VideoInfoResponse, status_code=201)
    async def trim_video(request: TrimVideoRequest):
        """
        Trim a stored video into a new one.

        - **start**: defaults to 0
        - **end**: defaults to the video's duration
        """
        return await video_controller.trim_video(request)

    @router.post("/merge", response_model=VideoInfoResponse, status_code=201)
    async def merge_videos(request: MergeVideoRequest):
        """
        Merge two or more stored videos into a new one, in the given order.
        """
        return await video_controller.merge_videos(request)

    @router.get("", response_model=VideoListResponse)
    async def list_videos():
        """List all videos, most recent first."""
        return await video_controller.list_videos()

    @router.post("/share", response_model=ShareVideoResponse, status_code=201)
    async def share_video(request: ShareVideoRequest):
        """
        Generate a shared link for a stored video with an expiry time.

        - **expiry_in_seconds**: defaults to one day
        """
        return await video_controller.share_video(request)

    @router.get("/shared/{link_id}", response_model=SharedVideoResponse)
    async def get_shared_video(link_id: str):
        """Resolve a shared link to the video's address, unless it has expired."""
        return await video_controller.get_shared_video(link_id)

    return router
