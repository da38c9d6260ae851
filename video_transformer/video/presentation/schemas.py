"""
Video API Request/Response Schemas.

Pydantic models for API serialization and validation.
"""

from typing import List, Optional
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field


class VideoInfoResponse(BaseModel):
    """Stored video response model"""
    id: str = Field(..., description="Unique video identifier")
    name: str = Field(..., description="Display name")
    size_bytes: int = Field(..., description="File size in bytes")
    duration_seconds: float = Field(..., description="Video duration in seconds")
    url: str = Field(..., description="Storage locator, relative to the server root")
    created_at: datetime = Field(..., description="Creation timestamp")

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "id": "3f1c9e0b2d4a4e5f8a7b6c5d4e3f2a1b",
            "name": "holiday.mp4",
            "size_bytes": 5242880,
            "duration_seconds": 12.5,
            "url": "uploads/9b2f4c1e-8d3a-4f6b-a1c2-7e5d9f0b3a4c.mp4",
            "created_at": "2026-10-19T14:30:22+00:00"
        }
    })


class VideoListResponse(BaseModel):
    """Video list response"""
    videos: List[VideoInfoResponse] = Field(..., description="Videos, newest first")
    total_count: int = Field(..., description="Total number of videos")


class TrimVideoRequest(BaseModel):
    """Trim request; at least one of start or end is required"""
    video_id: str = Field(..., description="ID of the video to be trimmed")
    start: Optional[float] = Field(None, description="Start point in seconds (default 0)")
    end: Optional[float] = Field(None, description="End point in seconds (default: video duration)")

    model_config = ConfigDict(json_schema_extra={
        "example": {"video_id": "3f1c9e0b2d4a4e5f8a7b6c5d4e3f2a1b", "start": 2.0, "end": 7.5}
    })


class MergeVideoRequest(BaseModel):
    """Merge request; videos are joined in the given order"""
    video_ids: List[str] = Field(..., description="IDs of the videos to be merged, in order")

    model_config = ConfigDict(json_schema_extra={
        "example": {"video_ids": ["3f1c9e0b2d4a4e5f8a7b6c5d4e3f2a1b", "7a6b5c4d3e2f1a0b9c8d7e6f5a4b3c2d"]}
    })


class ShareVideoRequest(BaseModel):
    """Share link request"""
    video_id: str = Field(..., description="ID of the video to share")
    expiry_in_seconds: Optional[int] = Field(None, description="Seconds until the link expires (default 86400)")


class ShareVideoResponse(BaseModel):
    """Issued share link"""
    link_id: str = Field(..., description="Share link identifier")
    link: str = Field(..., description="Address that resolves the share link")
    expiry: datetime = Field(..., description="Instant after which the link no longer resolves")


class SharedVideoResponse(BaseModel):
    """Resolved share link"""
    link: str = Field(..., description="Public address of the video file")
