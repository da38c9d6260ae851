"""
Video Presentation Layer.

Contains HTTP controllers, request/response models, authentication and API
route definitions.
"""

from .auth import BearerTokenAuth
from .controllers import VideoController
from .schemas import VideoInfoResponse, VideoListResponse, ShareVideoResponse
from .routes import create_video_routes

__all__ = [
    "BearerTokenAuth",
    "VideoController",
    "VideoInfoResponse",
    "VideoListResponse",
    "ShareVideoResponse",
    "create_video_routes",
]
