"""
Video Application Layer.

Contains use cases and application services that orchestrate domain logic
and coordinate between domain and infrastructure layers.
"""

from .media_probe import MediaProbe
from .upload_validator import UploadValidator
from .trim_engine import TrimEngine
from .merge_engine import MergeEngine
from .link_issuer import LinkIssuer
from .video_service import VideoService

__all__ = [
    "MediaProbe",
    "UploadValidator",
    "TrimEngine",
    "MergeEngine",
    "LinkIssuer",
    "VideoService",
]
