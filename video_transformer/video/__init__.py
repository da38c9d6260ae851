"""
Video Module for the Video Transformer.

This module provides upload validation, trimming, merging and share links
following clean architecture principles.
"""

from .domain.models import Artifact, ShareLink, UploadPolicy
from .application.video_service import VideoService
from .integration import VideoModule, create_video_module

__all__ = ["Artifact", "ShareLink", "UploadPolicy", "VideoService", "VideoModule", "create_video_module"]
