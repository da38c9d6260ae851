"""
Video Module Integration.

Composition root for the video module: builds the infrastructure from
configuration and wires it into the application services and controllers.
"""

import logging
from pathlib import Path
from typing import Optional

from ..core.config import Config
from ..core.timezone_utils import TimezoneManager

# Domain interfaces
from .domain.interfaces import ArtifactCatalog, MediaProcessor, ShareLinkRepository

# Infrastructure implementations
from .infrastructure.media import FFmpegMediaProcessor
from .infrastructure.repositories import FileIndexStore, FileSystemArtifactCatalog, FileSystemShareLinkRepository

# Application services
from .application.link_issuer import LinkIssuer
from .application.media_probe import MediaProbe
from .application.merge_engine import MergeEngine
from .application.trim_engine import TrimEngine
from .application.upload_validator import UploadValidator
from .application.video_service import VideoService

# Presentation layer
from .presentation.auth import BearerTokenAuth
from .presentation.controllers import VideoController
from .presentation.routes import create_video_routes


class VideoModule:
    """
    Main video module that provides dependency injection and service composition.

    Collaborators can be passed in to replace the defaults built from
    configuration, which is how tests swap the FFmpeg processor for a fake.
    """

    def __init__(
        self,
        config: Config,
        clock: Optional[TimezoneManager] = None,
        media_processor: Optional[MediaProcessor] = None
    ):
        self.config = config
        self.clock = clock or TimezoneManager(config.system.timezone)
        self.logger = logging.getLogger(__name__)

        self._initialize_services(media_processor)

        self.logger.info("Video module initialized successfully")

    def _initialize_services(self, media_processor: Optional[MediaProcessor]) -> None:
        """Initialize all video services with proper dependency injection"""

        # Infrastructure layer
        self.index_store = FileIndexStore(self.config.storage.index_path, self.clock)
        self.catalog: ArtifactCatalog = FileSystemArtifactCatalog(
            store=self.index_store,
            storage_root=Path(self.config.storage.base_path),
            clock=self.clock
        )
        self.link_repository: ShareLinkRepository = FileSystemShareLinkRepository(self.index_store, self.clock)
        self.media_processor = media_processor or self._create_media_processor()

        # Application layer
        self.media_probe = MediaProbe(self.media_processor)
        self.upload_validator = UploadValidator(self.media_probe)
        self.video_service = VideoService(
            catalog=self.catalog,
            upload_validator=self.upload_validator,
            uploads_path=self.config.storage.uploads_path
        )
        self.trim_engine = TrimEngine(self.catalog, self.media_processor, self.media_probe, self.clock)
        self.merge_engine = MergeEngine(
            self.catalog, self.media_processor, self.media_probe, self.clock,
            output_dir=self.config.storage.uploads_path
        )
        self.link_issuer = LinkIssuer(
            catalog=self.catalog,
            link_repository=self.link_repository,
            clock=self.clock,
            default_expiry_seconds=self.config.sharing.default_expiry_seconds
        )

        # Presentation layer
        self.auth = BearerTokenAuth(self.config.auth.api_token)
        self.video_controller = VideoController(
            video_service=self.video_service,
            trim_engine=self.trim_engine,
            merge_engine=self.merge_engine,
            link_issuer=self.link_issuer,
            upload_defaults=self.config.upload,
            base_url=self.config.sharing.base_url
        )

    def _create_media_processor(self) -> MediaProcessor:
        """Create media processor implementation"""
        media = self.config.media
        return FFmpegMediaProcessor(
            ffmpeg_path=media.ffmpeg_path,
            ffprobe_path=media.ffprobe_path,
            timeout_seconds=media.timeout_seconds,
            include_audio=media.merge_include_audio
        )

    def get_api_routes(self):
        """Get FastAPI routes for video functionality"""
        return create_video_routes(video_controller=self.video_controller, auth=self.auth)

    def get_module_status(self) -> dict:
        """Get status information about the video module"""
        return {
            "catalog": type(self.catalog).__name__,
            "link_repository": type(self.link_repository).__name__,
            "media_processor": type(self.media_processor).__name__,
            "index_path": str(self.config.storage.index_path),
            "auth_configured": bool(self.config.auth.api_token),
        }


def create_video_module(
    config: Config,
    clock: Optional[TimezoneManager] = None,
    media_processor: Optional[MediaProcessor] = None
) -> VideoModule:
    """Factory function to create a configured video module."""
    return VideoModule(config=config, clock=clock, media_processor=media_processor)
