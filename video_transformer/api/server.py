"""
FastAPI server for the Video Transformer.

Mounts the video routes, a health check and a status endpoint, and serves the
stored files so that locators resolve to downloadable addresses.
"""

import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from .. import __version__
from ..core.config import Config
from ..video.integration import VideoModule


class APIServer:
    """HTTP front of the Video Transformer"""

    def __init__(self, config: Config, video_module: VideoModule):
        self.config = config
        self.video_module = video_module
        self.clock = video_module.clock
        self.logger = logging.getLogger(__name__)

        self.app = FastAPI(title="Video Transformer API", description="Upload, trim, merge and share videos", version=__version__)
        self.started_at = self.clock.now()

        self.app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_credentials=True, allow_methods=["*"], allow_headers=["*"])

        self._setup_routes()

    def _setup_routes(self):
        @self.app.get("/health")
        async def health_check():
            return {"status": "healthy", "timestamp": self.clock.now().isoformat()}

        @self.app.get("/system/status")
        async def get_system_status():
            return {
                "version": __version__,
                "uptime_seconds": (self.clock.now() - self.started_at).total_seconds(),
                "video_module": self.video_module.get_module_status(),
            }

        self.app.include_router(self.video_module.get_api_routes())

        # Locators are relative to the storage root, e.g. uploads/<file>
        uploads_dir = self.config.storage.uploads_dir
        self.app.mount(
            f"/{uploads_dir}",
            StaticFiles(directory=str(self.config.storage.uploads_path), check_dir=False),
            name="uploads"
        )

    def run(self) -> None:
        """Serve with uvicorn until stopped (blocking)"""
        host = self.config.system.api_host
        port = self.config.system.api_port
        self.logger.info(f"Starting API server on {host}:{port}")
        try:
            uvicorn.run(self.app, host=host, port=port, log_level=self.config.system.log_level.lower())
        finally:
            self.logger.info("API server stopped")
