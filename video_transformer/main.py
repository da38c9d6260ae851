"""
Application coordinator and command line entry point for the Video Transformer.
"""

import argparse
import logging
import sys
from datetime import datetime
from typing import List, Optional

from .api.server import APIServer
from .core.config import Config
from .core.logging_config import setup_logging
from .core.timezone_utils import TimezoneManager
from .video.integration import create_video_module


class VideoTransformerSystem:
    """Builds the service from a config file and runs it"""

    def __init__(self, config_file: Optional[str] = None, log_level: Optional[str] = None):
        # Config is read before logging exists, so its own messages use defaults
        self.config = Config(config_file)
        if log_level:
            self.config.system.log_level = log_level

        self.logger_setup = setup_logging(log_level=self.config.system.log_level, log_file=self.config.system.log_file)
        self.logger = logging.getLogger(__name__)

        self.clock = TimezoneManager(self.config.system.timezone)
        self.video_module = create_video_module(self.config, clock=self.clock)
        self.api_server = APIServer(self.config, self.video_module)

        self.started_at: Optional[datetime] = None
        self.logger.info(f"Video Transformer ready, storing files under {self.config.storage.base_path}")

    @property
    def app(self):
        return self.api_server.app

    def run(self) -> None:
        """Serve until interrupted"""
        self.started_at = self.clock.now()
        try:
            self.api_server.run()
        except KeyboardInterrupt:
            self.logger.info("Interrupted, shutting down")
        finally:
            served = (self.clock.now() - self.started_at).total_seconds()
            self.logger.info(f"Video Transformer stopped after {served:.1f} seconds")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Upload, trim, merge and share videos over HTTP")
    parser.add_argument("--config", default="config.json", help="Path to the JSON configuration file")
    parser.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"], default=None, help="Override the configured log level")
    parser.add_argument("--host", default=None, help="Override the configured listen address")
    parser.add_argument("--port", type=int, default=None, help="Override the configured listen port")
    return parser


def main(argv: Optional[List[str]] = None):
    args = build_parser().parse_args(argv)

    system = VideoTransformerSystem(args.config, log_level=args.log_level)
    if args.host:
        system.config.system.api_host = args.host
    if args.port:
        system.config.system.api_port = args.port

    try:
        system.run()
    except Exception as e:
        logging.getLogger(__name__).critical(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
