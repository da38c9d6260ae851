"""
Configuration management for the Video Transformer.

This module handles all configuration settings including storage paths,
upload policy defaults, external media tool settings, share link settings,
authentication and system parameters.
"""

import os
import json
import logging
from typing import Dict, Optional, Any
from dataclasses import dataclass, asdict
from pathlib import Path


@dataclass
class StorageConfig:
    """Storage configuration"""

    base_path: str = "storage"
    uploads_dir: str = "uploads"  # Relative to base_path, also served at /uploads
    index_filename: str = "catalog_index.json"

    @property
    def uploads_path(self) -> Path:
        return Path(self.base_path) / self.uploads_dir

    @property
    def index_path(self) -> Path:
        return Path(self.base_path) / self.index_filename


@dataclass
class UploadConfig:
    """Default upload policy, used when a request leaves a bound out"""

    max_size: str = "20mb"
    min_duration_seconds: int = 5
    max_duration_seconds: int = 60


@dataclass
class MediaConfig:
    """External media tool configuration"""

    ffmpeg_path: str = "ffmpeg"
    ffprobe_path: str = "ffprobe"
    timeout_seconds: float = 300.0  # Upper bound for a single ffmpeg/ffprobe run
    merge_include_audio: bool = True


@dataclass
class SharingConfig:
    """Share link configuration"""

    default_expiry_seconds: int = 86400
    base_url: str = "http://localhost:8000"


@dataclass
class AuthConfig:
    """Authentication configuration"""

    api_token: Optional[str] = None


@dataclass
class SystemConfig:
    """System-wide configuration"""

    log_level: str = "INFO"
    log_file: str = "video_transformer.log"
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    timezone: str = "UTC"


class Config:
    """Main configuration manager"""

    SECTIONS = {
        "storage": StorageConfig,
        "upload": UploadConfig,
        "media": MediaConfig,
        "sharing": SharingConfig,
        "auth": AuthConfig,
        "system": SystemConfig,
    }

    def __init__(self, config_file: Optional[str] = None, save_defaults: bool = True):
        self.config_file = config_file or "config.json"
        self.save_defaults = save_defaults
        self.logger = logging.getLogger(__name__)

        # Default configurations
        self.storage = StorageConfig()
        self.upload = UploadConfig()
        self.media = MediaConfig()
        self.sharing = SharingConfig()
        self.auth = AuthConfig()
        self.system = SystemConfig()

        # Load configuration
        self.load_config()
        self._apply_environment_overrides()

        # Ensure storage directories exist
        self._ensure_storage_directories()

    def load_config(self) -> None:
        """Load configuration from file"""
        config_path = Path(self.config_file)

        if config_path.exists():
            try:
                with open(config_path, "r") as f:
                    config_data = json.load(f)

                for section, section_cls in self.SECTIONS.items():
                    if section in config_data:
                        setattr(self, section, section_cls(**config_data[section]))

                self.logger.info(f"Configuration loaded from {config_path}")

            except Exception as e:
                self.logger.error(f"Error loading config from {config_path}: {e}")
        else:
            self.logger.info(f"Config file {config_path} not found, using defaults")
            if self.save_defaults:
                self.save_config()

    def _apply_environment_overrides(self) -> None:
        """Environment values win over the file for deployment secrets"""
        api_token = os.environ.get("STATIC_API_TOKEN")
        if api_token:
            self.auth.api_token = api_token

        base_url = os.environ.get("BASE_URL")
        if base_url:
            self.sharing.base_url = base_url

    def save_config(self) -> None:
        """Save current configuration to file"""
        config_data = self.to_dict()
        # Never write the secret back to disk
        config_data["auth"]["api_token"] = None

        try:
            with open(self.config_file, "w") as f:
                json.dump(config_data, f, indent=2)
            self.logger.info(f"Configuration saved to {self.config_file}")
        except Exception as e:
            self.logger.error(f"Error saving config to {self.config_file}: {e}")

    def _ensure_storage_directories(self) -> None:
        """Ensure all storage directories exist"""
        try:
            Path(self.storage.base_path).mkdir(parents=True, exist_ok=True)
            self.storage.uploads_path.mkdir(parents=True, exist_ok=True)
            self.logger.info("Storage directories verified/created")
        except Exception as e:
            self.logger.error(f"Error creating storage directories: {e}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary"""
        return {section: asdict(getattr(self, section)) for section in self.SECTIONS}
