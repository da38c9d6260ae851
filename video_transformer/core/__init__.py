"""
Video Transformer - Core Module

Configuration management, logging setup, the clock and the error taxonomy
shared by every other part of the system.
"""

from .config import Config
from .errors import VideoTransformerError
from .timezone_utils import TimezoneManager

__all__ = ["Config", "VideoTransformerError", "TimezoneManager"]
