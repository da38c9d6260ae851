"""
Video Transformer

A service that accepts uploaded videos, validates them against size and duration
policy, derives new videos from stored ones (trim, merge) and issues expiring
share links to them.
"""

__version__ = "1.0.0"
__author__ = "Video Transformer Team"

from .main import VideoTransformerSystem

__all__ = ["VideoTransformerSystem"]
