"""
Video Infrastructure Layer.

Contains implementations of domain interfaces using external dependencies
like the file system and FFmpeg.
"""

from .repositories import FileIndexStore, FileSystemArtifactCatalog, FileSystemShareLinkRepository
from .media import FFmpegMediaProcessor

__all__ = [
    "FileIndexStore",
    "FileSystemArtifactCatalog",
    "FileSystemShareLinkRepository",
    "FFmpegMediaProcessor",
]
