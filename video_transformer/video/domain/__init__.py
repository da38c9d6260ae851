"""
Video Domain Layer.

Contains pure business logic and domain models for video operations.
No external dependencies - only Python standard library and domain concepts.
"""

from .models import Artifact, ShareLink, UploadPolicy, IssuedLink
from .interfaces import ArtifactCatalog, ShareLinkRepository, MediaProcessor
from .sizes import parse_size

__all__ = [
    "Artifact",
    "ShareLink",
    "UploadPolicy",
    "IssuedLink",
    "ArtifactCatalog",
    "ShareLinkRepository",
    "MediaProcessor",
    "parse_size",
]
