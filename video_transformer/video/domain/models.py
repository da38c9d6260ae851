"""
Video Domain Models.

Pure business entities and value objects for video operations.
These models contain no external dependencies and represent core business concepts.
"""

from dataclasses import dataclass, asdict
from datetime import datetime
from pathlib import PurePosixPath
from typing import Any, Dict


@dataclass(frozen=True)
class Artifact:
    """A stored video, uploaded or derived. Never updated in place."""
    artifact_id: str
    name: str
    size_bytes: int
    duration_seconds: float
    locator: str  # Path relative to the storage root, POSIX separators
    created_at: datetime

    def __post_init__(self):
        if not self.artifact_id:
            raise ValueError("Artifact ID cannot be empty")
        if self.size_bytes < 0:
            raise ValueError("File size cannot be negative")
        if self.duration_seconds < 0:
            raise ValueError("Duration cannot be negative")

    @property
    def extension(self) -> str:
        return PurePosixPath(self.locator).suffix

    def to_record(self) -> Dict[str, Any]:
        record = asdict(self)
        record["created_at"] = self.created_at.isoformat()
        return record


@dataclass(frozen=True)
class ShareLink:
    """
    Time-limited reference to an artifact.

    The link only holds the artifact's id; the artifact may disappear
    underneath it. Expiry is derived from the current time, never stored.
    """
    link_id: str
    artifact_id: str
    expires_at: datetime
    created_at: datetime

    def is_expired(self, now: datetime) -> bool:
        return self.expires_at <= now

    def to_record(self) -> Dict[str, Any]:
        return {
            "link_id": self.link_id,
            "artifact_id": self.artifact_id,
            "expires_at": self.expires_at.isoformat(),
            "created_at": self.created_at.isoformat(),
        }


@dataclass(frozen=True)
class UploadPolicy:
    """Size and duration bounds an upload must satisfy"""
    max_size_text: str = "20mb"
    min_duration_seconds: int = 5
    max_duration_seconds: int = 60


@dataclass(frozen=True)
class IssuedLink:
    """Result of issuing a share link"""
    link_id: str
    expires_at: datetime
