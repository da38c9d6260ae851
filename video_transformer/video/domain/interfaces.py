"""
Video Domain Interfaces.

Abstract interfaces that define contracts for video operations.
These interfaces allow dependency inversion - domain logic doesn't depend on infrastructure.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from .models import Artifact, ShareLink


class ArtifactCatalog(ABC):
    """Persistence boundary for artifact records"""

    @abstractmethod
    async def create(
        self,
        name: str,
        size_bytes: int,
        duration_seconds: float,
        locator: str
    ) -> Artifact:
        """Persist a new artifact and return it with its id and creation time"""
        pass

    @abstractmethod
    async def find_by_id(self, artifact_id: str) -> Optional[Artifact]:
        """Get artifact by ID"""
        pass

    @abstractmethod
    async def find_by_ids(self, artifact_ids: Sequence[str]) -> Dict[str, Artifact]:
        """Batch lookup; ids that do not resolve are absent from the result"""
        pass

    @abstractmethod
    async def list_ordered(self) -> List[Artifact]:
        """All artifacts, most recently created first"""
        pass

    @abstractmethod
    def resolve_path(self, locator: str) -> Path:
        """Filesystem path for a locator"""
        pass

    @abstractmethod
    def to_locator(self, path: Path) -> str:
        """Locator for a filesystem path inside the storage root"""
        pass


class ShareLinkRepository(ABC):
    """Persistence boundary for share link records"""

    @abstractmethod
    async def create(self, link: ShareLink) -> ShareLink:
        """Persist a share link"""
        pass

    @abstractmethod
    async def find_by_id(self, link_id: str) -> Optional[ShareLink]:
        """Get share link by ID"""
        pass


class MediaProcessor(ABC):
    """
    Invoke-and-wait contract to the external media tool.

    Every method raises MediaToolError when the tool is missing, fails,
    or does not finish in time.
    """

    @abstractmethod
    async def probe_duration(self, file_path: Path) -> float:
        """Duration of a media file in seconds"""
        pass

    @abstractmethod
    async def trim(
        self,
        source_path: Path,
        target_path: Path,
        start_seconds: float,
        end_seconds: float
    ) -> None:
        """Write the [start, end) slice of the source to the target"""
        pass

    @abstractmethod
    async def concat(self, source_paths: Sequence[Path], target_path: Path) -> None:
        """Write the sources, in the given order, one after another to the target"""
        pass
