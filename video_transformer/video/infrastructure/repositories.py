"""
Video Repository Implementations.

File system-based implementation of the artifact catalog and share link
repository. Both record kinds live in one JSON index under the storage root.
"""

import asyncio
import json
import logging
import os
import uuid
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import aiofiles

from ..domain.interfaces import ArtifactCatalog, ShareLinkRepository
from ..domain.models import Artifact, ShareLink
from ...core.errors import CatalogError
from ...core.timezone_utils import TimezoneManager

ARTIFACTS = "artifacts"
LINKS = "links"


class FileIndexStore:
    """
    JSON file index holding artifact and link records.

    Writers are serialized by a lock and build a new index which replaces the
    old one only after it has been written to disk, so readers always see a
    complete snapshot and a failed write leaves nothing behind.
    """

    def __init__(self, index_path: Path, clock: TimezoneManager):
        self.index_path = Path(index_path)
        self.clock = clock
        self.logger = logging.getLogger(__name__)
        self._lock = asyncio.Lock()
        self._index = self._load_index()

    def _load_index(self) -> Dict[str, Any]:
        """Load file index from disk"""
        if not self.index_path.exists():
            return {ARTIFACTS: {}, LINKS: {}, "last_updated": None}

        try:
            with open(self.index_path, "r") as f:
                index = json.load(f)
        except (OSError, ValueError) as e:
            self.logger.error(f"Error loading catalog index {self.index_path}: {e}")
            raise CatalogError(f"Could not load catalog index: {e}")

        index.setdefault(ARTIFACTS, {})
        index.setdefault(LINKS, {})
        self.logger.info(f"Loaded catalog index with {len(index[ARTIFACTS])} videos and {len(index[LINKS])} links")
        return index

    async def _save_index(self, index: Dict[str, Any]) -> None:
        """Write the index next to the live file, then swap it in"""
        temp_path = self.index_path.with_name(self.index_path.name + ".tmp")
        try:
            self.index_path.parent.mkdir(parents=True, exist_ok=True)
            async with aiofiles.open(temp_path, "w") as f:
                await f.write(json.dumps(index, indent=2))
            os.replace(temp_path, self.index_path)
        except OSError as e:
            self.logger.error(f"Error saving catalog index: {e}")
            raise CatalogError(f"Could not save catalog index: {e}")

    async def insert(self, section: str, key: str, record: Dict[str, Any]) -> None:
        """Add one record; ids are never overwritten"""
        async with self._lock:
            if key in self._index[section]:
                raise CatalogError(f"Duplicate {section} id: {key}")

            new_index = dict(self._index)
            new_index[section] = {**self._index[section], key: record}
            new_index["last_updated"] = self.clock.now().isoformat()

            await self._save_index(new_index)
            self._index = new_index

    def get(self, section: str, key: str) -> Optional[Dict[str, Any]]:
        return self._index[section].get(key)

    def records(self, section: str) -> List[Dict[str, Any]]:
        """Records of a section in insertion order"""
        return list(self._index[section].values())


class FileSystemArtifactCatalog(ArtifactCatalog):
    """File system implementation of the artifact catalog"""

    def __init__(self, store: FileIndexStore, storage_root: Path, clock: TimezoneManager):
        self.store = store
        self.storage_root = Path(storage_root)
        self.clock = clock
        self.logger = logging.getLogger(__name__)

    async def create(
        self,
        name: str,
        size_bytes: int,
        duration_seconds: float,
        locator: str
    ) -> Artifact:
        artifact = Artifact(
            artifact_id=uuid.uuid4().hex,
            name=name,
            size_bytes=size_bytes,
            duration_seconds=duration_seconds,
            locator=locator,
            created_at=self.clock.now()
        )

        await self.store.insert(ARTIFACTS, artifact.artifact_id, artifact.to_record())
        self.logger.info(f"Registered video {artifact.artifact_id} ({artifact.name}) at {artifact.locator}")
        return artifact

    async def find_by_id(self, artifact_id: str) -> Optional[Artifact]:
        record = self.store.get(ARTIFACTS, artifact_id)
        return self._convert_to_artifact(record) if record else None

    async def find_by_ids(self, artifact_ids: Sequence[str]) -> Dict[str, Artifact]:
        found = {}
        for artifact_id in dict.fromkeys(artifact_ids):
            record = self.store.get(ARTIFACTS, artifact_id)
            if record:
                found[artifact_id] = self._convert_to_artifact(record)
        return found

    async def list_ordered(self) -> List[Artifact]:
        artifacts = [self._convert_to_artifact(record) for record in self.store.records(ARTIFACTS)]
        # Later inserts win ties on equal timestamps
        artifacts.reverse()
        artifacts.sort(key=lambda artifact: artifact.created_at, reverse=True)
        return artifacts

    def resolve_path(self, locator: str) -> Path:
        return self.storage_root / locator

    def to_locator(self, path: Path) -> str:
        return Path(path).relative_to(self.storage_root).as_posix()

    def _convert_to_artifact(self, record: Dict[str, Any]) -> Artifact:
        """Convert an index record to the Artifact domain model"""
        return Artifact(
            artifact_id=record["artifact_id"],
            name=record["name"],
            size_bytes=record["size_bytes"],
            duration_seconds=record["duration_seconds"],
            locator=record["locator"],
            created_at=self.clock.parse_timestamp(record["created_at"])
        )


class FileSystemShareLinkRepository(ShareLinkRepository):
    """File system implementation of the share link repository"""

    def __init__(self, store: FileIndexStore, clock: TimezoneManager):
        self.store = store
        self.clock = clock
        self.logger = logging.getLogger(__name__)

    async def create(self, link: ShareLink) -> ShareLink:
        await self.store.insert(LINKS, link.link_id, link.to_record())
        self.logger.info(f"Stored share link {link.link_id} for video {link.artifact_id}")
        return link

    async def find_by_id(self, link_id: str) -> Optional[ShareLink]:
        record = self.store.get(LINKS, link_id)
        if not record:
            return None

        return ShareLink(
            link_id=record["link_id"],
            artifact_id=record["artifact_id"],
            expires_at=self.clock.parse_timestamp(record["expires_at"]),
            created_at=self.clock.parse_timestamp(record["created_at"])
        )
