"""
Shared handling of files produced by the media tool.

Derived videos get a name no concurrent operation can produce, and an output
only becomes a catalog entry once it has been measured and probed. Anything
that fails on the way is removed from disk.
"""

import logging
import uuid
from pathlib import Path

import aiofiles.os

from .media_probe import MediaProbe
from ..domain.interfaces import ArtifactCatalog, MediaProcessor
from ..domain.models import Artifact
from ...core.errors import ProcessingError, VideoTransformerError
from ...core.timezone_utils import TimezoneManager

logger = logging.getLogger(__name__)


def unique_token(clock: TimezoneManager) -> str:
    """Timestamp plus random component, safe for concurrent naming"""
    return f"{clock.format_filename_timestamp()}_{uuid.uuid4().hex[:8]}"


async def discard_file(path: Path) -> None:
    """Remove a file that must not outlive a failed operation"""
    try:
        if await aiofiles.os.path.exists(path):
            await aiofiles.os.remove(path)
            logger.debug(f"Removed {path}")
    except OSError as e:
        logger.warning(f"Could not remove {path}: {e}")


class DerivationEngine:
    """Base for operations that write a new video from existing ones"""

    def __init__(
        self,
        catalog: ArtifactCatalog,
        media_processor: MediaProcessor,
        media_probe: MediaProbe,
        clock: TimezoneManager
    ):
        self.catalog = catalog
        self.media_processor = media_processor
        self.media_probe = media_probe
        self.clock = clock
        self.logger = logging.getLogger(self.__class__.__module__)

    async def _commit_output(self, target_path: Path, name: str) -> Artifact:
        """Measure, re-probe and register an output exactly once"""
        try:
            try:
                stat = await aiofiles.os.stat(target_path)
            except OSError as e:
                raise ProcessingError(f"Media tool did not produce an output file: {e}")

            duration = await self.media_probe.probe_duration(target_path)

            return await self.catalog.create(
                name=name,
                size_bytes=stat.st_size,
                duration_seconds=duration,
                locator=self.catalog.to_locator(target_path)
            )
        except VideoTransformerError:
            await discard_file(target_path)
            raise
