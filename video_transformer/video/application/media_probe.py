"""
Duration probing through the external media tool.
"""

import logging
from pathlib import Path

from ..domain.interfaces import MediaProcessor
from ...core.errors import MediaToolError, ProbeFailure


class MediaProbe:
    """Asks the media tool how long a file is"""

    def __init__(self, media_processor: MediaProcessor):
        self.media_processor = media_processor
        self.logger = logging.getLogger(__name__)

    async def probe_duration(self, file_path: Path) -> float:
        try:
            duration = await self.media_processor.probe_duration(Path(file_path))
        except MediaToolError as e:
            self.logger.warning(f"Could not probe duration of {file_path}: {e}")
            raise ProbeFailure(f"Could not determine video duration: {e}")

        self.logger.debug(f"Probed {file_path}: {duration:.3f}s")
        return duration
