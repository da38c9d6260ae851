"""
Trim use case: a new video holding a time-bounded slice of an existing one.
"""

import math
from pathlib import Path
from typing import Optional

from .outputs import DerivationEngine, discard_file, unique_token
from ..domain.models import Artifact
from ...core.errors import InvalidTrimRange, MediaToolError, NotFoundError, ProcessingError


class TrimEngine(DerivationEngine):
    """Cuts [start, end) out of a stored video into a new catalog entry"""

    async def trim(
        self,
        artifact_id: str,
        start_seconds: Optional[float] = None,
        end_seconds: Optional[float] = None
    ) -> Artifact:
        source = await self.catalog.find_by_id(artifact_id)
        if not source:
            raise NotFoundError("Video not found.")

        start = 0.0 if start_seconds is None else float(start_seconds)
        end = source.duration_seconds if end_seconds is None else float(end_seconds)

        if not (math.isfinite(start) and math.isfinite(end)) or start < 0 or start >= end:
            raise InvalidTrimRange(start, end)

        source_path = self.catalog.resolve_path(source.locator)
        target_path = self.get_trimmed_path(source_path)

        try:
            await self.media_processor.trim(source_path, target_path, start, end)
        except MediaToolError as e:
            self.logger.error(f"Trimming {artifact_id} failed: {e}")
            await discard_file(target_path)
            raise ProcessingError(f"Video trimming failed: {e}")

        trimmed = await self._commit_output(target_path, f"trimmed_{source.name}")
        self.logger.info(f"Trimmed {artifact_id} [{start}, {end}) into {trimmed.artifact_id}")
        return trimmed

    def get_trimmed_path(self, source_path: Path) -> Path:
        """Sibling of the source, unique per call"""
        return source_path.with_name(f"{source_path.stem}_trimmed_{unique_token(self.clock)}{source_path.suffix}")
