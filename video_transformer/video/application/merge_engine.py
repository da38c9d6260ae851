"""
Merge use case: a new video holding several stored videos back to back.
"""

from pathlib import Path
from typing import Sequence

from .outputs import DerivationEngine, discard_file, unique_token
from ..domain.models import Artifact
from ...core.errors import InvalidRequest, MediaToolError, NotFoundError, ProcessingError

MERGED_VIDEO_NAME = "merged_video.mp4"


class MergeEngine(DerivationEngine):
    """Concatenates stored videos in the order the caller gives them"""

    def __init__(self, *args, output_dir: Path, **kwargs):
        super().__init__(*args, **kwargs)
        self.output_dir = Path(output_dir)

    async def merge(self, artifact_ids: Sequence[str]) -> Artifact:
        artifact_ids = list(artifact_ids or [])
        if len(artifact_ids) < 2:
            raise InvalidRequest("At least two video IDs are required for merging.")

        # Every id must resolve before anything is started
        found = await self.catalog.find_by_ids(artifact_ids)
        if len(found) < len(set(artifact_ids)):
            missing = [artifact_id for artifact_id in artifact_ids if artifact_id not in found]
            self.logger.info(f"Merge rejected, unknown videos: {missing}")
            raise NotFoundError("Some videos were not found.")

        source_paths = [self.catalog.resolve_path(found[artifact_id].locator) for artifact_id in artifact_ids]
        target_path = self.get_merged_path()

        try:
            await self.media_processor.concat(source_paths, target_path)
        except MediaToolError as e:
            self.logger.error(f"Merging {artifact_ids} failed: {e}")
            await discard_file(target_path)
            raise ProcessingError(f"Video merging failed: {e}")

        merged = await self._commit_output(target_path, MERGED_VIDEO_NAME)
        self.logger.info(f"Merged {len(artifact_ids)} videos into {merged.artifact_id}")
        return merged

    def get_merged_path(self) -> Path:
        return self.output_dir / f"merged_{unique_token(self.clock)}.mp4"
