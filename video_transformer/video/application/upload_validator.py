"""
Upload policy gate.
"""

import logging
from pathlib import Path

from .media_probe import MediaProbe
from ..domain.models import UploadPolicy
from ..domain.sizes import parse_size
from ...core.errors import DurationOutOfBounds, SizeExceeded


class UploadValidator:
    """
    Applies size and duration policy to an uploaded file.

    Pure gate: nothing is written. The size check runs before the probe so a
    file already rejected on size never reaches the media tool.
    """

    def __init__(self, media_probe: MediaProbe):
        self.media_probe = media_probe
        self.logger = logging.getLogger(__name__)

    async def validate(self, file_size: int, file_path: Path, policy: UploadPolicy) -> float:
        """Return the probed duration, or raise the first policy violation"""
        max_bytes = parse_size(policy.max_size_text)

        if file_size > max_bytes:
            self.logger.info(f"Rejected {file_path}: {file_size} bytes exceeds {max_bytes}")
            raise SizeExceeded(file_size, max_bytes)

        duration = await self.media_probe.probe_duration(file_path)

        if duration < policy.min_duration_seconds or duration > policy.max_duration_seconds:
            self.logger.info(
                f"Rejected {file_path}: duration {duration:.2f}s outside "
                f"[{policy.min_duration_seconds}, {policy.max_duration_seconds}]"
            )
            raise DurationOutOfBounds(duration, policy.min_duration_seconds, policy.max_duration_seconds)

        return duration
