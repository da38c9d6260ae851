"""
Share link use cases: issuing expiring links and resolving them.
"""

import logging
import uuid
from datetime import datetime, timedelta
from typing import Optional

from ..domain.interfaces import ArtifactCatalog, ShareLinkRepository
from ..domain.models import IssuedLink, ShareLink
from ...core.errors import ExpiredError, InvalidRequest, NotFoundError
from ...core.timezone_utils import TimezoneManager

DEFAULT_EXPIRY_SECONDS = 86400


class LinkIssuer:
    """
    Creates and resolves time-limited links to stored videos.

    Both operations accept an explicit `now`; without it the injected clock
    is read. A link expires at the instant `now >= expires_at`.
    """

    def __init__(
        self,
        catalog: ArtifactCatalog,
        link_repository: ShareLinkRepository,
        clock: TimezoneManager,
        default_expiry_seconds: int = DEFAULT_EXPIRY_SECONDS
    ):
        self.catalog = catalog
        self.link_repository = link_repository
        self.clock = clock
        self.default_expiry_seconds = default_expiry_seconds
        self.logger = logging.getLogger(__name__)

    async def issue(
        self,
        artifact_id: str,
        expiry_seconds: Optional[float] = None,
        now: Optional[datetime] = None
    ) -> IssuedLink:
        if expiry_seconds is None:
            expiry_seconds = self.default_expiry_seconds
        if expiry_seconds <= 0:
            raise InvalidRequest("Expiry must be a positive number of seconds.")

        artifact = await self.catalog.find_by_id(artifact_id)
        if not artifact:
            raise NotFoundError("Video not found")

        now = self._current_time(now)
        try:
            expires_at = now + timedelta(seconds=expiry_seconds)
        except OverflowError:
            raise InvalidRequest("Expiry is too far in the future.")

        link = ShareLink(
            link_id=uuid.uuid4().hex,
            artifact_id=artifact.artifact_id,
            expires_at=expires_at,
            created_at=now
        )
        await self.link_repository.create(link)

        self.logger.info(f"Issued link {link.link_id} for video {artifact_id}, expires {link.expires_at.isoformat()}")
        return IssuedLink(link_id=link.link_id, expires_at=link.expires_at)

    async def resolve(self, link_id: str, now: Optional[datetime] = None) -> str:
        """Locator of the linked video"""
        link = await self.link_repository.find_by_id(link_id)
        if not link:
            raise NotFoundError("Video not found")

        if link.is_expired(self._current_time(now)):
            raise ExpiredError(link_id)

        artifact = await self.catalog.find_by_id(link.artifact_id)
        if not artifact:
            self.logger.warning(f"Link {link_id} points at missing video {link.artifact_id}")
            raise NotFoundError("Video not found")

        return artifact.locator

    def _current_time(self, now: Optional[datetime]) -> datetime:
        if now is None:
            return self.clock.now()
        return self.clock.localize(now)
