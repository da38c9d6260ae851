"""
Clock for the Video Transformer.

Every timestamp the service records (artifact creation, link expiry) is read
from a TimezoneManager so that the configured zone is applied consistently
and tests can substitute a clock of their own.
"""

import datetime
import logging
from typing import Optional

import pytz

FILENAME_TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S_%f"


class TimezoneManager:
    """Timezone-aware clock for one configured zone"""

    def __init__(self, timezone_name: str = "UTC"):
        self.timezone_name = timezone_name
        self.timezone = pytz.timezone(timezone_name)
        self.logger = logging.getLogger(__name__)

        self.logger.debug(f"Clock using timezone {timezone_name}")

    def now(self) -> datetime.datetime:
        return datetime.datetime.now(self.timezone)

    def utc_now(self) -> datetime.datetime:
        return self.now().astimezone(pytz.UTC)

    def to_local(self, dt: datetime.datetime) -> datetime.datetime:
        """Express an instant in the configured zone; naive values are read as UTC"""
        aware = dt if dt.tzinfo is not None else pytz.UTC.localize(dt)
        return aware.astimezone(self.timezone)

    def localize(self, dt: datetime.datetime) -> datetime.datetime:
        """Attach the configured zone to a naive wall-clock value"""
        return dt if dt.tzinfo is not None else self.timezone.localize(dt)

    def format_filename_timestamp(self, dt: Optional[datetime.datetime] = None) -> str:
        stamp_time = self.localize(dt) if dt is not None else self.now()
        return stamp_time.strftime(FILENAME_TIMESTAMP_FORMAT)

    def parse_timestamp(self, timestamp_str: str) -> datetime.datetime:
        """Read back an ISO timestamp written to the catalog index"""
        try:
            parsed = datetime.datetime.fromisoformat(timestamp_str)
        except (TypeError, ValueError):
            raise ValueError(f"Not an ISO timestamp: {timestamp_str!r}")
        return self.localize(parsed)

