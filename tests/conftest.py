"""
Shared fixtures for the Video Transformer tests.

The external media tool is replaced by FakeMediaProcessor, which writes small
placeholder files and remembers the duration each output "really" has.
"""

import datetime
import json
from pathlib import Path
from typing import Dict, List, Optional, Sequence

import pytest

from video_transformer.core.config import Config
from video_transformer.core.errors import MediaToolError
from video_transformer.core.timezone_utils import TimezoneManager
from video_transformer.video.domain.interfaces import MediaProcessor
from video_transformer.video.integration import VideoModule

API_TOKEN = "test-token"
START_TIME = datetime.datetime(2026, 10, 19, 12, 0, 0)


class FixedClock(TimezoneManager):
    """Clock frozen at a given instant; advance() moves it forward"""

    def __init__(self, instant: datetime.datetime, timezone_name: str = "UTC"):
        super().__init__(timezone_name)
        self._instant = self.localize(instant)

    def now(self) -> datetime.datetime:
        return self._instant

    def advance(self, seconds: float) -> datetime.datetime:
        self._instant = self._instant + datetime.timedelta(seconds=seconds)
        return self._instant


class FakeMediaProcessor(MediaProcessor):
    """In-process stand-in for ffmpeg/ffprobe"""

    def __init__(self):
        self.durations: Dict[str, float] = {}
        self.default_duration: Optional[float] = None
        self.calls: List[tuple] = []
        self.fail_probe = False
        self.fail_trim = False
        self.fail_concat = False

    def set_duration(self, path: Path, seconds: float) -> None:
        self.durations[str(path)] = seconds

    def calls_named(self, name: str) -> List[tuple]:
        return [call for call in self.calls if call[0] == name]

    async def probe_duration(self, file_path: Path) -> float:
        self.calls.append(("probe", Path(file_path)))
        if self.fail_probe:
            raise MediaToolError("Invalid data found when processing input")
        if str(file_path) in self.durations:
            return self.durations[str(file_path)]
        if self.default_duration is not None:
            return self.default_duration
        raise MediaToolError(f"{file_path}: No such file or directory")

    async def trim(self, source_path: Path, target_path: Path, start_seconds: float, end_seconds: float) -> None:
        self.calls.append(("trim", source_path, target_path, start_seconds, end_seconds))
        target_path.parent.mkdir(parents=True, exist_ok=True)
        if self.fail_trim:
            target_path.write_bytes(b"partial")
            raise MediaToolError("Conversion failed!")

        target_path.write_bytes(b"\0" * 2048)
        source_duration = self.durations.get(str(source_path), end_seconds)
        self.durations[str(target_path)] = min(end_seconds, source_duration) - start_seconds

    async def concat(self, source_paths: Sequence[Path], target_path: Path) -> None:
        self.calls.append(("concat", list(source_paths), target_path))
        target_path.parent.mkdir(parents=True, exist_ok=True)
        if self.fail_concat:
            target_path.write_bytes(b"partial")
            raise MediaToolError("Error while filtering: Invalid argument")

        target_path.write_bytes(b"\0" * 4096)
        self.durations[str(target_path)] = sum(self.durations.get(str(path), 0.0) for path in source_paths)


@pytest.fixture
def media():
    return FakeMediaProcessor()


@pytest.fixture
def clock():
    return FixedClock(START_TIME)


@pytest.fixture
def config(tmp_path, monkeypatch):
    monkeypatch.delenv("STATIC_API_TOKEN", raising=False)
    monkeypatch.delenv("BASE_URL", raising=False)

    config_file = tmp_path / "config.json"
    config_file.write_text(json.dumps({
        "storage": {"base_path": str(tmp_path / "storage")},
        "auth": {"api_token": API_TOKEN},
        "sharing": {"base_url": "http://videos.test"},
        "system": {"log_file": str(tmp_path / "video_transformer.log")},
    }))
    return Config(str(config_file))


@pytest.fixture
def video_module(config, clock, media):
    return VideoModule(config, clock=clock, media_processor=media)


@pytest.fixture
def seed_video(video_module, media):
    """Store a placeholder file and register it with a known duration"""

    async def _seed(name: str = "clip.mp4", duration: float = 10.0, size: int = 1024):
        path = video_module.config.storage.uploads_path / f"seed_{len(media.durations)}_{name}"
        path.write_bytes(b"\0" * size)
        media.set_duration(path, duration)
        return await video_module.catalog.create(
            name=name,
            size_bytes=size,
            duration_seconds=duration,
            locator=video_module.catalog.to_locator(path)
        )

    return _seed
