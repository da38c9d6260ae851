"""
Tests for the upload size/duration gate.
"""

from pathlib import Path

import pytest

from video_transformer.core.errors import DurationOutOfBounds, InvalidSizeFormat, ProbeFailure, SizeExceeded
from video_transformer.video.application.media_probe import MediaProbe
from video_transformer.video.application.upload_validator import UploadValidator
from video_transformer.video.domain.models import UploadPolicy

MB = 1024 * 1024
FILE = Path("/uploads/clip.mp4")


@pytest.fixture
def validator(media):
    return UploadValidator(MediaProbe(media))


@pytest.mark.asyncio
async def test_accepts_file_within_policy(validator, media):
    media.set_duration(FILE, 12.5)

    duration = await validator.validate(5 * MB, FILE, UploadPolicy())

    assert duration == 12.5


@pytest.mark.asyncio
async def test_bounds_are_inclusive(validator, media):
    policy = UploadPolicy(max_size_text="1mb", min_duration_seconds=5, max_duration_seconds=60)

    media.set_duration(FILE, 5.0)
    assert await validator.validate(MB, FILE, policy) == 5.0

    media.set_duration(FILE, 60.0)
    assert await validator.validate(MB, FILE, policy) == 60.0


@pytest.mark.asyncio
async def test_oversized_file_is_rejected_without_probing(validator, media):
    media.set_duration(FILE, 10.0)

    with pytest.raises(SizeExceeded):
        await validator.validate(20 * MB + 1, FILE, UploadPolicy())

    assert media.calls_named("probe") == []


@pytest.mark.asyncio
async def test_invalid_size_format_propagates_before_probing(validator, media):
    with pytest.raises(InvalidSizeFormat):
        await validator.validate(1, FILE, UploadPolicy(max_size_text="1mab"))

    assert media.calls == []


@pytest.mark.asyncio
@pytest.mark.parametrize("duration", [4.99, 60.01, 0.0])
async def test_duration_outside_bounds_is_rejected(validator, media, duration):
    media.set_duration(FILE, duration)

    with pytest.raises(DurationOutOfBounds) as exc_info:
        await validator.validate(MB, FILE, UploadPolicy())

    assert exc_info.value.duration == duration
    assert exc_info.value.message == "Video duration is out of bounds."


@pytest.mark.asyncio
async def test_custom_policy(validator, media):
    media.set_duration(FILE, 90.0)
    policy = UploadPolicy(max_size_text="1gb", min_duration_seconds=60, max_duration_seconds=120)

    assert await validator.validate(500 * MB, FILE, policy) == 90.0


@pytest.mark.asyncio
async def test_probe_failure_is_surfaced(validator, media):
    media.fail_probe = True

    with pytest.raises(ProbeFailure) as exc_info:
        await validator.validate(MB, FILE, UploadPolicy())

    assert "Invalid data found" in exc_info.value.message
