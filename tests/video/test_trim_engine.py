"""
Tests for trimming stored videos.
"""

import pytest

from video_transformer.core.errors import InvalidTrimRange, NotFoundError, ProbeFailure, ProcessingError


@pytest.mark.asyncio
async def test_trim_creates_derived_video(video_module, media, seed_video):
    source = await seed_video("holiday.mp4", duration=10.0)

    trimmed = await video_module.trim_engine.trim(source.artifact_id, 0, 5)

    assert trimmed.artifact_id != source.artifact_id
    assert trimmed.name == "trimmed_holiday.mp4"
    assert trimmed.duration_seconds == pytest.approx(5.0)
    assert trimmed.size_bytes == 2048
    assert trimmed.locator != source.locator
    assert video_module.catalog.resolve_path(trimmed.locator).exists()
    assert await video_module.catalog.find_by_id(trimmed.artifact_id) == trimmed


@pytest.mark.asyncio
async def test_duration_comes_from_reprobe(video_module, media, seed_video):
    source = await seed_video(duration=10.0)

    async def short_trim(source_path, target_path, start, end):
        target_path.write_bytes(b"\0" * 10)
        media.set_duration(target_path, 4.96)

    media.trim = short_trim

    trimmed = await video_module.trim_engine.trim(source.artifact_id, 0, 5)

    assert trimmed.duration_seconds == 4.96


@pytest.mark.asyncio
async def test_missing_bounds_default_to_whole_video(video_module, media, seed_video):
    source = await seed_video(duration=8.0)

    await video_module.trim_engine.trim(source.artifact_id, start_seconds=3)
    await video_module.trim_engine.trim(source.artifact_id, end_seconds=2)

    first, second = media.calls_named("trim")
    assert first[3:] == (3.0, 8.0)
    assert second[3:] == (0.0, 2.0)


@pytest.mark.asyncio
async def test_output_is_sibling_of_source_and_unique(video_module, media, seed_video):
    source = await seed_video("holiday.mp4", duration=10.0)

    one = await video_module.trim_engine.trim(source.artifact_id, 0, 5)
    two = await video_module.trim_engine.trim(source.artifact_id, 0, 5)

    source_path = video_module.catalog.resolve_path(source.locator)
    one_path = video_module.catalog.resolve_path(one.locator)
    assert one.locator != two.locator
    assert one_path.parent == source_path.parent
    assert one_path.name.startswith(f"{source_path.stem}_trimmed_")
    assert one_path.suffix == ".mp4"


@pytest.mark.asyncio
async def test_unknown_video_is_not_found(video_module, media):
    with pytest.raises(NotFoundError):
        await video_module.trim_engine.trim("nonexistent", 0, 5)

    assert media.calls == []


@pytest.mark.asyncio
@pytest.mark.parametrize("start, end", [
    (5, 5), (6, 2), (-1, 4), (10, None),
    (float("nan"), 5), (0, float("nan")), (0, float("inf")), (float("-inf"), 5),
])
async def test_invalid_range_rejected_before_processing(video_module, media, seed_video, start, end):
    source = await seed_video(duration=10.0)

    with pytest.raises(InvalidTrimRange):
        await video_module.trim_engine.trim(source.artifact_id, start, end)

    assert media.calls_named("trim") == []


@pytest.mark.asyncio
async def test_processing_failure_leaves_no_trace(video_module, media, seed_video):
    source = await seed_video(duration=10.0)
    media.fail_trim = True

    with pytest.raises(ProcessingError) as exc_info:
        await video_module.trim_engine.trim(source.artifact_id, 0, 5)

    assert "Conversion failed!" in exc_info.value.message
    target_path = media.calls_named("trim")[0][2]
    assert not target_path.exists()
    assert [a.artifact_id for a in await video_module.catalog.list_ordered()] == [source.artifact_id]


@pytest.mark.asyncio
async def test_reprobe_failure_creates_no_entry(video_module, media, seed_video):
    source = await seed_video(duration=10.0)

    async def unreadable_trim(source_path, target_path, start, end):
        target_path.write_bytes(b"garbage")

    media.trim = unreadable_trim

    with pytest.raises(ProbeFailure):
        await video_module.trim_engine.trim(source.artifact_id, 0, 5)

    assert len(await video_module.catalog.list_ordered()) == 1
    leftovers = [p for p in video_module.config.storage.uploads_path.iterdir() if "_trimmed_" in p.name]
    assert leftovers == []
