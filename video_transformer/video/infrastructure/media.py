"""
FFmpeg Media Processor.

Runs ffprobe and ffmpeg as child processes for duration probing, trimming and
concatenation. Every run is bounded by a timeout and the child is killed when
the timeout fires or the awaiting task is cancelled.
"""

import asyncio
import logging
import math
import shutil
from pathlib import Path
from typing import List, Sequence

from ..domain.interfaces import MediaProcessor
from ...core.errors import MediaToolError
from ...core.logging_config import get_performance_logger


class FFmpegMediaProcessor(MediaProcessor):
    """FFmpeg-based media processor"""

    def __init__(
        self,
        ffmpeg_path: str = "ffmpeg",
        ffprobe_path: str = "ffprobe",
        timeout_seconds: float = 300.0,
        include_audio: bool = True
    ):
        self.logger = logging.getLogger(__name__)
        self.performance_logger = get_performance_logger("media")
        self.ffmpeg_path = ffmpeg_path
        self.ffprobe_path = ffprobe_path
        self.timeout_seconds = timeout_seconds
        self.include_audio = include_audio

        for tool in (ffmpeg_path, ffprobe_path):
            if shutil.which(tool) is None:
                self.logger.warning(f"{tool} not found - media operations will fail until it is installed")

    async def probe_duration(self, file_path: Path) -> float:
        """Read the container duration with ffprobe"""
        cmd = [
            self.ffprobe_path,
            "-v", "error",
            "-show_entries", "format=duration",
            "-of", "default=noprint_wrappers=1:nokey=1",
            str(file_path),
        ]
        stdout = await self._run(cmd, f"probe {file_path.name}")

        output = stdout.decode(errors="replace").strip()
        try:
            duration = float(output)
        except ValueError:
            raise MediaToolError(f"Could not read duration from ffprobe output: {output!r}")

        if not math.isfinite(duration) or duration < 0:
            raise MediaToolError(f"ffprobe reported an invalid duration: {output!r}")

        return duration

    async def trim(
        self,
        source_path: Path,
        target_path: Path,
        start_seconds: float,
        end_seconds: float
    ) -> None:
        """Cut [start, end) out of the source"""
        target_path.parent.mkdir(parents=True, exist_ok=True)
        cmd = self._base_command() + [
            "-ss", f"{start_seconds:.3f}",
            "-i", str(source_path),
            "-t", f"{end_seconds - start_seconds:.3f}",
            str(target_path),
        ]

        self.logger.info(f"Trimming {source_path} [{start_seconds}, {end_seconds}) to {target_path}")
        await self._run(cmd, f"trim {source_path.name}")

    async def concat(self, source_paths: Sequence[Path], target_path: Path) -> None:
        """Join the sources in order with the concat filter"""
        target_path.parent.mkdir(parents=True, exist_ok=True)
        cmd = self._build_concat_command(source_paths, target_path)

        self.logger.info(f"Merging {len(source_paths)} videos to {target_path}")
        await self._run(cmd, f"concat {target_path.name}")

    def _base_command(self) -> List[str]:
        return [self.ffmpeg_path, "-hide_banner", "-loglevel", "error", "-y"]

    def _build_concat_command(self, source_paths: Sequence[Path], target_path: Path) -> List[str]:
        """Build FFmpeg command for concatenation"""
        cmd = self._base_command()
        for source in source_paths:
            cmd.extend(["-i", str(source)])

        count = len(source_paths)
        if self.include_audio:
            streams = "".join(f"[{i}:v:0][{i}:a:0]" for i in range(count))
            graph = f"{streams}concat=n={count}:v=1:a=1[v][a]"
            cmd.extend(["-filter_complex", graph, "-map", "[v]", "-map", "[a]"])
        else:
            streams = "".join(f"[{i}:v:0]" for i in range(count))
            graph = f"{streams}concat=n={count}:v=1:a=0[v]"
            cmd.extend(["-filter_complex", graph, "-map", "[v]"])

        cmd.extend([
            "-c:v", "libx264",  # H.264 video codec
            "-preset", "fast",
            "-crf", "23",
        ])
        if self.include_audio:
            cmd.extend(["-c:a", "aac"])

        cmd.extend(["-movflags", "+faststart", str(target_path)])
        return cmd

    async def _run(self, cmd: List[str], operation: str) -> bytes:
        """Run a tool to completion and return its stdout"""
        started = self.performance_logger.start_timer(operation)

        try:
            process = await asyncio.create_subprocess_exec(
                *cmd,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE
            )
        except OSError as e:
            raise MediaToolError(f"Could not start {cmd[0]}: {e}")

        try:
            stdout, stderr = await asyncio.wait_for(process.communicate(), timeout=self.timeout_seconds)
        except asyncio.TimeoutError:
            await self._terminate(process)
            raise MediaToolError(f"{cmd[0]} did not finish within {self.timeout_seconds}s")
        except asyncio.CancelledError:
            await self._terminate(process)
            raise

        if process.returncode != 0:
            error_msg = stderr.decode(errors="replace").strip() if stderr else ""
            self.logger.error(f"{operation} failed with exit code {process.returncode}: {error_msg}")
            raise MediaToolError(error_msg or f"{cmd[0]} exited with code {process.returncode}", returncode=process.returncode)

        self.performance_logger.end_timer(operation, started)
        return stdout

    async def _terminate(self, process: asyncio.subprocess.Process) -> None:
        """Kill and reap a child that is still running"""
        if process.returncode is not None:
            return
        try:
            process.kill()
        except ProcessLookupError:
            return
        await process.wait()
        self.logger.warning(f"Killed media tool process {process.pid}")
