"""Unit tests for the FFmpeg remux adapter."""

import io
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from gtvfetch.core.errors import RemuxError
from gtvfetch.core.muxer import MediaMuxer

FFMPEG_OUTPUT = """ffmpeg version 6.0 Copyright (c) 2000-2023 the FFmpeg developers
Input #0, hls, from 'gronkhtv/123/720p60/index.m3u8':
[hls @ 0x55d0c8] Opening 'gronkhtv/123/720p60/0.ts' for reading
[hls @ 0x55d0c8] Opening 'gronkhtv/123/720p60/1.ts' for reading
frame= 600 fps=0.0 q=-1.0 Lsize=    2048kB time=00:00:20.00 bitrate= 838.9kbits/s
"""


def fake_process(output: str, returncode: int = 0) -> MagicMock:
    process = MagicMock()
    process.stdout = io.StringIO(output)
    process.wait.return_value = returncode
    process.__enter__.return_value = process
    process.__exit__.return_value = False
    return process


@pytest.fixture
def ffmpeg(tmp_path: Path) -> Path:
    """A file standing in for the ffmpeg executable."""
    path = tmp_path / "ffmpeg"
    path.write_text("")
    return path


class TestAvailability:
    """Tests for MediaMuxer.available."""

    def test_empty_path(self) -> None:
        assert not MediaMuxer("").available
        assert not MediaMuxer(None).available

    def test_missing_path(self, tmp_path: Path) -> None:
        assert not MediaMuxer(str(tmp_path / "nope")).available

    def test_existing_path(self, ffmpeg: Path) -> None:
        assert MediaMuxer(str(ffmpeg)).available


class TestRemux:
    """Tests for running ffmpeg."""

    def test_command_shape(self, ffmpeg: Path) -> None:
        muxer = MediaMuxer(str(ffmpeg))

        cmd = muxer.build_command(Path("d/720/index.m3u8"), Path("d/720.mp4"))

        assert cmd == [str(ffmpeg), "-y", "-i", str(Path("d/720/index.m3u8")), "-c", "copy", str(Path("d/720.mp4"))]

    def test_yields_opened_segments(self, ffmpeg: Path) -> None:
        with patch("gtvfetch.core.muxer.subprocess.Popen", return_value=fake_process(FFMPEG_OUTPUT)):
            events = list(MediaMuxer(str(ffmpeg)).remux(Path("in.m3u8"), Path("out.mp4")))

        assert events == ["0.ts", "1.ts"]

    def test_run_reports_progress(self, ffmpeg: Path) -> None:
        seen = []
        with patch("gtvfetch.core.muxer.subprocess.Popen", return_value=fake_process(FFMPEG_OUTPUT)):
            out = MediaMuxer(str(ffmpeg)).run(Path("in.m3u8"), Path("out.mp4"), on_progress=seen.append)

        assert out == Path("out.mp4")
        assert seen == ["0.ts", "1.ts"]

    def test_failure_status_raises(self, ffmpeg: Path) -> None:
        process = fake_process("in.m3u8: Invalid data found when processing input\n", returncode=1)
        with patch("gtvfetch.core.muxer.subprocess.Popen", return_value=process):
            with pytest.raises(RemuxError, match="Invalid data found"):
                MediaMuxer(str(ffmpeg)).run(Path("in.m3u8"), Path("out.mp4"))

    def test_start_failure_raises(self, ffmpeg: Path) -> None:
        with patch("gtvfetch.core.muxer.subprocess.Popen", side_effect=PermissionError("not executable")):
            with pytest.raises(RemuxError, match="not executable"):
                MediaMuxer(str(ffmpeg)).run(Path("in.m3u8"), Path("out.mp4"))
