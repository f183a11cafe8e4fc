"""HLS to MP4 remuxing using FFmpeg."""

import logging
import os
import re
import subprocess
from collections import deque
from pathlib import Path
from typing import Callable, Iterator, Optional

from .errors import RemuxError

logger = logging.getLogger(__name__)

# ffmpeg's hls demuxer logs: [hls @ 0x...] Opening 'path/0.ts' for reading
_OPENING_SEGMENT = re.compile(r"Opening '([^']+\.ts)' for reading")


class MediaMuxer:
    """Repackages a local HLS playlist into a single MP4 without re-encoding."""

    def __init__(self, ffmpeg_path: Optional[str] = None):
        self.ffmpeg_path = ffmpeg_path or ""

    @property
    def available(self) -> bool:
        """True if a configured ffmpeg executable exists."""
        return bool(self.ffmpeg_path) and Path(self.ffmpeg_path).exists()

    def build_command(self, input_manifest: Path, output_path: Path) -> list:
        return [
            self.ffmpeg_path, '-y',
            '-i', str(input_manifest),
            '-c', 'copy',
            str(output_path),
        ]

    def remux(self, input_manifest: Path, output_path: Path) -> Iterator[str]:
        """Runs ffmpeg and yields the name of every segment it opens."""
        cmd = self.build_command(input_manifest, output_path)
        logger.debug("Running %s", " ".join(cmd))

        # On Windows, prevent console window popping up
        startupinfo = None
        if os.name == 'nt':
            startupinfo = subprocess.STARTUPINFO()
            startupinfo.dwFlags |= subprocess.STARTF_USESHOWWINDOW

        try:
            process = subprocess.Popen(
                cmd,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                stdin=subprocess.DEVNULL,
                text=True,
                errors='replace',
                startupinfo=startupinfo,
            )
        except OSError as e:
            raise RemuxError(f"Could not start ffmpeg at {self.ffmpeg_path}: {e}") from e

        tail = deque(maxlen=20)
        with process:
            for line in process.stdout:
                line = line.rstrip()
                tail.append(line)
                match = _OPENING_SEGMENT.search(line)
                if match:
                    yield Path(match.group(1)).name
            returncode = process.wait()

        if returncode != 0:
            output = "\n".join(tail)
            raise RemuxError(f"FFmpeg exited with status {returncode}: {output}")

    def run(self, input_manifest: Path, output_path: Path,
            on_progress: Optional[Callable[[str], None]] = None) -> Path:
        """Remuxes to completion, reporting each opened segment to ``on_progress``."""
        for segment in self.remux(input_manifest, output_path):
            if on_progress:
                on_progress(segment)
        return output_path
