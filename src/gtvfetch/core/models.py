"""Data models for VOD metadata and per-quality download state."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List

CODECS = "avc1.4D402A,mp4a.40.2"


@dataclass(frozen=True)
class VideoInfo:
    """Metadata for a single VOD, used for display only."""
    title: str
    preview_url: str
    created_at: str
    episode: int


@dataclass(frozen=True)
class VariantLocation:
    """Path components taken from a variant playlist URL."""
    transcode_id: str
    quality: str  # e.g. "1080p60"


@dataclass(frozen=True)
class VariantDescriptor:
    """Stream attributes for one entry of the synthesized master playlist."""
    quality: str
    framerate: str
    bandwidth: int
    resolution: str  # e.g. "1920x1080"
    name: str

    def stream_inf(self) -> str:
        return (
            f"#EXT-X-STREAM-INF:BANDWIDTH={self.bandwidth},"
            f"RESOLUTION={self.resolution},FRAMERATE={self.framerate},"
            f"CODECS=\"{CODECS}\",NAME=\"{self.name}\""
        )


@dataclass
class VariantState:
    """Segments of one quality and the directory holding them."""
    label: str
    directory: Path
    segments: List[str] = field(default_factory=list)

    @property
    def playlist_path(self) -> Path:
        return self.directory / "index.m3u8"

    @property
    def remux_path(self) -> Path:
        return self.directory.with_name(f"{self.directory.name}.mp4")
