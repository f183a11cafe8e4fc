"""Local HLS manifests: verbatim variant playlists and a synthesized master."""

import logging
from pathlib import Path
from typing import Iterable

from .errors import StorageError
from .variants import describe_variant

logger = logging.getLogger(__name__)

PLAYLIST_NAME = "index.m3u8"


def write_variant_playlist(local_dir: Path, playlist_text: str) -> Path:
    """Writes the fetched variant playlist unchanged next to its segments."""
    path = Path(local_dir) / PLAYLIST_NAME
    _write_text(path, playlist_text)
    return path


def build_master_playlist(labels: Iterable[str]) -> str:
    """Synthesizes a master playlist referencing ``{label}/index.m3u8`` per quality.

    Lines are joined with CRLF like the upstream master playlist.
    """
    lines = ["#EXTM3U", "#EXT-X-VERSION:3"]
    seen = set()
    for label in labels:
        if label in seen:
            continue
        seen.add(label)
        lines.append(describe_variant(label).stream_inf())
        lines.append(f"{label}/{PLAYLIST_NAME}")
    return "\r\n".join(lines)


def write_master_playlist(vod_dir: Path, labels: Iterable[str]) -> Path:
    path = Path(vod_dir) / PLAYLIST_NAME
    _write_text(path, build_master_playlist(labels))
    logger.info("Wrote master playlist %s", path)
    return path


def _write_text(path: Path, text: str):
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        # newline="" keeps CRLF/LF exactly as given
        with open(path, 'w', encoding='utf-8', newline='') as f:
            f.write(text)
    except OSError as e:
        raise StorageError(f"Failed to write playlist {path}: {e}") from e
