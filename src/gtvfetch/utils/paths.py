"""On-disk layout of a downloaded VOD."""

from pathlib import Path


def vod_directory(output_root: Path, vod_id: str) -> Path:
    """``{output_root}/{vod_id}``, home of the master playlist and MP4 files."""
    return Path(output_root) / str(vod_id)


def variant_directory(output_root: Path, vod_id: str, label: str) -> Path:
    """``{output_root}/{vod_id}/{label}``, home of one quality's segments."""
    return vod_directory(output_root, vod_id) / label
