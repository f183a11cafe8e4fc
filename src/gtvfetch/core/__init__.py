"""Core functionality for gtvfetch."""

from .models import (
    VideoInfo,
    VariantLocation,
    VariantDescriptor,
    VariantState,
)
from .errors import (
    GtvFetchError,
    ApiError,
    DownloadError,
    PlaylistError,
    StorageError,
    RemuxError,
)
from .client import GronkhClient
from .downloader import SegmentDownloader
from .muxer import MediaMuxer
from .pipeline import ProgressReporter, VodDownloader

__all__ = [
    "VideoInfo",
    "VariantLocation",
    "VariantDescriptor",
    "VariantState",
    "GtvFetchError",
    "ApiError",
    "DownloadError",
    "PlaylistError",
    "StorageError",
    "RemuxError",
    "GronkhClient",
    "SegmentDownloader",
    "MediaMuxer",
    "ProgressReporter",
    "VodDownloader",
]
