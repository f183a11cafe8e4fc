"""Downloads every quality of a VOD and writes the local playlist mirror."""

import logging
from pathlib import Path
from typing import Iterable, List, Optional

from ..utils.paths import variant_directory, vod_directory
from .client import GronkhClient
from .downloader import SegmentDownloader
from .errors import PlaylistError
from .manifest import write_master_playlist, write_variant_playlist
from .models import VariantState, VideoInfo
from .muxer import MediaMuxer
from .variants import locate_variant, parse_segments, parse_variant_urls, segment_base_url

logger = logging.getLogger(__name__)


class ProgressReporter:
    """Receives progress notifications from VodDownloader. Does nothing by default."""

    def video_info(self, info: VideoInfo):
        pass

    def variant_started(self, label: str, total: int):
        pass

    def segment_done(self, label: str, done: int, total: int, name: str):
        pass

    def variant_finished(self, state: VariantState):
        pass

    def remux_started(self, state: VariantState):
        pass

    def remux_progress(self, state: VariantState, segment: str):
        pass

    def remux_finished(self, state: VariantState, output_path: Path):
        pass

    def remux_skipped(self, state: VariantState):
        pass


class VodDownloader:
    """Runs the whole download of one VOD, one quality at a time."""

    def __init__(self, client: GronkhClient, output_root: Path,
                 muxer: Optional[MediaMuxer] = None, max_workers: int = 4,
                 qualities: Optional[Iterable[str]] = None,
                 reporter: Optional[ProgressReporter] = None):
        self.client = client
        self.output_root = Path(output_root)
        self.muxer = muxer or MediaMuxer()
        self.max_workers = max_workers
        self.qualities = set(qualities or ())
        self.reporter = reporter or ProgressReporter()

    def run(self, vod_id: str) -> List[VariantState]:
        """Downloads all (selected) qualities and writes the master playlist."""
        info = self.client.fetch_video_info(vod_id)
        logger.info("Episode %s: %s (%s)", info.episode, info.title, info.created_at)
        self.reporter.video_info(info)

        playlist_url = self.client.fetch_playlist_url(vod_id)
        logger.debug("Master playlist: %s", playlist_url)
        variant_urls = parse_variant_urls(self.client.fetch_text(playlist_url))
        if not variant_urls:
            raise PlaylistError(f"No variants found in master playlist {playlist_url}")

        if not self.muxer.available:
            logger.info("FFmpeg not found or not specified. Skipping HLS => MP4 conversion")

        states = []
        for url in variant_urls:
            if self.qualities and locate_variant(url).quality not in self.qualities:
                logger.debug("Skipping variant %s", url)
                continue
            states.append(self.process_variant(vod_id, url))

        if not states:
            raise PlaylistError(
                f"None of the requested qualities {sorted(self.qualities)} are available"
            )

        write_master_playlist(vod_directory(self.output_root, vod_id),
                              [state.label for state in states])
        return states

    def process_variant(self, vod_id: str, variant_url: str) -> VariantState:
        """Fetches one quality: segments, local playlist and optional MP4."""
        location = locate_variant(variant_url)
        label = location.quality
        local_dir = variant_directory(self.output_root, vod_id, label)

        playlist_text = self.client.fetch_text(variant_url)

        downloader = SegmentDownloader(
            self.client,
            max_workers=self.max_workers,
            progress_callback=lambda done, total, name: self.reporter.segment_done(label, done, total, name),
        )
        self.reporter.variant_started(label, len(parse_segments(playlist_text)))
        state = downloader.ensure_segments(playlist_text, segment_base_url(location), local_dir)
        write_variant_playlist(local_dir, playlist_text)
        logger.info("Quality %s: %d segments in %s", label, len(state.segments), local_dir)
        self.reporter.variant_finished(state)

        if self.muxer.available:
            self._remux(state)
        else:
            self.reporter.remux_skipped(state)
        return state

    def _remux(self, state: VariantState):
        self.reporter.remux_started(state)
        output_path = self.muxer.run(
            state.playlist_path,
            state.remux_path,
            on_progress=lambda segment: self.reporter.remux_progress(state, segment),
        )
        logger.info("Remuxed %s to %s", state.label, output_path)
        self.reporter.remux_finished(state, output_path)
