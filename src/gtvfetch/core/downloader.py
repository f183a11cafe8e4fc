"""Segment acquisition for one quality, multi-threaded and resumable."""

import concurrent.futures
import logging
import threading
from pathlib import Path
from typing import Callable, Optional, Set

from .client import GronkhClient
from .errors import PlaylistError, StorageError
from .models import VariantState
from .variants import parse_segments

logger = logging.getLogger(__name__)


class SegmentDownloader:
    """Makes sure every segment of a variant playlist exists on disk.

    Segments already present are skipped without touching the network, so
    rerunning after an abort resumes at segment granularity. Each segment is
    written to a ``.part`` file first and renamed once complete.
    """

    def __init__(self, client: GronkhClient, max_workers: int = 4,
                 progress_callback: Optional[Callable[[int, int, str], None]] = None):
        self.client = client
        self.max_workers = max(1, max_workers)
        self.progress_callback = progress_callback

        self._stop_event = threading.Event()
        self._lock = threading.Lock()
        self._in_flight: Set[str] = set()
        self._done = 0
        self._total = 0

    def ensure_segments(self, playlist_text: str, base_url: str, local_dir: Path) -> VariantState:
        """Downloads all missing segments of ``playlist_text`` into ``local_dir``."""
        local_dir = Path(local_dir)
        segments = parse_segments(playlist_text)
        for name in segments:
            if Path(name).name != name:
                raise PlaylistError(f"Refusing segment outside {local_dir}: {name}")
        state = VariantState(label=local_dir.name, directory=local_dir, segments=segments)

        try:
            local_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError(f"Failed to create output directory {local_dir}: {e}") from e

        self._stop_event.clear()
        self._in_flight.clear()
        self._done = 0
        self._total = len(segments)
        logger.debug("%d segments listed for %s", self._total, local_dir)

        with concurrent.futures.ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            futures = [
                executor.submit(self._fetch_segment, base_url + name, local_dir / name)
                for name in segments
            ]
            try:
                for future in concurrent.futures.as_completed(futures):
                    future.result()
            except BaseException:
                # KeyboardInterrupt included: drop queued segments
                self.stop()
                executor.shutdown(wait=True, cancel_futures=True)
                raise

        return state

    def stop(self):
        """Stop scheduling further segment downloads."""
        self._stop_event.set()

    def _fetch_segment(self, url: str, path: Path):
        if self._stop_event.is_set():
            return

        with self._lock:
            claimed = path.name not in self._in_flight
            if claimed:
                self._in_flight.add(path.name)

        # A duplicate playlist entry is handled by whoever claimed it first.
        if claimed and not path.exists():
            data = self.client.fetch_bytes(url)
            part_path = path.with_name(f"{path.name}.part")
            try:
                part_path.write_bytes(data)
                part_path.replace(path)
            except OSError as e:
                raise StorageError(f"Failed to write segment {path}: {e}") from e
            logger.debug("Downloaded %s", path)

        self._report_progress(path.name)

    def _report_progress(self, name: str):
        with self._lock:
            self._done += 1
            done = self._done
        if self.progress_callback:
            self.progress_callback(done, self._total, name)
