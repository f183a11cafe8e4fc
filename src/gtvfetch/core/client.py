"""Gronkh.TV API and playlist access over HTTP."""

import logging
from typing import Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .errors import ApiError, DownloadError
from .models import VideoInfo

logger = logging.getLogger(__name__)

API_BASE = "https://api.gronkh.tv/v1"
VIDEO_INFO_URL = API_BASE + "/video/info?episode={vod_id}"
PLAYLIST_URL = API_BASE + "/video/playlist?episode={vod_id}"


class GronkhClient:
    """Handles the metadata API calls and raw playlist/segment fetches."""

    def __init__(self, timeout: float = 30, retries: int = 5,
                 session: Optional[requests.Session] = None):
        self.timeout = timeout

        if session is None:
            # Setup Robust Session
            session = requests.Session()
            retry = Retry(
                total=retries,
                backoff_factor=1,
                status_forcelist=[429, 500, 502, 503, 504],
                raise_on_status=False,
            )
            session.mount('https://', HTTPAdapter(max_retries=retry))
            session.mount('http://', HTTPAdapter(max_retries=retry))
        self.session = session

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def close(self):
        self.session.close()

    def fetch_video_info(self, vod_id: str) -> VideoInfo:
        """Fetches title, preview, creation date and episode number of a VOD."""
        data = self._get_json(VIDEO_INFO_URL.format(vod_id=vod_id))
        try:
            return VideoInfo(
                title=data["title"],
                preview_url=data["preview_url"],
                created_at=data["created_at"],
                episode=int(data["episode"]),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise ApiError(f"Unexpected video info response for {vod_id}: {e}") from e

    def fetch_playlist_url(self, vod_id: str) -> str:
        """Resolves a VOD id to the URL of its master playlist."""
        data = self._get_json(PLAYLIST_URL.format(vod_id=vod_id))
        try:
            return data["playlist_url"]
        except (KeyError, TypeError) as e:
            raise ApiError(f"Unexpected playlist response for {vod_id}: {e}") from e

    def fetch_text(self, url: str) -> str:
        """GETs a playlist and returns its body. The status code is not checked."""
        try:
            r = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise DownloadError(f"Failed to fetch {url}: {e}") from e
        if not r.ok:
            logger.warning("GET %s returned status %s", url, r.status_code)
        return r.text

    def fetch_bytes(self, url: str) -> bytes:
        """GETs a media segment. Only successful responses are returned."""
        try:
            r = self.session.get(url, timeout=self.timeout)
            r.raise_for_status()
        except requests.RequestException as e:
            raise DownloadError(f"Failed to fetch {url}: {e}") from e
        return r.content

    def _get_json(self, url: str):
        logger.debug("GET %s", url)
        try:
            r = self.session.get(url, timeout=self.timeout)
            r.raise_for_status()
        except requests.RequestException as e:
            raise ApiError(f"Request to {url} failed: {e}") from e

        try:
            return r.json()
        except ValueError as e:
            raise ApiError(f"Invalid JSON from {url}: {e}") from e
