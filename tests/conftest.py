"""Pytest configuration and shared fixtures"""

import json
import threading
from typing import Dict, List, Union

import pytest
import requests


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, body: Union[str, bytes] = b"", status_code: int = 200):
        self.content = body.encode("utf-8") if isinstance(body, str) else body
        self.status_code = status_code

    @property
    def text(self) -> str:
        return self.content.decode("utf-8")

    @property
    def ok(self) -> bool:
        return self.status_code < 400

    def json(self):
        return json.loads(self.text)

    def raise_for_status(self) -> None:
        if not self.ok:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)


class FakeSession:
    """Routes GET requests to canned responses and records every call."""

    def __init__(self, routes: Dict[str, Union[FakeResponse, Exception]] | None = None):
        self.routes = dict(routes or {})
        self.calls: List[str] = []
        self.timeouts: List[float] = []
        self.closed = False
        self._lock = threading.Lock()

    def get(self, url: str, timeout=None, **kwargs):
        with self._lock:
            self.calls.append(url)
            self.timeouts.append(timeout)
        route = self.routes.get(url)
        if route is None:
            return FakeResponse(b"not found", status_code=404)
        if isinstance(route, Exception):
            raise route
        return route

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def fake_session() -> FakeSession:
    """An empty fake session; tests add routes as needed."""
    return FakeSession()


VARIANT_PLAYLIST = (
    "#EXTM3U\n"
    "#EXT-X-VERSION:3\n"
    "#EXT-X-TARGETDURATION:10\n"
    "#EXTINF:10.000,\n"
    "0.ts\n"
    "#EXTINF:10.000,\n"
    "1.ts\n"
    "#EXT-X-ENDLIST\n"
)


@pytest.fixture
def variant_playlist() -> str:
    """A two-segment variant playlist."""
    return VARIANT_PLAYLIST
