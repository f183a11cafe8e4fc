"""gtvfetch - Gronkh.TV VOD downloader."""

from .version import __version__

__all__ = ["__version__"]
