"""Utility functions and classes for gtvfetch."""

from .config import Config
from .paths import vod_directory, variant_directory
from .logging import log_error, setup_logging

__all__ = ["Config", "vod_directory", "variant_directory", "log_error", "setup_logging"]
