"""Console presentation for gtvfetch."""

from .console import ConsoleReporter

__all__ = ["ConsoleReporter"]
