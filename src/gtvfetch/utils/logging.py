"""Logging utilities."""

import logging
import sys
import traceback
from pathlib import Path

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(verbose: bool = False):
    """Send log records to stdout, DEBUG level when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stdout)
        ],
    )
    # urllib3 retry chatter is only interesting when debugging
    logging.getLogger("urllib3").setLevel(logging.DEBUG if verbose else logging.WARNING)


def log_error(msg: str, exc: Exception | None = None, log_file: Path | None = None):
    """Log errors to a file for debugging."""
    if log_file is None:
        log_file = Path.home() / "gtvfetch_error.log"
    try:
        with open(log_file, "a", encoding="utf-8") as f:
            f.write(f"{msg}\n")
            if exc:
                f.write("".join(traceback.format_exception(exc)))
            f.write("-" * 50 + "\n")
    except OSError:
        pass  # Can't log if logging fails
