"""Configuration management."""

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULTS = {
    "output_path": "gronkhtv",
    "ffmpeg_path": "",
    "max_workers": 4,
    "timeout": 30,
    "retries": 5,
}


class Config:
    """Manages gtvfetch settings stored as JSON."""

    def __init__(self, config_file: Path = None):
        if config_file is None:
            # Use user's home directory for config
            config_file = Path.home() / "gtvfetch_settings.json"
        self.file = Path(config_file)
        self.data = dict(DEFAULTS)
        self.load()

    def load(self):
        """Load configuration from file."""
        if self.file.exists():
            try:
                with open(self.file, 'r', encoding='utf-8') as f:
                    self.data.update(json.load(f))
            except (OSError, ValueError) as e:
                logger.warning("Ignoring unreadable settings file %s: %s", self.file, e)

    def save(self):
        """Save configuration to file."""
        self.file.parent.mkdir(parents=True, exist_ok=True)
        with open(self.file, 'w', encoding='utf-8') as f:
            json.dump(self.data, f, indent=2)

    @property
    def output_path(self) -> Path:
        """Root directory for downloads."""
        return Path(self.data.get("output_path") or DEFAULTS["output_path"])

    @property
    def ffmpeg_path(self) -> str:
        return self.data.get("ffmpeg_path") or ""

    @property
    def max_workers(self) -> int:
        return self._int("max_workers")

    @property
    def timeout(self) -> float:
        try:
            return float(self.data["timeout"])
        except (KeyError, TypeError, ValueError):
            return float(DEFAULTS["timeout"])

    @property
    def retries(self) -> int:
        return self._int("retries")

    def _int(self, key: str) -> int:
        try:
            return int(self.data[key])
        except (KeyError, TypeError, ValueError):
            return DEFAULTS[key]
