"""Progress bars for the terminal using tqdm."""

from pathlib import Path
from typing import Optional

from tqdm import tqdm

from ..core import ProgressReporter, VariantState, VideoInfo


class ConsoleReporter(ProgressReporter):
    """Shows one bar per quality while downloading and one per remux."""

    def __init__(self, disable: bool = False, file=None):
        self.disable = disable
        self.file = file
        self._bar: Optional[tqdm] = None

    def video_info(self, info: VideoInfo):
        if not self.disable:
            tqdm.write(f"#{info.episode} {info.title} ({info.created_at})", file=self.file)

    def variant_started(self, label: str, total: int):
        self._open(total, f"Downloading {label}", "seg")

    def segment_done(self, label: str, done: int, total: int, name: str):
        if self._bar is not None:
            self._bar.update(1)

    def variant_finished(self, state: VariantState):
        self.close()

    def remux_started(self, state: VariantState):
        self._open(len(state.segments), f"Remuxing {state.label}", "seg")

    def remux_progress(self, state: VariantState, segment: str):
        if self._bar is not None:
            self._bar.update(1)

    def remux_finished(self, state: VariantState, output_path: Path):
        self.close()
        if not self.disable:
            tqdm.write(f"Wrote {output_path}", file=self.file)

    def _open(self, total: int, desc: str, unit: str):
        self.close()
        self._bar = tqdm(total=total, desc=desc, unit=unit, disable=self.disable, file=self.file)

    def close(self):
        if self._bar is not None:
            self._bar.close()
            self._bar = None
