"""Quality label handling and the minimal HLS parsing the service needs.

Only two kinds of playlist lines matter here: variant URLs in the master
playlist (lines starting with ``https``) and segment filenames in a
variant playlist (lines ending in ``.ts``). Everything else is ignored.
"""

from typing import List

from .errors import PlaylistError
from .models import VariantDescriptor, VariantLocation

SEGMENT_BASE_TEMPLATE = "https://01.cdn.vod.farm/transcode/{transcode_id}/{quality}/"

# Positions inside url.split("/") for
# https://<host>/transcode/<id>/<quality>/index.m3u8
TRANSCODE_ID_INDEX = 4
QUALITY_INDEX = 5

DEFAULT_FRAMERATE = "30"

# quality tier -> (bandwidth, resolution)
_TIERS = {
    "1080": (6000000, "1920x1080"),
    "720": (2600000, "1080x720"),
}
_FALLBACK_TIER = (1000000, "640x360")


def describe_variant(label: str) -> VariantDescriptor:
    """Derive master playlist attributes from a label like ``1080p60`` or ``720``.

    Unknown tiers fall back to the lowest bandwidth/resolution instead of
    failing.
    """
    parts = label.split("p", 1)
    quality = parts[0]
    has_framerate = len(parts) == 2
    framerate = parts[1] if has_framerate else DEFAULT_FRAMERATE
    bandwidth, resolution = _TIERS.get(quality, _FALLBACK_TIER)
    name = label if has_framerate else f"{quality}p"

    return VariantDescriptor(
        quality=quality,
        framerate=framerate,
        bandwidth=bandwidth,
        resolution=resolution,
        name=name,
    )


def parse_variant_urls(master_text: str) -> List[str]:
    """Return the variant playlist URLs of a master playlist, in order."""
    return [line for line in master_text.splitlines() if line.startswith("https")]


def locate_variant(url: str) -> VariantLocation:
    """Split a variant playlist URL into its transcode id and quality label."""
    parts = url.split("/")
    if len(parts) <= QUALITY_INDEX:
        raise PlaylistError(f"Unexpected variant playlist URL: {url}")
    return VariantLocation(
        transcode_id=parts[TRANSCODE_ID_INDEX],
        quality=parts[QUALITY_INDEX],
    )


def segment_base_url(location: VariantLocation) -> str:
    return SEGMENT_BASE_TEMPLATE.format(
        transcode_id=location.transcode_id,
        quality=location.quality,
    )


def parse_segments(playlist_text: str) -> List[str]:
    """Return every ``.ts`` line of a variant playlist, duplicates included."""
    return [line for line in playlist_text.splitlines() if line.endswith(".ts")]
