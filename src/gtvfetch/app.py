"""Main entry point for the gtvfetch command line tool."""

import argparse
import logging
from pathlib import Path

from .core import GronkhClient, GtvFetchError, MediaMuxer, VodDownloader
from .ui import ConsoleReporter
from .utils import Config, log_error, setup_logging
from .version import __version__

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gtvfetch",
        description="Gronkh.TV VOD Downloader",
    )
    parser.add_argument("--vod-id", required=True, help="VOD ID")
    parser.add_argument("--ffmpeg-path", default=None,
                        help="Path to ffmpeg; empty or missing disables MP4 conversion")
    parser.add_argument("--output-path", default=None,
                        help="Directory under which {vod_id}/ is created (default: gronkhtv)")
    parser.add_argument("--quality", action="append", default=None, metavar="LABEL",
                        help="Only download this quality, e.g. 1080p60 (repeatable)")
    parser.add_argument("--max-workers", type=int, default=None,
                        help="Concurrent segment downloads")
    parser.add_argument("--timeout", type=float, default=None,
                        help="Per-request timeout in seconds")
    parser.add_argument("--retries", type=int, default=None,
                        help="Retries for transient network failures")
    parser.add_argument("--config", type=Path, default=None,
                        help="Settings file (default: ~/gtvfetch_settings.json)")
    parser.add_argument("--no-progress", action="store_true", help="Disable progress bars")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _pick(value, fallback):
    return fallback if value is None else value


def main(argv=None) -> int:
    """Main entry point. Returns the process exit status."""
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    config = Config(args.config)
    output_root = Path(_pick(args.output_path, config.output_path))
    reporter = ConsoleReporter(disable=args.no_progress)

    try:
        logger.info(f"Starting gtvfetch v{__version__}")
        with GronkhClient(timeout=_pick(args.timeout, config.timeout),
                          retries=_pick(args.retries, config.retries)) as client:
            downloader = VodDownloader(
                client,
                output_root,
                muxer=MediaMuxer(_pick(args.ffmpeg_path, config.ffmpeg_path)),
                max_workers=_pick(args.max_workers, config.max_workers),
                qualities=args.quality,
                reporter=reporter,
            )
            states = downloader.run(args.vod_id)
        logger.info("Finished VOD %s: %s", args.vod_id, ", ".join(s.label for s in states))
        return 0
    except KeyboardInterrupt:
        logger.info("Download interrupted by user")
        return 130
    except GtvFetchError as e:
        logger.error(f"Download of VOD {args.vod_id} failed: {e}")
        log_error(f"Download of VOD {args.vod_id} failed", e)
        return 1
    except Exception as e:
        logger.error(f"Unexpected error while downloading VOD {args.vod_id}: {e}", exc_info=True)
        log_error(f"Unexpected error while downloading VOD {args.vod_id}", e)
        return 1
    finally:
        reporter.close()


if __name__ == "__main__":
    raise SystemExit(main())
