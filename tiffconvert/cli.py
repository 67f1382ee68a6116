"""CLI entrypoint for TIFF -> JPEG conversion.

Usage:
    python -m tiffconvert ./scans
    python -m tiffconvert ./scans --recursive --quality 90 --output ./jpeg
    python -m tiffconvert https://drive.google.com/drive/folders/<ID> --credentials credentials.json --output ./jpeg
    python -m tiffconvert ./scans --overwrite --progress

Drive inputs are staged in a temporary directory; without --output their
JPEGs land there too and are removed when the run ends.
"""

from __future__ import annotations

import argparse
import logging
from logging.handlers import RotatingFileHandler
import time
from pathlib import Path

from .utils import DEFAULT_QUALITY

log = logging.getLogger(__name__)


def _setup_logging(
    *,
    verbose: bool,
    detailed_logging: bool,
    log_file: Path | None,
) -> None:
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    root_level = logging.DEBUG if verbose else logging.INFO
    root_logger.setLevel(root_level)

    console_fmt = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    detailed_fmt = (
        "%(asctime)s | %(levelname)-8s | %(name)s | "
        "%(threadName)s | %(filename)s:%(lineno)d | %(message)s"
    )
    formatter = logging.Formatter(
        detailed_fmt if detailed_logging else console_fmt,
        "%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(root_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=20 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(detailed_fmt, "%Y-%m-%d %H:%M:%S"))
        root_logger.addHandler(file_handler)

    logging.getLogger("googleapiclient.discovery_cache").setLevel(logging.ERROR)
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("PIL").setLevel(logging.WARNING)


def _quality(value: str) -> int:
    try:
        quality = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"quality must be an integer, got {value!r}"
        ) from None
    if not 1 <= quality <= 100:
        raise argparse.ArgumentTypeError("Quality must be between 1 and 100")
    return quality


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="photo-convert",
        description=(
            "Convert TIFF images to JPG format from local files or Google Drive"
        ),
    )
    parser.add_argument(
        "paths",
        nargs="+",
        help="TIFF files, directories, or Google Drive folder URLs to convert",
    )
    parser.add_argument(
        "--quality",
        "-q",
        type=_quality,
        default=DEFAULT_QUALITY,
        help=f"JPEG quality 1-100 (default: {DEFAULT_QUALITY})",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Output directory (defaults to each input's directory)",
    )
    parser.add_argument(
        "--recursive",
        "-r",
        action="store_true",
        help="Process subdirectories recursively",
    )
    parser.add_argument(
        "--overwrite",
        action="store_true",
        help="Overwrite existing JPG files (otherwise they are reported as failures)",
    )
    parser.add_argument(
        "--credentials",
        type=Path,
        default=None,
        help="Google OAuth2 credentials JSON (enables Google Drive inputs)",
    )
    parser.add_argument(
        "--token",
        type=Path,
        default=None,
        help="Google Drive token JSON (default: token.json next to --credentials)",
    )
    parser.add_argument(
        "--staging-dir",
        type=Path,
        default=None,
        help="Parent directory for temporary Drive downloads (default: system temp)",
    )
    parser.add_argument(
        "--progress",
        action="store_true",
        help="Show a progress bar while converting",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "--detailed-logging",
        action="store_true",
        help="Enable detailed logging (thread, file/line)",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Optional rotating log file path",
    )
    args = parser.parse_args(argv)
    if args.credentials is not None and args.token is None:
        args.token = args.credentials.parent / "token.json"
    return args


def main(argv: list[str] | None = None) -> int:
    """Run the conversion and return the process exit code."""
    from .credentials import inspect_credentials
    from .errors import TiffConvertError
    from .models import ConversionOptions
    from .runner import run
    from .sources import build_drive_client

    args = parse_args(argv)
    _setup_logging(
        verbose=args.verbose,
        detailed_logging=args.detailed_logging,
        log_file=args.log_file,
    )
    log.debug(
        "Options: quality=%s output=%s recursive=%s overwrite=%s credentials=%s token=%s",
        args.quality,
        args.output,
        args.recursive,
        args.overwrite,
        args.credentials,
        args.token,
    )

    options = ConversionOptions(
        quality=args.quality,
        output_dir=args.output,
        recursive=args.recursive,
        overwrite=args.overwrite,
        staging_root=args.staging_dir,
        progress=args.progress,
    )

    drive = None
    if args.credentials is not None:
        log.info("Loading Google Drive credentials from: %s", args.credentials)
        try:
            report = inspect_credentials(args.credentials)
            log.debug("Credentials client type: %s", report.kind)
            drive = build_drive_client(args.credentials, args.token)
        except Exception as exc:
            log.error("Error initializing Google Drive service: %s", exc)
            return 1
        log.info("Google Drive service initialized")

    overall_t0 = time.perf_counter()
    try:
        stats = run(args.paths, options, drive=drive)
    except (TiffConvertError, OSError) as exc:
        log.error("Error: %s", exc)
        return 1

    print()
    print("=== Conversion Summary ===")
    print(f"Total files: {stats.total}")
    print(f"Successful: {stats.successful}")
    print(f"Failed: {stats.failed}")
    print(f"Total time: {stats.total_duration_ms / 1000:.2f}s")
    log.debug("Total runtime: %.2fs", time.perf_counter() - overall_t0)
    if stats.failed:
        log.warning("Failed files:")
        for outcome in stats.failures:
            log.warning(
                "  - %s: %s", outcome.input_path, (outcome.error or "unknown")[:200]
            )
        return 1
    return 0
