"""TIFF validation and TIFF -> JPEG conversion."""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Optional, Protocol

from .errors import CodecError, InvalidInputError, OutputExistsError
from .models import ConversionOptions, ConversionOutcome, ImageInfo, RunStatistics
from .utils import JPEG_SUFFIX, ensure_dir, has_tiff_extension

log = logging.getLogger(__name__)


class ImageCodec(Protocol):
    def probe(self, path: Path) -> ImageInfo: ...

    def encode_jpeg(self, src: Path, dest: Path, quality: int) -> Path: ...


def validate_tiff(codec: ImageCodec, path: Path) -> None:
    """Raise ``InvalidInputError`` unless *path* is a readable TIFF file."""
    if not path.is_file():
        raise InvalidInputError(f"Input file does not exist or is not a file: {path}")
    if not has_tiff_extension(path):
        raise InvalidInputError(
            f"Input file is not a valid TIFF image (extension {path.suffix!r})"
        )
    try:
        info = codec.probe(path)
    except CodecError as exc:
        raise InvalidInputError(
            f"Input file is not a valid TIFF image: {exc}"
        ) from exc
    if info.format.lower() != "tiff":
        raise InvalidInputError(
            f"Input file is not a valid TIFF image (detected {info.format or 'unknown'})"
        )


def output_path_for(path: Path, output_dir: Optional[Path] = None) -> Path:
    """Return ``<output_dir or input dir>/<stem>.jpg``."""
    target_dir = output_dir if output_dir is not None else path.parent
    return target_dir / f"{path.stem}{JPEG_SUFFIX}"


def convert_single_tiff(
    codec: ImageCodec,
    path: Path,
    options: ConversionOptions,
) -> ConversionOutcome:
    """Convert one TIFF and return its outcome.

    Never raises; validation and codec errors are captured inside the
    returned outcome.
    """
    path = Path(path)
    log.debug("convert_single_tiff: START - %s", path)
    t0 = time.perf_counter()
    try:
        validate_tiff(codec, path)
        dest = output_path_for(path, options.output_dir)
        if dest.exists() and not options.overwrite:
            raise OutputExistsError(
                f"Output file already exists: {dest} (use --overwrite to replace it)"
            )
        ensure_dir(dest.parent)
        codec.encode_jpeg(path, dest, options.quality)
    except Exception as exc:
        duration_ms = round((time.perf_counter() - t0) * 1000, 2)
        log.error("convert_single_tiff: ERROR - %s: %s", path.name, exc)
        return ConversionOutcome(
            input_path=str(path),
            output_path="",
            succeeded=False,
            error=str(exc) or exc.__class__.__name__,
            duration_ms=duration_ms,
        )

    duration_ms = round((time.perf_counter() - t0) * 1000, 2)
    log.info("convert_single_tiff: %s -> %s in %sms", path.name, dest.name, duration_ms)
    return ConversionOutcome(
        input_path=str(path),
        output_path=str(dest),
        succeeded=True,
        duration_ms=duration_ms,
    )


def convert_tiffs(
    codec: ImageCodec,
    paths: list[Path],
    options: ConversionOptions,
) -> RunStatistics:
    """Convert *paths* in order; one failed file never stops the batch."""
    stats = RunStatistics()

    iterable = paths
    if options.progress:
        from tqdm import tqdm

        iterable = tqdm(paths, desc="Converting TIFFs", unit="file")

    for path in iterable:
        stats.record(convert_single_tiff(codec, path, options))

    log.info(
        "Conversion: %s succeeded, %s failed (%.1fms)",
        stats.successful,
        stats.failed,
        stats.total_duration_ms,
    )
    return stats
