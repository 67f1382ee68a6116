"""Shrink a directory of JPEGs by a constant scale factor.

Usage:
    python -m tiffconvert.downsize
    python -m tiffconvert.downsize --input-dir out/full --output-dir out/small --scale 0.1
"""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass
from pathlib import Path

from PIL import Image, UnidentifiedImageError
from tqdm import tqdm

from .utils import ensure_dir

log = logging.getLogger(__name__)

DEFAULT_INPUT_DIR = Path("out") / "full"
DEFAULT_OUTPUT_DIR = Path("out") / "small"
DEFAULT_SCALE = 0.07
DEFAULT_QUALITY = 85


@dataclass
class DownsizeSummary:
    resized: int = 0
    skipped: int = 0
    failed: int = 0


def downsize_images(
    input_dir: Path = DEFAULT_INPUT_DIR,
    output_dir: Path = DEFAULT_OUTPUT_DIR,
    scale: float = DEFAULT_SCALE,
    quality: int = DEFAULT_QUALITY,
) -> DownsizeSummary:
    """Resize every ``.jpg`` in *input_dir* into *output_dir*."""
    if scale <= 0:
        raise ValueError(f"scale must be positive, got {scale}")
    ensure_dir(output_dir)
    jpg_files = sorted(
        p for p in input_dir.iterdir() if p.is_file() and p.suffix.lower() == ".jpg"
    )
    summary = DownsizeSummary()

    bar = tqdm(jpg_files, desc="Downsizing", unit="file")
    for path in bar:
        bar.set_postfix_str(path.name)
        try:
            with Image.open(path) as img:
                width, height = img.size
                if not width or not height:
                    summary.skipped += 1
                    continue
                new_size = (
                    max(1, round(width * scale)),
                    max(1, round(height * scale)),
                )
                resized = img.convert("RGB").resize(new_size, Image.LANCZOS)
                resized.save(output_dir / path.name, "JPEG", quality=quality)
            summary.resized += 1
        except (UnidentifiedImageError, OSError, ValueError) as exc:
            log.warning("Downsize failed for %s: %s", path.name, exc)
            summary.failed += 1

    log.info(
        "Downsize: %s resized, %s skipped, %s failed -> %s",
        summary.resized,
        summary.skipped,
        summary.failed,
        output_dir,
    )
    return summary


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Downsize converted JPEGs")
    parser.add_argument("--input-dir", type=Path, default=DEFAULT_INPUT_DIR)
    parser.add_argument("--output-dir", type=Path, default=DEFAULT_OUTPUT_DIR)
    parser.add_argument("--scale", type=float, default=DEFAULT_SCALE)
    parser.add_argument("--quality", type=int, default=DEFAULT_QUALITY)
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    if not args.input_dir.is_dir():
        log.error("Input directory not found: %s", args.input_dir)
        return 1
    summary = downsize_images(args.input_dir, args.output_dir, args.scale, args.quality)
    print("All images downsized!")
    return 1 if summary.failed else 0


if __name__ == "__main__":
    raise SystemExit(main())
