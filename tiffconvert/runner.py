"""Pipeline orchestration: resolve locators, stage remote files, convert."""

from __future__ import annotations

import logging
import tempfile
from pathlib import Path
from typing import Iterable, Optional

from .codec import PillowCodec
from .conversion import ImageCodec, convert_tiffs
from .errors import RemoteServiceMissingError
from .locators import classify_locator
from .models import ConversionOptions, InputKind, RunStatistics
from .sources import RemoteStorage, expand_local_path, fetch_drive_folder
from .utils import STAGING_PREFIX

log = logging.getLogger(__name__)


def collect_candidates(
    inputs: Iterable[str],
    options: ConversionOptions,
    staging_dir: Path,
    drive: Optional[RemoteStorage] = None,
) -> list[Path]:
    """Resolve every locator into a flat list of local candidate files."""
    candidates: list[Path] = []
    for value in inputs:
        classified = classify_locator(value)
        log.info("Processing input: %s (type: %s)", value, classified.kind.value)
        if classified.kind is InputKind.REMOTE_FOLDER:
            if drive is None:
                raise RemoteServiceMissingError(
                    "Google Drive service not initialized. "
                    "Please provide credentials."
                )
            if options.output_dir is None:
                log.warning(
                    "No output directory set for Drive folder %s; its JPEGs are "
                    "written to the staging directory and removed after the run",
                    classified.folder_id,
                )
            candidates.extend(
                fetch_drive_folder(drive, classified.folder_id, staging_dir)
            )
        else:
            candidates.extend(
                expand_local_path(classified.raw_value, recursive=options.recursive)
            )
    return candidates


def run(
    inputs: Iterable[str],
    options: Optional[ConversionOptions] = None,
    *,
    codec: Optional[ImageCodec] = None,
    drive: Optional[RemoteStorage] = None,
) -> RunStatistics:
    """Convert every TIFF reachable from *inputs* and return run statistics.

    The staging directory for Drive downloads lives exactly as long as this
    call and is removed whether the run succeeds or raises. Drive files
    converted without ``options.output_dir`` are written next to their staged
    copies and so do not outlive the run.
    """
    options = options or ConversionOptions()
    if options.staging_root is not None:
        options.staging_root.mkdir(parents=True, exist_ok=True)

    with tempfile.TemporaryDirectory(
        prefix=STAGING_PREFIX,
        dir=options.staging_root,
    ) as tmp:
        staging_dir = Path(tmp)
        log.debug("Staging directory: %s", staging_dir)

        candidates = collect_candidates(inputs, options, staging_dir, drive)
        if not candidates:
            log.warning("No TIFF files found to convert.")
            return RunStatistics()

        log.info("Found %s TIFF file(s) to convert.", len(candidates))
        return convert_tiffs(codec or PillowCodec(), candidates, options)
