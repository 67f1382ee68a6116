"""Cross-cutting helpers: constants and path utilities."""

from __future__ import annotations

from pathlib import Path

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

DRIVE_DOMAIN = "drive.google.com"
DRIVE_SCOPES = ["https://www.googleapis.com/auth/drive.readonly"]
TIFF_EXTENSIONS = frozenset({".tif", ".tiff"})
TIFF_MIME_TYPES = ("image/tiff", "image/x-tiff")
JPEG_SUFFIX = ".jpg"
DEFAULT_QUALITY = 80
STAGING_PREFIX = "tiffconvert-"


# ---------------------------------------------------------------------------
# Path helpers
# ---------------------------------------------------------------------------


def has_tiff_extension(path: Path | str) -> bool:
    """Return True when *path* ends in ``.tif`` or ``.tiff`` (any case)."""
    return Path(path).suffix.lower() in TIFF_EXTENSIONS


def ensure_dir(path: Path) -> Path:
    """Create *path* (and parents) if missing and return it."""
    path.mkdir(parents=True, exist_ok=True)
    return path
