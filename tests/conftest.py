"""Shared fixtures for the tiffconvert test suite.

Images are generated with Pillow inside ``tmp_path``; the Drive API is
replaced by in-memory fakes.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest
from PIL import Image

from tiffconvert.errors import RemoteDownloadError, RemoteListError
from tiffconvert.models import DriveFile

# ---------------------------------------------------------------------------
# Configure verbose logging for test debugging
# ---------------------------------------------------------------------------
logging.basicConfig(
    level=logging.DEBUG,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    stream=sys.stderr,
    force=True,
)
log = logging.getLogger("conftest")


def make_tiff(
    path: Path,
    size: tuple[int, int] = (16, 12),
    mode: str = "RGB",
    color=(200, 30, 60),
) -> Path:
    """Write a small solid-colour TIFF to *path*."""
    path.parent.mkdir(parents=True, exist_ok=True)
    Image.new(mode, size, color).save(path, format="TIFF")
    return path


def make_png(path: Path, size: tuple[int, int] = (16, 12)) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    Image.new("RGB", size, (10, 120, 240)).save(path, format="PNG")
    return path


class FakeDrive:
    """In-memory stand-in for ``DriveClient``.

    ``folders`` maps folder IDs to ``{name: bytes}``. Every download records
    whether its destination directory existed at the time.
    """

    def __init__(
        self,
        folders: dict[str, dict[str, bytes]] | None = None,
        *,
        ready: bool = True,
        fail_list: bool = False,
        fail_download: str | None = None,
    ):
        self.folders = folders or {}
        self.ready = ready
        self.fail_list = fail_list
        self.fail_download = fail_download
        self.list_calls: list[str] = []
        self.downloads: list[Path] = []
        self.staging_seen: list[tuple[Path, bool]] = []

    def is_ready(self) -> bool:
        return self.ready

    def list_files(self, folder_id: str) -> list[DriveFile]:
        self.list_calls.append(folder_id)
        if self.fail_list:
            raise RemoteListError(f"Failed to list files in folder {folder_id}")
        return [
            DriveFile(id=f"{folder_id}:{name}", name=name, mime_type="image/tiff")
            for name in self.folders.get(folder_id, {})
        ]

    def download_file(self, file_id: str, dest: Path) -> Path:
        self.staging_seen.append((dest.parent, dest.parent.is_dir()))
        folder_id, name = file_id.split(":", 1)
        if name == self.fail_download:
            raise RemoteDownloadError(f"Failed to download file {file_id}")
        dest.write_bytes(self.folders[folder_id][name])
        self.downloads.append(dest)
        return dest


@pytest.fixture
def tiff_bytes(tmp_path: Path) -> bytes:
    """Encoded bytes of a valid TIFF, for seeding fake Drive folders."""
    src = make_tiff(tmp_path / "_seed" / "seed.tif")
    return src.read_bytes()


@pytest.fixture
def tiff_tree(tmp_path: Path) -> Path:
    """A directory holding qualifying and non-qualifying files at two depths.

    Top level: a.tif, b.TIFF (qualifying), notes.txt, c.png.
    sub/: d.tiff, sub/deeper/e.tif (qualifying), sub/f.jpg.
    """
    root = tmp_path / "scans"
    make_tiff(root / "a.tif")
    make_tiff(root / "b.TIFF")
    (root / "notes.txt").write_text("not an image")
    make_png(root / "c.png")
    make_tiff(root / "sub" / "d.tiff")
    make_tiff(root / "sub" / "deeper" / "e.tif")
    (root / "sub" / "f.jpg").write_bytes(b"\xff\xd8\xff")
    return root


@pytest.fixture
def tmp_output(tmp_path: Path) -> Path:
    """Return a temporary output directory for a single test."""
    return tmp_path / "output"
