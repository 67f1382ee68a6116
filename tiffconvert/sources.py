"""TIFF discovery on the local filesystem and Google Drive integration."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional, Protocol

from .errors import (
    CredentialsError,
    InputNotFoundError,
    RemoteDownloadError,
    RemoteListError,
    RemoteUnavailableError,
)
from .models import DriveFile
from .utils import DRIVE_SCOPES, TIFF_MIME_TYPES, has_tiff_extension

log = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Local filesystem
# ---------------------------------------------------------------------------


def find_tiff_files(directory: Path, recursive: bool = False) -> list[Path]:
    """List ``.tif``/``.tiff`` files in *directory*, depth-first when *recursive*.

    Symlinks and entries that are neither regular files nor directories are
    ignored.
    """
    found: list[Path] = []
    for entry in sorted(directory.iterdir(), key=lambda p: p.name):
        if entry.is_symlink():
            log.debug("Skipping symlink: %s", entry)
        elif entry.is_file():
            if has_tiff_extension(entry):
                found.append(entry)
        elif entry.is_dir():
            if recursive:
                found.extend(find_tiff_files(entry, recursive=True))
        else:
            log.debug("Skipping non-regular entry: %s", entry)
    return found


def expand_local_path(path: Path | str, recursive: bool = False) -> list[Path]:
    """Turn a local locator into candidate files.

    A file is returned as-is (validation happens at conversion time); a
    directory is scanned for TIFFs.
    """
    resolved = Path(path).expanduser().resolve()
    if not resolved.exists():
        raise InputNotFoundError(f"Path does not exist: {path}")
    if resolved.is_file():
        return [resolved]
    if resolved.is_dir():
        return find_tiff_files(resolved, recursive=recursive)
    return []


# ---------------------------------------------------------------------------
# Google Drive API
# ---------------------------------------------------------------------------


class RemoteStorage(Protocol):
    def is_ready(self) -> bool: ...

    def list_files(self, folder_id: str) -> list[DriveFile]: ...

    def download_file(self, file_id: str, dest: Path) -> Path: ...


def authenticate_drive(credentials_file: Path, token_file: Path):
    """OAuth2 authentication with token caching."""
    from google.auth.transport.requests import Request
    from google.oauth2.credentials import Credentials
    from google_auth_oauthlib.flow import InstalledAppFlow

    creds = None
    if token_file.exists():
        creds = Credentials.from_authorized_user_file(str(token_file), DRIVE_SCOPES)
    if not creds or not creds.valid:
        if creds and creds.expired and creds.refresh_token:
            creds.refresh(Request())
        else:
            if not credentials_file.exists():
                raise CredentialsError(
                    f"Credentials file not found: {credentials_file}\n"
                    "  1. Go to Google Cloud Console -> APIs & Services -> Credentials\n"
                    "  2. Create OAuth 2.0 Client ID (Desktop app)\n"
                    "  3. Download the JSON and pass it with --credentials"
                )
            flow = InstalledAppFlow.from_client_secrets_file(
                str(credentials_file), DRIVE_SCOPES
            )
            creds = flow.run_local_server(port=0)
        token_file.parent.mkdir(parents=True, exist_ok=True)
        token_file.write_text(creds.to_json())
        log.info("Saved Drive token to %s", token_file)
    return creds


def _tiff_query(folder_id: str) -> str:
    mime_terms = " or ".join(f"mimeType='{mime}'" for mime in TIFF_MIME_TYPES)
    return (
        f"'{folder_id}' in parents and "
        f"({mime_terms} or name contains '.tif' or name contains '.tiff') "
        "and trashed=false"
    )


class DriveClient:
    """Thin wrapper over a Drive v3 ``service`` resource."""

    def __init__(self, service: Optional[Any] = None, page_size: int = 100):
        self._service = service
        self.page_size = page_size

    def is_ready(self) -> bool:
        return self._service is not None

    def list_files(self, folder_id: str) -> list[DriveFile]:
        """List TIFF candidates directly inside *folder_id* (non-recursive)."""
        results: list[DriveFile] = []
        page_token = None
        try:
            while True:
                response = (
                    self._service.files()
                    .list(
                        q=_tiff_query(folder_id),
                        spaces="drive",
                        fields="nextPageToken, files(id, name, mimeType, size)",
                        pageToken=page_token,
                        pageSize=self.page_size,
                    )
                    .execute()
                )
                results.extend(
                    DriveFile.from_api(item) for item in response.get("files", [])
                )
                page_token = response.get("nextPageToken")
                if not page_token:
                    break
        except Exception as exc:
            raise RemoteListError(
                f"Failed to list files in folder {folder_id}: {exc}"
            ) from exc
        return results

    def download_file(self, file_id: str, dest: Path) -> Path:
        """Stream the bytes of *file_id* into *dest*."""
        from googleapiclient.http import MediaIoBaseDownload

        try:
            request = self._service.files().get_media(fileId=file_id)
            with open(dest, "wb") as f:
                downloader = MediaIoBaseDownload(f, request)
                done = False
                while not done:
                    _status, done = downloader.next_chunk()
        except Exception as exc:
            if dest.is_file():
                dest.unlink()
            raise RemoteDownloadError(
                f"Failed to download file {file_id}: {exc}"
            ) from exc
        return dest


def build_drive_client(credentials_file: Path, token_file: Path) -> DriveClient:
    """Authenticate and return a ready ``DriveClient``."""
    from googleapiclient.discovery import build

    creds = authenticate_drive(credentials_file, token_file)
    service = build("drive", "v3", credentials=creds, cache_discovery=False)
    return DriveClient(service)


def fetch_drive_folder(
    client: RemoteStorage,
    folder_id: str,
    staging_dir: Path,
) -> list[Path]:
    """Download every TIFF listed in *folder_id* into *staging_dir*.

    Downloads run one at a time. A single failed download aborts the whole
    folder. Files sharing a name overwrite each other in *staging_dir*.
    """
    if not client.is_ready():
        raise RemoteUnavailableError(
            "Google Drive service not properly initialized. "
            "Please provide valid credentials."
        )

    log.info("Listing TIFFs in Drive folder: %s", folder_id)
    drive_files = client.list_files(folder_id)
    log.info("Found %s remote file(s) in %s", len(drive_files), folder_id)

    staged: list[Path] = []
    for drive_file in drive_files:
        # Drive names may contain "/"; keep every download inside staging_dir.
        dest = staging_dir / Path(drive_file.name).name
        log.info("  Downloading: %s", drive_file.name)
        client.download_file(drive_file.id, dest)
        staged.append(dest)
    return staged
