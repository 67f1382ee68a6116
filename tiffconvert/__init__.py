"""TIFF -> JPEG conversion from local paths and Google Drive folders.

Public API -- all symbols that tests and external code import live here.
Internally the code is split across focused submodules; this file
re-exports the stable public surface so ``from tiffconvert import X`` works.
"""

from .codec import PillowCodec
from .conversion import (
    convert_single_tiff,
    convert_tiffs,
    output_path_for,
    validate_tiff,
)
from .credentials import CredentialsReport, inspect_credentials
from .downsize import DownsizeSummary, downsize_images
from .errors import (
    CodecError,
    CredentialsError,
    InputNotFoundError,
    InvalidInputError,
    OutputExistsError,
    RemoteDownloadError,
    RemoteListError,
    RemoteServiceMissingError,
    RemoteUnavailableError,
    TiffConvertError,
)
from .locators import classify_locator, extract_folder_id
from .models import (
    ClassifiedInput,
    ConversionOptions,
    ConversionOutcome,
    DriveFile,
    ImageInfo,
    InputKind,
    RunStatistics,
)
from .runner import collect_candidates, run
from .sources import (
    DriveClient,
    authenticate_drive,
    build_drive_client,
    expand_local_path,
    fetch_drive_folder,
    find_tiff_files,
)
from .utils import DEFAULT_QUALITY, DRIVE_DOMAIN, TIFF_EXTENSIONS

__all__ = [
    # Models
    "InputKind",
    "ClassifiedInput",
    "DriveFile",
    "ImageInfo",
    "ConversionOptions",
    "ConversionOutcome",
    "RunStatistics",
    # Errors
    "TiffConvertError",
    "InvalidInputError",
    "OutputExistsError",
    "InputNotFoundError",
    "CodecError",
    "RemoteServiceMissingError",
    "RemoteUnavailableError",
    "RemoteListError",
    "RemoteDownloadError",
    "CredentialsError",
    # Constants
    "DEFAULT_QUALITY",
    "DRIVE_DOMAIN",
    "TIFF_EXTENSIONS",
    # Locators
    "classify_locator",
    "extract_folder_id",
    # Sources
    "find_tiff_files",
    "expand_local_path",
    "authenticate_drive",
    "build_drive_client",
    "DriveClient",
    "fetch_drive_folder",
    # Conversion
    "PillowCodec",
    "validate_tiff",
    "output_path_for",
    "convert_single_tiff",
    "convert_tiffs",
    # Orchestration
    "collect_candidates",
    "run",
    # Utilities
    "downsize_images",
    "DownsizeSummary",
    "inspect_credentials",
    "CredentialsReport",
]
