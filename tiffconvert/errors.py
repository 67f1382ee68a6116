"""Exception hierarchy for the conversion pipeline.

Per-file errors (``InvalidInputError``, ``CodecError``) are captured into
conversion outcomes. Everything else aborts the run.
"""

from __future__ import annotations


class TiffConvertError(Exception):
    """Base class for all pipeline errors."""


class InvalidInputError(TiffConvertError):
    """A candidate file is missing, not a regular file, or not a TIFF."""


class OutputExistsError(InvalidInputError):
    """The JPEG destination exists and overwriting is disabled."""


class InputNotFoundError(TiffConvertError):
    """A local locator names a path that does not exist."""


class CodecError(TiffConvertError):
    """The image codec could not read or write an image."""


class RemoteServiceMissingError(TiffConvertError):
    """A Drive locator was given but no Drive client is configured."""


class RemoteUnavailableError(TiffConvertError):
    """The Drive client exists but is not authenticated."""


class RemoteListError(TiffConvertError):
    """Listing a Drive folder failed."""


class RemoteDownloadError(TiffConvertError):
    """Downloading a Drive file failed."""


class CredentialsError(TiffConvertError):
    """OAuth client credentials are missing or unreadable."""
