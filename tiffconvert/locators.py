"""Classify user-supplied locators as local paths or Drive folders."""

from __future__ import annotations

import re
from typing import Optional
from urllib.parse import urlparse

from .models import ClassifiedInput, InputKind
from .utils import DRIVE_DOMAIN

# Tried in order; the first match wins.
_FOLDER_ID_PATTERNS = (
    re.compile(r"/folders/([A-Za-z0-9_-]+)"),
    re.compile(r"id=([A-Za-z0-9_-]+)"),
    re.compile(r"/d/([A-Za-z0-9_-]+)"),
)


def extract_folder_id(url: str) -> Optional[str]:
    """Return the folder ID embedded in a Drive URL path/query, if any."""
    for pattern in _FOLDER_ID_PATTERNS:
        match = pattern.search(url)
        if match:
            return match.group(1)
    return None


def classify_locator(value: str, domain: str = DRIVE_DOMAIN) -> ClassifiedInput:
    """Decide whether *value* names a local path or a remote Drive folder.

    Anything that is not a URL on *domain*, or a Drive URL with no
    recognisable folder ID, is returned untouched as a local locator.
    """
    try:
        parsed = urlparse(value)
    except ValueError:
        return ClassifiedInput(kind=InputKind.LOCAL, raw_value=value)

    hostname = parsed.hostname or ""
    if parsed.scheme and parsed.netloc and domain in hostname:
        target = parsed.path
        if parsed.query:
            target = f"{target}?{parsed.query}"
        folder_id = extract_folder_id(target)
        if folder_id:
            return ClassifiedInput(
                kind=InputKind.REMOTE_FOLDER,
                raw_value=value,
                folder_id=folder_id,
            )
    return ClassifiedInput(kind=InputKind.LOCAL, raw_value=value)
