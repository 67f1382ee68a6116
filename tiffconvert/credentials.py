"""Inspect a Google OAuth client-secrets file.

Usage:
    python -m tiffconvert.credentials credentials.json
"""

from __future__ import annotations

import argparse
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .errors import CredentialsError

log = logging.getLogger(__name__)


@dataclass
class CredentialsReport:
    path: Path
    kind: str
    client_id: Optional[str] = None
    auth_uri: Optional[str] = None
    keys: list[str] = field(default_factory=list)

    @property
    def recognised(self) -> bool:
        return self.kind in ("installed", "web")


def inspect_credentials(path: Path) -> CredentialsReport:
    """Load *path* and describe the OAuth client it contains."""
    if not path.exists():
        raise CredentialsError(f"Credentials file not found: {path}")
    try:
        with open(path, "r", encoding="utf-8") as fh:
            data = json.load(fh)
    except (json.JSONDecodeError, OSError, ValueError) as exc:
        raise CredentialsError(f"Error reading credentials {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise CredentialsError(f"Credentials file is not a JSON object: {path}")

    for kind in ("installed", "web"):
        section = data.get(kind)
        if isinstance(section, dict):
            return CredentialsReport(
                path=path,
                kind=kind,
                client_id=section.get("client_id"),
                auth_uri=section.get("auth_uri"),
                keys=sorted(data),
            )
    return CredentialsReport(path=path, kind="unknown", keys=sorted(data))


def main(argv: list[str] | None = None) -> int:
    """Print a short report about a credentials file."""
    parser = argparse.ArgumentParser(
        description="Check a Google Drive OAuth credentials file"
    )
    parser.add_argument("credentials", type=Path, help="Path to credentials JSON")
    args = parser.parse_args(argv)

    print(f"Testing credentials file: {args.credentials}")
    try:
        report = inspect_credentials(args.credentials)
    except CredentialsError as exc:
        print(f"Error: {exc}")
        return 1

    print("Credentials file loaded successfully")
    if report.kind == "installed":
        print("Desktop application credentials detected")
    elif report.kind == "web":
        print("Web application credentials detected")
    else:
        print("Unknown credentials format")
        print(f"Available keys: {', '.join(report.keys)}")
        return 1
    print(f"   Client ID: {report.client_id}")
    print(f"   Auth URI: {report.auth_uri}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
