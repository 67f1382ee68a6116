"""Shared data models for the conversion pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Optional


class InputKind(str, Enum):
    LOCAL = "local"
    REMOTE_FOLDER = "remote-folder"


@dataclass(frozen=True)
class ClassifiedInput:
    """A user-supplied locator after classification."""

    kind: InputKind
    raw_value: str
    folder_id: Optional[str] = None

    def __post_init__(self) -> None:
        if (self.kind is InputKind.REMOTE_FOLDER) != bool(self.folder_id):
            raise ValueError(
                f"folder_id must be set only for remote folders: {self!r}"
            )


@dataclass
class DriveFile:
    """One entry of a Google Drive folder listing."""

    id: str
    name: str
    mime_type: str = ""
    size: Optional[int] = None

    @classmethod
    def from_api(cls, resource: dict[str, Any]) -> "DriveFile":
        size = resource.get("size")
        return cls(
            id=resource["id"],
            name=resource["name"],
            mime_type=resource.get("mimeType", ""),
            size=int(size) if size is not None else None,
        )


@dataclass(frozen=True)
class ImageInfo:
    format: str
    width: int
    height: int


@dataclass
class ConversionOptions:
    """Settings shared by every file of a run."""

    quality: int = 80
    output_dir: Optional[Path] = None
    recursive: bool = False
    overwrite: bool = False
    staging_root: Optional[Path] = None
    progress: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.quality, bool) or not isinstance(self.quality, int):
            raise ValueError(f"quality must be an integer, got {self.quality!r}")
        if not 1 <= self.quality <= 100:
            raise ValueError(f"quality must be between 1 and 100, got {self.quality}")
        if self.output_dir is not None:
            self.output_dir = Path(self.output_dir)
        if self.staging_root is not None:
            self.staging_root = Path(self.staging_root)


@dataclass(frozen=True)
class ConversionOutcome:
    """Result of one attempted TIFF -> JPEG conversion."""

    input_path: str
    output_path: str
    succeeded: bool
    error: Optional[str] = None
    duration_ms: float = 0.0


@dataclass
class RunStatistics:
    """Aggregate counters for one pipeline run."""

    total: int = 0
    successful: int = 0
    failed: int = 0
    total_duration_ms: float = 0.0
    outcomes: list[ConversionOutcome] = field(default_factory=list, repr=False)

    def record(self, outcome: ConversionOutcome) -> None:
        self.outcomes.append(outcome)
        self.total += 1
        if outcome.succeeded:
            self.successful += 1
        else:
            self.failed += 1
        self.total_duration_ms += outcome.duration_ms

    @property
    def failures(self) -> list[ConversionOutcome]:
        return [o for o in self.outcomes if not o.succeeded]
