"""Data models for the Flickr photoset uploader."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Photoset:
    """Represents a Flickr photoset (album)."""

    id: str
    title: str

    def __post_init__(self) -> None:
        """Validate photoset data."""
        if not self.id:
            raise ValueError("Photoset id cannot be empty")
        if not self.title:
            raise ValueError("Photoset title cannot be empty")


@dataclass(frozen=True)
class Photo:
    """A photo already stored on Flickr."""

    id: str
    title: str


@dataclass(frozen=True)
class UploadJob:
    """One local file being processed by the uploader."""

    path: Path

    @property
    def filename(self) -> str:
        return self.path.name

    @property
    def base_filename(self) -> str:
        """Filename without its extension, used as the photo title."""
        return self.path.stem

    @property
    def size(self) -> int:
        return self.path.stat().st_size
