"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest
from rich.progress import Progress

from flickr_photoset_uploader.models import Photo, Photoset


class FakeFlickrClient:
    """In-memory stand-in for FlickrClient recording every remote call."""

    def __init__(self, photosets: dict[str, list[Photo]] | None = None, upload_failures: int = 0):
        self.photosets: list[Photoset] = []
        self.photos: dict[str, list[Photo]] = {}
        for index, (title, photos) in enumerate((photosets or {}).items(), start=1):
            photoset = Photoset(id=f"set_{index}", title=title)
            self.photosets.append(photoset)
            self.photos[photoset.id] = list(photos)

        self.upload_failures = upload_failures
        self.upload_attempts = 0
        self.uploaded: list[Photo] = []
        self.calls: list[str] = []

    def list_photosets(self) -> list[Photoset]:
        self.calls.append("list_photosets")
        return list(self.photosets)

    def list_photos(self, photoset_id: str) -> list[Photo]:
        self.calls.append("list_photos")
        return list(self.photos[photoset_id])

    def upload(self, path: Path, title: str) -> str:
        self.calls.append("upload")
        self.upload_attempts += 1
        if self.upload_attempts <= self.upload_failures:
            raise ConnectionError(f"upload of {path.name} failed")
        photo = Photo(id=f"photo_{len(self.uploaded) + 1}", title=title)
        self.uploaded.append(photo)
        return photo.id

    def create_photoset(self, title: str, primary_photo_id: str) -> str:
        self.calls.append("create_photoset")
        photoset = Photoset(id=f"set_{len(self.photosets) + 1}", title=title)
        self.photosets.append(photoset)
        self.photos[photoset.id] = [self._uploaded_photo(primary_photo_id)]
        return photoset.id

    def add_photo(self, photoset_id: str, photo_id: str) -> None:
        self.calls.append("add_photo")
        self.photos[photoset_id].append(self._uploaded_photo(photo_id))

    def photoset_titles(self, title: str) -> list[str]:
        """Titles of the photos in the photoset with the given title."""
        photoset = next(p for p in self.photosets if p.title == title)
        return [photo.title for photo in self.photos[photoset.id]]

    def _uploaded_photo(self, photo_id: str) -> Photo:
        return next(photo for photo in self.uploaded if photo.id == photo_id)


@pytest.fixture
def fake_client_class() -> type[FakeFlickrClient]:
    """Return the fake Flickr client class."""
    return FakeFlickrClient


@pytest.fixture
def progress() -> Progress:
    """Return a progress display that tracks tasks without rendering."""
    return Progress(disable=True)


@pytest.fixture
def temp_photos_dir(tmp_path: Path) -> Path:
    """Create a temporary directory with test photos.

    Structure:
        temp_dir/
            holiday/
                beach.jpg
                dunes.png
                sunset.JPG
                notes.txt
                nested/
    """
    photos_dir = tmp_path / "holiday"
    photos_dir.mkdir()
    (photos_dir / "beach.jpg").write_bytes(b"fake jpg content")
    (photos_dir / "dunes.png").write_bytes(b"fake png content")
    (photos_dir / "sunset.JPG").write_bytes(b"fake jpg content")
    (photos_dir / "notes.txt").write_text("not a photo")
    (photos_dir / "nested").mkdir()
    return photos_dir


@pytest.fixture
def api_credentials() -> tuple[str, str]:
    """Return a fake API key and secret for testing."""
    return "test_api_key_123", "test_api_secret_456"
