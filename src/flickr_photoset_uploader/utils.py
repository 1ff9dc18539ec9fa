"""Utility functions for the Flickr photoset uploader."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

# Supported image extensions
IMAGE_EXTENSIONS = {".jpg", ".jpeg", ".png", ".gif", ".bmp", ".tif", ".tiff", ".heic"}


def is_image_file(path: Path) -> bool:
    """Check if a file is a supported image format.

    Args:
        path: Path to the file to check

    Returns:
        True if the file is a supported image format, False otherwise
    """
    return path.is_file() and path.suffix.lower() in IMAGE_EXTENSIONS


def scan_photos(directory: Path) -> list[Path]:
    """Collect the image files directly inside a directory.

    Args:
        directory: Directory to scan

    Returns:
        Image file paths sorted by name

    Raises:
        FileNotFoundError: If directory doesn't exist
        NotADirectoryError: If directory is not a directory
    """
    if not directory.exists():
        raise FileNotFoundError(f"Directory does not exist: {directory}")

    if not directory.is_dir():
        raise NotADirectoryError(f"Path is not a directory: {directory}")

    photos: list[Path] = []
    for path in sorted(directory.iterdir()):
        if is_image_file(path):
            photos.append(path)
        else:
            logger.debug(f"Skipping non-image entry: {path}")

    logger.info(f"Found {len(photos)} photo(s) in {directory}")
    return photos
