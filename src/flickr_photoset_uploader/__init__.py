"""Flickr Photoset Uploader - Upload photos to a Flickr photoset, skipping duplicates."""

__version__ = "0.1.0"

from flickr_photoset_uploader.config import UploaderConfig
from flickr_photoset_uploader.flickr_client import FlickrClient, FlickrUploadError
from flickr_photoset_uploader.models import Photo, Photoset, UploadJob
from flickr_photoset_uploader.retry import rescue_retry
from flickr_photoset_uploader.uploader import PhotosetUploader
from flickr_photoset_uploader.utils import scan_photos

__all__ = [
    "UploaderConfig",
    "FlickrClient",
    "FlickrUploadError",
    "Photo",
    "Photoset",
    "UploadJob",
    "rescue_retry",
    "PhotosetUploader",
    "scan_photos",
]
