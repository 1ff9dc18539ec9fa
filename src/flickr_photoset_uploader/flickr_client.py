"""Flickr API client used by the photoset uploader."""

import logging
from pathlib import Path
from typing import Any, Callable, Iterator

import flickrapi

from flickr_photoset_uploader.models import Photo, Photoset

logger = logging.getLogger(__name__)

# Largest page size accepted by the photosets API
MAX_PER_PAGE = 500


class FlickrUploadError(Exception):
    """Raised when Flickr answers an upload without a photo id."""

    pass


class FlickrClient:
    """Thin wrapper around flickrapi exposing the calls the uploader needs."""

    def __init__(
        self,
        api_key: str,
        api_secret: str,
        verifier_prompt: Callable[[str], str] = input,
        per_page: int = MAX_PER_PAGE,
    ) -> None:
        """Initialize Flickr client.

        Args:
            api_key: Flickr API key
            api_secret: Flickr API secret
            verifier_prompt: Called with the authorization URL during the
                OAuth flow, must return the verifier code the user entered
            per_page: Page size used when listing photosets and photos
        """
        self.api_key = api_key
        self.api_secret = api_secret
        self.verifier_prompt = verifier_prompt
        self.per_page = per_page
        self._flickr = flickrapi.FlickrAPI(
            api_key, api_secret, format="parsed-json", store_token=True
        )
        self._authenticated = False

    def authenticate(self) -> None:
        """Make sure a token with write permission is available.

        Runs the out-of-band OAuth flow when the stored token is missing or
        lacks write permission.
        """
        if self._authenticated:
            return
        if not self._flickr.token_valid(perms="write"):
            logger.info("No valid Flickr token found, starting authorization")
            self._flickr.get_request_token(oauth_callback="oob")
            authorize_url = self._flickr.auth_url(perms="write")
            verifier = self.verifier_prompt(authorize_url)
            self._flickr.get_access_token(str(verifier).strip())
            logger.info("Flickr authorization complete")
        self._authenticated = True

    @property
    def api(self) -> flickrapi.FlickrAPI:
        """Get the authenticated flickrapi instance."""
        self.authenticate()
        return self._flickr

    def list_photosets(self) -> list[Photoset]:
        """Return all titled photosets of the authenticated user.

        Untitled photosets can never match a photoset name, so they are left out.
        """
        photosets = []
        for item in self._paginate(self.api.photosets.getList, "photosets", "photoset"):
            title = item.get("title", {}).get("_content", "")
            if not title:
                logger.debug(f"Ignoring untitled photoset {item['id']}")
                continue
            photosets.append(Photoset(id=str(item["id"]), title=title))
        return photosets

    def list_photos(self, photoset_id: str) -> list[Photo]:
        """Return all photos in a photoset.

        Args:
            photoset_id: Photoset to list

        Returns:
            Photos in photoset order
        """
        return [
            Photo(id=str(item["id"]), title=item.get("title", ""))
            for item in self._paginate(
                self.api.photosets.getPhotos, "photoset", "photo", photoset_id=photoset_id
            )
        ]

    def upload(self, path: Path, title: str) -> str:
        """Upload a file to Flickr.

        Args:
            path: Path to the photo file
            title: Title given to the new photo

        Returns:
            Photo ID

        Raises:
            FlickrUploadError: If the response carries no photo id
            flickrapi.exceptions.FlickrError: If Flickr rejects the upload
        """
        # The upload endpoint only answers in XML
        response = self.api.upload(filename=str(path), title=title, format="etree")
        photo_id = response.findtext("photoid")
        if not photo_id:
            raise FlickrUploadError(f"Flickr returned no photo id for {path.name}")
        return photo_id.strip()

    def create_photoset(self, title: str, primary_photo_id: str) -> str:
        """Create a photoset with a first photo.

        Returns:
            Photoset ID
        """
        result = self.api.photosets.create(title=title, primary_photo_id=primary_photo_id)
        photoset_id = str(result["photoset"]["id"])
        logger.info(f"Created photoset '{title}' with ID: {photoset_id}")
        return photoset_id

    def add_photo(self, photoset_id: str, photo_id: str) -> None:
        """Add an existing photo to a photoset."""
        self.api.photosets.addPhoto(photoset_id=photoset_id, photo_id=photo_id)

    def _paginate(
        self, method: Callable[..., dict[str, Any]], container: str, key: str, **params: Any
    ) -> Iterator[dict[str, Any]]:
        """Yield items from every page of a paginated API method."""
        page = 1
        while True:
            result = method(page=page, per_page=self.per_page, **params)[container]
            yield from result.get(key, [])
            if page >= int(result.get("pages", 1)):
                break
            page += 1
