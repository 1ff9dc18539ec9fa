"""Configuration for a photoset upload run."""

import logging
from dataclasses import dataclass, field

DEFAULT_RETRY_ATTEMPTS = 20
DEFAULT_RETRY_DELAY = 2.5


@dataclass(frozen=True)
class UploaderConfig:
    """Settings shared by the uploader and its collaborators.

    Attributes:
        photoset_name: Title of the photoset photos are added to
        api_key: Flickr API key
        api_secret: Flickr API secret
        retry_attempts: Maximum attempts for a single upload
        retry_delay: Seconds to sleep between upload attempts
        logger: Logger receiving the uploader's progress messages
    """

    photoset_name: str
    api_key: str = ""
    api_secret: str = ""
    retry_attempts: int = DEFAULT_RETRY_ATTEMPTS
    retry_delay: float = DEFAULT_RETRY_DELAY
    logger: logging.Logger = field(
        default_factory=lambda: logging.getLogger("flickr_photoset_uploader.uploader"),
        compare=False,
        repr=False,
    )

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if not self.photoset_name:
            raise ValueError("Photoset name cannot be empty")
        if self.retry_attempts < 1:
            raise ValueError("retry_attempts must be at least 1")
        if self.retry_delay < 0:
            raise ValueError("retry_delay cannot be negative")
