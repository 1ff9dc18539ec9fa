"""Sequential photo uploader organizing photos into a Flickr photoset."""

import time
from pathlib import Path
from typing import Callable, Iterable

from rich.console import Console
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
    TimeRemainingColumn,
)

from flickr_photoset_uploader.config import UploaderConfig
from flickr_photoset_uploader.flickr_client import FlickrClient
from flickr_photoset_uploader.models import Photo, Photoset, UploadJob
from flickr_photoset_uploader.retry import rescue_retry


def create_progress(console: Console | None = None) -> Progress:
    """Build the progress bar shown while uploading."""
    return Progress(
        TextColumn("[bold blue]{task.description}"),
        MofNCompleteColumn(),
        TaskProgressColumn(),
        BarColumn(),
        TextColumn("{task.fields[speed]} KiB/s"),
        TimeElapsedColumn(),
        TimeRemainingColumn(),
        console=console,
    )


def transfer_speed(size: int, elapsed: float) -> float:
    """Return the transfer speed in KiB/s rounded to one decimal."""
    if elapsed <= 0:
        return 0.0
    return round(size / elapsed / 1024, 1)


class PhotosetUploader:
    """Uploads files one by one and adds them to a single photoset."""

    def __init__(
        self,
        client: FlickrClient,
        config: UploaderConfig,
        progress: Progress | None = None,
        clock: Callable[[], float] = time.perf_counter,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """Initialize the uploader and look up the target photoset.

        The lookup is the first remote call, so it also triggers
        authentication of the client.

        Args:
            client: Flickr API client
            config: Upload settings
            progress: Progress display, a new one is created when omitted
            clock: Monotonic clock used to time uploads
            sleep: Sleep function used between upload attempts
        """
        self.client = client
        self.config = config
        self.progress = progress if progress is not None else create_progress()
        self.logger = config.logger
        self._clock = clock
        self._sleep = sleep
        self._photos: list[Photo] | None = None
        self._task_id = None
        self.photoset = self._find_photoset(config.photoset_name)

    @property
    def photoset_name(self) -> str:
        return self.config.photoset_name

    def upload_files(self, file_paths: Iterable[Path]) -> None:
        """Upload files to the photoset, skipping those already present.

        Files are processed in order. A file whose name without extension
        matches the title of a photo in the photoset is skipped. An upload
        that keeps failing after all retries aborts the whole batch.

        Args:
            file_paths: Photo files to upload
        """
        paths = [Path(p) for p in file_paths]
        self.logger.info(
            f"Starting upload of {len(paths)} photos to photoset '{self.photoset_name}'."
        )

        with self.progress:
            # One bar per uploader, reused by later batches
            if self._task_id is None:
                self._task_id = self.progress.add_task("Upload", total=len(paths), speed=0.0)
            else:
                self.progress.reset(self._task_id, total=len(paths), speed=0.0)
            for path in paths:
                job = UploadJob(path)
                self.logger.debug(f"Uploading: {job.filename} ..")

                duplicates = self.photos_by_title(job.base_filename)
                if duplicates:
                    photo_ids = " ".join(photo.id for photo in duplicates)
                    self.logger.info(
                        f"Skipping '{job.filename}', already uploaded! (photo_id = {photo_ids})"
                    )
                else:
                    self._upload_file(job)
                self.progress.advance(self._task_id)

        self.logger.info(
            f"Done uploading {len(paths)} photos to photoset '{self.photoset_name}'."
        )

    def photos_by_title(self, title: str) -> list[Photo]:
        """Return photos in the photoset with the given title.

        The photoset listing is fetched on first use and cached for the
        lifetime of the uploader.
        """
        if self.photoset is None:
            return []
        if self._photos is None:
            self._photos = self.client.list_photos(self.photoset.id)
        return [photo for photo in self._photos if photo.title == title]

    def _upload_file(self, job: UploadJob) -> str:
        """Upload one file, then attach it to the photoset.

        Returns:
            Photo ID
        """
        size = job.size

        start = self._clock()
        photo_id = rescue_retry(
            lambda: self.client.upload(job.path, title=job.base_filename),
            attempts=self.config.retry_attempts,
            delay=self.config.retry_delay,
            sleep=self._sleep,
        )
        elapsed = self._clock() - start
        self.logger.debug(f"Success! (photo_id = {photo_id})")

        speed = transfer_speed(size, elapsed)
        if self._task_id is not None:
            self.progress.update(self._task_id, speed=speed)
        self.logger.debug(f"Speed: {speed}KiB/s")

        self._add_to_photoset(photo_id)
        return photo_id

    def _add_to_photoset(self, photo_id: str) -> None:
        if self.photoset is None:
            self.photoset = self._create_photoset(photo_id)
        else:
            self.logger.debug(f"Adding to existing photoset '{self.photoset_name}'")
            self.client.add_photo(self.photoset.id, photo_id)

    def _create_photoset(self, primary_photo_id: str) -> Photoset:
        self.logger.debug(f"Creating new photoset '{self.photoset_name}'")
        photoset_id = self.client.create_photoset(self.photoset_name, primary_photo_id)
        # The listing can lag behind creation
        return self._find_photoset(self.photoset_name) or Photoset(
            id=photoset_id, title=self.photoset_name
        )

    def _find_photoset(self, name: str) -> Photoset | None:
        return next(
            (photoset for photoset in self.client.list_photosets() if photoset.title == name),
            None,
        )
