"""Command-line interface for the Flickr photoset uploader."""

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler

from flickr_photoset_uploader.config import (
    DEFAULT_RETRY_ATTEMPTS,
    DEFAULT_RETRY_DELAY,
    UploaderConfig,
)
from flickr_photoset_uploader.flickr_client import FlickrClient
from flickr_photoset_uploader.uploader import PhotosetUploader, create_progress
from flickr_photoset_uploader.utils import scan_photos

app = typer.Typer(
    name="flickr-photoset-uploader",
    help="Upload photos to a Flickr photoset, skipping ones already uploaded",
    add_completion=False,
)
console = Console()


def setup_logging(verbose: bool) -> None:
    """Configure logging with Rich handler.

    Args:
        verbose: Enable verbose (DEBUG) logging
    """
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, console=console)],
        force=True,
    )


def prompt_verifier(authorize_url: str) -> str:
    """Ask the user to authorize the application and enter the verifier."""
    console.print("Please authorize this app in your browser:")
    console.print(f"  {authorize_url}", markup=False)
    return typer.prompt("Verifier code")


def run_upload(directory: Path, config: UploaderConfig) -> int:
    """Upload all photos in a directory to the configured photoset.

    Args:
        directory: Directory containing the photos
        config: Upload settings

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    logger = logging.getLogger(__name__)

    try:
        photos = scan_photos(directory)
        if not photos:
            logger.warning(f"No photos found in {directory}")
            return 0

        client = FlickrClient(
            config.api_key, config.api_secret, verifier_prompt=prompt_verifier
        )
        uploader = PhotosetUploader(client, config, progress=create_progress(console))
        uploader.upload_files(photos)
        return 0

    except Exception as e:
        logger.error(f"Upload failed: {e}", exc_info=True)
        return 1


@app.command()
def upload(
    directory: Path = typer.Argument(
        ...,
        help="Directory containing the photos to upload",
        exists=True,
        file_okay=False,
        dir_okay=True,
        readable=True,
    ),
    photoset: str = typer.Option(
        None,
        "--photoset",
        "-s",
        help="Photoset title (defaults to the directory name)",
    ),
    api_key: str = typer.Option(
        None,
        "--api-key",
        "-k",
        envvar="FLICKR_API_KEY",
        help="Flickr API key (or set FLICKR_API_KEY env var)",
    ),
    api_secret: str = typer.Option(
        None,
        "--api-secret",
        envvar="FLICKR_API_SECRET",
        help="Flickr API secret (or set FLICKR_API_SECRET env var)",
    ),
    retries: int = typer.Option(
        DEFAULT_RETRY_ATTEMPTS,
        "--retries",
        min=1,
        help="Maximum attempts per photo upload",
    ),
    retry_delay: float = typer.Option(
        DEFAULT_RETRY_DELAY,
        "--retry-delay",
        min=0.0,
        help="Seconds to wait between upload attempts",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging",
    ),
) -> None:
    """Upload photos in DIRECTORY to a Flickr photoset.

    The photoset is created with the first uploaded photo when it does not
    exist yet. Photos whose name without extension matches a photo title
    already in the photoset are skipped, so an interrupted run can simply be
    started again.
    """
    setup_logging(verbose)

    if not api_key or not api_secret:
        console.print(
            "[red]Error: Flickr API key and secret are required. "
            "Provide via --api-key/--api-secret or FLICKR_API_KEY/FLICKR_API_SECRET "
            "environment variables.[/red]"
        )
        raise typer.Exit(1)

    config = UploaderConfig(
        photoset_name=photoset or directory.resolve().name,
        api_key=api_key,
        api_secret=api_secret,
        retry_attempts=retries,
        retry_delay=retry_delay,
    )
    raise typer.Exit(run_upload(directory, config))


if __name__ == "__main__":
    app()
