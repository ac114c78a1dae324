"""
Strategy-agnostic download of a remote archive to local disk.
"""

import logging
from pathlib import Path, PurePosixPath
from urllib.parse import unquote, urlparse

import httpx

from .exceptions import DownloadFailed

logger = logging.getLogger(__name__)


def archive_file_name(url: str) -> str:
    """Return the basename of the URL path."""
    return PurePosixPath(unquote(urlparse(url).path)).name


class DownloadExecutor:
    """
    Fetches a URL with a single GET and writes the body to a directory.

    The HTTP client is owned by the caller.
    """

    def __init__(self, client: httpx.AsyncClient) -> None:
        self.client = client

    async def download(self, url: str, destination_directory: str | Path) -> Path:
        """
        Download ``url`` into ``destination_directory``.

        Args:
            url: Absolute archive URL
            destination_directory: Directory to write into, created if missing

        Returns:
            Path of the written file, named after the URL basename

        Raises:
            DownloadFailed: On transport errors, non-2xx responses or write errors
        """
        try:
            file_name = archive_file_name(url)
        except ValueError as e:
            raise DownloadFailed(url, reason=f"invalid URL: {e}") from e
        if not file_name:
            raise DownloadFailed(url, reason="URL has no file name")

        logger.info(f"Downloading {url}...")
        try:
            response = await self.client.get(url, follow_redirects=True)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise DownloadFailed(url, reason=str(e)) from e

        if not response.is_success:
            raise DownloadFailed(url, status_code=response.status_code)

        directory = Path(destination_directory)
        file_path = directory / file_name
        try:
            directory.mkdir(parents=True, exist_ok=True)
            file_path.write_bytes(response.content)
        except OSError as e:
            logger.error(f"Error writing file {file_path}: {e}")
            raise DownloadFailed(url, reason=f"write failed: {e}") from e

        logger.info(f"Downloaded {file_name} ({len(response.content)} bytes)")
        return file_path
