"""
Error kinds raised while resolving, downloading and extracting artefacts.
"""


class ArtefactError(Exception):
    """Base class for every artefact source failure."""


class ListingUnavailable(ArtefactError):
    """A directory listing could not be fetched or parsed.

    Only raised inside a crawl; the crawler treats the directory as empty.
    """

    def __init__(self, uri: str, reason: str) -> None:
        self.uri = uri
        self.reason = reason
        super().__init__(f"Directory listing unavailable at {uri}: {reason}")


class NoCandidateFound(ArtefactError):
    """No listing yielded a file matching the commit and naming pattern."""

    def __init__(self, platform: str, source_url: str) -> None:
        self.platform = platform
        self.source_url = source_url
        super().__init__(
            f"Zip file not found for platform {platform} from {source_url}"
        )


class DownloadFailed(ArtefactError):
    """The archive could not be fetched or persisted."""

    def __init__(
        self,
        url: str,
        status_code: int | None = None,
        reason: str | None = None,
    ) -> None:
        self.url = url
        self.status_code = status_code
        self.reason = reason
        detail = f"HTTP {status_code}" if status_code is not None else reason
        super().__init__(f"Failed to download {url}: {detail}")


class ExtractionFailed(ArtefactError):
    """The unpacking tool failed or the platform has no tool configured."""

    def __init__(
        self,
        file_path: str,
        stderr: str = "",
        reason: str | None = None,
    ) -> None:
        self.file_path = file_path
        self.stderr = stderr
        self.reason = reason
        detail = reason or f"Error extracting zip file: {stderr}"
        super().__init__(f"Failed to extract {file_path}: {detail}")
