"""
Base artefact source with the shared download and extract pipeline.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path

import httpx

from ..config import get_settings
from ..core.download import DownloadExecutor
from ..core.extract import ArchiveExtractor
from ..core.matching import MatchingPolicy
from ..core.exceptions import ArtefactError
from ..models.build import SHORT_HASH_LENGTH, ResolutionInputs

logger = logging.getLogger(__name__)


def create_http_client() -> httpx.AsyncClient:
    """Create an HTTP client configured from settings."""
    settings = get_settings()
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.request_timeout),
        headers={"User-Agent": settings.user_agent},
    )


def select_candidate(
    candidates: dict[str, str], matching_policy: MatchingPolicy
) -> tuple[str, str]:
    """
    Pick the policy's preferred candidate, or the first one if it declines.

    ``candidates`` must not be empty.
    """
    preferred = matching_policy.choose_preferred(list(candidates))
    if preferred is not None and preferred in candidates:
        return preferred, candidates[preferred]

    name = next(iter(candidates))
    return name, candidates[name]


class ArtefactSource(ABC):
    """
    Abstract base class for all artefact sources.

    A source discovers the download URL of a prebuilt archive for one commit
    on one host. Downloading and extracting are identical for every host.
    """

    def __init__(
        self,
        branch: str,
        commit_hash: str,
        source_url: str,
        client: httpx.AsyncClient | None = None,
        extractor: ArchiveExtractor | None = None,
    ) -> None:
        if len(commit_hash) < SHORT_HASH_LENGTH:
            raise ArtefactError(
                f"Commit hash {commit_hash!r} for {source_url} must be at least "
                f"{SHORT_HASH_LENGTH} characters"
            )

        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.branch = branch
        self.commit_hash = commit_hash
        self.source_url = source_url
        self._owns_client = client is None
        self.client = client if client is not None else create_http_client()
        self.extractor = extractor or ArchiveExtractor()

    async def __aenter__(self) -> ArtefactSource:
        return self

    async def __aexit__(
        self, exc_type: type, exc_val: Exception, exc_tb: object
    ) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the HTTP client if this source created it."""
        if self._owns_client and not self.client.is_closed:
            await self.client.aclose()

    def resolution_inputs(self, platform: str) -> ResolutionInputs:
        return ResolutionInputs(
            source_base_url=self.source_url,
            branch=self.branch,
            commit_hash=self.commit_hash,
            platform=platform,
        )

    @abstractmethod
    async def resolve_download_url(
        self, matching_policy: MatchingPolicy, platform: str
    ) -> str:
        """
        Discover the archive URL for the configured commit.

        Args:
            matching_policy: Decides which names match and which is preferred
            platform: Platform label, used in error messages

        Returns:
            Absolute URL of the selected archive

        Raises:
            NoCandidateFound: If the host has no matching archive
        """
        pass

    async def download(self, url: str, destination_directory: str | Path) -> Path:
        """Download ``url`` into ``destination_directory`` and return the file."""
        return await DownloadExecutor(self.client).download(url, destination_directory)

    async def extract(
        self, file_path: str | Path, destination_folder: str | Path
    ) -> None:
        """Unpack a downloaded archive into ``destination_folder``."""
        await self.extractor.extract(file_path, destination_folder)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.source_url!r})"
