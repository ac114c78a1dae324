"""
Artefact source backed by GitHub release assets.
"""

from typing import Any

import httpx

from ..config import get_settings
from ..core.exceptions import NoCandidateFound
from ..core.extract import ArchiveExtractor
from ..core.matching import MatchingPolicy
from .base import ArtefactSource, select_candidate
from .crawler import is_candidate


class GithubReleaseSource(ArtefactSource):
    """
    Finds the archive among the assets of a repository's recent releases.

    ``source_url`` is the repository API URL, e.g.
    ``https://api.github.com/repos/<owner>/<repo>``. Only the first page of
    releases is inspected.
    """

    def __init__(
        self,
        branch: str,
        commit_hash: str,
        source_url: str,
        client: httpx.AsyncClient | None = None,
        extractor: ArchiveExtractor | None = None,
        token: str | None = None,
        per_page: int | None = None,
    ) -> None:
        super().__init__(branch, commit_hash, source_url, client, extractor)
        settings = get_settings()
        self.token = token if token is not None else settings.github_token
        self.per_page = per_page or settings.github_releases_per_page

    @property
    def releases_url(self) -> str:
        return f"{self.source_url.rstrip('/')}/releases"

    def _headers(self) -> dict[str, str]:
        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
        }
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    async def _fetch_releases(self) -> list[dict[str, Any]]:
        response = await self.client.get(
            self.releases_url,
            headers=self._headers(),
            params={"per_page": self.per_page},
        )
        response.raise_for_status()
        releases = response.json()
        if not isinstance(releases, list):
            raise ValueError("releases response is not a JSON array")
        return releases

    async def resolve_download_url(
        self, matching_policy: MatchingPolicy, platform: str
    ) -> str:
        inputs = self.resolution_inputs(platform)
        self.logger.info(f"Searching releases at {self.releases_url}")

        try:
            releases = await self._fetch_releases()
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
            self.logger.warning(f"Failed to list releases from {self.source_url}: {e}")
            raise NoCandidateFound(platform, self.source_url) from e

        for release in releases:
            if not isinstance(release, dict):
                continue

            candidates: dict[str, str] = {}
            for asset in release.get("assets") or []:
                if not isinstance(asset, dict):
                    continue

                name = asset.get("name", "")
                url = asset.get("browser_download_url")
                if url and is_candidate(
                    name, matching_policy, inputs.commit_hash, inputs.short_hash
                ):
                    candidates[name] = url

            if candidates:
                name, url = select_candidate(candidates, matching_policy)
                self.logger.info(
                    f"Selected file: {name} from release {release.get('tag_name')}"
                )
                return url

        raise NoCandidateFound(platform, self.source_url)
