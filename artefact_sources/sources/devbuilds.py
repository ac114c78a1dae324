"""
Fallback artefact source for hosts serving plain HTML directory indexes.
"""

from pathlib import PurePosixPath
from urllib.parse import unquote, urljoin, urlparse

import httpx
from bs4 import BeautifulSoup

from ..core.exceptions import NoCandidateFound
from ..core.matching import MatchingPolicy
from .base import ArtefactSource, select_candidate
from .crawler import is_candidate


class DevBuildsSource(ArtefactSource):
    """
    Scrapes anchors from an autoindex page, branch directory first.

    No recursion: only archives linked directly from the page are considered.
    """

    async def _fetch_links(self, page_url: str) -> dict[str, str]:
        """Return file name to absolute URL for every anchor on the page."""
        response = await self.client.get(page_url, follow_redirects=True)
        response.raise_for_status()

        soup = BeautifulSoup(response.text, "html.parser")
        links: dict[str, str] = {}
        for anchor in soup.find_all("a", href=True):
            try:
                absolute_url = urljoin(page_url, anchor["href"])
                name = PurePosixPath(unquote(urlparse(absolute_url).path)).name
            except ValueError:
                continue
            if name:
                links[name] = absolute_url
        return links

    async def resolve_download_url(
        self, matching_policy: MatchingPolicy, platform: str
    ) -> str:
        inputs = self.resolution_inputs(platform)

        for page_url in inputs.listing_urls:
            self.logger.info(f"Searching in {page_url}")
            try:
                links = await self._fetch_links(page_url)
            except (httpx.HTTPError, httpx.InvalidURL) as e:
                self.logger.debug(f"Failed to fetch index page {page_url}: {e}")
                continue

            candidates = {
                name: url
                for name, url in links.items()
                if is_candidate(
                    name, matching_policy, inputs.commit_hash, inputs.short_hash
                )
            }
            if candidates:
                name, url = select_candidate(candidates, matching_policy)
                self.logger.info(f"Selected file: {name} from {page_url}")
                return url

        raise NoCandidateFound(platform, self.source_url)
