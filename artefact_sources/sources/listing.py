"""
Artefact source for mirrors serving JSON directory listings.
"""

import httpx

from ..config import get_settings
from ..core.exceptions import NoCandidateFound
from ..core.extract import ArchiveExtractor
from ..core.matching import MatchingPolicy
from .base import ArtefactSource, select_candidate
from .crawler import DirectoryCrawler


class ListingHostSource(ArtefactSource):
    """
    Artefact source for Caddy file servers using the JSON directory API.

    The branch directory is searched before the mirror root and the first
    listing with any candidate decides the result.
    """

    def __init__(
        self,
        branch: str,
        commit_hash: str,
        source_url: str,
        client: httpx.AsyncClient | None = None,
        extractor: ArchiveExtractor | None = None,
        max_depth: int | None = None,
    ) -> None:
        super().__init__(branch, commit_hash, source_url, client, extractor)
        self.max_depth = (
            max_depth if max_depth is not None else get_settings().crawl_max_depth
        )
        self.crawler = DirectoryCrawler(self.client)

    async def resolve_download_url(
        self, matching_policy: MatchingPolicy, platform: str
    ) -> str:
        inputs = self.resolution_inputs(platform)
        self.logger.info(
            f"Looking for files with hash {inputs.commit_hash} or {inputs.short_hash}"
        )

        for listing_url in inputs.listing_urls:
            self.logger.info(f"Searching in {listing_url}")

            candidates = await self.crawler.crawl(
                listing_url,
                matching_policy,
                inputs.commit_hash,
                inputs.short_hash,
                max_depth=self.max_depth,
            )

            if candidates:
                name, url = select_candidate(candidates, matching_policy)
                self.logger.info(f"Selected file: {name} from {listing_url}")
                return url

            self.logger.debug(f"No matching files found in {listing_url}")

        raise NoCandidateFound(platform, self.source_url)
