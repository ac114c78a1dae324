"""
Bounded recursive crawl over a JSON directory listing API.
"""

import logging
from urllib.parse import urljoin

import httpx

from ..core.exceptions import ListingUnavailable
from ..core.matching import MatchingPolicy
from ..models.listing import DirectoryEntry, parse_listing

logger = logging.getLogger(__name__)

ARCHIVE_EXTENSION = ".zip"
EXCLUDED_SUBSTRING = "wallet"
DEFAULT_MAX_DEPTH = 3


def is_candidate(
    filename: str,
    matching_policy: MatchingPolicy,
    full_hash: str,
    short_hash: str,
) -> bool:
    """
    Apply the candidate filter chain to one file name.

    Order: archive extension, excluded bundle marker, naming pattern,
    then full or short commit hash.
    """
    if not filename.endswith(ARCHIVE_EXTENSION):
        return False

    if EXCLUDED_SUBSTRING in filename:
        return False

    if not matching_policy.matches(filename):
        return False

    return full_hash in filename or short_hash in filename


class DirectoryCrawler:
    """
    Depth-first walk of a Caddy-style JSON directory index.

    Each directory is requested with ``Accept: application/json`` and the
    next sibling is only requested once the previous subtree is finished.
    A directory whose listing cannot be fetched contributes no candidates.
    """

    def __init__(self, client: httpx.AsyncClient) -> None:
        self.client = client

    async def fetch_listing(self, uri: str) -> list[DirectoryEntry]:
        """Fetch and parse one directory listing."""
        try:
            response = await self.client.get(
                uri, headers={"Accept": "application/json"}
            )
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
            raise ListingUnavailable(uri, str(e)) from e

        if not response.is_success:
            raise ListingUnavailable(uri, f"HTTP {response.status_code}")

        try:
            payload = response.json()
        except ValueError as e:
            raise ListingUnavailable(uri, f"invalid JSON: {e}") from e

        return parse_listing(uri, payload)

    async def crawl(
        self,
        base_uri: str,
        matching_policy: MatchingPolicy,
        full_hash: str,
        short_hash: str,
        max_depth: int = DEFAULT_MAX_DEPTH,
        current_depth: int = 0,
    ) -> dict[str, str]:
        """
        Collect archives matching the commit under ``base_uri``.

        Args:
            base_uri: Directory URL, ending with a slash
            matching_policy: Naming pattern check for file names
            full_hash: Full commit hash
            short_hash: Seven character hash prefix
            max_depth: Directories at this depth are not listed
            current_depth: Depth of ``base_uri`` relative to the crawl root

        Returns:
            Mapping of file name to absolute URL
        """
        if current_depth >= max_depth:
            return {}

        candidates: dict[str, str] = {}

        try:
            entries = await self.fetch_listing(base_uri)
        except ListingUnavailable as e:
            logger.debug(f"Failed to fetch directory listing from {base_uri}: {e}")
            return candidates

        for entry in entries:
            try:
                entry_url = urljoin(base_uri, entry.url)
            except ValueError as e:
                logger.debug(f"Skipping {entry.name} with invalid url {entry.url}: {e}")
                continue

            # Symlinked directories are followed like regular ones.
            if entry.is_directory:
                sub_candidates = await self.crawl(
                    entry_url,
                    matching_policy,
                    full_hash,
                    short_hash,
                    max_depth=max_depth,
                    current_depth=current_depth + 1,
                )
                candidates.update(sub_candidates)
                continue

            if not is_candidate(entry.name, matching_policy, full_hash, short_hash):
                continue

            candidates[entry.name] = entry_url
            logger.debug(f"Found candidate: {entry.name} at {entry_url}")

        return candidates
