"""
Host-based selection of the artefact source for a configured URL.
"""

import logging
from collections.abc import Callable
from urllib.parse import urlparse

import httpx

from ..config import GITHUB_API_PREFIX, get_settings
from ..models.build import BuildConfig
from .base import ArtefactSource
from .devbuilds import DevBuildsSource
from .github import GithubReleaseSource
from .listing import ListingHostSource

logger = logging.getLogger(__name__)

SourcePredicate = Callable[[str], bool]
SourceConstructor = Callable[..., ArtefactSource]


def url_host(url: str) -> str:
    try:
        return (urlparse(url).hostname or "").lower()
    except ValueError:
        return ""


class SourceFactory:
    """
    Maps source URLs to artefact sources.

    Rules are checked in order and the first matching predicate wins;
    ``DevBuildsSource`` handles every URL no rule claims.
    """

    default_source: SourceConstructor = DevBuildsSource

    def __init__(
        self,
        listing_hosts: list[str] | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        if listing_hosts is None:
            listing_hosts = get_settings().listing_hosts
        self.listing_hosts = {host.lower() for host in listing_hosts}
        self.client = client
        self.rules: list[tuple[SourcePredicate, SourceConstructor]] = [
            (self.is_github_api, GithubReleaseSource),
            (self.is_listing_host, ListingHostSource),
        ]

    @staticmethod
    def is_github_api(url: str) -> bool:
        return url.startswith(GITHUB_API_PREFIX)

    def is_listing_host(self, url: str) -> bool:
        return url_host(url) in self.listing_hosts

    def create(self, source_url: str, branch: str, commit_hash: str) -> ArtefactSource:
        """Build the source for ``source_url``."""
        constructor = self.default_source
        for predicate, rule_constructor in self.rules:
            if predicate(source_url):
                constructor = rule_constructor
                break

        source = constructor(
            branch=branch,
            commit_hash=commit_hash,
            source_url=source_url,
            client=self.client,
        )
        logger.debug(f"Using {source.__class__.__name__} for {source_url}")
        return source

    def from_build_config(self, build_config: BuildConfig) -> dict[str, ArtefactSource]:
        """Build one source per configured URL, keyed and ordered by URL."""
        return {
            source_url: self.create(
                source_url, build_config.branch, build_config.api_commit_hash
            )
            for source_url in build_config.source_urls
        }
