"""
Artefact sources for different kinds of hosts.
"""

from .base import ArtefactSource
from .crawler import DirectoryCrawler
from .devbuilds import DevBuildsSource
from .factory import SourceFactory
from .github import GithubReleaseSource
from .listing import ListingHostSource

__all__ = [
    "ArtefactSource",
    "DevBuildsSource",
    "DirectoryCrawler",
    "GithubReleaseSource",
    "ListingHostSource",
    "SourceFactory",
]
