"""
Resolve, download and unpack prebuilt API archives from heterogeneous hosts.
"""

from .core import (
    ArchiveExtractor,
    ArtefactError,
    DownloadExecutor,
    DownloadFailed,
    ExtractionFailed,
    ListingUnavailable,
    MatchingPolicy,
    NoCandidateFound,
    PatternMatchingPolicy,
)
from .models import BuildConfig, DirectoryEntry, ResolutionInputs
from .pipeline import ArtefactPipeline
from .sources import (
    ArtefactSource,
    DevBuildsSource,
    DirectoryCrawler,
    GithubReleaseSource,
    ListingHostSource,
    SourceFactory,
)

__version__ = "0.1.0"

__all__ = [
    "ArchiveExtractor",
    "ArtefactError",
    "ArtefactPipeline",
    "ArtefactSource",
    "BuildConfig",
    "DevBuildsSource",
    "DirectoryCrawler",
    "DirectoryEntry",
    "DownloadExecutor",
    "DownloadFailed",
    "ExtractionFailed",
    "GithubReleaseSource",
    "ListingHostSource",
    "ListingUnavailable",
    "MatchingPolicy",
    "NoCandidateFound",
    "PatternMatchingPolicy",
    "ResolutionInputs",
    "SourceFactory",
]
