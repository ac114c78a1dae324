"""
Core services shared by every artefact source.
"""

from .download import DownloadExecutor
from .exceptions import (
    ArtefactError,
    DownloadFailed,
    ExtractionFailed,
    ListingUnavailable,
    NoCandidateFound,
)
from .extract import ArchiveExtractor
from .matching import MatchingPolicy, PatternMatchingPolicy

__all__ = [
    "ArchiveExtractor",
    "ArtefactError",
    "DownloadExecutor",
    "DownloadFailed",
    "ExtractionFailed",
    "ListingUnavailable",
    "MatchingPolicy",
    "NoCandidateFound",
    "PatternMatchingPolicy",
]
