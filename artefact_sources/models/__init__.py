"""
Data models for artefact_sources using Pydantic.
"""

from .build import BuildConfig, ResolutionInputs, normalize_base_url
from .listing import DirectoryEntry, parse_listing

__all__ = [
    "BuildConfig",
    "DirectoryEntry",
    "ResolutionInputs",
    "normalize_base_url",
    "parse_listing",
]
