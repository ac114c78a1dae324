"""
Data models for build inputs and per-source resolution inputs.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

SHORT_HASH_LENGTH = 7


def normalize_base_url(url: str) -> str:
    """Return ``url`` with exactly one trailing slash."""
    return url.rstrip("/") + "/"


class BuildConfig(BaseModel):
    """Build inputs shared by every configured source."""

    model_config = ConfigDict(frozen=True)

    source_urls: list[str] = Field(default_factory=list)
    branch: str = ""
    api_commit_hash: str

    @field_validator("source_urls")
    @classmethod
    def strip_source_urls(cls, v: list[str]) -> list[str]:
        return [url.strip() for url in v if url.strip()]

    @field_validator("api_commit_hash")
    @classmethod
    def validate_commit_hash(cls, v: str) -> str:
        v = v.strip()
        if len(v) < SHORT_HASH_LENGTH:
            raise ValueError(
                f"api_commit_hash must be at least {SHORT_HASH_LENGTH} characters"
            )
        return v


class ResolutionInputs(BaseModel):
    """Inputs for resolving one artefact from one source."""

    model_config = ConfigDict(frozen=True)

    source_base_url: str
    branch: str = ""
    commit_hash: str
    platform: str = ""

    @field_validator("source_base_url")
    @classmethod
    def normalize_source_base_url(cls, v: str) -> str:
        return normalize_base_url(v)

    @field_validator("commit_hash")
    @classmethod
    def validate_commit_hash(cls, v: str) -> str:
        if len(v) < SHORT_HASH_LENGTH:
            raise ValueError(
                f"commit_hash must be at least {SHORT_HASH_LENGTH} characters"
            )
        return v

    @property
    def short_hash(self) -> str:
        """First seven characters of the commit hash."""
        return self.commit_hash[:SHORT_HASH_LENGTH]

    @property
    def listing_urls(self) -> list[str]:
        """Listing URLs to search, branch-scoped first then the base."""
        urls = []
        if self.branch:
            urls.append(f"{self.source_base_url}{self.branch.strip('/')}/")
        if self.source_base_url not in urls:
            urls.append(self.source_base_url)
        return urls
