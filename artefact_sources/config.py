"""
Configuration management for artefact sources using Pydantic Settings.
"""

import logging
from pathlib import Path

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models.build import BuildConfig

# Constants for error messages
COMMIT_HASH_ERROR = "API_COMMIT_HASH must be at least 7 characters"

GITHUB_API_PREFIX = "https://api.github.com/repos/"


class ArtefactSettings(BaseSettings):
    """
    Application settings loaded from environment variables and .env files.
    """

    debug: bool = Field(default=False, alias="DEBUG")

    # Logging Configuration
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_file: str | None = Field(default=None, alias="LOG_FILE")
    log_to_file: bool = Field(default=False, alias="LOG_TO_FILE")

    # Build Configuration
    source_urls: list[str] = Field(default_factory=list, alias="SOURCE_URLS")
    api_branch: str = Field(default="", alias="API_BRANCH")
    api_commit_hash: str = Field(default="", alias="API_COMMIT_HASH")

    # Listing hosts serving Caddy-style JSON directory indexes
    listing_hosts: list[str] = Field(
        default=["devbuilds.gleec.com"],
        alias="LISTING_HOSTS",
        description="Hosts that answer Accept: application/json with a listing",
    )
    crawl_max_depth: int = Field(default=3, alias="CRAWL_MAX_DEPTH", ge=1, le=10)

    # HTTP
    request_timeout: float = Field(default=30.0, alias="REQUEST_TIMEOUT", gt=0)
    user_agent: str = Field(
        default="artefact-sources/0.1.0", alias="USER_AGENT"
    )

    # GitHub releases
    github_token: str | None = Field(default=None, alias="GITHUB_TOKEN")
    github_releases_per_page: int = Field(
        default=30, alias="GITHUB_RELEASES_PER_PAGE", ge=1, le=100
    )

    # Pipeline
    cleanup_archive: bool = Field(
        default=True,
        alias="CLEANUP_ARCHIVE",
        description="Delete the downloaded archive after a successful extraction",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        allowed_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in allowed_levels:
            raise ValueError(f"log_level must be one of {allowed_levels}")
        return v.upper()

    @field_validator("listing_hosts")
    @classmethod
    def normalize_listing_hosts(cls, v: list[str]) -> list[str]:
        return [host.strip().lower() for host in v if host.strip()]

    @field_validator("log_file", mode="before")
    @classmethod
    def create_log_directory(cls, v: str | None) -> str | None:
        if v:
            log_path = Path(str(v)).expanduser()
            log_path.parent.mkdir(parents=True, exist_ok=True)
        return v

    @model_validator(mode="after")
    def _validate_commit_hash(self) -> "ArtefactSettings":
        if self.api_commit_hash and len(self.api_commit_hash) < 7:
            raise ValueError(COMMIT_HASH_ERROR)

        if self.github_token and not any(
            url.startswith(GITHUB_API_PREFIX) for url in self.source_urls
        ):
            logger = logging.getLogger(__name__)
            logger.debug(
                "GITHUB_TOKEN is set but no GitHub API source is configured"
            )

        return self

    def build_config(self) -> BuildConfig:
        """Assemble the build inputs for the artefact pipeline."""
        return BuildConfig(
            source_urls=self.source_urls,
            branch=self.api_branch,
            api_commit_hash=self.api_commit_hash,
        )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )


# Lazy settings accessor (avoids import-time side effects)
_settings: ArtefactSettings | None = None


def get_settings() -> ArtefactSettings:
    global _settings
    if _settings is None:
        _settings = ArtefactSettings()
    return _settings


settings = get_settings()
