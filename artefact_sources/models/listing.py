"""
Data models for JSON directory listings.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..core.exceptions import ListingUnavailable


class DirectoryEntry(BaseModel):
    """One row of a JSON directory listing."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    size: int = Field(ge=0)
    url: str
    modification_time: datetime = Field(alias="mod_time")
    is_directory: bool = Field(alias="is_dir")
    is_symlink: bool

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> DirectoryEntry:
        """Build an entry from one listing element."""
        return cls.model_validate(data)


def parse_listing(uri: str, payload: Any) -> list[DirectoryEntry]:
    """
    Validate a decoded listing payload.

    Args:
        uri: Listing URI, used for error reporting
        payload: Decoded JSON body

    Returns:
        Entries in listing order

    Raises:
        ListingUnavailable: If the payload is not an array of entries
    """
    if not isinstance(payload, list):
        raise ListingUnavailable(uri, "listing is not a JSON array")

    try:
        return [DirectoryEntry.from_json(item) for item in payload]
    except (ValidationError, TypeError) as e:
        raise ListingUnavailable(uri, f"malformed listing entry: {e}") from e
