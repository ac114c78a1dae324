"""
File name matching policies used to pick an artefact among listing entries.
"""

import re
from collections.abc import Iterable
from typing import Protocol, runtime_checkable


@runtime_checkable
class MatchingPolicy(Protocol):
    """Decides which archive names match and which one is preferred."""

    def matches(self, filename: str) -> bool:
        """Return True if ``filename`` matches the platform pattern."""
        ...

    def choose_preferred(self, candidates: Iterable[str]) -> str | None:
        """Return the preferred name among ``candidates``, or None."""
        ...


class PatternMatchingPolicy:
    """
    Regex match plus an ordered list of preferred substrings.

    ``choose_preferred`` walks the preferences in order and returns the first
    candidate (in sorted order) containing the current preference. With no
    preference hit the first sorted candidate wins.
    """

    def __init__(
        self,
        matching_pattern: str,
        matching_preference: list[str] | None = None,
    ) -> None:
        self.matching_pattern = matching_pattern
        self.matching_preference = matching_preference or []
        self._regex = re.compile(matching_pattern)

    def matches(self, filename: str) -> bool:
        return self._regex.search(filename) is not None

    def choose_preferred(self, candidates: Iterable[str]) -> str | None:
        ordered = sorted(candidates)
        if not ordered:
            return None

        for preference in self.matching_preference:
            for candidate in ordered:
                if preference in candidate:
                    return candidate

        return ordered[0]

    def __repr__(self) -> str:
        return (
            f"PatternMatchingPolicy({self.matching_pattern!r}, "
            f"{self.matching_preference!r})"
        )
