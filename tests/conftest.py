"""
Pytest configuration and fixtures for artefact_sources testing.

HTTP traffic is served by ``httpx.MockTransport`` from in-memory listing
trees, so no test touches the network.
"""

from collections.abc import AsyncGenerator, Callable
from typing import Any

import httpx
import pytest

from artefact_sources.core.matching import PatternMatchingPolicy

# Test constants
FULL_HASH = "4e1d4a1c2b3f5e6d7c8b9a0f1e2d3c4b5a697887"
SHORT_HASH = FULL_HASH[:7]
MIRROR_URL = "https://devbuilds.gleec.com/"
MOD_TIME = "2024-05-01T12:00:00Z"


def file_entry(name: str, url: str | None = None, size: int = 1024) -> dict[str, Any]:
    """Listing element for a file."""
    return {
        "name": name,
        "size": size,
        "url": url or f"./{name}",
        "mod_time": MOD_TIME,
        "is_dir": False,
        "is_symlink": False,
    }


def dir_entry(
    name: str, url: str | None = None, is_symlink: bool = False
) -> dict[str, Any]:
    """Listing element for a directory."""
    return {
        "name": name,
        "size": 0,
        "url": url or f"./{name}/",
        "mod_time": MOD_TIME,
        "is_dir": True,
        "is_symlink": is_symlink,
    }


def request_key(request: httpx.Request) -> str:
    url = request.url
    return f"{url.scheme}://{url.host}{url.path}"


class FakeHost:
    """
    Serves canned responses keyed by ``scheme://host/path``.

    JSON values are returned as JSON, bytes and str as raw bodies, exceptions
    are raised as transport errors. Unknown URLs answer 404.
    """

    def __init__(self, routes: dict[str, Any] | None = None) -> None:
        self.routes: dict[str, Any] = dict(routes or {})
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        key = request_key(request)
        if key not in self.routes:
            return httpx.Response(404, text="not found")

        body = self.routes[key]
        if isinstance(body, Exception):
            raise body
        if isinstance(body, httpx.Response):
            return body
        if isinstance(body, bytes):
            return httpx.Response(200, content=body)
        if isinstance(body, str):
            return httpx.Response(200, text=body)
        return httpx.Response(200, json=body)

    @property
    def requested(self) -> list[str]:
        return [request_key(r) for r in self.requests]


@pytest.fixture
def fake_host() -> FakeHost:
    """An empty fake host; tests add routes."""
    return FakeHost()


@pytest.fixture
async def http_client(fake_host: FakeHost) -> AsyncGenerator[httpx.AsyncClient, None]:
    """An AsyncClient routed to ``fake_host``."""
    async with httpx.AsyncClient(transport=httpx.MockTransport(fake_host)) as client:
        yield client


@pytest.fixture
def matching_policy() -> PatternMatchingPolicy:
    """Linux archive policy preferring release builds."""
    return PatternMatchingPolicy(r"linux", ["release"])


@pytest.fixture
def connect_error() -> Callable[[str], httpx.ConnectError]:
    def _make(message: str = "connection refused") -> httpx.ConnectError:
        return httpx.ConnectError(message)

    return _make
