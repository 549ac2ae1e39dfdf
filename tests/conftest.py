"""Shared fixtures: sample SVGs and a fetcher backed by httpx.MockTransport."""

from __future__ import annotations

import pathlib
import sys

ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import httpx
import pytest

from phosphor.assets import AssetFetcher

REGULAR_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 256 256" fill="currentColor">'
    '<path d="M178,32c-20.65,0-38.73,8.88-50,23.89C116.73,40.88,98.65,32,78,32Z"/></svg>'
)

BOLD_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 256 256">'
    '<path d="M128,216S24,160,24,94" fill="none" stroke="currentColor" stroke-width="24"/></svg>'
)

DUOTONE_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 256 256">'
    '<path d="M232,94c0,66-104,122-104,122" opacity="0.2" fill="a"/>'
    '<path d="M128,216S24,160,24,94" fill="none" stroke="b" stroke-width="16"/></svg>'
)

SIZED_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="256" height="256" viewBox="0 0 256 256">'
    '<rect width="256" height="256" fill="none"/></svg>'
)

# Upstream assets served by the mock transport, keyed by URL path
DEFAULT_ASSETS = {
    "/phosphor-icons/core/main/assets/regular/heart.svg": REGULAR_SVG,
    "/phosphor-icons/core/main/assets/bold/heart-bold.svg": BOLD_SVG,
    "/phosphor-icons/core/main/assets/duotone/heart-duotone.svg": DUOTONE_SVG,
    "/phosphor-icons/core/main/assets/fill/heart-fill.svg": REGULAR_SVG,
    "/phosphor-icons/core/main/assets/regular/house.svg": REGULAR_SVG,
    "/phosphor-icons/core/main/assets/regular/user.svg": REGULAR_SVG,
}


class FakeUpstream:
    """Records requests and serves DEFAULT_ASSETS (404 for anything else)."""

    def __init__(self, assets=None):
        self.assets = dict(DEFAULT_ASSETS if assets is None else assets)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        body = self.assets.get(request.url.path)
        if body is None:
            return httpx.Response(404, text="404: Not Found")
        if isinstance(body, Exception):
            raise body
        return httpx.Response(200, text=body)

    def fetcher(self) -> AssetFetcher:
        client = httpx.AsyncClient(transport=httpx.MockTransport(self))
        return AssetFetcher(client=client)


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()
