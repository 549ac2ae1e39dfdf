"""
Locating and fetching Phosphor SVG assets from the upstream GitHub repository.
"""
import enum
import logging
from dataclasses import dataclass
from typing import Optional

import anyio
import httpx

from . import __version__
from .errors import IconNotFound, InvalidUpstreamContent, TransportError, UpstreamTimeout

logger = logging.getLogger(__name__)

# Raw asset tree of https://github.com/phosphor-icons/core
PHOSPHOR_CORE_RAW_BASE = "https://raw.githubusercontent.com/phosphor-icons/core/main/assets"

USER_AGENT = f"PhosphorIconsMCP/{__version__}"

FETCH_TIMEOUT_SECONDS = 10.0


def icon_filename(name: str, weight: str) -> str:
    """Get the upstream filename for an icon.

    Regular icons have no suffix, every other weight has a -{weight} suffix:
    regular/heart.svg, bold/heart-bold.svg, duotone/heart-duotone.svg.

    Args:
        name: Sanitized icon name (e.g., "heart")
        weight: Icon weight (e.g., "bold")

    Returns:
        Filename including the .svg extension
    """
    if weight == "regular":
        return f"{name}.svg"
    return f"{name}-{weight}.svg"


def icon_url(name: str, weight: str, base: str = PHOSPHOR_CORE_RAW_BASE) -> str:
    return f"{base}/{weight}/{icon_filename(name, weight)}"


class AssetOutcome(str, enum.Enum):
    OK = "ok"
    NOT_FOUND = "not_found"
    TIMEOUT = "timeout"
    TRANSPORT_ERROR = "transport_error"


@dataclass
class AssetResponse:
    """Result of one upstream fetch. Built per request, never cached."""

    url: str
    outcome: AssetOutcome
    text: str = ""
    status_code: Optional[int] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.outcome is AssetOutcome.OK

    def svg(self, name: str, weight: str) -> str:
        """Return the SVG body, or raise the error matching the outcome.

        Raises:
            IconNotFound: Upstream answered with a non-OK status
            UpstreamTimeout: The request timed out
            TransportError: Any other network failure
            InvalidUpstreamContent: Body does not start with an <svg> tag
        """
        if self.outcome is AssetOutcome.NOT_FOUND:
            raise IconNotFound(name, weight)
        if self.outcome is AssetOutcome.TIMEOUT:
            raise UpstreamTimeout(
                "Request timeout. The icon service may be temporarily unavailable."
            )
        if self.outcome is AssetOutcome.TRANSPORT_ERROR:
            raise TransportError(str(self.error), cause=self.error)

        if not self.text or not self.text.strip().startswith("<svg"):
            raise InvalidUpstreamContent("Invalid SVG content received from the icon service.")
        return self.text


class AssetFetcher:
    """Single-attempt, time-bounded GET of upstream assets.

    Args:
        client: Optional shared httpx.AsyncClient. When omitted a client is
            opened and closed around each request.
        timeout: Seconds before a request is reported as a timeout
    """

    def __init__(self, client: httpx.AsyncClient = None, timeout: float = FETCH_TIMEOUT_SECONDS):
        self.client = client
        self.timeout = timeout

    async def fetch(self, url: str) -> AssetResponse:
        try:
            # httpx timeouts apply per connect/read/write step; this bounds the whole request
            with anyio.fail_after(self.timeout):
                if self.client is not None:
                    response = await self._get(self.client, url)
                else:
                    async with httpx.AsyncClient(timeout=self.timeout) as client:
                        response = await self._get(client, url)
        except (httpx.TimeoutException, TimeoutError) as e:
            logger.warning(f"Timed out fetching {url}")
            return AssetResponse(url, AssetOutcome.TIMEOUT, error=e)
        except httpx.HTTPError as e:
            logger.warning(f"Transport error fetching {url}: {e}")
            return AssetResponse(url, AssetOutcome.TRANSPORT_ERROR, error=e)

        if not response.is_success:
            logger.debug(f"Upstream returned {response.status_code} for {url}")
            return AssetResponse(url, AssetOutcome.NOT_FOUND, status_code=response.status_code)

        logger.debug(f"Fetched {url} ({len(response.text)} bytes)")
        return AssetResponse(
            url, AssetOutcome.OK, text=response.text, status_code=response.status_code
        )

    async def fetch_icon(self, name: str, weight: str) -> AssetResponse:
        return await self.fetch(icon_url(name, weight))

    async def _get(self, client: httpx.AsyncClient, url: str) -> httpx.Response:
        return await client.get(
            url, headers={"User-Agent": USER_AGENT}, timeout=self.timeout
        )
