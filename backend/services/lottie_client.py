"""LottieFiles API client: search and popular/featured listings.

Public API, no key required. One ``httpx.AsyncClient`` per call; there is no
retry, only the configured timeout.
"""

import json
import logging
from typing import Any
from urllib.parse import quote

import httpx

from errors import UpstreamStatusError, UpstreamUnavailableError

logger = logging.getLogger(__name__)

# Characters JavaScript's encodeURIComponent leaves alone (besides A-Z a-z 0-9 - _ . ~)
_URI_COMPONENT_SAFE = "!*'()"


def encode_component(value: str) -> str:
    """Percent-encode a query value the way encodeURIComponent does (space -> %20)."""
    return quote(value, safe=_URI_COMPONENT_SAFE)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON constant: {name}")


def parse_json(content: bytes) -> Any:
    """Strict JSON decode: NaN and Infinity are rejected like JSON.parse does."""
    return json.loads(content, parse_constant=_reject_constant)


class LottieClient:
    def __init__(
        self,
        base_url: str,
        popular_url: str | None = None,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.popular_url = popular_url
        self.timeout = timeout
        self._transport = transport

    def search_url(self, query: str, asset_type: str) -> str:
        return f"{self.base_url}/search?q={encode_component(query)}&type={encode_component(asset_type)}"

    def popular_source_url(self, asset_type: str) -> str:
        # A static featured-assets resource takes no type filter
        if self.popular_url:
            return self.popular_url
        return f"{self.base_url}/popular?type={encode_component(asset_type)}"

    async def search(self, query: str, asset_type: str) -> Any:
        return await self._get_json(self.search_url(query, asset_type))

    async def popular(self, asset_type: str) -> Any:
        return await self._get_json(self.popular_source_url(asset_type))

    async def _get_json(self, url: str) -> Any:
        logger.info("Fetching %s", url)
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport, follow_redirects=True
            ) as client:
                resp = await client.get(url)
                if not resp.is_success:
                    logger.error(
                        "LottieFiles API error %d for %s: %s", resp.status_code, url, resp.text
                    )
                    raise UpstreamStatusError(resp.status_code, resp.text)
                return parse_json(resp.content)
        except httpx.HTTPError as e:
            logger.error("Error fetching from LottieFiles API (%s): %s", url, e)
            raise UpstreamUnavailableError(e) from e
        except ValueError as e:
            logger.error("LottieFiles API returned invalid JSON for %s: %s", url, e)
            raise UpstreamUnavailableError(e) from e
