"""Animation search/listing with a short-lived response cache.

Flow per request: derive the cache key, serve a fresh hit, otherwise call the
search endpoint (non-empty query) or the popular source, normalize, store.
"""

import logging
from typing import Any

from config import Settings, settings
from services.cache import TTLCache
from services.lottie_client import LottieClient
from services.normalize import normalize

logger = logging.getLogger(__name__)

DEFAULT_TYPE = "animation"
POPULAR_KEY = "popular"


class AnimationService:
    def __init__(
        self,
        client: LottieClient,
        cache: TTLCache,
        key_include_type: bool = False,
        normalize_responses: bool = True,
    ):
        self.client = client
        self.cache = cache
        self.key_include_type = key_include_type
        self.normalize_responses = normalize_responses

    @classmethod
    def from_settings(cls, cfg: Settings, transport=None) -> "AnimationService":
        client = LottieClient(
            cfg.lottie_api_url,
            popular_url=cfg.lottie_popular_url,
            timeout=cfg.upstream_timeout,
            transport=transport,
        )
        cache = TTLCache(ttl_seconds=cfg.cache_ttl_seconds, max_entries=cfg.cache_max_entries)
        return cls(
            client,
            cache,
            key_include_type=cfg.cache_key_include_type,
            normalize_responses=cfg.normalize_responses,
        )

    def cache_key(self, query: str, asset_type: str) -> str:
        if self.key_include_type:
            return f"{query}-{asset_type}"
        return query or POPULAR_KEY

    async def get_animations(self, query: str = "", asset_type: str = DEFAULT_TYPE) -> Any:
        """Return cached or freshly fetched animations for ``query``.

        Raises:
            UpstreamStatusError: upstream answered non-2xx.
            UpstreamUnavailableError: transport failure or invalid JSON.
        """
        asset_type = asset_type or DEFAULT_TYPE
        key = self.cache_key(query, asset_type)

        cached = self.cache.get(key)
        if cached is not None:
            logger.debug("Cache hit: %s", key)
            return cached
        logger.debug("Cache miss: %s", key)

        if query:
            payload = await self.client.search(query, asset_type)
        else:
            payload = await self.client.popular(asset_type)

        if self.normalize_responses:
            payload = normalize(payload, is_search=bool(query))

        self.cache.set(key, payload)
        return payload


service = AnimationService.from_settings(settings)
