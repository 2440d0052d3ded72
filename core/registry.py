# =============================================================================
# core/registry.py  —  Registry Client
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Fetches the two kinds of JSON document the component registry publishes
#   and validates them into typed models:
#
#     {base_url}/index.json     →  RegistryIndex
#     {base_url}/{name}.json    →  ComponentDetail
#
#   Both go through the TTL cache (core/cache.py).  Only documents that
#   passed validation are ever cached.
#
# FAILURE MAPPING:
#   transport error / non-2xx   →  FetchError
#   404 on a component          →  NotFoundError   (the index has no such case)
#   bad JSON / wrong shape      →  ParseError
#   Nothing is retried.
#
# HTTP:
#   httpx.AsyncClient, created lazily on first use.  Pass ``transport`` to
#   swap the network for an httpx.MockTransport in tests.
# =============================================================================

import logging
from typing import Any, Optional
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from core.cache import TTLCache
from core.errors import FetchError, NotFoundError, ParseError
from core.models import ComponentDetail, RegistryIndex

logger = logging.getLogger(__name__)

INDEX_CACHE_KEY = "registry-index"


def component_cache_key(name: str) -> str:
    return f"component-{name}"


class RegistryClient:
    """Cached, validating client for the component registry."""

    def __init__(
        self,
        base_url: str,
        cache: Optional[TTLCache] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: Optional[float] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.cache = cache if cache is not None else TTLCache()
        self._transport = transport
        self._timeout = timeout
        self._client: Optional[httpx.AsyncClient] = None

    # ─────────────────────────────────────────────────────────────────
    # URLs
    # ─────────────────────────────────────────────────────────────────
    def index_url(self) -> str:
        return f"{self.base_url}/index.json"

    def component_url(self, name: str) -> str:
        """URL handed to ``precast-ui add``.  The name is one path segment."""
        return f"{self.base_url}/{quote(name, safe='')}"

    def component_json_url(self, name: str) -> str:
        return f"{self.component_url(name)}.json"

    # ─────────────────────────────────────────────────────────────────
    # Public API
    # ─────────────────────────────────────────────────────────────────
    async def fetch_registry_index(self) -> RegistryIndex:
        """Return the registry index, from cache when fresh.

        Raises:
            FetchError: The index could not be downloaded (any status or
                transport failure, 404 included).
            ParseError: The body is not a valid registry index.
        """
        cached = self.cache.get(INDEX_CACHE_KEY)
        if cached is not None:
            logger.debug("cache hit: %s", INDEX_CACHE_KEY)
            return cached

        try:
            payload = await self._get_json(self.index_url())
        except httpx.HTTPError as exc:
            raise FetchError(f"Failed to fetch registry index: {exc}") from exc
        except ValueError as exc:
            raise ParseError(f"Failed to parse registry index: {exc}") from exc

        try:
            index = RegistryIndex.model_validate(payload)
        except ValidationError as exc:
            raise ParseError(f"Failed to parse registry index: {exc}") from exc

        self.cache.set(INDEX_CACHE_KEY, index)
        return index

    async def fetch_component(self, name: str) -> ComponentDetail:
        """Return the detail document for one component, from cache when fresh.

        Raises:
            NotFoundError: The registry answered 404 for ``name``.
            FetchError: Any other transport or status failure.
            ParseError: The body is not a valid component document.
        """
        key = component_cache_key(name)
        cached = self.cache.get(key)
        if cached is not None:
            logger.debug("cache hit: %s", key)
            return cached

        try:
            payload = await self._get_json(self.component_json_url(name))
        except httpx.HTTPStatusError as exc:
            if exc.response.status_code == 404:
                raise NotFoundError(name) from exc
            raise FetchError(f"Failed to fetch component '{name}': {exc}") from exc
        except httpx.HTTPError as exc:
            raise FetchError(f"Failed to fetch component '{name}': {exc}") from exc
        except ValueError as exc:
            raise ParseError(f"Failed to parse component '{name}': {exc}") from exc

        try:
            component = ComponentDetail.model_validate(payload)
        except ValidationError as exc:
            raise ParseError(f"Failed to parse component '{name}': {exc}") from exc

        self.cache.set(key, component)
        return component

    async def aclose(self) -> None:
        """Close the underlying HTTP connection pool."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    # ─────────────────────────────────────────────────────────────────
    # Internals
    # ─────────────────────────────────────────────────────────────────
    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            kwargs: dict[str, Any] = {"follow_redirects": True}
            if self._transport is not None:
                kwargs["transport"] = self._transport
            if self._timeout is not None:
                kwargs["timeout"] = self._timeout
            self._client = httpx.AsyncClient(**kwargs)
        return self._client

    async def _get_json(self, url: str) -> Any:
        """GET ``url`` and decode the JSON body.

        httpx errors propagate as-is; a body that isn't JSON raises
        ValueError (json.JSONDecodeError).
        """
        logger.info("GET %s", url)
        response = await self._get_client().get(url)
        response.raise_for_status()
        return response.json()
