"""
Artworks API Client - fetch one page of artworks from the Art Institute of Chicago.

The client is the only component that talks to the network. It translates the
zero-based page index used everywhere else into the API's 1-based `page`
parameter and validates the payload before handing it on.
"""
import asyncio
from typing import Any, Awaitable, Optional, Protocol

import requests
from pydantic import ValidationError

from .config import Settings, get_settings
from .errors import TransportError
from .models.schemas import ArtworksResponse, Page
from .utils.logger import get_logger

logger = get_logger(__name__)


class AsyncPageFetcher(Protocol):
    """Anything that can fetch one page without blocking the event loop."""

    def __call__(self, page_index: int, page_size: int) -> Awaitable[Page]: ...


class ArticClient:
    """
    Client for the public artworks endpoint.

    Provides methods to:
    - Fetch a single page (blocking)
    - Fetch a single page from a coroutine (runs in a worker thread)

    Retries are left to the caller; every failure surfaces as TransportError.
    """

    def __init__(self, settings: Optional[Settings] = None, session: Optional[requests.Session] = None):
        """
        Initialize the client.

        Args:
            settings: Settings instance (loaded from the environment if not provided)
            session: requests.Session to reuse (auto-created if not provided)
        """
        self.settings = settings or get_settings()
        self.api_url = self.settings.api_url
        self.timeout = self.settings.timeout_seconds
        self.session = session or requests.Session()

    def _get_headers(self) -> dict:
        """The AIC API asks clients to identify themselves."""
        return {
            "AIC-User-Agent": self.settings.user_agent,
            "User-Agent": self.settings.user_agent,
            "Accept": "application/json",
        }

    def _request(self, params: dict) -> Any:
        """
        Issue a GET against the artworks endpoint.

        Args:
            params: Query string parameters

        Returns:
            Decoded JSON body
        """
        try:
            response = self.session.get(
                self.api_url,
                params=params,
                headers=self._get_headers(),
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.error("Request to %s failed: %s", self.api_url, exc)
            raise TransportError(f"Request failed: {exc}", url=self.api_url) from exc

        try:
            response.raise_for_status()
        except requests.HTTPError as exc:
            logger.error("Artworks API returned %s for %s", response.status_code, params)
            raise TransportError(
                f"Artworks API returned HTTP {response.status_code}",
                url=self.api_url,
                status_code=response.status_code,
            ) from exc

        try:
            return response.json()
        except ValueError as exc:
            logger.error("Artworks API returned a non-JSON body for %s", params)
            raise TransportError(
                "Artworks API returned a non-JSON body",
                url=self.api_url,
                status_code=response.status_code,
            ) from exc

    def fetch_page(self, page_index: int, page_size: int) -> Page:
        """
        Fetch exactly one page of artworks.

        Args:
            page_index: Zero-based page index
            page_size: Number of artworks per page

        Returns:
            Page with the records and the total count reported by the API
        """
        if page_index < 0:
            raise ValueError("page_index must be >= 0")
        if page_size <= 0:
            raise ValueError("page_size must be > 0")

        params = {"page": page_index + 1, "limit": page_size}
        logger.debug("Fetching artworks page=%s limit=%s", params["page"], page_size)
        payload = self._request(params)

        try:
            parsed = ArtworksResponse.model_validate(payload)
        except ValidationError as exc:
            logger.error("Unexpected artworks payload for %s: %s", params, exc)
            raise TransportError("Unexpected artworks payload", url=self.api_url) from exc

        # The API clamps `limit`; never let a page exceed what was asked for
        records = parsed.data[:page_size]
        return Page(
            records=records,
            page_index=page_index,
            page_size=page_size,
            total=max(parsed.pagination.total, page_index * page_size + len(records)),
        )

    async def fetch_page_async(self, page_index: int, page_size: int) -> Page:
        """Coroutine wrapper around fetch_page; the HTTP call runs off the loop."""
        return await asyncio.to_thread(self.fetch_page, page_index, page_size)

    def close(self) -> None:
        self.session.close()
