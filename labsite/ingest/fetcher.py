"""
Resource fetchers that load raw data-file text by locator.

Two implementations share one contract: `fetch_text(locator)` returns the
decoded text or raises ResourceFetchError. HttpResourceFetcher reads from a
web server relative to a base URL; LocalResourceFetcher reads from a
directory on disk.
"""
import asyncio
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

import httpx

from labsite.core.config import Settings
from labsite.core.errors import ResourceFetchError

logger = logging.getLogger(__name__)


@dataclass
class FetcherConfig:
    """Configuration for fetch behaviour."""
    # Timeout settings
    request_timeout_seconds: float = 30.0
    connect_timeout_seconds: float = 10.0

    # Retry settings
    max_retries: int = 1
    retry_delay_seconds: float = 1.0

    # Concurrent requests
    max_concurrent_requests: int = 5

    encoding: str = "utf-8"

    @classmethod
    def from_settings(cls, settings: Settings) -> "FetcherConfig":
        return cls(
            request_timeout_seconds=settings.FETCH_TIMEOUT_SECONDS,
            connect_timeout_seconds=settings.FETCH_CONNECT_TIMEOUT_SECONDS,
            max_retries=max(1, settings.FETCH_MAX_RETRIES),
            retry_delay_seconds=settings.FETCH_RETRY_DELAY_SECONDS,
            max_concurrent_requests=max(1, settings.FETCH_MAX_CONCURRENCY),
        )


class ResourceFetcher(ABC):
    """Base class for loading text from a named resource."""

    def __init__(self, config: Optional[FetcherConfig] = None):
        self.config = config or FetcherConfig()
        self._semaphore: Optional[asyncio.Semaphore] = None

    async def __aenter__(self):
        """Async context manager entry."""
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    async def start(self) -> None:
        """Prepare the fetcher for use."""
        self._semaphore = asyncio.Semaphore(self.config.max_concurrent_requests)

    async def close(self) -> None:
        """Release resources held by the fetcher."""
        self._semaphore = None

    async def fetch_text(self, locator: str) -> str:
        """
        Load a resource and decode it as text.

        Args:
            locator: Resource path relative to the fetcher's root

        Returns:
            The decoded resource text

        Raises:
            ResourceFetchError: If the resource is missing or unreadable
        """
        if self._semaphore is None:
            await self.start()

        async with self._semaphore:
            raw = await self._fetch_bytes(locator)

        try:
            return raw.decode(self.config.encoding)
        except UnicodeDecodeError as e:
            raise ResourceFetchError(locator, f"Decode error: {e}") from e

    @abstractmethod
    async def _fetch_bytes(self, locator: str) -> bytes:
        """
        Load raw bytes for a locator.
        Must be implemented by subclasses.
        """
        pass


class HttpResourceFetcher(ResourceFetcher):
    """Fetches resources over HTTP relative to a base URL."""

    def __init__(
        self,
        base_url: str,
        config: Optional[FetcherConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        super().__init__(config)
        self.base_url = base_url.rstrip("/") + "/"
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def start(self) -> None:
        """Initialize the HTTP client."""
        await super().start()
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=httpx.Timeout(
                    connect=self.config.connect_timeout_seconds,
                    read=self.config.request_timeout_seconds,
                    write=self.config.request_timeout_seconds,
                    pool=self.config.request_timeout_seconds,
                ),
                follow_redirects=True,
                transport=self._transport,
            )

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None
        await super().close()

    async def _fetch_bytes(self, locator: str) -> bytes:
        url = locator.lstrip("/")

        for attempt in range(self.config.max_retries):
            last_attempt = attempt == self.config.max_retries - 1
            try:
                response = await self._client.get(url)
            except httpx.TimeoutException as e:
                if not last_attempt:
                    await asyncio.sleep(self.config.retry_delay_seconds)
                    continue
                raise ResourceFetchError(locator, f"Timeout: {e}") from e
            except httpx.RequestError as e:
                if not last_attempt:
                    await asyncio.sleep(self.config.retry_delay_seconds)
                    continue
                raise ResourceFetchError(locator, f"Request error: {e}") from e

            if response.status_code == 200:
                return response.content

            # Server errors may be transient; anything else is final
            if response.status_code >= 500 and not last_attempt:
                await asyncio.sleep(self.config.retry_delay_seconds)
                continue

            raise ResourceFetchError(
                locator,
                f"HTTP {response.status_code}",
                status_code=response.status_code,
            )

        raise ResourceFetchError(locator, "Max retries exceeded")


class LocalResourceFetcher(ResourceFetcher):
    """Reads resources from a directory on the local filesystem."""

    def __init__(self, root: Union[Path, str], config: Optional[FetcherConfig] = None):
        super().__init__(config)
        self.root = Path(root)

    def resolve(self, locator: str) -> Path:
        """Resolve a locator to a path inside the root directory."""
        root = self.root.resolve()
        path = (root / locator.lstrip("/")).resolve()
        if path != root and root not in path.parents:
            raise ResourceFetchError(locator, "Locator escapes the data root")
        return path

    async def _fetch_bytes(self, locator: str) -> bytes:
        path = self.resolve(locator)
        try:
            return await asyncio.to_thread(path.read_bytes)
        except FileNotFoundError as e:
            raise ResourceFetchError(locator, "Resource not found") from e
        except OSError as e:
            raise ResourceFetchError(locator, f"I/O error: {e}") from e


def create_fetcher(settings: Settings) -> ResourceFetcher:
    """Build the fetcher selected by the settings."""
    config = FetcherConfig.from_settings(settings)
    if settings.use_http_sources:
        logger.info(f"Reading data sources from {settings.DATA_BASE_URL}")
        return HttpResourceFetcher(settings.DATA_BASE_URL, config)
    logger.info(f"Reading data sources from directory {settings.DATA_ROOT}")
    return LocalResourceFetcher(settings.DATA_ROOT, config)
