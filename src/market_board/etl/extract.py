"""HTTP extraction layer for the stock API.

Wraps httpx with optional tenacity retries on transport errors.
Maps every failure onto the section error taxonomy before returning to
the caller.
"""

from enum import Enum
from types import TracebackType
from typing import Any

import httpx
from loguru import logger
from tenacity import AsyncRetrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from market_board.config.settings import Settings
from market_board.core.errors import FetchFailure, ParseFailure


class Endpoint(str, Enum):
    """Read-only endpoints below the API base URL."""

    INFO = "/info"
    MARKET_SUMMARY = "/market-summary"
    ACTIVE_STOCKS = "/active-stocks"


class StockApiClient:
    """Fetches JSON documents from the stock API."""

    def __init__(
        self,
        base_url: str,
        timeout: float | None = None,
        attempts: int = 1,
        client: httpx.AsyncClient | None = None,
        backoff_max_sec: float = 10.0,
    ) -> None:
        """
        Args:
            base_url: API root, e.g. "http://localhost:8081/stock-api"
            timeout: Request timeout in seconds, None disables it
            attempts: Tries per request on transport errors (1 = no retry)
            client: Optional pre-configured client, not closed by this class
            backoff_max_sec: Upper bound of the exponential wait between attempts
        """
        self.base_url = base_url.rstrip("/")
        self.attempts = max(1, attempts)
        self.backoff_max_sec = backoff_max_sec
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=httpx.Timeout(timeout))

    @classmethod
    def from_settings(
        cls, settings: Settings, client: httpx.AsyncClient | None = None
    ) -> "StockApiClient":
        return cls(
            settings.base_url,
            timeout=settings.request_timeout_sec,
            attempts=settings.fetch_attempts,
            client=client,
        )

    def url_for(self, endpoint: Endpoint) -> str:
        return f"{self.base_url}{endpoint.value}"

    async def get_json(self, endpoint: Endpoint) -> Any:
        """
        Issue one GET and decode the JSON body.

        Raises:
            FetchFailure: Request error (transport errors after all attempts),
                undecodable body encoding, too many redirects or non-2xx status
            ParseFailure: Body is not valid JSON
        """
        url = self.url_for(endpoint)
        logger.debug(f"GET {url}")

        try:
            response = await self._get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise FetchFailure(endpoint.value, e) from e
        except httpx.RequestError as e:
            raise FetchFailure(endpoint.value, e) from e

        try:
            payload = response.json()
        except ValueError as e:
            raise ParseFailure(endpoint.value, e) from e

        logger.debug(f"GET {url} -> {response.status_code}")
        return payload

    async def _get(self, url: str) -> httpx.Response:
        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(self.attempts),
            wait=wait_exponential(
                multiplier=1, min=min(2.0, self.backoff_max_sec), max=self.backoff_max_sec
            ),
            retry=retry_if_exception_type(httpx.TransportError),
            reraise=True,
        ):
            with attempt:
                if attempt.retry_state.attempt_number > 1:
                    logger.warning(f"Retrying {url} (attempt {attempt.retry_state.attempt_number})")
                response = await self._client.get(url)
        return response

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "StockApiClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
