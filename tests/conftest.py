"""Shared fixtures: fake logo directory and mock stock API transports."""

from collections.abc import Callable
from typing import Any

import httpx
import pytest

from market_board.core.logo_directory import LogoDirectory
from market_board.etl.extract import StockApiClient

BASE_URL = "http://stock-api.test/stock-api"

Handler = Callable[[httpx.Request], Any]


@pytest.fixture
def logos() -> LogoDirectory:
    return LogoDirectory(
        {
            "AAPL": "https://logo.clearbit.com/apple.com",
            "NVDA": "https://logo.clearbit.com/nvidia.com",
            "MSFT": "https://logo.clearbit.com/microsoft.com",
        }
    )


def route(routes: dict[str, Any]) -> Handler:
    """Build a transport handler answering by request path.

    Values are JSON payloads, ``httpx.Response`` objects, exceptions to
    raise, or callables taking the request.
    """

    def handler(request: httpx.Request) -> Any:
        endpoint = request.url.path.removeprefix("/stock-api")
        if endpoint not in routes:
            return httpx.Response(404, json={"error": "not found"})
        answer = routes[endpoint]
        if callable(answer) and not isinstance(answer, httpx.Response):
            return answer(request)
        if isinstance(answer, Exception):
            raise answer
        if isinstance(answer, httpx.Response):
            return answer
        return httpx.Response(200, json=answer)

    return handler


@pytest.fixture
def make_client() -> Callable[..., StockApiClient]:
    def _make(routes: dict[str, Any], attempts: int = 1) -> StockApiClient:
        transport = httpx.MockTransport(route(routes))
        return StockApiClient(
            BASE_URL,
            attempts=attempts,
            client=httpx.AsyncClient(transport=transport),
            backoff_max_sec=0,
        )

    return _make
