"""HTTP client error mapping and retries."""

from collections.abc import Callable

import httpx
import pytest

from market_board.config.settings import Settings
from market_board.core.errors import FailureKind, FetchFailure, ParseFailure
from market_board.etl.extract import Endpoint, StockApiClient


@pytest.mark.asyncio
async def test_get_json_success(make_client: Callable[..., StockApiClient]) -> None:
    client = make_client({"/info": {"market": "United States"}})
    payload = await client.get_json(Endpoint.INFO)
    assert payload == {"market": "United States"}


@pytest.mark.asyncio
async def test_non_success_status_is_fetch_failure(
    make_client: Callable[..., StockApiClient],
) -> None:
    client = make_client({"/info": httpx.Response(503, text="unavailable")})
    with pytest.raises(FetchFailure) as exc_info:
        await client.get_json(Endpoint.INFO)
    assert exc_info.value.endpoint == "/info"
    assert exc_info.value.kind is FailureKind.FETCH
    assert isinstance(exc_info.value.cause, httpx.HTTPStatusError)


@pytest.mark.asyncio
async def test_transport_error_is_fetch_failure(
    make_client: Callable[..., StockApiClient],
) -> None:
    client = make_client({"/market-summary": httpx.ConnectError("connection refused")})
    with pytest.raises(FetchFailure) as exc_info:
        await client.get_json(Endpoint.MARKET_SUMMARY)
    assert exc_info.value.endpoint == "/market-summary"
    assert isinstance(exc_info.value.cause, httpx.ConnectError)


@pytest.mark.asyncio
async def test_undecodable_body_is_fetch_failure(
    make_client: Callable[..., StockApiClient],
) -> None:
    body = httpx.Response(200, headers={"Content-Encoding": "gzip"}, content=b"not gzip")
    client = make_client({"/info": body})
    with pytest.raises(FetchFailure) as exc_info:
        await client.get_json(Endpoint.INFO)
    assert exc_info.value.kind is FailureKind.FETCH
    assert isinstance(exc_info.value.cause, httpx.DecodingError)


@pytest.mark.asyncio
async def test_malformed_body_is_parse_failure(
    make_client: Callable[..., StockApiClient],
) -> None:
    client = make_client({"/active-stocks": httpx.Response(200, text="{not json")})
    with pytest.raises(ParseFailure) as exc_info:
        await client.get_json(Endpoint.ACTIVE_STOCKS)
    assert exc_info.value.kind is FailureKind.PARSE


@pytest.mark.asyncio
async def test_transport_error_retried_when_configured(
    make_client: Callable[..., StockApiClient],
) -> None:
    calls = []

    def flaky(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        if len(calls) == 1:
            raise httpx.ConnectError("connection reset", request=request)
        return httpx.Response(200, json=[])

    client = make_client({"/market-summary": flaky}, attempts=2)
    assert await client.get_json(Endpoint.MARKET_SUMMARY) == []
    assert len(calls) == 2


@pytest.mark.asyncio
async def test_single_attempt_by_default(make_client: Callable[..., StockApiClient]) -> None:
    calls = []

    def failing(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        raise httpx.ConnectError("connection refused", request=request)

    client = make_client({"/info": failing})
    with pytest.raises(FetchFailure):
        await client.get_json(Endpoint.INFO)
    assert len(calls) == 1


@pytest.mark.asyncio
async def test_status_errors_are_not_retried(make_client: Callable[..., StockApiClient]) -> None:
    calls = []

    def unavailable(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(500)

    client = make_client({"/info": unavailable}, attempts=3)
    with pytest.raises(FetchFailure):
        await client.get_json(Endpoint.INFO)
    assert len(calls) == 1


@pytest.mark.asyncio
async def test_urls_from_settings() -> None:
    settings = Settings(base_url="http://localhost:9000/stock-api/")
    async with StockApiClient.from_settings(settings) as client:
        assert client.url_for(Endpoint.INFO) == "http://localhost:9000/stock-api/info"
    assert client.url_for(Endpoint.ACTIVE_STOCKS) == (
        "http://localhost:9000/stock-api/active-stocks"
    )
