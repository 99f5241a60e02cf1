"""Tests for the Yahoo chart price fetcher."""
import asyncio
import json
import math

import httpx
import pytest

from flywheel.domain.errors import InsufficientHistoryError, UpstreamError
from flywheel.infrastructure.yahoo_client import YahooChartClient, extract_closes


def chart_payload(closes):
    return {"chart": {"result": [{"indicators": {"quote": [{"close": closes}]}}], "error": None}}


def fetch(client, symbol="600519.SS", days=None):
    async def run():
        async with client:
            return await YahooChartClient(client).fetch(symbol, days=days)
    return asyncio.run(run())


def test_extract_closes_drops_non_finite_values():
    payload = chart_payload([1.0, None, 2.5, math.nan, math.inf, 3, True, "4"])
    assert extract_closes(payload) == [1.0, 2.5, 3.0]


def test_extract_closes_handles_missing_sections():
    assert extract_closes({}) == []
    assert extract_closes({"chart": {"result": None}}) == []
    assert extract_closes({"chart": {"result": [{"indicators": {"quote": []}}]}}) == []


def test_fetch_requests_two_year_daily_range(mock_http_client):
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["path"] = request.url.path
        seen["params"] = dict(request.url.params)
        return httpx.Response(200, json=chart_payload([10.0] * 250))

    series = fetch(mock_http_client(handler))

    assert seen["path"] == "/v8/finance/chart/600519.SS"
    assert seen["params"] == {"interval": "1d", "includePrePost": "false", "range": "2y"}
    assert series.symbol == "600519.SS"
    assert len(series) == 250


def test_fetch_with_days_uses_explicit_window(mock_http_client):
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["params"] = dict(request.url.params)
        return httpx.Response(200, json=chart_payload([10.0] * 250))

    fetch(mock_http_client(handler), days=400)

    params = seen["params"]
    assert "range" not in params
    assert int(params["period2"]) - int(params["period1"]) == 400 * 24 * 3600

    # httpx refuses to encode NaN through json=, so send the raw body
def test_209_samples_is_insufficient(mock_http_client):
    # Yahoo emits bare NaN tokens, which httpx will not encode via json=
    body = json.dumps(chart_payload([10.0] * 209 + [None, math.nan]))
    client = mock_http_client(
        lambda request: httpx.Response(200, text=body, headers={"content-type": "application/json"})
    )

    with pytest.raises(InsufficientHistoryError) as exc_info:
        fetch(client)
    assert exc_info.value.got == 209


def test_210_samples_is_enough(mock_http_client):
    client = mock_http_client(lambda request: httpx.Response(200, json=chart_payload([10.0] * 210)))
    assert len(fetch(client)) == 210


def test_non_success_status_raises_upstream_error(mock_http_client):
    body = "Not Found: " + "x" * 500
    client = mock_http_client(lambda request: httpx.Response(404, text=body))

    with pytest.raises(UpstreamError) as exc_info:
        fetch(client, symbol="999999")
    err = exc_info.value
    assert err.status_code == 404
    assert err.body == body[:200]
    assert "404" in str(err)


def test_timeout_raises_upstream_error(mock_http_client):
    def handler(request):
        raise httpx.ReadTimeout("too slow", request=request)

    with pytest.raises(UpstreamError) as exc_info:
        fetch(mock_http_client(handler))
    assert exc_info.value.status_code is None
    assert "timed out" in str(exc_info.value)
