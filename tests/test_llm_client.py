"""Tests for the DeepSeek chat completion client."""
import asyncio
import json

import httpx
import pytest

from flywheel.domain.errors import LLMNotConfiguredError, UpstreamError
from flywheel.infrastructure.llm_client import DeepSeekClient

API_URL = "https://api.deepseek.com/v1/chat/completions"
MESSAGES = [{"role": "user", "content": "什么是市盈率"}]


def complete(client, api_key="sk-test", **kwargs):
    async def run():
        async with client:
            llm = DeepSeekClient(client, api_key, api_url=API_URL, default_model="deepseek-chat")
            return await llm.complete(MESSAGES, **kwargs)
    return asyncio.run(run())


def test_sends_bearer_key_and_body(mock_http_client):
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["auth"] = request.headers.get("authorization")
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"choices": [{"message": {"content": "ok"}}]})

    status, payload = complete(mock_http_client(handler), model="deepseek-reasoner", temperature=0.2)

    assert seen["url"] == API_URL
    assert seen["auth"] == "Bearer sk-test"
    assert seen["body"] == {"model": "deepseek-reasoner", "messages": MESSAGES, "temperature": 0.2}
    assert status == 200
    assert payload["choices"][0]["message"]["content"] == "ok"


def test_configured_model_is_the_default(mock_http_client):
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={})

    complete(mock_http_client(handler))

    assert seen["body"]["model"] == "deepseek-chat"
    assert seen["body"]["temperature"] == 0.7


def test_missing_key_is_not_sent(mock_http_client):
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(200, json={})

    with pytest.raises(LLMNotConfiguredError):
        complete(mock_http_client(handler), api_key="")
    assert calls == []


def test_provider_error_status_is_relayed(mock_http_client):
    client = mock_http_client(
        lambda request: httpx.Response(401, json={"error": {"message": "invalid key"}})
    )

    status, payload = complete(client)

    assert status == 401
    assert payload == {"error": {"message": "invalid key"}}


def test_transport_failure_raises_upstream_error(mock_http_client):
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(UpstreamError) as exc_info:
        complete(mock_http_client(handler))
    assert exc_info.value.provider == "DeepSeek"
    assert exc_info.value.status_code is None


def test_timeout_raises_upstream_error(mock_http_client):
    def handler(request):
        raise httpx.ReadTimeout("read timed out", request=request)

    with pytest.raises(UpstreamError) as exc_info:
        complete(mock_http_client(handler))
    assert "timed out" in exc_info.value.body


def test_non_json_body_raises_upstream_error(mock_http_client):
    client = mock_http_client(lambda request: httpx.Response(502, text="<html>Bad Gateway</html>"))

    with pytest.raises(UpstreamError) as exc_info:
        complete(client)
    assert exc_info.value.status_code == 502
    assert exc_info.value.body == "<html>Bad Gateway</html>"
