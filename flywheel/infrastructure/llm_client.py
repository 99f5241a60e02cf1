"""DeepSeek chat completion client (OpenAI-compatible pass-through)."""
import logging
from typing import Any, Dict, List, Optional, Tuple

import httpx

from flywheel.domain.errors import LLMNotConfiguredError, UpstreamError
from flywheel.domain.interfaces import ChatCompletionClient

logger = logging.getLogger(__name__)


class DeepSeekClient(ChatCompletionClient):
    """Forward chat completion requests to DeepSeek."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        api_key: str,
        api_url: str = "https://api.deepseek.com/v1/chat/completions",
        default_model: str = "deepseek-chat",
    ):
        self._client = client
        self._api_key = api_key
        self._api_url = api_url
        self._default_model = default_model

    async def complete(
        self,
        messages: List[Dict[str, Any]],
        model: Optional[str] = None,
        temperature: float = 0.7,
    ) -> Tuple[int, Dict[str, Any]]:
        if not self._api_key:
            raise LLMNotConfiguredError("DeepSeek API key not configured")

        body = {
            "model": model or self._default_model,
            "messages": messages,
            "temperature": temperature,
        }
        headers = {"Authorization": f"Bearer {self._api_key}"}
        try:
            response = await self._client.post(self._api_url, json=body, headers=headers)
        except httpx.TimeoutException as e:
            raise UpstreamError("DeepSeek", None, f"timed out: {e}") from e
        except httpx.HTTPError as e:
            raise UpstreamError("DeepSeek", None, str(e)) from e

        try:
            payload = response.json()
        except ValueError as e:
            raise UpstreamError("DeepSeek", response.status_code, response.text[:200]) from e

        if not response.is_success:
            logger.warning(f"DeepSeek returned {response.status_code}")
        return response.status_code, payload
