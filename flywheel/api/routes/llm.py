"""Chat completion pass-through endpoint."""
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
import logging

from flywheel.api.errors import error_response
from flywheel.api.schemas import ChatRequest
from flywheel.api.dependencies import get_chat_client
from flywheel.domain.errors import LLMNotConfiguredError
from flywheel.domain.interfaces import ChatCompletionClient

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["llm"])


@router.post("/llm")
async def chat_completion(
    request: ChatRequest,
    client: ChatCompletionClient = Depends(get_chat_client),
) -> JSONResponse:
    """Forward an OpenAI-format chat request and relay the provider's answer."""
    try:
        status_code, payload = await client.complete(
            request.messages, model=request.model, temperature=request.temperature
        )
    except LLMNotConfiguredError:
        return error_response(500, "LLM API key not configured")
    except Exception as e:
        logger.error(f"LLM error: {e}")
        return error_response(500, "LLM request failed", details=str(e))
    return JSONResponse(status_code=status_code, content=payload)
