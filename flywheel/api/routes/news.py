"""News aggregation endpoint."""
from fastapi import APIRouter, Depends
import logging

from flywheel.api.errors import error_response
from flywheel.api.schemas import ErrorResponse, NewsResponse
from flywheel.api.dependencies import get_news_aggregator
from flywheel.domain.errors import ValidationError
from flywheel.services.news_aggregator import NewsAggregator

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["news"])


@router.get(
    "/news",
    response_model=NewsResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def get_news(
    q: str = "",
    aggregator: NewsAggregator = Depends(get_news_aggregator),
):
    """Latest headlines for a topic across the configured publishers."""
    try:
        result = await aggregator.aggregate(q)
        return NewsResponse.from_result(result)
    except ValidationError as e:
        return error_response(400, str(e))
    except Exception as e:
        logger.error(f"News fetch failed for '{q}': {e}")
        return error_response(500, "news fetch failed", details=str(e))
