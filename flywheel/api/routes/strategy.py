"""Trend-signal strategy endpoint."""
from typing import Optional
from fastapi import APIRouter, Depends, Query
import logging

from flywheel.api.errors import error_response
from flywheel.api.schemas import ErrorResponse, StrategyResponse
from flywheel.api.dependencies import get_strategy_service
from flywheel.domain.errors import InsufficientHistoryError, ValidationError
from flywheel.services.strategy_service import StrategyService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["strategy"])


@router.get(
    "/strategy",
    response_model=StrategyResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def get_strategy(
    symbol: str = "",
    days: Optional[int] = Query(None, ge=1, le=3650),
    service: StrategyService = Depends(get_strategy_service),
):
    """Buy/sell/hold signal from the 200-day trend and 7-day breakout rule."""
    try:
        signal = await service.analyze(symbol, days=days)
        return StrategyResponse.from_signal(signal)
    except ValidationError as e:
        return error_response(400, str(e))
    except InsufficientHistoryError as e:
        logger.info(f"Insufficient history for {symbol}: {e.got}")
        return error_response(400, "insufficient history", got=e.got)
    except Exception as e:
        logger.error(f"Strategy failed for {symbol}: {e}")
        return error_response(500, "strategy failed", details=str(e))
