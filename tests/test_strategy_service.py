"""Tests for the strategy service pipeline."""
import asyncio

import pytest
from unittest.mock import AsyncMock, MagicMock

from conftest import build_closes
from flywheel.domain.entities import PriceSeries, Recommendation
from flywheel.domain.errors import InsufficientHistoryError, ValidationError
from flywheel.services.strategy_service import StrategyService


@pytest.fixture
def mock_fetcher():
    """Mock price fetcher echoing the requested symbol."""
    fetcher = MagicMock()
    closes = build_closes([101.0, 102.0, 103.0, 104.0, 99.0, 98.0], current=110.0, sma200=100.0)
    fetcher.fetch = AsyncMock(
        side_effect=lambda symbol, days=None: PriceSeries(symbol=symbol, closes=closes)
    )
    return fetcher


def test_resolves_symbol_before_fetching(mock_fetcher):
    signal = asyncio.run(StrategyService(mock_fetcher).analyze(" 600519 "))

    mock_fetcher.fetch.assert_awaited_once_with("600519.SS", days=None)
    assert signal.symbol == "600519.SS"
    assert signal.recommendation == Recommendation.SELL


def test_days_reach_the_fetcher(mock_fetcher):
    asyncio.run(StrategyService(mock_fetcher).analyze("000001", days=500))
    mock_fetcher.fetch.assert_awaited_once_with("000001.SZ", days=500)


def test_blank_symbol_is_rejected(mock_fetcher):
    with pytest.raises(ValidationError):
        asyncio.run(StrategyService(mock_fetcher).analyze("   "))
    mock_fetcher.fetch.assert_not_awaited()


def test_fetch_errors_propagate(mock_fetcher):
    mock_fetcher.fetch.side_effect = InsufficientHistoryError(209)

    with pytest.raises(InsufficientHistoryError) as exc_info:
        asyncio.run(StrategyService(mock_fetcher).analyze("600519"))
    assert exc_info.value.got == 209
