"""Strategy business logic: resolve, fetch, evaluate."""
from typing import Optional
import logging

from flywheel.domain.entities import TrendSignal
from flywheel.domain.errors import ValidationError
from flywheel.domain.interfaces import PriceSeriesFetcher
from flywheel.services.symbol_resolver import resolve_symbol
from flywheel.services.trend_signal import TrendSignalEngine

logger = logging.getLogger(__name__)


class StrategyService:
    """Business logic for the trend-signal strategy."""

    def __init__(
        self,
        fetcher: PriceSeriesFetcher,
        engine: Optional[TrendSignalEngine] = None,
    ):
        self._fetcher = fetcher
        self._engine = engine or TrendSignalEngine()

    async def analyze(self, raw_symbol: str, days: Optional[int] = None) -> TrendSignal:
        """Compute the buy/sell/hold signal for a user-supplied symbol."""
        raw = (raw_symbol or "").strip()
        if not raw:
            raise ValidationError("symbol required")

        symbol = resolve_symbol(raw)
        logger.info(f"Analyzing {raw} as {symbol}")
        series = await self._fetcher.fetch(symbol, days=days)
        return self._engine.evaluate(series)
