"""200-day trend filter with a 7-day breakout trigger."""
import logging
from typing import List, Optional

from flywheel.domain.entities import (
    RECENT_WINDOW,
    SMA_PERIOD,
    PriceSeries,
    Recommendation,
    TrendSignal,
)
from flywheel.domain.errors import InsufficientHistoryError

logger = logging.getLogger(__name__)

BUY_REASON = (
    "Uptrend confirmed: price is above the 200-day average and just made a "
    "fresh 7-day low. Treat as a pullback entry."
)
SELL_REASON = "Price just made a fresh 7-day high. Treat as a profit-taking exit."
HOLD_REASON = "Neither the buy nor the sell trigger fired. Hold and watch."


def sma(values: List[float], period: int) -> Optional[float]:
    """Simple moving average of the last ``period`` values, None if too short."""
    if period <= 0 or len(values) < period:
        return None
    return sum(values[-period:]) / period


class TrendSignalEngine:
    """Classify a close series as buy / sell / hold.

    Rules, first match wins:
      * price above SMA-200 and strictly below the prior 6 closes -> buy
      * price strictly above the prior 6 closes -> sell
      * otherwise -> hold
    """

    def evaluate(self, series: PriceSeries) -> TrendSignal:
        closes = series.closes
        if not closes:
            raise InsufficientHistoryError(0)

        current_price = closes[-1]
        sma200 = sma(closes, SMA_PERIOD)
        recent7 = closes[-RECENT_WINDOW:]
        prev6 = closes[-RECENT_WINDOW:-1]
        full_window = len(prev6) == RECENT_WINDOW - 1

        min_prev6 = min(prev6) if prev6 else None
        max_prev6 = max(prev6) if prev6 else None
        is_up_trend = sma200 is not None and current_price > sma200
        is_first7_low = full_window and current_price < min_prev6
        is_first7_high = full_window and current_price > max_prev6

        if is_up_trend and is_first7_low:
            recommendation, explanation = Recommendation.BUY, BUY_REASON
        elif is_first7_high:
            recommendation, explanation = Recommendation.SELL, SELL_REASON
        else:
            recommendation, explanation = Recommendation.HOLD, HOLD_REASON

        logger.info(
            f"{series.symbol}: price={current_price} sma200={sma200} -> {recommendation.value}"
        )
        return TrendSignal(
            symbol=series.symbol,
            current_price=current_price,
            sma200=sma200,
            recent7=recent7,
            min_prev6=min_prev6,
            max_prev6=max_prev6,
            is_up_trend=is_up_trend,
            is_first7_low=is_first7_low,
            is_first7_high=is_first7_high,
            recommendation=recommendation,
            explanation=explanation,
        )
