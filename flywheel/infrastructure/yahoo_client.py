"""Yahoo Finance chart API client."""
import logging
import math
import time
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import httpx

from flywheel.domain.entities import MIN_HISTORY, PriceSeries
from flywheel.domain.errors import InsufficientHistoryError, UpstreamError
from flywheel.domain.interfaces import PriceSeriesFetcher

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 24 * 3600


def extract_closes(payload: Dict[str, Any]) -> List[float]:
    """Pull finite daily closes out of a v8 chart response.

    Missing sections yield an empty list. Nulls, NaN and infinities are
    dropped rather than filled.
    """
    try:
        raw = payload["chart"]["result"][0]["indicators"]["quote"][0]["close"]
    except (KeyError, IndexError, TypeError):
        return []
    if not raw:
        return []
    return [
        float(v)
        for v in raw
        if isinstance(v, (int, float)) and not isinstance(v, bool) and math.isfinite(v)
    ]


class YahooChartClient(PriceSeriesFetcher):
    """Fetch daily closes from the Yahoo Finance v8 chart endpoint."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        base_url: str = "https://query1.finance.yahoo.com/v8/finance/chart",
        default_range: str = "2y",
        min_samples: int = MIN_HISTORY,
    ):
        self._client = client
        self._base_url = base_url.rstrip("/")
        self._range = default_range
        self._min_samples = min_samples

    def _params(self, days: Optional[int]) -> Dict[str, Any]:
        params: Dict[str, Any] = {"interval": "1d", "includePrePost": "false"}
        if days is None:
            params["range"] = self._range
        else:
            end = int(time.time())
            params["period1"] = end - days * SECONDS_PER_DAY
            params["period2"] = end
        return params

    async def fetch(self, symbol: str, days: Optional[int] = None) -> PriceSeries:
        """Fetch the trailing window of daily closes for ``symbol``."""
        url = f"{self._base_url}/{quote(symbol, safe='')}"
        try:
            response = await self._client.get(url, params=self._params(days))
        except httpx.TimeoutException as e:
            raise UpstreamError("Yahoo", None, f"timed out: {e}") from e
        except httpx.HTTPError as e:
            raise UpstreamError("Yahoo", None, str(e)) from e

        if not response.is_success:
            raise UpstreamError("Yahoo", response.status_code, response.text[:200])

        try:
            payload = response.json()
        except ValueError as e:
            raise UpstreamError("Yahoo", response.status_code, f"invalid JSON: {e}") from e

        closes = extract_closes(payload)
        logger.info(f"Fetched {len(closes)} closes for {symbol}")
        if len(closes) < self._min_samples:
            raise InsufficientHistoryError(len(closes), self._min_samples)
        return PriceSeries(symbol=symbol, closes=closes)
