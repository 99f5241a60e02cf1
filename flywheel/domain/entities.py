"""Domain entities - core business objects."""
from datetime import datetime
from enum import Enum
from typing import List, Optional
from pydantic import BaseModel

# SMA window plus the 7-sample breakout lookback, with a small margin
MIN_HISTORY = 210
SMA_PERIOD = 200
RECENT_WINDOW = 7


class PriceSeries(BaseModel):
    """Daily closing prices for one resolved symbol, oldest first."""
    symbol: str
    closes: List[float]

    def __len__(self) -> int:
        return len(self.closes)


class Recommendation(str, Enum):
    BUY = "buy"
    SELL = "sell"
    HOLD = "hold"


class TrendSignal(BaseModel):
    """Result of the 200-day trend / 7-day breakout rule."""
    symbol: str
    current_price: float
    sma200: Optional[float] = None
    recent7: List[float]
    min_prev6: Optional[float] = None
    max_prev6: Optional[float] = None
    is_up_trend: bool
    is_first7_low: bool
    is_first7_high: bool
    recommendation: Recommendation
    explanation: str

    class Config:
        frozen = True


class NewsSource(BaseModel):
    """A publisher domain searched by the news aggregator."""
    domain: str
    name: str

    class Config:
        frozen = True


class NewsItem(BaseModel):
    """Single headline from a publisher feed.

    ``pub_date`` is the raw feed string; ``published_at`` is the parsed UTC
    time when the feed provided one.
    """
    title: str
    link: str = ""
    pub_date: str = ""
    published_at: Optional[datetime] = None
    source_domain: str


class NewsResult(BaseModel):
    """Deduplicated, recency-ordered headlines for one query."""
    query: str
    count: int
    items: List[NewsItem]
    failed_sources: List[str] = []


class IntentKind(str, Enum):
    NEWS = "news"
    BUY = "buy"
    CHAT = "chat"


class Intent(BaseModel):
    """Classified user message; ``symbol`` is only set for buy intents."""
    kind: IntentKind
    symbol: Optional[str] = None
