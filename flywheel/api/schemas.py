"""API request/response schemas (DTOs)."""
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field

from flywheel.domain.entities import NewsItem, NewsResult, TrendSignal


class CamelModel(BaseModel):
    """Serialized with camelCase aliases, populated by field name."""

    class Config:
        populate_by_name = True


# Response models
class SignalFlags(CamelModel):
    """Breakout flags relative to the preceding 6 closes."""
    is_first7_low: bool = Field(alias="isFirst7Low")
    is_first7_high: bool = Field(alias="isFirst7High")


class StrategyResponse(CamelModel):
    """Response for the trend-signal strategy."""
    symbol: str
    current_price: float = Field(alias="currentPrice")
    sma200: Optional[float] = None
    is_up_trend: bool = Field(alias="isUpTrend")
    recent7: List[float]
    min_prev6: Optional[float] = Field(default=None, alias="minPrev6")
    max_prev6: Optional[float] = Field(default=None, alias="maxPrev6")
    signals: SignalFlags
    recommendation: str
    explanation: str

    @classmethod
    def from_signal(cls, signal: TrendSignal) -> "StrategyResponse":
        return cls(
            symbol=signal.symbol,
            current_price=signal.current_price,
            sma200=signal.sma200,
            is_up_trend=signal.is_up_trend,
            recent7=signal.recent7,
            min_prev6=signal.min_prev6,
            max_prev6=signal.max_prev6,
            signals=SignalFlags(
                is_first7_low=signal.is_first7_low,
                is_first7_high=signal.is_first7_high,
            ),
            recommendation=signal.recommendation.value,
            explanation=signal.explanation,
        )


class NewsItemResponse(CamelModel):
    """Response for a single headline."""
    title: str
    link: str
    pub_date: str = Field(alias="pubDate")
    source_domain: str = Field(alias="sourceDomain")

    @classmethod
    def from_item(cls, item: NewsItem) -> "NewsItemResponse":
        return cls(
            title=item.title,
            link=item.link,
            pub_date=item.pub_date,
            source_domain=item.source_domain,
        )


class NewsResponse(CamelModel):
    """Response for aggregated news."""
    query: str
    count: int
    items: List[NewsItemResponse]
    failed_sources: List[str] = Field(default_factory=list, alias="failedSources")

    @classmethod
    def from_result(cls, result: NewsResult) -> "NewsResponse":
        return cls(
            query=result.query,
            count=result.count,
            items=[NewsItemResponse.from_item(i) for i in result.items],
            failed_sources=result.failed_sources,
        )


class HealthResponse(BaseModel):
    """Health check response."""
    ok: bool
    ts: int


class ErrorResponse(BaseModel):
    """Structured error body returned by every endpoint."""
    error: str
    details: Optional[str] = None
    got: Optional[int] = None


# Request models
class ChatRequest(BaseModel):
    """OpenAI-format chat completion request."""
    messages: List[Dict[str, Any]]
    model: Optional[str] = None
    temperature: float = 0.7
