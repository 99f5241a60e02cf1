"""Pytest configuration and fixtures."""
from typing import Callable, Dict, List, Optional, Sequence

import httpx
import pytest
from unittest.mock import AsyncMock, MagicMock

from flywheel.domain.entities import NewsItem, NewsSource
from flywheel.domain.interfaces import NewsSourceFetcher


def build_closes(
    prev6: Sequence[float],
    current: float,
    sma200: float,
    length: int = 210,
) -> List[float]:
    """Close series whose last 200 samples average to ``sma200``.

    The oldest ``length - 200`` samples and the 193 filler samples before
    ``prev6`` share one value chosen so the SMA hits the target.
    """
    tail = list(prev6) + [current]
    filler_count = 200 - len(tail)
    filler = (sma200 * 200 - sum(tail)) / filler_count
    return [filler] * (length - len(tail)) + tail


@pytest.fixture
def make_closes() -> Callable[..., List[float]]:
    return build_closes


@pytest.fixture
def mock_http_client() -> Callable[[Callable[[httpx.Request], httpx.Response]], httpx.AsyncClient]:
    """Factory for an AsyncClient whose requests are answered by ``handler``."""
    def factory(handler):
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return factory


class FakeNewsFetcher(NewsSourceFetcher):
    """Returns canned items per domain; an exception value is raised instead."""

    def __init__(self, by_domain: Dict[str, object]):
        self.by_domain = by_domain
        self.calls: List[tuple] = []

    async def fetch_for(self, domain: str, query: str) -> List[NewsItem]:
        self.calls.append((domain, query))
        result = self.by_domain.get(domain, [])
        if isinstance(result, BaseException):
            raise result
        return list(result)


@pytest.fixture
def news_sources() -> List[NewsSource]:
    return [
        NewsSource(domain="cls.cn", name="CLS"),
        NewsSource(domain="yicai.com", name="Yicai"),
        NewsSource(domain="eeo.com.cn", name="EEO"),
    ]


def news_item(
    title: str,
    domain: str = "cls.cn",
    pub_date: str = "Mon, 06 Jan 2025 08:00:00 GMT",
    link: Optional[str] = None,
) -> NewsItem:
    return NewsItem(
        title=title,
        link=link or f"https://{domain}/{abs(hash(title))}",
        pub_date=pub_date,
        source_domain=domain,
    )


@pytest.fixture
def mock_strategy_service():
    """Mock strategy service."""
    service = MagicMock()
    service.analyze = AsyncMock()
    return service


@pytest.fixture
def mock_news_aggregator():
    """Mock news aggregator."""
    aggregator = MagicMock()
    aggregator.aggregate = AsyncMock()
    return aggregator


@pytest.fixture
def mock_chat_client():
    """Mock chat completion client."""
    client = MagicMock()
    client.complete = AsyncMock(
        return_value=(200, {"choices": [{"message": {"content": "hello"}}]})
    )
    return client
