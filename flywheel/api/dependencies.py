"""FastAPI dependency injection setup."""
from typing import Optional

import httpx

from flywheel.config import llm_config, news_config, parse_news_sources, yahoo_config
from flywheel.infrastructure.llm_client import DeepSeekClient
from flywheel.infrastructure.rss_client import GoogleNewsRssClient
from flywheel.infrastructure.yahoo_client import YahooChartClient
from flywheel.services.news_aggregator import NewsAggregator
from flywheel.services.strategy_service import StrategyService


# Application state (set during lifespan)
_strategy_service: Optional[StrategyService] = None
_news_aggregator: Optional[NewsAggregator] = None
_chat_client: Optional[DeepSeekClient] = None


def init_services(client: httpx.AsyncClient) -> None:
    """Initialize all services with a shared HTTP client."""
    global _strategy_service, _news_aggregator, _chat_client

    price_fetcher = YahooChartClient(
        client,
        base_url=yahoo_config.CHART_URL,
        default_range=yahoo_config.RANGE,
    )
    news_fetcher = GoogleNewsRssClient(
        client,
        feed_url=news_config.FEED_URL,
        language=news_config.LANGUAGE,
        country=news_config.COUNTRY,
        edition=news_config.EDITION,
    )

    _strategy_service = StrategyService(price_fetcher)
    _news_aggregator = NewsAggregator(news_fetcher, parse_news_sources(news_config.SOURCES))
    _chat_client = DeepSeekClient(
        client,
        api_key=llm_config.API_KEY,
        api_url=llm_config.API_URL,
        default_model=llm_config.DEFAULT_MODEL,
    )


def get_strategy_service() -> StrategyService:
    """Get strategy service dependency."""
    if _strategy_service is None:
        raise RuntimeError("Services not initialized")
    return _strategy_service


def get_news_aggregator() -> NewsAggregator:
    """Get news aggregator dependency."""
    if _news_aggregator is None:
        raise RuntimeError("Services not initialized")
    return _news_aggregator


def get_chat_client() -> DeepSeekClient:
    """Get chat completion client dependency."""
    if _chat_client is None:
        raise RuntimeError("Services not initialized")
    return _chat_client
