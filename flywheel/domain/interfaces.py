"""Upstream interfaces (Ports) - abstraction over external data providers."""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Tuple

from flywheel.domain.entities import NewsItem, PriceSeries


class PriceSeriesFetcher(ABC):
    """Interface for daily close-price history."""

    @abstractmethod
    async def fetch(self, symbol: str, days: Optional[int] = None) -> PriceSeries:
        """Fetch daily closes for a resolved symbol, oldest first."""
        pass


class NewsSourceFetcher(ABC):
    """Interface for a site-restricted news search."""

    @abstractmethod
    async def fetch_for(self, domain: str, query: str) -> List[NewsItem]:
        """Fetch headlines published by ``domain`` matching ``query``."""
        pass


class ChatCompletionClient(ABC):
    """Interface for an OpenAI-style chat completion endpoint."""

    @abstractmethod
    async def complete(
        self,
        messages: List[Dict[str, Any]],
        model: Optional[str] = None,
        temperature: float = 0.7,
    ) -> Tuple[int, Dict[str, Any]]:
        """Return the provider status code and JSON payload unchanged."""
        pass
