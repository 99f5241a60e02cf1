"""News aggregation: concurrent per-source fetch, dedup, recency sort."""
import asyncio
import logging
from datetime import datetime, timezone
from typing import Dict, List, Optional, Sequence

from dateutil import parser as dtparse

from flywheel.domain.entities import NewsItem, NewsResult, NewsSource
from flywheel.domain.errors import FeedFetchError, NewsUnavailableError, ValidationError
from flywheel.domain.interfaces import NewsSourceFetcher

logger = logging.getLogger(__name__)

MAX_ITEMS = 15


def parse_pub_date(value: str) -> Optional[datetime]:
    """Parse a feed date string (RFC 822 or ISO-8601); naive values are taken as UTC."""
    if not value:
        return None
    try:
        parsed = dtparse.parse(value)
    except (ValueError, OverflowError):
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def published_at(item: NewsItem) -> Optional[datetime]:
    """Parsed feed time when present, else the raw ``pub_date`` string parsed."""
    if item.published_at is not None:
        if item.published_at.tzinfo is None:
            return item.published_at.replace(tzinfo=timezone.utc)
        return item.published_at
    return parse_pub_date(item.pub_date)


def dedupe_by_title(items: Sequence[NewsItem]) -> List[NewsItem]:
    """Keep the first item per trimmed title, dropping blank titles."""
    seen = set()
    deduped: List[NewsItem] = []
    for item in items:
        key = (item.title or "").strip()
        if not key or key in seen:
            continue
        seen.add(key)
        deduped.append(item)
    return deduped


def sort_by_recency(items: Sequence[NewsItem]) -> List[NewsItem]:
    """Newest first; undated items go last in their original order."""
    def sort_key(item: NewsItem):
        published = published_at(item)
        if published is None:
            return (1, 0.0)
        return (0, -published.timestamp())

    return sorted(items, key=sort_key)


class NewsAggregator:
    """Fan out a query across publisher feeds and merge the results."""

    def __init__(
        self,
        fetcher: NewsSourceFetcher,
        sources: Sequence[NewsSource],
        max_items: int = MAX_ITEMS,
    ):
        self._fetcher = fetcher
        self._sources = list(sources)
        self._max_items = max_items

    async def aggregate(self, query: str) -> NewsResult:
        """Fetch, dedupe, sort and truncate headlines for ``query``."""
        q = (query or "").strip()
        if not q:
            raise ValidationError("q required")

        results = await asyncio.gather(
            *(self._fetcher.fetch_for(s.domain, q) for s in self._sources),
            return_exceptions=True,
        )

        merged: List[NewsItem] = []
        failures: Dict[str, FeedFetchError] = {}
        for source, result in zip(self._sources, results):
            if isinstance(result, BaseException) and not isinstance(result, Exception):
                raise result
            if isinstance(result, Exception):
                error = result if isinstance(result, FeedFetchError) else FeedFetchError(
                    source.domain, str(result)
                )
                logger.warning(f"News source {source.domain} failed: {error.reason}")
                failures[source.domain] = error
                continue
            merged.extend(result)

        if self._sources and len(failures) == len(self._sources):
            raise NewsUnavailableError(failures)

        deduped = dedupe_by_title(merged)
        ordered = sort_by_recency(deduped)
        logger.info(
            f"News for '{q}': {len(merged)} fetched, {len(deduped)} unique, "
            f"{len(failures)} sources failed"
        )
        return NewsResult(
            query=q,
            count=len(deduped),
            items=ordered[: self._max_items],
            failed_sources=list(failures),
        )
