"""Google News RSS client for site-restricted headline search."""
import calendar
import logging
from datetime import datetime, timezone
from typing import List, Optional

import feedparser
import httpx

from flywheel.domain.entities import NewsItem
from flywheel.domain.errors import FeedFetchError
from flywheel.domain.interfaces import NewsSourceFetcher

logger = logging.getLogger(__name__)


def entry_timestamp(entry) -> Optional[datetime]:
    """UTC publish time from feedparser's parsed date, falling back to ``updated``."""
    parsed = entry.get("published_parsed") or entry.get("updated_parsed")
    if not parsed:
        return None
    return datetime.fromtimestamp(calendar.timegm(parsed), tz=timezone.utc)


def parse_feed(content: bytes, domain: str) -> List[NewsItem]:
    """Parse an RSS or Atom document into news items labelled with ``domain``.

    Raises FeedFetchError when the document is not a feed at all, such as an
    HTML consent page served with status 200. A valid feed with no entries
    gives an empty list.
    """
    parsed = feedparser.parse(content)
    if not parsed.get("version"):
        reason = parsed.get("bozo_exception") or "not an RSS or Atom document"
        raise FeedFetchError(domain, f"unparsable feed: {reason}")

    return [
        NewsItem(
            title=entry.get("title", "") or "",
            link=entry.get("link", "") or "",
            pub_date=entry.get("published", "") or entry.get("updated", "") or "",
            published_at=entry_timestamp(entry),
            source_domain=domain,
        )
        for entry in parsed.entries
    ]


class GoogleNewsRssClient(NewsSourceFetcher):
    """Search one publisher domain through the Google News RSS feed."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        feed_url: str = "https://news.google.com/rss/search",
        language: str = "zh-CN",
        country: str = "CN",
        edition: str = "CN:zh-Hans",
    ):
        self._client = client
        self._feed_url = feed_url
        self._locale = {"hl": language, "gl": country, "ceid": edition}

    async def fetch_for(self, domain: str, query: str) -> List[NewsItem]:
        """Fetch headlines from ``domain`` matching ``query``."""
        params = {"q": f"site:{domain} {query}", **self._locale}
        try:
            response = await self._client.get(self._feed_url, params=params)
        except httpx.TimeoutException as e:
            raise FeedFetchError(domain, f"timed out: {e}") from e
        except httpx.HTTPError as e:
            raise FeedFetchError(domain, str(e)) from e

        if not response.is_success:
            raise FeedFetchError(
                domain, f"HTTP {response.status_code}: {response.text[:200]}"
            )

        items = parse_feed(response.content, domain)
        logger.info(f"Fetched {len(items)} items from {domain} for '{query}'")
        return items
