"""Configuration management using python-dotenv."""
import os
from pathlib import Path
from typing import List

from dotenv import load_dotenv

from flywheel.domain.entities import NewsSource

# Load .env file from project root
env_path = Path(__file__).parent.parent / '.env'
load_dotenv(dotenv_path=env_path)


class AppConfig:
    """Application configuration."""
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    BACKEND_URL: str = os.getenv("BACKEND_URL", "http://localhost:8000")
    UPSTREAM_TIMEOUT: float = float(os.getenv("UPSTREAM_TIMEOUT", "5.0"))
    USER_AGENT: str = os.getenv("USER_AGENT", "Mozilla/5.0 Flywheel")


class YahooConfig:
    """Yahoo Finance chart API configuration."""
    CHART_URL: str = os.getenv(
        "YAHOO_CHART_URL", "https://query1.finance.yahoo.com/v8/finance/chart"
    )
    RANGE: str = os.getenv("YAHOO_RANGE", "2y")


class NewsConfig:
    """News feed configuration."""
    FEED_URL: str = os.getenv("NEWS_FEED_URL", "https://news.google.com/rss/search")
    SOURCES: str = os.getenv(
        "NEWS_SOURCES", "cls.cn=财联社,yicai.com=第一财经,eeo.com.cn=经济观察报"
    )
    LANGUAGE: str = os.getenv("NEWS_LANGUAGE", "zh-CN")
    COUNTRY: str = os.getenv("NEWS_COUNTRY", "CN")
    EDITION: str = os.getenv("NEWS_EDITION", "CN:zh-Hans")


class LLMConfig:
    """Chat completion (DeepSeek) configuration."""
    API_KEY: str = os.getenv("DEEPSEEK_API_KEY", "")
    API_URL: str = os.getenv(
        "DEEPSEEK_API_URL", "https://api.deepseek.com/v1/chat/completions"
    )
    DEFAULT_MODEL: str = os.getenv("DEEPSEEK_MODEL", "deepseek-chat")


def parse_news_sources(raw: str) -> List[NewsSource]:
    """Parse ``domain=name`` pairs separated by commas.

    A pair without ``=`` uses the domain as its display name. Blank entries
    and repeated domains are skipped.
    """
    sources: List[NewsSource] = []
    seen = set()
    for chunk in raw.split(","):
        chunk = chunk.strip()
        if not chunk:
            continue
        domain, _, name = chunk.partition("=")
        domain = domain.strip()
        if not domain or domain in seen:
            continue
        seen.add(domain)
        sources.append(NewsSource(domain=domain, name=name.strip() or domain))
    return sources


# Singleton instances
app_config = AppConfig()
yahoo_config = YahooConfig()
news_config = NewsConfig()
llm_config = LLMConfig()
