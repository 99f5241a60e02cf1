"""Route free-form chat text to the news, buy or chat behavior."""
import re
from typing import Optional, Pattern

from flywheel.domain.entities import Intent, IntentKind

NEWS_PATTERN = re.compile(r"行情|板块|新闻|资讯|热点|走势")
BUY_PATTERN = re.compile(r"买入|能不能买|是否买|值得买|进场")
# ASCII word boundaries so a code glued to CJK text still matches
SYMBOL_PATTERN = re.compile(r"\b(\d{6})(?:\.(SS|SZ))?\b", re.ASCII | re.IGNORECASE)


class IntentClassifier:
    """Keyword classifier; news wins over buy, everything else is chat."""

    def __init__(
        self,
        news_pattern: Pattern = NEWS_PATTERN,
        buy_pattern: Pattern = BUY_PATTERN,
        symbol_pattern: Pattern = SYMBOL_PATTERN,
    ):
        self._news = news_pattern
        self._buy = buy_pattern
        self._symbol = symbol_pattern

    def extract_symbol(self, text: str) -> Optional[str]:
        match = self._symbol.search(text)
        if not match:
            return None
        code, suffix = match.group(1), match.group(2)
        return f"{code}.{suffix.upper()}" if suffix else code

    def classify(self, text: str) -> Intent:
        if self._news.search(text):
            return Intent(kind=IntentKind.NEWS)
        symbol = self.extract_symbol(text)
        if symbol or self._buy.search(text):
            return Intent(kind=IntentKind.BUY, symbol=symbol)
        return Intent(kind=IntentKind.CHAT)


default_classifier = IntentClassifier()


def classify_intent(text: str) -> Intent:
    return default_classifier.classify(text)
