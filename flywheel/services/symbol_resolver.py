"""A-share symbol normalization for the Yahoo price provider."""
import re

SHANGHAI_SUFFIX = ".SS"
SHENZHEN_SUFFIX = ".SZ"

_SUFFIXED = re.compile(r"\.(SS|SZ)$", re.IGNORECASE)
_SHANGHAI = re.compile(r"^(600|601|603|605)\d{3}$")
_SHENZHEN = re.compile(r"^(000|001|002|300|301)\d{3}$")
_WHITESPACE = re.compile(r"\s+")


def resolve_symbol(raw: str) -> str:
    """Map a bare 6-digit A-share code to its exchange-suffixed form.

    ``600519`` becomes ``600519.SS`` and ``000001`` becomes ``000001.SZ``.
    Codes already carrying a suffix are uppercased; anything else is
    returned with whitespace removed.
    """
    cleaned = _WHITESPACE.sub("", raw)
    if _SUFFIXED.search(cleaned):
        return cleaned.upper()
    if _SHANGHAI.match(cleaned):
        return cleaned + SHANGHAI_SUFFIX
    if _SHENZHEN.match(cleaned):
        return cleaned + SHENZHEN_SUFFIX
    return cleaned
