"""Domain errors raised by the strategy and news pipelines."""
from typing import Dict, Optional

from flywheel.domain.entities import MIN_HISTORY


class FlywheelError(Exception):
    """Base class for all domain errors."""


class ValidationError(FlywheelError):
    """Required input is missing or blank."""


class InsufficientHistoryError(FlywheelError):
    """Fewer finite close samples than the trend rule needs."""

    def __init__(self, got: int, required: int = MIN_HISTORY):
        self.got = got
        self.required = required
        super().__init__(f"insufficient history: got {got}, need {required}")


class UpstreamError(FlywheelError):
    """Price or chat provider failed or answered with a non-success status."""

    def __init__(self, provider: str, status_code: Optional[int], body: str = ""):
        self.provider = provider
        self.status_code = status_code
        self.body = body
        if status_code is None:
            message = f"{provider} request failed: {body}"
        else:
            message = f"{provider} API {status_code}: {body}"
        super().__init__(message)


class FeedFetchError(FlywheelError):
    """One news source could not be fetched or parsed."""

    def __init__(self, domain: str, reason: str):
        self.domain = domain
        self.reason = reason
        super().__init__(f"{domain}: {reason}")


class NewsUnavailableError(FlywheelError):
    """Every configured news source failed."""

    def __init__(self, failures: Dict[str, FeedFetchError]):
        self.failures = failures
        details = "; ".join(str(err) for err in failures.values())
        super().__init__(details or "no news sources configured")


class LLMNotConfiguredError(FlywheelError):
    """No API key is available for the chat completion provider."""
