"""Custom exceptions for the markcrawl engine and its boundary services."""
from typing import Optional


class HttpFetchError(Exception):
    """Raised when an HTTP fetch fails due to network/transport errors."""

    def __init__(self, url: str, original: Exception):
        self.url = url
        self.original = original
        super().__init__(f"HTTP fetch failed for {url}: {original}")


class PageFetchError(Exception):
    """Raised when a page cannot be fetched or answers with a non-success status.

    Non-seed pages failing this way are logged and skipped by the traversal.
    """

    def __init__(self, url: str, reason: str, status_code: Optional[int] = None):
        self.url = url
        self.reason = reason
        self.status_code = status_code
        super().__init__(f"Could not fetch {url}: {reason}")


class FatalSeedError(Exception):
    """Raised when the seed URL of a crawl cannot be fetched or parsed."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(reason)


class StrategyExhausted(FatalSeedError):
    """Raised when every strategy in a strategy chain failed.

    The message is the last strategy's error so callers see the most specific failure.
    """

    def __init__(self, url: str, last_error: Optional[Exception], attempted: list[str]):
        self.last_error = last_error
        self.attempted = list(attempted)
        reason = str(last_error) if last_error is not None else "no crawl strategy configured"
        super().__init__(url, reason)


class PolicyViolation(Exception):
    """Raised on programming-contract failures, e.g. an unknown fetch mode in a strategy chain."""
