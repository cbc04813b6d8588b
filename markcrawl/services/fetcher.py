from __future__ import annotations

from typing import Protocol

from markcrawl.domain.crawl_policy import CrawlPolicy
from markcrawl.domain.http_response import HttpResponse


class Fetcher(Protocol):
    """Fetch a URL and return a normalized HTTP-like response.

    This is intentionally small so the traversal can run over a plain
    requests-based fetcher or a headless-browser session alike.
    """

    def fetch(self, url: str, policy: CrawlPolicy, stop_event=None) -> HttpResponse: ...


class HttpServiceFetcher:
    """Static fetcher: applies the policy's headers and per-fetch timeout."""

    name = "http"

    def __init__(self, http_service):
        self._http_service = http_service

    def fetch(self, url: str, policy: CrawlPolicy, stop_event=None) -> HttpResponse:
        return self._http_service.fetch(
            url,
            headers=policy.custom_headers,
            timeout=policy.timeout_seconds,
        )
