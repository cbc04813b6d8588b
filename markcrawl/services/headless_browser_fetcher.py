from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional

from markcrawl.domain.crawl_policy import CrawlPolicy
from markcrawl.domain.http_response import HttpResponse

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlaywrightHeadlessOptions:
    wait_until: str = "networkidle"  # domcontentloaded | load | networkidle
    headless: bool = True


class PlaywrightRenderingSession:
    """Fetcher bound to one open browser context.

    Only valid inside `PlaywrightHeadlessFetcher.session()`; the browser is
    closed when that block exits.
    """

    name = "headless_chromium"

    def __init__(self, context, options: PlaywrightHeadlessOptions):
        self._context = context
        self._options = options

    def fetch(self, url: str, policy: CrawlPolicy, stop_event=None) -> HttpResponse:
        if stop_event is not None and getattr(stop_event, "is_set", lambda: False)():
            raise RuntimeError("Fetch cancelled")

        timeout_ms = int(policy.timeout_seconds) * 1000
        page = self._context.new_page()
        try:
            resp = page.goto(url, wait_until=self._options.wait_until, timeout=timeout_ms)
            status = 0
            if resp is not None:
                try:
                    status = int(resp.status)
                except (TypeError, ValueError):
                    status = 0
            if policy.wait_for_selector:
                try:
                    page.wait_for_selector(policy.wait_for_selector, timeout=timeout_ms)
                except Exception as e:
                    # A missing selector degrades to whatever has rendered so far.
                    logger.warning("Selector %r not found on %s: %s", policy.wait_for_selector, url, e)
            html = page.content()
            return HttpResponse(status_code=status, text=html, content_type="text/html", url=page.url or url)
        finally:
            page.close()


class PlaywrightHeadlessFetcher:
    """Headless browser renderer backed by Playwright.

    Renders JavaScript-heavy pages and returns the final DOM HTML via
    page.content(). Playwright is imported lazily so non-headless installs
    still work; a missing install surfaces as a RuntimeError the strategy
    chain falls through on.
    """

    def __init__(self, *, user_agent: str, options: Optional[PlaywrightHeadlessOptions] = None):
        self._user_agent = user_agent
        self._options = options or PlaywrightHeadlessOptions()

    def _load_playwright(self):
        try:
            from playwright.sync_api import sync_playwright  # type: ignore
        except Exception as e:
            raise RuntimeError(
                "Headless fetch requested but Playwright is not installed. "
                "Install 'playwright' and run 'python -m playwright install chromium'."
            ) from e
        return sync_playwright

    @contextmanager
    def session(self, policy: CrawlPolicy, stop_event=None) -> Iterator[PlaywrightRenderingSession]:
        """Open a browser for the duration of one crawl and always close it."""
        if stop_event is not None and getattr(stop_event, "is_set", lambda: False)():
            raise RuntimeError("Fetch cancelled")

        sync_playwright = self._load_playwright()
        headers = dict(policy.custom_headers)
        with sync_playwright() as p:
            browser = p.chromium.launch(headless=self._options.headless)
            try:
                context = browser.new_context(
                    user_agent=self._user_agent,
                    extra_http_headers=headers or None,
                )
                try:
                    yield PlaywrightRenderingSession(context, self._options)
                finally:
                    context.close()
            finally:
                try:
                    browser.close()
                except Exception:
                    logger.debug("Browser already closed", exc_info=True)
