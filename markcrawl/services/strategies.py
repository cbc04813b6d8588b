from __future__ import annotations

import logging
from typing import Optional, Protocol, Sequence

from markcrawl.domain.crawl_result import CrawlResult
from markcrawl.domain.crawl_session import CrawlSession
from markcrawl.exceptions import StrategyExhausted
from markcrawl.services.crawl_executor import CrawlExecutor
from markcrawl.services.fetcher import Fetcher

logger = logging.getLogger(__name__)


class CrawlStrategy(Protocol):
    """One interchangeable way of producing a CrawlResult for a session."""

    name: str

    def attempt(self, session: CrawlSession) -> CrawlResult: ...


class StrategyFailed(Exception):
    """A strategy finished without raising but produced no usable pages."""


class StaticFetchStrategy:
    """Traverse with the plain HTTP fetcher and the static parsing pipeline."""

    name = "http"

    def __init__(self, executor: CrawlExecutor, fetcher: Fetcher):
        self._executor = executor
        self._fetcher = fetcher

    def attempt(self, session: CrawlSession) -> CrawlResult:
        return self._executor.crawl(session, self._fetcher, strategy_name=self.name)


class RenderingStrategy:
    """Traverse with pages rendered by a headless browser.

    The browser session is scoped to one attempt and released on every exit
    path, including cancellation and seed failures.
    """

    name = "headless_chromium"

    def __init__(self, executor: CrawlExecutor, renderer):
        self._executor = executor
        self._renderer = renderer

    def attempt(self, session: CrawlSession) -> CrawlResult:
        with self._renderer.session(session.policy, stop_event=session.stop_event) as fetcher:
            return self._executor.crawl(session, fetcher, strategy_name=self.name)


class StrategySelector:
    """Try strategies in order; the first one producing pages wins."""

    def __init__(self, strategies: Sequence[CrawlStrategy]):
        self.strategies = list(strategies)

    def run(self, session: CrawlSession) -> CrawlResult:
        last_error: Optional[Exception] = None
        attempted = []
        for strategy in self.strategies:
            reason = session.stop_reason()
            if reason is not None:
                logger.info("Crawl of %s %s before strategy %s", session.policy.url, reason, strategy.name)
                if last_error is not None:
                    raise StrategyExhausted(session.policy.url, last_error, attempted)
                result = CrawlResult(session.policy.url)
                result.stopped = True
                return result.finalize()
            attempted.append(strategy.name)
            try:
                result = strategy.attempt(session)
            except Exception as e:
                logger.warning("Strategy %s failed for %s: %s", strategy.name, session.policy.url, e)
                last_error = e
                continue
            # A stopped crawl keeps whatever it completed instead of starting over.
            if result.success or result.stopped:
                logger.info("Strategy %s finished %s with %d pages", strategy.name, session.policy.url, result.pages_crawled)
                return result
            logger.warning("Strategy %s produced no pages for %s", strategy.name, session.policy.url)
            last_error = StrategyFailed(f"{strategy.name} produced no pages for {session.policy.url}")

        raise StrategyExhausted(session.policy.url, last_error, attempted)
