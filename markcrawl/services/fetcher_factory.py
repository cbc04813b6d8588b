from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from markcrawl.exceptions import PolicyViolation
from markcrawl.services.crawl_executor import CrawlExecutor
from markcrawl.services.fetcher import Fetcher
from markcrawl.services.strategies import CrawlStrategy, RenderingStrategy, StaticFetchStrategy, StrategySelector


@dataclass(frozen=True)
class FetcherFactory:
    """Resolve fetch modes ("http", "headless_chromium") to crawl strategies."""

    executor: CrawlExecutor
    http_fetcher: Fetcher
    headless_fetcher: object

    def get(self, fetch_mode: str) -> CrawlStrategy:
        if fetch_mode is None or (isinstance(fetch_mode, str) and fetch_mode.strip() == ""):
            raise PolicyViolation("fetch_mode is required")
        mode = fetch_mode.strip().lower()
        if mode == "http":
            return StaticFetchStrategy(self.executor, self.http_fetcher)
        if mode == "headless_chromium":
            return RenderingStrategy(self.executor, self.headless_fetcher)
        raise PolicyViolation(f"Unknown fetch_mode: {fetch_mode!r}")

    def selector(self, fetch_modes: Iterable[str]) -> StrategySelector:
        """Build a strategy chain in the given order, ignoring repeated modes."""
        strategies = []
        seen = set()
        for mode in fetch_modes:
            strategy = self.get(mode)
            if strategy.name in seen:
                continue
            seen.add(strategy.name)
            strategies.append(strategy)
        if not strategies:
            raise PolicyViolation("at least one fetch mode is required")
        return StrategySelector(strategies)
