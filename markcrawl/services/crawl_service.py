import logging
import threading
from typing import Optional

from markcrawl.domain.crawl_policy import CrawlPolicy
from markcrawl.domain.crawl_result import CrawlResult
from markcrawl.domain.crawl_session import CrawlSession
from markcrawl.domain.stored_crawl_result import StoredCrawlResult
from markcrawl.services.strategies import StrategySelector

logger = logging.getLogger(__name__)


class CrawlService:
    """Run a crawl through the strategy chain and store the outcome.

    Each call builds its own session, so concurrent calls share nothing but
    the repository.
    """

    def __init__(self, selector: StrategySelector, results_repo, crawl_timeout_seconds: Optional[float] = None):
        self.selector = selector
        self.results_repo = results_repo
        self.crawl_timeout_seconds = crawl_timeout_seconds

    def run(self, policy: CrawlPolicy, stop_event: Optional[threading.Event] = None) -> CrawlResult:
        """Crawl without persisting. Raises FatalSeedError/StrategyExhausted on total failure."""
        session = CrawlSession(policy, stop_event=stop_event, timeout_seconds=self.crawl_timeout_seconds)
        return self.selector.run(session)

    def crawl_and_store(self, policy: CrawlPolicy, stop_event: Optional[threading.Event] = None) -> StoredCrawlResult:
        result = self.run(policy, stop_event=stop_event)
        stored = self.results_repo.create_result(
            url=policy.url,
            markdown=result.markdown,
            title=result.title,
            character_count=result.character_count,
            word_count=result.word_count,
        )
        logger.info(
            "Stored crawl result %s for %s (%d pages, %d words, strategy=%s)",
            stored.result_id,
            policy.url,
            result.pages_crawled,
            result.word_count,
            result.strategy,
        )
        return stored
